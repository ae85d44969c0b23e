import sys
from pathlib import Path

import pytest

# Ensure local source package (src/cnctd_rest) is importable before tests collect
_PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
_SRC_PATH: Path = _PROJECT_ROOT / "src"
if _SRC_PATH.exists():
    sys.path.insert(0, str(_SRC_PATH))

from cnctd_rest import Config, RequestExecutor  # noqa: E402


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clean environment variables before each test."""
    monkeypatch.delenv("CNCTD_REST_INCLUDE_USER_AGENT", raising=False)
    monkeypatch.delenv("CNCTD_REST_TIMEOUT", raising=False)


@pytest.fixture
def base_url() -> str:
    return "https://api.example.com"


@pytest.fixture
def token() -> str:
    return "abc"


@pytest.fixture
def config() -> Config:
    return Config()


@pytest.fixture
def executor(config: Config) -> RequestExecutor:
    return RequestExecutor(config=config)
