from dataclasses import dataclass
from typing import Optional, Union

from .constants import AUTH_SCHEME_BEARER, AUTH_SCHEME_TOKEN


@dataclass(frozen=True)
class NoAuth:
    """Send no Authorization header."""

    @property
    def authorization(self) -> Optional[str]:
        return None


@dataclass(frozen=True)
class TokenAuth:
    """Authorization header of the form ``token <value>``."""

    token: str

    @property
    def authorization(self) -> Optional[str]:
        return f"{AUTH_SCHEME_TOKEN} {self.token}"


@dataclass(frozen=True)
class BearerAuth:
    """Authorization header of the form ``Bearer <value>``."""

    token: str

    @property
    def authorization(self) -> Optional[str]:
        return f"{AUTH_SCHEME_BEARER} {self.token}"


AuthMode = Union[NoAuth, TokenAuth, BearerAuth]
