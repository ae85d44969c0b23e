"""Async helpers for one-shot JSON requests over HTTP.

Example:
    ```python
    from cnctd_rest import RequestExecutor, TokenAuth

    rest = RequestExecutor()
    item = await rest.execute_get(
        "https://api.example.com/items/42", TokenAuth("abc"), response_type=Item
    )
    ```
"""

from ._config import Config
from ._services import RequestExecutor
from ._utils import AuthMode, BearerAuth, NoAuth, RequestSpec, TokenAuth
from .models.errors import (
    DecodeError,
    HttpStatusError,
    InvalidRequestError,
    RestError,
    TransportError,
    TransportErrorKind,
)

__all__ = [
    "Config",
    "RequestExecutor",
    "AuthMode",
    "BearerAuth",
    "NoAuth",
    "RequestSpec",
    "TokenAuth",
    "DecodeError",
    "HttpStatusError",
    "InvalidRequestError",
    "RestError",
    "TransportError",
    "TransportErrorKind",
]
