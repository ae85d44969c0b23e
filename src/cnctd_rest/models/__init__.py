from .errors import (
    DecodeError,
    HttpStatusError,
    InvalidRequestError,
    RestError,
    TransportError,
    TransportErrorKind,
)

__all__ = [
    "DecodeError",
    "HttpStatusError",
    "InvalidRequestError",
    "RestError",
    "TransportError",
    "TransportErrorKind",
]
