from enum import Enum
from typing import Optional


class RestError(Exception):
    """Base class for every failure raised by cnctd_rest."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class InvalidRequestError(RestError):
    """Raised when a request cannot be built.

    Covers malformed URLs, header names or values that are not valid on the
    wire, and bodies that cannot be serialized to JSON. Detected before any
    network I/O takes place.
    """


class TransportErrorKind(str, Enum):
    TIMEOUT = "timeout"
    CONNECTION_FAILED = "connection_failed"
    OTHER = "other"


class TransportError(RestError):
    """Raised when the request never produced an HTTP response."""

    def __init__(
        self,
        kind: TransportErrorKind,
        cause: Optional[BaseException] = None,
        message: Optional[str] = None,
    ):
        self.kind = kind
        self.cause = cause
        super().__init__(message or f"Transport failure ({kind.value}): {cause}")


class HttpStatusError(RestError):
    """Raised when the server answered with a non-2xx status code."""

    def __init__(self, status: int, body: str):
        self.status = status
        self.body = body
        super().__init__(f"Request failed with status {status}: {body}")


class DecodeError(RestError):
    """Raised when a 2xx response body does not decode into the expected type."""

    def __init__(self, raw_body: str, cause: BaseException):
        self.raw_body = raw_body
        self.cause = cause
        super().__init__(f"Failed to decode response body: {cause}")
