from ._auth import AuthMode, BearerAuth, NoAuth, TokenAuth
from ._errors import translate_errors
from ._headers import build_headers, parse_url, redact_headers, validate_header
from ._request_spec import RequestSpec

__all__ = [
    "AuthMode",
    "BearerAuth",
    "NoAuth",
    "TokenAuth",
    "translate_errors",
    "build_headers",
    "parse_url",
    "redact_headers",
    "validate_header",
    "RequestSpec",
]
