import re
from typing import Mapping, Optional

import httpx

from ..models.errors import InvalidRequestError
from ._auth import AuthMode
from .constants import HEADER_AUTHORIZATION, HEADER_USER_AGENT

# RFC 7230 token
_HEADER_NAME_RE = re.compile(r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+")
# visible ASCII, space and tab; no leading or trailing whitespace
_HEADER_VALUE_RE = re.compile(r"(?:[\x21-\x7e](?:[\x20\x09\x21-\x7e]*[\x21-\x7e])?)?")

ALLOWED_SCHEMES = ("http", "https")


def parse_url(url: str | httpx.URL) -> httpx.URL:
    """Parse ``url`` and make sure it is an absolute http(s) URL."""
    try:
        parsed = httpx.URL(url)
    except (httpx.InvalidURL, TypeError) as e:
        raise InvalidRequestError(f"Invalid URL {url!r}: {e}") from e

    if parsed.scheme not in ALLOWED_SCHEMES or not parsed.host:
        raise InvalidRequestError(
            f"Invalid URL {url!r}: expected an absolute http or https URL"
        )
    # httpx percent-encodes whitespace instead of rejecting it
    if any(char.isspace() for char in str(url)) or "%" in parsed.host:
        raise InvalidRequestError(
            f"Invalid URL {url!r}: whitespace or escapes are not allowed"
        )
    return parsed


def validate_header(name: str, value: str) -> None:
    if not isinstance(name, str) or not _HEADER_NAME_RE.fullmatch(name):
        raise InvalidRequestError(f"Invalid header name {name!r}")
    if not isinstance(value, str) or not _HEADER_VALUE_RE.fullmatch(value):
        # never echo the value, it may be a credential
        raise InvalidRequestError(
            f"Invalid value for header {name!r}: only visible ASCII, spaces and "
            "tabs are allowed, with no leading or trailing whitespace"
        )


def build_headers(
    auth: AuthMode,
    extra_headers: Optional[Mapping[str, str]] = None,
    user_agent: Optional[str] = None,
) -> httpx.Headers:
    """Assemble the header set for one request.

    Defaults are written first, then the Authorization header, then the
    caller's headers, so a caller-supplied header replaces a default with
    the same (case-insensitive) name.
    """
    headers = httpx.Headers()

    if user_agent:
        headers[HEADER_USER_AGENT] = user_agent

    authorization = auth.authorization
    if authorization is not None:
        validate_header(HEADER_AUTHORIZATION, authorization)
        headers[HEADER_AUTHORIZATION] = authorization

    for name, value in (extra_headers or {}).items():
        validate_header(name, value)
        headers[name] = value

    return headers


def redact_headers(headers: httpx.Headers) -> dict[str, str]:
    return {
        name: "***" if name.lower() == HEADER_AUTHORIZATION.lower() else value
        for name, value in headers.items()
    }
