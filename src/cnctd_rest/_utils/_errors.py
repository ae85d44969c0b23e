from contextlib import contextmanager
from typing import Generator

import httpx

from ..models.errors import InvalidRequestError, TransportError, TransportErrorKind


@contextmanager
def translate_errors() -> Generator[None, None, None]:
    """Context manager converting transport failures into cnctd_rest errors.

    Wrap the part of a call that talks to the network. ``TimeoutError`` comes
    from the overall ``asyncio.timeout`` deadline, the httpx exceptions from
    the transport itself. ``asyncio.CancelledError`` is left untouched.

    Raises:
        InvalidRequestError: httpx rejected the URL or its scheme.
        TransportError: No HTTP response was received.
    """
    try:
        yield
    except TimeoutError as e:
        raise TransportError(TransportErrorKind.TIMEOUT, e) from e
    except httpx.TimeoutException as e:
        raise TransportError(TransportErrorKind.TIMEOUT, e) from e
    except (httpx.InvalidURL, httpx.UnsupportedProtocol) as e:
        raise InvalidRequestError(str(e)) from e
    except httpx.ConnectError as e:
        raise TransportError(TransportErrorKind.CONNECTION_FAILED, e) from e
    except httpx.TransportError as e:
        raise TransportError(TransportErrorKind.OTHER, e) from e
