from dataclasses import dataclass
from typing import Literal, Optional

import httpx


@dataclass
class RequestSpec:
    """Everything needed to send one request.

    Built fresh for every call and discarded once the response has been
    classified. ``headers`` is an ``httpx.Headers`` so that keys stay unique
    regardless of case, with the last write winning. ``content`` is only set for
    POST requests and holds the serialized JSON body.
    """

    method: Literal["GET", "POST"]
    url: httpx.URL
    headers: httpx.Headers
    content: bytes | None = None
    timeout: Optional[float] = None
