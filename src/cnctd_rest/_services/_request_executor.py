import asyncio
import math
from datetime import timedelta
from logging import getLogger
from typing import Any, Literal, Mapping, Optional, TypeVar, Union, overload

import httpx
from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError, to_json

from .._config import Config, to_seconds
from .._utils import (
    AuthMode,
    BearerAuth,
    NoAuth,
    RequestSpec,
    TokenAuth,
    build_headers,
    parse_url,
    redact_headers,
    translate_errors,
)
from .._utils.constants import CONTENT_TYPE_JSON, HEADER_CONTENT_TYPE, USER_AGENT
from ..models.errors import DecodeError, HttpStatusError, InvalidRequestError

T = TypeVar("T")

Timeout = Union[int, float, timedelta]


class RequestExecutor:
    """Performs exactly one HTTP request per call and decodes the JSON reply.

    Every call builds its own ``httpx.AsyncClient`` inside an ``async with``
    block, so nothing is shared between calls and the connection is released
    on success, failure and cancellation alike. Calls may run concurrently.

    Successful (2xx) bodies are decoded into ``response_type`` with a pydantic
    ``TypeAdapter``; anything pydantic can validate (models, dataclasses,
    TypedDicts, builtins) is accepted. Failures are raised as subclasses of
    :class:`~cnctd_rest.models.errors.RestError`.
    """

    def __init__(self, config: Optional[Config] = None) -> None:
        self._logger = getLogger("cnctd_rest")
        self._config = config if config is not None else Config.from_env()

    @property
    def user_agent(self) -> Optional[str]:
        return USER_AGENT if self._config.include_user_agent else None

    @overload
    async def execute_get(
        self,
        url: str,
        auth: AuthMode = ...,
        extra_headers: Optional[Mapping[str, str]] = ...,
        timeout: Optional[Timeout] = ...,
        *,
        response_type: type[T],
    ) -> T: ...

    @overload
    async def execute_get(
        self,
        url: str,
        auth: AuthMode = ...,
        extra_headers: Optional[Mapping[str, str]] = ...,
        timeout: Optional[Timeout] = ...,
    ) -> Any: ...

    async def execute_get(
        self,
        url: str,
        auth: AuthMode = NoAuth(),
        extra_headers: Optional[Mapping[str, str]] = None,
        timeout: Optional[Timeout] = None,
        *,
        response_type: Any = Any,
    ) -> Any:
        """Send a GET request and decode the JSON response.

        Args:
            url: Absolute http(s) URL.
            auth: Authorization header to attach, if any.
            extra_headers: Headers merged last; they replace defaults on conflict.
            timeout: Deadline for the whole exchange, in seconds or as a
                ``timedelta``. Falls back to ``Config.timeout``; ``None`` means
                no deadline.
            response_type: Type the JSON body is decoded into.

        Returns:
            The decoded response body.

        Raises:
            InvalidRequestError: The URL or a header is malformed.
            TransportError: No response was received, or the deadline passed.
            HttpStatusError: The server answered with a non-2xx status.
            DecodeError: A 2xx body did not decode into ``response_type``.
        """
        spec = self._build_spec("GET", url, auth, extra_headers, timeout)
        return await self._send(spec, response_type)

    @overload
    async def execute_post(
        self,
        url: str,
        body: Any,
        auth: AuthMode = ...,
        extra_headers: Optional[Mapping[str, str]] = ...,
        timeout: Optional[Timeout] = ...,
        *,
        response_type: type[T],
    ) -> T: ...

    @overload
    async def execute_post(
        self,
        url: str,
        body: Any,
        auth: AuthMode = ...,
        extra_headers: Optional[Mapping[str, str]] = ...,
        timeout: Optional[Timeout] = ...,
    ) -> Any: ...

    async def execute_post(
        self,
        url: str,
        body: Any,
        auth: AuthMode = NoAuth(),
        extra_headers: Optional[Mapping[str, str]] = None,
        timeout: Optional[Timeout] = None,
        *,
        response_type: Any = Any,
    ) -> Any:
        """Send ``body`` as JSON in a POST request and decode the JSON response.

        Accepts the same arguments and raises the same errors as
        :meth:`execute_get`. ``body`` may be a pydantic model, a dataclass or
        any JSON-compatible value; a body that cannot be serialized raises
        ``InvalidRequestError`` before anything is sent.
        """
        spec = self._build_spec("POST", url, auth, extra_headers, timeout)
        try:
            spec.content = to_json(body)
        except PydanticSerializationError as e:
            raise InvalidRequestError(f"Request body is not serializable: {e}") from e
        spec.headers.setdefault(HEADER_CONTENT_TYPE, CONTENT_TYPE_JSON)
        return await self._send(spec, response_type)

    async def get(self, url: str, response_type: Any = Any) -> Any:
        return await self.execute_get(url, response_type=response_type)

    async def get_with_auth(
        self, url: str, token: str, response_type: Any = Any
    ) -> Any:
        return await self.execute_get(
            url, TokenAuth(token), response_type=response_type
        )

    async def get_with_bearer(
        self, url: str, token: str, response_type: Any = Any
    ) -> Any:
        return await self.execute_get(
            url, BearerAuth(token), response_type=response_type
        )

    async def get_with_custom_headers_and_timeout(
        self,
        url: str,
        custom_headers: Mapping[str, str],
        timeout: Timeout,
        response_type: Any = Any,
    ) -> Any:
        return await self.execute_get(
            url, NoAuth(), custom_headers, timeout, response_type=response_type
        )

    async def post(self, url: str, body: Any, response_type: Any = Any) -> Any:
        return await self.execute_post(url, body, response_type=response_type)

    async def post_with_auth(
        self, url: str, token: str, body: Any, response_type: Any = Any
    ) -> Any:
        return await self.execute_post(
            url, body, TokenAuth(token), response_type=response_type
        )

    async def post_with_bearer(
        self, url: str, token: str, body: Any, response_type: Any = Any
    ) -> Any:
        return await self.execute_post(
            url, body, BearerAuth(token), response_type=response_type
        )

    def _build_spec(
        self,
        method: Literal["GET", "POST"],
        url: str,
        auth: AuthMode,
        extra_headers: Optional[Mapping[str, str]],
        timeout: Optional[Timeout],
    ) -> RequestSpec:
        seconds = to_seconds(timeout) if timeout is not None else self._config.timeout
        if seconds is not None and not (math.isfinite(seconds) and seconds > 0):
            raise InvalidRequestError("timeout must be a positive, finite duration")

        return RequestSpec(
            method=method,
            url=parse_url(url),
            headers=build_headers(auth, extra_headers, self.user_agent),
            timeout=seconds,
        )

    async def _send(self, spec: RequestSpec, response_type: Any) -> Any:
        self._logger.debug(f"Request: {spec.method} {spec.url}")
        self._logger.debug(f"HEADERS: {redact_headers(spec.headers)}")

        with translate_errors():
            async with asyncio.timeout(spec.timeout):
                async with httpx.AsyncClient(timeout=spec.timeout) as client:
                    response = await client.request(
                        spec.method,
                        spec.url,
                        headers=spec.headers,
                        content=spec.content,
                    )

        if not response.is_success:
            self._logger.debug(
                f"Raw response ({response.status_code}): {response.text}"
            )
            raise HttpStatusError(response.status_code, response.text)

        try:
            return TypeAdapter(response_type).validate_json(response.content)
        except ValidationError as e:
            self._logger.debug(f"Raw response: {response.text}")
            raise DecodeError(response.text, e) from e
