import asyncio
import logging
from typing import Any, Callable, Iterable, Mapping, Optional

import httpx

from .config import ServiceConfig
from .helper import get_missing_params
from .request import RequestOptions, WatsonApiError, build_request, parse_response

logger = logging.getLogger(__name__)

# callback(error, body, response)
Callback = Callable[[Optional[Exception], Any, Optional[httpx.Response]], Any]


class BaseService:
    """Shared plumbing for the per-API service classes.

    Every operation returns the decoded response body, or, when a callback is
    given, hands ``(error, body, response)`` to it instead of raising and
    returns whatever the callback returns.
    """

    name: str = ""
    service_version: str = ""
    default_url: str = ""

    def __init__(
        self,
        config: ServiceConfig,
        *,
        timeout: float = 15.0,
        transport: Optional[httpx.BaseTransport] = None,
        async_transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        config.validate()
        self.config = config
        self._client = httpx.Client(timeout=timeout, transport=transport)
        self._async_client = httpx.AsyncClient(timeout=timeout, transport=async_transport)

    @property
    def service_url(self) -> str:
        return self.config.service_url(self.default_url)

    def close(self) -> None:
        self._client.close()
        if self._async_client.is_closed:
            return
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            asyncio.run(self._async_client.aclose())

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if not self._async_client.is_closed:
            await self._async_client.aclose()

    def set_authorization_token(self, token: str) -> None:
        """Update bearer token at runtime (useful for short-lived tokens)."""
        self.config.authorization_token = token

    @staticmethod
    def _coerce(params: Any, params_type: type) -> Any:
        if params is None:
            return params_type()
        if isinstance(params, Mapping):
            return params_type(**params)
        return params

    @staticmethod
    def _require(params: Any, required: Iterable[str]) -> None:
        error = get_missing_params(params, required)
        if error is not None:
            raise error

    def _call(
        self,
        prepare: Callable[[Any], RequestOptions],
        params: Any,
        callback: Optional[Callback] = None,
    ) -> Any:
        try:
            options = prepare(params)
        except ValueError as exc:
            if callback is None:
                raise
            return callback(exc, None, None)
        request = build_request(self._client, self.service_url, options, self.config)
        try:
            response = self._client.send(request)
        except httpx.HTTPError as exc:
            if callback is None:
                raise
            logger.warning("%s %s failed: %s", request.method, request.url, exc)
            return callback(exc, None, None)
        return self._finish(response, callback)

    async def _call_async(
        self,
        prepare: Callable[[Any], RequestOptions],
        params: Any,
        callback: Optional[Callback] = None,
    ) -> Any:
        try:
            options = prepare(params)
        except ValueError as exc:
            if callback is None:
                raise
            return callback(exc, None, None)
        request = build_request(self._async_client, self.service_url, options, self.config)
        try:
            response = await self._async_client.send(request)
        except httpx.HTTPError as exc:
            if callback is None:
                raise
            logger.warning("%s %s failed: %s", request.method, request.url, exc)
            return callback(exc, None, None)
        return self._finish(response, callback)

    @staticmethod
    def _finish(response: httpx.Response, callback: Optional[Callback]) -> Any:
        try:
            body = parse_response(response)
        except WatsonApiError as exc:
            if callback is None:
                raise
            return callback(exc, None, response)
        if callback is None:
            return body
        return callback(None, body, response)
