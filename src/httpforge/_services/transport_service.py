from logging import getLogger
from typing import Optional

from httpx import AsyncClient, Client, ConnectError, Response, TimeoutException
from tenacity import (
    retry,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from .._config import Config
from .._utils._ssl_context import get_httpx_client_kwargs
from ..models.outbound import OutboundRequest


def is_retryable_exception(exception: BaseException) -> bool:
    return isinstance(exception, (ConnectError, TimeoutException))


class TransportService:
    """Sends assembled requests over the network.

    Connection failures and timeouts are retried with exponential backoff;
    request assembly itself is never retried.
    """

    def __init__(
        self,
        config: Config,
        client: Optional[Client] = None,
        client_async: Optional[AsyncClient] = None,
    ) -> None:
        self._logger = getLogger("httpforge")
        self._config = config

        client_kwargs = get_httpx_client_kwargs(self._config)

        self._client = client or Client(**client_kwargs)
        self._client_async = client_async or AsyncClient(**client_kwargs)

        self._retrying = retry(
            retry=retry_if_exception(is_retryable_exception),
            stop=stop_after_attempt(self._config.max_retries + 1),
            wait=wait_exponential(multiplier=1, min=1, max=10),
            reraise=True,
        )

    def send(self, outbound: OutboundRequest) -> Response:
        self._logger.debug(f"Request: {outbound.method} {outbound.url}")
        self._logger.debug(f"HEADERS: {outbound.headers}")

        return self._retrying(self._send_once)(outbound)

    async def send_async(self, outbound: OutboundRequest) -> Response:
        self._logger.debug(f"Request: {outbound.method} {outbound.url}")
        self._logger.debug(f"HEADERS: {outbound.headers}")

        return await self._retrying(self._send_once_async)(outbound)

    def close(self) -> None:
        self._client.close()

    async def aclose(self) -> None:
        await self._client_async.aclose()

    def _send_once(self, outbound: OutboundRequest) -> Response:
        return self._client.send(outbound.to_httpx())

    async def _send_once_async(self, outbound: OutboundRequest) -> Response:
        return await self._client_async.send(outbound.to_httpx())
