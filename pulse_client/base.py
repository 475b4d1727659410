"""Base HTTP client with timeout, concurrency limit and optional retries."""

import asyncio

import httpx
from loguru import logger
from tenacity import (
    retry,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from settings import API_RETRIES, API_TIMEOUT, MAX_CONCURRENT


def _is_retryable_error(exc: BaseException) -> bool:
    """Check if exception is retryable (transport errors only; HTTP statuses are final)."""
    return isinstance(exc, (httpx.ReadError, httpx.ConnectError, httpx.TimeoutException))


class BaseClient:
    """Base async HTTP client for one upstream provider.

    Subclasses set ``base_url``. The underlying ``httpx.AsyncClient`` lives
    between ``open()`` and ``close()`` (or an ``async with`` block).
    """

    base_url: str = ""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float = API_TIMEOUT,
        max_concurrent: int = MAX_CONCURRENT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._base_url = (base_url or self.base_url).rstrip("/")
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None
        self._sem = asyncio.Semaphore(max_concurrent)
        self._request_count = 0
        logger.info("{}: base_url={}, timeout={}s", self.__class__.__name__, self._base_url, timeout)

    async def open(self) -> None:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self._timeout,
                limits=httpx.Limits(max_connections=100, max_keepalive_connections=20),
                transport=self._transport,
            )

    async def close(self) -> None:
        logger.info("{}: total API requests: {}", self.__class__.__name__, self._request_count)
        if self._client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self):
        await self.open()
        return self

    async def __aexit__(self, *_):
        await self.close()

    @retry(
        stop=stop_after_attempt(max(1, API_RETRIES)),
        wait=wait_exponential(multiplier=1, min=1, max=10),
        retry=retry_if_exception(_is_retryable_error),
        reraise=True,
    )
    async def _get(self, path: str, params: dict | None = None) -> dict | list:
        """GET request; raises httpx errors on transport failure or non-2xx."""
        if self._client is None:
            raise RuntimeError(f"{self.__class__.__name__} is not open")

        async with self._sem:
            self._request_count += 1
            resp = await self._client.get(f"{self._base_url}/{path}", params=params)
            resp.raise_for_status()
            return resp.json()
