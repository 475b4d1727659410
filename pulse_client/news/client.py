"""NewsData.io client - best-effort headlines."""

import httpx
from loguru import logger

from pulse_client.base import BaseClient
from pulse_client.news.schemas import NewsDegraded, NewsFetched, NewsResponseSchema, NewsResult
from settings import NEWSDATA_API_KEY, NEWSDATA_URL

PAGE_SIZE = 5
LANGUAGE = "en"


def _describe(exc: Exception) -> str:
    """Short failure description; never includes the request URL (it carries the key)."""
    if isinstance(exc, httpx.HTTPStatusError):
        return f"HTTP {exc.response.status_code}"
    return exc.__class__.__name__


class NewsClient(BaseClient):
    """Client for the NewsData.io search endpoint.

    ``search`` never raises: every failure is reported as ``NewsDegraded``.
    """

    base_url = NEWSDATA_URL

    def __init__(self, api_key: str | None = None, **kwargs):
        super().__init__(**kwargs)
        self._api_key = NEWSDATA_API_KEY if api_key is None else api_key

    async def search(self, country: str) -> NewsResult:
        """GET /news?q={country} - latest English headlines."""
        if not self._api_key:
            logger.warning("NewsData API key not configured")
            return NewsDegraded("api key not configured")

        params = {
            "apikey": self._api_key,
            "q": country,
            "language": LANGUAGE,
            "size": str(PAGE_SIZE),
        }
        try:
            data = await self._get("news", params=params)
        except Exception as e:
            logger.warning("News fetch failed for {}: {}", country, _describe(e))
            return NewsDegraded(_describe(e))

        if not isinstance(data, dict):
            logger.warning("News payload for {} is not an object", country)
            return NewsDegraded("malformed payload")

        if data.get("status") == "error":
            results = data.get("results")
            message = results.get("message", "unknown error") if isinstance(results, dict) else "unknown error"
            logger.warning("NewsData API error for {}: {}", country, message)
            return NewsDegraded(message)

        try:
            payload = NewsResponseSchema.model_validate(data)
        except ValueError as e:
            logger.warning("Malformed news payload for {}: {}", country, e)
            return NewsDegraded("malformed payload")

        logger.debug("News for {}: {} articles", country, len(payload.results))
        return NewsFetched(payload.results)
