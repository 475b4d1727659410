"""NewsData.io client."""

from pulse_client.news.client import NewsClient
from pulse_client.news.schemas import (
    ArticleSchema,
    NewsDegraded,
    NewsFetched,
    NewsResponseSchema,
    NewsResult,
)

__all__ = [
    "NewsClient",
    "ArticleSchema",
    "NewsResponseSchema",
    "NewsResult",
    "NewsFetched",
    "NewsDegraded",
]
