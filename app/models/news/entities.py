"""News domain entities."""

from dataclasses import dataclass

from app.models.common import BaseEntity


@dataclass(frozen=True)
class NewsItem(BaseEntity):
    """Headline."""

    title: str
    url: str
    source: str
    published_at: str
