"""News domain models."""

from app.models.news.entities import NewsItem

__all__ = ["NewsItem"]
