"""Repositories package - in-process storage."""

from app.repositories.common import CacheRepository

__all__ = [
    # Common
    "CacheRepository",
]
