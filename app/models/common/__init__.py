"""Common models - base entity and cache types."""

from app.models.common.base import BaseEntity
from app.models.common.cache import CacheEntry, CacheResult

__all__ = [
    "BaseEntity",
    "CacheEntry",
    "CacheResult",
]
