"""Cache entry and lookup result types."""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class CacheEntry:
    """Stored value with its write time (clock seconds)."""

    value: Any
    written_at: float


@dataclass(frozen=True)
class CacheResult(Generic[T]):
    """Service result tagged with whether it came from the cache."""

    value: T
    hit: bool
