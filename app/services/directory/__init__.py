"""Directory services - country catalogue."""

from app.services.directory.service import CACHE_KEY, CountryDirectory, name_sort_key

__all__ = [
    "CountryDirectory",
    "CACHE_KEY",
    "name_sort_key",
]
