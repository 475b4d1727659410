"""Country directory service - cached catalogue for lookup and autocomplete."""

import unicodedata

from loguru import logger

from app.errors import UpstreamUnavailableError
from app.models import CacheResult, CountryListItem
from app.repositories.common import CacheRepository
from pulse_client import CountriesClient, UpstreamError

CACHE_KEY = "countries:all"
FETCH_FAILED = "Failed to fetch countries list"


def name_sort_key(name: str) -> tuple[str, str]:
    """Locale-style ordering: accents and case folded first, exact name breaks ties."""
    decomposed = unicodedata.normalize("NFKD", name)
    base = "".join(c for c in decomposed if not unicodedata.combining(c))
    return base.casefold(), name


class CountryDirectory:
    """Full country list, fetched once per TTL window."""

    def __init__(self, countries: CountriesClient, cache: CacheRepository):
        self._countries = countries
        self._cache = cache
        logger.debug("CountryDirectory initialized")

    async def list(self) -> CacheResult[list[CountryListItem]]:
        """All countries sorted by name, unique per code.

        The cache holds an immutable tuple; each call gets its own list.
        """
        cached = self._cache.get(CACHE_KEY)
        if cached is not None:
            return CacheResult(list(cached), hit=True)

        try:
            records = await self._countries.all()
        except UpstreamError as e:
            logger.error("Countries list fetch failed: {}", e)
            raise UpstreamUnavailableError(FETCH_FAILED) from e

        by_code: dict[str, CountryListItem] = {}
        for r in records:
            if r.cca2 not in by_code:
                by_code[r.cca2] = CountryListItem(name=r.name.common, code=r.cca2, flag=r.flags.svg)

        items = tuple(sorted(by_code.values(), key=lambda c: name_sort_key(c.name)))
        self._cache.set(CACHE_KEY, items)
        logger.info("Loaded {} countries", len(items))
        return CacheResult(list(items), hit=False)
