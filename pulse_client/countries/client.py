"""REST Countries client - name search and full catalogue."""

from urllib.parse import quote

import httpx
from loguru import logger

from pulse_client.base import BaseClient
from pulse_client.countries.schemas import CountryListSchema, CountrySchema
from pulse_client.errors import CountryNotFoundError, UpstreamError
from settings import REST_COUNTRIES_URL


class CountriesClient(BaseClient):
    """Client for REST Countries v3.1 endpoints."""

    base_url = REST_COUNTRIES_URL

    async def by_name(self, name: str) -> CountrySchema:
        """GET /name/{name} - first candidate is the canonical match."""
        try:
            data = await self._get(f"name/{quote(name, safe='')}")
        except httpx.HTTPStatusError as e:
            logger.debug("Country lookup {} -> HTTP {}", name, e.response.status_code)
            raise CountryNotFoundError(name) from e
        except httpx.HTTPError as e:
            raise UpstreamError(f"Country lookup failed: {e}") from e
        except ValueError as e:
            raise UpstreamError(f"Malformed country payload: {e}") from e

        candidates = data if isinstance(data, list) else [data]
        if not candidates:
            raise CountryNotFoundError(name)

        try:
            return CountrySchema.model_validate(candidates[0])
        except ValueError as e:
            raise UpstreamError(f"Malformed country payload: {e}") from e

    async def all(self) -> list[CountryListSchema]:
        """GET /all?fields=name,cca2,flags - full catalogue, minimal fields."""
        try:
            data = await self._get("all", params={"fields": "name,cca2,flags"})
            if not isinstance(data, list):
                raise ValueError("expected a list of countries")
            return [CountryListSchema.model_validate(c) for c in data]
        except httpx.HTTPError as e:
            raise UpstreamError(f"Failed to fetch countries list: {e}") from e
        except ValueError as e:
            raise UpstreamError(f"Malformed countries payload: {e}") from e
