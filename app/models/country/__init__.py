"""Country domain models - facts and directory entries."""

from app.models.country.entities import Coordinates, CountryFacts, CountryListItem

__all__ = ["Coordinates", "CountryFacts", "CountryListItem"]
