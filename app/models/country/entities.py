"""Country domain entities."""

from dataclasses import dataclass

from app.models.common import BaseEntity


@dataclass(frozen=True)
class Coordinates(BaseEntity):
    """Capital location."""

    lat: float
    lng: float


@dataclass(frozen=True)
class CountryFacts(BaseEntity):
    """Canonical facts about a country."""

    name: str
    capital: str
    population: int
    region: str
    flag: str
    coordinates: Coordinates


@dataclass(frozen=True)
class CountryListItem(BaseEntity):
    """Directory entry for lookup and autocomplete."""

    name: str
    code: str
    flag: str
