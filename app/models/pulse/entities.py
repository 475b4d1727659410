"""Country pulse - the unit cached and returned per country query."""

from dataclasses import dataclass

from app.models.common import BaseEntity
from app.models.country import CountryFacts
from app.models.news import NewsItem
from app.models.weather import WeatherSnapshot


@dataclass(frozen=True)
class CountryPulse(BaseEntity):
    """Country facts, capital weather and headlines."""

    country: CountryFacts
    weather: WeatherSnapshot
    news: tuple[NewsItem, ...]
