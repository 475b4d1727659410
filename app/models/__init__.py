"""Models package - entities for all domains."""

from app.models.common import BaseEntity, CacheEntry, CacheResult
from app.models.country import Coordinates, CountryFacts, CountryListItem
from app.models.news import NewsItem
from app.models.pulse import CountryPulse
from app.models.weather import ForecastDay, WeatherSnapshot

__all__ = [
    # Common
    "BaseEntity",
    "CacheEntry",
    "CacheResult",
    # Country
    "Coordinates",
    "CountryFacts",
    "CountryListItem",
    # Weather
    "ForecastDay",
    "WeatherSnapshot",
    # News
    "NewsItem",
    # Pulse
    "CountryPulse",
]
