"""Upstream API clients - REST Countries, Open-Meteo, NewsData.io."""

from pulse_client.base import BaseClient
from pulse_client.countries import CountriesClient
from pulse_client.errors import CountryNotFoundError, UpstreamError, WeatherUnavailableError
from pulse_client.news import NewsClient, NewsDegraded, NewsFetched, NewsResult
from pulse_client.weather import WeatherClient, weather_condition, weather_emoji

__all__ = [
    # Base
    "BaseClient",
    # Errors
    "UpstreamError",
    "CountryNotFoundError",
    "WeatherUnavailableError",
    # Clients
    "CountriesClient",
    "WeatherClient",
    "NewsClient",
    # News result
    "NewsResult",
    "NewsFetched",
    "NewsDegraded",
    # Weather codes
    "weather_condition",
    "weather_emoji",
]
