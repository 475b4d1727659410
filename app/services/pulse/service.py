"""Pulse service - unified country snapshot with caching."""

import asyncio
from datetime import datetime, timezone

from loguru import logger

from app.errors import NotFoundError, UpstreamUnavailableError, ValidationError
from app.models import (
    CacheResult,
    Coordinates,
    CountryFacts,
    CountryPulse,
    ForecastDay,
    NewsItem,
    WeatherSnapshot,
)
from app.repositories.common import CacheRepository
from app.services.pulse.validation import country_cache_key, validate_country_name
from pulse_client import (
    CountriesClient,
    CountryNotFoundError,
    NewsClient,
    NewsFetched,
    NewsResult,
    UpstreamError,
    WeatherClient,
    weather_condition,
)
from pulse_client.countries import CountrySchema
from pulse_client.weather import FORECAST_DAYS, ForecastSchema

MAX_NEWS_ITEMS = 5

COUNTRY_NOT_FOUND = "Country not found"
CAPITAL_NOT_AVAILABLE = "Country capital data not available"
FETCH_FAILED = "Failed to fetch country data"


class PulseService:
    """Validates the query, consults the cache and fans out to upstream clients."""

    def __init__(
        self,
        countries: CountriesClient,
        weather: WeatherClient,
        news: NewsClient,
        cache: CacheRepository,
    ):
        self._countries = countries
        self._weather = weather
        self._news = news
        self._cache = cache
        logger.debug("PulseService initialized")

    async def get_pulse(self, raw_name: str) -> CacheResult[CountryPulse]:
        """Country facts, capital weather and headlines for a country name."""
        validation = validate_country_name(raw_name)
        if not validation.ok:
            logger.info("Rejected country name {!r}: {}", raw_name, validation.reason.value)
            raise ValidationError(validation.reason.value, validation.message)

        name = validation.sanitized
        key = country_cache_key(name)

        cached = self._cache.get(key)
        if cached is not None:
            return CacheResult(cached, hit=True)

        country = await self._fetch_country(raw_name, name)

        capital = country.capital_name
        coords = country.capital_coordinates
        if capital is None or coords is None:
            logger.warning("Capital data missing for {}", country.name.common)
            raise NotFoundError(CAPITAL_NOT_AVAILABLE, name=raw_name)

        forecast, news = await self._fetch_weather_and_news(raw_name, coords, country.name.common)

        pulse = CountryPulse(
            country=_country_facts(country, capital, coords),
            weather=_weather_snapshot(forecast),
            news=_news_items(news),
        )
        self._cache.set(key, pulse)
        logger.info("Composed pulse for {}: {} headlines", pulse.country.name, len(pulse.news))
        return CacheResult(pulse, hit=False)

    async def _fetch_country(self, raw_name: str, name: str) -> CountrySchema:
        try:
            return await self._countries.by_name(name)
        except CountryNotFoundError as e:
            _log_failure(raw_name, e)
            raise NotFoundError(COUNTRY_NOT_FOUND, name=raw_name) from e
        except UpstreamError as e:
            _log_failure(raw_name, e)
            raise UpstreamUnavailableError(FETCH_FAILED) from e

    async def _fetch_weather_and_news(
        self,
        raw_name: str,
        coords: tuple[float, float],
        country_name: str,
    ) -> tuple[ForecastSchema, NewsResult]:
        """Run weather and news concurrently and wait for both to settle.

        Weather failures propagate; the news client never raises. If the
        caller is cancelled, both fetches are cancelled and awaited first.
        """
        lat, lng = coords
        weather_task = asyncio.create_task(self._weather.forecast(lat, lng))
        news_task = asyncio.create_task(self._news.search(country_name))
        try:
            await asyncio.wait({weather_task, news_task})
        except asyncio.CancelledError:
            weather_task.cancel()
            news_task.cancel()
            await asyncio.gather(weather_task, news_task, return_exceptions=True)
            logger.info("Pulse for {!r} cancelled by caller", raw_name)
            raise

        try:
            forecast = weather_task.result()
        except UpstreamError as e:
            _log_failure(raw_name, e)
            raise UpstreamUnavailableError(FETCH_FAILED) from e

        return forecast, news_task.result()


def _log_failure(name: str, exc: Exception) -> None:
    logger.error(
        "Upstream failure: country={!r}, timestamp={}, error={}",
        name,
        datetime.now(timezone.utc).isoformat(),
        exc,
    )


def _country_facts(country: CountrySchema, capital: str, coords: tuple[float, float]) -> CountryFacts:
    return CountryFacts(
        name=country.name.common,
        capital=capital,
        population=country.population,
        region=country.region,
        flag=country.flags.svg,
        coordinates=Coordinates(lat=coords[0], lng=coords[1]),
    )


def _weather_snapshot(forecast: ForecastSchema) -> WeatherSnapshot:
    daily = forecast.daily

    def value_at(series: list[float | None], i: int) -> float:
        return series[i] if i < len(series) and series[i] is not None else 0.0

    days = tuple(
        ForecastDay(
            date=date,
            temp_max=value_at(daily.temperature_2m_max, i),
            temp_min=value_at(daily.temperature_2m_min, i),
        )
        for i, date in enumerate(daily.time[:FORECAST_DAYS])
    )
    return WeatherSnapshot(
        temperature=forecast.current_weather.temperature,
        conditions=weather_condition(forecast.current_weather.weathercode),
        forecast=days,
    )


def _news_items(news: NewsResult) -> tuple[NewsItem, ...]:
    if not isinstance(news, NewsFetched):
        return ()
    return tuple(
        NewsItem(
            title=a.title or "",
            url=a.link or "",
            source=a.source,
            published_at=a.pub_date or "",
        )
        for a in news.articles[:MAX_NEWS_ITEMS]
    )
