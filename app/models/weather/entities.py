"""Weather domain entities."""

from dataclasses import dataclass

from app.models.common import BaseEntity


@dataclass(frozen=True)
class ForecastDay(BaseEntity):
    """Daily temperature range."""

    date: str
    temp_max: float
    temp_min: float


@dataclass(frozen=True)
class WeatherSnapshot(BaseEntity):
    """Current conditions at the capital plus a short forecast."""

    temperature: float
    conditions: str
    forecast: tuple[ForecastDay, ...]
