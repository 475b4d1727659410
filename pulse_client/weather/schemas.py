"""Open-Meteo forecast schemas."""

from pydantic import BaseModel, Field

FORECAST_DAYS = 3


class CurrentWeatherSchema(BaseModel):
    """Current conditions block."""

    temperature: float
    weathercode: int
    windspeed: float = 0.0
    time: str = ""


class DailySchema(BaseModel):
    """Daily min/max series, index-aligned with ``time``.

    A response covering fewer than ``FORECAST_DAYS`` dates is rejected.
    Null or missing max/min values are tolerated here and read as 0 later.
    """

    time: list[str] = Field(min_length=FORECAST_DAYS)
    temperature_2m_max: list[float | None] = []
    temperature_2m_min: list[float | None] = []


class ForecastSchema(BaseModel):
    """Forecast response."""

    latitude: float | None = None
    longitude: float | None = None
    timezone: str = ""
    current_weather: CurrentWeatherSchema
    daily: DailySchema
