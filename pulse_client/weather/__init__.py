"""Open-Meteo client and weather code mapping."""

from pulse_client.weather.client import WeatherClient
from pulse_client.weather.conditions import weather_condition, weather_emoji
from pulse_client.weather.schemas import FORECAST_DAYS, CurrentWeatherSchema, DailySchema, ForecastSchema

__all__ = [
    "WeatherClient",
    "FORECAST_DAYS",
    "ForecastSchema",
    "CurrentWeatherSchema",
    "DailySchema",
    "weather_condition",
    "weather_emoji",
]
