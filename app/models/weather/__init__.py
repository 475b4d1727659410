"""Weather domain models - current conditions and forecast."""

from app.models.weather.entities import ForecastDay, WeatherSnapshot

__all__ = ["ForecastDay", "WeatherSnapshot"]
