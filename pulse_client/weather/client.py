"""Open-Meteo forecast client."""

import httpx

from pulse_client.base import BaseClient
from pulse_client.errors import WeatherUnavailableError
from pulse_client.weather.schemas import FORECAST_DAYS, ForecastSchema
from settings import OPEN_METEO_URL


class WeatherClient(BaseClient):
    """Client for the Open-Meteo forecast endpoint."""

    base_url = OPEN_METEO_URL

    async def forecast(self, lat: float, lng: float) -> ForecastSchema:
        """GET /forecast - current conditions plus 3-day daily min/max."""
        params = {
            "latitude": str(lat),
            "longitude": str(lng),
            "current_weather": "true",
            "daily": "temperature_2m_max,temperature_2m_min",
            "timezone": "auto",
            "forecast_days": str(FORECAST_DAYS),
        }
        try:
            data = await self._get("forecast", params=params)
            return ForecastSchema.model_validate(data)
        except httpx.HTTPStatusError as e:
            raise WeatherUnavailableError(f"Weather data unavailable: HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise WeatherUnavailableError(f"Weather data unavailable: {e}") from e
        except ValueError as e:
            raise WeatherUnavailableError(f"Malformed weather payload: {e}") from e
