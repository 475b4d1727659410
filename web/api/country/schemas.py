"""Country pulse API response schemas."""

from pydantic import BaseModel, Field


class CoordinatesResponse(BaseModel):
    """Capital coordinates."""

    lat: float
    lng: float


class CountryResponse(BaseModel):
    """Country facts."""

    name: str
    capital: str
    population: int
    region: str
    flag: str
    coordinates: CoordinatesResponse


class ForecastDayResponse(BaseModel):
    """Daily forecast."""

    date: str
    temp_max: float = Field(alias="tempMax")
    temp_min: float = Field(alias="tempMin")

    class Config:
        populate_by_name = True


class WeatherResponse(BaseModel):
    """Capital weather."""

    temperature: float
    conditions: str
    forecast: list[ForecastDayResponse]


class NewsItemResponse(BaseModel):
    """Headline."""

    title: str
    url: str
    source: str
    published_at: str = Field(alias="publishedAt")

    class Config:
        populate_by_name = True


class CountryPulseResponse(BaseModel):
    """Unified country snapshot."""

    country: CountryResponse
    weather: WeatherResponse
    news: list[NewsItemResponse]
