"""Upstream client errors."""


class UpstreamError(Exception):
    """Upstream provider call failed or returned an unusable payload."""

    def __init__(self, message: str = "Upstream request failed"):
        self.message = message
        super().__init__(self.message)


class CountryNotFoundError(UpstreamError):
    """Country provider had no match for the requested name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Country not found: {name}")


class WeatherUnavailableError(UpstreamError):
    """Forecast provider failed."""

    def __init__(self, message: str = "Weather data unavailable"):
        super().__init__(message)
