"""Country directory API."""

from web.api.countries.views import get_countries, router

__all__ = [
    "router",
    "get_countries",
]
