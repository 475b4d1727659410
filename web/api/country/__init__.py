"""Country pulse API."""

from web.api.country.views import get_country, router, to_response

__all__ = [
    "router",
    "get_country",
    "to_response",
]
