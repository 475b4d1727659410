"""Health API."""

from web.api.health.views import get_health, router

__all__ = [
    "router",
    "get_health",
]
