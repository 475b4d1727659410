"""Services package - service class exports."""

from app.services.directory.service import CountryDirectory
from app.services.pulse.service import PulseService

__all__ = [
    "CountryDirectory",
    "PulseService",
]
