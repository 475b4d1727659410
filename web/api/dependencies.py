"""FastAPI dependencies - services from the container."""

from app.container import container
from app.repositories.common import CacheRepository
from app.services.directory import CountryDirectory
from app.services.pulse import PulseService


def get_pulse_service() -> PulseService:
    return container.pulse


def get_directory_service() -> CountryDirectory:
    return container.directory


def get_cache() -> CacheRepository:
    return container.cache
