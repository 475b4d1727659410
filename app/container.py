"""Dependency Injection container - initialized at app startup."""

from loguru import logger

from app.repositories.common.cache import CacheRepository
from app.services.directory.service import CountryDirectory
from app.services.pulse.service import PulseService
from pulse_client import CountriesClient, NewsClient, WeatherClient


class Container:
    """Application DI container - holds all singleton instances."""

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def init(self, cache: CacheRepository | None = None) -> None:
        """Initialize all dependencies. Call once at app startup."""
        if self._initialized:
            return

        # Shared state
        self.cache = cache or CacheRepository()

        # Upstream clients
        self._countries = CountriesClient()
        self._weather = WeatherClient()
        self._news = NewsClient()

        # Services (with injected clients and cache)
        self.pulse = PulseService(
            countries=self._countries,
            weather=self._weather,
            news=self._news,
            cache=self.cache,
        )

        self.directory = CountryDirectory(
            countries=self._countries,
            cache=self.cache,
        )

        self._initialized = True

    @property
    def _clients(self) -> list:
        return [self._countries, self._weather, self._news]

    async def open(self) -> None:
        """Open upstream HTTP connections."""
        for client in self._clients:
            await client.open()
        logger.info("Container opened")

    async def dispose(self) -> None:
        """Close connections and drop cached state. ``init`` may be called again."""
        if not self._initialized:
            return
        for client in self._clients:
            await client.close()
        self.cache.clear()
        self._initialized = False
        logger.info("Container disposed")


# Global container instance
container = Container()
