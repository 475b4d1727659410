"""FastAPI application factory."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from loguru import logger

from app.container import container
from web.api import countries, country, health
from web.api.errors import register_error_handlers


@asynccontextmanager
async def lifespan(_: FastAPI):
    container.init()
    await container.open()
    logger.info("Country Pulse API started")
    try:
        yield
    finally:
        await container.dispose()
        logger.info("Country Pulse API stopped")


def create_app() -> FastAPI:
    """Build the API with routers and error handlers."""
    app = FastAPI(title="Country Pulse", lifespan=lifespan)

    register_error_handlers(app)

    app.include_router(countries.router)
    app.include_router(country.router)
    app.include_router(health.router)

    return app


app = create_app()
