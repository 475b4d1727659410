"""Health API view."""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from app.repositories.common import CacheRepository
from web.api.dependencies import get_cache

router = APIRouter(tags=["Health"])


class CacheStats(BaseModel):
    count: int
    keys: list[str]


class HealthResponse(BaseModel):
    status: str
    cache: CacheStats


@router.get("/health", response_model=HealthResponse)
async def get_health(cache: CacheRepository = Depends(get_cache)) -> HealthResponse:
    """Liveness plus cache contents."""
    return HealthResponse(status="ok", cache=CacheStats(**cache.stats()))
