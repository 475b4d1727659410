"""Country directory API views - thin layer over CountryDirectory."""

from fastapi import APIRouter, Depends, Response

from app.services.directory import CountryDirectory
from web.api.country.views import CACHE_HEADER
from web.api.dependencies import get_directory_service

from .schemas import CountryListItemResponse

router = APIRouter(tags=["Countries"])


@router.get("/countries", response_model=list[CountryListItemResponse])
async def get_countries(
    response: Response,
    service: CountryDirectory = Depends(get_directory_service),
) -> list[CountryListItemResponse]:
    """All countries sorted by name."""
    result = await service.list()
    response.headers[CACHE_HEADER] = "HIT" if result.hit else "MISS"
    return [CountryListItemResponse.model_validate(c.to_dict()) for c in result.value]
