"""Country pulse API views - thin layer over PulseService."""

from fastapi import APIRouter, Depends, Response

from app.models import CountryPulse
from app.services.pulse import PulseService
from web.api.dependencies import get_pulse_service

from .schemas import CountryPulseResponse

CACHE_HEADER = "X-Cache"

router = APIRouter(tags=["Country"])


def to_response(pulse: CountryPulse) -> CountryPulseResponse:
    """Map a composed pulse to its API shape."""
    return CountryPulseResponse.model_validate(pulse.to_dict())


@router.get("/country/{name}", response_model=CountryPulseResponse)
async def get_country(
    name: str,
    response: Response,
    service: PulseService = Depends(get_pulse_service),
) -> CountryPulseResponse:
    """Country facts, capital weather and latest headlines."""
    result = await service.get_pulse(name)
    response.headers[CACHE_HEADER] = "HIT" if result.hit else "MISS"
    return to_response(result.value)
