"""Pulse services - validation and the country snapshot orchestrator."""

from app.services.pulse.service import PulseService
from app.services.pulse.validation import (
    MAX_COUNTRY_NAME_LENGTH,
    ValidationReason,
    ValidationResult,
    country_cache_key,
    validate_country_name,
)

__all__ = [
    "PulseService",
    "MAX_COUNTRY_NAME_LENGTH",
    "ValidationReason",
    "ValidationResult",
    "country_cache_key",
    "validate_country_name",
]
