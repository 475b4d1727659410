"""Pulse domain models - the composed per-country snapshot."""

from app.models.pulse.entities import CountryPulse

__all__ = ["CountryPulse"]
