"""REST Countries API client."""

from pulse_client.countries.client import CountriesClient
from pulse_client.countries.schemas import (
    CapitalInfoSchema,
    CountryListSchema,
    CountryNameSchema,
    CountrySchema,
    FlagsSchema,
)

__all__ = [
    "CountriesClient",
    "CountrySchema",
    "CountryListSchema",
    "CountryNameSchema",
    "CapitalInfoSchema",
    "FlagsSchema",
]
