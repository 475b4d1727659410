"""Country directory API response schemas."""

from pydantic import BaseModel


class CountryListItemResponse(BaseModel):
    """Country entry for autocomplete."""

    name: str
    code: str
    flag: str
