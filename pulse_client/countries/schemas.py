"""REST Countries API schemas."""

from pydantic import BaseModel, Field


class CountryNameSchema(BaseModel):
    """Common and official country names."""

    common: str
    official: str = ""


class FlagsSchema(BaseModel):
    """Flag image URLs."""

    svg: str = ""
    png: str = ""


class CapitalInfoSchema(BaseModel):
    """Capital city location."""

    latlng: list[float] | None = None


class CountrySchema(BaseModel):
    """Country record from the name-search endpoint."""

    name: CountryNameSchema
    capital: list[str] = []
    population: int = 0
    region: str = ""
    capital_info: CapitalInfoSchema = Field(alias="capitalInfo", default_factory=CapitalInfoSchema)
    flags: FlagsSchema = Field(default_factory=FlagsSchema)

    class Config:
        populate_by_name = True

    @property
    def capital_name(self) -> str | None:
        return self.capital[0] if self.capital and self.capital[0] else None

    @property
    def capital_coordinates(self) -> tuple[float, float] | None:
        latlng = self.capital_info.latlng
        if latlng and len(latlng) >= 2:
            return latlng[0], latlng[1]
        return None


class CountryListSchema(BaseModel):
    """Minimal country record from the catalogue endpoint."""

    name: CountryNameSchema
    cca2: str
    flags: FlagsSchema = Field(default_factory=FlagsSchema)
