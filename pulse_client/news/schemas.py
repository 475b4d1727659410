"""NewsData.io schemas and the typed news result."""

from dataclasses import dataclass, field

from pydantic import BaseModel, Field


class ArticleSchema(BaseModel):
    """Single article from the news search endpoint."""

    title: str | None = None
    link: str | None = None
    source_name: str | None = None
    source_id: str | None = None
    pub_date: str | None = Field(alias="pubDate", default=None)

    class Config:
        populate_by_name = True

    @property
    def source(self) -> str:
        return self.source_name or self.source_id or ""


class NewsResponseSchema(BaseModel):
    """Successful news search response."""

    status: str
    total_results: int = Field(alias="totalResults", default=0)
    results: list[ArticleSchema] = []

    class Config:
        populate_by_name = True


@dataclass(frozen=True)
class NewsFetched:
    """Provider answered; articles in provider order."""

    articles: list[ArticleSchema] = field(default_factory=list)


@dataclass(frozen=True)
class NewsDegraded:
    """News unavailable; callers render no headlines."""

    reason: str


NewsResult = NewsFetched | NewsDegraded
