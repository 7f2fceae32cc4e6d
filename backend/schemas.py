"""Pydantic schemas for API responses."""

from pydantic import BaseModel, ConfigDict, Field

from models import Status

CATEGORY_ORDER = (
    "Metadata",
    "Favicon",
    "Social Media",
    "SEO Files",
    "Performance",
    "AI Integration",
    "Security",
)


class CheckItem(BaseModel):
    """Outcome of a single check."""

    name: str
    status: Status
    message: str
    preview: str | None = None


class Category(BaseModel):
    """Named group of checks with its own score."""

    name: str
    score: int = Field(ge=0, le=100)
    items: list[CheckItem]


class AnalysisResult(BaseModel):
    """Full report returned by GET /api/analyze."""

    model_config = ConfigDict(populate_by_name=True)

    url: str
    overall_score: int = Field(alias="overallScore", ge=0, le=100)
    categories: list[Category]
    timestamp: str


class ErrorResponse(BaseModel):
    error: str
