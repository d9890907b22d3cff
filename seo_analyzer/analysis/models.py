"""
Pydantic models for analysis input and output.

All models are frozen: a result is built once per ``analyze_seo`` call and
never mutated afterwards. Serialization uses camelCase keys so reports
match what the dashboard front end consumes.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator
from pydantic.alias_generators import to_camel


class RecommendationType(str, Enum):
    """Severity of a recommendation."""

    ERROR = "error"
    WARNING = "warning"
    SUCCESS = "success"


class Impact(str, Enum):
    """How much a recommendation affects ranking."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class _FrozenModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class AnalysisInput(_FrozenModel):
    """Content to analyze, as supplied by the editor form."""

    content: str = Field(default="", description="HTML markup of the body")
    title: str = Field(default="", description="Page title")
    meta_description: str = Field(default="", description="Meta description")
    target_keywords: list[str] = Field(
        default_factory=list,
        description="Target keywords, the first one is the primary keyword",
    )
    url: str | None = Field(default=None, description="Page URL, informational only")

    @field_validator("content", "title", "meta_description", mode="before")
    @classmethod
    def none_to_empty(cls, v: Any) -> Any:
        """Missing strings are analyzed as empty strings."""
        return "" if v is None else v

    @field_validator("target_keywords", mode="before")
    @classmethod
    def none_to_empty_list(cls, v: Any) -> Any:
        """Missing keyword list is analyzed as an empty list."""
        return [] if v is None else v

    @property
    def primary_keyword(self) -> str | None:
        """First target keyword, if any."""
        return self.target_keywords[0] if self.target_keywords else None


class HeadingCounts(_FrozenModel):
    """Number of opening heading tags per level."""

    h1: int = 0
    h2: int = 0
    h3: int = 0
    h4: int = 0
    h5: int = 0
    h6: int = 0

    @computed_field
    @property
    def total(self) -> int:
        return self.h1 + self.h2 + self.h3 + self.h4 + self.h5 + self.h6


class KeywordDensity(_FrozenModel):
    """Occurrences of one keyword relative to the document word count."""

    keyword: str
    count: int = Field(ge=0)
    density: float = Field(ge=0)


class Recommendation(_FrozenModel):
    """A single finding produced by one scoring rule."""

    id: str
    type: RecommendationType
    message: str
    impact: Impact
    details: str | None = None


class AnalysisResult(_FrozenModel):
    """Outcome of one SEO analysis."""

    score: int = Field(ge=0, le=100)
    recommendations: list[Recommendation] = Field(default_factory=list)
    keyword_density: list[KeywordDensity] = Field(default_factory=list)
    readability_score: float = Field(ge=0, le=100)
    content_length: int = Field(ge=0)
    title_length: int = Field(ge=0)
    meta_description_length: int = Field(ge=0)

    def to_dict(self) -> dict[str, Any]:
        """
        Serialize with camelCase keys.

        Recommendations without details omit the ``details`` key.
        """
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
