from enum import Enum
from typing import Any, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Snake_case attributes, camelCase JSON (the browser's field names)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True)


class ContentType(str, Enum):
    PRESENTATION = "presentation"
    PODCAST = "podcast"
    SUMMARY = "summary"
    VISUAL = "visual"


# ---- Analysis ----

class AnalysisResult(CamelModel):
    title: str
    abstract: str
    key_findings: List[str] = Field(default_factory=list)
    methodology: str
    citations: int
    reading_time: str  # "X min"
    complexity: Literal["Low", "Medium", "High"]
    topics: List[str] = Field(default_factory=list)


# ---- Generation ----

class GenerateContentRequest(CamelModel):
    # Optional so that missing values surface as 400, not 422
    paper_content: Optional[str] = None
    content_type: Optional[str] = None
    analysis_result: Optional[Any] = None


class StructuredGenerateRequest(CamelModel):
    paper_content: Optional[str] = None
    analysis_result: Optional[Any] = None


class GeneratedContent(CamelModel):
    content_type: ContentType
    generated_content: str
    timestamp: str  # ISO-8601

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True, mode="json")


# ---- Presentation ----

class Slide(CamelModel):
    title: str
    content: List[str] = Field(default_factory=list)
    speaker_notes: str = ""


class PresentationData(CamelModel):
    title: str = "Research Presentation"
    slides: List[Slide] = Field(default_factory=list)


# ---- Podcast ----

class PodcastSegment(CamelModel):
    timestamp: str
    speaker: str
    content: str
    notes: Optional[str] = None


class PodcastScript(CamelModel):
    title: str = "Research Podcast: Key Insights"
    duration: str = "0:00"
    segments: List[PodcastSegment] = Field(default_factory=list)


# ---- Executive summary ----

class ExecutiveSummary(CamelModel):
    title: str = "Executive Summary"
    overview: str
    key_findings: List[str] = Field(default_factory=list)
    implications: List[str] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)
    conclusion: str


# ---- Visual summary ----

VisualType = Literal["chart", "infographic", "diagram", "timeline"]


class VisualElement(CamelModel):
    type: VisualType
    title: str
    description: str
    data: Optional[Any] = None
    suggestions: List[str] = Field(default_factory=list)


class VisualSummary(CamelModel):
    title: str = "Visual Research Summary"
    overview: str
    elements: List[VisualElement] = Field(default_factory=list)


# ---- History ----

class GenerationLogEntry(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    kind: str
    content_type: Optional[str] = None
    source_excerpt: Optional[str] = None
    output: Optional[str] = None
    fallback_used: bool = False
    created_at: Optional[Any] = None
