"""
Reply formatters: shape free-form model text into display records and
render those records back out as downloadable markdown.
"""

from dataclasses import dataclass
from typing import Callable, Dict, Type

from pydantic import BaseModel

from researchai.formatters.markdown import (
    render_executive_summary,
    render_podcast,
    render_presentation,
    render_visual_summary,
)
from researchai.formatters.podcast import parse_podcast
from researchai.formatters.presentation import parse_presentation
from researchai.formatters.summary import parse_executive_summary
from researchai.formatters.visual import parse_visual_summary
from researchai.schemas import (
    ContentType,
    ExecutiveSummary,
    PodcastScript,
    PresentationData,
    VisualSummary,
)


@dataclass(frozen=True)
class OutputFormat:
    kind: str                      # URL segment
    label: str                     # used in error messages
    content_type: ContentType
    model: Type[BaseModel]
    parse: Callable[[str], BaseModel]
    render: Callable[[BaseModel], str]
    filename: str


OUTPUT_FORMATS: Dict[str, OutputFormat] = {
    f.kind: f
    for f in (
        OutputFormat(
            kind="presentation",
            label="presentation",
            content_type=ContentType.PRESENTATION,
            model=PresentationData,
            parse=parse_presentation,
            render=render_presentation,
            filename="presentation.md",
        ),
        OutputFormat(
            kind="podcast",
            label="podcast script",
            content_type=ContentType.PODCAST,
            model=PodcastScript,
            parse=parse_podcast,
            render=render_podcast,
            filename="podcast-script.md",
        ),
        OutputFormat(
            kind="executive-summary",
            label="executive summary",
            content_type=ContentType.SUMMARY,
            model=ExecutiveSummary,
            parse=parse_executive_summary,
            render=render_executive_summary,
            filename="executive-summary.md",
        ),
        OutputFormat(
            kind="visual-summary",
            label="visual summary",
            content_type=ContentType.VISUAL,
            model=VisualSummary,
            parse=parse_visual_summary,
            render=render_visual_summary,
            filename="visual-summary.md",
        ),
    )
}
