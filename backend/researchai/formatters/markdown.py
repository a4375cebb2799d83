from typing import List

from researchai.schemas import ExecutiveSummary, PodcastScript, PresentationData, VisualSummary


def _bullets(items: List[str]) -> str:
    return "\n".join(f"- {item}" for item in items)


def render_presentation(presentation: PresentationData) -> str:
    slides = "".join(
        f"## Slide {index + 1}: {slide.title}\n\n"
        f"{_bullets(slide.content)}\n\n"
        f"**Speaker Notes:** {slide.speaker_notes}\n\n"
        "---\n"
        for index, slide in enumerate(presentation.slides)
    )
    return f"# {presentation.title}\n\n{slides}"


def _podcast_segment(segment) -> str:
    notes = f"*{segment.notes}*\n\n" if segment.notes else ""
    return (
        f"## {segment.timestamp} - {segment.speaker}\n\n"
        f"{segment.content}\n\n"
        f"{notes}"
        "---\n"
    )


def render_podcast(script: PodcastScript) -> str:
    segments = "".join(_podcast_segment(segment) for segment in script.segments)
    return f"# {script.title}\n\n**Duration:** {script.duration}\n\n{segments}"


def render_executive_summary(summary: ExecutiveSummary) -> str:
    return (
        f"# {summary.title}\n\n"
        f"## Overview\n{summary.overview}\n\n"
        f"## Key Findings\n{_bullets(summary.key_findings)}\n\n"
        f"## Implications\n{_bullets(summary.implications)}\n\n"
        f"## Recommendations\n{_bullets(summary.recommendations)}\n\n"
        f"## Conclusion\n{summary.conclusion}"
    )


def render_visual_summary(summary: VisualSummary) -> str:
    elements = "".join(
        f"## {element.title} ({element.type.upper()})\n\n"
        f"{element.description}\n\n"
        f"### Suggestions:\n{_bullets(element.suggestions)}\n\n"
        "---\n"
        for element in summary.elements
    )
    return f"# {summary.title}\n\n## Overview\n{summary.overview}\n\n{elements}"
