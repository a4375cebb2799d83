from researchai.formatters.markdown import (
    render_executive_summary,
    render_podcast,
    render_presentation,
    render_visual_summary,
)
from researchai.schemas import (
    ExecutiveSummary,
    PodcastScript,
    PodcastSegment,
    PresentationData,
    Slide,
    VisualElement,
    VisualSummary,
)


def test_presentation_markdown():
    deck = PresentationData(
        title="Deck",
        slides=[Slide(title="Intro", content=["a", "b"], speaker_notes="hi")],
    )
    assert render_presentation(deck) == (
        "# Deck\n\n"
        "## Slide 1: Intro\n\n"
        "- a\n- b\n\n"
        "**Speaker Notes:** hi\n\n"
        "---\n"
    )


def test_podcast_markdown_only_italicizes_present_notes():
    script = PodcastScript(
        duration="0:06",
        segments=[
            PodcastSegment(timestamp="00:00", speaker="Host", content="Hello", notes="Introduction"),
            PodcastSegment(timestamp="00:03", speaker="Expert", content="Hi"),
        ],
    )
    assert render_podcast(script) == (
        "# Research Podcast: Key Insights\n\n"
        "**Duration:** 0:06\n\n"
        "## 00:00 - Host\n\nHello\n\n*Introduction*\n\n---\n"
        "## 00:03 - Expert\n\nHi\n\n---\n"
    )


def test_executive_summary_markdown():
    summary = ExecutiveSummary(
        overview="Over",
        key_findings=["f"],
        implications=["i"],
        recommendations=["r"],
        conclusion="Done",
    )
    assert render_executive_summary(summary) == (
        "# Executive Summary\n\n"
        "## Overview\nOver\n\n"
        "## Key Findings\n- f\n\n"
        "## Implications\n- i\n\n"
        "## Recommendations\n- r\n\n"
        "## Conclusion\nDone"
    )


def test_visual_summary_markdown_uppercases_type():
    summary = VisualSummary(
        overview="o...",
        elements=[
            VisualElement(type="chart", title="Accuracy", description="d", suggestions=["s"]),
        ],
    )
    assert render_visual_summary(summary) == (
        "# Visual Research Summary\n\n"
        "## Overview\no...\n\n"
        "## Accuracy (CHART)\n\nd\n\n### Suggestions:\n- s\n\n---\n"
    )
