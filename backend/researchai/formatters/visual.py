from typing import List, Optional

from researchai.formatters.common import headed_sections
from researchai.schemas import VisualElement, VisualSummary


OVERVIEW_CHARS = 300

# Checked in order: "flowchart" must resolve before "chart"
TYPE_KEYWORDS = [
    ("infographic", "infographic"),
    ("timeline", "timeline"),
    ("flowchart", "diagram"),
    ("diagram", "diagram"),
    ("mind map", "diagram"),
    ("framework", "diagram"),
    ("chart", "chart"),
    ("graph", "chart"),
    ("plot", "chart"),
]


def default_elements() -> List[VisualElement]:
    return [
        VisualElement(
            type="infographic",
            title="Key Findings Overview",
            description="Visual representation of main research findings",
            suggestions=[
                "Use icons and illustrations to represent key concepts",
                "Create a flow chart showing the research methodology",
                "Include statistical highlights with visual emphasis",
            ],
        ),
        VisualElement(
            type="chart",
            title="Data Visualization",
            description="Charts and graphs for quantitative data",
            suggestions=[
                "Bar charts for comparative data",
                "Line graphs for trends over time",
                "Pie charts for proportional data",
                "Scatter plots for correlations",
            ],
        ),
        VisualElement(
            type="timeline",
            title="Research Timeline",
            description="Chronological representation of the study",
            suggestions=[
                "Show research phases and milestones",
                "Highlight key dates and events",
                "Include methodology timeline",
            ],
        ),
        VisualElement(
            type="diagram",
            title="Conceptual Framework",
            description="Visual model of research concepts and relationships",
            suggestions=[
                "Mind map of key concepts",
                "Process flow diagrams",
                "Hierarchical structure diagrams",
            ],
        ),
    ]


def visual_type_of(heading: str) -> Optional[str]:
    lowered = heading.lower()
    for keyword, visual_type in TYPE_KEYWORDS:
        if keyword in lowered:
            return visual_type
    return None


def parse_visual_summary(text: str) -> VisualSummary:
    """
    Headed sections that name a chart / infographic / diagram / timeline
    become visual elements. With none found, the four stock suggestions
    are returned. NEVER throws.
    """
    content = text or ""

    elements = []
    for section in headed_sections(content):
        visual_type = visual_type_of(section.heading)
        if visual_type is None:
            continue
        elements.append(
            VisualElement(
                type=visual_type,
                title=section.heading,
                description=section.body or f"Suggested {visual_type} for the research",
                suggestions=section.bullets,
            )
        )

    return VisualSummary(
        overview=content[:OVERVIEW_CHARS] + "...",
        elements=elements or default_elements(),
    )
