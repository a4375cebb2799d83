import re
from typing import Any, List, Optional

from researchai.formatters.common import clean_text, string_list
from researchai.schemas import PresentationData, Slide
from researchai.utils.json_extract import extract_json


DEFAULT_TITLE = "Research Presentation"

SPEAKER_NOTES_RE = re.compile(r"^[*_]*(?:speaker\s+)?notes[*_]*\s*:[*_]*\s*(.*)$", re.IGNORECASE)


def _slides_from_json(data: Any) -> Optional[PresentationData]:
    title = DEFAULT_TITLE
    if isinstance(data, dict):
        title = clean_text(data.get("title")) or DEFAULT_TITLE
        items = data.get("slides")
    else:
        items = data

    if not isinstance(items, list):
        return None

    slides = []
    for index, item in enumerate(items):
        if not isinstance(item, dict):
            continue
        notes = item.get("speakerNotes", item.get("speaker_notes", item.get("notes")))
        slides.append(
            Slide(
                title=clean_text(item.get("title")) or f"Slide {index + 1}",
                content=string_list(item.get("content", item.get("bullets"))),
                speaker_notes=clean_text(notes) or "",
            )
        )

    if not slides:
        return None

    return PresentationData(title=title, slides=slides)


def _slides_from_markdown(text: str) -> List[Slide]:
    slides: List[Slide] = []
    current: Optional[Slide] = None

    for raw in text.split("\n"):
        line = raw.strip()
        if not line:
            continue

        if line.startswith("# ") or line.startswith("## "):
            current = Slide(title=re.sub(r"^#+\s", "", line))
            slides.append(current)
            continue

        if current is None:
            continue

        notes = SPEAKER_NOTES_RE.match(line)
        if notes:
            current.speaker_notes = " ".join(
                part for part in (current.speaker_notes, notes.group(1).strip()) if part
            )
        elif line.startswith("- ") or line.startswith("* "):
            current.content.append(re.sub(r"^[-*]\s", "", line))

    return slides


def parse_presentation(text: str) -> PresentationData:
    """
    Shapes a model reply into slides.

    JSON replies ({"title", "slides": [...]} or a bare slide list) are used
    as-is; otherwise "#"/"##" headings open slides and "-"/"*" lines become
    bullets. NEVER throws.
    """
    text = text or ""

    structured = _slides_from_json(extract_json(text))
    if structured is not None:
        return structured

    slides = _slides_from_markdown(text)
    if not slides:
        slides = [
            Slide(
                title="Generated Presentation",
                content=[text],
                speaker_notes="Generated from research paper",
            )
        ]

    return PresentationData(title=DEFAULT_TITLE, slides=slides)
