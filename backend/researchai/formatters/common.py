import re
from dataclasses import dataclass, field
from typing import Any, List, Optional


BULLET_RE = re.compile(r"^(?:[-*•]|\d+[.)])\s+(.*)$")
BOLD_HEADING_RE = re.compile(r"^\*\*(.+?)\*\*:?$")
NUMBERING_RE = re.compile(r"^(?:\d+[.)]|[IVX]+\.)\s+")


@dataclass
class HeadedSection:
    heading: str
    text: List[str] = field(default_factory=list)
    bullets: List[str] = field(default_factory=list)

    @property
    def key(self) -> str:
        return self.heading.lower()

    @property
    def body(self) -> str:
        return " ".join(self.text).strip()


def clean_text(value: Any) -> Optional[str]:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def string_list(value: Any) -> List[str]:
    if isinstance(value, str):
        return [value.strip()] if value.strip() else []
    if isinstance(value, list):
        return [item.strip() for item in value if isinstance(item, str) and item.strip()]
    return []


def paragraphs(text: str) -> List[str]:
    text = text.replace("\r\n", "\n")
    return [section.strip() for section in text.split("\n\n") if section.strip()]


def strip_markup(text: str) -> str:
    text = text.strip().strip("*_").strip()
    return text.rstrip(":").strip()


def markdown_heading_of(line: str) -> Optional[str]:
    if line.startswith("#"):
        return strip_markup(line.lstrip("#"))
    return None


def soft_heading_of(line: str) -> Optional[str]:
    """
    Returns the heading text if the (stripped) line reads like a label:
      **Heading**
      Heading:        (short line, no bullet)
    """
    match = BOLD_HEADING_RE.match(line)
    if match:
        return strip_markup(match.group(1))

    if line.endswith(":") and not BULLET_RE.match(line) and len(line.split()) <= 6:
        return strip_markup(line)

    return None


def bullet_of(line: str) -> Optional[str]:
    match = BULLET_RE.match(line)
    if not match:
        return None
    return match.group(1).strip()


def headed_sections(text: str) -> List[HeadedSection]:
    """
    Group lines under the nearest heading above them. Once a "#" heading
    has been seen, bold or colon-terminated lines stay inside their section.
    """
    sections: List[HeadedSection] = []
    current: Optional[HeadedSection] = None
    in_markdown_section = False

    for raw in text.split("\n"):
        line = raw.strip()
        if not line:
            continue

        heading = markdown_heading_of(line)
        if heading is not None:
            in_markdown_section = True
        else:
            heading = soft_heading_of(line)
            if heading is not None and in_markdown_section:
                # a label inside a "#" section ("Suggestions:"), not a new section
                continue

        if heading is not None:
            current = HeadedSection(heading=NUMBERING_RE.sub("", heading))
            sections.append(current)
            continue

        if current is None:
            continue

        bullet = bullet_of(line)
        if bullet:
            current.bullets.append(bullet)
        else:
            current.text.append(line)

    return sections
