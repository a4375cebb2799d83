import re
from typing import Dict, List

from researchai.formatters.common import headed_sections, paragraphs
from researchai.schemas import ExecutiveSummary


DEFAULT_OVERVIEW = "This research provides valuable insights into the studied domain."
DEFAULT_CONCLUSION = (
    "This research contributes valuable insights to the field and provides "
    "a foundation for future work."
)
DEFAULT_FINDINGS = [
    "Primary research findings demonstrate significant patterns",
    "Data analysis reveals important correlations",
    "Methodology validation confirms research approach effectiveness",
]
DEFAULT_IMPLICATIONS = [
    "Results have direct applications in the field",
    "Findings contribute to existing knowledge base",
    "Research opens new avenues for future investigation",
]
DEFAULT_RECOMMENDATIONS = [
    "Implement findings in practical applications",
    "Conduct follow-up studies to validate results",
    "Consider broader implementation strategies",
]

FINDINGS_RE = re.compile(r"(?:findings|results)[:\s]+(.*?)(?:\n\n|\Z)", re.IGNORECASE)

# heading keyword -> summary field
SECTION_KEYWORDS = {
    "key_findings": ("finding", "result"),
    "implications": ("implication",),
    "recommendations": ("recommend", "next step", "action"),
    "overview": ("overview", "introduction", "background"),
    "conclusion": ("conclusion", "bottom line"),
}


def _collect_sections(text: str) -> Dict[str, Dict[str, List[str]]]:
    collected: Dict[str, Dict[str, List[str]]] = {}
    for section in headed_sections(text):
        for field_name, keywords in SECTION_KEYWORDS.items():
            if any(keyword in section.key for keyword in keywords):
                bucket = collected.setdefault(field_name, {"bullets": [], "text": []})
                bucket["bullets"].extend(section.bullets)
                bucket["text"].extend(section.text)
                break
    return collected


def parse_executive_summary(text: str) -> ExecutiveSummary:
    """
    First paragraph is the overview, last is the conclusion. Headed bullet
    lists fill findings / implications / recommendations; anything missing
    keeps placeholder text. NEVER throws.
    """
    content = (text or "").replace("\r\n", "\n")
    blocks = paragraphs(content)
    sections = _collect_sections(content)

    def section_text(name: str) -> str:
        return " ".join(sections.get(name, {}).get("text", [])).strip()

    def section_bullets(name: str) -> List[str]:
        return sections.get(name, {}).get("bullets", [])

    summary = ExecutiveSummary(
        overview=section_text("overview") or (blocks[0] if blocks else DEFAULT_OVERVIEW),
        key_findings=list(DEFAULT_FINDINGS),
        implications=section_bullets("implications") or list(DEFAULT_IMPLICATIONS),
        recommendations=section_bullets("recommendations") or list(DEFAULT_RECOMMENDATIONS),
        conclusion=section_text("conclusion") or (blocks[-1] if blocks else DEFAULT_CONCLUSION),
    )

    findings = section_bullets("key_findings")
    if findings:
        summary.key_findings = findings
    elif "findings" in content or "results" in content:
        match = FINDINGS_RE.search(content)
        if match and match.group(1).strip():
            summary.key_findings = [match.group(1).strip()]

    return summary
