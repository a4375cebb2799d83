import math
import random
import re
from typing import Any, Dict, List, Optional

from researchai.config import ANALYSIS_CHAR_LIMIT
from researchai.inference.base import LLMClient, build_messages
from researchai.inference.prompt import ANALYSIS_SYSTEM_PROMPT, ANALYSIS_USER_PROMPT
from researchai.schemas import AnalysisResult
from researchai.utils.json_extract import safe_load_json


COMPLEXITY_LEVELS = ["Low", "Medium", "High"]

PLACEHOLDER_TITLE = "Research Paper Analysis"
PLACEHOLDER_ABSTRACT = "AI analysis of the uploaded research paper has been completed."
PLACEHOLDER_FINDINGS = [
    "Key insights extracted from the paper",
    "Important methodological approaches identified",
    "Significant results and conclusions noted",
]
PLACEHOLDER_METHODOLOGY = "Mixed methods research approach"
PLACEHOLDER_TOPICS = ["Research", "Analysis", "Academic Study"]


# ----------------------------
# Helpers
# ----------------------------

def _number(value: Any) -> bool:
    # json.loads accepts NaN and Infinity
    return (
        isinstance(value, (int, float))
        and not isinstance(value, bool)
        and math.isfinite(value)
    )


def _text(value: Any) -> Optional[str]:
    if isinstance(value, str) and value.strip():
        return value.strip()
    if _number(value):
        return str(value)
    return None


def _string_list(value: Any) -> List[str]:
    """
    Converts:
      "text"
      ["text", ...]
      [{ "finding": "text" }]
    → ["text", ...]
    """
    if isinstance(value, str):
        return [value.strip()] if value.strip() else []
    if not isinstance(value, list):
        return []

    items = []
    for item in value:
        if isinstance(item, dict):
            item = next((v for v in item.values() if isinstance(v, str)), None)
        text = _text(item)
        if text:
            items.append(text)
    return items


def _citations(value: Any) -> Optional[int]:
    if _number(value):
        return max(0, int(value))
    if isinstance(value, str):
        match = re.search(r"\d+", value.replace(",", ""))
        if match:
            return int(match.group(0))
    return None


def _reading_time(value: Any) -> Optional[str]:
    if _number(value):
        return f"{int(value)} min"
    if isinstance(value, str):
        return _text(value)
    return None


def _complexity(value: Any) -> Optional[str]:
    if not isinstance(value, str):
        return None
    lowered = value.strip().lower()
    for level in COMPLEXITY_LEVELS:
        if lowered.startswith(level.lower()):
            return level
    if lowered in ("moderate", "intermediate", "med"):
        return "Medium"
    return None


# ----------------------------
# Fallback
# ----------------------------

def placeholder_analysis(rng: Optional[random.Random] = None) -> AnalysisResult:
    """The canned analysis shown when the model reply has no usable JSON."""
    rng = rng or random.Random()
    return AnalysisResult(
        title=PLACEHOLDER_TITLE,
        abstract=PLACEHOLDER_ABSTRACT,
        key_findings=list(PLACEHOLDER_FINDINGS),
        methodology=PLACEHOLDER_METHODOLOGY,
        citations=rng.randint(10, 59),
        reading_time=f"{rng.randint(5, 24)} min",
        complexity=rng.choice(COMPLEXITY_LEVELS),
        topics=list(PLACEHOLDER_TOPICS),
    )


def normalize_analysis(
    data: Dict[str, Any],
    rng: Optional[random.Random] = None,
) -> AnalysisResult:
    """
    Coerce a loosely shaped model reply into an AnalysisResult.
    Fields the model left out or mangled take the placeholder values.
    """
    fallback = placeholder_analysis(rng)
    citations = _citations(data.get("citations"))

    return AnalysisResult(
        title=_text(data.get("title")) or fallback.title,
        abstract=_text(data.get("abstract") or data.get("summary")) or fallback.abstract,
        key_findings=_string_list(data.get("keyFindings", data.get("key_findings")))
        or fallback.key_findings,
        methodology=_text(data.get("methodology")) or fallback.methodology,
        citations=citations if citations is not None else fallback.citations,
        reading_time=_reading_time(data.get("readingTime", data.get("reading_time")))
        or fallback.reading_time,
        complexity=_complexity(data.get("complexity")) or fallback.complexity,
        topics=_string_list(data.get("topics")) or fallback.topics,
    )


# ----------------------------
# Main
# ----------------------------

def parse_analysis(raw: str, rng: Optional[random.Random] = None) -> tuple[AnalysisResult, bool]:
    """
    Returns (analysis, fallback_used). NEVER throws on model text.
    """
    data = safe_load_json(raw)
    if not data:
        return placeholder_analysis(rng), True
    return normalize_analysis(data, rng), False


def run_paper_analysis(
    paper_text: str,
    client: LLMClient,
    rng: Optional[random.Random] = None,
) -> tuple[AnalysisResult, bool]:
    """
    Sends the (truncated) paper to the model and shapes the reply.
    LLM transport errors propagate as LLMError.
    """
    truncated = paper_text[:ANALYSIS_CHAR_LIMIT]

    messages = build_messages(
        ANALYSIS_SYSTEM_PROMPT,
        ANALYSIS_USER_PROMPT.format(paper_text=truncated),
    )

    raw = client.generate(messages)
    analysis, fallback_used = parse_analysis(raw, rng)

    if fallback_used:
        print("[Analyze] Model reply had no JSON object, using placeholder analysis")

    return analysis, fallback_used
