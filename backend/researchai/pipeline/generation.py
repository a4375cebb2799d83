import json
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from researchai.config import CONTENT_CHAR_LIMIT
from researchai.inference.base import LLMClient, build_messages
from researchai.inference import prompt
from researchai.schemas import ContentType, GeneratedContent


@dataclass(frozen=True)
class ContentPrompt:
    system: str
    user_template: str


CONTENT_PROMPTS: Dict[ContentType, ContentPrompt] = {
    ContentType.PRESENTATION: ContentPrompt(
        prompt.PRESENTATION_SYSTEM_PROMPT, prompt.PRESENTATION_USER_PROMPT
    ),
    ContentType.PODCAST: ContentPrompt(
        prompt.PODCAST_SYSTEM_PROMPT, prompt.PODCAST_USER_PROMPT
    ),
    ContentType.SUMMARY: ContentPrompt(
        prompt.SUMMARY_SYSTEM_PROMPT, prompt.SUMMARY_USER_PROMPT
    ),
    ContentType.VISUAL: ContentPrompt(
        prompt.VISUAL_SYSTEM_PROMPT, prompt.VISUAL_USER_PROMPT
    ),
}

# What the transform page offers, in display order
CONTENT_CATALOG = [
    {
        "id": ContentType.PRESENTATION.value,
        "title": "Presentation Slides",
        "description": "Transform your research into engaging slide presentations",
    },
    {
        "id": ContentType.PODCAST.value,
        "title": "Podcast Script",
        "description": "Convert your paper into compelling audio content",
    },
    {
        "id": ContentType.SUMMARY.value,
        "title": "Executive Summary",
        "description": "Create concise summaries for decision-makers",
    },
    {
        "id": ContentType.VISUAL.value,
        "title": "Visual Content",
        "description": "Generate infographics and visual representations",
    },
]


class InvalidContentType(ValueError):
    pass


def resolve_content_type(value: str) -> ContentType:
    try:
        return ContentType(value)
    except ValueError as e:
        raise InvalidContentType(f"Invalid content type: {value!r}") from e


def build_content_messages(
    paper_content: str,
    content_type: ContentType,
    analysis_result: Optional[Any] = None,
) -> list:
    selected = CONTENT_PROMPTS[content_type]
    user_prompt = selected.user_template.format(
        analysis=json.dumps(analysis_result),
        paper_text=paper_content[:CONTENT_CHAR_LIMIT],
    )
    return build_messages(selected.system, user_prompt)


def run_content_generation(
    paper_content: str,
    content_type: str,
    client: LLMClient,
    analysis_result: Optional[Any] = None,
) -> GeneratedContent:
    """
    One model call per request; the reply is returned verbatim.
    Raises InvalidContentType for unknown types, LLMError on transport failure.
    """
    ctype = resolve_content_type(content_type)
    messages = build_content_messages(paper_content, ctype, analysis_result)

    print(f"[Generate] Requesting {ctype.value} content ({len(paper_content)} chars of paper)")
    generated = client.generate(messages)

    return GeneratedContent(
        content_type=ctype,
        generated_content=generated,
        timestamp=datetime.now(timezone.utc).isoformat(),
    )
