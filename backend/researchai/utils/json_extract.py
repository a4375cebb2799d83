import json
import re
from typing import Any


def extract_json(text: str) -> Any:
    """
    Extract the first JSON object (or array) from LLM output.

    Strategy:
    1. Try direct json.loads (fast path)
    2. Strip a markdown fence if the model wrapped its answer
    3. Fallback to the outermost {...} block, then [...] block

    Returns None if parsing fails. NEVER throws.
    """
    if not text or not isinstance(text, str):
        return None

    # Fast path
    try:
        return json.loads(text)
    except ValueError:
        pass

    fenced = re.search(r"```(?:json)?\s*(.*?)\s*```", text, re.DOTALL)
    if fenced:
        try:
            return json.loads(fenced.group(1))
        except ValueError:
            pass

    for pattern in (r"\{.*\}", r"\[.*\]"):
        match = re.search(pattern, text, re.DOTALL)
        if not match:
            continue
        try:
            return json.loads(match.group(0))
        except ValueError:
            continue

    return None


def safe_load_json(text: str) -> dict:
    """Like extract_json, but only accepts a JSON object. Returns {} otherwise."""
    data = extract_json(text)
    return data if isinstance(data, dict) else {}
