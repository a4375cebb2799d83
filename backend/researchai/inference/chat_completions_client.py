import re
from typing import Dict, List, Optional

import requests

from .base import LLMClient, LLMError


class ChatCompletionsClient(LLMClient):
    """
    Minimal client for OpenAI-compatible /chat/completions endpoints
    (xAI Grok by default).
    """

    def __init__(
        self,
        base_url: str,
        model: str,
        api_key: str = "",
        temperature: float = 0.7,
        timeout: int = 300,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.model = model
        self.api_key = api_key
        self.temperature = temperature
        self.timeout = timeout
        self.session = session or requests.Session()

    def _headers(self) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    def generate(self, messages: List[Dict]) -> str:
        url = f"{self.base_url}/chat/completions"

        try:
            response = self.session.post(
                url,
                headers=self._headers(),
                json={
                    "model": self.model,
                    "messages": messages,
                    "temperature": self.temperature,
                },
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.RequestException as e:
            raise LLMError(f"Completion request to {url} failed: {e}") from e

        try:
            content = response.json()["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise LLMError("Completion response had no assistant message") from e

        if not isinstance(content, str):
            raise LLMError("Completion response content was not text")

        # strip markdown fences
        content = re.sub(r"^```(?:json|markdown)?\s*", "", content.strip())
        content = re.sub(r"\s*```$", "", content.strip())

        return content
