from abc import ABC, abstractmethod
from typing import List, Dict


class LLMError(RuntimeError):
    """Raised when the completion service cannot produce assistant text."""


class LLMClient(ABC):
    @abstractmethod
    def generate(self, messages: List[Dict]) -> str:
        """Generate assistant text from chat messages"""
        pass


def build_messages(system_prompt: str, user_prompt: str) -> List[Dict]:
    return [
        {"role": "system", "content": system_prompt},
        {"role": "user", "content": user_prompt},
    ]
