from .base import LLMClient, LLMError, build_messages
from .chat_completions_client import ChatCompletionsClient
from .config import get_llm_client

__all__ = [
    "LLMClient",
    "LLMError",
    "build_messages",
    "ChatCompletionsClient",
    "get_llm_client",
]
