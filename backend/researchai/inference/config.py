from researchai import config
from .chat_completions_client import ChatCompletionsClient


def get_llm_client() -> ChatCompletionsClient:
    return ChatCompletionsClient(
        base_url=config.LLM_BASE_URL,
        model=config.LLM_MODEL,
        api_key=config.XAI_API_KEY,
        temperature=config.LLM_TEMPERATURE,
        timeout=config.LLM_TIMEOUT,
    )
