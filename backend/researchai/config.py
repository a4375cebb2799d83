import os
from dotenv import load_dotenv

# Load .env from project root
load_dotenv()


def _get_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


# ---- LLM ----
XAI_API_KEY = os.getenv("XAI_API_KEY", "")
LLM_BASE_URL = os.getenv("LLM_BASE_URL", "https://api.x.ai/v1")
LLM_MODEL = os.getenv("LLM_MODEL", "grok-3")
LLM_TEMPERATURE = float(os.getenv("LLM_TEMPERATURE", "0.7"))
LLM_TIMEOUT = int(os.getenv("LLM_TIMEOUT", "300"))

# ---- Prompt budgets (characters of paper text sent to the model) ----
ANALYSIS_CHAR_LIMIT = int(os.getenv("ANALYSIS_CHAR_LIMIT", "8000"))
CONTENT_CHAR_LIMIT = int(os.getenv("CONTENT_CHAR_LIMIT", "4000"))

# ---- Uploads ----
MAX_UPLOAD_BYTES = int(os.getenv("MAX_UPLOAD_BYTES", str(10 * 1024 * 1024)))  # 10MB

# ---- Persistence ----
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./researchai.db")
PERSIST_GENERATIONS = _get_bool("PERSIST_GENERATIONS", True)

# ---- HTTP ----
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",")
    if origin.strip()
]
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))
