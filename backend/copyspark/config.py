import os
from typing import List

from dotenv import load_dotenv

from copyspark.errors import ConfigurationError

# Load .env from project root
load_dotenv()


def _float(name: str, default: str) -> float:
    raw = os.getenv(name, default)
    try:
        return float(raw)
    except ValueError as e:
        raise ConfigurationError(
            f"{name} must be a number", details={"name": name, "value": raw}
        ) from e


def _bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


def _list(name: str, default: str) -> List[str]:
    return [item.strip() for item in os.getenv(name, default).split(",") if item.strip()]


# OpenAI-compatible chat completions endpoint (Ollama, vLLM, OpenAI, ...)
LLM_BASE_URL = os.getenv("LLM_BASE_URL", "http://localhost:11434/v1")
LLM_MODEL = os.getenv("LLM_MODEL", "mistral:7b-instruct")
LLM_API_KEY = os.getenv("LLM_API_KEY") or None
LLM_TEMPERATURE = _float("LLM_TEMPERATURE", "0.7")
LLM_TIMEOUT = _float("LLM_TIMEOUT", "60")
LLM_JSON_MODE = _bool("LLM_JSON_MODE", "true")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
CORS_ORIGINS = _list("CORS_ORIGINS", "http://localhost:3000")
