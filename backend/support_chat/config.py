"""
Application settings loaded from environment variables at startup.
Import `settings` and use it instead of reading os.environ elsewhere.
A missing OPENAI_API_KEY is allowed (the chat endpoint answers with a static reply);
malformed numeric values raise RuntimeError.
"""
import os

from dotenv import load_dotenv


def _optional(key: str, default: str | None = None) -> str | None:
    value = os.environ.get(key)
    if value is None or not value.strip():
        return default
    return value.strip()


def _optional_int(key: str, default: int) -> int:
    s = _optional(key)
    if s is None:
        return default
    try:
        return int(s)
    except ValueError as e:
        raise RuntimeError(f"Environment variable {key} must be an integer: {s!r}") from e


def _optional_float(key: str, default: float) -> float:
    s = _optional(key)
    if s is None:
        return default
    try:
        return float(s)
    except ValueError as e:
        raise RuntimeError(f"Environment variable {key} must be a number: {s!r}") from e


class Settings:
    """All environment-derived configuration. Loaded once at import."""

    def __init__(self) -> None:
        load_dotenv()
        # OpenAI (or any OpenAI-compatible API)
        self.openai_api_key = _optional("OPENAI_API_KEY")
        _base = _optional("OPENAI_BASE_URL")
        self.openai_base_url = _base.rstrip("/") if _base is not None else None
        self.openai_timeout_seconds = _optional_float("OPENAI_TIMEOUT_SECONDS", 30.0)

        # Completion parameters
        self.chat_model = _optional("CHAT_MODEL", "gpt-4o-mini")
        self.chat_temperature = _optional_float("CHAT_TEMPERATURE", 0.7)
        self.chat_max_tokens = _optional_int("CHAT_MAX_TOKENS", 300)
        self.chat_history_limit = _optional_int("CHAT_HISTORY_LIMIT", 10)

        # App
        self.log_level = (_optional("LOG_LEVEL", "INFO") or "INFO").upper()
        self.allowed_origins = [
            o.strip() for o in (_optional("ALLOWED_ORIGINS", "") or "").split(",") if o.strip()
        ]

    @property
    def llm_configured(self) -> bool:
        return bool(self.openai_api_key)


# Single instance loaded at import
settings = Settings()
