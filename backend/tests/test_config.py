import pytest

from support_chat.config import Settings

_VARS = (
    "OPENAI_API_KEY",
    "OPENAI_BASE_URL",
    "OPENAI_TIMEOUT_SECONDS",
    "CHAT_MODEL",
    "CHAT_TEMPERATURE",
    "CHAT_MAX_TOKENS",
    "CHAT_HISTORY_LIMIT",
    "LOG_LEVEL",
    "ALLOWED_ORIGINS",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    # Settings() calls load_dotenv(), which never overrides variables already set.
    for key in _VARS:
        monkeypatch.setenv(key, "")


def test_settings_defaults() -> None:
    s = Settings()

    assert s.openai_api_key is None
    assert s.llm_configured is False
    assert s.openai_base_url is None
    assert s.chat_model == "gpt-4o-mini"
    assert s.chat_temperature == 0.7
    assert s.chat_max_tokens == 300
    assert s.chat_history_limit == 10
    assert s.openai_timeout_seconds == 30.0
    assert s.log_level == "INFO"
    assert s.allowed_origins == []


def test_settings_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OPENAI_API_KEY", "  sk-live  ")
    monkeypatch.setenv("OPENAI_BASE_URL", "https://generativelanguage.example/v1beta/openai/")
    monkeypatch.setenv("CHAT_MAX_TOKENS", "500")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("ALLOWED_ORIGINS", "https://bafuputsi.co.za, http://localhost:3000")

    s = Settings()

    assert s.openai_api_key == "sk-live"
    assert s.llm_configured is True
    assert s.openai_base_url == "https://generativelanguage.example/v1beta/openai"
    assert s.chat_max_tokens == 500
    assert s.log_level == "DEBUG"
    assert s.allowed_origins == ["https://bafuputsi.co.za", "http://localhost:3000"]


def test_settings_blank_api_key_is_unconfigured(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OPENAI_API_KEY", "   ")

    assert Settings().llm_configured is False


def test_settings_rejects_bad_numbers(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CHAT_MAX_TOKENS", "lots")

    with pytest.raises(RuntimeError, match="CHAT_MAX_TOKENS"):
        Settings()
