"""Chat reply service: prompt assembly and a single LangChain ChatOpenAI call with static fallbacks."""
from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Mapping, Protocol, Sequence

from langchain_core.messages import AIMessage, HumanMessage, SystemMessage
from langchain_openai import ChatOpenAI

from support_chat.config import settings
from support_chat.prompts import EMPTY_REPLY, ERROR_REPLY, SYSTEM_PROMPT, UNCONFIGURED_REPLY
from support_chat.schemas.chat import HistoryEntry, PromptMessage

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_LIMIT = 10


class ChatModel(Protocol):
    async def ainvoke(self, input: Any, **kwargs: Any) -> Any: ...


class CompletionStatus(str, enum.Enum):
    OK = "ok"
    EMPTY = "empty"
    FAILED = "failed"


@dataclass(frozen=True)
class CompletionOutcome:
    """Result of one provider call. `content` is set only for OK."""

    status: CompletionStatus
    content: str | None = None
    error: BaseException | None = None

    def to_reply(self) -> str:
        if self.status is CompletionStatus.OK and self.content:
            return self.content
        if self.status is CompletionStatus.EMPTY:
            return EMPTY_REPLY
        return ERROR_REPLY


def _as_entry(item: Any) -> HistoryEntry | None:
    if isinstance(item, HistoryEntry):
        return item
    if isinstance(item, Mapping):
        return HistoryEntry.model_validate(dict(item))
    return None


def build_prompt_messages(
    message: str,
    history: Sequence[HistoryEntry | Mapping[str, Any]] | None = None,
    history_limit: int = DEFAULT_HISTORY_LIMIT,
) -> list[PromptMessage]:
    """
    System prompt first, then the last `history_limit` history entries in order
    (sender "user" -> user, anything else -> assistant), then the current message.
    History items that are not objects are skipped after the slice.
    """
    messages = [PromptMessage(role="system", content=SYSTEM_PROMPT)]
    recent = list(history or [])[-history_limit:] if history_limit > 0 else []
    for item in recent:
        entry = _as_entry(item)
        if entry is None:
            continue
        messages.append(
            PromptMessage(
                role="user" if entry.sender == "user" else "assistant",
                content=entry.text,
            )
        )
    messages.append(PromptMessage(role="user", content=message))
    return messages


def _to_langchain_message(m: PromptMessage) -> HumanMessage | AIMessage | SystemMessage:
    if m.role == "system":
        return SystemMessage(content=m.content)
    if m.role == "assistant":
        return AIMessage(content=m.content)
    return HumanMessage(content=m.content)


def _extract_text(response: Any) -> str:
    """Text of a chat model response, unmodified; content blocks are joined. Empty string if none."""
    content = getattr(response, "content", None)
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts = []
        for block in content:
            if isinstance(block, str):
                parts.append(block)
            elif isinstance(block, dict) and block.get("type") == "text":
                parts.append(block.get("text") or "")
        return "".join(parts)
    return ""


class ChatReplyService:
    """
    Turns a visitor message into a reply string. Never raises for provider problems:
    an unset API key, an empty completion and a failed call each map to a fixed reply.
    """

    def __init__(
        self,
        api_key: str | None,
        model: str = "gpt-4o-mini",
        temperature: float = 0.7,
        max_tokens: int = 300,
        history_limit: int = DEFAULT_HISTORY_LIMIT,
        timeout: float | None = 30.0,
        base_url: str | None = None,
        llm: ChatModel | None = None,
    ) -> None:
        self.api_key = api_key
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.history_limit = history_limit
        self.timeout = timeout
        self.base_url = base_url
        self._llm = llm

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    def _get_llm(self) -> ChatModel:
        if self._llm is None:
            self._llm = ChatOpenAI(
                model=self.model,
                api_key=self.api_key,
                base_url=self.base_url,
                temperature=self.temperature,
                max_tokens=self.max_tokens,
                timeout=self.timeout,
                max_retries=0,
            )
        return self._llm

    async def complete(self, messages: list[PromptMessage]) -> CompletionOutcome:
        """Single provider call; every exception becomes a FAILED outcome."""
        try:
            response = await self._get_llm().ainvoke([_to_langchain_message(m) for m in messages])
            text = _extract_text(response)
        except Exception as e:
            logger.exception("Chat: LLM invocation failed")
            return CompletionOutcome(CompletionStatus.FAILED, error=e)
        if not text:
            logger.warning("Chat: LLM returned no content (model=%s)", self.model)
            return CompletionOutcome(CompletionStatus.EMPTY)
        return CompletionOutcome(CompletionStatus.OK, content=text)

    async def reply(
        self,
        message: str,
        history: Sequence[HistoryEntry | Mapping[str, Any]] | None = None,
    ) -> str:
        if not self.configured:
            logger.info("Chat: OPENAI_API_KEY not set, answering with static reply")
            return UNCONFIGURED_REPLY
        messages = build_prompt_messages(message, history, self.history_limit)
        outcome = await self.complete(messages)
        return outcome.to_reply()


@lru_cache(maxsize=1)
def get_chat_service() -> ChatReplyService:
    """Shared service built from settings; FastAPI dependency."""
    return ChatReplyService(
        api_key=settings.openai_api_key,
        model=settings.chat_model,
        temperature=settings.chat_temperature,
        max_tokens=settings.chat_max_tokens,
        history_limit=settings.chat_history_limit,
        timeout=settings.openai_timeout_seconds,
        base_url=settings.openai_base_url,
    )
