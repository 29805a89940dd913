from support_chat.schemas.chat import (
    ChatRequest,
    ChatResponse,
    ErrorResponse,
    HistoryEntry,
    PromptMessage,
)

__all__ = [
    "ChatRequest",
    "ChatResponse",
    "ErrorResponse",
    "HistoryEntry",
    "PromptMessage",
]
