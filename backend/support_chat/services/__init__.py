"""Application services (chat replies)."""
from support_chat.services.chat import (
    ChatReplyService,
    CompletionOutcome,
    CompletionStatus,
    build_prompt_messages,
    get_chat_service,
)

__all__ = [
    "ChatReplyService",
    "CompletionOutcome",
    "CompletionStatus",
    "build_prompt_messages",
    "get_chat_service",
]
