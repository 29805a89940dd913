"""Chat API request/response schemas for the support chat widget."""
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class HistoryEntry(BaseModel):
    """One earlier message shown in the widget."""

    sender: str = Field("", description='"user" for the visitor; anything else is the assistant')
    text: str = Field("", description="Message text")

    @field_validator("sender", "text", mode="before")
    @classmethod
    def _as_text(cls, value: Any) -> str:
        if value is None:
            return ""
        return value if isinstance(value, str) else str(value)


class ChatRequest(BaseModel):
    """Current visitor message plus the conversation the widget has shown so far."""

    model_config = ConfigDict(populate_by_name=True)

    message: str = Field(..., min_length=1, description="The visitor's current message")
    # Raw items; entries are parsed only after the recent ones are picked.
    conversation_history: list[Any] = Field(
        default_factory=list,
        alias="conversationHistory",
        description="Earlier messages, oldest first. Only the most recent ones are forwarded.",
    )

    @field_validator("conversation_history", mode="before")
    @classmethod
    def _history_as_list(cls, value: Any) -> list[Any]:
        # Anything that is not a JSON array counts as no history.
        return value if isinstance(value, list) else []


class PromptMessage(BaseModel):
    """A role-tagged message sent to the completion API."""

    role: Literal["system", "user", "assistant"]
    content: str


class ChatResponse(BaseModel):
    reply: str = Field(..., description="Assistant reply text (or a static fallback)")


class ErrorResponse(BaseModel):
    error: str = Field(..., description="Validation error message")
