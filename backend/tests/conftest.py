from typing import Any

import pytest
from fastapi.testclient import TestClient
from langchain_core.messages import AIMessage

from support_chat.main import app
from support_chat.services.chat import ChatReplyService, get_chat_service


class FakeChatModel:
    """Stands in for ChatOpenAI: records the messages it was given and returns a canned response."""

    def __init__(self, content: Any = "", error: Exception | None = None) -> None:
        self.content = content
        self.error = error
        self.calls: list[list[Any]] = []

    async def ainvoke(self, input: Any, **kwargs: Any) -> Any:
        self.calls.append(list(input))
        if self.error is not None:
            raise self.error
        return AIMessage(content=self.content)


@pytest.fixture
def fake_llm():
    """Factory for FakeChatModel: fake_llm(content="...") or fake_llm(error=...)."""
    return FakeChatModel


@pytest.fixture
def use_service():
    """Install a ChatReplyService for the request handler; returns a TestClient."""

    def _install(service: ChatReplyService) -> TestClient:
        app.dependency_overrides[get_chat_service] = lambda: service
        return TestClient(app)

    yield _install
    app.dependency_overrides.clear()
