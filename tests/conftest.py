"""Pytest fixtures and shared test configuration.

Fixtures:
    - async_client: HTTPX client for API testing
    - fixed_now: Deterministic timestamp for message records
    - fake_session / fake_service: Stand-ins for the Gemini chat service
    - controller: ChatController wired to the fake service
"""

import asyncio
from collections.abc import AsyncGenerator, Iterable
from datetime import datetime

import pytest
from httpx import ASGITransport, AsyncClient

from src.agent.gemini_chat import MessageSendError
from src.api import app
from src.models.schemas import Message
from src.ui.controller import ChatController

MOCK_REPLY = "Try jollof rice with beans. It costs little and keeps you full."


class FakeChatSession:
    """Records sent prompts and returns a canned reply."""

    def __init__(self, reply: str = MOCK_REPLY) -> None:
        self.reply = reply
        self.sent: list[str] = []
        self.fail = False
        self.gate: asyncio.Event | None = None

    async def send(self, text: str) -> str:
        self.sent.append(text)
        if self.gate is not None:
            await self.gate.wait()
        if self.fail:
            raise MessageSendError("quota exceeded")
        return self.reply


class FakeChatService:
    """Hands out a single FakeChatSession."""

    def __init__(self, session: FakeChatSession) -> None:
        self.session = session
        self.history: tuple[Message, ...] | None = None
        self.start_calls = 0
        self.closed = False

    async def start_session(self, history: Iterable[Message] = ()) -> FakeChatSession:
        self.start_calls += 1
        self.history = tuple(history)
        return self.session

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture
async def async_client() -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for API testing.

    Yields:
        Configured AsyncClient for making test requests.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 6, 1, 18, 30, 0)


@pytest.fixture
def mock_reply() -> str:
    return MOCK_REPLY


@pytest.fixture
def fake_session() -> FakeChatSession:
    return FakeChatSession()


@pytest.fixture
def fake_service(fake_session: FakeChatSession) -> FakeChatService:
    return FakeChatService(fake_session)


@pytest.fixture
def controller(fake_service: FakeChatService, fixed_now: datetime) -> ChatController:
    """Controller backed by the fake service, not yet initialized."""
    return ChatController(service_factory=lambda: fake_service, clock=lambda: fixed_now)
