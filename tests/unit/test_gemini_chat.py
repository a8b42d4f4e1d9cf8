"""Unit tests for GeminiChatService and ChatSession.

The GenAI client is patched; no request leaves the process.
"""

from collections.abc import Iterator
from datetime import datetime
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
import pytest_check as check

from src.agent.config import AssistantConfig
from src.agent.gemini_chat import (
    ChatSession,
    GeminiChatService,
    MessageSendError,
    SessionInitError,
    to_history,
)
from src.models.schemas import Message, MessageRole


@pytest.fixture
def config() -> AssistantConfig:
    return AssistantConfig(api_key="test-key", model_name="gemini-test")


@pytest.fixture
def mock_client_class() -> Iterator[MagicMock]:
    with patch("src.agent.gemini_chat.genai.Client") as client_class:
        yield client_class


@pytest.fixture
def mock_chat(mock_client_class: MagicMock) -> MagicMock:
    chat = MagicMock()
    chat.send_message = AsyncMock(return_value=SimpleNamespace(text="Eat beans and plantain."))
    mock_client_class.return_value.aio.chats.create.return_value = chat
    return chat


class TestToHistory:
    """Tests for message to Gemini history conversion."""

    def test_maps_user_and_bot_roles(self) -> None:
        """User turns stay 'user', bot turns become 'model'."""
        now = datetime.now()
        messages = [
            Message(text="hi", role=MessageRole.USER, timestamp=now),
            Message(text="hello", role=MessageRole.BOT, timestamp=now),
        ]

        history = to_history(messages)

        assert [entry.role for entry in history] == ["user", "model"]
        assert [entry.parts[0].text for entry in history] == ["hi", "hello"]

    def test_drops_system_messages(self) -> None:
        """System messages are not replayed as history."""
        messages = [Message(text="persona", role=MessageRole.SYSTEM)]

        assert to_history(messages) == []

    def test_empty_history(self) -> None:
        assert to_history([]) == []


class TestGeminiChatService:
    """Tests for session creation."""

    def test_client_uses_config_api_key(
        self, config: AssistantConfig, mock_client_class: MagicMock
    ) -> None:
        GeminiChatService(config=config)

        mock_client_class.assert_called_once_with(api_key="test-key")

    async def test_start_session_passes_static_config(
        self, config: AssistantConfig, mock_client_class: MagicMock, mock_chat: MagicMock
    ) -> None:
        """Session is created with the fixed model, sampling and safety settings."""
        service = GeminiChatService(config=config)

        session = await service.start_session()

        assert isinstance(session, ChatSession)
        create = mock_client_class.return_value.aio.chats.create
        create.assert_called_once()
        kwargs = create.call_args.kwargs
        generation = kwargs["config"]

        check.equal(kwargs["model"], "gemini-test")
        check.equal(kwargs["history"], [])
        check.equal(generation.temperature, 0.9)
        check.equal(generation.top_k, 1)
        check.equal(generation.top_p, 1.0)
        check.equal(generation.max_output_tokens, 2048)
        check.equal(len(generation.safety_settings), 4)
        check.is_not_none(generation.system_instruction)
        for setting in generation.safety_settings:
            check.equal(setting.threshold, "BLOCK_MEDIUM_AND_ABOVE")

    async def test_start_session_omits_system_instruction_when_inlined(
        self, mock_client_class: MagicMock, mock_chat: MagicMock
    ) -> None:
        config = AssistantConfig(api_key="test-key", inline_system_prompt=True)
        service = GeminiChatService(config=config)

        await service.start_session()

        generation = mock_client_class.return_value.aio.chats.create.call_args.kwargs["config"]
        assert generation.system_instruction is None

    async def test_start_session_wraps_client_errors(
        self, config: AssistantConfig, mock_client_class: MagicMock
    ) -> None:
        """SDK failures surface as SessionInitError."""
        mock_client_class.return_value.aio.chats.create.side_effect = RuntimeError("bad key")
        service = GeminiChatService(config=config)

        with pytest.raises(SessionInitError, match="bad key"):
            await service.start_session()

    async def test_aclose_closes_async_client(
        self, config: AssistantConfig, mock_client_class: MagicMock
    ) -> None:
        """Closing the service releases the GenAI async client."""
        mock_client_class.return_value.aio.aclose = AsyncMock()
        service = GeminiChatService(config=config)

        await service.aclose()

        mock_client_class.return_value.aio.aclose.assert_awaited_once()


class TestChatSession:
    """Tests for sending prompts through a session."""

    async def test_send_returns_reply_text(
        self, config: AssistantConfig, mock_chat: MagicMock
    ) -> None:
        session = await GeminiChatService(config=config).start_session()

        reply = await session.send("cheap dinner idea")

        assert reply == "Eat beans and plantain."
        mock_chat.send_message.assert_awaited_once_with("cheap dinner idea")

    async def test_send_prefixes_system_prompt_when_inlined(self, mock_chat: MagicMock) -> None:
        config = AssistantConfig(api_key="test-key", system_prompt="Be brief.", inline_system_prompt=True)
        session = await GeminiChatService(config=config).start_session()

        await session.send("lunch?")

        mock_chat.send_message.assert_awaited_once_with("Be brief.\nlunch?")

    async def test_send_empty_text_as_is(self, config: AssistantConfig, mock_chat: MagicMock) -> None:
        """Empty input is not validated away."""
        session = await GeminiChatService(config=config).start_session()

        await session.send("")

        mock_chat.send_message.assert_awaited_once_with("")

    async def test_send_missing_text_returns_empty_string(
        self, config: AssistantConfig, mock_chat: MagicMock
    ) -> None:
        """A reply without text (e.g. blocked by safety filters) yields ''."""
        mock_chat.send_message.return_value = SimpleNamespace(text=None)
        session = await GeminiChatService(config=config).start_session()

        assert await session.send("hi") == ""

    async def test_send_wraps_api_errors(self, config: AssistantConfig, mock_chat: MagicMock) -> None:
        """API failures surface as MessageSendError."""
        mock_chat.send_message.side_effect = ConnectionError("network down")
        session = await GeminiChatService(config=config).start_session()

        with pytest.raises(MessageSendError, match="network down"):
            await session.send("hi")
