"""Gemini chat service built on the Google GenAI SDK.

Core module for the assistant's conversation handling.

Architecture Decisions:

1. **One session per page load** - The chat handle is opened once, when the
   page mounts, from whatever history exists at that moment (normally none).
   The SDK's chat object records every exchanged turn itself, so later turns
   need no resynchronisation from the UI's message list.

2. **System instruction over prompt stuffing** - The persona prompt is given to
   the session once as a system instruction. Setting ``inline_system_prompt``
   restores the older behaviour of prefixing it to every message.

3. **Full replies only** - ``send`` awaits the complete response text. No
   token streaming reaches the UI.

4. **Wrapped errors** - Provider and transport failures surface as
   ``SessionInitError`` or ``MessageSendError`` so callers handle one
   hierarchy instead of the SDK's.
"""

import logging
from collections.abc import Iterable

from google import genai
from google.genai import chats, types

from src.agent.config import SAFETY_CATEGORIES, AssistantConfig, get_assistant_config
from src.models.schemas import Message, MessageRole

logger = logging.getLogger(__name__)

# Gemini only knows "user" and "model" turns
_HISTORY_ROLES = {
    MessageRole.USER: "user",
    MessageRole.BOT: "model",
}


class ChatServiceError(Exception):
    """Base error for Gemini chat failures."""


class SessionInitError(ChatServiceError):
    """Raised when a chat session cannot be opened."""


class MessageSendError(ChatServiceError):
    """Raised when a prompt cannot be sent or its reply read."""


def to_history(messages: Iterable[Message]) -> list[types.Content]:
    """Convert chat messages to Gemini history entries.

    System messages are dropped; the persona travels as system instruction.
    """
    return [
        types.Content(role=_HISTORY_ROLES[msg.role], parts=[types.Part(text=msg.text)])
        for msg in messages
        if msg.role in _HISTORY_ROLES
    ]


class ChatSession:
    """An open conversation with Gemini."""

    def __init__(self, chat: chats.AsyncChat, config: AssistantConfig) -> None:
        self._chat = chat
        self._config = config

    def compose_prompt(self, text: str) -> str:
        """Build the prompt string actually sent for a user input."""
        if self._config.inline_system_prompt:
            return f"{self._config.system_prompt}\n{text}"
        return text

    async def send(self, text: str) -> str:
        """Send a user input and await the full reply.

        Args:
            text: Raw user input. Empty strings are sent as-is.

        Returns:
            The reply text (empty when the provider returned no text).

        Raises:
            MessageSendError: If the request or reply extraction fails.
        """
        prompt = self.compose_prompt(text)
        try:
            response = await self._chat.send_message(prompt)
            reply = response.text or ""
        except Exception as e:
            logger.error(f"Gemini send failed: {e}")
            raise MessageSendError(str(e)) from e

        logger.debug(f"Received reply ({len(reply)} chars)")
        return reply


class GeminiChatService:
    """Factory for Gemini chat sessions.

    Wraps the GenAI client with:
    - Static generation and safety configuration
    - History conversion from chat messages
    - Centralized error handling
    """

    def __init__(self, config: AssistantConfig | None = None) -> None:
        """Initialize the chat service.

        Args:
            config: Optional assistant configuration.
                    Loads from environment if not provided.
        """
        self._config = config or get_assistant_config()
        self._client = genai.Client(api_key=self._config.api_key)

    @property
    def config(self) -> AssistantConfig:
        return self._config

    def _generation_config(self) -> types.GenerateContentConfig:
        """Create the generation config shared by every turn of a session."""
        safety_settings = [
            types.SafetySetting(category=category, threshold=self._config.safety_threshold)
            for category in SAFETY_CATEGORIES
        ]
        system_instruction = (
            None if self._config.inline_system_prompt else self._config.system_prompt
        )
        return types.GenerateContentConfig(
            temperature=self._config.temperature,
            top_k=self._config.top_k,
            top_p=self._config.top_p,
            max_output_tokens=self._config.max_output_tokens,
            safety_settings=safety_settings,
            system_instruction=system_instruction,
        )

    async def start_session(self, history: Iterable[Message] = ()) -> ChatSession:
        """Open a chat session seeded with existing messages.

        Args:
            history: Messages already shown to the user.

        Returns:
            A ready ChatSession.

        Raises:
            SessionInitError: If the session cannot be created.
        """
        try:
            chat = self._client.aio.chats.create(
                model=self._config.model_name,
                config=self._generation_config(),
                history=to_history(history),
            )
        except Exception as e:
            logger.error(f"Failed to start Gemini chat: {e}")
            raise SessionInitError(str(e)) from e

        logger.info(f"Started Gemini chat session with model {self._config.model_name}")
        return ChatSession(chat, self._config)

    async def aclose(self) -> None:
        """Close the async HTTP pools held by the GenAI client."""
        await self._client.aio.aclose()
        logger.debug("Closed Gemini client")
