"""Gemini chat orchestration.

Opens one conversational session per page load and forwards prompts to it.

Responsibilities:
    - Assistant configuration loaded from the environment
    - System prompt for the RecFoodAI persona
    - Session creation with static generation and safety settings
    - Prompt composition and full-reply retrieval

Maintains clean separation from the UI layer.
"""

from src.agent.config import AssistantConfig, get_assistant_config
from src.agent.gemini_chat import (
    ChatServiceError,
    ChatSession,
    GeminiChatService,
    MessageSendError,
    SessionInitError,
)
from src.agent.prompts import SYSTEM_PROMPT

__all__ = [
    "SYSTEM_PROMPT",
    "AssistantConfig",
    "ChatServiceError",
    "ChatSession",
    "GeminiChatService",
    "MessageSendError",
    "SessionInitError",
    "get_assistant_config",
]
