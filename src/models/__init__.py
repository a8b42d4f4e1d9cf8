"""Pydantic records shared by the agent, UI, and API layers.

Models:
    - Message: Individual message in the conversation
    - MessageRole: Speaker of a message (user, bot, system)
    - SessionStatus: Gemini session lifecycle
    - Theme: Selectable page themes
    - ThemePalette: Style tokens for a theme
    - HealthResponse: Health endpoint payload
"""

from src.models.schemas import (
    HealthResponse,
    Message,
    MessageRole,
    SessionStatus,
    Theme,
    ThemePalette,
)

__all__ = [
    "HealthResponse",
    "Message",
    "MessageRole",
    "SessionStatus",
    "Theme",
    "ThemePalette",
]
