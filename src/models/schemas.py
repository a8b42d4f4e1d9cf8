from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class MessageRole(str, Enum):
    """Speaker of a chat message."""

    USER = "user"
    BOT = "bot"
    SYSTEM = "system"


class SessionStatus(str, Enum):
    """Lifecycle of the Gemini chat session."""

    UNINITIALIZED = "uninitialized"
    READY = "ready"
    FAILED = "failed"


class Theme(str, Enum):
    """Selectable page themes."""

    LIGHT = "light"
    DARK = "dark"


class Message(BaseModel):
    """A single chat message in the conversation.

    Attributes:
        text: The message text.
        role: The speaker (user, bot, or system).
        timestamp: When the message was created.
    """

    model_config = ConfigDict(frozen=True)

    text: str
    role: MessageRole
    timestamp: datetime = Field(default_factory=datetime.now)

    @property
    def display_time(self) -> str:
        return self.timestamp.strftime("%I:%M %p")


class ThemePalette(BaseModel):
    """Tailwind class tokens for one theme.

    Attributes:
        primary: Page and message pane background.
        secondary: Header, footer, and bot bubble background.
        accent: User bubble and send button background.
        text: Foreground text color.
    """

    model_config = ConfigDict(frozen=True)

    primary: str
    secondary: str
    accent: str
    text: str


class HealthResponse(BaseModel):
    """Response body of the health endpoint."""

    status: str
    service: str
