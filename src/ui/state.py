"""Application state and its transitions.

The page's whole mutable state lives in one frozen ``ChatState``. Every change
goes through a pure function that returns a new state, so transitions can be
tested without a browser or an API client.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from src.models.schemas import Message, MessageRole, SessionStatus, Theme

INIT_ERROR_MESSAGE = "Failed to initialize chat, please try again"
SEND_ERROR_MESSAGE = "Failed to send message. Please try again"


class ChatState(BaseModel):
    """Snapshot of the chat page.

    Attributes:
        messages: Conversation in insertion order. Only ever grows.
        draft: Current contents of the input field.
        theme: Selected theme name (unknown names render as light).
        error: Last failure message, if any.
        session_status: Whether the Gemini session is usable.
        is_sending: True while a message is awaiting its reply.
    """

    model_config = ConfigDict(frozen=True)

    messages: tuple[Message, ...] = ()
    draft: str = ""
    theme: str = Theme.LIGHT.value
    error: str | None = None
    session_status: SessionStatus = SessionStatus.UNINITIALIZED
    is_sending: bool = False


def with_draft(state: ChatState, text: str) -> ChatState:
    return state.model_copy(update={"draft": text})


def with_theme(state: ChatState, theme: str) -> ChatState:
    return state.model_copy(update={"theme": theme})


def with_error(state: ChatState, error: str) -> ChatState:
    return state.model_copy(update={"error": error})


def session_ready(state: ChatState) -> ChatState:
    return state.model_copy(update={"session_status": SessionStatus.READY})


def session_failed(state: ChatState) -> ChatState:
    return state.model_copy(
        update={"session_status": SessionStatus.FAILED, "error": INIT_ERROR_MESSAGE}
    )


def submit_draft(state: ChatState, now: datetime | None = None) -> ChatState:
    """Move the draft into the conversation as a user message.

    The draft is cleared and the state marked as sending in the same step.
    """
    message = Message(text=state.draft, role=MessageRole.USER, timestamp=now or datetime.now())
    return state.model_copy(
        update={"messages": (*state.messages, message), "draft": "", "is_sending": True}
    )


def append_reply(state: ChatState, text: str, now: datetime | None = None) -> ChatState:
    """Append a bot reply and clear any earlier error."""
    message = Message(text=text, role=MessageRole.BOT, timestamp=now or datetime.now())
    return state.model_copy(update={"messages": (*state.messages, message), "error": None})


def send_failed(state: ChatState) -> ChatState:
    return with_error(state, SEND_ERROR_MESSAGE)


def send_finished(state: ChatState) -> ChatState:
    return state.model_copy(update={"is_sending": False})
