"""UI-independent chat controller.

Owns the ``ChatState`` of one browser client and the Gemini session behind it.
The NiceGUI page only renders ``controller.state`` and forwards user events
here; tests drive the controller directly with a fake service.
"""

import logging
from collections.abc import Callable
from datetime import datetime
from typing import Protocol

from src.agent.gemini_chat import ChatServiceError, GeminiChatService
from src.models.schemas import Message
from src.ui import state as transitions
from src.ui.state import ChatState

logger = logging.getLogger(__name__)


class ChatSessionLike(Protocol):
    async def send(self, text: str) -> str: ...


class ChatServiceLike(Protocol):
    async def start_session(self, history: tuple[Message, ...]) -> ChatSessionLike: ...

    async def aclose(self) -> None: ...


class ChatController:
    """Coordinates state transitions with the Gemini session."""

    def __init__(
        self,
        service_factory: Callable[[], ChatServiceLike] = GeminiChatService,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        """Initialize the controller.

        Args:
            service_factory: Builds the chat service. Called once, during
                ``initialize``, so configuration errors surface there.
            clock: Source of message timestamps.
        """
        self._service_factory = service_factory
        self._clock = clock
        self._service: ChatServiceLike | None = None
        self._session: ChatSessionLike | None = None
        self._listeners: list[Callable[[], None]] = []
        self.state = ChatState()

    @property
    def has_session(self) -> bool:
        return self._session is not None

    def subscribe(self, listener: Callable[[], None]) -> None:
        """Register a callback run after every visible state change."""
        self._listeners.append(listener)

    def _update(self, new_state: ChatState, notify: bool = True) -> None:
        self.state = new_state
        if notify:
            for listener in self._listeners:
                listener()

    async def initialize(self) -> None:
        """Open the Gemini session from the current history.

        Runs once per page load. Failures are shown in the error banner and
        not retried.
        """
        if self._service is not None:
            return

        try:
            self._service = self._service_factory()
            self._session = await self._service.start_session(self.state.messages)
        except (ChatServiceError, ValueError) as e:
            logger.error(f"Chat initialization failed: {e}")
            self._update(transitions.session_failed(self.state))
            return

        self._update(transitions.session_ready(self.state))

    def set_draft(self, text: str) -> None:
        # Typing does not re-render the page
        self._update(transitions.with_draft(self.state, text), notify=False)

    def set_theme(self, theme: str) -> None:
        self._update(transitions.with_theme(self.state, theme))

    async def send_message(self) -> None:
        """Send the current draft and append the reply.

        The user message is appended and the draft cleared before the API call
        starts. A second send while one is in flight is ignored.
        """
        if self.state.is_sending:
            logger.debug("Send ignored, another message is in flight")
            return

        text = self.state.draft
        self._update(transitions.submit_draft(self.state, self._clock()))

        try:
            if self._session is None:
                logger.debug("No chat session, message not sent")
                return
            try:
                reply = await self._session.send(text)
            except ChatServiceError as e:
                logger.warning(f"Message send failed: {e}")
                self._update(transitions.send_failed(self.state), notify=False)
                return
            self._update(transitions.append_reply(self.state, reply, self._clock()), notify=False)
        finally:
            self._update(transitions.send_finished(self.state))

    async def close(self) -> None:
        """Release the chat service once the page is gone.

        The message list is kept; later sends append user messages only.
        """
        self._listeners.clear()
        self._session = None
        service, self._service = self._service, None
        if service is not None:
            await service.aclose()
            logger.debug("Chat controller closed")
