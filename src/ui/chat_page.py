"""NiceGUI chat page for RecFoodAI."""

import logging

from nicegui import ui

from src.agent.gemini_chat import GeminiChatService
from src.models.schemas import MessageRole, Theme
from src.ui.controller import ChatController
from src.ui.themes import THEME_OPTIONS, get_theme_colors

logger = logging.getLogger(__name__)

CUSTOM_CSS = """
<link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600&display=swap"
      rel="stylesheet">
<style>
    * { font-family: 'Inter', sans-serif; }

    .chat-root { transition: background-color 0.3s, color 0.3s; }

    .bubble { border-radius: 0.5rem; max-width: 20rem; }
    .bubble p { margin: 0; }
    .bubble ul, .bubble ol { margin: 0.5rem 0; padding-left: 1.25rem; }
    .bubble code { font-family: 'Menlo', 'Monaco', monospace; }
</style>
"""


def render_message(controller: ChatController, index: int) -> None:
    """Render one message bubble, right-aligned for the user."""
    msg = controller.state.messages[index]
    colors = get_theme_colors(controller.state.theme)
    is_user = msg.role == MessageRole.USER
    align = "justify-end" if is_user else "justify-start"
    bubble = f"{colors.accent} text-white" if is_user else f"{colors.secondary} {colors.text}"

    with ui.row().classes(f"w-full {align}").mark(f"{msg.role.value}-message"):
        with ui.column().classes(f"bubble {bubble} p-4 shadow-lg gap-1"):
            if is_user:
                ui.label(msg.text).classes("text-sm whitespace-pre-wrap")
            else:
                ui.markdown(msg.text).classes("text-sm")
            ui.label(msg.display_time).classes("text-xs mt-1 opacity-75")


@ui.page("/")
async def chat_page() -> None:
    """Main chat page."""
    ui.add_head_html(CUSTOM_CSS)
    controller = ChatController(service_factory=GeminiChatService)
    await controller.initialize()
    ui.context.client.on_delete(controller.close)

    @ui.refreshable
    def layout() -> None:
        state = controller.state
        colors = get_theme_colors(state.theme)
        field_props = "outlined dense dark" if state.theme == Theme.DARK.value else "outlined dense"

        with ui.column().classes(f"chat-root w-full h-screen gap-0 {colors.primary}"):
            # Header
            with ui.row().classes(
                f"w-full p-4 {colors.secondary} justify-between items-center shadow-md"
            ):
                ui.label("RecFoodAI").classes(f"text-3xl font-semibold {colors.text}")
                with ui.row().classes("items-center gap-4"):
                    ui.label("Theme").classes(f"text-lg {colors.text}")
                    ui.select(
                        THEME_OPTIONS,
                        value=state.theme if state.theme in THEME_OPTIONS else None,
                        on_change=lambda e: controller.set_theme(e.value),
                    ).classes("w-28").props(field_props)

            # Messages
            with ui.scroll_area().classes(f"flex-grow w-full {colors.primary}") as scroll:
                with ui.column().classes("w-full p-6 gap-4"):
                    for index in range(len(state.messages)):
                        render_message(controller, index)
            scroll.scroll_to(percent=1.0)

            # Error banner
            if state.error:
                ui.label(state.error).classes("text-red-500 text-sm p-4").mark("error-banner")

            # Input
            with ui.row().classes(f"w-full p-4 {colors.secondary} shadow-inner items-center gap-4"):
                ui.input(
                    placeholder="Type your message...",
                    value=state.draft,
                    on_change=lambda e: controller.set_draft(e.value),
                ).classes("flex-grow").props(field_props).mark("message-input").on(
                    "keydown.enter.prevent", controller.send_message
                )
                send_btn = ui.button("Send", on_click=controller.send_message).classes(
                    f"p-3 !{colors.accent} text-white rounded-lg"
                ).props("unelevated").mark("send-button")
                send_btn.set_enabled(not state.is_sending)

    layout()
    controller.subscribe(layout.refresh)
    logger.info(f"Chat page mounted (session {controller.state.session_status.value})")

