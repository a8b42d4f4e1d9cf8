"""Main application entry point.

Runs FastAPI with the NiceGUI chat page mounted on the same server.
Environment variables are loaded from .env file.
"""

import logging
import os
import sys

from dotenv import load_dotenv

# Load environment variables before any other imports that might need them
load_dotenv()

# Configure logging
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)


def main() -> None:
    """Application entry point.

    FastAPI handles /health, NiceGUI handles the chat page.
    Both accessible on PORT (default 8000).
    """
    import uvicorn
    from nicegui import ui

    from src.api.app import create_app
    from src.ui.chat_page import chat_page  # noqa: F401 - Registers the page

    app = create_app()

    ui.run_with(
        app,
        title="RecFoodAI",
        favicon="🍲",
        storage_secret=os.getenv("NICEGUI_STORAGE_SECRET", "recfood-chat-secret"),
    )

    port = int(os.getenv("PORT", "8000"))
    logger.info(f"Starting RecFoodAI chat on http://localhost:{port}")
    logger.info(f"Chat UI available at http://localhost:{port}/")

    uvicorn.run(
        app,
        host=os.getenv("HOST", "0.0.0.0"),
        port=port,
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )


if __name__ in {"__main__", "__mp_main__"}:
    main()
