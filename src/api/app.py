"""FastAPI application factory and configuration.

Hosts the NiceGUI chat page and exposes a health endpoint.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.models.schemas import HealthResponse

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Manage application startup and shutdown lifecycle.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control to the application while it runs.
    """
    logger.info("Starting RecFoodAI chat...")
    yield
    logger.info("Shutting down RecFoodAI chat...")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    application = FastAPI(
        title="RecFoodAI Chat",
        description=(
            "Budget meal assistant for Nigerian university students. "
            "Serves the chat page and forwards conversations to Google Gemini."
        ),
        version="0.1.0",
        docs_url="/docs",
        redoc_url=None,
        lifespan=lifespan,
    )

    @application.get("/health", response_model=HealthResponse)
    async def health_check() -> HealthResponse:
        """Check service health status."""
        return HealthResponse(status="healthy", service="recfood-chat")

    return application


app = create_app()
