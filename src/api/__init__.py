"""FastAPI host for the chat page.

Endpoints:
    - GET /health: Service health status
    - GET /: NiceGUI chat page (mounted by src.main)
"""

from src.api.app import app, create_app

__all__ = ["app", "create_app"]
