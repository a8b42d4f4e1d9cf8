"""Integration tests for the FastAPI host application and the chat page."""
