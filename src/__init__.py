"""RecFoodAI Chat - budget meal assistant backed by Google Gemini.

Combines NiceGUI for the chat page, the Google GenAI SDK for the
conversation, FastAPI for hosting, and Pydantic for configuration and state.

Components:
    - agent: Gemini configuration, system prompt, and chat sessions
    - models: Message, theme, and status records
    - ui: Application state, theme palettes, controller, and web page
    - api: FastAPI host application and health endpoint
"""

__version__ = "0.1.0"
