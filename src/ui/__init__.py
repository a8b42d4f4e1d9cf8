"""NiceGUI interface - thin visualization layer for the chat.

Responsibilities:
    - Application state with pure transitions
    - Light/dark theme palettes
    - Controller bridging UI events and the Gemini session
    - Chat page rendering

The page holds no logic of its own; it renders controller state.
"""
