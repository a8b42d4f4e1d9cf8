"""Unit tests for individual components in isolation.

Coverage:
    - agent/: Config validation, history conversion, session handling
    - ui/: State transitions, theme palettes, controller flows

Uses mocks for the Google GenAI client and fakes for chat sessions.
"""
