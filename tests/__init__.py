"""Test package for RecFoodAI Chat.

Structure:
    - unit/: State transitions, themes, config, chat service, controller
    - integration/: FastAPI host endpoints

The Gemini API is never called; the SDK client is patched or replaced by
fakes. Leverages pytest with pytest-check for soft assertions.
"""
