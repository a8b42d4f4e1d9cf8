"""Assistant configuration with environment variable loading.

Pydantic-based configuration for the Gemini chat session. Generation and
safety settings are static defaults; only the API key comes from the
environment.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from src.agent.prompts import SYSTEM_PROMPT

# Load environment variables from .env file
load_dotenv()

DEFAULT_MODEL = "gemini-2.0-flash"

SAFETY_CATEGORIES = (
    "HARM_CATEGORY_HARASSMENT",
    "HARM_CATEGORY_HATE_SPEECH",
    "HARM_CATEGORY_SEXUALLY_EXPLICIT",
    "HARM_CATEGORY_DANGEROUS_CONTENT",
)


class AssistantConfig(BaseModel):
    """Configuration for the Gemini chat session.

    Attributes:
        api_key: Google AI Studio API key.
        model_name: Gemini model identifier.
        temperature: Sampling temperature (0.0 = deterministic, 2.0 = creative).
        top_k: Number of highest-probability tokens considered per step.
        top_p: Cumulative probability cutoff for nucleus sampling.
        max_output_tokens: Maximum tokens in a generated reply.
        safety_threshold: Block threshold applied to every harm category.
        system_prompt: Persona instructions for the assistant.
        inline_system_prompt: Prepend the system prompt to every sent message
            instead of passing it once as the session's system instruction.
    """

    api_key: str = Field(
        default_factory=lambda: os.getenv("GEMINI_API_KEY", os.getenv("GOOGLE_API_KEY", "")),
        description="API key for Google Gemini",
        validate_default=True,
    )
    model_name: str = Field(default=DEFAULT_MODEL, description="Model to use")
    temperature: float = Field(
        default=0.9,
        ge=0.0,
        le=2.0,
        description="Sampling temperature for response generation",
    )
    top_k: int = Field(default=1, ge=1, description="Top-k sampling cutoff")
    top_p: float = Field(default=1.0, ge=0.0, le=1.0, description="Nucleus sampling cutoff")
    max_output_tokens: int = Field(
        default=2048,
        ge=1,
        le=8192,
        description="Maximum tokens in generated response",
    )
    safety_threshold: str = Field(
        default="BLOCK_MEDIUM_AND_ABOVE",
        description="Block threshold for all safety categories",
    )
    system_prompt: str = Field(default=SYSTEM_PROMPT, description="Assistant persona prompt")
    inline_system_prompt: bool = Field(
        default=False,
        description="Resend the system prompt with every message",
    )

    @field_validator("api_key")
    @classmethod
    def validate_api_key(cls, v: str) -> str:
        """Validate that API key is provided and non-empty."""
        if not v or not v.strip():
            raise ValueError("API key required. Set GEMINI_API_KEY or GOOGLE_API_KEY in .env")
        return v.strip()


def get_assistant_config() -> AssistantConfig:
    """Create assistant configuration from environment.

    Returns:
        Configured AssistantConfig instance.

    Raises:
        ValueError: If no API key is set.
    """
    return AssistantConfig()
