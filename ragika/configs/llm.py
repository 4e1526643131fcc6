"""
LLM generation configuration.

Selects the generation provider protocol and its request parameters.

Dependencies: pydantic, pydantic_settings
System role: Generation backend configuration
"""

from enum import Enum
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import SettingsConfigDict

from ragika.configs.base import BaseSettings


class LLMProvider(str, Enum):
    """Supported generation provider protocols."""

    OLLAMA = "ollama"
    OPENAI_COMPAT = "openai_compat"


class LLMSettings(BaseSettings):
    """Generation backend configuration."""

    model_config = SettingsConfigDict(env_prefix="LLM_")

    provider: LLMProvider = Field(
        default=LLMProvider.OLLAMA,
        description="Provider protocol: 'ollama' or 'openai_compat'",
    )
    base_url: str = Field(
        default="http://localhost:11434",
        description="LLM server base URL",
    )
    model: str = Field(default="llama3.1:8b-instruct", description="Model name")
    temperature: float = Field(default=0.2, ge=0.0, le=2.0, description="Sampling temperature")
    top_p: float = Field(default=0.95, gt=0.0, le=1.0, description="Nucleus sampling mass")
    system_prompt: str = Field(
        default="You are a helpful assistant.",
        description="System turn for chat-completion providers",
    )
    timeout_seconds: float = Field(
        default=300.0,
        gt=0,
        description="Total generation timeout in seconds",
    )
    connect_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Connection timeout for the generation backend",
    )

    @field_validator("provider", mode="before")
    @classmethod
    def normalize_provider(cls, v: Any) -> Any:
        """Accept provider names case-insensitively."""
        if isinstance(v, str):
            return v.strip().lower()
        return v
