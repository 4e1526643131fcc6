"""
Answer generation across LLM provider protocols.

Each supported provider is described by a ProviderProtocol record (endpoint
path, payload builder, response parser) registered in PROVIDER_PROTOCOLS
under its LLMProvider value. The Generator looks up the configured provider
and performs a single bounded, non-streaming request.

Dependencies: httpx, ragika.configs
System role: Generation adapter for the query pipeline
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import httpx

from ragika.configs.llm import LLMProvider, LLMSettings
from ragika.core.exceptions import GenerationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProviderProtocol:
    """Request/response contract of one generation provider."""

    path: str
    build_payload: Callable[[str, LLMSettings], dict[str, Any]]
    parse_response: Callable[[Any], str]


def _ollama_payload(prompt: str, config: LLMSettings) -> dict[str, Any]:
    return {"model": config.model, "prompt": prompt, "stream": False}


def _ollama_text(data: Any) -> str:
    text = data.get("response") if isinstance(data, dict) else None
    if not isinstance(text, str):
        raise ValueError("response field missing from generate response")
    return text


def _chat_completion_payload(prompt: str, config: LLMSettings) -> dict[str, Any]:
    return {
        "model": config.model,
        "messages": [
            {"role": "system", "content": config.system_prompt},
            {"role": "user", "content": prompt},
        ],
        "temperature": config.temperature,
        "top_p": config.top_p,
    }


def _chat_completion_text(data: Any) -> str:
    choices = data.get("choices") if isinstance(data, dict) else None
    if not isinstance(choices, list) or not choices:
        raise ValueError("no choices in chat completion response")
    message = choices[0].get("message") if isinstance(choices[0], dict) else None
    content = message.get("content") if isinstance(message, dict) else None
    if not isinstance(content, str):
        raise ValueError("first choice has no message content")
    return content


PROVIDER_PROTOCOLS: dict[LLMProvider, ProviderProtocol] = {
    LLMProvider.OLLAMA: ProviderProtocol(
        path="/api/generate",
        build_payload=_ollama_payload,
        parse_response=_ollama_text,
    ),
    LLMProvider.OPENAI_COMPAT: ProviderProtocol(
        path="/v1/chat/completions",
        build_payload=_chat_completion_payload,
        parse_response=_chat_completion_text,
    ),
}


class Generator:
    """Dispatch prompts to the configured LLM provider."""

    def __init__(self, http_client: httpx.AsyncClient, config: LLMSettings) -> None:
        """
        Initialize generator.

        Args:
            http_client: Shared async HTTP client
            config: LLM settings (provider, base URL, model, sampling, timeouts)
        """
        self._http = http_client
        self.config = config
        self.protocol = PROVIDER_PROTOCOLS[config.provider]
        self._timeout = httpx.Timeout(
            config.timeout_seconds,
            connect=config.connect_timeout_seconds,
        )

    async def generate(self, prompt: str) -> str:
        """
        Generate an answer for a prompt.

        Args:
            prompt: Fully assembled prompt

        Returns:
            str: Raw generated text (untrimmed)

        Raises:
            GenerationError: On transport failure, timeout or malformed response
        """
        provider = self.config.provider.value
        endpoint = f"{self.config.base_url.rstrip('/')}{self.protocol.path}"
        try:
            response = await self._http.post(
                endpoint,
                json=self.protocol.build_payload(prompt, self.config),
                timeout=self._timeout,
            )
            response.raise_for_status()
            data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.error(
                "LLM request failed",
                extra={"provider": provider, "endpoint": endpoint, "error": str(e)},
            )
            raise GenerationError(
                f"LLM request failed: {e}",
                provider=provider,
                details={"model": self.config.model},
            ) from e

        try:
            return self.protocol.parse_response(data)
        except ValueError as e:
            logger.error(
                "Invalid response from LLM provider",
                extra={"provider": provider, "error": str(e)},
            )
            raise GenerationError(
                "Invalid response from LLM provider",
                provider=provider,
                details={"model": self.config.model, "error": str(e)},
            ) from e
