"""
LLM Completion Service - Prompt in, text out

Thin wrapper over OpenAI chat completions used by AI role matching. The
matcher only depends on the CompletionService protocol, so tests can
substitute any object with an async complete(prompt) method.

Usage:
    from openai import AsyncOpenAI

    client = AsyncOpenAI(api_key="sk-...")
    service = OpenAICompletionService(openai_client=client)
    text = await service.complete("Return a JSON object ...")
"""

import logging
from typing import Any, Optional, Protocol, runtime_checkable

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are a career advisor for students and early-career technologists. "
    "Answer with valid JSON only."
)


class CompletionError(RuntimeError):
    """The completion provider returned no usable content."""


@runtime_checkable
class CompletionService(Protocol):
    """Anything that turns a prompt into completion text."""

    async def complete(self, prompt: str) -> str:
        ...


class OpenAICompletionService:
    """
    CompletionService backed by the OpenAI chat completions API.

    Attributes:
        client: Async OpenAI client
        model: Chat model name
        temperature: Sampling temperature
        max_tokens: Completion token limit
    """

    def __init__(
        self,
        openai_client: Any,
        model: str = "gpt-4o-mini",
        temperature: float = 0.7,
        max_tokens: int = 800,
        system_prompt: str = SYSTEM_PROMPT,
    ):
        self.client = openai_client
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.system_prompt = system_prompt

    async def complete(self, prompt: str) -> str:
        """
        Request one completion.

        Raises:
            CompletionError: Empty response content
            openai.OpenAIError: Transport/API failures propagate unchanged
        """
        response = await self.client.chat.completions.create(
            model=self.model,
            messages=[
                {"role": "system", "content": self.system_prompt},
                {"role": "user", "content": prompt},
            ],
            temperature=self.temperature,
            max_tokens=self.max_tokens,
        )

        content = response.choices[0].message.content if response.choices else None
        if not content:
            raise CompletionError("LLM returned an empty completion")
        return content


# ==============================================================================
# Singleton Pattern for Dependency Injection
# ==============================================================================

_completion_service: Optional[OpenAICompletionService] = None


def get_completion_service() -> Optional[CompletionService]:
    """
    Get the shared completion service.

    Returns:
        Shared OpenAICompletionService, or None when no API key is
        configured (callers then use deterministic fallbacks)
    """
    global _completion_service
    from launchpad.config import get_settings

    settings = get_settings()
    if not settings.openai_api_key.strip():
        return None

    if _completion_service is None:
        from openai import AsyncOpenAI

        client = AsyncOpenAI(api_key=settings.openai_api_key)
        _completion_service = OpenAICompletionService(
            openai_client=client,
            model=settings.openai_model,
            temperature=settings.llm_temperature,
            max_tokens=settings.llm_max_tokens,
        )
        logger.info(f"Created OpenAI completion service (model={settings.openai_model})")
    return _completion_service
