# itinerary_agent/llm.py
from __future__ import annotations

from typing import Any

from openai import AsyncOpenAI, OpenAIError

from itinerary_agent.config import Settings, get_settings
from itinerary_agent.errors import BackendUnavailable, GenerationFailed
from itinerary_agent.logging_setup import get_logger
from itinerary_agent.prompts import SYSTEM_PROMPT

logger = get_logger(__name__)


class OpenAIGenerationClient:
    """Single-shot chat completion against the OpenAI API.

    The credential comes from the ``Settings`` passed in. When it is missing
    the client reports ``available = False`` and ``complete`` raises
    :class:`BackendUnavailable` without touching the network, which callers
    use to switch to demo behaviour. Tests can inject ``sdk_client`` to avoid
    real calls.
    """

    def __init__(self, settings: Settings, *, sdk_client: Any | None = None) -> None:
        self.settings = settings
        if sdk_client is None and settings.backend_configured:
            # One attempt per stage; the SDK would otherwise retry twice.
            sdk_client = AsyncOpenAI(
                api_key=settings.openai_api_key,
                timeout=settings.request_timeout,
                max_retries=0,
            )
        self._client = sdk_client
        if self._client is None:
            logger.warning("OPENAI_API_KEY not set; itinerary generation will run in demo mode")

    @property
    def available(self) -> bool:
        return self._client is not None

    async def complete(self, prompt: str) -> str:
        """Send ``prompt`` and return the raw completion text."""
        if self._client is None:
            raise BackendUnavailable("No API key configured for the generation backend")

        logger.info("Invoking LLM model %s (%d prompt chars)", self.settings.model, len(prompt))
        try:
            resp = await self._client.chat.completions.create(
                model=self.settings.model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": prompt},
                ],
                temperature=self.settings.temperature,
            )
        except OpenAIError as exc:
            logger.warning("LLM call to %s failed: %s", self.settings.model, exc)
            raise GenerationFailed(f"Generation backend error: {exc}") from exc

        raw = resp.choices[0].message.content if resp.choices else None
        if not raw:
            raise GenerationFailed("Generation backend returned an empty completion")
        logger.debug("LLM returned %d chars", len(raw))
        return raw


def build_generation_client(settings: Settings | None = None) -> OpenAIGenerationClient:
    return OpenAIGenerationClient(settings or get_settings())
