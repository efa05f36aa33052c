"""Gemini adapter implementing the LLM port using the google-genai SDK."""

from __future__ import annotations

import logging

from ....core.domain.exceptions import (
    LLMConnectionError,
    LLMGenerationError,
    LLMRateLimitError,
)
from ....core.domain.utils import normalize_text
from ....core.ports.llm_port import LLMPort
from ..gemini_client import GeminiClientProvider, is_rate_limit_error

logger = logging.getLogger(__name__)


class GeminiAdapter(LLMPort):
    """Generates answers with a Gemini chat model."""

    def __init__(
        self,
        provider: GeminiClientProvider,
        model_name: str = "gemini-2.0-flash",
        max_tokens: int = 1024,
    ) -> None:
        self.provider = provider
        self.model_name = model_name
        self.max_tokens = max_tokens

    async def generate(self, prompt: str, temperature: float = 0.1) -> str:
        """Generate a response from the LLM.

        Args:
            prompt: The fully composed prompt.
            temperature: Sampling temperature; keep low for grounded answers.

        Returns:
            Generated text response.
        """
        from google.genai.types import GenerateContentConfig

        client = self.provider.get()
        context = {"model": self.model_name}

        try:
            response = await client.aio.models.generate_content(
                model=self.model_name,
                contents=prompt,
                config=GenerateContentConfig(
                    temperature=temperature,
                    max_output_tokens=self.max_tokens,
                ),
            )
        except Exception as e:
            if is_rate_limit_error(e):
                raise LLMRateLimitError("LLM rate limit exceeded", cause=e, context=context) from e
            raise LLMConnectionError("LLM request failed", cause=e, context=context) from e

        # Safety filters return no candidates
        if not response.candidates or not response.text:
            raise LLMGenerationError("LLM returned no text", context=context)

        answer = normalize_text(response.text).strip()
        logger.debug("LLM response received | answer_chars=%d", len(answer))
        return answer
