"""Gemini embedding adapter implementing the embedding port."""

from __future__ import annotations

import logging

from ....core.domain.exceptions import (
    EmbeddingAPIError,
    EmbeddingRateLimitError,
)
from ....core.ports.embedding_port import EmbeddingPort
from ..gemini_client import GeminiClientProvider, is_rate_limit_error

logger = logging.getLogger(__name__)

DEFAULT_BATCH_SIZE = 100  # Gemini embed_content accepts up to 100 inputs per call


class GeminiEmbeddingAdapter(EmbeddingPort):
    """Embeds text with a Gemini embedding model.

    Queries and documents go through the same model and request
    configuration so their vectors are comparable.
    """

    def __init__(
        self,
        provider: GeminiClientProvider,
        model_name: str = "gemini-embedding-001",
        batch_size: int = DEFAULT_BATCH_SIZE,
    ) -> None:
        self.provider = provider
        self.model_name = model_name
        self.batch_size = batch_size

    async def embed_query(self, text: str) -> list[float]:
        """Generate embedding for a single query text."""
        embeddings = await self._embed_texts([text])
        return embeddings[0]

    async def embed_documents(self, texts: list[str]) -> list[list[float]]:
        """Generate embeddings for multiple documents, preserving order."""
        if not texts:
            return []

        all_embeddings: list[list[float]] = []
        for i in range(0, len(texts), self.batch_size):
            batch = texts[i : i + self.batch_size]
            all_embeddings.extend(await self._embed_texts(batch))

        logger.debug("Embedded %d texts with %s", len(texts), self.model_name)
        return all_embeddings

    async def _embed_texts(self, texts: list[str]) -> list[list[float]]:
        client = self.provider.get()
        try:
            result = await client.aio.models.embed_content(
                model=self.model_name,
                contents=texts,
            )
        except Exception as e:
            context = {"model": self.model_name, "batch": len(texts)}
            if is_rate_limit_error(e):
                raise EmbeddingRateLimitError(
                    "Embedding rate limit exceeded", cause=e, context=context
                ) from e
            raise EmbeddingAPIError("Embedding request failed", cause=e, context=context) from e

        embeddings = getattr(result, "embeddings", None) or []
        if len(embeddings) != len(texts):
            raise EmbeddingAPIError(
                "Embedding response has the wrong number of vectors",
                context={"expected": len(texts), "received": len(embeddings)},
            )
        return [list(embedding.values) for embedding in embeddings]
