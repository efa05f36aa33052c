"""FastAPI dependency injection for askdoc."""

import logging
from functools import lru_cache

from ....config.settings import settings
from ....core.services.answer_service import AnswerService, PipelineConfig
from ...outbound.embedding.gemini_embedding_adapter import GeminiEmbeddingAdapter
from ...outbound.gemini_client import GeminiClientProvider
from ...outbound.llm.gemini_adapter import GeminiAdapter

logger = logging.getLogger(__name__)


@lru_cache
def get_client_provider() -> GeminiClientProvider:
    """Get or create the shared Gemini client provider."""
    return GeminiClientProvider(settings.google_api_key)


@lru_cache
def get_embedder() -> GeminiEmbeddingAdapter:
    """Get or create the embedding adapter singleton."""
    logger.info("Initializing GeminiEmbeddingAdapter (%s)...", settings.embedding_model)
    return GeminiEmbeddingAdapter(
        get_client_provider(),
        model_name=settings.embedding_model,
        batch_size=settings.embedding_batch_size,
    )


@lru_cache
def get_llm() -> GeminiAdapter:
    """Get or create the LLM adapter singleton."""
    logger.info("Initializing GeminiAdapter (%s)...", settings.llm_model)
    return GeminiAdapter(
        get_client_provider(),
        model_name=settings.llm_model,
        max_tokens=settings.llm_max_tokens,
    )


def get_answer_service() -> AnswerService:
    """Build a fresh AnswerService for the request around the shared adapters."""
    return AnswerService(
        embedder=get_embedder(),
        llm=get_llm(),
        config=PipelineConfig.from_settings(settings),
    )
