"""Use-case service answering one question about one document.

Each call runs the full pipeline from scratch: validate, split, embed,
rank, assemble, prompt, generate. Nothing is cached between calls.
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Awaitable
from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeVar

from ..domain import Answer, Chunk
from ..domain.exceptions import (
    AskDocError,
    DimensionMismatchError,
    EmbeddingError,
    EmbeddingTimeoutError,
    EmptyDocumentError,
    EmptyQuestionError,
    LLMError,
    LLMTimeoutError,
    ServerError,
)
from ..domain.utils import normalize_text
from ..ports.embedding_port import EmbeddingPort
from ..ports.llm_port import LLMPort
from .chunker import RecursiveTextSplitter
from .context_assembler import ContextAssembler
from .prompts import build_answer_prompt
from .ranker import SimilarityRanker

if TYPE_CHECKING:
    from ...config.settings import Settings

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Caller-safe messages per failing stage
PUBLIC_MESSAGES = {
    "chunking": "The document could not be split into passages.",
    "embedding": "Embedding request failed.",
    "ranking": "Passages could not be ranked.",
    "generation": "Answer generation failed.",
}


@dataclass(frozen=True)
class PipelineConfig:
    """Per-request pipeline parameters."""

    chunk_size: int = 1000
    chunk_overlap: int = 200
    top_k: int = 4
    temperature: float = 0.1
    embedding_timeout: float | None = 30.0
    generation_timeout: float | None = 60.0

    @classmethod
    def from_settings(cls, settings: Settings) -> PipelineConfig:
        return cls(
            chunk_size=settings.chunk_size,
            chunk_overlap=settings.chunk_overlap,
            top_k=settings.top_k_results,
            temperature=settings.llm_temperature,
            embedding_timeout=settings.embedding_timeout_seconds,
            generation_timeout=settings.generation_timeout_seconds,
        )


class AnswerService:
    """Orchestrates chunking, embedding, ranking and generation."""

    def __init__(
        self,
        embedder: EmbeddingPort,
        llm: LLMPort,
        config: PipelineConfig | None = None,
    ) -> None:
        self.embedder = embedder
        self.llm = llm
        self.config = config or PipelineConfig()
        self.splitter = RecursiveTextSplitter(self.config.chunk_size, self.config.chunk_overlap)
        self.ranker = SimilarityRanker(self.config.top_k)
        self.assembler = ContextAssembler()

    async def answer(self, document: str | None, question: str | None) -> Answer:
        """Answer ``question`` using only passages from ``document``.

        Raises:
            EmptyDocumentError: Document is missing or empty.
            EmptyQuestionError: Question is missing or empty.
            ServerError: Any later stage failed; ``cause`` holds the original error.
        """
        if not document:
            raise EmptyDocumentError("Missing 'text'.")
        if not question:
            raise EmptyQuestionError("Missing 'question'.")

        document = normalize_text(document)
        question = normalize_text(question)
        started = time.perf_counter()
        logger.info(
            "Question received | document_chars=%d | question_chars=%d",
            len(document),
            len(question),
        )

        stage = "chunking"
        try:
            chunks = self.splitter.split(document)

            stage = "embedding"
            chunk_vectors, query_vector = await self._embed(chunks, question)

            stage = "ranking"
            if len(chunk_vectors) != len(chunks):
                raise DimensionMismatchError(
                    "Embedding count does not match chunk count",
                    context={"chunks": len(chunks), "vectors": len(chunk_vectors)},
                )
            ranked = self.ranker.rank(query_vector, list(zip(chunks, chunk_vectors)))
            context = self.assembler.assemble(ranked)

            stage = "generation"
            prompt = build_answer_prompt(context, question)
            text = await self._with_timeout(
                self.llm.generate(prompt, temperature=self.config.temperature),
                self.config.generation_timeout,
                LLMTimeoutError,
                "Generation timed out",
            )
        except Exception as e:
            error = ServerError(
                f"Pipeline failed during {stage}: {e}",
                stage=stage,
                public_message=PUBLIC_MESSAGES[stage],
                cause=e,
                context={"error_code": e.error_code} if isinstance(e, AskDocError) else None,
            )
            logger.error(
                "Answer pipeline failed | stage=%s | error=%s: %s",
                stage,
                type(e).__name__,
                e,
                exc_info=e,
            )
            raise error from e

        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            "Answer complete | chunks=%d | context_chunks=%d | top_score=%s | latency_ms=%.1f",
            len(chunks),
            len(ranked),
            f"{ranked[0].score:.3f}" if ranked else "n/a",
            elapsed_ms,
        )
        return Answer(
            text=text,
            context=ranked,
            chunk_count=len(chunks),
            model_used=getattr(self.llm, "model_name", None),
        )

    async def _embed(
        self, chunks: list[Chunk], question: str
    ) -> tuple[list[list[float]], list[float]]:
        """Embed chunks (one batch) and question (one call) concurrently."""
        timeout = self.config.embedding_timeout
        query_call = self._with_timeout(
            self.embedder.embed_query(question),
            timeout,
            EmbeddingTimeoutError,
            "Question embedding timed out",
        )
        if not chunks:
            return [], await query_call

        documents_call = self._with_timeout(
            self.embedder.embed_documents([chunk.text for chunk in chunks]),
            timeout,
            EmbeddingTimeoutError,
            "Chunk embedding timed out",
        )
        tasks = [asyncio.ensure_future(documents_call), asyncio.ensure_future(query_call)]
        try:
            chunk_vectors, query_vector = await asyncio.gather(*tasks)
        except BaseException:
            # One call failed or we were cancelled; stop the other one too
            for task in tasks:
                task.cancel()
            raise
        return chunk_vectors, query_vector

    @staticmethod
    async def _with_timeout(
        call: Awaitable[T],
        timeout: float | None,
        error_type: type[EmbeddingError] | type[LLMError],
        message: str,
    ) -> T:
        try:
            return await asyncio.wait_for(call, timeout=timeout)
        except TimeoutError as e:
            raise error_type(message, cause=e, context={"timeout_seconds": timeout}) from e
