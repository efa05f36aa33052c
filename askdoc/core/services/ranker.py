"""Exact cosine-similarity ranking of chunks against a question vector.

A request holds at most a few hundred chunks, so every chunk is scored with
a linear scan; no approximate index is involved.
"""

import logging
from collections.abc import Sequence

import numpy as np

from ..domain import Chunk, ScoredChunk
from ..domain.exceptions import DimensionMismatchError, InvalidConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_TOP_K = 4


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """Cosine of the angle between two vectors.

    Returns 0.0 when either vector has zero magnitude.

    Raises:
        DimensionMismatchError: If the vectors have different lengths.
    """
    vec_a = np.asarray(a, dtype=np.float64)
    vec_b = np.asarray(b, dtype=np.float64)
    if vec_a.shape != vec_b.shape:
        raise DimensionMismatchError(
            "Cannot compare vectors of different dimensions",
            context={"left": len(vec_a), "right": len(vec_b)},
        )

    norm_a = np.linalg.norm(vec_a)
    norm_b = np.linalg.norm(vec_b)
    if norm_a == 0 or norm_b == 0:
        return 0.0
    return float(np.dot(vec_a, vec_b) / (norm_a * norm_b))


class SimilarityRanker:
    """Scores chunks against a query vector and keeps the best ``top_k``."""

    def __init__(self, top_k: int = DEFAULT_TOP_K) -> None:
        if top_k < 1:
            raise InvalidConfigurationError("top_k must be at least 1", context={"top_k": top_k})
        self.top_k = top_k

    def rank(
        self,
        query_vector: Sequence[float],
        chunk_vectors: Sequence[tuple[Chunk, Sequence[float]]],
    ) -> list[ScoredChunk]:
        """Rank chunks by similarity to the query.

        Args:
            query_vector: Embedding of the question.
            chunk_vectors: ``(chunk, vector)`` pairs in chunk order.

        Returns:
            At most ``top_k`` scored chunks, highest score first. Chunks with
            equal scores keep their original order.
        """
        if not chunk_vectors:
            return []

        scored = [
            ScoredChunk(chunk=chunk, score=cosine_similarity(query_vector, vector))
            for chunk, vector in chunk_vectors
        ]
        # sorted() is stable, including with reverse=True
        ranked = sorted(scored, key=lambda s: s.score, reverse=True)[: self.top_k]

        logger.debug(
            "Ranked %d chunks; kept %d (top score %.3f)",
            len(scored),
            len(ranked),
            ranked[0].score,
        )
        return ranked
