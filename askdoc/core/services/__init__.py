"""Retrieval pipeline services.

- chunker: RecursiveTextSplitter
- ranker: SimilarityRanker and cosine_similarity
- context_assembler: ContextAssembler
- prompts: the grounded-answer template
- answer_service: AnswerService, the per-request orchestrator
"""

from .answer_service import AnswerService, PipelineConfig
from .chunker import RecursiveTextSplitter, split_text
from .context_assembler import CONTEXT_DELIMITER, ContextAssembler
from .prompts import FALLBACK_ANSWER, build_answer_prompt
from .ranker import SimilarityRanker, cosine_similarity

__all__ = [
    "AnswerService",
    "PipelineConfig",
    "RecursiveTextSplitter",
    "split_text",
    "ContextAssembler",
    "CONTEXT_DELIMITER",
    "FALLBACK_ANSWER",
    "build_answer_prompt",
    "SimilarityRanker",
    "cosine_similarity",
]
