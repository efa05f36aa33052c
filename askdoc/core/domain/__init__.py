"""Domain models for askdoc.

- document: Chunk, ScoredChunk and Answer
- exceptions: the AskDocError hierarchy

    from askdoc.core.domain import Chunk, ScoredChunk, Answer
"""

from .document import Answer, Chunk, ScoredChunk

__all__ = [
    "Answer",
    "Chunk",
    "ScoredChunk",
]
