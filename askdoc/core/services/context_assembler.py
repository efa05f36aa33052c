"""Joins ranked chunks into the context block of the prompt."""

from collections.abc import Sequence

from ..domain import ScoredChunk

CONTEXT_DELIMITER = "\n\n---\n\n"


class ContextAssembler:
    """Concatenates chunk texts in ranked order.

    Overlapping chunks are kept verbatim; repeated text is not removed.
    """

    def __init__(self, delimiter: str = CONTEXT_DELIMITER) -> None:
        self.delimiter = delimiter

    def assemble(self, scored_chunks: Sequence[ScoredChunk]) -> str:
        return self.delimiter.join(scored.text for scored in scored_chunks)
