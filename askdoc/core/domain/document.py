"""Chunk, scored chunk and answer models for the retrieval pipeline."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Chunk:
    """A contiguous slice of the request document.

    The document is the normalized request text (BOM and replacement
    characters removed, NFKC applied), so ``text`` and ``start`` refer to
    that string rather than to the raw bytes the caller sent.

    Attributes:
        index: Position in the ordered sequence produced by the splitter.
            Used to align chunks with their embedding vectors.
        text: The chunk content, an exact substring of the document.
        start: Character offset of ``text`` within the document.
    """

    index: int
    text: str
    start: int = 0

    @property
    def end(self) -> int:
        """Offset one past the last character of the chunk."""
        return self.start + len(self.text)


@dataclass(frozen=True)
class ScoredChunk:
    """A chunk paired with its cosine similarity to the question.

    Attributes:
        chunk: The scored chunk.
        score: Similarity in [-1, 1]; higher is more relevant.
    """

    chunk: Chunk
    score: float

    @property
    def text(self) -> str:
        return self.chunk.text


@dataclass
class Answer:
    """Result of one question-answering run.

    Attributes:
        text: The generated answer.
        context: Ranked chunks that were passed to the generator.
        chunk_count: Number of chunks the document was split into.
        model_used: Generation model identifier, when known.
    """

    text: str
    context: list[ScoredChunk] = field(default_factory=list)
    chunk_count: int = 0
    model_used: str | None = None
