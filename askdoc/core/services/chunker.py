"""Recursive, separator-aware text splitting with overlapping windows.

The splitter prefers to cut between paragraphs, then lines, then sentences,
then words, and only falls back to raw characters when a single word is
longer than the chunk size. Every chunk is an exact substring of the input,
so concatenating the chunks while skipping each overlap gives back the
original text.
"""

import logging

from ..domain import Chunk
from ..domain.exceptions import InvalidConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_SEPARATORS: tuple[str, ...] = ("\n\n", "\n", ". ", "! ", "? ", " ", "")


def _validate(chunk_size: int, chunk_overlap: int) -> None:
    if chunk_size <= 0:
        raise InvalidConfigurationError(
            "chunk_size must be positive", context={"chunk_size": chunk_size}
        )
    if chunk_overlap < 0:
        raise InvalidConfigurationError(
            "chunk_overlap must be non-negative", context={"chunk_overlap": chunk_overlap}
        )
    if chunk_overlap >= chunk_size:
        raise InvalidConfigurationError(
            "chunk_overlap must be less than chunk_size to avoid infinite loop",
            context={"chunk_size": chunk_size, "chunk_overlap": chunk_overlap},
        )


class RecursiveTextSplitter:
    """Splits a document into overlapping chunks of bounded size.

    Args:
        chunk_size: Maximum characters per chunk.
        chunk_overlap: Maximum characters shared by consecutive chunks.
        separators: Split points, coarsest first. The last entry should be
            ``""`` so any text can be reduced to single characters.
    """

    def __init__(
        self,
        chunk_size: int = 1000,
        chunk_overlap: int = 200,
        separators: tuple[str, ...] = DEFAULT_SEPARATORS,
    ) -> None:
        _validate(chunk_size, chunk_overlap)
        self.chunk_size = chunk_size
        self.chunk_overlap = chunk_overlap
        self.separators = separators

    def split(self, text: str) -> list[Chunk]:
        """Split text into ordered, indexed chunks.

        Args:
            text: The document. May be empty.

        Returns:
            Chunks in source order; empty when ``text`` is empty or
            whitespace only.
        """
        if not text or text.isspace():
            return []

        if len(text) <= self.chunk_size:
            return [Chunk(index=0, text=text, start=0)]

        pieces = self._split_pieces(text, list(self.separators))
        windows = self._merge_pieces(pieces)

        chunks = []
        offset = 0
        for index, (skip, window) in enumerate(windows):
            offset -= skip
            chunks.append(Chunk(index=index, text=window, start=offset))
            offset += len(window)

        logger.debug(
            "Split %d chars into %d chunks (size=%d, overlap=%d)",
            len(text),
            len(chunks),
            self.chunk_size,
            self.chunk_overlap,
        )
        return chunks

    def _split_pieces(self, text: str, separators: list[str]) -> list[str]:
        """Cut text into pieces no longer than chunk_size.

        Separators stay attached to the end of the piece they follow, so
        ``"".join(pieces) == text``.
        """
        separator = separators[-1]
        remaining: list[str] = []
        for i, candidate in enumerate(separators):
            if candidate == "" or candidate in text:
                separator = candidate
                remaining = separators[i + 1 :]
                break

        if separator:
            parts = text.split(separator)
            splits = [part + separator for part in parts[:-1]] + [parts[-1]]
        else:
            splits = list(text)

        pieces: list[str] = []
        for split in splits:
            if not split:
                continue
            if len(split) <= self.chunk_size:
                pieces.append(split)
            elif remaining:
                pieces.extend(self._split_pieces(split, remaining))
            else:
                # No finer separator configured; cut on raw positions
                pieces.extend(
                    split[i : i + self.chunk_size] for i in range(0, len(split), self.chunk_size)
                )
        return pieces

    def _merge_pieces(self, pieces: list[str]) -> list[tuple[int, str]]:
        """Pack pieces into windows, carrying a tail of each into the next.

        Returns:
            ``(overlap, window)`` pairs, where ``overlap`` is how many leading
            characters of ``window`` repeat the end of the previous window.
        """
        windows: list[tuple[int, str]] = []
        current: list[str] = []
        total = 0
        carried = 0

        for piece in pieces:
            if current and total + len(piece) > self.chunk_size:
                windows.append((carried, "".join(current)))
                while current and (
                    total > self.chunk_overlap or total + len(piece) > self.chunk_size
                ):
                    total -= len(current.pop(0))
                carried = total
            current.append(piece)
            total += len(piece)

        if current:
            windows.append((carried, "".join(current)))
        return windows


def split_text(text: str, chunk_size: int = 1000, chunk_overlap: int = 200) -> list[Chunk]:
    """Split ``text`` with the default separator hierarchy."""
    return RecursiveTextSplitter(chunk_size, chunk_overlap).split(text)
