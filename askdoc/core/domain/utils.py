"""Text helpers shared by the pipeline and its adapters."""

import unicodedata


def normalize_text(text: str | None) -> str:
    """Remove BOM markers and apply NFKC normalization.

    Whitespace is preserved. The pipeline chunks the normalized text, so
    chunk offsets refer to this output rather than to the raw input.

    Args:
        text: Input text that may contain BOM or replacement characters.

    Returns:
        Cleaned text, or an empty string for ``None``.
    """
    if not text:
        return ""

    cleaned = text.replace("\ufeff", "").replace("\ufffd", "")
    return unicodedata.normalize("NFKC", cleaned)

