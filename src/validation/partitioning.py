"""Sample partitioning for k-fold cross-validation."""

from __future__ import annotations

from core.logging_config import get_logger

_LOGGER = get_logger(__name__)


def partition_sample(text: str, k: int, break_words: bool = False) -> list[str]:
    """Split a sample into roughly equal chunks.

    Args:
        text: Sample text.
        k: Number of folds.
        break_words: Split into fixed-size character chunks regardless of
            word boundaries, for scripts without whitespace between words.

    Returns:
        Ordered chunks; fewer than ``k`` when word boundaries are sparse.
    """
    if break_words:
        return _split_fixed_size(text, k)
    return _split_on_whitespace(text, len(text) // (k - 1))


def _split_fixed_size(text: str, k: int) -> list[str]:
    """Cut a sample into k character chunks whose sizes differ by at most one.

    Args:
        text: Sample text.
        k: Number of chunks.

    Returns:
        Non-empty chunks in order; exactly k when the sample has at least k
        characters.
    """
    bounds = [round(index * len(text) / k) for index in range(k + 1)]
    return [text[start:end] for start, end in zip(bounds, bounds[1:]) if end > start]


def _split_on_whitespace(text: str, max_length: int) -> list[str]:
    """Cut a sample into word-aligned chunks of at most ``max_length`` characters.

    Args:
        text: Sample text.
        max_length: Longest allowed chunk.

    Returns:
        Chunks in order, stopping before the first word longer than
        ``max_length``.
    """
    chunks: list[str] = []
    if max_length < 1:
        return chunks
    position = 0
    text_length = len(text)
    while True:
        while position < text_length and text[position].isspace():
            position += 1
        if position >= text_length:
            return chunks
        end = _chunk_end(text, position, max_length)
        if end is None:
            _LOGGER.warning(
                "partition_truncated",
                position=position,
                dropped_characters=text_length - position,
                max_length=max_length,
            )
            return chunks
        chunks.append(text[position:end].rstrip())
        position = end


def _chunk_end(text: str, start: int, max_length: int) -> int | None:
    """Return the longest chunk end within ``max_length`` that precedes whitespace."""
    limit = start + max_length
    if limit >= len(text):
        return len(text)
    for end in range(limit, start, -1):
        if text[end].isspace():
            return end
    return None
