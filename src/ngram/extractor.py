"""Weighted n-gram extraction.

This module defines the extractor capability consumed by profile builders
and detectors, plus the standard sliding-window implementation. Grams that
touch a word boundary are marked by a leading or trailing space and can be
weighted with prefix and suffix factors.
"""

from __future__ import annotations

from typing import Protocol, Sequence

from core.constants import DEFAULT_GRAM_LENGTHS
from core.errors import LangProfileConfigError
from core.types import WeightedGram
from ngram.text_normalizer import normalize_text


class GramExtractor(Protocol):
    """Capability interface for text to weighted n-gram conversion."""

    @property
    def gram_lengths(self) -> tuple[int, ...]:
        """Sorted gram lengths this extractor produces."""
        ...

    def extract_grams(
        self,
        text: str,
        prefix_factor: float = 1.0,
        suffix_factor: float = 1.0,
    ) -> list[WeightedGram]:
        """Extract weighted grams from raw text."""
        ...


class StandardGramExtractor:
    """Sliding-window extractor over normalized, space-padded text."""

    def __init__(self, gram_lengths: Sequence[int] = DEFAULT_GRAM_LENGTHS) -> None:
        self._gram_lengths = _validate_gram_lengths(gram_lengths)

    @property
    def gram_lengths(self) -> tuple[int, ...]:
        return self._gram_lengths

    def extract_grams(
        self,
        text: str,
        prefix_factor: float = 1.0,
        suffix_factor: float = 1.0,
    ) -> list[WeightedGram]:
        """Extract weighted grams for every configured length.

        Args:
            text: Raw input text.
            prefix_factor: Weight multiplier for grams starting a word.
            suffix_factor: Weight multiplier for grams ending a word.

        Returns:
            Grams in text order, grouped by gram length.
        """
        normalized = normalize_text(text)
        if not normalized:
            return []
        padded = f" {normalized} "
        grams: list[WeightedGram] = []
        for gram_length in self._gram_lengths:
            for start in range(len(padded) - gram_length + 1):
                gram = padded[start : start + gram_length]
                if not _is_usable_gram(gram):
                    continue
                grams.append(WeightedGram(gram, _gram_weight(gram, prefix_factor, suffix_factor)))
        return grams

    def __repr__(self) -> str:
        return f"StandardGramExtractor(gram_lengths={self._gram_lengths})"


def _validate_gram_lengths(gram_lengths: Sequence[int]) -> tuple[int, ...]:
    """Check and sort requested gram lengths.

    Args:
        gram_lengths: Requested lengths.

    Returns:
        Sorted unique positive lengths.

    Raises:
        LangProfileConfigError: If lengths are empty, repeated or not positive.
    """
    if not gram_lengths:
        raise LangProfileConfigError("Gram lengths must not be empty. Use e.g. (1, 2, 3).")
    for gram_length in gram_lengths:
        if isinstance(gram_length, bool) or not isinstance(gram_length, int) or gram_length < 1:
            raise LangProfileConfigError(
                f"Invalid gram length {gram_length!r}: expected a positive integer."
            )
    if len(set(gram_lengths)) != len(gram_lengths):
        raise LangProfileConfigError(f"Gram lengths must be unique, got {list(gram_lengths)}.")
    return tuple(sorted(gram_lengths))


def _is_usable_gram(gram: str) -> bool:
    """Return whether a window holds letters and no interior space."""
    if not gram.strip():
        return False
    # Spaces may only sit at the edges of a gram.
    return " " not in gram[1:-1]


def _gram_weight(gram: str, prefix_factor: float, suffix_factor: float) -> float:
    """Compute a gram weight from its word-boundary position.

    Args:
        gram: Padded text window.
        prefix_factor: Multiplier for grams starting at a word boundary.
        suffix_factor: Multiplier for grams ending at a word boundary.

    Returns:
        Product of the factors that apply, 1.0 for interior grams.
    """
    weight = 1.0
    if gram.startswith(" "):
        weight *= prefix_factor
    if gram.endswith(" "):
        weight *= suffix_factor
    return weight
