"""Shared typed models.

This module defines immutable result rows passed between the extraction,
scoring and validation layers.
"""

from __future__ import annotations

from dataclasses import dataclass

from i18n.locale_tag import LocaleTag


@dataclass(frozen=True)
class WeightedGram:
    """One n-gram occurrence extracted from text.

    Attributes:
        gram: N-gram text; its length is the gram length.
        weight: Scoring weight, boosted for word-boundary grams.
    """

    gram: str
    weight: float = 1.0


@dataclass(frozen=True)
class DetectedLanguage:
    """Probability assigned to one candidate language.

    Attributes:
        locale: Candidate language.
        probability: Probability in [0, 1].
    """

    locale: LocaleTag
    probability: float


@dataclass(frozen=True)
class FoldResult:
    """Outcome of one cross-validation fold.

    Attributes:
        fold_index: Zero-based index of the held-out partition.
        locale: Locale of the profile under evaluation.
        probability: Probability the fold detector assigned to that locale.
        test_length: Character length of the held-out partition.
    """

    fold_index: int
    locale: LocaleTag
    probability: float
    test_length: int
