"""N-gram language scoring engine.

This module turns a text's weighted n-grams into a probability distribution
over the indexed languages in two steps.

First a posterior independent of ``alpha`` is computed. Grams unknown to
every profile are skipped. For each language, every remaining gram either
misses (the language never saw it) or contributes
``weight * log(count(g, L) / total(L, n))``. Only the languages with the
fewest weighted misses keep probability mass, which is the limit of
additive smoothing as the pseudo-count goes to zero: ``alpha = 0`` is
maximum likelihood whenever some language explains every gram. Texts with
fewer grams than the short-text threshold have their scores scaled by
``sqrt(n / threshold)`` before priors are added and a softmax is taken.

Then ``alpha`` flattens the posterior toward uniform with weight
``alpha ** (m + 1)``, where ``m`` is the number of grams carrying evidence.
The flattening is the same affine map for every language, so the ranking
never changes and the top probability can only fall as ``alpha`` grows.
``alpha = 1`` makes every language equally likely, and text without
evidence yields ``(1 - alpha) * priors + alpha * uniform``.

Detectors are immutable and hold no per-call state, so scoring calls may
run concurrently.
"""

from __future__ import annotations

import math
import random
from typing import Mapping, Sequence

from core.config import DetectorConfig
from core.types import DetectedLanguage, WeightedGram
from detect.frequency_index import FrequencyIndex
from i18n.locale_tag import LocaleTag
from ngram.extractor import GramExtractor

_MISS_TOLERANCE = 1e-9


class LanguageDetector:
    """Ranks candidate languages for a text."""

    def __init__(
        self,
        index: FrequencyIndex,
        config: DetectorConfig,
        extractor: GramExtractor,
    ) -> None:
        self._index = index
        self._config = config
        self._extractor = extractor
        self._tie_ranks = _build_tie_ranks(index.locales, config.seed)
        self._log_priors = {
            locale: math.log(config.prior_weight(locale)) for locale in index.locales
        }

    @property
    def config(self) -> DetectorConfig:
        return self._config

    @property
    def locales(self) -> tuple[LocaleTag, ...]:
        return self._index.locales

    def get_probabilities(self, text: str) -> list[DetectedLanguage]:
        """Rank languages by probability for a text.

        Args:
            text: Input text.

        Returns:
            Languages at or above the probability threshold, most probable
            first. Empty when the text yields no grams.
        """
        grams = self._extractor.extract_grams(
            text,
            prefix_factor=self._config.prefix_factor,
            suffix_factor=self._config.suffix_factor,
        )
        if not grams:
            return []
        posterior, evidence_count = self._score(grams)
        probabilities = _flatten(posterior, self._config.alpha ** (evidence_count + 1))
        ranked = sorted(
            probabilities.items(),
            key=lambda item: (-item[1], self._tie_ranks[item[0]]),
        )
        threshold = self._config.probability_threshold
        return [
            DetectedLanguage(locale=locale, probability=probability)
            for locale, probability in ranked
            if probability > 0 and probability >= threshold
        ]

    def detect(self, text: str) -> LocaleTag | None:
        """Return the top language if it reaches the minimal confidence.

        Args:
            text: Input text.

        Returns:
            Most probable language, or None for ambiguous or empty input.
        """
        probabilities = self.get_probabilities(text)
        if not probabilities:
            return None
        best = probabilities[0]
        if best.probability < self._config.minimal_confidence:
            return None
        return best.locale

    def _score(self, grams: Sequence[WeightedGram]) -> tuple[dict[LocaleTag, float], int]:
        """Compute the unflattened posterior for extracted grams.

        Args:
            grams: Weighted grams of the input text.

        Returns:
            Posterior over all indexed languages and the number of grams
            known to at least one profile.
        """
        misses = dict.fromkeys(self._index.locales, 0.0)
        log_scores = dict.fromkeys(self._index.locales, 0.0)
        evidence_count = 0
        for weighted_gram in grams:
            per_locale = self._index.counts(weighted_gram.gram)
            if not per_locale or weighted_gram.weight == 0:
                continue
            evidence_count += 1
            gram_length = len(weighted_gram.gram)
            for locale in self._index.locales:
                count = per_locale.get(locale, 0)
                if count == 0:
                    misses[locale] += weighted_gram.weight
                    continue
                likelihood = count / self._index.total(locale, gram_length)
                log_scores[locale] += weighted_gram.weight * math.log(likelihood)
        fewest = min(misses.values())
        scale = self._short_text_scale(len(grams))
        survivors = {
            locale: score * scale + self._log_priors[locale]
            for locale, score in log_scores.items()
            if math.isclose(misses[locale], fewest, rel_tol=_MISS_TOLERANCE, abs_tol=_MISS_TOLERANCE)
        }
        posterior = dict.fromkeys(self._index.locales, 0.0)
        posterior.update(_softmax(survivors))
        return posterior, evidence_count

    def _short_text_scale(self, gram_count: int) -> float:
        """Return the log-score multiplier for texts below the short-text threshold."""
        threshold = self._config.short_text_threshold
        if threshold == 0 or gram_count >= threshold:
            return 1.0
        return math.sqrt(gram_count / threshold)


def _softmax(scores: Mapping[LocaleTag, float]) -> dict[LocaleTag, float]:
    """Normalize log-scores into probabilities.

    Args:
        scores: Finite log-scores of the surviving languages.

    Returns:
        Probabilities summing to 1.
    """
    peak = max(scores.values())
    weights = {locale: math.exp(score - peak) for locale, score in scores.items()}
    total = sum(weights.values())
    return {locale: weight / total for locale, weight in weights.items()}


def _flatten(posterior: Mapping[LocaleTag, float], flattening: float) -> dict[LocaleTag, float]:
    """Blend a posterior toward the uniform distribution.

    Args:
        posterior: Probabilities over all languages.
        flattening: Uniform mixture weight in [0, 1].

    Returns:
        Blended probabilities with the ranking of ``posterior``.
    """
    uniform = 1.0 / len(posterior)
    return {
        locale: (1.0 - flattening) * probability + flattening * uniform
        for locale, probability in posterior.items()
    }


def _build_tie_ranks(locales: tuple[LocaleTag, ...], seed: int | None) -> dict[LocaleTag, int]:
    """Assign each locale its position for breaking probability ties.

    Args:
        locales: Indexed locales.
        seed: Optional seed for a reproducible shuffled order.

    Returns:
        Rank per locale, lexical order when no seed is set.
    """
    ordered = sorted(locales)
    if seed is not None:
        random.Random(seed).shuffle(ordered)
    return {locale: rank for rank, locale in enumerate(ordered)}
