"""Detector configuration model for langprofile.

This module owns scoring parameter validation and environment parsing.
Detectors consume a typed config object instead of loose keyword values.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
import math
import os
from types import MappingProxyType
from typing import Mapping

from core.constants import (
    DEFAULT_ALPHA,
    DEFAULT_MINIMAL_CONFIDENCE,
    DEFAULT_PREFIX_FACTOR,
    DEFAULT_PRIOR_WEIGHT,
    DEFAULT_PROBABILITY_THRESHOLD,
    DEFAULT_SHORT_TEXT_THRESHOLD,
    DEFAULT_SUFFIX_FACTOR,
    ENV_PREFIX,
    MAX_AFFIX_FACTOR,
)
from core.errors import LangProfileConfigError
from i18n.locale_tag import LocaleTag


@dataclass(frozen=True)
class DetectorConfig:
    """Validated scoring configuration.

    Attributes:
        alpha: Smoothing strength in [0, 1]; 0 is maximum likelihood.
        short_text_threshold: Gram count below which short-text dampening applies.
        prefix_factor: Weight multiplier for grams starting a word, in [0, 10].
        suffix_factor: Weight multiplier for grams ending a word, in [0, 10].
        probability_threshold: Minimum probability kept in ranked results.
        minimal_confidence: Minimum top probability for a single-answer detection.
        language_priors: Optional multiplicative bias per language.
        seed: Optional seed for deterministic tie-breaking.
    """

    alpha: float = DEFAULT_ALPHA
    short_text_threshold: int = DEFAULT_SHORT_TEXT_THRESHOLD
    prefix_factor: float = DEFAULT_PREFIX_FACTOR
    suffix_factor: float = DEFAULT_SUFFIX_FACTOR
    probability_threshold: float = DEFAULT_PROBABILITY_THRESHOLD
    minimal_confidence: float = DEFAULT_MINIMAL_CONFIDENCE
    language_priors: Mapping[LocaleTag, float] | None = None
    seed: int | None = None

    def __post_init__(self) -> None:
        _validate_unit_interval("alpha", self.alpha)
        _validate_short_text_threshold(self.short_text_threshold)
        _validate_affix_factor("prefix_factor", self.prefix_factor)
        _validate_affix_factor("suffix_factor", self.suffix_factor)
        _validate_unit_interval("probability_threshold", self.probability_threshold)
        _validate_unit_interval("minimal_confidence", self.minimal_confidence)
        if self.seed is not None and (isinstance(self.seed, bool) or not isinstance(self.seed, int)):
            raise LangProfileConfigError(f"Invalid seed {self.seed!r}: expected an integer.")
        if self.language_priors is not None:
            object.__setattr__(self, "language_priors", _freeze_priors(self.language_priors))

    def with_affix_factor(self, affix_factor: float) -> "DetectorConfig":
        """Return a copy with prefix and suffix factors set to one value."""
        return replace(self, prefix_factor=affix_factor, suffix_factor=affix_factor)

    def prior_weight(self, locale: LocaleTag) -> float:
        """Return the prior weight for a language, 1.0 when unconfigured."""
        if self.language_priors is None:
            return 1.0
        return self.language_priors.get(locale, DEFAULT_PRIOR_WEIGHT)

    @classmethod
    def from_env(cls) -> "DetectorConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            LangProfileConfigError: If environment values are invalid.
        """
        defaults = cls()
        return cls(
            alpha=_env_float("ALPHA", defaults.alpha),
            short_text_threshold=_env_int("SHORT_TEXT_THRESHOLD", defaults.short_text_threshold),
            prefix_factor=_env_float("PREFIX_FACTOR", defaults.prefix_factor),
            suffix_factor=_env_float("SUFFIX_FACTOR", defaults.suffix_factor),
            probability_threshold=_env_float(
                "PROBABILITY_THRESHOLD", defaults.probability_threshold
            ),
            minimal_confidence=_env_float("MINIMAL_CONFIDENCE", defaults.minimal_confidence),
            seed=_env_optional_int("SEED"),
        )


def _validate_unit_interval(field_name: str, value: float) -> None:
    if not _is_number(value) or not 0.0 <= value <= 1.0:
        raise LangProfileConfigError(
            f"Invalid {field_name} {value!r}: expected value in [0, 1]."
        )


def _validate_short_text_threshold(value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise LangProfileConfigError(
            f"Invalid short_text_threshold {value!r}: expected integer >= 0 (0 disables it)."
        )


def _validate_affix_factor(field_name: str, value: float) -> None:
    if not _is_number(value) or not 0.0 <= value <= MAX_AFFIX_FACTOR:
        raise LangProfileConfigError(
            f"Invalid {field_name} {value!r}: expected value in [0, {MAX_AFFIX_FACTOR:g}]. "
            "Use 1.0 to disable affix weighting."
        )


def _freeze_priors(priors: Mapping[LocaleTag, float]) -> Mapping[LocaleTag, float]:
    """Validate prior weights and return a read-only copy.

    Args:
        priors: Weight per locale.

    Returns:
        Read-only mapping of float weights.

    Raises:
        LangProfileConfigError: If a key is not a LocaleTag or a weight is not
            a finite positive number.
    """
    frozen: dict[LocaleTag, float] = {}
    for locale, weight in priors.items():
        if not isinstance(locale, LocaleTag):
            raise LangProfileConfigError(
                f"Invalid language_priors key {locale!r}: expected a LocaleTag."
            )
        if not _is_number(weight) or weight <= 0 or not math.isfinite(weight):
            raise LangProfileConfigError(
                f"Invalid prior weight {weight!r} for {locale}: expected a finite value > 0."
            )
        frozen[locale] = float(weight)
    return MappingProxyType(frozen)


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and not math.isnan(value)


def _env_float(suffix: str, default_value: float) -> float:
    """Read a float environment override, falling back to a default."""
    raw_value = os.getenv(ENV_PREFIX + suffix)
    if raw_value is None:
        return default_value
    try:
        return float(raw_value)
    except ValueError as error:
        raise LangProfileConfigError(
            f"Invalid {ENV_PREFIX}{suffix} value: expected a number, got '{raw_value}'."
        ) from error


def _env_int(suffix: str, default_value: int) -> int:
    value = _env_optional_int(suffix)
    return default_value if value is None else value


def _env_optional_int(suffix: str) -> int | None:
    raw_value = os.getenv(ENV_PREFIX + suffix)
    if raw_value is None:
        return None
    try:
        return int(raw_value)
    except ValueError as error:
        raise LangProfileConfigError(
            f"Invalid {ENV_PREFIX}{suffix} value: expected an integer, got '{raw_value}'."
        ) from error
