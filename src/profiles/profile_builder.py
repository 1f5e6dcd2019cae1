"""Profile training from text samples.

This module accumulates raw n-gram counts and snapshots them into immutable
language profiles. A builder can be cloned from another builder's settings
without its counts so repeated training runs start from scratch.
"""

from __future__ import annotations

from collections import Counter

from core.constants import DEFAULT_MIN_FREQUENCY
from core.errors import LangProfileConfigError, LangProfileStateError
from core.logging_config import get_logger
from i18n.locale_tag import LocaleTag
from ngram.extractor import GramExtractor, StandardGramExtractor
from profiles.language_profile import LanguageProfile

_LOGGER = get_logger(__name__)


class LanguageProfileBuilder:
    """Mutable n-gram count accumulator for one language.

    Not thread-safe; confine each builder to one thread.
    """

    def __init__(
        self,
        locale: LocaleTag,
        extractor: GramExtractor | None = None,
        min_frequency: int = DEFAULT_MIN_FREQUENCY,
    ) -> None:
        if isinstance(min_frequency, bool) or not isinstance(min_frequency, int) or min_frequency < 1:
            raise LangProfileConfigError(
                f"Invalid min_frequency {min_frequency!r}: expected integer >= 1."
            )
        self._locale = locale
        self._extractor = extractor if extractor is not None else StandardGramExtractor()
        self._min_frequency = min_frequency
        self._counts: dict[int, Counter[str]] = {}
        self._has_input = False

    @classmethod
    def from_builder(cls, other: "LanguageProfileBuilder") -> "LanguageProfileBuilder":
        """Create an empty builder sharing another builder's configuration."""
        return cls(other.locale, other.extractor, other.min_frequency)

    @property
    def locale(self) -> LocaleTag:
        return self._locale

    @property
    def extractor(self) -> GramExtractor:
        return self._extractor

    @property
    def min_frequency(self) -> int:
        return self._min_frequency

    def add_text(self, text: str) -> "LanguageProfileBuilder":
        """Count every gram the extractor finds in a text sample.

        Args:
            text: Training text.

        Returns:
            This builder, for chaining.
        """
        for weighted_gram in self._extractor.extract_grams(text):
            self._counter_for(len(weighted_gram.gram))[weighted_gram.gram] += 1
        self._has_input = True
        return self

    def add_gram(self, gram: str, count: int = 1) -> "LanguageProfileBuilder":
        """Add raw occurrences of a single gram."""
        if not gram:
            raise LangProfileStateError("Cannot add an empty gram.")
        if isinstance(count, bool) or not isinstance(count, int) or count < 1:
            raise LangProfileStateError(f"Invalid gram count {count!r}: expected integer >= 1.")
        self._counter_for(len(gram))[gram] += count
        self._has_input = True
        return self

    def build(self) -> LanguageProfile:
        """Snapshot accumulated counts into an immutable profile.

        The accumulator is left intact, so later calls include all text
        added so far.

        Returns:
            Profile containing grams at or above the minimum frequency.

        Raises:
            LangProfileStateError: If no text or gram was ever added.
        """
        if not self._has_input:
            raise LangProfileStateError(
                f"Cannot build a profile for {self._locale}: no text was added. "
                "Call add_text() before build()."
            )
        grams = {
            gram_length: {
                gram: count for gram, count in counter.items() if count >= self._min_frequency
            }
            for gram_length, counter in self._counts.items()
        }
        profile = LanguageProfile(self._locale, grams)
        _LOGGER.debug(
            "profile_built",
            locale=str(self._locale),
            gram_lengths=list(profile.gram_lengths),
            num_grams=profile.get_num_grams(),
        )
        return profile

    def _counter_for(self, gram_length: int) -> Counter[str]:
        counter = self._counts.get(gram_length)
        if counter is None:
            counter = Counter()
            self._counts[gram_length] = counter
        return counter
