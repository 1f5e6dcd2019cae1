"""Gram-to-language frequency index.

This module merges a set of language profiles into one lookup table so the
detector can fetch every language's count for a gram in a single dict
access. The index is immutable after construction and safe to share.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping

from core.errors import LangProfileStateError
from i18n.locale_tag import LocaleTag
from profiles.language_profile import LanguageProfile

_EMPTY_COUNTS: Mapping[LocaleTag, int] = MappingProxyType({})


class FrequencyIndex:
    """Read-only per-gram, per-language count lookup."""

    def __init__(
        self,
        locales: tuple[LocaleTag, ...],
        gram_lengths: tuple[int, ...],
        counts: Mapping[str, Mapping[LocaleTag, int]],
        totals: Mapping[LocaleTag, Mapping[int, int]],
        vocabulary_sizes: Mapping[int, int],
    ) -> None:
        self._locales = locales
        self._gram_lengths = gram_lengths
        self._counts = counts
        self._totals = totals
        self._vocabulary_sizes = vocabulary_sizes

    @classmethod
    def build(
        cls,
        profiles: Iterable[LanguageProfile],
        gram_lengths: Iterable[int],
    ) -> "FrequencyIndex":
        """Index profiles for the requested gram lengths.

        Args:
            profiles: Profiles with pairwise distinct locales.
            gram_lengths: Gram lengths the detector's extractor produces.

        Returns:
            Immutable frequency index.

        Raises:
            LangProfileStateError: If no profiles are given, two share a
                locale, or a profile lacks a requested gram length.
        """
        profile_list = list(profiles)
        lengths = tuple(sorted(set(gram_lengths)))
        _validate_profiles(profile_list, lengths)
        counts: dict[str, dict[LocaleTag, int]] = {}
        totals: dict[LocaleTag, Mapping[int, int]] = {}
        for profile in profile_list:
            for gram_length in lengths:
                for gram, count in profile.iterate_grams(gram_length):
                    counts.setdefault(gram, {})[profile.locale] = count
            totals[profile.locale] = MappingProxyType(
                {
                    gram_length: profile.get_num_gram_occurrences(gram_length)
                    for gram_length in lengths
                }
            )
        vocabulary_sizes = {gram_length: 0 for gram_length in lengths}
        for gram in counts:
            vocabulary_sizes[len(gram)] += 1
        return cls(
            locales=tuple(sorted(totals)),
            gram_lengths=lengths,
            counts=MappingProxyType(
                {gram: MappingProxyType(per_locale) for gram, per_locale in counts.items()}
            ),
            totals=MappingProxyType(totals),
            vocabulary_sizes=MappingProxyType(vocabulary_sizes),
        )

    @property
    def locales(self) -> tuple[LocaleTag, ...]:
        return self._locales

    @property
    def gram_lengths(self) -> tuple[int, ...]:
        return self._gram_lengths

    def counts(self, gram: str) -> Mapping[LocaleTag, int]:
        """Return per-language counts for a gram; empty when no profile has it."""
        return self._counts.get(gram, _EMPTY_COUNTS)

    def total(self, locale: LocaleTag, gram_length: int) -> int:
        """Return a language's total gram occurrences for one length."""
        return self._totals[locale][gram_length]

    def vocabulary_size(self, gram_length: int) -> int:
        """Return the number of distinct grams of a length across all profiles."""
        return self._vocabulary_sizes.get(gram_length, 0)


def _validate_profiles(profiles: list[LanguageProfile], gram_lengths: tuple[int, ...]) -> None:
    """Reject empty, duplicate or incomplete profile sets.

    Raises:
        LangProfileStateError: If no profile is given, two share a locale, or
            a profile lacks one of the gram lengths.
    """
    if not profiles:
        raise LangProfileStateError(
            "Cannot build a frequency index without profiles. Add at least one profile."
        )
    if not gram_lengths:
        raise LangProfileStateError("Cannot build a frequency index without gram lengths.")
    seen: set[LocaleTag] = set()
    for profile in profiles:
        if profile.locale in seen:
            raise LangProfileStateError(
                f"A language profile for {profile.locale} was added already."
            )
        seen.add(profile.locale)
        missing = [length for length in gram_lengths if length not in profile.gram_lengths]
        if missing:
            raise LangProfileStateError(
                f"Profile for {profile.locale} has no data for gram lengths {missing}; "
                f"the extractor requires {list(gram_lengths)}."
            )
