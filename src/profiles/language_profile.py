"""Immutable per-language n-gram frequency profile.

This module stores n-gram counts grouped by gram length together with
statistics derived once at construction. Profiles are never mutated, so
one instance can be shared by any number of detectors and threads.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterator, Mapping

from core.errors import LangProfileStateError
from i18n.locale_tag import LocaleTag


@dataclass(frozen=True)
class GramStats:
    """Derived statistics for one gram length.

    Attributes:
        num_occurrences: Sum of all gram counts.
        min_count: Count of the least frequent gram; above 1 after a cutoff.
        max_count: Count of the most frequent gram.
    """

    num_occurrences: int
    min_count: int
    max_count: int


class LanguageProfile:
    """N-gram frequency table for one language."""

    def __init__(self, locale: LocaleTag, grams: Mapping[int, Mapping[str, int]]) -> None:
        self._locale = locale
        self._grams = _freeze_grams(grams)
        self._stats = MappingProxyType(
            {gram_length: _compute_stats(counts) for gram_length, counts in self._grams.items()}
        )

    @property
    def locale(self) -> LocaleTag:
        return self._locale

    @property
    def gram_lengths(self) -> tuple[int, ...]:
        return tuple(sorted(self._grams))

    @property
    def grams(self) -> Mapping[int, Mapping[str, int]]:
        """Read-only view of counts keyed by gram length."""
        return self._grams

    def get_frequency(self, gram: str) -> int:
        """Return the count of a gram, 0 when it was never seen."""
        counts = self._grams.get(len(gram))
        if counts is None:
            return 0
        return counts.get(gram, 0)

    def get_num_grams(self, gram_length: int | None = None) -> int:
        """Return the number of distinct grams, optionally for one length."""
        if gram_length is None:
            return sum(len(counts) for counts in self._grams.values())
        _check_gram_length(gram_length)
        return len(self._grams.get(gram_length, {}))

    def get_num_gram_occurrences(self, gram_length: int) -> int:
        """Return the summed count of all grams of a length."""
        _check_gram_length(gram_length)
        stats = self._stats.get(gram_length)
        return 0 if stats is None else stats.num_occurrences

    def get_min_gram_count(self, gram_length: int) -> int:
        """Return the count of the least frequent gram of a length, 0 when absent."""
        _check_gram_length(gram_length)
        stats = self._stats.get(gram_length)
        return 0 if stats is None else stats.min_count

    def get_max_gram_count(self, gram_length: int) -> int:
        """Return the count of the most frequent gram of a length, 0 when absent."""
        _check_gram_length(gram_length)
        stats = self._stats.get(gram_length)
        return 0 if stats is None else stats.max_count

    def iterate_grams(self, gram_length: int | None = None) -> Iterator[tuple[str, int]]:
        """Yield ``(gram, count)`` pairs, optionally for one length."""
        if gram_length is not None:
            _check_gram_length(gram_length)
            yield from self._grams.get(gram_length, {}).items()
            return
        for length in self.gram_lengths:
            yield from self._grams[length].items()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LanguageProfile):
            return NotImplemented
        return self._locale == other._locale and _plain(self._grams) == _plain(other._grams)

    def __hash__(self) -> int:
        return hash((self._locale, tuple(sorted(self._stats.items()))))

    def __repr__(self) -> str:
        sizes = ",".join(
            f"{gram_length}-grams={len(self._grams[gram_length])}"
            for gram_length in self.gram_lengths
        )
        return f"LanguageProfile(locale={self._locale}, {sizes})"


def _freeze_grams(grams: Mapping[int, Mapping[str, int]]) -> Mapping[int, Mapping[str, int]]:
    """Validate gram tables and wrap them in read-only views.

    Args:
        grams: Counts keyed by gram length.

    Returns:
        Read-only copy without empty tables.

    Raises:
        LangProfileStateError: If a gram length, gram or count is invalid.
    """
    frozen: dict[int, Mapping[str, int]] = {}
    for gram_length, counts in grams.items():
        _check_gram_length(gram_length)
        if not counts:
            continue
        table: dict[str, int] = {}
        for gram, count in counts.items():
            if len(gram) != gram_length:
                raise LangProfileStateError(
                    f"Gram {gram!r} has length {len(gram)} but is stored under {gram_length}-grams."
                )
            if isinstance(count, bool) or not isinstance(count, int) or count < 1:
                raise LangProfileStateError(
                    f"Invalid count {count!r} for gram {gram!r}: expected a positive integer."
                )
            table[gram] = count
        frozen[gram_length] = MappingProxyType(table)
    return MappingProxyType(frozen)


def _compute_stats(counts: Mapping[str, int]) -> GramStats:
    """Summarize one non-empty gram table.

    Args:
        counts: Gram counts of a single length.

    Returns:
        Occurrence sum and extreme counts.
    """
    values = counts.values()
    return GramStats(num_occurrences=sum(values), min_count=min(values), max_count=max(values))


def _check_gram_length(gram_length: int) -> None:
    """Reject gram lengths that are not positive integers."""
    if isinstance(gram_length, bool) or not isinstance(gram_length, int) or gram_length < 1:
        raise LangProfileStateError(f"Invalid gram length {gram_length!r}: expected >= 1.")


def _plain(grams: Mapping[int, Mapping[str, int]]) -> dict[int, dict[str, int]]:
    return {gram_length: dict(counts) for gram_length, counts in grams.items()}
