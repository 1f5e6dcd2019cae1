"""Unit tests for immutable language profiles."""

from __future__ import annotations

import pytest

from core.errors import LangProfileStateError
from i18n.locale_tag import parse_locale
from profiles.language_profile import LanguageProfile


def _profile() -> LanguageProfile:
    return LanguageProfile(
        parse_locale("en"),
        {1: {"a": 5, "b": 2, "c": 9}, 2: {"ab": 3, "bc": 1}},
    )


def test_stats_match_counts_per_gram_length() -> None:
    """Totals, minimum and maximum should be derived from counts."""
    profile = _profile()

    for gram_length in profile.gram_lengths:
        counts = [count for _, count in profile.iterate_grams(gram_length)]
        assert profile.get_num_gram_occurrences(gram_length) == sum(counts)
        assert profile.get_min_gram_count(gram_length) == min(counts)
        assert profile.get_max_gram_count(gram_length) == max(counts)


def test_get_frequency_returns_zero_for_unseen_gram() -> None:
    """Grams never added should have frequency 0."""
    profile = _profile()

    assert profile.get_frequency("zz") == 0 and profile.get_frequency("abcd") == 0


def test_get_frequency_returns_stored_count() -> None:
    """Stored grams should report their count."""
    assert _profile().get_frequency("ab") == 3


def test_num_grams_counts_distinct_grams() -> None:
    """Distinct gram counts should be available per length and overall."""
    profile = _profile()

    assert (profile.get_num_grams(1), profile.get_num_grams(2), profile.get_num_grams()) == (3, 2, 5)


def test_absent_gram_length_reports_zero_stats() -> None:
    """A length with no data should report zero occurrences."""
    profile = _profile()

    assert profile.get_num_gram_occurrences(3) == 0 and profile.get_max_gram_count(3) == 0


def test_invalid_gram_length_query_raises() -> None:
    """Gram lengths below 1 should be rejected."""
    with pytest.raises(LangProfileStateError):
        _profile().get_num_grams(0)


def test_zero_count_is_rejected() -> None:
    """Profiles should never store zero counts."""
    with pytest.raises(LangProfileStateError):
        LanguageProfile(parse_locale("en"), {1: {"a": 0}})


def test_mismatched_gram_length_is_rejected() -> None:
    """A gram stored under the wrong length key should be rejected."""
    with pytest.raises(LangProfileStateError):
        LanguageProfile(parse_locale("en"), {2: {"abc": 1}})


def test_profile_mapping_is_read_only() -> None:
    """Callers should not be able to mutate profile counts."""
    profile = _profile()

    with pytest.raises(TypeError):
        profile.grams[1]["a"] = 100  # type: ignore[index]


def test_profile_copies_input_mapping() -> None:
    """Mutating the source mapping should not affect the profile."""
    source = {1: {"a": 1}}
    profile = LanguageProfile(parse_locale("en"), source)
    source[1]["a"] = 50

    assert profile.get_frequency("a") == 1


def test_equality_uses_locale_and_grams() -> None:
    """Equal locale and counts should make profiles equal."""
    assert _profile() == _profile()
    assert _profile() != LanguageProfile(parse_locale("de"), {1: {"a": 5, "b": 2, "c": 9}, 2: {"ab": 3, "bc": 1}})
    assert hash(_profile()) == hash(_profile())


def test_gram_lengths_are_sorted() -> None:
    """Gram lengths should be listed in ascending order."""
    profile = LanguageProfile(parse_locale("en"), {3: {"abc": 1}, 1: {"a": 1}})

    assert profile.gram_lengths == (1, 3)
