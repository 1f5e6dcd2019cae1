"""Unit tests for the profile builder."""

from __future__ import annotations

import pytest

from core.errors import LangProfileConfigError, LangProfileStateError
from i18n.locale_tag import parse_locale
from ngram.extractor import StandardGramExtractor
from profiles.profile_builder import LanguageProfileBuilder


def _builder(min_frequency: int = 1) -> LanguageProfileBuilder:
    return LanguageProfileBuilder(
        parse_locale("en"),
        StandardGramExtractor((1, 2)),
        min_frequency=min_frequency,
    )


def test_build_counts_grams_per_length() -> None:
    """Unigram and bigram counts should reflect the text."""
    profile = _builder().add_text("aab").build()

    assert profile.get_frequency("a") == 2
    assert profile.get_frequency("aa") == 1
    assert profile.get_frequency(" a") == 1
    assert profile.gram_lengths == (1, 2)


def test_build_without_text_raises_state_error() -> None:
    """Building before any text was added should fail."""
    with pytest.raises(LangProfileStateError):
        _builder().build()


def test_build_does_not_reset_accumulator() -> None:
    """Later snapshots should include all text added so far."""
    builder = _builder().add_text("ab")
    first = builder.build()
    second = builder.add_text("ab").build()

    assert first.get_frequency("a") == 1 and second.get_frequency("a") == 2


def test_snapshots_are_independent() -> None:
    """Adding text after build should not change earlier profiles."""
    builder = _builder().add_text("ab")
    snapshot = builder.build()
    builder.add_text("abab")

    assert snapshot.get_frequency("ab") == 1


def test_from_builder_copies_configuration_only() -> None:
    """Copied builders should share settings but start without counts."""
    original = _builder(min_frequency=2).add_text("abc abc")
    copy = LanguageProfileBuilder.from_builder(original)

    assert copy.locale == original.locale
    assert copy.extractor is original.extractor
    assert copy.min_frequency == 2
    with pytest.raises(LangProfileStateError):
        copy.build()


def test_min_frequency_drops_rare_grams() -> None:
    """Grams below the cutoff should be excluded from the snapshot."""
    profile = _builder(min_frequency=2).add_text("aab").build()

    assert profile.get_frequency("a") == 2
    assert profile.get_frequency("b") == 0
    assert profile.get_min_gram_count(1) == 2


def test_add_gram_adds_raw_counts() -> None:
    """Raw gram counts should be accumulated under their length."""
    profile = _builder().add_gram("th", 4).add_gram("th").build()

    assert profile.get_frequency("th") == 5 and profile.gram_lengths == (2,)


def test_add_gram_rejects_non_positive_count() -> None:
    """Zero counts should be rejected."""
    with pytest.raises(LangProfileStateError):
        _builder().add_gram("th", 0)


def test_invalid_min_frequency_raises_config_error() -> None:
    """Cutoffs below 1 should be rejected."""
    with pytest.raises(LangProfileConfigError):
        _builder(min_frequency=0)
