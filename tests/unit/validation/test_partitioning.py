"""Unit tests for cross-validation sample partitioning."""

from __future__ import annotations

import pytest

from tests.fixture_paths import read_sample
from validation.partitioning import partition_sample


def _assert_word_aligned(text: str, chunks: list[str]) -> None:
    position = 0
    for chunk in chunks:
        start = text.index(chunk, position)
        end = start + len(chunk)
        assert start == 0 or text[start - 1].isspace()
        assert end == len(text) or text[end].isspace()
        position = end


@pytest.mark.parametrize("k", [3, 4, 7, 10])
def test_word_partitions_align_with_whitespace(k: int) -> None:
    """No chunk should start or end inside a word."""
    text = read_sample("en")

    chunks = partition_sample(text, k)

    _assert_word_aligned(text, chunks)
    assert all(len(chunk) <= len(text) // (k - 1) for chunk in chunks)


def test_word_partitions_keep_all_words() -> None:
    """Joining chunks should preserve every word in order."""
    text = "alpha beta  gamma delta\nepsilon zeta eta theta"

    chunks = partition_sample(text, 3)

    assert " ".join(chunks).split() == text.split()


def test_word_partitions_tolerate_fewer_chunks_than_k() -> None:
    """Sparse word boundaries may produce fewer than k chunks."""
    chunks = partition_sample("a b c d e f g h i j", 3)

    assert chunks == ["a b c d e", "f g h i j"]


def test_word_partitions_stop_at_overlong_word() -> None:
    """A word longer than the chunk limit should end partitioning."""
    chunks = partition_sample("ab cd abcdefghijklmnop", 3)

    assert chunks == ["ab cd"]


def test_word_partitions_of_tiny_sample_are_empty() -> None:
    """A sample shorter than k - 1 characters cannot be partitioned."""
    assert partition_sample("ab", 4) == []


def test_break_words_splits_fixed_size_chunks() -> None:
    """Character chunks should cover the sample in k equal parts."""
    chunks = partition_sample("abcdefghij", 5, break_words=True)

    assert chunks == ["ab", "cd", "ef", "gh", "ij"]


def test_break_words_spreads_uneven_lengths() -> None:
    """Uneven samples should give chunks differing by at most one character."""
    chunks = partition_sample("abcdefghij", 3, break_words=True)

    assert chunks == ["abc", "defg", "hij"]


@pytest.mark.parametrize(("length", "k"), [(9, 4), (10, 6), (20, 7), (100, 9), (3, 3)])
def test_break_words_always_yields_k_chunks(length: int, k: int) -> None:
    """Samples with at least k characters should split into exactly k chunks."""
    text = "x" * length

    chunks = partition_sample(text, k, break_words=True)

    assert len(chunks) == k
    assert "".join(chunks) == text
    assert max(map(len, chunks)) - min(map(len, chunks)) <= 1


def test_break_words_tiny_sample_keeps_non_empty_chunks() -> None:
    """Samples shorter than k should yield one chunk per character."""
    assert partition_sample("ab", 4, break_words=True) == ["a", "b"]
