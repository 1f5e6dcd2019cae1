"""Text normalization for n-gram extraction."""

from __future__ import annotations

import re
import unicodedata

_URL_PATTERN = re.compile(r"(?:https?://|www\.)\S+", re.IGNORECASE)
_EMAIL_PATTERN = re.compile(r"\S+@\S+\.\w+")


def normalize_text(text: str) -> str:
    """Normalize text into lowercase letter runs separated by single spaces.

    Args:
        text: Raw input text.

    Returns:
        Normalized text; empty when no letters remain.
    """
    normalized = unicodedata.normalize("NFKC", text)
    normalized = _URL_PATTERN.sub(" ", normalized)
    normalized = _EMAIL_PATTERN.sub(" ", normalized)
    cleaned = "".join(character if character.isalpha() else " " for character in normalized)
    return " ".join(cleaned.lower().split())
