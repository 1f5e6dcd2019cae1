"""Type-safe field parsing helpers for detector config files.

This module centralizes primitive parsing so config loaders stay concise
and produce consistent validation errors.
"""

from __future__ import annotations

from typing import Mapping, Sequence

from core.errors import LangProfileConfigError, LangProfileLocaleError
from i18n.locale_tag import LocaleTag, parse_locale


def optional_int(args: Mapping[str, object], field_name: str) -> int | None:
    """Read an optional integer field."""
    value = args.get(field_name)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise LangProfileConfigError(f"Config field '{field_name}' must be an integer.")
    return value


def optional_float(args: Mapping[str, object], field_name: str) -> float | None:
    """Read an optional numeric field."""
    value = args.get(field_name)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise LangProfileConfigError(f"Config field '{field_name}' must be numeric.")
    return float(value)


def optional_gram_lengths(args: Mapping[str, object], field_name: str) -> tuple[int, ...] | None:
    """Read an optional list of positive gram lengths."""
    value = args.get(field_name)
    if value is None:
        return None
    if not isinstance(value, Sequence) or isinstance(value, (str, bytes)):
        raise LangProfileConfigError(f"Config field '{field_name}' must be a list of integers.")
    lengths = []
    for item in value:
        if isinstance(item, bool) or not isinstance(item, int) or item < 1:
            raise LangProfileConfigError(
                f"Config field '{field_name}' must contain positive integers, got {item!r}."
            )
        lengths.append(item)
    if not lengths:
        raise LangProfileConfigError(f"Config field '{field_name}' must list at least one length.")
    return tuple(lengths)


def optional_priors(args: Mapping[str, object], field_name: str) -> dict[LocaleTag, float] | None:
    """Read an optional mapping of locale tag to prior weight."""
    value = args.get(field_name)
    if value is None:
        return None
    if not isinstance(value, Mapping):
        raise LangProfileConfigError(
            f"Config field '{field_name}' must map locale tags to weights."
        )
    priors: dict[LocaleTag, float] = {}
    for raw_tag, raw_weight in value.items():
        try:
            locale = parse_locale(raw_tag)
        except LangProfileLocaleError as error:
            raise LangProfileConfigError(f"Config field '{field_name}': {error}") from error
        if isinstance(raw_weight, bool) or not isinstance(raw_weight, (int, float)):
            raise LangProfileConfigError(
                f"Config field '{field_name}' weight for '{raw_tag}' must be numeric."
            )
        priors[locale] = float(raw_weight)
    return priors
