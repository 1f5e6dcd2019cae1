"""Language-script-region locale tags.

This module validates ``language[-Script][-REGION]`` tags with strict casing
and field-length rules. Tags are immutable, hashable and ordered by their
canonical string form.
"""

from __future__ import annotations

from dataclasses import dataclass
import functools
import re

from core.errors import LangProfileLocaleError

_LANGUAGE_PATTERN = re.compile(r"[a-z]{2,3}")
_SCRIPT_PATTERN = re.compile(r"[A-Z][a-z]{3}")
_REGION_PATTERN = re.compile(r"[A-Z]{2}")


@functools.total_ordering
@dataclass(frozen=True)
class LocaleTag:
    """Validated locale identifier.

    Attributes:
        language: Lowercase 2-3 letter language subtag.
        script: Optional Title-case 4 letter script subtag.
        region: Optional uppercase 2 letter region subtag.
    """

    language: str
    script: str | None = None
    region: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.language, str) or not _LANGUAGE_PATTERN.fullmatch(self.language):
            raise LangProfileLocaleError(
                f"Invalid language subtag {self.language!r}: expected 2-3 lowercase letters."
            )
        if self.script is not None and (
            not isinstance(self.script, str) or not _SCRIPT_PATTERN.fullmatch(self.script)
        ):
            raise LangProfileLocaleError(
                f"Invalid script subtag {self.script!r}: expected 4 letters in Title case."
            )
        if self.region is not None and (
            not isinstance(self.region, str) or not _REGION_PATTERN.fullmatch(self.region)
        ):
            raise LangProfileLocaleError(
                f"Invalid region subtag {self.region!r}: expected 2 uppercase letters."
            )

    def __str__(self) -> str:
        parts = [self.language]
        if self.script is not None:
            parts.append(self.script)
        if self.region is not None:
            parts.append(self.region)
        return "-".join(parts)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, LocaleTag):
            return NotImplemented
        return str(self) < str(other)


def parse_locale(text: str | None) -> LocaleTag:
    """Parse a locale tag string.

    Args:
        text: Tag such as ``en``, ``zh-Hant`` or ``en-Latn-UK``.

    Returns:
        Validated locale tag.

    Raises:
        LangProfileLocaleError: If the tag is missing or malformed.
    """
    if not isinstance(text, str) or not text:
        raise LangProfileLocaleError("Locale tag is required: got an empty value.")
    parts = text.split("-")
    if len(parts) > 3 or any(not part for part in parts):
        raise LangProfileLocaleError(
            f"Invalid locale tag {text!r}: expected 'language[-Script][-REGION]'."
        )
    language, *rest = parts
    script = None
    region = None
    if len(rest) == 2:
        script, region = rest
    elif len(rest) == 1:
        if _SCRIPT_PATTERN.fullmatch(rest[0]):
            script = rest[0]
        else:
            region = rest[0]
    return LocaleTag(language=language, script=script, region=region)
