"""Unit tests for locale tag parsing."""

from __future__ import annotations

import pytest

from core.errors import LangProfileLocaleError
from i18n.locale_tag import LocaleTag, parse_locale


@pytest.mark.parametrize("tag", ["en", "gsw", "en-Latn", "zh-Hans", "en-UK", "zh-CN", "en-Latn-UK", "zh-Hant-CN"])
def test_parse_locale_round_trips_valid_tags(tag: str) -> None:
    """Valid tags should serialize back to the same string."""
    assert str(parse_locale(tag)) == tag


def test_parse_locale_splits_language_script_region() -> None:
    """All three subtags should be exposed separately."""
    locale = parse_locale("en-Latn-UK")

    assert (locale.language, locale.script, locale.region) == ("en", "Latn", "UK")


def test_parse_locale_language_only_has_no_script_or_region() -> None:
    """Bare language tags should leave optional subtags empty."""
    locale = parse_locale("gsw")

    assert locale.script is None and locale.region is None


def test_parse_locale_two_part_tag_detects_region() -> None:
    """A two-letter second subtag should be read as region."""
    locale = parse_locale("zh-CN")

    assert locale.script is None and locale.region == "CN"


@pytest.mark.parametrize(
    "tag",
    [
        "",
        None,
        "-",
        "--",
        "xx-",
        "-xx",
        "-xx-",
        "de--CH",
        "de--Latn",
        "x",
        "xxxx",
        "de-CH-Latn",
        "Latn",
        "CH",
        "CH-Latn",
        "JA",
        "ja-jp",
        "ja-jpan",
        "ja-JPAN",
        "de_CH",
        "de CH",
    ],
)
def test_parse_locale_rejects_invalid_tags(tag: str | None) -> None:
    """Malformed tags should raise a locale error."""
    with pytest.raises(LangProfileLocaleError):
        parse_locale(tag)


def test_locale_error_is_value_error() -> None:
    """Locale errors should be catchable as ValueError."""
    with pytest.raises(ValueError):
        parse_locale("EN")


def test_equal_tags_share_hash() -> None:
    """Tags parsed from the same string should be equal and hash alike."""
    first = parse_locale("en-Latn-UK")
    second = parse_locale(str(first))

    assert first == second and hash(first) == hash(second)


def test_tags_order_by_string_form() -> None:
    """Sorting should follow canonical string order."""
    tags = [parse_locale(tag) for tag in ("fr", "de-CH", "de", "en")]

    assert [str(tag) for tag in sorted(tags)] == ["de", "de-CH", "en", "fr"]


def test_constructor_validates_fields() -> None:
    """Direct construction should apply the same validation."""
    with pytest.raises(LangProfileLocaleError):
        LocaleTag(language="en", region="uk")


@pytest.mark.parametrize("fields", [{"script": 1234}, {"region": 12}, {"script": b"Latn"}])
def test_constructor_rejects_non_string_subtags(fields: dict[str, object]) -> None:
    """Non-string script or region values should raise a locale error."""
    with pytest.raises(LangProfileLocaleError):
        LocaleTag(language="en", **fields)
