"""Unit tests for profile JSON persistence."""

from __future__ import annotations

import json

import pytest

from core.errors import LangProfileStoreError
from i18n.locale_tag import parse_locale
from profiles.language_profile import LanguageProfile
from profiles.profile_io import read_profile, read_profiles, write_profile
from tests.fixture_paths import fixture_path


def test_write_then_read_preserves_profile(tmp_path) -> None:
    """A written profile should read back equal."""
    profile = LanguageProfile(parse_locale("zh-Hant"), {1: {"中": 3}, 2: {"中文": 1}})

    path = write_profile(profile, tmp_path / "nested" / "zh.json")

    assert read_profile(path) == profile


def test_read_profiles_loads_fixture_directory() -> None:
    """Fixture profiles should load sorted by filename."""
    profiles = read_profiles(fixture_path("profiles"))

    assert [str(profile.locale) for profile in profiles] == ["en", "fr"]
    assert profiles[0].get_frequency("th") == 10


def test_read_profiles_rejects_duplicate_locales(tmp_path) -> None:
    """Two files with the same locale should fail."""
    profile = LanguageProfile(parse_locale("en"), {1: {"a": 1}})
    write_profile(profile, tmp_path / "a.json")
    write_profile(profile, tmp_path / "b.json")

    with pytest.raises(LangProfileStoreError):
        read_profiles(tmp_path)


def test_read_profiles_rejects_empty_directory(tmp_path) -> None:
    """A directory without profile files should fail."""
    with pytest.raises(LangProfileStoreError):
        read_profiles(tmp_path)


def test_read_profile_rejects_invalid_json(tmp_path) -> None:
    """Broken JSON should raise a store error."""
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(LangProfileStoreError):
        read_profile(path)


def test_read_profile_rejects_invalid_counts(tmp_path) -> None:
    """Zero counts in a file should surface as a store error."""
    path = tmp_path / "en.json"
    path.write_text(json.dumps({"locale": "en", "grams": {"1": {"a": 0}}}), encoding="utf-8")

    with pytest.raises(LangProfileStoreError):
        read_profile(path)


def test_read_profile_rejects_invalid_locale(tmp_path) -> None:
    """Malformed locale tags in a file should surface as a store error."""
    path = tmp_path / "xx.json"
    path.write_text(json.dumps({"locale": "EN", "grams": {"1": {"a": 1}}}), encoding="utf-8")

    with pytest.raises(LangProfileStoreError):
        read_profile(path)


def test_read_profile_missing_file_raises(tmp_path) -> None:
    """Missing files should raise a store error."""
    with pytest.raises(LangProfileStoreError):
        read_profile(tmp_path / "missing.json")
