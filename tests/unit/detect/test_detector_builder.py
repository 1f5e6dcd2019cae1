"""Unit tests for detector assembly."""

from __future__ import annotations

import pytest

from core.config import DetectorConfig
from core.errors import LangProfileStateError
from detect.detector_builder import LanguageDetectorBuilder
from i18n.locale_tag import parse_locale
from ngram.extractor import StandardGramExtractor
from profiles.language_profile import LanguageProfile


def test_build_without_profiles_raises() -> None:
    """Detectors need at least one profile."""
    with pytest.raises(LangProfileStateError):
        LanguageDetectorBuilder(StandardGramExtractor((2,))).build()


def test_with_profile_rejects_duplicate_locale(scenario_profiles) -> None:
    """Adding a second profile for a locale should fail."""
    builder = LanguageDetectorBuilder(StandardGramExtractor((2,))).with_profiles(scenario_profiles)

    with pytest.raises(LangProfileStateError):
        builder.with_profile(LanguageProfile(parse_locale("fr"), {2: {"xy": 1}}))


def test_with_profile_rejects_missing_gram_length(scenario_profiles) -> None:
    """Profiles must cover every length the extractor produces."""
    builder = LanguageDetectorBuilder(StandardGramExtractor((1, 2)))

    with pytest.raises(LangProfileStateError):
        builder.with_profile(scenario_profiles[0])


def test_build_uses_given_config(scenario_profiles) -> None:
    """Built detectors should carry the builder's config and locales."""
    config = DetectorConfig(alpha=0.2)
    detector = (
        LanguageDetectorBuilder(StandardGramExtractor((2,)), config)
        .with_profiles(scenario_profiles)
        .build()
    )

    assert detector.config is config
    assert [str(locale) for locale in detector.locales] == ["en", "fr"]
