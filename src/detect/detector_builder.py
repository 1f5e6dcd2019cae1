"""Builder for language detectors.

This module collects profiles, rejects inconsistent ones early, and
assembles the frequency index and detector. It does no internal
synchronization.
"""

from __future__ import annotations

from typing import Iterable

from core.config import DetectorConfig
from core.errors import LangProfileStateError
from core.logging_config import get_logger
from detect.frequency_index import FrequencyIndex
from detect.language_detector import LanguageDetector
from i18n.locale_tag import LocaleTag
from ngram.extractor import GramExtractor
from profiles.language_profile import LanguageProfile

_LOGGER = get_logger(__name__)


class LanguageDetectorBuilder:
    """Collects profiles and configuration for one detector."""

    def __init__(self, extractor: GramExtractor, config: DetectorConfig | None = None) -> None:
        self._extractor = extractor
        self._config = config if config is not None else DetectorConfig()
        self._profiles: list[LanguageProfile] = []
        self._locales: set[LocaleTag] = set()

    def with_config(self, config: DetectorConfig) -> "LanguageDetectorBuilder":
        """Replace the scoring configuration used by build()."""
        self._config = config
        return self

    def with_profile(self, profile: LanguageProfile) -> "LanguageDetectorBuilder":
        """Add one profile.

        Raises:
            LangProfileStateError: If the locale was added already or the
                profile lacks a gram length the extractor produces.
        """
        if profile.locale in self._locales:
            raise LangProfileStateError(
                f"A language profile for {profile.locale} was added already."
            )
        for gram_length in self._extractor.gram_lengths:
            if gram_length not in profile.gram_lengths:
                raise LangProfileStateError(
                    f"The extractor produces {gram_length}-grams but the profile for "
                    f"{profile.locale} has none."
                )
        self._locales.add(profile.locale)
        self._profiles.append(profile)
        return self

    def with_profiles(self, profiles: Iterable[LanguageProfile]) -> "LanguageDetectorBuilder":
        """Add several profiles in order.

        Args:
            profiles: Profiles with distinct locales.

        Returns:
            This builder.

        Raises:
            LangProfileStateError: If any profile fails with_profile() checks.
        """
        for profile in profiles:
            self.with_profile(profile)
        return self

    def build(self) -> LanguageDetector:
        """Build a detector over the added profiles.

        Raises:
            LangProfileStateError: If no profile was added.
        """
        if not self._profiles:
            raise LangProfileStateError(
                "Cannot build a detector without profiles. Call with_profile() first."
            )
        index = FrequencyIndex.build(self._profiles, self._extractor.gram_lengths)
        _LOGGER.debug(
            "detector_built",
            locales=[str(locale) for locale in index.locales],
            gram_lengths=list(index.gram_lengths),
            alpha=self._config.alpha,
        )
        return LanguageDetector(index, self._config, self._extractor)
