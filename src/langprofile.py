"""Public SDK surface for langprofile.

This module provides a stable import path for library users.
It re-exports profiles, detectors, configuration and validation helpers.
"""

from __future__ import annotations

from core.config import DetectorConfig
from core.config_file import DetectorSettings, load_detector_config
from core.types import DetectedLanguage, FoldResult, WeightedGram
from detect.detector_builder import LanguageDetectorBuilder
from detect.frequency_index import FrequencyIndex
from detect.language_detector import LanguageDetector
from i18n.locale_tag import LocaleTag, parse_locale
from ngram.extractor import GramExtractor, StandardGramExtractor
from ngram.text_normalizer import normalize_text
from profiles.language_profile import LanguageProfile
from profiles.profile_builder import LanguageProfileBuilder
from profiles.profile_io import read_profile, read_profiles, write_profile
from validation.cross_validator import LanguageProfileValidator
from validation.partitioning import partition_sample

__all__ = [
    "DetectedLanguage",
    "DetectorConfig",
    "DetectorSettings",
    "FoldResult",
    "FrequencyIndex",
    "GramExtractor",
    "LanguageDetector",
    "LanguageDetectorBuilder",
    "LanguageProfile",
    "LanguageProfileBuilder",
    "LanguageProfileValidator",
    "LocaleTag",
    "StandardGramExtractor",
    "WeightedGram",
    "load_detector_config",
    "normalize_text",
    "parse_locale",
    "partition_sample",
    "read_profile",
    "read_profiles",
    "write_profile",
]
