"""Core constants used across langprofile modules.

This module centralizes default parameters and file naming.
Keeping values here avoids magic literals in scoring logic.
"""

from __future__ import annotations

DEFAULT_ALPHA = 0.5
DEFAULT_SHORT_TEXT_THRESHOLD = 50
DEFAULT_PREFIX_FACTOR = 1.0
DEFAULT_SUFFIX_FACTOR = 1.0
MAX_AFFIX_FACTOR = 10.0
DEFAULT_PROBABILITY_THRESHOLD = 0.1
DEFAULT_MINIMAL_CONFIDENCE = 0.9999
DEFAULT_GRAM_LENGTHS = (1, 2, 3)
DEFAULT_MIN_FREQUENCY = 1
DEFAULT_PRIOR_WEIGHT = 1.0
DEFAULT_VALIDATION_FOLDS = 10
MIN_VALIDATION_FOLDS = 3
PROFILE_FILE_SUFFIX = ".json"
PROFILE_FILE_ENCODING = "utf-8"
ENV_PREFIX = "LANGPROFILE_"
