"""langprofile exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each subsystem raises a specific error type for debuggability.
"""

from __future__ import annotations


class LangProfileError(Exception):
    """Base exception for all langprofile failures."""


class LangProfileConfigError(LangProfileError):
    """Raised for invalid detector, extractor, or validator configuration."""


class LangProfileLocaleError(LangProfileError, ValueError):
    """Raised for malformed locale tags."""


class LangProfileStateError(LangProfileError):
    """Raised when profiles or detectors are assembled from invalid state."""


class LangProfileStoreError(LangProfileError):
    """Raised for profile persistence failures."""


class LangProfileValidationError(LangProfileError):
    """Raised when cross-validation cannot be set up."""


class LangProfileDependencyError(LangProfileError):
    """Raised when an optional runtime dependency is missing."""
