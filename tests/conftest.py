"""Pytest configuration for repository test runs."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


def pytest_sessionstart() -> None:
    """Add src directory to sys.path for test imports."""
    project_root = Path(__file__).resolve().parent.parent
    src_path = project_root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


@pytest.fixture
def scenario_profiles():
    """Two small bigram profiles for English and French."""
    from i18n.locale_tag import parse_locale
    from profiles.language_profile import LanguageProfile

    return [
        LanguageProfile(parse_locale("en"), {2: {"th": 10, "he": 8, "an": 1}}),
        LanguageProfile(parse_locale("fr"), {2: {"le": 10, "es": 8, "an": 1}}),
    ]
