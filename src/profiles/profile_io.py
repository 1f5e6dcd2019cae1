"""JSON persistence for language profiles.

This module reads and writes profile documents of the form
``{"locale": "en", "grams": {"1": {"a": 3}, "2": {"ab": 1}}}``.
"""

from __future__ import annotations

import json
from pathlib import Path

from core.constants import PROFILE_FILE_ENCODING, PROFILE_FILE_SUFFIX
from core.errors import LangProfileError, LangProfileStoreError
from core.logging_config import get_logger
from i18n.locale_tag import LocaleTag, parse_locale
from profiles.language_profile import LanguageProfile

_LOGGER = get_logger(__name__)


def write_profile(profile: LanguageProfile, path: str | Path) -> Path:
    """Write one profile as JSON.

    Args:
        profile: Profile to persist.
        path: Target file path; parent directories are created.

    Returns:
        Resolved path of the written file.

    Raises:
        LangProfileStoreError: If the file cannot be written.
    """
    target = Path(path).expanduser().resolve()
    payload = {
        "locale": str(profile.locale),
        "grams": {
            str(gram_length): dict(sorted(profile.iterate_grams(gram_length)))
            for gram_length in profile.gram_lengths
        },
    }
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(
            json.dumps(payload, ensure_ascii=False, sort_keys=True),
            encoding=PROFILE_FILE_ENCODING,
        )
    except OSError as error:
        raise LangProfileStoreError(f"Failed to write profile to {target}: {error}.") from error
    _LOGGER.info(
        "profile_written",
        locale=str(profile.locale),
        path=str(target),
        num_grams=profile.get_num_grams(),
    )
    return target


def read_profile(path: str | Path) -> LanguageProfile:
    """Read one profile JSON file.

    Args:
        path: Profile file path.

    Returns:
        Parsed profile.

    Raises:
        LangProfileStoreError: If the file is missing, unreadable or invalid.
    """
    source = Path(path).expanduser().resolve()
    try:
        payload = json.loads(source.read_text(encoding=PROFILE_FILE_ENCODING))
    except OSError as error:
        raise LangProfileStoreError(f"Failed to read profile at {source}: {error}.") from error
    except json.JSONDecodeError as error:
        raise LangProfileStoreError(
            f"Invalid JSON in profile at {source}: line {error.lineno}: {error.msg}."
        ) from error
    return _decode_profile(payload, source)


def read_profiles(directory: str | Path) -> list[LanguageProfile]:
    """Read every profile file in a directory, sorted by filename.

    Args:
        directory: Directory containing ``*.json`` profile files.

    Returns:
        Profiles in filename order.

    Raises:
        LangProfileStoreError: If the directory is missing, empty, or holds
            two profiles for the same locale.
    """
    root = Path(directory).expanduser().resolve()
    if not root.is_dir():
        raise LangProfileStoreError(
            f"Profile directory does not exist at {root}. Provide an existing directory."
        )
    profiles: list[LanguageProfile] = []
    seen: dict[LocaleTag, Path] = {}
    for file_path in sorted(root.glob(f"*{PROFILE_FILE_SUFFIX}")):
        profile = read_profile(file_path)
        if profile.locale in seen:
            raise LangProfileStoreError(
                f"Duplicate profile for {profile.locale} in {file_path} "
                f"(already read from {seen[profile.locale]})."
            )
        seen[profile.locale] = file_path
        profiles.append(profile)
    if not profiles:
        raise LangProfileStoreError(
            f"No profile files found under {root}. Expected files ending in {PROFILE_FILE_SUFFIX}."
        )
    _LOGGER.info("profiles_loaded", directory=str(root), count=len(profiles))
    return profiles


def _decode_profile(payload: object, source: Path) -> LanguageProfile:
    """Convert a decoded JSON payload into a profile.

    Args:
        payload: Parsed JSON document.
        source: File the payload came from, for error messages.

    Returns:
        Validated profile.

    Raises:
        LangProfileStoreError: If the payload does not describe a valid profile.
    """
    if not isinstance(payload, dict):
        raise LangProfileStoreError(f"Invalid profile at {source}: expected a JSON object.")
    raw_locale = payload.get("locale")
    raw_grams = payload.get("grams")
    if not isinstance(raw_locale, str) or not isinstance(raw_grams, dict):
        raise LangProfileStoreError(
            f"Invalid profile at {source}: expected 'locale' string and 'grams' object."
        )
    grams: dict[int, dict[str, int]] = {}
    for raw_length, counts in raw_grams.items():
        if not raw_length.isdigit() or not isinstance(counts, dict):
            raise LangProfileStoreError(
                f"Invalid profile at {source}: gram table {raw_length!r} is malformed."
            )
        grams[int(raw_length)] = counts
    try:
        return LanguageProfile(parse_locale(raw_locale), grams)
    except LangProfileError as error:
        raise LangProfileStoreError(f"Invalid profile at {source}: {error}") from error
