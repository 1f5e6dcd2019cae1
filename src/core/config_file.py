"""YAML detector configuration files.

This module loads detector settings from a YAML document so CLI runs and
SDK callers can share one validated configuration.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, cast

from core.config import DetectorConfig
from core.config_fields import optional_float, optional_gram_lengths, optional_int, optional_priors
from core.constants import DEFAULT_GRAM_LENGTHS
from core.errors import LangProfileConfigError, LangProfileDependencyError

_ALLOWED_KEYS = frozenset(
    {
        "alpha",
        "short_text_threshold",
        "prefix_factor",
        "suffix_factor",
        "affix_factor",
        "probability_threshold",
        "minimal_confidence",
        "seed",
        "language_priors",
        "gram_lengths",
    }
)


@dataclass(frozen=True)
class DetectorSettings:
    """Detector configuration plus extractor gram lengths."""

    config: DetectorConfig
    gram_lengths: tuple[int, ...] = DEFAULT_GRAM_LENGTHS


def load_detector_config(config_path: str) -> DetectorSettings:
    """Load and validate a YAML detector config from disk.

    Args:
        config_path: File path to the YAML config.

    Returns:
        Validated detector settings.

    Raises:
        LangProfileDependencyError: If PyYAML is unavailable.
        LangProfileConfigError: If the file is invalid or fields fail validation.
    """
    payload = _load_yaml_payload(config_path)
    if not isinstance(payload, Mapping):
        raise LangProfileConfigError(
            f"Invalid detector config: expected a mapping, got {type(payload).__name__}."
        )
    return parse_detector_settings(payload)


def parse_detector_settings(payload: Mapping[str, object]) -> DetectorSettings:
    """Build detector settings from a decoded mapping.

    Args:
        payload: Mapping of config field names to raw values.

    Returns:
        Validated detector settings.
    """
    unknown_keys = sorted(str(key) for key in set(payload) - _ALLOWED_KEYS)
    if unknown_keys:
        raise LangProfileConfigError(
            f"Detector config contains unknown fields: {', '.join(unknown_keys)}."
        )
    overrides: dict[str, Any] = {}
    for field_name in ("alpha", "prefix_factor", "suffix_factor"):
        _put(overrides, field_name, optional_float(payload, field_name))
    _put(overrides, "probability_threshold", optional_float(payload, "probability_threshold"))
    _put(overrides, "minimal_confidence", optional_float(payload, "minimal_confidence"))
    _put(overrides, "short_text_threshold", optional_int(payload, "short_text_threshold"))
    _put(overrides, "seed", optional_int(payload, "seed"))
    _put(overrides, "language_priors", optional_priors(payload, "language_priors"))
    affix_factor = optional_float(payload, "affix_factor")
    if affix_factor is not None:
        overrides.setdefault("prefix_factor", affix_factor)
        overrides.setdefault("suffix_factor", affix_factor)
    gram_lengths = optional_gram_lengths(payload, "gram_lengths")
    if gram_lengths is None:
        gram_lengths = DEFAULT_GRAM_LENGTHS
    return DetectorSettings(config=DetectorConfig(**overrides), gram_lengths=gram_lengths)


def _put(overrides: dict[str, Any], field_name: str, value: object) -> None:
    if value is not None:
        overrides[field_name] = value


def _load_yaml_payload(config_path: str) -> object:
    """Read and parse a YAML config file.

    Args:
        config_path: Path to the YAML file.

    Returns:
        Parsed document, or None for an empty file.

    Raises:
        LangProfileDependencyError: If PyYAML is not installed.
        LangProfileConfigError: If the file is missing or malformed.
    """
    try:
        import yaml  # type: ignore[import-untyped]
    except ImportError as error:  # pragma: no cover - dependency failure
        raise LangProfileDependencyError(
            "YAML config support requires PyYAML. Install with 'pip install pyyaml'."
        ) from error
    config_file = Path(config_path).expanduser().resolve()
    if not config_file.exists():
        raise LangProfileConfigError(
            f"Detector config file does not exist at {config_file}. Provide a valid YAML path."
        )
    try:
        payload = cast(object, yaml.safe_load(config_file.read_text(encoding="utf-8")))
    except OSError as error:
        raise LangProfileConfigError(
            f"Failed to read detector config at {config_file}: {error}."
        ) from error
    except yaml.YAMLError as error:
        raise LangProfileConfigError(
            f"Failed to parse YAML detector config at {config_file}: {error}. Fix YAML syntax."
        ) from error
    if payload is None:
        return {}
    return payload
