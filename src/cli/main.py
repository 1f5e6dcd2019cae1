"""langprofile CLI entry points.

This module exposes detection, profile building and validation commands.
It maps argparse commands onto SDK calls.
"""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from cli.build_profile_command import add_build_profile_command, run_build_profile_command
from cli.detect_command import add_detect_command, run_detect_command
from cli.validate_command import add_validate_command, run_validate_command
from core.config import DetectorConfig
from core.config_file import DetectorSettings, load_detector_config
from core.errors import LangProfileError


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="langprofile",
        description="N-gram language detection CLI",
    )
    parser.add_argument(
        "--config",
        help="YAML detector config; defaults come from LANGPROFILE_* environment variables",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    add_detect_command(subparsers)
    add_build_profile_command(subparsers)
    add_validate_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the langprofile CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        settings = _load_settings(args.config)
        if args.command == "detect":
            return run_detect_command(settings, args)
        if args.command == "build-profile":
            return run_build_profile_command(settings, args)
        if args.command == "validate":
            return run_validate_command(settings, args)
    except LangProfileError as error:
        print(f"error={error}", file=sys.stderr)
        return 1
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _load_settings(config_path: str | None) -> DetectorSettings:
    """Load detector settings from a YAML file or the environment."""
    if config_path:
        return load_detector_config(config_path)
    return DetectorSettings(config=DetectorConfig.from_env())
