"""Build-profile command wiring for langprofile CLI."""

from __future__ import annotations

import argparse
from typing import Any

from cli.input_text import read_input_text
from core.config_file import DetectorSettings
from core.constants import DEFAULT_MIN_FREQUENCY
from i18n.locale_tag import parse_locale
from ngram.extractor import StandardGramExtractor
from profiles.profile_builder import LanguageProfileBuilder
from profiles.profile_io import write_profile


def add_build_profile_command(subparsers: Any) -> None:
    """Register build-profile subcommand."""
    parser = subparsers.add_parser("build-profile", help="Train a profile from text files")
    parser.add_argument("inputs", nargs="+", help="UTF-8 training text files")
    parser.add_argument("--locale", required=True, help="Locale tag, e.g. en or zh-Hant")
    parser.add_argument("--output", required=True, help="Profile JSON output path")
    parser.add_argument(
        "--min-frequency",
        type=int,
        default=DEFAULT_MIN_FREQUENCY,
        help="Drop grams seen fewer times than this",
    )


def run_build_profile_command(settings: DetectorSettings, args: argparse.Namespace) -> int:
    """Train a profile from the input files and write it as JSON."""
    builder = LanguageProfileBuilder(
        parse_locale(args.locale),
        StandardGramExtractor(settings.gram_lengths),
        min_frequency=args.min_frequency,
    )
    for input_path in args.inputs:
        builder.add_text(read_input_text(input_path))
    output_path = write_profile(builder.build(), args.output)
    print(output_path)
    return 0
