"""Detect command wiring for langprofile CLI."""

from __future__ import annotations

import argparse
from typing import Any

from cli.input_text import read_input_text
from core.config_file import DetectorSettings
from detect.detector_builder import LanguageDetectorBuilder
from ngram.extractor import StandardGramExtractor
from profiles.profile_io import read_profiles


def add_detect_command(subparsers: Any) -> None:
    """Register detect subcommand."""
    parser = subparsers.add_parser("detect", help="Rank languages for a text")
    parser.add_argument("--profiles", required=True, help="Directory of profile JSON files")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--text", help="Text to classify")
    source.add_argument("--file", help="UTF-8 text file to classify")
    parser.add_argument(
        "--best",
        action="store_true",
        help="Print only the confident top language, or 'unknown'",
    )


def run_detect_command(settings: DetectorSettings, args: argparse.Namespace) -> int:
    """Print ranked ``locale<TAB>probability`` rows for the input text."""
    detector = (
        LanguageDetectorBuilder(StandardGramExtractor(settings.gram_lengths), settings.config)
        .with_profiles(read_profiles(args.profiles))
        .build()
    )
    text = args.text if args.text is not None else read_input_text(args.file)
    if args.best:
        locale = detector.detect(text)
        print(str(locale) if locale is not None else "unknown")
        return 0
    for detected in detector.get_probabilities(text):
        print(f"{detected.locale}\t{detected.probability:.6f}")
    return 0

