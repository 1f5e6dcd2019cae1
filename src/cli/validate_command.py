"""Validate command wiring for langprofile CLI."""

from __future__ import annotations

import argparse
from typing import Any

from cli.input_text import read_input_text
from core.config_file import DetectorSettings
from core.constants import DEFAULT_VALIDATION_FOLDS
from i18n.locale_tag import parse_locale
from ngram.extractor import StandardGramExtractor
from profiles.profile_builder import LanguageProfileBuilder
from profiles.profile_io import read_profiles
from validation.cross_validator import LanguageProfileValidator


def add_validate_command(subparsers: Any) -> None:
    """Register validate subcommand."""
    parser = subparsers.add_parser(
        "validate",
        help="Estimate profile accuracy with k-fold cross-validation",
    )
    parser.add_argument("--profiles", required=True, help="Directory of background profiles")
    parser.add_argument("--locale", required=True, help="Locale of the sample")
    parser.add_argument("--sample", required=True, help="UTF-8 sample text file")
    parser.add_argument("--k", type=int, default=DEFAULT_VALIDATION_FOLDS, help="Fold count")
    parser.add_argument(
        "--break-words",
        action="store_true",
        help="Split the sample into equal character chunks",
    )


def run_validate_command(settings: DetectorSettings, args: argparse.Namespace) -> int:
    """Run cross-validation and print per-fold and mean probabilities."""
    extractor = StandardGramExtractor(settings.gram_lengths)
    validator = (
        LanguageProfileValidator()
        .set_k(args.k)
        .set_break_words(args.break_words)
        .set_detector_config(settings.config)
        .load_language_profiles(read_profiles(args.profiles))
        .set_language_profile_builder(LanguageProfileBuilder(parse_locale(args.locale), extractor))
        .load_input_sample(read_input_text(args.sample))
    )
    folds = validator.validate_folds()
    for fold in folds:
        print(f"fold={fold.fold_index}\tprobability={fold.probability:.6f}")
    mean_probability = sum(fold.probability for fold in folds) / len(folds)
    print(f"mean_probability={mean_probability:.6f}")
    return 0
