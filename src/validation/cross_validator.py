"""K-fold cross-validation of language profiles.

This module estimates how well a profile trained from one text sample
detects its own language. The sample is partitioned; each fold trains a
fresh profile on all other partitions, builds a transient detector with the
background profiles, and scores the held-out partition. The result is the
mean probability assigned to the profile's language.

This is maintenance tooling and is not used on the detection path.
"""

from __future__ import annotations

from typing import Iterable

from core.config import DetectorConfig
from core.constants import DEFAULT_VALIDATION_FOLDS, MIN_VALIDATION_FOLDS
from core.errors import LangProfileConfigError, LangProfileValidationError
from core.logging_config import get_logger
from core.types import FoldResult
from detect.detector_builder import LanguageDetectorBuilder
from profiles.language_profile import LanguageProfile
from profiles.profile_builder import LanguageProfileBuilder
from validation.partitioning import partition_sample

_LOGGER = get_logger(__name__)


class LanguageProfileValidator:
    """Configures and runs k-fold cross-validation for one profile builder."""

    def __init__(self) -> None:
        self._k = DEFAULT_VALIDATION_FOLDS
        self._break_words = False
        self._language_profiles: list[LanguageProfile] = []
        self._profile_builder: LanguageProfileBuilder | None = None
        self._input_sample: str | None = None
        self._detector_config = DetectorConfig()

    @property
    def k(self) -> int:
        return self._k

    def set_k(self, k: int) -> "LanguageProfileValidator":
        """Set how many parts the sample is partitioned into (minimum 3)."""
        if isinstance(k, bool) or not isinstance(k, int) or k < MIN_VALIDATION_FOLDS:
            raise LangProfileConfigError(
                f"Invalid k {k!r}: expected integer >= {MIN_VALIDATION_FOLDS}."
            )
        self._k = k
        return self

    def set_break_words(self, break_words: bool) -> "LanguageProfileValidator":
        """Split the sample into equal character chunks, ignoring word boundaries."""
        self._break_words = break_words
        return self

    def set_detector_config(self, config: DetectorConfig) -> "LanguageProfileValidator":
        """Set the scoring configuration for every fold detector.

        Args:
            config: Detector configuration; defaults apply when never set.

        Returns:
            This validator.
        """
        self._detector_config = config
        return self

    def load_language_profile(self, profile: LanguageProfile) -> "LanguageProfileValidator":
        """Add a background profile the evaluated language competes against."""
        self._language_profiles.append(profile)
        return self

    def load_language_profiles(
        self,
        profiles: Iterable[LanguageProfile],
    ) -> "LanguageProfileValidator":
        """Add several background profiles."""
        self._language_profiles.extend(profiles)
        return self

    def remove_language_profile(self, language: str) -> "LanguageProfileValidator":
        """Drop background profiles whose language subtag matches."""
        self._language_profiles = [
            profile for profile in self._language_profiles if profile.locale.language != language
        ]
        return self

    def set_language_profile_builder(
        self,
        builder: LanguageProfileBuilder,
    ) -> "LanguageProfileValidator":
        """Set the builder whose configuration is trained in every fold."""
        self._profile_builder = builder
        return self

    def load_input_sample(self, sample: str) -> "LanguageProfileValidator":
        """Set the text that is partitioned into folds."""
        self._input_sample = sample
        return self

    def validate(self) -> float:
        """Run the k-fold validation.

        Returns:
            Mean probability over all folds, in [0, 1].

        Raises:
            LangProfileValidationError: If the builder or sample is missing,
                or the sample yields fewer than two partitions.
        """
        folds = self.validate_folds()
        return sum(fold.probability for fold in folds) / len(folds)

    def validate_folds(self) -> list[FoldResult]:
        """Run the k-fold validation and return one result per partition."""
        builder = self._require_builder()
        locale = builder.locale
        self.remove_language_profile(locale.language)
        partitions = self._partition()
        results: list[FoldResult] = []
        for fold_index, test_sample in enumerate(partitions):
            fold_builder = LanguageProfileBuilder.from_builder(builder)
            for train_index, train_sample in enumerate(partitions):
                if train_index != fold_index:
                    fold_builder.add_text(train_sample)
            detector = (
                LanguageDetectorBuilder(builder.extractor, self._detector_config)
                .with_profiles(self._language_profiles)
                .with_profile(fold_builder.build())
                .build()
            )
            probability = next(
                (
                    detected.probability
                    for detected in detector.get_probabilities(test_sample)
                    if detected.locale == locale
                ),
                0.0,
            )
            results.append(
                FoldResult(
                    fold_index=fold_index,
                    locale=locale,
                    probability=probability,
                    test_length=len(test_sample),
                )
            )
            _LOGGER.info(
                "fold_validated",
                locale=str(locale),
                fold_index=fold_index,
                fold_count=len(partitions),
                probability=probability,
            )
        _LOGGER.info(
            "cross_validation_completed",
            locale=str(locale),
            fold_count=len(results),
            k=self._k,
            mean_probability=sum(fold.probability for fold in results) / len(results),
        )
        return results

    def _require_builder(self) -> LanguageProfileBuilder:
        if self._profile_builder is None:
            raise LangProfileValidationError(
                "No profile builder set. Call set_language_profile_builder() before validate()."
            )
        return self._profile_builder

    def _partition(self) -> list[str]:
        """Partition the loaded sample.

        Returns:
            At least two partitions.

        Raises:
            LangProfileValidationError: If no sample is loaded or it is too
                short to partition.
        """
        if not self._input_sample:
            raise LangProfileValidationError(
                "No input sample loaded. Call load_input_sample() before validate()."
            )
        partitions = partition_sample(self._input_sample, self._k, self._break_words)
        if len(partitions) < 2:
            raise LangProfileValidationError(
                f"Sample of {len(self._input_sample)} characters produced {len(partitions)} "
                "partition(s); at least 2 are needed. Provide a longer sample."
            )
        return partitions
