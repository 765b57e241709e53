"""Configuration parsing utilities for the randomness test suite."""

from __future__ import annotations

import configparser
import math
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Tuple

from .errors import InvalidConfigurationError, MissingFileError
from .tests.utils import NORMALIZATIONS

DEFAULT_CONFIDENCE_THRESHOLD = 0.99


@dataclass(frozen=True)
class TestsSection:
    """Configuration data describing which tests are enabled.

    An empty ``enabled_tests`` tuple means the suite preset decides.
    """

    __test__ = False
    enabled_tests: Tuple[str, ...] = ()


@dataclass(frozen=True)
class SummariesSection:
    """Summaries to run after the tests; the first one decides the verdict."""

    enabled_summaries: Tuple[str, ...] = ("average",)


@dataclass(frozen=True)
class WeightsSection:
    """Normalised weighting information for the configured tests."""

    values: Mapping[str, float] = field(default_factory=lambda: MappingProxyType({}))
    normalised: bool = False


@dataclass(frozen=True)
class SamplingSection:
    """Options controlling sample size and the statistics computed on it.

    ``count`` is ``None`` when the file does not set it; the application then
    falls back to the input length or the default sample size.
    """

    count: int | None = None
    bins: int | None = None
    normalization: str = "buckets"
    lag: int | None = 1
    workers: int | None = None


@dataclass(frozen=True)
class OutputSection:
    """Options controlling how results should be presented to the user."""

    confidence_threshold: float = DEFAULT_CONFIDENCE_THRESHOLD
    report_path: Path | None = None


@dataclass(frozen=True)
class RandSuiteConfig:
    """Aggregate configuration container returned by :func:`load_config`."""

    tests: TestsSection = field(default_factory=TestsSection)
    summaries: SummariesSection = field(default_factory=SummariesSection)
    weights: WeightsSection = field(default_factory=WeightsSection)
    sampling: SamplingSection = field(default_factory=SamplingSection)
    output: OutputSection = field(default_factory=OutputSection)
    warnings: Tuple[str, ...] = field(default_factory=tuple)


def load_config(path: Path) -> RandSuiteConfig:
    """Load and validate an INI configuration file."""

    parser = configparser.ConfigParser()
    try:
        with path.open("r", encoding="utf-8") as config_file:
            parser.read_file(config_file)
    except FileNotFoundError as exc:
        raise MissingFileError(f"Configuration file not found: {path}") from exc
    except OSError as exc:  # pragma: no cover - filesystem guard
        raise MissingFileError(f"Could not read configuration file: {path}") from exc
    except configparser.Error as exc:
        raise InvalidConfigurationError(f"Configuration is not valid INI: {exc}") from exc

    tests_section = _parse_tests(parser)
    summaries_section = _parse_summaries(parser)
    weights_section, warnings = _parse_weights(parser, tests_section)
    sampling_section = _parse_sampling(parser)
    output_section = _parse_output(parser, path)

    return RandSuiteConfig(
        tests=tests_section,
        summaries=summaries_section,
        weights=weights_section,
        sampling=sampling_section,
        output=output_section,
        warnings=tuple(warnings),
    )


def _parse_tests(parser: configparser.ConfigParser) -> TestsSection:
    if not parser.has_section("tests"):
        return TestsSection()

    enabled: list[str] = []
    for name, _ in parser.items("tests"):
        try:
            is_enabled = parser.getboolean("tests", name)
        except ValueError as exc:
            raise InvalidConfigurationError(
                f"Test '{name}' in [tests] must be a boolean value."
            ) from exc
        if is_enabled:
            enabled.append(name)

    if not enabled:
        raise InvalidConfigurationError("At least one test must be enabled in [tests] section.")

    return TestsSection(enabled_tests=tuple(enabled))


def _parse_summaries(parser: configparser.ConfigParser) -> SummariesSection:
    if not parser.has_section("summaries"):
        return SummariesSection()

    enabled: list[str] = []
    for name, _ in parser.items("summaries"):
        try:
            is_enabled = parser.getboolean("summaries", name)
        except ValueError as exc:
            raise InvalidConfigurationError(
                f"Summary '{name}' in [summaries] must be a boolean value."
            ) from exc
        if is_enabled:
            enabled.append(name)

    if not enabled:
        raise InvalidConfigurationError(
            "At least one summary must be enabled in [summaries] section."
        )

    return SummariesSection(enabled_summaries=tuple(enabled))


def _parse_weights(
    parser: configparser.ConfigParser, tests: TestsSection
) -> tuple[WeightsSection, list[str]]:
    if not parser.has_section("weights"):
        return WeightsSection(), []

    raw_weights: dict[str, float] = {}
    for name, value in parser.items("weights"):
        try:
            weight = float(value)
        except ValueError as exc:
            raise InvalidConfigurationError(
                f"Weight for test '{name}' must be a numeric value."
            ) from exc
        if weight <= 0:
            raise InvalidConfigurationError(
                f"Weight for test '{name}' must be greater than zero."
            )
        raw_weights[name] = weight

    if tests.enabled_tests:
        missing_weights = [name for name in tests.enabled_tests if name not in raw_weights]
        if missing_weights:
            formatted = ", ".join(sorted(missing_weights))
            raise InvalidConfigurationError(
                f"Missing weight entries for enabled tests: {formatted}."
            )
        raw_weights = {name: raw_weights[name] for name in tests.enabled_tests}

    total_weight = sum(raw_weights.values())
    warnings: list[str] = []
    normalised = False
    if raw_weights and not math.isclose(total_weight, 1.0, rel_tol=1e-9, abs_tol=1e-9):
        normalised = True
        raw_weights = {name: value / total_weight for name, value in raw_weights.items()}
        warnings.append(
            "Weights for enabled tests did not sum to 1.0; normalised automatically."
        )

    weights_section = WeightsSection(
        values=MappingProxyType(dict(raw_weights)),
        normalised=normalised,
    )
    return weights_section, warnings


def _parse_sampling(parser: configparser.ConfigParser) -> SamplingSection:
    if not parser.has_section("sampling"):
        return SamplingSection()

    section = parser["sampling"]
    count = _positive_int(section, "count", None)
    bins = _positive_int(section, "bins", None)
    workers = _positive_int(section, "workers", None)

    normalization = section.get("normalization", "buckets").strip().lower()
    if normalization not in NORMALIZATIONS:
        raise InvalidConfigurationError(
            "Option 'normalization' in [sampling] must be either 'buckets' or 'samples'."
        )

    lag: int | None = 1
    raw_lag = section.get("lag", "").strip().lower()
    if raw_lag == "mean":
        lag = None
    elif raw_lag:
        try:
            lag = int(raw_lag)
        except ValueError as exc:
            raise InvalidConfigurationError(
                "Option 'lag' in [sampling] must be an integer or 'mean'."
            ) from exc
        if lag < 1:
            raise InvalidConfigurationError("Option 'lag' in [sampling] must be a positive integer.")

    return SamplingSection(
        count=count,
        bins=bins,
        normalization=normalization,
        lag=lag,
        workers=workers,
    )


def _positive_int(section: configparser.SectionProxy, key: str, default: int | None) -> int | None:
    raw_value = section.get(key, "").strip()
    if not raw_value:
        return default
    try:
        value = int(raw_value)
    except ValueError as exc:
        raise InvalidConfigurationError(
            f"Option '{key}' in [sampling] must be an integer value."
        ) from exc
    if value <= 0:
        raise InvalidConfigurationError(
            f"Option '{key}' in [sampling] must be greater than zero."
        )
    return value


def _parse_output(
    parser: configparser.ConfigParser, config_path: Path
) -> OutputSection:
    if not parser.has_section("output"):
        return OutputSection()

    section = parser["output"]
    confidence_threshold = DEFAULT_CONFIDENCE_THRESHOLD
    if "confidence_threshold" in section:
        raw_threshold = section["confidence_threshold"].strip()
        try:
            confidence_threshold = float(raw_threshold)
        except ValueError as exc:
            raise InvalidConfigurationError(
                "Option 'confidence_threshold' in [output] must be numeric."
            ) from exc
    if not 0.0 <= confidence_threshold <= 1.0:
        raise InvalidConfigurationError(
            "Option 'confidence_threshold' in [output] must be between 0 and 1."
        )

    report_path: Path | None = None
    raw_report = section.get("report_path", "").strip()
    if raw_report:
        candidate = Path(raw_report).expanduser()
        if not candidate.is_absolute():
            candidate = (config_path.parent / candidate).resolve()
        report_path = candidate

    return OutputSection(confidence_threshold=confidence_threshold, report_path=report_path)


__all__ = [
    "DEFAULT_CONFIDENCE_THRESHOLD",
    "OutputSection",
    "RandSuiteConfig",
    "SamplingSection",
    "SummariesSection",
    "TestsSection",
    "WeightsSection",
    "load_config",
]
