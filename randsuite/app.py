"""Application orchestration for the randomness suite CLI."""

from __future__ import annotations

import random
import time
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from functools import partial
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Sequence, Tuple

import numpy as np

from .analysis import ALL_SUMMARIES, SummaryFactory, SummaryReport, WeightedSummary
from .config import RandSuiteConfig, load_config
from .errors import InvalidConfigurationError
from .io import read_input_file
from .reporting import print_console_summary, write_markdown_report
from .sampler import DEFAULT_SAMPLE_SIZE
from .suite import TestSuite
from .tests.base import Report, TestReport
from .tests.factory import DEFAULT_TESTS, TestFactory, build_ent_registry, select_tests

GENERATORS: Mapping[str, Callable[[int | None], Any]] = {
    "python": random.Random,
    "system": lambda seed: random.SystemRandom(),
    "numpy": np.random.default_rng,
}

DEFAULT_GENERATOR = "python"

SUITES: Tuple[str, ...] = ("ent", "default")


@dataclass(frozen=True)
class RunResult:
    """Summary of a full application run."""

    source: str
    config_path: Path | None
    total_values: int
    overall_confidence: float
    is_random: bool
    confidence_threshold: float
    test_reports: Sequence[TestReport]
    summary_reports: Sequence[SummaryReport]
    started_at: datetime
    duration: timedelta
    warnings: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def reports(self) -> List[Report]:
        return [*self.test_reports, *self.summary_reports]


class RandSuiteApp:
    """High level service wiring configuration, sampling, and rendering."""

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def run(
        self,
        *,
        generator: str | None = None,
        seed: int | None = None,
        input_path: Path | None = None,
        config_path: Path | None = None,
        count: int | None = None,
        suite: str = "ent",
        report_path: Path | None = None,
        workers: int | None = None,
        verbose: bool = False,
        echo: bool = True,
    ) -> RunResult:
        """Execute the sampling, testing and reporting workflow."""

        started_at = datetime.now(timezone.utc)
        start = time.perf_counter()
        config = self._load_config(config_path)
        source, rng, available = self._resolve_source(generator, seed, input_path)
        sample_size = self._resolve_count(count, config, available)
        test_suite = TestSuite(
            rng,
            count=sample_size,
            tests=self._resolve_tests(config, suite),
            summaries=self._resolve_summaries(config),
            max_workers=workers if workers is not None else config.sampling.workers,
        )
        test_reports = test_suite.run_tests()
        summary_reports = test_suite.run_summaries(test_reports)
        threshold = config.output.confidence_threshold
        overall = summary_reports[0].is_random_probability
        result = RunResult(
            source=source,
            config_path=config_path,
            total_values=len(test_suite.sample),
            overall_confidence=overall,
            is_random=overall >= threshold,
            confidence_threshold=threshold,
            test_reports=tuple(test_reports),
            summary_reports=tuple(summary_reports),
            started_at=started_at,
            duration=timedelta(seconds=time.perf_counter() - start),
            warnings=config.warnings,
        )
        if echo:
            print_console_summary(result, verbose=verbose)
        target = report_path or config.output.report_path
        if target is not None:
            write_markdown_report(result, target)
        return result

    # ------------------------------------------------------------------
    # Pipeline stages
    # ------------------------------------------------------------------
    def _load_config(self, path: Path | None) -> RandSuiteConfig:
        if path is None:
            return RandSuiteConfig()
        return load_config(path)

    def _resolve_source(
        self, generator: str | None, seed: int | None, input_path: Path | None
    ) -> Tuple[str, Any, int | None]:
        if input_path is not None:
            data = read_input_file(input_path)
            return str(data.path), iter(data), data.entry_count
        generator = generator or DEFAULT_GENERATOR
        factory = GENERATORS.get(generator)
        if factory is None:
            raise InvalidConfigurationError(f"Unknown generator '{generator}'.")
        instance = factory(seed)
        return f"{generator} generator (seed {seed})", instance, None

    def _resolve_count(
        self, count: int | None, config: RandSuiteConfig, available: int | None
    ) -> int:
        if count is not None:
            return count
        if config.sampling.count is not None:
            return config.sampling.count
        if available is not None:
            return available
        return DEFAULT_SAMPLE_SIZE

    def _resolve_tests(self, config: RandSuiteConfig, suite: str) -> Dict[str, TestFactory]:
        if suite not in SUITES:
            raise InvalidConfigurationError(f"Unknown suite '{suite}'.")
        sampling = config.sampling
        ent_registry = build_ent_registry(
            bins=sampling.bins,
            normalization=sampling.normalization,
            lag=sampling.lag,
        )
        if config.tests.enabled_tests:
            return select_tests(
                config.tests.enabled_tests, registry={**DEFAULT_TESTS, **ent_registry}
            )
        if suite == "default":
            return dict(DEFAULT_TESTS)
        return ent_registry

    def _resolve_summaries(self, config: RandSuiteConfig) -> Dict[str, SummaryFactory]:
        summaries: Dict[str, SummaryFactory] = {}
        for name in config.summaries.enabled_summaries:
            factory = ALL_SUMMARIES.get(name)
            if factory is None:
                raise InvalidConfigurationError(f"Unknown summary '{name}' in configuration.")
            if factory is WeightedSummary:
                summaries[name] = partial(WeightedSummary, config.weights.values)
            else:
                summaries[name] = factory
        return summaries


__all__ = ["DEFAULT_GENERATOR", "GENERATORS", "RandSuiteApp", "RunResult", "SUITES"]
