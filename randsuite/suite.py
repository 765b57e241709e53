"""Test suite orchestration: sample once, run tests, then summaries."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Any, List, Mapping

from .analysis import DEFAULT_SUMMARIES, SummaryFactory, SummaryReport
from .sampler import DEFAULT_SAMPLE_SIZE, NextValue, Sample, draw_sample
from .tests.base import RandomnessTest, Report, TestReport
from .tests.factory import DEFAULT_TESTS, ENT_TESTS, TestFactory


class TestSuite:
    """Owns the sample and the registered tests and summaries.

    The sample is drawn once at construction; an invalid generator raises
    :class:`~randsuite.errors.ConfigurationError` before any test exists.
    """

    __test__ = False
    default_tests: Mapping[str, TestFactory] = DEFAULT_TESTS
    default_summaries: Mapping[str, SummaryFactory] = DEFAULT_SUMMARIES

    def __init__(
        self,
        generator: Any = None,
        *,
        next_value: NextValue | None = None,
        count: int = DEFAULT_SAMPLE_SIZE,
        tests: Mapping[str, TestFactory] | None = None,
        summaries: Mapping[str, SummaryFactory] | None = None,
        max_workers: int | None = None,
    ) -> None:
        self.sample: Sample = draw_sample(generator, count, next_value=next_value)
        test_registry = self.default_tests if tests is None else tests
        summary_registry = self.default_summaries if summaries is None else summaries
        self.tests: List[RandomnessTest] = [
            factory(self.sample) for factory in test_registry.values()
        ]
        self.summaries = [factory() for factory in summary_registry.values()]
        self.max_workers = max_workers

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def run(self) -> List[Report]:
        """Run every test, then every summary over the collected test reports."""

        test_reports = self.run_tests()
        summary_reports = self.run_summaries(test_reports)
        return [*test_reports, *summary_reports]

    def run_tests(self) -> List[TestReport]:
        if self.max_workers is not None and self.max_workers > 1 and len(self.tests) > 1:
            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                return list(executor.map(lambda test: test.run(), self.tests))
        return [test.run() for test in self.tests]

    def run_summaries(self, test_reports: List[TestReport]) -> List[SummaryReport]:
        return [summary.run(test_reports) for summary in self.summaries]


class ENTSuite(TestSuite):
    """Suite preset running the ENT battery with an average summary."""

    default_tests = ENT_TESTS


__all__ = ["ENTSuite", "TestSuite"]
