"""Summaries combining individual test reports into an overall verdict.

The :mod:`randsuite.tests` package exposes individual statistical tests that
return :class:`randsuite.tests.base.TestReport` objects.  This module is
responsible for combining those raw outcomes into a single confidence score.

Every summary follows the same contract: it is constructed without arguments
(or with fixed options such as weights) and its ``run`` method receives the
full, ordered list of test reports.  Summaries never raise on an empty list;
they report a confidence of ``0.0`` instead.

``AverageSummary``
    Arithmetic mean of the test scores.  This is the only summary in the
    default registry.

``WeightedSummary``
    Weighted mean using per-test weights, typically read from the ``[weights]``
    section of the configuration file.  Tests without a weight count as ``1.0``.

``WorstCaseSummary``
    The lowest score of any test, for callers that want a single failing
    assumption to dominate the verdict.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, ClassVar, Mapping, Protocol, Sequence

import numpy as np

from .tests.base import Report, TestReport


@dataclass(frozen=True)
class SummaryReport(Report):
    """Aggregate outcome computed from a set of test reports."""

    kind: ClassVar[str] = "summary"


class Summary(Protocol):
    """Protocol implemented by all summaries."""

    name: str

    def run(self, reports: Sequence[TestReport]) -> SummaryReport:
        """Aggregate ``reports`` into a single confidence score."""


class AverageSummary:
    name = "average"

    def run(self, reports: Sequence[TestReport]) -> SummaryReport:
        scores = _scores(reports)
        confidence = float(scores.mean()) if scores.size else 0.0
        return SummaryReport(
            name=self.name,
            message="Arithmetic mean of the randomness probability of every test",
            is_random_probability=confidence,
            metrics={"tests": float(scores.size)},
        )


class WeightedSummary:
    name = "weighted"

    def __init__(self, weights: Mapping[str, float] | None = None) -> None:
        self.weights = MappingProxyType(dict(weights or {}))

    def run(self, reports: Sequence[TestReport]) -> SummaryReport:
        scores = _scores(reports)
        weights = np.asarray(
            [float(self.weights.get(report.name, 1.0)) for report in reports], dtype=float
        )
        total_weight = float(weights.sum())
        confidence = float(scores.dot(weights)) / total_weight if total_weight else 0.0
        return SummaryReport(
            name=self.name,
            message="Weighted mean of the randomness probability of every test",
            is_random_probability=confidence,
            metrics={"tests": float(scores.size), "total_weight": total_weight},
        )


class WorstCaseSummary:
    name = "worst_case"

    def run(self, reports: Sequence[TestReport]) -> SummaryReport:
        scores = _scores(reports)
        confidence = float(scores.min()) if scores.size else 0.0
        return SummaryReport(
            name=self.name,
            message="Lowest randomness probability reported by any test",
            is_random_probability=confidence,
            metrics={"tests": float(scores.size)},
        )


SummaryFactory = Callable[[], Summary]

DEFAULT_SUMMARIES: Mapping[str, SummaryFactory] = {AverageSummary.name: AverageSummary}

ALL_SUMMARIES: Mapping[str, SummaryFactory] = {
    summary.name: summary for summary in (AverageSummary, WeightedSummary, WorstCaseSummary)
}


def _scores(reports: Sequence[TestReport]) -> np.ndarray:
    return np.asarray([report.is_random_probability for report in reports], dtype=float)


__all__ = [
    "ALL_SUMMARIES",
    "AverageSummary",
    "DEFAULT_SUMMARIES",
    "Summary",
    "SummaryFactory",
    "SummaryReport",
    "WeightedSummary",
    "WorstCaseSummary",
]
