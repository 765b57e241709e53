"""Statistical battery estimating whether a [0, 1) generator is uniformly random."""

from .analysis import AverageSummary, SummaryReport, WeightedSummary, WorstCaseSummary
from .app import RandSuiteApp, RunResult
from .errors import ConfigurationError
from .sampler import DEFAULT_SAMPLE_SIZE, Sample, draw_sample
from .suite import ENTSuite, TestSuite
from .tests.base import TestReport

__all__ = [
    "AverageSummary",
    "ConfigurationError",
    "DEFAULT_SAMPLE_SIZE",
    "ENTSuite",
    "RandSuiteApp",
    "RunResult",
    "Sample",
    "SummaryReport",
    "TestReport",
    "TestSuite",
    "WeightedSummary",
    "WorstCaseSummary",
    "draw_sample",
]
