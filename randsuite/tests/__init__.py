"""Statistical randomness tests package."""

from .base import RandomnessTest, Report, TestReport
from .factory import (
    ALL_TESTS,
    DEFAULT_TESTS,
    ENT_TESTS,
    TestFactory,
    build_ent_registry,
    select_tests,
)
from .statistical import (
    AverageTest,
    ChiSquaredTest,
    EntropyTest,
    MonteCarloPiTest,
    PlaceholderTest,
    SerialCorrelationTest,
)

__all__ = [
    "ALL_TESTS",
    "AverageTest",
    "ChiSquaredTest",
    "DEFAULT_TESTS",
    "ENT_TESTS",
    "EntropyTest",
    "MonteCarloPiTest",
    "PlaceholderTest",
    "RandomnessTest",
    "Report",
    "SerialCorrelationTest",
    "TestFactory",
    "TestReport",
    "build_ent_registry",
    "select_tests",
]
