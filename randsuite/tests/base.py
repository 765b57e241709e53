"""Common interfaces and data structures for randomness tests."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import ClassVar, Mapping, Protocol


@dataclass(frozen=True)
class Report:
    """Flat, immutable outcome of a test or summary."""

    kind: ClassVar[str] = "report"

    name: str
    message: str
    is_random_probability: float
    metrics: Mapping[str, float] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "metrics", MappingProxyType(dict(self.metrics)))

    def to_dict(self) -> dict[str, object]:
        """Return the report as a single-level mapping."""

        payload: dict[str, object] = {
            "name": self.name,
            "kind": self.kind,
            "message": self.message,
            "is_random_probability": self.is_random_probability,
        }
        payload.update(self.metrics)
        return payload


@dataclass(frozen=True)
class TestReport(Report):
    """Result from executing a randomness test against a sample."""

    __test__ = False
    kind: ClassVar[str] = "test"


class RandomnessTest(Protocol):
    """Protocol implemented by all statistical tests.

    Implementations receive the :class:`~randsuite.sampler.Sample` when they are
    constructed and must not mutate it.
    """

    name: str

    def run(self) -> TestReport:
        """Execute the test returning a report with its confidence score."""


__all__ = ["RandomnessTest", "Report", "TestReport"]
