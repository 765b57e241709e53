"""Sampling helpers that drain a generator into an immutable sample."""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Any, Callable, Iterator

import numpy as np

from .errors import ConfigurationError

DEFAULT_SAMPLE_SIZE = 2**20

NextValue = Callable[[], Any]

_CONTRACT = (
    "A random number generator must provide a 'next' function (or an explicit "
    "next_value override) returning values in [0.0, 1.0)."
)


@dataclass(frozen=True, eq=False)
class Sample:
    """Ordered, read-only sequence of generator outputs shared by every test.

    The values are copied on construction so the caller keeps a writable array.
    """

    values: np.ndarray

    def __post_init__(self) -> None:
        values = np.array(self.values, dtype=float)
        values.flags.writeable = False
        object.__setattr__(self, "values", values)

    def __len__(self) -> int:
        return int(self.values.shape[0])

    def __iter__(self) -> Iterator[float]:
        return iter(self.values.tolist())

    def __getitem__(self, index):
        item = self.values[index]
        if isinstance(item, np.ndarray):
            return item
        return float(item)

    @classmethod
    def from_values(cls, values) -> "Sample":
        """Build a sample from any sequence of already validated values."""

        return cls(np.asarray(values, dtype=float))


def resolve_next_value(generator: Any, next_value: NextValue | None = None) -> NextValue:
    """Return the zero-argument function producing the generator's next value."""

    if next_value is not None:
        if not callable(next_value):
            raise ConfigurationError(_CONTRACT)
        return next_value
    candidate = getattr(generator, "next", None)
    if callable(candidate):
        return candidate
    if hasattr(generator, "__next__"):
        return lambda: _next_from_iterator(generator)
    candidate = getattr(generator, "random", None)
    if callable(candidate):
        return candidate
    if callable(generator):
        return generator
    raise ConfigurationError(_CONTRACT)


def draw_sample(
    generator: Any,
    count: int = DEFAULT_SAMPLE_SIZE,
    *,
    next_value: NextValue | None = None,
) -> Sample:
    """Call the generator exactly ``count`` times and validate every value.

    Values are kept in call order. The first invalid value aborts sampling
    with :class:`~randsuite.errors.ConfigurationError`.
    """

    if isinstance(count, bool) or not isinstance(count, numbers.Integral) or count <= 0:
        raise ConfigurationError(f"Sample size must be a positive integer, got {count!r}.")
    produce = resolve_next_value(generator, next_value)
    values = np.empty(int(count), dtype=float)
    for index in range(int(count)):
        values[index] = _validate(produce(), index)
    return Sample(values)


def _validate(value: Any, index: int) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ConfigurationError(
            f"{_CONTRACT} Value #{index} has type {type(value).__name__}."
        )
    number = float(value)
    if not 0.0 <= number < 1.0:
        raise ConfigurationError(f"{_CONTRACT} Value #{index} was {number!r}.")
    return number


def _next_from_iterator(iterator: Iterator[Any]) -> Any:
    try:
        return next(iterator)
    except StopIteration as exc:
        raise ConfigurationError(f"{_CONTRACT} The generator was exhausted.") from exc


__all__ = [
    "DEFAULT_SAMPLE_SIZE",
    "NextValue",
    "Sample",
    "draw_sample",
    "resolve_next_value",
]
