"""Utility helpers shared by statistical randomness tests."""

from __future__ import annotations

from typing import Literal

import numpy as np

Normalization = Literal["buckets", "samples"]
NORMALIZATIONS: tuple[str, ...] = ("buckets", "samples")


def clamp(value: float, lower: float = 0.0, upper: float = 1.0) -> float:
    """Clamp ``value`` into the ``[lower, upper]`` range."""

    return max(lower, min(upper, value))


def squared_error_score(error: float) -> float:
    """Map an error magnitude to ``1 - clamp(error**2)``."""

    return 1.0 - clamp(error * error)


def bucket_counts(values: np.ndarray, bins: int | None = None) -> np.ndarray:
    """Count occurrences per bucket.

    Without ``bins`` values are bucketed by exact equality. With ``bins`` the
    ``[0, 1)`` interval is split into that many equal-width cells and only the
    occupied cells are returned.
    """

    if values.size == 0:
        return np.zeros(0, dtype=np.int64)
    if bins is None:
        _, counts = np.unique(values, return_counts=True)
        return counts
    cells = np.minimum((values * bins).astype(np.int64), bins - 1)
    counts = np.bincount(cells, minlength=bins)
    return counts[counts > 0]


def bucket_probabilities(
    counts: np.ndarray, normalization: Normalization = "buckets"
) -> np.ndarray:
    """Turn bucket counts into frequencies.

    ``"buckets"`` divides by the number of distinct buckets, ``"samples"`` by
    the total number of values.
    """

    if normalization == "buckets":
        divisor = counts.size
    elif normalization == "samples":
        divisor = int(counts.sum())
    else:
        raise ValueError(f"Unsupported normalization: {normalization}")
    if divisor == 0:
        return np.zeros(0, dtype=float)
    return counts / divisor


def next_power_of_two(n: int) -> int:
    """Return the smallest power of two greater than or equal to ``n``."""

    if n <= 1:
        return 1
    return 1 << (n - 1).bit_length()


def fft_autocovariance(values: np.ndarray) -> np.ndarray:
    """Circular autocovariance of ``values`` via the Wiener-Khinchin relation.

    The signal is zero padded to the next power of two after subtracting the
    mean taken over the padded length.
    """

    padded_length = next_power_of_two(values.size)
    centred = np.zeros(padded_length, dtype=float)
    centred[: values.size] = values - values.sum() / padded_length
    spectrum = np.fft.fft(centred)
    power = np.abs(spectrum) ** 2
    return np.fft.ifft(power).real


__all__ = [
    "NORMALIZATIONS",
    "Normalization",
    "bucket_counts",
    "bucket_probabilities",
    "clamp",
    "fft_autocovariance",
    "next_power_of_two",
    "squared_error_score",
]
