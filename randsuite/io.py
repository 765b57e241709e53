"""Input helpers for feeding recorded generator output into a suite."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path, PureWindowsPath
from typing import Iterator, Tuple, Union

from .errors import EmptyInputFileError, MissingFileError

Entry = Union[float, str]

NUMERIC_PATTERN = re.compile(
    r"""
    ^
    [+-]?
    (
        (?:\d+\.\d+)|
        (?:\d+\.)|
        (?:\.\d+)|
        (?:\d+)
    )
    (?:[eE][+-]?\d+)?
    $
    """,
    re.VERBOSE,
)


@dataclass(frozen=True)
class InputData:
    """Values read from an input file, in file order.

    Lines that do not look like numbers are kept as strings so sampling can
    reject them with the offending position.
    """

    path: Path
    entries: Tuple[Entry, ...]

    @property
    def entry_count(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.entries)


def read_input_file(path: Path | str) -> InputData:
    """Read one value per non-blank line from ``path`` using UTF-8 encoding."""

    candidate = _normalise_path(path)
    if not candidate.exists():
        raise MissingFileError(f"Input file not found: {candidate}")
    try:
        with candidate.open("r", encoding="utf-8", newline="") as handle:
            raw_lines = tuple(handle.readlines())
    except OSError as exc:  # pragma: no cover - filesystem guard
        raise MissingFileError(f"Could not read input file: {candidate}") from exc

    entries = tuple(_parse_entry(line.strip()) for line in raw_lines if line.strip())
    if not entries:
        raise EmptyInputFileError(
            f"Input file '{candidate}' does not contain any non-empty entries."
        )
    return InputData(path=candidate, entries=entries)


def _parse_entry(text: str) -> Entry:
    if NUMERIC_PATTERN.fullmatch(text):
        return float(text)
    return text


def _normalise_path(path: Path | str) -> Path:
    if isinstance(path, str) and re.match(r"^[A-Za-z]:\\", path):
        return Path(PureWindowsPath(path))
    return Path(path).expanduser().resolve()


__all__ = ["Entry", "InputData", "read_input_file"]
