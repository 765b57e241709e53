"""Command line entry point for the randomness suite."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .app import DEFAULT_GENERATOR, GENERATORS, SUITES, RandSuiteApp
from .errors import ConfigurationError, MissingFileError

EXIT_RANDOM = 0
EXIT_UNEXPECTED_ERROR = 1
EXIT_MISSING_FILE = 2
EXIT_INVALID_CONFIG = 3
EXIT_NON_RANDOM = 5


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="randsuite",
        description="Estimate whether a generator of [0, 1) floats behaves as a uniform random process.",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--generator",
        "-g",
        choices=sorted(GENERATORS),
        help=f"Built-in generator to sample from (default: {DEFAULT_GENERATOR}).",
    )
    source.add_argument(
        "--input",
        "-i",
        type=Path,
        help="Path to a text file containing one value in [0, 1) per line.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Seed for the built-in generator.",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        help="Path to the INI configuration file describing the suite.",
    )
    parser.add_argument(
        "--count",
        "-n",
        type=int,
        help="Number of values to sample (default: configuration, input length, or 2**20).",
    )
    parser.add_argument(
        "--suite",
        "-s",
        choices=SUITES,
        default="ent",
        help="Test preset used when the configuration does not list tests.",
    )
    parser.add_argument(
        "--report",
        "-r",
        type=Path,
        help="Optional path where a markdown report will be written.",
    )
    parser.add_argument(
        "--workers",
        "-w",
        type=int,
        help="Run tests on this many threads.",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Print detailed per-test information to the console output.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    app = RandSuiteApp()
    try:
        result = app.run(
            generator=args.generator,
            seed=args.seed,
            input_path=args.input,
            config_path=args.config,
            count=args.count,
            suite=args.suite,
            report_path=args.report,
            workers=args.workers,
            verbose=args.verbose,
        )
    except MissingFileError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_MISSING_FILE
    except ConfigurationError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return EXIT_INVALID_CONFIG
    except Exception as exc:  # pragma: no cover - unexpected failure
        print(f"Unexpected error: {exc}", file=sys.stderr)
        return EXIT_UNEXPECTED_ERROR
    return EXIT_RANDOM if result.is_random else EXIT_NON_RANDOM


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    sys.exit(main())
