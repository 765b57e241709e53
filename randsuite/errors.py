"""Custom exceptions for the randomness test suite."""

from __future__ import annotations


class RandSuiteError(Exception):
    """Base error type for application specific failures."""


class ConfigurationError(RandSuiteError):
    """Raised when a suite cannot be built from the supplied generator or options.

    Sampling raises this on the first value that is not a real number in
    ``[0.0, 1.0)`` or when no "next value" function can be resolved.
    """


class InvalidConfigurationError(ConfigurationError):
    """Raised when the configuration file is malformed or invalid."""


class MissingFileError(RandSuiteError):
    """Raised when a required input file could not be located."""


class InvalidInputError(ConfigurationError):
    """Raised when the provided input data does not meet application constraints."""


class EmptyInputFileError(InvalidInputError):
    """Raised when the input file does not contain any usable entries."""


__all__ = [
    "ConfigurationError",
    "EmptyInputFileError",
    "InvalidConfigurationError",
    "InvalidInputError",
    "MissingFileError",
    "RandSuiteError",
]
