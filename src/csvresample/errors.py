"""Exception types raised by the loader, resampler, writer and CLI."""

from __future__ import annotations

from pathlib import Path


class ResamplerError(Exception):
    """Base class for every failure the command line maps to exit code 1."""


class UsageError(ResamplerError):
    """Wrong number of command-line arguments."""


class ArgumentParseError(ResamplerError):
    """The output frequency argument is not a number."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Failed to convert '{token}' to output frequency")


class FileOpenError(ResamplerError):
    """An input or output path could not be opened, read or written."""

    def __init__(self, path: Path | str, mode: str, reason: str | None = None) -> None:
        self.path = Path(path)
        self.mode = mode
        self.reason = reason
        message = f"Failed to open '{path}' for {mode}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class TokenParseError(ResamplerError):
    """A CSV token could not be converted to a number."""

    def __init__(self, token: str, line_number: int) -> None:
        self.token = token
        self.line_number = line_number
        super().__init__(
            f"Failed to convert '{token}' to a number on line {line_number}"
        )


# Loader-facing name for the same failure.
ParseError = TokenParseError


class SchemaError(ResamplerError):
    """A row has a different column count than the first row."""

    def __init__(self, line_number: int, found: int, expected: int) -> None:
        self.line_number = line_number
        self.found = found
        self.expected = expected
        super().__init__(
            f"On line {line_number}, found {found} columns, expected {expected}"
        )


class PreconditionError(ResamplerError):
    """Input to the resampler cannot be interpolated."""


class InvalidFrequencyError(PreconditionError):
    def __init__(self, frequency: float) -> None:
        self.frequency = frequency
        super().__init__(
            f"Output frequency must be a finite number > 0, got {frequency!r}"
        )


class InsufficientDataError(PreconditionError):
    def __init__(self, row_count: int) -> None:
        self.row_count = row_count
        super().__init__(
            f"At least 2 rows are needed to resample, found {row_count}"
        )


class NonMonotonicTimeError(PreconditionError):
    def __init__(self, row_number: int, previous: float, current: float) -> None:
        self.row_number = row_number
        self.previous = previous
        self.current = current
        super().__init__(
            f"Time on row {row_number} ({current!r}) is not greater than "
            f"the previous row ({previous!r})"
        )


class OutputSizeError(PreconditionError):
    """The requested frequency would produce an unrepresentable row count."""

    def __init__(self, frequency: float, span: float, limit: int) -> None:
        self.frequency = frequency
        self.span = span
        self.limit = limit
        super().__init__(
            f"Output frequency {frequency!r} over a {span!r} s span does not give "
            f"a row count between 1 and {limit}"
        )


class ConfigError(ResamplerError):
    """Configuration file or value is invalid."""


__all__ = [
    "ArgumentParseError",
    "ConfigError",
    "FileOpenError",
    "InsufficientDataError",
    "InvalidFrequencyError",
    "NonMonotonicTimeError",
    "OutputSizeError",
    "ParseError",
    "PreconditionError",
    "ResamplerError",
    "SchemaError",
    "TokenParseError",
    "UsageError",
]
