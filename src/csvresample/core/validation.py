"""Precondition checks run before resampling."""

from __future__ import annotations

import logging
import math

import numpy as np

from ..errors import (
    InsufficientDataError,
    InvalidFrequencyError,
    NonMonotonicTimeError,
    OutputSizeError,
)
from .models import Dataset

logger = logging.getLogger(__name__)

# Upper bound on resampled rows.
MAX_OUTPUT_ROWS = 100_000_000


def check_frequency(frequency: float) -> float:
    """Return ``frequency`` as a float, raising if it is not finite and > 0."""
    try:
        value = float(frequency)
    except (TypeError, ValueError) as exc:
        raise InvalidFrequencyError(frequency) from exc
    if not math.isfinite(value) or value <= 0.0:
        raise InvalidFrequencyError(frequency)
    return value


def check_row_count(dataset: Dataset) -> None:
    if dataset.row_count < 2:
        raise InsufficientDataError(dataset.row_count)


def check_monotonic(times: np.ndarray) -> None:
    """
    Require strictly increasing, finite timestamps.

    The reported row number is 1-based, which matches the line number of a
    file without blank lines.
    """
    times = np.asarray(times, dtype=np.float64)
    finite = np.isfinite(times)
    if not finite.all():
        idx = int(np.argmin(finite))
        previous = float(times[idx - 1]) if idx > 0 else float("nan")
        raise NonMonotonicTimeError(idx + 1, previous, float(times[idx]))

    if times.size < 2:
        return
    steps = np.diff(times)
    bad = np.flatnonzero(steps <= 0.0)
    if bad.size:
        idx = int(bad[0]) + 1
        raise NonMonotonicTimeError(idx + 1, float(times[idx - 1]), float(times[idx]))


def check_output_size(dataset: Dataset, frequency: float) -> None:
    """
    Require ``span * frequency`` to give a row count that fits in memory.

    A negative or non-finite product (possible when the ordering check is
    skipped) is rejected as well.
    """
    times = dataset.times
    span = float(times[-1] - times[0])
    steps = span * frequency
    if not math.isfinite(steps) or steps < 0.0 or steps >= MAX_OUTPUT_ROWS:
        raise OutputSizeError(frequency, span, MAX_OUTPUT_ROWS)


def check_preconditions(
    dataset: Dataset, frequency: float, *, validate_times: bool = True
) -> float:
    """
    Validate resampler input and return the frequency as a float.

    Frequency, row count and output size are always checked.
    ``validate_times=False`` skips the ordering check on the time column.
    """
    value = check_frequency(frequency)
    check_row_count(dataset)
    if validate_times:
        check_monotonic(dataset.times)
    else:
        logger.debug("Skipping timestamp ordering check (%d rows)", dataset.row_count)
    check_output_size(dataset, value)
    return value


__all__ = [
    "MAX_OUTPUT_ROWS",
    "check_frequency",
    "check_monotonic",
    "check_output_size",
    "check_preconditions",
    "check_row_count",
]
