"""
Uniform-rate resampling by piecewise-linear interpolation.

Output times start at the first input time and advance by ``1 / frequency``
through a running accumulator, so rounding matches repeated addition rather
than ``t0 + k * step``. A cursor into the input marks the left edge of the
bracketing interval and only ever moves forward, which keeps the whole pass
linear in ``len(input) + len(output)``.
"""

from __future__ import annotations

import logging
from typing import Sequence, Tuple

import numpy as np

from .models import Dataset
from .validation import check_frequency, check_output_size, check_preconditions

logger = logging.getLogger(__name__)


def output_length(t0: float, t_end: float, frequency: float) -> int:
    """Number of output rows covering ``[t0, t_end]`` at ``frequency``."""
    return int((t_end - t0) * frequency) + 1


def output_times(t0: float, count: int, frequency: float) -> np.ndarray:
    """Accumulated output timestamps ``t0, t0 + step, t0 + step + step, ...``."""
    step = 1.0 / frequency
    out = np.empty(count, dtype=np.float64)
    time = float(t0)
    for k in range(count):
        out[k] = time
        time += step
    return out


def advance_cursor(times: Sequence[float], cursor: int, time: float) -> int:
    """
    Move ``cursor`` forward until ``times[cursor] < time <= times[cursor + 1]``.

    The cursor saturates at ``len(times) - 2`` so ``cursor + 1`` is always a
    valid index.
    """
    last = len(times) - 2
    while cursor < last:
        if times[cursor] < time <= times[cursor + 1]:
            break
        cursor += 1
    return cursor


def interpolate_row(left: np.ndarray, right: np.ndarray, time: float) -> np.ndarray:
    """
    Linearly interpolate every channel of ``left``/``right`` at ``time``.

    Returns a new row whose column 0 is ``time``.
    """
    row = np.empty_like(left, dtype=np.float64)
    row[0] = time
    fraction = (time - left[0]) / (right[0] - left[0])
    row[1:] = fraction * (right[1:] - left[1:]) + left[1:]
    return row


def resample_with_trace(
    dataset: Dataset, frequency: float, *, validate: bool = True
) -> Tuple[Dataset, np.ndarray]:
    """
    Resample ``dataset`` and also return the cursor used for each output row.

    The cursor array is the index of the left input row of the interval each
    output row was taken from; it is non-decreasing.
    """
    frequency = check_preconditions(dataset, frequency, validate_times=validate)

    values = dataset.values
    times = values[:, 0].tolist()
    count = output_length(times[0], times[-1], frequency)
    stamps = output_times(times[0], count, frequency)

    out = np.empty((count, dataset.column_count), dtype=np.float64)
    cursors = np.empty(count, dtype=np.intp)
    cursor = 0
    exact = 0
    for k, time in enumerate(stamps.tolist()):
        if time == times[cursor]:
            out[k] = values[cursor]
            exact += 1
        else:
            cursor = advance_cursor(times, cursor, time)
            if time == times[cursor + 1]:
                out[k] = values[cursor + 1]
                exact += 1
            else:
                out[k] = interpolate_row(values[cursor], values[cursor + 1], time)
        cursors[k] = cursor

    logger.debug(
        "Resampled %d rows to %d rows at %.6g Hz (%d exact matches)",
        dataset.row_count,
        count,
        frequency,
        exact,
    )
    return Dataset(out), cursors


def resample(dataset: Dataset, frequency: float, *, validate: bool = True) -> Dataset:
    """
    Return a new dataset sampled every ``1 / frequency`` seconds.

    Parameters
    ----------
    dataset:
        At least two rows, ascending by time.
    frequency:
        Output rate in Hz (finite, > 0).
    validate:
        Check that timestamps strictly increase before resampling. Frequency
        and row count are always checked.

    Raises
    ------
    PreconditionError
        If the input cannot be interpolated.
    """
    resampled, _ = resample_with_trace(dataset, frequency, validate=validate)
    return resampled


def expected_length(dataset: Dataset, frequency: float) -> int:
    """Row count :func:`resample` will produce for ``dataset``."""
    frequency = check_frequency(frequency)
    if dataset.is_empty:
        return 0
    check_output_size(dataset, frequency)
    times = dataset.times
    return output_length(float(times[0]), float(times[-1]), frequency)


__all__ = [
    "advance_cursor",
    "expected_length",
    "interpolate_row",
    "output_length",
    "output_times",
    "resample",
    "resample_with_trace",
]
