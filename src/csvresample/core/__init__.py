"""Resampling core: the dataset container and the interpolation pass.

Nothing here touches files or the command line, so the functions can be
called from scripts and tests with in-memory :class:`Dataset` objects.
"""

from .models import Dataset
from .resample import (
    advance_cursor,
    expected_length,
    interpolate_row,
    output_length,
    output_times,
    resample,
    resample_with_trace,
)
from .validation import check_preconditions

__all__ = [
    "Dataset",
    "advance_cursor",
    "check_preconditions",
    "expected_length",
    "interpolate_row",
    "output_length",
    "output_times",
    "resample",
    "resample_with_trace",
]
