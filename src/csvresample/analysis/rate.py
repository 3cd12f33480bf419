from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np


@dataclass
class RateSummary:
    """Sampling statistics for one time column."""

    row_count: int
    duration_s: float
    mean_hz: float
    min_interval_s: float
    max_interval_s: float

    @property
    def is_uniform(self) -> bool:
        """True when every interval matches the first to within 1e-9 relative."""
        if self.row_count < 2:
            return True
        return bool(
            np.isclose(self.min_interval_s, self.max_interval_s, rtol=1e-9, atol=0.0)
        )

    def describe(self) -> str:
        return (
            f"{self.row_count} rows over {self.duration_s:.6g} s "
            f"(mean {self.mean_hz:.6g} Hz, interval "
            f"{self.min_interval_s:.6g}..{self.max_interval_s:.6g} s)"
        )


def summarize_rate(times: Sequence[float] | np.ndarray) -> RateSummary:
    """
    Estimate the sampling rate of ``times``.

    Notes
    -----
    - Timestamps are assumed to be in seconds.
    - Fewer than two samples, or a non-positive span, give a zero rate.
    """
    t = np.asarray(times, dtype=np.float64).reshape(-1)
    count = int(t.size)
    if count < 2:
        return RateSummary(count, 0.0, 0.0, 0.0, 0.0)

    span = float(t[-1] - t[0])
    intervals = np.diff(t)
    mean_hz = (count - 1) / span if span > 0 else 0.0
    return RateSummary(
        row_count=count,
        duration_s=span,
        mean_hz=mean_hz,
        min_interval_s=float(intervals.min()),
        max_interval_s=float(intervals.max()),
    )


__all__ = ["RateSummary", "summarize_rate"]
