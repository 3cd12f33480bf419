"""
Before/after comparison plot for a resampling run.

Uses a bare Matplotlib :class:`~matplotlib.figure.Figure` (no pyplot, no
interactive backend) so it works from the command line on headless machines.
Each channel gets its own subplot with the original samples drawn as markers
and the resampled series as a line.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Sequence

from matplotlib.figure import Figure

from ..core.models import Dataset
from ..errors import FileOpenError

logger = logging.getLogger(__name__)

# Above this many channels the figure becomes unreadable; plot the first ones.
MAX_PLOTTED_CHANNELS = 8


def _select_channels(dataset: Dataset, channels: Optional[Sequence[int]]) -> list[int]:
    """Return 1-based column indices to plot."""
    if channels is None:
        return list(range(1, min(dataset.column_count, MAX_PLOTTED_CHANNELS + 1)))
    selected: list[int] = []
    for ch in channels:
        col = int(ch)
        if col < 1 or col >= dataset.column_count:
            raise ValueError(
                f"channel {col} out of range 1..{dataset.column_count - 1}"
            )
        if col not in selected:
            selected.append(col)
    return selected


def build_comparison_figure(
    original: Dataset,
    resampled: Dataset,
    *,
    channels: Optional[Sequence[int]] = None,
    title: str | None = None,
) -> Figure:
    """Create a figure overlaying ``original`` and ``resampled`` per channel."""
    if original.column_count != resampled.column_count:
        raise ValueError(
            f"column count mismatch: {original.column_count} vs {resampled.column_count}"
        )
    cols = _select_channels(original, channels)
    if not cols:
        raise ValueError("No channel columns to plot")

    fig = Figure(figsize=(8.0, 2.2 * len(cols) + 0.8))
    axes = fig.subplots(len(cols), 1, sharex=True, squeeze=False)[:, 0]

    t_in = original.times
    t_out = resampled.times
    for ax, col in zip(axes, cols):
        ax.plot(t_in, original.values[:, col], "o", ms=3, label="input")
        ax.plot(t_out, resampled.values[:, col], "-", lw=1.0, label="resampled")
        ax.set_ylabel(f"ch {col}")
        ax.grid(True)
    axes[0].legend(loc="upper right")
    axes[-1].set_xlabel("Time [s]")
    if title:
        axes[0].set_title(title)
    fig.tight_layout()
    return fig


def plot_comparison(
    original: Dataset,
    resampled: Dataset,
    path: Path | str,
    *,
    channels: Optional[Sequence[int]] = None,
    title: str | None = None,
) -> Path:
    """Save the comparison figure to ``path`` and return the path."""
    path = Path(path)
    fig = build_comparison_figure(original, resampled, channels=channels, title=title)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(path)
    except OSError as exc:
        raise FileOpenError(path, "output", exc.strerror) from exc
    logger.info("Comparison plot written to %s", path)
    return path


__all__ = ["MAX_PLOTTED_CHANNELS", "build_comparison_figure", "plot_comparison"]
