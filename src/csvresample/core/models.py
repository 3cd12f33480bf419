"""Dataset container shared by the loader, resampler and writer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

import numpy as np


@dataclass(frozen=True, eq=False)
class Dataset:
    """
    Rectangular block of time-stamped rows.

    ``values`` has shape ``(rows, columns)``. Column 0 is time in seconds and
    the remaining columns are channels. Rows are expected in ascending time
    order; the loader does not enforce that.
    """

    values: np.ndarray

    def __post_init__(self) -> None:
        arr = np.asarray(self.values, dtype=np.float64)
        if arr.ndim != 2:
            raise ValueError(f"Dataset values must be 2-D, got shape {arr.shape}")
        object.__setattr__(self, "values", arr)

    @classmethod
    def empty(cls, column_count: int = 0) -> Dataset:
        return cls(np.empty((0, column_count), dtype=np.float64))

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[float]]) -> Dataset:
        """Build a dataset from equal-length rows (no rows -> empty dataset)."""
        materialized = [list(row) for row in rows]
        if not materialized:
            return cls.empty()
        return cls(np.array(materialized, dtype=np.float64))

    @property
    def row_count(self) -> int:
        return int(self.values.shape[0])

    @property
    def column_count(self) -> int:
        return int(self.values.shape[1])

    @property
    def channel_count(self) -> int:
        return max(0, self.column_count - 1)

    @property
    def is_empty(self) -> bool:
        return self.row_count == 0

    @property
    def times(self) -> np.ndarray:
        """Time column (a view; callers must not write to it)."""
        if self.column_count == 0:
            return np.empty(0, dtype=np.float64)
        return self.values[:, 0]

    def __len__(self) -> int:
        return self.row_count
