"""CSV writing helpers for resampled data."""

from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import Iterable, List

from ..config.runtime import ResamplerConfig
from ..core.models import Dataset
from ..errors import FileOpenError

logger = logging.getLogger(__name__)


def format_value(value: float, precision: int = 14) -> str:
    """Format ``value`` with ``precision`` significant digits (``%g`` style)."""
    return format(float(value), f".{precision}g")


def format_fields(
    row: Iterable[float], *, precision: int = 14, trailing_delimiter: bool = True
) -> List[str]:
    """Return the CSV fields for ``row``; an empty last field yields the trailing delimiter."""
    fields = [format_value(value, precision) for value in row]
    if trailing_delimiter:
        fields.append("")
    return fields


def format_row(
    row: Iterable[float],
    *,
    precision: int = 14,
    delimiter: str = ",",
    trailing_delimiter: bool = True,
) -> str:
    """Render one row as a single line (without the newline)."""
    return delimiter.join(
        format_fields(row, precision=precision, trailing_delimiter=trailing_delimiter)
    )


def write_csv(
    path: Path | str, dataset: Dataset, *, config: ResamplerConfig | None = None
) -> None:
    """
    Write every row of ``dataset`` to ``path``.

    Directories are created as needed.
    """
    cfg = config or ResamplerConfig()
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", newline="", encoding=cfg.encoding) as csvfile:
            writer = csv.writer(csvfile, delimiter=cfg.delimiter, lineterminator="\n")
            writer.writerows(
                format_fields(
                    row,
                    precision=cfg.precision,
                    trailing_delimiter=cfg.trailing_delimiter,
                )
                for row in dataset.values
            )
    except OSError as exc:
        raise FileOpenError(path, "output", exc.strerror) from exc

    logger.info("Wrote %d rows to %s", dataset.row_count, path)


__all__ = ["format_fields", "format_row", "format_value", "write_csv"]
