"""Utilities for loading headerless numeric CSV files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List

import numpy as np

from ..config.runtime import ResamplerConfig
from ..core.models import Dataset
from ..errors import FileOpenError, SchemaError, TokenParseError

logger = logging.getLogger(__name__)


def parse_line(line: str, line_number: int, *, delimiter: str = ",") -> List[float]:
    """
    Split one CSV line and convert every token to float.

    A single empty token after a trailing delimiter is dropped so that files
    written with a trailing comma read back with the same column count.
    """
    tokens = line.rstrip("\r\n").split(delimiter)
    if len(tokens) > 1 and not tokens[-1].strip():
        tokens.pop()

    values: List[float] = []
    for token in tokens:
        try:
            values.append(float(token))
        except ValueError:
            raise TokenParseError(token, line_number) from None
    return values


def parse_lines(
    lines: Iterable[str], *, config: ResamplerConfig | None = None
) -> Dataset:
    """
    Parse numeric CSV lines into a :class:`Dataset`.

    The first data line fixes the column count; any later line with a
    different count raises :class:`SchemaError`. Line numbers in errors are
    1-based physical line numbers, blank lines included.
    """
    cfg = config or ResamplerConfig()
    rows: List[List[float]] = []
    expected = 0
    for line_number, line in enumerate(lines, start=1):
        if cfg.skip_blank_lines and not line.strip():
            continue
        values = parse_line(line, line_number, delimiter=cfg.delimiter)
        if not rows:
            expected = len(values)
        elif len(values) != expected:
            raise SchemaError(line_number, len(values), expected)
        rows.append(values)

    if not rows:
        return Dataset.empty()
    return Dataset(np.array(rows, dtype=np.float64))


def load_csv(path: Path | str, *, config: ResamplerConfig | None = None) -> Dataset:
    """
    Load a headerless numeric CSV file.

    Raises :class:`FileOpenError` if the file cannot be opened or read.
    """
    cfg = config or ResamplerConfig()
    path = Path(path)
    try:
        fh = path.open("r", encoding=cfg.encoding, newline="")
    except OSError as exc:
        raise FileOpenError(path, "input", exc.strerror) from exc

    with fh:
        try:
            dataset = parse_lines(fh, config=cfg)
        except (OSError, UnicodeDecodeError) as exc:
            raise FileOpenError(path, "input", str(exc)) from exc

    logger.info(
        "Loaded %d rows x %d columns from %s",
        dataset.row_count,
        dataset.column_count,
        path,
    )
    return dataset


__all__ = ["load_csv", "parse_line", "parse_lines"]
