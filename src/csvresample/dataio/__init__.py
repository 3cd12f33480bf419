"""Data input/output helpers for headerless numeric CSV files.

Utility modules here keep disk-level concerns away from the resampler:
- :mod:`log_loader` parses CSV text into a :class:`~csvresample.core.Dataset`.
- :mod:`csv_writer` serialises a dataset back to CSV.
"""

from .csv_writer import format_row, format_value, write_csv
from .log_loader import load_csv, parse_line, parse_lines

__all__ = [
    "format_row",
    "format_value",
    "load_csv",
    "parse_line",
    "parse_lines",
    "write_csv",
]
