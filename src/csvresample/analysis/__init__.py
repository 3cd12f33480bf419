"""Signal analysis helpers.

Modules here operate on NumPy arrays only, with no file or CLI dependencies,
so they can be reused from scripts and tests.
"""

from .rate import RateSummary, summarize_rate

__all__ = ["RateSummary", "summarize_rate"]
