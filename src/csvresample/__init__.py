"""Resample comma-separated time series to a uniform rate.

The pipeline is ``load -> resample -> write``:
- :mod:`dataio` reads and writes headerless numeric CSV files.
- :mod:`core` holds the :class:`~csvresample.core.Dataset` container and the
  interpolating resampler.
- :mod:`cli` wires the stages together behind the ``csvresample`` command.
"""

from .core import Dataset, resample
from .dataio import load_csv, write_csv
from .errors import ResamplerError

__version__ = "0.1.0"

__all__ = ["Dataset", "ResamplerError", "load_csv", "resample", "write_csv", "__version__"]
