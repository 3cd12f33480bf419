"""Configuration objects and helpers.

A small YAML file can override how CSV files are read and written::

    resample:
      precision: 10
      trailing_delimiter: false

See :mod:`runtime` for the accepted keys.
"""

from .runtime import ResamplerConfig, config_from_mapping, load_config

__all__ = ["ResamplerConfig", "config_from_mapping", "load_config"]
