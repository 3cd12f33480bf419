"""Runtime configuration for loading, resampling and writing CSV files."""

from __future__ import annotations

import codecs
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Mapping, MutableMapping

import yaml

from ..errors import ConfigError, FileOpenError


@dataclass(slots=True)
class ResamplerConfig:
    """
    Knobs for the CSV adapters and the resampler.

    The defaults reproduce the plain command-line behaviour: comma-separated
    input without a header, output lines ending in a trailing comma, and 14
    significant digits per value.
    """

    delimiter: str = ","
    precision: int = 14
    trailing_delimiter: bool = True
    skip_blank_lines: bool = True
    validate_timestamps: bool = True
    encoding: str = "utf-8"

    def sanitized(self) -> ResamplerConfig:
        """Return a copy with types coerced and limits applied."""
        delimiter = str(self.delimiter)
        if len(delimiter) != 1 or (delimiter.isspace() and delimiter != "\t"):
            raise ConfigError(
                f"delimiter must be a single character other than a space, got {delimiter!r}"
            )
        try:
            precision = int(self.precision)
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"precision must be an integer, got {self.precision!r}") from exc
        encoding = str(self.encoding or "utf-8")
        try:
            codecs.lookup(encoding)
        except LookupError as exc:
            raise ConfigError(f"unknown encoding {encoding!r}") from exc
        return ResamplerConfig(
            delimiter=delimiter,
            precision=max(1, min(17, precision)),
            trailing_delimiter=bool(self.trailing_delimiter),
            skip_blank_lines=bool(self.skip_blank_lines),
            validate_timestamps=bool(self.validate_timestamps),
            encoding=encoding,
        )


def _recognized_fields() -> set[str]:
    """Return the dataclass field names accepted by :class:`ResamplerConfig`."""
    return {f.name for f in fields(ResamplerConfig)}


def _normalize_mapping(data: Mapping[str, Any]) -> MutableMapping[str, Any]:
    """Flatten an optional top-level ``resample`` block."""
    if "resample" in data and isinstance(data["resample"], Mapping):
        merged: MutableMapping[str, Any] = {}
        for key, value in data.items():
            if key == "resample":
                merged.update(value)
            else:
                merged[key] = value
        return merged
    return dict(data)


def config_from_mapping(data: Mapping[str, Any] | None) -> ResamplerConfig:
    """Build :class:`ResamplerConfig` from ``data`` (ignoring unknown keys)."""
    if not data:
        return ResamplerConfig()
    normalized = _normalize_mapping(data)
    known = _recognized_fields()
    payload = {key: normalized[key] for key in normalized.keys() & known}
    return ResamplerConfig(**payload).sanitized()


def load_config(path: str | Path | None, *, required: bool = False) -> ResamplerConfig:
    """
    Load configuration from ``path``.

    Missing files fall back to default :class:`ResamplerConfig` unless
    ``required`` is set, in which case they raise :class:`FileOpenError`.
    """
    if path is None:
        return ResamplerConfig()
    cfg_path = Path(path)
    if not cfg_path.exists():
        if required:
            raise FileOpenError(cfg_path, "input", "No such file or directory")
        return ResamplerConfig()
    try:
        with cfg_path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh) or {}
    except OSError as exc:
        raise FileOpenError(cfg_path, "input", exc.strerror) from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {cfg_path}: {exc}") from exc
    if not isinstance(raw, Mapping):
        raise ConfigError(f"Expected mapping in {cfg_path}, got {type(raw).__name__}")
    return config_from_mapping(raw)


__all__ = ["ResamplerConfig", "config_from_mapping", "load_config"]
