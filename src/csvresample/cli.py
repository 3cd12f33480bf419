"""
Command-line entry point::

    csvresample <output_frequency_hz> <input_path> <output_path> [options]

Every failure is reported as one line on stderr and exit code 1; a wrong
argument count prints the usage text to stdout instead.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from .analysis.rate import summarize_rate
from .config.runtime import ResamplerConfig, load_config
from .core.models import Dataset
from .core.resample import resample
from .dataio.csv_writer import write_csv
from .dataio.log_loader import load_csv
from .errors import ArgumentParseError, ResamplerError, UsageError
from .tools.plotter import plot_comparison

logger = logging.getLogger(__name__)

USAGE_NOTES = (
    "  First column of input file is assumed to be time in seconds.",
    "  Input file must not contain header rows.",
    "  Input file must be comma-separated.",
)


class _ArgumentParser(argparse.ArgumentParser):
    """Raise :class:`UsageError` instead of printing and exiting with 2."""

    def error(self, message: str) -> None:  # type: ignore[override]
        raise UsageError(message)


def build_arg_parser(prog: str | None = None) -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog=prog or "csvresample",
        description="Resample a comma-separated time series to a fixed rate "
        "using linear interpolation.",
        epilog="\n".join(USAGE_NOTES),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("frequency", help="Output frequency in Hz")
    parser.add_argument("input", type=Path, help="Input CSV file")
    parser.add_argument("output", type=Path, help="Output CSV file")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        metavar="PATH",
        help="YAML file overriding CSV and validation settings",
    )
    parser.add_argument(
        "--plot",
        type=Path,
        default=None,
        metavar="PATH",
        help="Also save an input vs. resampled comparison plot (PNG)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log progress to stderr (-vv for debug detail)",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Only log errors",
    )
    return parser


def usage_text(parser: argparse.ArgumentParser) -> str:
    return parser.format_usage() + "\n".join(USAGE_NOTES)


def configure_logging(verbose: int = 0, quiet: bool = False) -> None:
    if quiet:
        level = logging.ERROR
    elif verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )


def parse_frequency(token: str) -> float:
    """Convert the frequency argument, raising :class:`ArgumentParseError`."""
    try:
        return float(token)
    except ValueError:
        raise ArgumentParseError(token) from None


def run(
    frequency: float,
    input_path: Path | str,
    output_path: Path | str,
    *,
    config: ResamplerConfig | None = None,
    plot_path: Path | str | None = None,
) -> Dataset:
    """Load, resample and write; return the resampled dataset."""
    cfg = config or ResamplerConfig()
    dataset = load_csv(input_path, config=cfg)
    logger.info("Input: %s", summarize_rate(dataset.times).describe())

    resampled = resample(dataset, frequency, validate=cfg.validate_timestamps)
    logger.info("Output: %s", summarize_rate(resampled.times).describe())

    write_csv(output_path, resampled, config=cfg)

    if plot_path is not None and resampled.channel_count == 0:
        logger.warning("Input has no channel columns; skipping plot %s", plot_path)
    elif plot_path is not None:
        plot_comparison(
            dataset,
            resampled,
            plot_path,
            title=f"{Path(input_path).name} @ {frequency:g} Hz",
        )
    return resampled


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Entry point for the ``csvresample`` command.

    Parameters
    ----------
    argv:
        Arguments without the program name. If None, uses ``sys.argv[1:]``.
    """
    parser = build_arg_parser()
    try:
        args = parser.parse_args(None if argv is None else list(argv))
    except UsageError:
        print(usage_text(parser))
        return 1

    configure_logging(args.verbose, args.quiet)

    try:
        frequency = parse_frequency(args.frequency)
        config = load_config(args.config, required=True)
        run(frequency, args.input, args.output, config=config, plot_path=args.plot)
    except ResamplerError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


__all__ = [
    "USAGE_NOTES",
    "build_arg_parser",
    "configure_logging",
    "main",
    "parse_frequency",
    "run",
    "usage_text",
]
