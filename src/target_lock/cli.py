"""Command-line distance estimation.

Runs one measurement from numbers read off a camera frame, for example:

    target-lock --focal-length 1000 --pixel-height 500 --height 2.0
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from target_lock.analysis.history import MeasurementHistory, export_history, import_history
from target_lock.analysis.presets import PresetCatalog, parse_height_input
from target_lock.core.config import DisplayPreferences, get_settings
from target_lock.core.exceptions import HistoryFileError, InvalidHeightError
from target_lock.core.logging import get_logger, setup_logging
from target_lock.core.types import DisplayUnit, TrackingQuality
from target_lock.pipeline.processor import MeasurementProcessor, MeasurementRequest

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_NOT_COMPUTABLE = 1
EXIT_INVALID_INPUT = 2


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="target-lock",
        description="Estimate distance to an object of known height",
    )
    parser.add_argument(
        "--focal-length",
        "-f",
        type=float,
        help="Focal length in pixels (camera intrinsics)",
    )
    parser.add_argument(
        "--pixel-height",
        "-p",
        type=float,
        help="Apparent object height in pixels",
    )

    height_group = parser.add_mutually_exclusive_group()
    height_group.add_argument(
        "--height",
        help="Real object height in meters (default: configured default)",
    )
    height_group.add_argument(
        "--preset",
        help="Use a preset height by title, e.g. 'Child (1.20m)'",
    )

    parser.add_argument(
        "--light",
        type=float,
        help="Ambient light intensity (omit if unavailable)",
    )
    parser.add_argument(
        "--tracking",
        choices=[q.name.lower() for q in TrackingQuality],
        default="normal",
        help="Tracking quality (default: normal)",
    )
    parser.add_argument(
        "--unit",
        "-u",
        choices=[u.value for u in DisplayUnit],
        help="Display unit (default: configured unit)",
    )
    parser.add_argument(
        "--history",
        type=Path,
        help="JSON history file to append the measurement to",
    )
    parser.add_argument(
        "--list-presets",
        action="store_true",
        help="List preset heights and exit",
    )
    return parser


def _resolve_height(args: argparse.Namespace, catalog: PresetCatalog) -> float | None:
    """Height from --height or --preset, None to use the configured default."""
    if args.preset is not None:
        preset = catalog.find(args.preset)
        if preset is None:
            raise InvalidHeightError(f"Unknown preset: {args.preset}")
        return preset.height_m
    if args.height is not None:
        return parse_height_input(args.height)
    return None


def main(argv: Sequence[str] | None = None) -> int:
    """Run a single measurement.

    Returns:
        Exit code (0 ok, 1 not computable, 2 invalid input)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = get_settings()
    setup_logging(settings.logging.level, settings.logging.file)

    catalog = PresetCatalog()

    if args.list_presets:
        for preset in catalog.presets():
            print(f"{preset.title}: {preset.height_m:.2f} m")
        return EXIT_OK

    if args.focal_length is None or args.pixel_height is None:
        parser.print_usage(sys.stderr)
        print("error: --focal-length and --pixel-height are required", file=sys.stderr)
        return EXIT_INVALID_INPUT

    try:
        real_height_m = _resolve_height(args, catalog)
        history = (
            import_history(args.history)
            if args.history is not None and args.history.exists()
            else MeasurementHistory()
        )
    except (InvalidHeightError, HistoryFileError) as e:
        print(f"error: {e.message}", file=sys.stderr)
        return EXIT_INVALID_INPUT

    preferences = DisplayPreferences.from_settings(settings.display)
    if args.unit is not None:
        preferences.unit = DisplayUnit(args.unit)

    processor = MeasurementProcessor(settings, preferences, history)
    result = processor.process(
        MeasurementRequest(
            focal_length_px=args.focal_length,
            pixel_height=args.pixel_height,
            real_height_m=real_height_m,
            ambient_light=args.light,
            tracking=TrackingQuality[args.tracking.upper()],
        )
    )

    if result is None:
        print(
            "Distance not computable: focal length, height and pixel height must be positive",
            file=sys.stderr,
        )
        return EXIT_NOT_COMPUTABLE

    print(result.display_text)
    for warning in result.warnings:
        print(f"warning: {warning}")

    if args.history is not None:
        export_history(processor.history, args.history)
        print(processor.summary_text())

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
