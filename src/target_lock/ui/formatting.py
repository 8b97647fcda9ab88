"""Unit-aware text rendering for measurements.

Presentation only: nothing here changes stored values, which are always
meters.
"""

from __future__ import annotations

import re
from datetime import datetime

from target_lock.core.config import DisplayPreferences
from target_lock.core.types import DisplayUnit, HistoryStatistics, Measurement

FEET_PER_METER = 3.28084

FIELD_SEPARATOR = " • "
STATS_SEPARATOR = "  •  "
NO_DATA_TEXT = "No measurements yet."
SHARE_TITLE = "TargetLock Measurement"

_METERS_PATTERN = re.compile(r"(-?\d+(?:\.\d+)?)m(?![a-z])")


def meters_to_feet(meters: float) -> float:
    """Convert meters to feet."""
    return meters * FEET_PER_METER


def format_length(meters: float, unit: DisplayUnit) -> str:
    """Render a single length.

    Args:
        meters: Value in meters
        unit: Display unit

    Returns:
        e.g. "4.00m", "13.1ft" or "4.00m (13.1ft)"
    """
    if unit == DisplayUnit.METERS:
        return f"{meters:.2f}m"
    if unit == DisplayUnit.FEET:
        return f"{meters_to_feet(meters):.1f}ft"
    return f"{meters:.2f}m ({meters_to_feet(meters):.1f}ft)"


def format_percent(confidence: float) -> str:
    """Render a [0, 1] score as a whole percentage."""
    return f"{round(confidence * 100)}%"


def format_measurement(
    distance_m: float,
    height_m: float | None = None,
    confidence: float | None = None,
    unit: DisplayUnit = DisplayUnit.BOTH,
) -> str:
    """Render distance with optional height and confidence.

    Args:
        distance_m: Distance in meters
        height_m: Object height in meters, omitted if None
        confidence: Confidence [0, 1], omitted if None
        unit: Display unit

    Returns:
        e.g. "4.00m (13.1ft) • H=1.70m (5.6ft) • 92%"
    """
    fields = [format_length(distance_m, unit)]
    if height_m is not None:
        fields.append(f"H={format_length(height_m, unit)}")
    if confidence is not None:
        fields.append(format_percent(confidence))
    return FIELD_SEPARATOR.join(fields)


def parse_meters(text: str) -> float:
    """Recover the first meters value from rendered text.

    Args:
        text: Output of format_measurement in METERS or BOTH mode

    Returns:
        Distance in meters (rounded to the two rendered decimals)

    Raises:
        ValueError: If the text holds no meters value
    """
    match = _METERS_PATTERN.search(text)
    if match is None:
        raise ValueError(f"No meters value in {text!r}")
    return float(match.group(1))


def format_timestamp(timestamp: datetime) -> str:
    """Medium date with short time, e.g. "Oct 18, 2026 14:05"."""
    return f"{timestamp:%b} {timestamp.day}, {timestamp:%Y %H:%M}"


def format_history_entry(measurement: Measurement, unit: DisplayUnit) -> str:
    """Two-line history row: values, then when they were taken."""
    values = format_measurement(
        measurement.distance_m,
        measurement.height_m,
        measurement.confidence,
        unit,
    )
    return f"{values}\n{format_timestamp(measurement.timestamp)}"


def format_share_text(measurement: Measurement, unit: DisplayUnit) -> str:
    """Plain-text block for sharing a single measurement."""
    return "\n".join(
        [
            SHARE_TITLE,
            f"Distance: {format_length(measurement.distance_m, unit)}",
            f"Height: {format_length(measurement.height_m, unit)}",
            f"Confidence: {format_percent(measurement.confidence)}",
            f"Time: {format_timestamp(measurement.timestamp)}",
        ]
    )


def format_statistics(stats: HistoryStatistics | None, unit: DisplayUnit) -> str:
    """Summary header for the history view."""
    if stats is None:
        return NO_DATA_TEXT

    return STATS_SEPARATOR.join(
        [
            f"Count: {stats.count}",
            f"Avg: {format_length(stats.average_m, unit)}",
            f"Min: {format_length(stats.min_m, unit)}",
            f"Max: {format_length(stats.max_m, unit)}",
        ]
    )


def format_intrinsics(
    fx: float | None,
    fy: float | None,
    cx: float | None,
    cy: float | None,
) -> str:
    """Diagnostics text for camera intrinsics in pixels."""
    if fx is None or fy is None or cx is None or cy is None:
        return "Intrinsics: unavailable"
    return f"Intrinsics (px)\nfx: {fx:.2f}\nfy: {fy:.2f}\ncx: {cx:.2f}\ncy: {cy:.2f}"


class UnitFormatter:
    """Formatter bound to the caller's display preferences.

    The unit is read at call time, so a preference change is reflected by
    the next call without re-creating the formatter.
    """

    def __init__(self, preferences: DisplayPreferences | None = None) -> None:
        """Initialize formatter.

        Args:
            preferences: Display preferences (defaults to BOTH)
        """
        self.preferences = preferences or DisplayPreferences()

    @property
    def unit(self) -> DisplayUnit:
        """Unit currently used for rendering."""
        return self.preferences.unit

    def format(
        self,
        distance_m: float,
        height_m: float | None = None,
        confidence: float | None = None,
    ) -> str:
        """Render a measurement with the current unit."""
        return format_measurement(distance_m, height_m, confidence, self.unit)

    def format_measurement(self, measurement: Measurement) -> str:
        """Render a stored measurement with the current unit."""
        return self.format(measurement.distance_m, measurement.height_m, measurement.confidence)

    def history_entry(self, measurement: Measurement) -> str:
        """History row with the current unit."""
        return format_history_entry(measurement, self.unit)

    def share_text(self, measurement: Measurement) -> str:
        """Share text with the current unit."""
        return format_share_text(measurement, self.unit)

    def statistics(self, stats: HistoryStatistics | None) -> str:
        """Statistics header with the current unit."""
        return format_statistics(stats, self.unit)
