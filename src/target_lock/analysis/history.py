"""Bounded measurement history and summary statistics.

This module is pure logic apart from the JSON export/import helpers.
"""

from __future__ import annotations

import json
from collections import deque
from collections.abc import Iterable, Iterator
from pathlib import Path

import numpy as np

from target_lock.core.exceptions import HistoryFileError, MeasurementIndexError
from target_lock.core.logging import get_logger
from target_lock.core.types import HistoryStatistics, Measurement

logger = get_logger(__name__)

HISTORY_CAPACITY = 50


class MeasurementHistory:
    """Time-ordered log of completed measurements, oldest first.

    Appending past capacity evicts from the front so the newest entry is
    always kept.
    """

    def __init__(
        self,
        measurements: Iterable[Measurement] = (),
        capacity: int = HISTORY_CAPACITY,
    ) -> None:
        """Initialize history.

        Args:
            measurements: Initial entries, oldest first
            capacity: Maximum number of retained measurements

        Raises:
            ValueError: If capacity is less than 1
        """
        if capacity < 1:
            raise ValueError(f"History capacity must be at least 1, got {capacity}")

        self.capacity = capacity
        self._entries: deque[Measurement] = deque(measurements, maxlen=capacity)

    @property
    def measurements(self) -> list[Measurement]:
        """Copy of all entries, oldest first."""
        return list(self._entries)

    @property
    def latest(self) -> Measurement | None:
        """Most recently appended measurement."""
        return self._entries[-1] if self._entries else None

    def append(self, measurement: Measurement) -> None:
        """Add a measurement at the end, evicting the oldest if full."""
        if len(self._entries) == self.capacity:
            logger.debug("History full, evicting %s", self._entries[0].timestamp)
        self._entries.append(measurement)

    def remove_at(self, index: int) -> Measurement:
        """Remove and return the entry at index.

        Args:
            index: Zero-based position, oldest first

        Returns:
            The removed measurement

        Raises:
            MeasurementIndexError: If index is outside [0, len)
        """
        if not 0 <= index < len(self._entries):
            raise MeasurementIndexError(
                f"Measurement index {index} out of range for history of {len(self._entries)}"
            )

        measurement = self._entries[index]
        del self._entries[index]
        return measurement

    def clear(self) -> None:
        """Remove all measurements."""
        self._entries.clear()
        logger.info("Measurement history cleared")

    def statistics(self) -> HistoryStatistics | None:
        """Summarize recorded distances.

        Returns:
            HistoryStatistics, or None if the history is empty
        """
        if not self._entries:
            return None

        distances = np.fromiter((m.distance_m for m in self._entries), dtype=np.float64)

        return HistoryStatistics(
            count=int(distances.size),
            average_m=float(np.mean(distances)),
            min_m=float(np.min(distances)),
            max_m=float(np.max(distances)),
        )

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Measurement]:
        return iter(self._entries)

    def __getitem__(self, index: int) -> Measurement:
        if not 0 <= index < len(self._entries):
            raise MeasurementIndexError(
                f"Measurement index {index} out of range for history of {len(self._entries)}"
            )
        return self._entries[index]


def export_history(history: MeasurementHistory, path: Path) -> None:
    """Export history to a JSON file.

    Args:
        history: History to export
        path: Output file path
    """
    stats = history.statistics()

    data = {
        "count": len(history),
        "average_m": stats.average_m if stats else None,
        "min_m": stats.min_m if stats else None,
        "max_m": stats.max_m if stats else None,
        "measurements": [m.to_dict() for m in history],
    }

    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        json.dump(data, f, indent=2)

    logger.info("Exported %d measurements to %s", len(history), path)


def import_history(path: Path, capacity: int = HISTORY_CAPACITY) -> MeasurementHistory:
    """Import history from a JSON file written by export_history.

    Args:
        path: Input file path
        capacity: Capacity of the rebuilt history

    Returns:
        Reconstructed MeasurementHistory

    Raises:
        HistoryFileError: If the file cannot be read or is malformed
    """
    try:
        with open(path) as f:
            data = json.load(f)
        measurements = [Measurement.from_dict(m) for m in data.get("measurements", [])]
    except (OSError, json.JSONDecodeError, AttributeError, KeyError, TypeError, ValueError) as e:
        raise HistoryFileError(f"Cannot load history from {path}: {e}") from e

    return MeasurementHistory(measurements, capacity=capacity)
