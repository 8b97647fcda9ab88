"""Plausibility checks for computed distances.

This module is pure logic with NO I/O.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator

from target_lock.core.logging import get_logger

logger = get_logger(__name__)

MIN_RELIABLE_DISTANCE_M = 0.5
MAX_RELIABLE_DISTANCE_M = 50.0
MAX_CHANGE_RATIO = 0.5
# Floor for the previous distance when computing the change ratio
MIN_RATIO_BASE_M = 0.1
RECENT_WINDOW_SIZE = 5

CLOSE_RANGE_WARNING = "Very close range, results may be inaccurate."
LONG_RANGE_WARNING = "Very long range, results may be inaccurate."
LARGE_JUMP_WARNING = "Large jump vs last measurement, consider recalibration."


class RecentDistanceWindow:
    """FIFO of the most recent accepted distances.

    Holds at most RECENT_WINDOW_SIZE values; pushing beyond that drops the
    oldest.
    """

    def __init__(self, distances: Iterable[float] = (), maxlen: int = RECENT_WINDOW_SIZE) -> None:
        self._buffer: deque[float] = deque(distances, maxlen=maxlen)

    @property
    def last(self) -> float | None:
        """Most recently pushed distance."""
        return self._buffer[-1] if self._buffer else None

    def push(self, distance_m: float) -> None:
        """Add a distance, evicting the oldest if full."""
        self._buffer.append(distance_m)

    def clear(self) -> None:
        """Drop all distances."""
        self._buffer.clear()

    def to_list(self) -> list[float]:
        """Distances oldest first."""
        return list(self._buffer)

    def __len__(self) -> int:
        return len(self._buffer)

    def __iter__(self) -> Iterator[float]:
        return iter(self._buffer)

    def __repr__(self) -> str:
        return f"RecentDistanceWindow({self.to_list()!r})"


def validate(
    distance_m: float,
    recent_window: RecentDistanceWindow | Iterable[float],
) -> tuple[list[str], RecentDistanceWindow]:
    """Check a distance against range limits and the recent history.

    Each rule is evaluated on its own and several warnings may be returned
    together. An empty list means nothing looked suspicious. The distance is
    pushed onto the window after evaluation.

    Args:
        distance_m: Newly computed distance in meters
        recent_window: Window to check against; plain sequences are copied
            into a new window

    Returns:
        Tuple of (warnings, updated_window)
    """
    if isinstance(recent_window, RecentDistanceWindow):
        window = recent_window
    else:
        window = RecentDistanceWindow(recent_window)

    warnings: list[str] = []

    if distance_m < MIN_RELIABLE_DISTANCE_M:
        warnings.append(CLOSE_RANGE_WARNING)
    if distance_m > MAX_RELIABLE_DISTANCE_M:
        warnings.append(LONG_RANGE_WARNING)

    last = window.last
    if last is not None:
        delta = abs(distance_m - last)
        change_ratio = delta / max(last, MIN_RATIO_BASE_M)
        if change_ratio > MAX_CHANGE_RATIO:
            warnings.append(LARGE_JUMP_WARNING)

    window.push(distance_m)

    for warning in warnings:
        logger.warning("%.2f m: %s", distance_m, warning)

    return warnings, window


class MeasurementValidator:
    """Stateful validator that owns its recent-distance window."""

    def __init__(self, window: RecentDistanceWindow | None = None) -> None:
        """Initialize validator.

        Args:
            window: Existing window to continue from
        """
        self.window = window if window is not None else RecentDistanceWindow()

    def validate(self, distance_m: float) -> list[str]:
        """Validate a distance and record it in the window.

        Args:
            distance_m: Newly computed distance in meters

        Returns:
            Advisory warnings (possibly empty)
        """
        warnings, self.window = validate(distance_m, self.window)
        return warnings

    def reset(self) -> None:
        """Forget recent distances."""
        self.window.clear()
