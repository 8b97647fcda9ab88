"""Core infrastructure: config, types, exceptions, and logging."""

from target_lock.core.config import DisplayPreferences, Settings, get_settings
from target_lock.core.exceptions import (
    HistoryFileError,
    InvalidHeightError,
    MeasurementIndexError,
    TargetLockError,
)
from target_lock.core.logging import get_logger, setup_logging
from target_lock.core.types import (
    DisplayUnit,
    HistoryStatistics,
    Measurement,
    Preset,
    TrackingQuality,
)

__all__ = [
    # Config
    "Settings",
    "get_settings",
    "DisplayPreferences",
    # Types
    "Measurement",
    "TrackingQuality",
    "DisplayUnit",
    "HistoryStatistics",
    "Preset",
    # Exceptions
    "TargetLockError",
    "MeasurementIndexError",
    "InvalidHeightError",
    "HistoryFileError",
    # Logging
    "setup_logging",
    "get_logger",
]
