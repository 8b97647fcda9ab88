"""Pytest fixtures for TargetLock tests."""

from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from target_lock.analysis.history import MeasurementHistory
from target_lock.core.config import DisplaySettings, MeasurementSettings, Settings
from target_lock.core.types import DisplayUnit, Measurement

BASE_TIME = datetime(2026, 10, 18, 14, 5)


def make_measurement(distance_m: float, index: int = 0, confidence: float = 0.9) -> Measurement:
    """Create a measurement taken `index` minutes after BASE_TIME."""
    return Measurement(
        timestamp=BASE_TIME + timedelta(minutes=index),
        distance_m=distance_m,
        height_m=1.7,
        confidence=confidence,
    )


@pytest.fixture
def sample_measurement() -> Measurement:
    """A 4 m measurement of a 1.7 m object."""
    return Measurement(
        timestamp=BASE_TIME,
        distance_m=4.0,
        height_m=1.7,
        confidence=0.92,
    )


@pytest.fixture
def measurement_series() -> list[Measurement]:
    """Three measurements at 2, 4 and 6 meters."""
    return [make_measurement(d, i) for i, d in enumerate([2.0, 4.0, 6.0])]


@pytest.fixture
def filled_history(measurement_series: list[Measurement]) -> MeasurementHistory:
    """History holding the 2/4/6 m series."""
    return MeasurementHistory(measurement_series)


@pytest.fixture
def settings() -> Settings:
    """Settings rendering in meters with the stock default height."""
    return Settings(
        display=DisplaySettings(unit=DisplayUnit.METERS),
        measurement=MeasurementSettings(default_height_m=1.7),
    )
