"""Measurement pipeline orchestration."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import datetime

from target_lock.analysis.calculator import DistanceCalculator
from target_lock.analysis.confidence import ConfidenceBreakdown, ConfidenceScorer
from target_lock.analysis.history import MeasurementHistory
from target_lock.analysis.validator import MeasurementValidator
from target_lock.core.config import DisplayPreferences, Settings, get_settings
from target_lock.core.logging import get_logger
from target_lock.core.types import HistoryStatistics, Measurement, TrackingQuality
from target_lock.ui.formatting import UnitFormatter

logger = get_logger(__name__)


@dataclass(frozen=True)
class MeasurementRequest:
    """Numeric inputs gathered by the camera and tracking collaborators.

    Attributes:
        focal_length_px: Focal length from camera intrinsics
        pixel_height: Apparent object height in pixels
        real_height_m: Assumed object height (configured default if None)
        ambient_light: Ambient light intensity, None if no estimate
        tracking: Platform tracking quality
    """

    focal_length_px: float
    pixel_height: float
    real_height_m: float | None = None
    ambient_light: float | None = None
    tracking: TrackingQuality = TrackingQuality.NORMAL


@dataclass
class MeasurementResult:
    """Outcome of processing one request."""

    measurement: Measurement
    breakdown: ConfidenceBreakdown
    display_text: str
    warnings: list[str] = field(default_factory=list)

    @property
    def has_warnings(self) -> bool:
        """Whether any plausibility check fired."""
        return bool(self.warnings)


class MeasurementProcessor:
    """Orchestrates a single measurement from raw inputs to history.

    Coordinates:
    - Distance calculation
    - Confidence scoring
    - Plausibility validation against recent distances
    - History recording
    - Display rendering
    """

    def __init__(
        self,
        settings: Settings | None = None,
        preferences: DisplayPreferences | None = None,
        history: MeasurementHistory | None = None,
    ) -> None:
        """Initialize processor.

        Args:
            settings: Application settings (uses defaults if None)
            preferences: Display preferences (seeded from settings if None)
            history: Existing history to record into
        """
        self.settings = settings or get_settings()
        self.preferences = preferences or DisplayPreferences.from_settings(self.settings.display)

        self._calculator = DistanceCalculator()
        self._scorer = ConfidenceScorer()
        self._validator = MeasurementValidator()
        self._history = history if history is not None else MeasurementHistory()
        self._formatter = UnitFormatter(self.preferences)

    @property
    def history(self) -> MeasurementHistory:
        """Recorded measurements."""
        return self._history

    @property
    def formatter(self) -> UnitFormatter:
        """Formatter bound to this processor's preferences."""
        return self._formatter

    def process(self, request: MeasurementRequest) -> MeasurementResult | None:
        """Run a request through the full pipeline.

        Warnings never prevent recording.

        Args:
            request: Numeric measurement inputs

        Returns:
            MeasurementResult, or None if the distance is not computable
        """
        real_height_m = request.real_height_m
        if real_height_m is None:
            real_height_m = self.settings.measurement.default_height_m

        # Step 1: Distance (0.0, negative or non-finite means not computable)
        distance_m = self._calculator.calculate_distance(
            request.focal_length_px, real_height_m, request.pixel_height
        )
        if not (distance_m > 0 and math.isfinite(distance_m)):
            logger.warning(
                "Distance not computable (focal %.1f px, height %.2f m, pixel height %.1f)",
                request.focal_length_px,
                real_height_m,
                request.pixel_height,
            )
            return None

        # Step 2: Confidence
        breakdown = self._scorer.score(
            distance_m, request.pixel_height, request.ambient_light, request.tracking
        )

        # Step 3: Plausibility
        warnings = self._validator.validate(distance_m)

        # Step 4: Record
        measurement = Measurement(
            timestamp=datetime.now(),
            distance_m=distance_m,
            height_m=real_height_m,
            confidence=breakdown.confidence,
        )
        self._history.append(measurement)
        logger.info(
            "Measured %.2f m (height %.2f m, confidence %.2f)",
            distance_m,
            real_height_m,
            breakdown.confidence,
        )

        # Step 5: Render
        return MeasurementResult(
            measurement=measurement,
            breakdown=breakdown,
            display_text=self._formatter.format_measurement(measurement),
            warnings=warnings,
        )

    def statistics(self) -> HistoryStatistics | None:
        """Statistics over recorded distances."""
        return self._history.statistics()

    def summary_text(self) -> str:
        """History header text with the current unit."""
        return self._formatter.statistics(self._history.statistics())

    def delete(self, index: int) -> Measurement:
        """Delete one recorded measurement.

        Raises:
            MeasurementIndexError: If index is invalid
        """
        return self._history.remove_at(index)

    def clear_history(self) -> None:
        """Clear history and forget recent distances."""
        self._history.clear()
        self._validator.reset()
