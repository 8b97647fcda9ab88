"""Heuristic confidence scoring for distance measurements.

This module is pure logic with NO I/O.

The score blends four signals into a single value in [0.1, 1.0]:

    raw = 0.35 * distance + 0.25 * pixel + 0.20 * light + 0.20 * tracking

Each sub-score is clamped to [0.2, 1.0] (tracking uses fixed levels). When
no ambient light estimate is available the light sub-score is the fixed
fallback LIGHT_FALLBACK_SCORE (0.6). The weights and bounds are fixed.
"""

from __future__ import annotations

from dataclasses import dataclass

from target_lock.core.types import TrackingQuality

# Distances at or beyond this many meters floor the distance sub-score
DISTANCE_REFERENCE_M = 20.0
# On-screen height (px) that saturates the pixel sub-score
PIXEL_REFERENCE = 300.0
# Neutral ambient light intensity (lumens)
LIGHT_REFERENCE = 1000.0
LIGHT_FALLBACK_SCORE = 0.6

SUB_SCORE_MIN = 0.2
SUB_SCORE_MAX = 1.0
CONFIDENCE_MIN = 0.1
CONFIDENCE_MAX = 1.0

DISTANCE_WEIGHT = 0.35
PIXEL_WEIGHT = 0.25
LIGHT_WEIGHT = 0.20
TRACKING_WEIGHT = 0.20

TRACKING_SCORES: dict[TrackingQuality, float] = {
    TrackingQuality.NORMAL: 1.0,
    TrackingQuality.LIMITED: 0.6,
    TrackingQuality.UNAVAILABLE: 0.3,
}


def clamp(value: float, lower: float, upper: float) -> float:
    """Clamp value into [lower, upper]."""
    return max(lower, min(upper, value))


@dataclass(frozen=True)
class ConfidenceBreakdown:
    """Sub-scores and final confidence for one measurement."""

    distance_score: float
    pixel_score: float
    light_score: float
    tracking_score: float
    confidence: float


class ConfidenceScorer:
    """Scores measurement trustworthiness from auxiliary signals.

    Farther targets, smaller on-screen subjects, dim scenes and degraded
    tracking all lower the score. The result is a heuristic, not a
    probability.
    """

    def score(
        self,
        distance_m: float,
        pixel_height: float,
        ambient_light: float | None,
        tracking: TrackingQuality,
    ) -> ConfidenceBreakdown:
        """Compute all sub-scores and the final confidence.

        Args:
            distance_m: Computed distance in meters
            pixel_height: Apparent object height in pixels
            ambient_light: Ambient light intensity, or None if no estimate
            tracking: Current tracking quality

        Returns:
            ConfidenceBreakdown with the clamped confidence
        """
        distance_score = clamp(1.0 - distance_m / DISTANCE_REFERENCE_M, SUB_SCORE_MIN, SUB_SCORE_MAX)
        pixel_score = clamp(pixel_height / PIXEL_REFERENCE, SUB_SCORE_MIN, SUB_SCORE_MAX)

        if ambient_light is None:
            light_score = LIGHT_FALLBACK_SCORE
        else:
            light_score = clamp(ambient_light / LIGHT_REFERENCE, SUB_SCORE_MIN, SUB_SCORE_MAX)

        tracking_score = TRACKING_SCORES[tracking]

        raw = (
            DISTANCE_WEIGHT * distance_score
            + PIXEL_WEIGHT * pixel_score
            + LIGHT_WEIGHT * light_score
            + TRACKING_WEIGHT * tracking_score
        )

        return ConfidenceBreakdown(
            distance_score=distance_score,
            pixel_score=pixel_score,
            light_score=light_score,
            tracking_score=tracking_score,
            confidence=clamp(raw, CONFIDENCE_MIN, CONFIDENCE_MAX),
        )


def compute_confidence(
    distance_m: float,
    pixel_height: float,
    ambient_light: float | None,
    tracking: TrackingQuality,
) -> float:
    """Pure function returning only the final confidence.

    Args:
        distance_m: Computed distance in meters
        pixel_height: Apparent object height in pixels
        ambient_light: Ambient light intensity, or None (fallback 0.6 applies)
        tracking: Current tracking quality

    Returns:
        Confidence in [0.1, 1.0]
    """
    return ConfidenceScorer().score(distance_m, pixel_height, ambient_light, tracking).confidence
