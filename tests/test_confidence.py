"""Tests for confidence scoring."""

from __future__ import annotations

import pytest

from target_lock.analysis.confidence import (
    LIGHT_FALLBACK_SCORE,
    ConfidenceScorer,
    clamp,
    compute_confidence,
)
from target_lock.core.types import TrackingQuality


class TestConfidenceScorer:
    """Tests for the ConfidenceScorer class."""

    def test_ideal_conditions_without_light_estimate(self) -> None:
        """Close, large subject with no light estimate scores 0.92."""
        breakdown = ConfidenceScorer().score(0.0, 300.0, None, TrackingQuality.NORMAL)

        assert breakdown.distance_score == 1.0
        assert breakdown.pixel_score == 1.0
        assert breakdown.light_score == LIGHT_FALLBACK_SCORE
        assert breakdown.tracking_score == 1.0
        assert breakdown.confidence == pytest.approx(0.92)

    def test_mid_range_limited_tracking(self) -> None:
        """Every sub-score at its midpoint with limited tracking."""
        breakdown = ConfidenceScorer().score(10.0, 150.0, 500.0, TrackingQuality.LIMITED)

        assert breakdown.distance_score == pytest.approx(0.5)
        assert breakdown.pixel_score == pytest.approx(0.5)
        assert breakdown.light_score == pytest.approx(0.5)
        assert breakdown.tracking_score == 0.6
        assert breakdown.confidence == pytest.approx(0.52)

    def test_worst_case_floors(self) -> None:
        """All sub-scores floor at 0.2 and tracking at 0.3."""
        breakdown = ConfidenceScorer().score(100.0, 10.0, 0.0, TrackingQuality.UNAVAILABLE)

        assert breakdown.distance_score == 0.2
        assert breakdown.pixel_score == 0.2
        assert breakdown.light_score == 0.2
        assert breakdown.tracking_score == 0.3
        assert breakdown.confidence == pytest.approx(0.22)

    def test_bright_light_saturates(self) -> None:
        """Light above the reference caps at 1.0."""
        breakdown = ConfidenceScorer().score(2.0, 600.0, 2000.0, TrackingQuality.NORMAL)

        assert breakdown.light_score == 1.0
        assert breakdown.pixel_score == 1.0
        assert breakdown.distance_score == pytest.approx(0.9)
        assert breakdown.confidence == pytest.approx(0.965)

    def test_distance_score_floor_near_twenty_meters(self) -> None:
        """Distances approaching 20 m floor at 0.2."""
        breakdown = ConfidenceScorer().score(19.5, 300.0, None, TrackingQuality.NORMAL)

        assert breakdown.distance_score == 0.2

    def test_negative_distance_caps_at_one(self) -> None:
        """Degenerate negative distance is clamped, not rejected."""
        breakdown = ConfidenceScorer().score(-5.0, 300.0, None, TrackingQuality.NORMAL)

        assert breakdown.distance_score == 1.0

    def test_pixel_score_scales_with_height(self) -> None:
        """Pixel sub-score rises linearly until the cap."""
        scorer = ConfidenceScorer()

        assert scorer.score(0.0, 240.0, None, TrackingQuality.NORMAL).pixel_score == pytest.approx(
            0.8
        )
        assert scorer.score(0.0, 30.0, None, TrackingQuality.NORMAL).pixel_score == 0.2

    def test_tracking_levels(self) -> None:
        """Tracking quality maps to fixed scores."""
        scorer = ConfidenceScorer()
        scores = {
            q: scorer.score(5.0, 200.0, 800.0, q).tracking_score for q in TrackingQuality
        }

        assert scores == {
            TrackingQuality.NORMAL: 1.0,
            TrackingQuality.LIMITED: 0.6,
            TrackingQuality.UNAVAILABLE: 0.3,
        }


class TestComputeConfidence:
    """Tests for the pure function."""

    def test_matches_breakdown(self) -> None:
        """Pure function returns the breakdown's confidence."""
        breakdown = ConfidenceScorer().score(7.0, 180.0, 650.0, TrackingQuality.LIMITED)

        assert compute_confidence(7.0, 180.0, 650.0, TrackingQuality.LIMITED) == breakdown.confidence

    @pytest.mark.parametrize("distance", [-10.0, 0.0, 0.4, 5.0, 25.0, 500.0])
    @pytest.mark.parametrize("pixels", [-1.0, 0.0, 50.0, 300.0, 5000.0])
    @pytest.mark.parametrize("light", [None, 0.0, 400.0, 1e6])
    @pytest.mark.parametrize("tracking", list(TrackingQuality))
    def test_always_within_bounds(
        self,
        distance: float,
        pixels: float,
        light: float | None,
        tracking: TrackingQuality,
    ) -> None:
        """Confidence stays in [0.1, 1.0] for any input."""
        confidence = compute_confidence(distance, pixels, light, tracking)

        assert 0.1 <= confidence <= 1.0

    def test_deterministic(self) -> None:
        """Same inputs always give the same score."""
        first = compute_confidence(3.3, 210.0, None, TrackingQuality.NORMAL)
        second = compute_confidence(3.3, 210.0, None, TrackingQuality.NORMAL)

        assert first == second


class TestClamp:
    """Tests for the clamp helper."""

    def test_clamps_both_sides(self) -> None:
        """Values outside the range are pulled to the nearest bound."""
        assert clamp(-1.0, 0.2, 1.0) == 0.2
        assert clamp(3.0, 0.2, 1.0) == 1.0
        assert clamp(0.5, 0.2, 1.0) == 0.5
