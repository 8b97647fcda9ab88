"""Pure analysis logic: distance, confidence, validation, and history.

This module contains NO camera access and NO UI code.
All functions operate on plain numbers and typed dataclasses.
"""

from target_lock.analysis.calculator import DistanceCalculator, calculate_distance
from target_lock.analysis.confidence import ConfidenceScorer, compute_confidence
from target_lock.analysis.history import MeasurementHistory
from target_lock.analysis.presets import PresetCatalog
from target_lock.analysis.validator import MeasurementValidator, RecentDistanceWindow, validate

__all__ = [
    "DistanceCalculator",
    "calculate_distance",
    "ConfidenceScorer",
    "compute_confidence",
    "MeasurementValidator",
    "RecentDistanceWindow",
    "validate",
    "MeasurementHistory",
    "PresetCatalog",
]
