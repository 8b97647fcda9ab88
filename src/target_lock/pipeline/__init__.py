"""Measurement pipeline orchestration."""

from target_lock.pipeline.processor import MeasurementProcessor, MeasurementRequest, MeasurementResult

__all__ = ["MeasurementProcessor", "MeasurementRequest", "MeasurementResult"]
