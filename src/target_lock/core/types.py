"""Core data types and structures."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum, auto


@dataclass(frozen=True, slots=True)
class Measurement:
    """A single completed distance measurement.

    Values are always stored in meters; display units only affect rendering.

    Attributes:
        timestamp: When the measurement was taken
        distance_m: Estimated camera-to-object distance in meters
        height_m: Assumed real-world object height in meters
        confidence: Heuristic trustworthiness score [0, 1]
    """

    timestamp: datetime
    distance_m: float
    height_m: float
    confidence: float

    def to_dict(self) -> dict[str, float | str]:
        """Serialize to a JSON-compatible mapping."""
        return {
            "timestamp": self.timestamp.isoformat(),
            "distance_m": self.distance_m,
            "height_m": self.height_m,
            "confidence": self.confidence,
        }

    @classmethod
    def from_dict(cls, data: dict[str, float | str]) -> Measurement:
        """Rebuild a measurement from `to_dict` output."""
        return cls(
            timestamp=datetime.fromisoformat(str(data["timestamp"])),
            distance_m=float(data["distance_m"]),
            height_m=float(data["height_m"]),
            confidence=float(data["confidence"]),
        )


class TrackingQuality(Enum):
    """Platform-reported confidence in the device pose estimate."""

    NORMAL = auto()
    LIMITED = auto()
    UNAVAILABLE = auto()


class DisplayUnit(str, Enum):
    """How distances and heights are rendered."""

    METERS = "meters"
    FEET = "feet"
    BOTH = "both"


@dataclass(frozen=True, slots=True)
class HistoryStatistics:
    """Summary over the distances held in a measurement history.

    Attributes:
        count: Number of measurements
        average_m: Mean distance in meters
        min_m: Shortest distance in meters
        max_m: Longest distance in meters
    """

    count: int
    average_m: float
    min_m: float
    max_m: float


@dataclass(frozen=True, slots=True)
class Preset:
    """A named reference height offered to the user."""

    title: str
    height_m: float
