"""Pinhole-camera distance calculation.

This module is pure logic with NO I/O.
"""

from __future__ import annotations


class DistanceCalculator:
    """Estimates camera-to-object distance with the pinhole model.

    distance = (focal_length_px * real_height_m) / pixel_height

    A result of 0.0 is a sentinel meaning "not computable" (the object has
    no positive on-screen height) and must not be read as a zero distance.
    """

    def calculate_distance(
        self,
        focal_length_px: float,
        real_height_m: float,
        pixel_height: float,
    ) -> float:
        """Calculate distance in meters.

        Args:
            focal_length_px: Focal length from camera intrinsics, in pixels
            real_height_m: Assumed real-world height of the object
            pixel_height: Apparent object height in camera pixels

        Returns:
            Distance in meters, or 0.0 when pixel_height <= 0
        """
        if pixel_height <= 0:
            return 0.0

        return (focal_length_px * real_height_m) / pixel_height


def calculate_distance(
    focal_length_px: float,
    real_height_m: float,
    pixel_height: float,
) -> float:
    """Pure function to calculate distance.

    Args:
        focal_length_px: Focal length in pixels
        real_height_m: Real-world object height in meters
        pixel_height: Apparent object height in pixels

    Returns:
        Distance in meters (0.0 if not computable)
    """
    return DistanceCalculator().calculate_distance(focal_length_px, real_height_m, pixel_height)


def pixel_height_from_taps(top_y: float, bottom_y: float, scale: float = 1.0) -> float:
    """Convert two tap positions into an apparent height in camera pixels.

    Args:
        top_y: Vertical view coordinate of the top tap
        bottom_y: Vertical view coordinate of the bottom tap
        scale: View points to pixels factor (screen content scale)

    Returns:
        Vertical tap separation in pixels
    """
    return abs(top_y - bottom_y) * scale
