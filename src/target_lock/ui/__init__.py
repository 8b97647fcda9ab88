"""Text rendering for measurements and history."""

from target_lock.ui.formatting import UnitFormatter, format_measurement, meters_to_feet

__all__ = ["UnitFormatter", "format_measurement", "meters_to_feet"]
