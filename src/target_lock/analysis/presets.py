"""Reference height presets and user height input."""

from __future__ import annotations

from target_lock.core.exceptions import InvalidHeightError
from target_lock.core.types import Preset

DEFAULT_PRESETS: tuple[Preset, ...] = (
    Preset(title="Adult Male (1.75m)", height_m=1.75),
    Preset(title="Adult Female (1.65m)", height_m=1.65),
    Preset(title="Child (1.20m)", height_m=1.20),
    Preset(title="Large Dog (0.70m)", height_m=0.70),
    Preset(title="Medium Dog (0.50m)", height_m=0.50),
    Preset(title="Small Dog (0.30m)", height_m=0.30),
)


class PresetCatalog:
    """Named reference heights the user can pick instead of typing one."""

    def __init__(self, presets: tuple[Preset, ...] = DEFAULT_PRESETS) -> None:
        self._presets = presets

    def presets(self) -> list[Preset]:
        """All presets in display order."""
        return list(self._presets)

    def titles(self) -> list[str]:
        """Preset titles in display order."""
        return [p.title for p in self._presets]

    def find(self, title: str) -> Preset | None:
        """Look up a preset by its exact title."""
        for preset in self._presets:
            if preset.title == title:
                return preset
        return None


def parse_height_input(text: str) -> float:
    """Parse a user-entered height in meters.

    Args:
        text: Raw input, e.g. "1.7"

    Returns:
        Height in meters

    Raises:
        InvalidHeightError: If the text is not a number greater than 0
    """
    try:
        height = float(text.strip())
    except ValueError as e:
        raise InvalidHeightError() from e

    # NaN and inf parse as floats but are not heights
    if not height > 0 or height == float("inf"):
        raise InvalidHeightError()

    return height
