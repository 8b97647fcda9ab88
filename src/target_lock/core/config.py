"""Application configuration via Pydantic Settings."""

from __future__ import annotations

from collections.abc import Callable
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from target_lock.core.logging import get_logger
from target_lock.core.types import DisplayUnit

logger = get_logger(__name__)

UnitListener = Callable[[DisplayUnit], None]


class DisplaySettings(BaseSettings):
    """Rendering preferences."""

    model_config = SettingsConfigDict(env_prefix="DISPLAY_")

    unit: DisplayUnit = DisplayUnit.BOTH


class MeasurementSettings(BaseSettings):
    """Measurement input defaults."""

    model_config = SettingsConfigDict(env_prefix="MEASURE_")

    default_height_m: float = Field(default=1.7, gt=0)


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(env_prefix="LOG_")

    level: str = "INFO"
    file: str | None = None


class Settings(BaseSettings):
    """Root settings aggregating all configuration sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    display: DisplaySettings = Field(default_factory=DisplaySettings)
    measurement: MeasurementSettings = Field(default_factory=MeasurementSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings instance."""
    return Settings()


class DisplayPreferences:
    """Current display unit with explicit change notification.

    Passed to formatters and the processor at call time instead of being
    read from a shared global. Listeners are called with the new unit after
    every change; assigning the current unit again is not a change.
    """

    def __init__(self, unit: DisplayUnit = DisplayUnit.BOTH) -> None:
        """Initialize preferences.

        Args:
            unit: Initial display unit
        """
        self._unit = unit
        self._listeners: list[UnitListener] = []

    @classmethod
    def from_settings(cls, settings: DisplaySettings) -> DisplayPreferences:
        """Create preferences seeded from configuration."""
        return cls(settings.unit)

    @property
    def unit(self) -> DisplayUnit:
        """Currently selected display unit."""
        return self._unit

    @unit.setter
    def unit(self, value: DisplayUnit) -> None:
        value = DisplayUnit(value)
        if value == self._unit:
            return

        self._unit = value
        logger.debug("Display unit changed to %s", value.value)
        for listener in list(self._listeners):
            listener(value)

    def subscribe(self, listener: UnitListener) -> Callable[[], None]:
        """Register a change listener.

        Args:
            listener: Called with the new unit on each change

        Returns:
            Callable that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe
