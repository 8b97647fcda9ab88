"""TargetLock: single-camera distance estimation from an object's known height."""

__version__ = "0.1.0"
