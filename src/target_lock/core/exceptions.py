"""Custom exceptions for TargetLock."""


class TargetLockError(Exception):
    """Base exception for all TargetLock errors."""

    pass


class MeasurementIndexError(TargetLockError, IndexError):
    """Requested history position does not exist."""

    def __init__(self, message: str = "Measurement index out of range") -> None:
        self.message = message
        super().__init__(self.message)


class InvalidHeightError(TargetLockError, ValueError):
    """User-supplied reference height is not a positive number."""

    def __init__(self, message: str = "Please enter a valid height greater than 0.") -> None:
        self.message = message
        super().__init__(self.message)


class HistoryFileError(TargetLockError):
    """Exported history file is missing fields or cannot be parsed."""

    def __init__(self, message: str = "Invalid history file") -> None:
        self.message = message
        super().__init__(self.message)
