"""Exceptions raised by DayBook."""


class DayBookError(Exception):
    """Base class for DayBook errors."""


class StorageError(DayBookError):
    """Raised when journal state cannot be written to or read from storage."""
