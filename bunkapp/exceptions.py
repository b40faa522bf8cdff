"""Exceptions raised outside the attendance core."""

from typing import Optional


class BunkAppError(Exception):
    """Base exception for BunkApp collaborators."""

    def __init__(self, message: str, *, path: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.path = path

    def __str__(self) -> str:
        if self.path:
            return f"{self.message} ({self.path})"
        return self.message


class StorageError(BunkAppError):
    """The input snapshot could not be written."""
