"""Exceptions raised by trackademic components."""

from typing import Optional


class TrackademicError(Exception):
    """Base class for every error raised by this package."""
    pass


class ValidationError(TrackademicError):
    """Raised when an input or a backend response does not match its schema."""
    pass


class UpstreamError(TrackademicError):
    """Raised when the call to the model backend itself fails."""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status


class UnknownCommandError(TrackademicError):
    """Raised when a toolbar command slug is not registered."""
    pass
