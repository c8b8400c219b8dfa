"""
Exceptions raised by the elevator core.
"""
from __future__ import annotations


class ElevatorSystemError(Exception):
    """Base exception for all elevator system errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class ConfigurationError(ElevatorSystemError, ValueError):
    """Building or elevator parameters are out of range."""


class InvalidStateError(ElevatorSystemError, RuntimeError):
    """Operation is not allowed in the current system or elevator state."""


class CapacityExceededError(ElevatorSystemError, ValueError):
    """A request queue or batch would exceed the elevator capacity."""


class RequestFormatError(ElevatorSystemError, ValueError):
    """Raw request input could not be parsed."""


class InvalidRequestError(RequestFormatError):
    """A parsed request names floors the building cannot serve."""
