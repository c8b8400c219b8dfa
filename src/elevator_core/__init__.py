"""Tick-based multi-elevator dispatch core."""

from .building import Building
from .config import ElevatorTiming
from .elevator import DoorOpen, Elevator, Idle, Moving, OutOfService
from .errors import (
    CapacityExceededError,
    ConfigurationError,
    ElevatorSystemError,
    InvalidRequestError,
    InvalidStateError,
    RequestFormatError,
)
from .reports import BuildingReport, ElevatorReport
from .request import Request, parse_requests
from .status import Direction, SystemStatus

__all__ = [
    "Building",
    "BuildingReport",
    "CapacityExceededError",
    "ConfigurationError",
    "Direction",
    "DoorOpen",
    "Elevator",
    "ElevatorReport",
    "ElevatorSystemError",
    "ElevatorTiming",
    "Idle",
    "InvalidRequestError",
    "InvalidStateError",
    "Moving",
    "OutOfService",
    "Request",
    "RequestFormatError",
    "SystemStatus",
    "parse_requests",
]
