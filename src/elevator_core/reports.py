from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from .request import Request
from .status import Direction, SystemStatus


@dataclass(frozen=True)
class ElevatorReport:
    """Point-in-time view of one elevator."""

    elevator_id: int
    current_floor: int
    direction: Direction
    door_closed: bool
    floor_requests: Tuple[bool, ...]
    door_open_timer: int
    end_wait_timer: int
    taking_requests: bool
    out_of_service: bool
    travel_direction: Optional[Direction] = None

    def to_dict(self) -> dict:
        return {
            "id": self.elevator_id,
            "floor": self.current_floor,
            "direction": self.direction.value,
            "travel_direction": (self.travel_direction or self.direction).value,
            "door_closed": self.door_closed,
            "stops": [floor for floor, requested in enumerate(self.floor_requests) if requested],
            "door_open_timer": self.door_open_timer,
            "end_wait_timer": self.end_wait_timer,
            "taking_requests": self.taking_requests,
            "out_of_service": self.out_of_service,
        }

    def __str__(self) -> str:
        if self.out_of_service:
            return f"Out of Service[Floor {self.current_floor}]"
        if self.end_wait_timer > 0:
            return f"Waiting[Floor {self.current_floor}, Time {self.end_wait_timer}]"
        door = "C" if self.door_closed else "O"
        arrow = (self.travel_direction or self.direction).arrow
        stops = " ".join(
            str(floor) if requested else "--" for floor, requested in enumerate(self.floor_requests)
        )
        return f"[{self.current_floor}|{arrow}|{door}]< {stops} >"


@dataclass(frozen=True)
class BuildingReport:
    """Point-in-time view of the building and all of its elevators.

    Every field is an immutable copy, so a report stays valid after the
    building keeps stepping.
    """

    num_floors: int
    num_elevators: int
    elevator_capacity: int
    elevator_reports: Tuple[ElevatorReport, ...]
    up_requests: Tuple[Request, ...]
    down_requests: Tuple[Request, ...]
    system_status: SystemStatus

    def to_dict(self) -> dict:
        return {
            "num_floors": self.num_floors,
            "num_elevators": self.num_elevators,
            "elevator_capacity": self.elevator_capacity,
            "system_status": self.system_status.value,
            "up_requests": [[r.start_floor, r.end_floor] for r in self.up_requests],
            "down_requests": [[r.start_floor, r.end_floor] for r in self.down_requests],
            "elevators": [report.to_dict() for report in self.elevator_reports],
        }

    def __str__(self) -> str:
        lines = [
            "Building Report:",
            f"Number of Floors: {self.num_floors}",
            f"Number of Elevators: {self.num_elevators}",
            f"Elevator Capacity: {self.elevator_capacity}",
            f"Elevator System Status: {self.system_status}",
            f"Up Requests: {_format_requests(self.up_requests)}",
            f"Down Requests: {_format_requests(self.down_requests)}",
            "Elevator Reports: ",
        ]
        lines.extend(f"Elevator {index}: {report}" for index, report in enumerate(self.elevator_reports))
        return "\n".join(lines) + "\n"


def _format_requests(requests: Tuple[Request, ...]) -> str:
    return "[" + ", ".join(str(request) for request in requests) + "]"
