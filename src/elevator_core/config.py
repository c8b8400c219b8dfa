from __future__ import annotations

from dataclasses import dataclass

from .errors import ConfigurationError

MIN_FLOORS = 3
MAX_FLOORS = 30
MIN_ELEVATORS = 1
MIN_CAPACITY = 4
MAX_CAPACITY = 20


@dataclass(frozen=True)
class ElevatorTiming:
    """Tick counts that drive the door and idle timers."""

    door_dwell_ticks: int = 3
    idle_wait_ticks: int = 5

    def validate(self) -> None:
        if self.door_dwell_ticks < 1:
            raise ConfigurationError("Door dwell must last at least one tick")
        if self.idle_wait_ticks < 1:
            raise ConfigurationError("Idle wait must last at least one tick")


def validate_building_parameters(num_floors: int, num_elevators: int, elevator_capacity: int) -> None:
    if not MIN_FLOORS <= num_floors <= MAX_FLOORS:
        raise ConfigurationError(
            f"The number of floors must be between {MIN_FLOORS} and {MAX_FLOORS}, got {num_floors}"
        )
    if num_elevators < MIN_ELEVATORS:
        raise ConfigurationError(f"The number of elevators must be greater than 0, got {num_elevators}")
    if not MIN_CAPACITY <= elevator_capacity <= MAX_CAPACITY:
        raise ConfigurationError(
            f"Elevator capacity must be between {MIN_CAPACITY} and {MAX_CAPACITY}, got {elevator_capacity}"
        )
