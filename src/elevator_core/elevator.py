from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence, Union

from .config import ElevatorTiming
from .errors import CapacityExceededError, InvalidStateError
from .reports import ElevatorReport
from .request import Request
from .status import Direction


@dataclass(frozen=True)
class Idle:
    """Doors closed, no assignment, waiting for a batch."""

    heading: Direction
    wait_ticks: int

    @property
    def direction(self) -> Direction:
        return self.heading


@dataclass(frozen=True)
class Moving:
    heading: Direction
    next_stop: int

    @property
    def direction(self) -> Direction:
        # The batch heading. The car may still be climbing to the first stop of
        # a DOWN batch (or descending to that of an UP batch); see travel_direction.
        return self.heading


@dataclass(frozen=True)
class DoorOpen:
    heading: Direction
    ticks_remaining: int

    @property
    def direction(self) -> Direction:
        return Direction.STOPPED


@dataclass(frozen=True)
class OutOfService:
    """Descending to the ground floor, or parked there with doors open."""

    resting: bool

    @property
    def direction(self) -> Direction:
        return Direction.STOPPED if self.resting else Direction.DOWN


ElevatorState = Union[Idle, Moving, DoorOpen, OutOfService]


@dataclass
class Elevator:
    """A single car with its own motion and door state machine."""

    elevator_id: int
    num_floors: int
    capacity: int
    timing: ElevatorTiming = field(default_factory=ElevatorTiming)
    current_floor: int = 0
    stops: List[int] = field(default_factory=list)
    state: ElevatorState = field(default_factory=lambda: OutOfService(resting=True))

    @property
    def direction(self) -> Direction:
        return self.state.direction

    @property
    def travel_direction(self) -> Direction:
        """Which way the car is physically moving this leg."""
        state = self.state
        if isinstance(state, Moving) and state.next_stop != self.current_floor:
            return Direction.UP if state.next_stop > self.current_floor else Direction.DOWN
        return self.direction

    @property
    def door_closed(self) -> bool:
        if isinstance(self.state, DoorOpen):
            return False
        if isinstance(self.state, OutOfService):
            return not self.state.resting
        return True

    @property
    def taking_requests(self) -> bool:
        return isinstance(self.state, Idle)

    @property
    def out_of_service(self) -> bool:
        return isinstance(self.state, OutOfService)

    @property
    def parked(self) -> bool:
        """True once an out-of-service car rests on the ground floor."""
        return isinstance(self.state, OutOfService) and self.state.resting

    def start(self) -> None:
        if not self.out_of_service:
            raise InvalidStateError(f"Elevator {self.elevator_id} is already in service")
        self.stops.clear()
        self._become_idle()

    def process_requests(self, requests: Sequence[Request]) -> None:
        """Accept a same-direction batch and plan its stops in travel order."""
        if not self.taking_requests:
            raise InvalidStateError(f"Elevator {self.elevator_id} is not taking requests")
        if len(requests) > self.capacity:
            raise CapacityExceededError(
                f"Elevator {self.elevator_id} cannot take {len(requests)} requests "
                f"(capacity {self.capacity})"
            )
        if not requests:
            return

        heading = requests[0].direction
        floors = {request.start_floor for request in requests}
        floors.update(request.end_floor for request in requests)
        self.stops = sorted(floors, reverse=heading is Direction.DOWN)

        if self.stops[0] == self.current_floor:
            self.stops.pop(0)
            self._open_doors(heading)
        else:
            self.state = Moving(heading=heading, next_stop=self.stops[0])

    def take_out_of_service(self) -> None:
        if self.out_of_service:
            return
        self.stops.clear()
        self.state = OutOfService(resting=False)

    def step(self) -> None:
        state = self.state
        if isinstance(state, OutOfService):
            self._step_out_of_service(state)
        elif isinstance(state, Idle):
            self._step_idle(state)
        elif isinstance(state, Moving):
            self._step_moving(state)
        elif isinstance(state, DoorOpen):
            self._step_door_open(state)

    def report(self) -> ElevatorReport:
        state = self.state
        return ElevatorReport(
            elevator_id=self.elevator_id,
            current_floor=self.current_floor,
            direction=self.direction,
            door_closed=self.door_closed,
            floor_requests=tuple(floor in self.stops for floor in range(self.num_floors)),
            door_open_timer=state.ticks_remaining if isinstance(state, DoorOpen) else 0,
            end_wait_timer=state.wait_ticks if isinstance(state, Idle) else 0,
            taking_requests=self.taking_requests,
            out_of_service=self.out_of_service,
            travel_direction=self.travel_direction,
        )

    def _step_out_of_service(self, state: OutOfService) -> None:
        if state.resting:
            return
        if self.current_floor > 0:
            self.current_floor -= 1
        else:
            self.state = OutOfService(resting=True)

    def _step_idle(self, state: Idle) -> None:
        remaining = state.wait_ticks - 1
        if remaining > 0:
            self.state = Idle(heading=state.heading, wait_ticks=remaining)
            return
        # Nothing arrived for this heading; offer the car to the other queue.
        self.state = Idle(heading=state.heading.reversed(), wait_ticks=self.timing.idle_wait_ticks)

    def _step_moving(self, state: Moving) -> None:
        self._move_towards(state.next_stop)
        if self.current_floor == state.next_stop:
            self.stops.pop(0)
            self._open_doors(state.heading)

    def _step_door_open(self, state: DoorOpen) -> None:
        remaining = state.ticks_remaining - 1
        if remaining > 0:
            self.state = DoorOpen(heading=state.heading, ticks_remaining=remaining)
        elif self.stops:
            self.state = Moving(heading=state.heading, next_stop=self.stops[0])
        else:
            self._become_idle()

    def _move_towards(self, target: int) -> None:
        if self.current_floor < target:
            self.current_floor += 1
        elif self.current_floor > target:
            self.current_floor -= 1

    def _open_doors(self, heading: Direction) -> None:
        self.state = DoorOpen(heading=heading, ticks_remaining=self.timing.door_dwell_ticks)

    def _become_idle(self) -> None:
        heading = Direction.UP if self.current_floor == 0 else Direction.DOWN
        self.state = Idle(heading=heading, wait_ticks=self.timing.idle_wait_ticks)
