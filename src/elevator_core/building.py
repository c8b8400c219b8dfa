from __future__ import annotations

from collections import deque
from typing import Callable, Deque, Dict, List, Optional, Sequence

from dispatch import ElevatorSnapshot, PendingBatch, Scheduler, get_scheduler

from .config import ElevatorTiming, validate_building_parameters
from .elevator import Elevator
from .errors import CapacityExceededError, ConfigurationError, InvalidRequestError, InvalidStateError
from .reports import BuildingReport
from .request import Request, parse_requests
from .status import Direction, SystemStatus

EventCallback = Callable[[dict], None]


class Building:
    """Owns the elevators and the directional request queues.

    Requests are buffered per direction and handed out as whole batches by
    the scheduler at the start of every step; the elevators then advance one
    tick each, always in index order.
    """

    def __init__(
        self,
        num_floors: int,
        num_elevators: int,
        elevator_capacity: int,
        timing: Optional[ElevatorTiming] = None,
        scheduler_name: str = "first_fit",
    ) -> None:
        validate_building_parameters(num_floors, num_elevators, elevator_capacity)
        timing = timing or ElevatorTiming()
        timing.validate()

        self._num_floors = num_floors
        self._num_elevators = num_elevators
        self._elevator_capacity = elevator_capacity
        self.scheduler_name = scheduler_name
        try:
            self.scheduler: Scheduler = get_scheduler(scheduler_name)
        except ValueError as exc:
            raise ConfigurationError(str(exc)) from exc
        self.system_status = SystemStatus.OUT_OF_SERVICE
        self.elevators: List[Elevator] = [
            Elevator(elevator_id=i, num_floors=num_floors, capacity=elevator_capacity, timing=timing)
            for i in range(num_elevators)
        ]
        self._queues: Dict[Direction, Deque[Request]] = {
            Direction.UP: deque(),
            Direction.DOWN: deque(),
        }
        self.event_hooks: Dict[str, List[EventCallback]] = {}

    @property
    def num_floors(self) -> int:
        return self._num_floors

    @property
    def num_elevators(self) -> int:
        return self._num_elevators

    @property
    def elevator_capacity(self) -> int:
        return self._elevator_capacity

    @property
    def up_requests(self) -> List[Request]:
        return list(self._queues[Direction.UP])

    @property
    def down_requests(self) -> List[Request]:
        return list(self._queues[Direction.DOWN])

    def on_event(self, event: str, callback: EventCallback) -> None:
        self.event_hooks.setdefault(event, []).append(callback)

    def add_request(self, raw: str) -> bool:
        """Queue every request in ``raw`` or none of them."""
        self._require_running("accept requests")
        requests = parse_requests(raw)

        for direction, queue in self._queues.items():
            incoming = sum(1 for request in requests if request.direction == direction)
            if len(queue) + incoming > self._elevator_capacity:
                raise CapacityExceededError(
                    f"The number of {direction.value} requests exceeds the elevator capacity "
                    f"({len(queue)} queued + {incoming} new > {self._elevator_capacity})"
                )
        for request in requests:
            self._validate_request(request)

        for request in requests:
            self._queues[request.direction].append(request)
        return True

    def allocate_requests(self) -> None:
        self._require_running("allocate requests")
        if not any(self._queues.values()):
            return

        pending = [
            PendingBatch(direction=direction, size=len(queue))
            for direction, queue in self._queues.items()
            if queue
        ]
        assignments = self.scheduler.select_calls(self._snapshot_elevators(), pending)
        for direction, elevator_id in assignments.items():
            queue = self._queues[direction]
            batch = list(queue)
            self.elevators[elevator_id].process_requests(batch)
            queue.clear()
            self._emit(
                "allocated",
                {"direction": direction, "elevator_id": elevator_id, "requests": tuple(batch)},
            )

    def start_elevator_system(self) -> bool:
        if self.system_status == SystemStatus.STOPPING:
            raise InvalidStateError("Cannot start the system while it is stopping")
        if self.system_status == SystemStatus.RUNNING:
            return False

        self.system_status = SystemStatus.RUNNING
        for elevator in self.elevators:
            elevator.start()
        self._emit("started", {"status": self.system_status})
        return True

    def step(self) -> None:
        self._require_running("step")
        self.allocate_requests()
        for elevator in self.elevators:
            elevator.step()

    def stop_elevator_system(self) -> None:
        """Send every elevator to the ground floor and shut the system down.

        Blocks until each car is parked at floor 0 with its doors open.
        """
        if self.system_status != SystemStatus.RUNNING:
            return
        self.system_status = SystemStatus.STOPPING
        discarded = sum(len(queue) for queue in self._queues.values())
        for queue in self._queues.values():
            queue.clear()

        for elevator in self.elevators:
            elevator.take_out_of_service()
        drain_ticks = 0
        for elevator in self.elevators:
            while not elevator.parked:
                elevator.step()
                drain_ticks += 1

        self.system_status = SystemStatus.OUT_OF_SERVICE
        self._emit(
            "stopped",
            {"status": self.system_status, "discarded_requests": discarded, "drain_ticks": drain_ticks},
        )

    def get_elevator_system_status(self) -> BuildingReport:
        return BuildingReport(
            num_floors=self._num_floors,
            num_elevators=self._num_elevators,
            elevator_capacity=self._elevator_capacity,
            elevator_reports=tuple(elevator.report() for elevator in self.elevators),
            up_requests=tuple(self._queues[Direction.UP]),
            down_requests=tuple(self._queues[Direction.DOWN]),
            system_status=self.system_status,
        )

    def _validate_request(self, request: Request) -> None:
        top = self._num_floors - 1
        for floor in (request.start_floor, request.end_floor):
            if not 0 <= floor <= top:
                raise InvalidRequestError(f"Request {request} names floor {floor}, valid floors are 0-{top}")
        if request.start_floor == request.end_floor:
            raise InvalidRequestError(f"Request {request} starts and ends on the same floor")

    def _require_running(self, action: str) -> None:
        if self.system_status != SystemStatus.RUNNING:
            raise InvalidStateError(
                f"The elevator system is {self.system_status}, so it cannot {action}"
            )

    def _snapshot_elevators(self) -> Sequence[ElevatorSnapshot]:
        return [
            ElevatorSnapshot(
                elevator_id=elevator.elevator_id,
                direction=elevator.direction,
                taking_requests=elevator.taking_requests,
                capacity=elevator.capacity,
            )
            for elevator in self.elevators
        ]

    def _emit(self, event: str, payload: dict) -> None:
        for callback in self.event_hooks.get(event, []):
            callback(payload)
