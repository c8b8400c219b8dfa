from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Iterable, List, Optional, Set

from .interface import ElevatorSnapshot, PendingBatch

if TYPE_CHECKING:  # pragma: no cover - import cycle safe typing
    from elevator_core.status import Direction


class FirstFitScheduler:
    """Gives each batch to the lowest-indexed idle elevator heading its way.

    Elevators too small for the whole batch are passed over; batches are
    never split.
    """

    def select_calls(
        self,
        elevator_state: Iterable[ElevatorSnapshot],
        pending_batches: Iterable[PendingBatch],
    ) -> Dict[Direction, int]:
        assignments: Dict[Direction, int] = {}
        elevators = list(elevator_state)
        claimed: Set[int] = set()
        for batch in pending_batches:
            candidate = self._choose_elevator(elevators, batch, claimed)
            if candidate is None:
                continue
            assignments[batch.direction] = candidate.elevator_id
            claimed.add(candidate.elevator_id)
        return assignments

    def _choose_elevator(
        self,
        elevators: List[ElevatorSnapshot],
        batch: PendingBatch,
        claimed: Set[int],
    ) -> Optional[ElevatorSnapshot]:
        for elevator in elevators:
            if elevator.elevator_id in claimed:
                continue
            if not elevator.taking_requests or elevator.capacity < batch.size:
                continue
            if elevator.direction == batch.direction:
                return elevator
        return None
