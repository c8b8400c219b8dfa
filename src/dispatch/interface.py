from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, Iterable, Protocol

if TYPE_CHECKING:  # pragma: no cover - import cycle safe typing
    from elevator_core.status import Direction


@dataclass(frozen=True)
class ElevatorSnapshot:
    """Lightweight view of an elevator for allocation decisions."""

    elevator_id: int
    direction: Direction
    taking_requests: bool
    capacity: int


@dataclass(frozen=True)
class PendingBatch:
    """A non-empty directional queue waiting for an elevator."""

    direction: Direction
    size: int


class Scheduler(Protocol):
    """Strategy interface for handing queued batches to elevators."""

    def select_calls(
        self,
        elevator_state: Iterable[ElevatorSnapshot],
        pending_batches: Iterable[PendingBatch],
    ) -> Dict[Direction, int]:
        """
        Return mapping of batch direction -> elevator_id that takes it.

        Batches missing from the result stay queued for a later attempt.
        An elevator must appear at most once in the result.
        """
        ...
