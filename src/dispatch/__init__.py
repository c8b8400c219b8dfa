from __future__ import annotations

from typing import Dict, Type

from .first_fit import FirstFitScheduler
from .interface import ElevatorSnapshot, PendingBatch, Scheduler

__all__ = [
    "ElevatorSnapshot",
    "FirstFitScheduler",
    "PendingBatch",
    "Scheduler",
    "get_scheduler",
]


SCHEDULER_REGISTRY: Dict[str, Type[Scheduler]] = {
    "first_fit": FirstFitScheduler,
}


def get_scheduler(name: str) -> Scheduler:
    cls = SCHEDULER_REGISTRY.get(name.lower())
    if cls is None:
        raise ValueError(f"Unknown scheduler '{name}'. Available: {', '.join(SCHEDULER_REGISTRY)}")
    return cls()
