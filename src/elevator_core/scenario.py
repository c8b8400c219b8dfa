"""Offline scenarios: a building plus request submissions keyed by tick."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple

from pydantic import BaseModel, Field, field_validator

from dispatch import SCHEDULER_REGISTRY

from .building import Building
from .config import ElevatorTiming
from .errors import CapacityExceededError, InvalidStateError, RequestFormatError
from .reports import BuildingReport


class TimingSettings(BaseModel):
    door_dwell_ticks: int = 3
    idle_wait_ticks: int = 5


class BuildingSettings(BaseModel):
    num_floors: int
    num_elevators: int
    elevator_capacity: int
    timing: TimingSettings = Field(default_factory=TimingSettings)
    scheduler: str = "first_fit"

    @field_validator("scheduler")
    @classmethod
    def _known_scheduler(cls, value: str) -> str:
        if value.lower() not in SCHEDULER_REGISTRY:
            raise ValueError(f"Unknown scheduler '{value}'. Available: {', '.join(SCHEDULER_REGISTRY)}")
        return value


class ScenarioEvent(BaseModel):
    tick: int = Field(ge=0)
    requests: str


class Scenario(BaseModel):
    name: str = "scenario"
    description: Optional[str] = None
    building: BuildingSettings
    ticks: int = Field(default=20, ge=0)
    events: List[ScenarioEvent] = Field(default_factory=list)
    stop_at_end: bool = True


@dataclass
class RejectedSubmission:
    tick: int
    requests: str
    error: str


@dataclass
class ScenarioResult:
    scenario: Scenario
    reports: List[BuildingReport] = field(default_factory=list)
    rejected: List[RejectedSubmission] = field(default_factory=list)
    final_report: Optional[BuildingReport] = None

    def to_dict(self) -> Dict:
        return {
            "scenario": self.scenario.name,
            "description": self.scenario.description,
            "ticks": self.scenario.ticks,
            "rejected": [
                {"tick": r.tick, "requests": r.requests, "error": r.error} for r in self.rejected
            ],
            "reports": [report.to_dict() for report in self.reports],
            "final_report": self.final_report.to_dict() if self.final_report else None,
        }


def load_scenario(path: Path) -> Scenario:
    return Scenario.model_validate_json(path.read_text())


def build_building(settings: BuildingSettings) -> Building:
    timing = ElevatorTiming(
        door_dwell_ticks=settings.timing.door_dwell_ticks,
        idle_wait_ticks=settings.timing.idle_wait_ticks,
    )
    return Building(
        num_floors=settings.num_floors,
        num_elevators=settings.num_elevators,
        elevator_capacity=settings.elevator_capacity,
        timing=timing,
        scheduler_name=settings.scheduler,
    )


def run_scenario(
    scenario: Scenario,
    hooks: Optional[Dict[str, Callable[[dict], None]]] = None,
) -> ScenarioResult:
    """Start the building, replay submissions tick by tick and collect reports.

    Submissions rejected by the building are recorded and the run goes on;
    configuration errors propagate.
    """

    building = build_building(scenario.building)
    for event, callback in (hooks or {}).items():
        building.on_event(event, callback)

    result = ScenarioResult(scenario=scenario)
    building.start_elevator_system()
    for tick in range(scenario.ticks):
        for submission in _events_at(scenario, tick):
            try:
                building.add_request(submission.requests)
            except (CapacityExceededError, RequestFormatError, InvalidStateError) as exc:
                result.rejected.append(RejectedSubmission(tick, submission.requests, str(exc)))
        building.step()
        result.reports.append(building.get_elevator_system_status())

    if scenario.stop_at_end:
        building.stop_elevator_system()
    result.final_report = building.get_elevator_system_status()
    return result


def _events_at(scenario: Scenario, tick: int) -> Tuple[ScenarioEvent, ...]:
    return tuple(event for event in scenario.events if event.tick == tick)
