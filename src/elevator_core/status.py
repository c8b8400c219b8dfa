from __future__ import annotations

from enum import Enum


class Direction(str, Enum):
    UP = "up"
    DOWN = "down"
    STOPPED = "stopped"

    def reversed(self) -> "Direction":
        if self is Direction.UP:
            return Direction.DOWN
        if self is Direction.DOWN:
            return Direction.UP
        return self

    @property
    def arrow(self) -> str:
        return {Direction.UP: "^", Direction.DOWN: "v"}.get(self, "-")


class SystemStatus(str, Enum):
    """Lifecycle of the whole elevator system."""

    OUT_OF_SERVICE = "Out Of Service"
    RUNNING = "Running"
    STOPPING = "Stopping"

    def __str__(self) -> str:
        return self.value
