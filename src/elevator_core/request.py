from __future__ import annotations

from dataclasses import dataclass
from typing import List

from .errors import RequestFormatError
from .status import Direction


@dataclass(frozen=True)
class Request:
    """A single trip from one floor to another."""

    start_floor: int
    end_floor: int

    @property
    def direction(self) -> Direction:
        """UP when the trip climbs, DOWN otherwise."""
        return Direction.UP if self.start_floor < self.end_floor else Direction.DOWN

    def __str__(self) -> str:
        return f"{self.start_floor}->{self.end_floor}"


def parse_requests(raw: str) -> List[Request]:
    """Split ``"s1 e1 s2 e2 ..."`` into requests.

    Only the token structure is checked here. Whether the floors exist is
    up to the building that receives the requests.
    """

    tokens = raw.split()
    if not tokens or len(tokens) % 2 != 0:
        raise RequestFormatError(
            "Requests must be an even number of values: <startFloor> <endFloor> ..."
        )
    try:
        floors = [int(token) for token in tokens]
    except ValueError as exc:
        raise RequestFormatError(f"Request floors must be integers: {raw!r}") from exc
    return [Request(floors[i], floors[i + 1]) for i in range(0, len(floors), 2)]
