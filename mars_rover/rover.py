from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Tuple

from .direction import Direction


@dataclass
class RoverState:
    """State of the rover on the plateau.

    Attributes
    ----------
    x : int
        Column (0 is the left edge).
    y : int
        Row, increasing upward (0 is the bottom edge).
    direction : Direction
        Current heading.
    power : int
        Remaining power budget. Never negative after a committed action.
    science_count : int
        Number of anomalies sampled so far.
    """

    x: int
    y: int
    direction: Direction
    power: int
    science_count: int = 0

    @property
    def position(self) -> Tuple[int, int]:
        return (self.x, self.y)

    def snapshot(self) -> "RoverSnapshot":
        """Return an immutable copy of this state."""
        return RoverSnapshot(
            x=self.x,
            y=self.y,
            direction=self.direction,
            power=self.power,
            science_count=self.science_count,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize state to a dict for logging/telemetry."""
        return self.snapshot().to_dict()


@dataclass(frozen=True)
class RoverSnapshot:
    """Read-only rover state, as reported in a mission result."""

    x: int
    y: int
    direction: Direction
    power: int
    science_count: int = 0

    @property
    def position(self) -> Tuple[int, int]:
        return (self.x, self.y)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "x": self.x,
            "y": self.y,
            "direction": self.direction.name,
            "power": self.power,
            "science_count": self.science_count,
        }
