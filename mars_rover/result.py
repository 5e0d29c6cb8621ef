from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Union
import json

from .rover import RoverSnapshot, RoverState


class MissionStatus(str, Enum):
    """Terminal mission outcomes. Failures are outcomes, not exceptions."""

    SUCCESS = "Mission Successful"
    POWER_DEPLETED = "Mission Failed: Power Depleted"
    ROTATION_POWER = "Mission Failed: Insufficient Power for Rotation"
    FELL_OFF = "Mission Failed: Rover Fell Off Mars"
    STUCK_IN_SAND = "Mission Failed: Rover Stuck in Sand Dune"
    MOVEMENT_POWER = "Mission Failed: Insufficient Power for Movement"
    PROCESSING_POWER = "Mission Failed: Power Depleted During Anomaly Processing"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class MissionResult:
    """Final rover snapshot paired with the terminal mission status."""

    final_state: Union[RoverState, RoverSnapshot]
    status: MissionStatus

    def __post_init__(self) -> None:
        # Freeze a live rover so later mutation cannot leak into the result.
        if isinstance(self.final_state, RoverState):
            object.__setattr__(self, "final_state", self.final_state.snapshot())

    @property
    def succeeded(self) -> bool:
        return self.status is MissionStatus.SUCCESS

    def to_dict(self) -> Dict[str, Any]:
        s = self.final_state
        return {
            "final_state": {
                "position": [s.x, s.y],
                "direction": s.direction.name,
                "power": s.power,
                "scientific_data": s.science_count,
            },
            "status": self.status.value,
        }

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    def __str__(self) -> str:
        return self.to_json()
