"""
Top-level package for the Mars rover mission simulator.

Components:
- grid: plateau cell types and bounds-checked lookup
- direction: compass heading and rotation
- rover: mutable rover state (pose, power, science)
- mission: command interpreter / mission state machine
- result: immutable mission result record
- config: YAML mission configuration
- render: text rendering of plateau and mission parameters
- console: interactive mission input
"""

from .grid import CellType, Plateau
from .direction import Direction
from .rover import RoverSnapshot, RoverState
from .result import MissionResult
from .mission import MissionConfigError, MissionInterpreter, MissionStatus, execute_mission

__all__ = [
    "CellType",
    "Plateau",
    "Direction",
    "RoverState",
    "RoverSnapshot",
    "MissionResult",
    "MissionConfigError",
    "MissionInterpreter",
    "MissionStatus",
    "execute_mission",
]
