from __future__ import annotations

from enum import Enum
from typing import Tuple


class Direction(Enum):
    """Compass heading with a unit displacement (dx, dy).

    y increases upward, so North is (0, 1).
    """

    N = (0, 1)
    E = (1, 0)
    S = (0, -1)
    W = (-1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    def rotate_left(self) -> "Direction":
        """Counter-clockwise quarter turn."""
        idx = _CYCLE.index(self)
        return _CYCLE[(idx - 1) % len(_CYCLE)]

    def rotate_right(self) -> "Direction":
        """Clockwise quarter turn."""
        idx = _CYCLE.index(self)
        return _CYCLE[(idx + 1) % len(_CYCLE)]

    @classmethod
    def from_token(cls, token: str) -> "Direction":
        """Parse a heading token ("N", "E", "S" or "W"). Case-sensitive."""
        for direction in _CYCLE:
            if direction.name == token:
                return direction
        raise ValueError(f"Invalid initial direction: {token}")


# Clockwise order
_CYCLE: Tuple[Direction, ...] = (Direction.N, Direction.E, Direction.S, Direction.W)
