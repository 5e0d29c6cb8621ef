from __future__ import annotations

from typing import List, Optional

from .config import MissionConfig
from .grid import Plateau
from .rover import RoverState


def render_plateau(plateau: Plateau, rover: Optional[RoverState] = None) -> str:
    """Render the plateau top row first, labelled with logical coordinates.

    When ``rover`` is given its cell shows the heading letter in lowercase.
    """
    lines: List[str] = []
    for storage_idx, row in enumerate(plateau.storage_rows()):
        y = plateau.logical_row(storage_idx)
        cells = list(row)
        if rover is not None and rover.y == y and plateau.in_bounds(rover.x, rover.y):
            cells[rover.x] = rover.direction.name.lower()
        lines.append(f"Y={y}: " + " ".join(cells))

    footer = "     " + " ".join(f"X={x}" for x in range(plateau.width))
    lines.append(footer)
    return "\n".join(lines)


def render_mission_parameters(config: MissionConfig, plateau: Plateau) -> str:
    lines = [
        "Mission Parameters:",
        f"- Plateau: {plateau.width}x{plateau.height}",
        f"- Initial Position: ({config.start_x}, {config.start_y})",
        f"- Initial Direction: {config.direction}",
        f"- Max Power: {config.max_power}",
        f"- Charging Rate: {config.charging_rate}",
        f"- Commands: {config.commands}",
        "",
        "Plateau Map (Y increases upward):",
        render_plateau(plateau),
    ]
    return "\n".join(lines)
