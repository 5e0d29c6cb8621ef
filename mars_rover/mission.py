from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Sequence, Set, Tuple, Union
import logging
import operator

from .direction import Direction
from .grid import CellType, Plateau, Row
from .result import MissionResult, MissionStatus
from .rover import RoverState

if TYPE_CHECKING:
    from telemetry.logger import MissionTelemetryLogger

logger = logging.getLogger(__name__)


# Power spent entering a cell. Cells not listed cost DEFAULT_MOVE_COST.
MOVE_COSTS = {
    CellType.EMPTY: 1,
    CellType.ANOMALY: 1,
    CellType.ROCKY: 2,
    CellType.SAND_DUNE: 3,
    CellType.CHARGING: 1,
}
DEFAULT_MOVE_COST = 1

ROTATION_COST = 1
PROCESSING_COST = 1


class MissionConfigError(ValueError):
    """Mission inputs rejected before any command is interpreted."""


def movement_cost(cell: CellType) -> int:
    return MOVE_COSTS.get(cell, DEFAULT_MOVE_COST)


class MissionInterpreter:
    """Command interpreter for a single mission.

    Owns the rover state and the set of anomalies already sampled; both live
    only as long as the interpreter. The plateau is never mutated.

    Parameters
    ----------
    plateau : Plateau
        Map the rover drives on.
    rover : RoverState
        Initial state. Mutated in place as commands are interpreted.
    charging_rate : int
        Power added at the end of every step that ends on a charging cell.
    telemetry : MissionTelemetryLogger, optional
        Receives one record per interpreted step.
    """

    def __init__(
        self,
        plateau: Plateau,
        rover: RoverState,
        charging_rate: int,
        telemetry: Optional["MissionTelemetryLogger"] = None,
    ) -> None:
        self.plateau = plateau
        self.rover = rover
        self.charging_rate = charging_rate
        self.telemetry = telemetry
        self.collected_anomalies: Set[Tuple[int, int]] = set()
        self.steps_executed = 0

    # ------------------------------------------------------------------
    # Mission loop
    # ------------------------------------------------------------------
    def run(self, commands: str) -> MissionResult:
        """Interpret ``commands`` left to right until exhausted or a failure."""
        logger.info(
            "Mission start at (%d, %d) %s, power=%d, %d command(s)",
            self.rover.x,
            self.rover.y,
            self.rover.direction.name,
            self.rover.power,
            len(commands),
        )
        status = MissionStatus.SUCCESS
        for command in commands:
            terminal = self.step(command)
            if terminal is not None:
                status = terminal
                break

        result = MissionResult(final_state=self.rover, status=status)
        logger.info("Mission ended after %d step(s): %s", self.steps_executed, status.value)
        if self.telemetry is not None:
            self.telemetry.log_result(result)
        return result

    def step(self, command: str) -> Optional[MissionStatus]:
        """Interpret one command character.

        Returns the terminal status if this step ended the mission, else None.
        On failure the rover is left as it was before the failing action.
        """
        self.steps_executed += 1
        status = self._dispatch(command)
        if status is None:
            self._charge()

        logger.debug("step %d %r -> %s", self.steps_executed, command, self.rover.to_dict())
        if self.telemetry is not None:
            self.telemetry.log_step(
                self.steps_executed,
                command,
                self.rover,
                status.value if status is not None else None,
            )
        return status

    def _dispatch(self, command: str) -> Optional[MissionStatus]:
        if self.rover.power <= 0:
            return MissionStatus.POWER_DEPLETED

        if command == "L":
            return self._rotate(self.rover.direction.rotate_left())
        if command == "R":
            return self._rotate(self.rover.direction.rotate_right())
        if command == "M":
            return self._move()
        if command == "P":
            return self._process_anomaly()
        # Unknown commands are no-ops; charging still applies.
        return None

    # ------------------------------------------------------------------
    # Command handlers
    # ------------------------------------------------------------------
    def _rotate(self, heading: Direction) -> Optional[MissionStatus]:
        if self.rover.power < ROTATION_COST:
            return MissionStatus.ROTATION_POWER
        self.rover.direction = heading
        self.rover.power -= ROTATION_COST
        return None

    def _move(self) -> Optional[MissionStatus]:
        new_x = self.rover.x + self.rover.direction.dx
        new_y = self.rover.y + self.rover.direction.dy

        if not self.plateau.in_bounds(new_x, new_y):
            return MissionStatus.FELL_OFF

        destination = self.plateau.cell_at(new_x, new_y)
        if destination is CellType.IMPASSABLE:
            # Obstacle: stay put, no cost.
            return None

        cost = movement_cost(destination)
        if self.rover.power < cost:
            if destination is CellType.SAND_DUNE:
                return MissionStatus.STUCK_IN_SAND
            return MissionStatus.MOVEMENT_POWER

        self.rover.x = new_x
        self.rover.y = new_y
        self.rover.power -= cost
        return None

    def _process_anomaly(self) -> Optional[MissionStatus]:
        if self.rover.power < PROCESSING_COST:
            return MissionStatus.PROCESSING_POWER
        self.rover.power -= PROCESSING_COST

        key = self.rover.position
        if self.plateau.cell_at(*key) is CellType.ANOMALY and key not in self.collected_anomalies:
            self.rover.science_count += 1
            self.collected_anomalies.add(key)
        return None

    def _charge(self) -> None:
        if self.plateau.cell_at(self.rover.x, self.rover.y) is CellType.CHARGING:
            self.rover.power += self.charging_rate


# ----------------------------------------------------------------------
# Entry point
# ----------------------------------------------------------------------
def _validate_position(initial_position: Sequence[int]) -> Tuple[int, int]:
    try:
        if len(initial_position) != 2:
            raise MissionConfigError("Invalid initial position")
        x, y = (operator.index(v) for v in initial_position)
    except TypeError as exc:
        raise MissionConfigError(f"Invalid initial position: {initial_position!r}") from exc
    return x, y


def execute_mission(
    plateau_map: Union[Plateau, Sequence[Row]],
    initial_position: Sequence[int],
    initial_direction: str,
    max_power: int,
    charging_rate: int,
    command_sequence: Optional[str],
    telemetry: Optional["MissionTelemetryLogger"] = None,
) -> MissionResult:
    """Run one mission and return its result.

    ``plateau_map`` is a Plateau or rows top to bottom. Invalid inputs (bad
    map shape, start off the plateau or on an impassable cell, unknown
    heading) raise MissionConfigError before any command runs. Mission
    failures are reported through ``MissionResult.status``.
    """
    if isinstance(plateau_map, Plateau):
        plateau = plateau_map
    else:
        try:
            plateau = Plateau(plateau_map)
        except ValueError as exc:
            raise MissionConfigError(str(exc)) from exc

    start_x, start_y = _validate_position(initial_position)
    if not plateau.in_bounds(start_x, start_y):
        raise MissionConfigError("Initial position out of bounds")
    if plateau.cell_at(start_x, start_y) is CellType.IMPASSABLE:
        raise MissionConfigError("Initial position is impassable")

    try:
        direction = Direction.from_token(initial_direction)
    except ValueError as exc:
        raise MissionConfigError(str(exc)) from exc

    rover = RoverState(x=start_x, y=start_y, direction=direction, power=max_power)
    interpreter = MissionInterpreter(
        plateau=plateau,
        rover=rover,
        charging_rate=charging_rate,
        telemetry=telemetry,
    )
    return interpreter.run(command_sequence or "")
