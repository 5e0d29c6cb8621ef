"""
Interactive collection of mission inputs.

Malformed rows and non-numeric answers are re-prompted. Non-positive plateau
dimensions or max power abort with ValueError, the same as a bad config file.
"""

from __future__ import annotations

from typing import Callable, List

from .config import MissionConfig
from .grid import CellType

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


def _read_int(prompt: str, input_fn: InputFn, output_fn: OutputFn) -> int:
    while True:
        raw = input_fn(prompt).strip()
        try:
            return int(raw)
        except ValueError:
            output_fn(f"Error: '{raw}' is not an integer. Please try again.")


def _read_row(
    index: int,
    width: int,
    height: int,
    input_fn: InputFn,
    output_fn: OutputFn,
) -> str:
    while True:
        tokens = input_fn(f"Row {index + 1} (top={height - index}): ").split()
        if len(tokens) != width:
            output_fn(f"Error: Expected {width} cells, got {len(tokens)}. Please try again.")
            continue
        bad = [t for t in tokens if not CellType.is_valid_token(t)]
        if bad:
            output_fn(
                f"Error: Invalid cell type '{bad[0]}'. Use {', '.join(CellType.tokens())}."
            )
            continue
        return " ".join(tokens)


def read_mission_config(
    input_fn: InputFn = input,
    output_fn: OutputFn = print,
) -> MissionConfig:
    """Prompt for a full mission and return it as a MissionConfig."""
    output_fn("=== Mars Rover Mission Control ===")
    output_fn("")

    width = _read_int("Enter plateau width: ", input_fn, output_fn)
    height = _read_int("Enter plateau height: ", input_fn, output_fn)
    if width <= 0 or height <= 0:
        raise ValueError("Plateau dimensions must be positive integers.")

    output_fn("")
    output_fn("Enter plateau map (row by row, from top to bottom):")
    output_fn("Use: E (Empty), R (Rocky), X (Impassable), C (Charging), A (Anomaly), S (Sand dune)")
    output_fn("Separate cells with spaces:")
    rows: List[str] = [
        _read_row(i, width, height, input_fn, output_fn) for i in range(height)
    ]

    output_fn("")
    start_x = _read_int(f"Enter initial X coordinate (0 to {width - 1}): ", input_fn, output_fn)
    start_y = _read_int(f"Enter initial Y coordinate (0 to {height - 1}): ", input_fn, output_fn)
    direction = input_fn("Enter initial direction (N/S/E/W): ").strip().upper()

    max_power = _read_int("Enter maximum power: ", input_fn, output_fn)
    charging_rate = _read_int("Enter charging rate: ", input_fn, output_fn)
    if max_power <= 0:
        raise ValueError("Maximum power must be positive.")

    output_fn("")
    commands = input_fn("Enter command sequence (L/R/M/P): ").strip().upper()

    return MissionConfig(
        plateau=rows,
        start_x=start_x,
        start_y=start_y,
        direction=direction,
        max_power=max_power,
        charging_rate=charging_rate,
        commands=commands,
    )
