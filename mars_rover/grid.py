from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Sequence, Union
import json

import numpy as np


class CellType(Enum):
    """Terrain of a single plateau cell, keyed by its one-letter map token."""

    EMPTY = "E"
    ROCKY = "R"
    IMPASSABLE = "X"
    CHARGING = "C"
    ANOMALY = "A"
    SAND_DUNE = "S"

    @classmethod
    def tokens(cls) -> List[str]:
        return [c.value for c in cls]

    @classmethod
    def is_valid_token(cls, token: str) -> bool:
        return token in _TOKENS


_TOKENS = frozenset(CellType.tokens())

Row = Union[str, Sequence[str]]


class Plateau:
    """Read-only rectangular grid of cells.

    Logical coordinates have the origin at the bottom-left:
    - x increases to the right
    - y increases upward

    Storage keeps rows top to bottom (row 0 is the highest y), which is the
    order maps are written in. ``storage_row`` is the only place that
    translates between the two.

    Parameters
    ----------
    rows : sequence of rows
        Rows top to bottom. A row is either a sequence of cell tokens or a
        whitespace-separated string of tokens.
    """

    def __init__(self, rows: Sequence[Row]) -> None:
        if rows is None:
            raise ValueError("Invalid plateau map")
        parsed = [self._split_row(r) for r in rows]
        if not parsed or not parsed[0]:
            raise ValueError("Invalid plateau map")
        width = len(parsed[0])
        for i, row in enumerate(parsed):
            if len(row) != width:
                raise ValueError(
                    f"Invalid plateau map: row {i} has {len(row)} cells, expected {width}"
                )
            for token in row:
                if not CellType.is_valid_token(token):
                    raise ValueError(f"Invalid cell type '{token}' in row {i}")

        cells = np.array(parsed, dtype="<U1")
        cells.setflags(write=False)
        self._cells = cells

    @staticmethod
    def _split_row(row: Row) -> List[str]:
        if isinstance(row, str):
            return row.split()
        return [str(token) for token in row]

    # ------------------------------------------------------------------
    # Map loading / serialization
    # ------------------------------------------------------------------
    @classmethod
    def from_rows(cls, rows: Sequence[Row]) -> "Plateau":
        return cls(rows)

    @classmethod
    def from_map_dict(cls, data: Dict[str, Any]) -> "Plateau":
        """Create a plateau from ``{"rows": [...]}`` (rows top to bottom)."""
        if "rows" not in data:
            raise ValueError("Map dict is missing 'rows'")
        return cls(data["rows"])

    @classmethod
    def from_map_file(cls, path: str) -> "Plateau":
        """Create a plateau from a JSON map file."""
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        return cls.from_map_dict(data)

    def to_dict(self) -> Dict[str, Any]:
        return {"rows": [" ".join(row) for row in self.storage_rows()]}

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------
    @property
    def width(self) -> int:
        return int(self._cells.shape[1])

    @property
    def height(self) -> int:
        return int(self._cells.shape[0])

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def storage_row(self, y: int) -> int:
        """Translate logical row y (upward) into the storage row index."""
        return self.height - 1 - y

    def logical_row(self, storage_idx: int) -> int:
        """Inverse of ``storage_row``; the flip is its own inverse."""
        return self.storage_row(storage_idx)

    def cell_at(self, x: int, y: int) -> CellType:
        """Return the cell at logical (x, y).

        Raises IndexError when (x, y) is off the plateau; callers are expected
        to check ``in_bounds`` first.
        """
        if not self.in_bounds(x, y):
            raise IndexError(f"({x}, {y}) is outside the {self.width}x{self.height} plateau")
        return CellType(str(self._cells[self.storage_row(y), x]))

    def storage_rows(self) -> List[List[str]]:
        """Token rows top to bottom, as written in map files."""
        return [[str(t) for t in row] for row in self._cells]

    def __repr__(self) -> str:
        return f"Plateau(width={self.width}, height={self.height})"
