"""Core geometry types: grid cells, LV95 coordinates, DEM grids, wind and launches."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional, Tuple


@dataclass(frozen=True)
class CellIdx:
    """Row/column position of a cell in a DEM grid (row 0 is northernmost)."""

    row: int
    col: int


@dataclass(frozen=True)
class LV95:
    """Swiss LV95 coordinate (easting, northing) in meters."""

    e: float
    n: float


@dataclass
class Dem:
    """Row-major elevation grid. NaN marks nodata."""

    rows: int
    cols: int
    cell_size_m: float
    origin: LV95
    data: List[float]

    def __post_init__(self) -> None:
        if self.rows < 0 or self.cols < 0:
            raise ValueError("DEM dimensions must be non-negative")
        if len(self.data) != self.rows * self.cols:
            raise ValueError(
                f"DEM data has {len(self.data)} values, expected {self.rows * self.cols}"
            )

    @classmethod
    def from_fn(
        cls,
        rows: int,
        cols: int,
        cell_size_m: float,
        origin: LV95,
        func: Callable[[int, int], float],
    ) -> "Dem":
        """Build a DEM by evaluating ``func(row, col)`` for every cell."""
        data = [float(func(r, c)) for r in range(rows) for c in range(cols)]
        return cls(rows, cols, cell_size_m, origin, data)

    def idx(self, row: int, col: int) -> int:
        """Flat index of a cell in ``data``."""
        return row * self.cols + col

    def get(self, row: int, col: int) -> Optional[float]:
        """Elevation at a cell, or None when out of bounds or nodata."""
        if not self.in_bounds(row, col):
            return None
        z = self.data[self.idx(row, col)]
        return z if math.isfinite(z) else None

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def cell_count(self) -> int:
        return self.rows * self.cols

    def distance_m(self, a: CellIdx, b: CellIdx) -> float:
        """Horizontal distance between two cell centers in meters."""
        return math.hypot(a.row - b.row, a.col - b.col) * self.cell_size_m

    def area_m2(self) -> float:
        """Ground area of one cell in square meters."""
        return self.cell_size_m * self.cell_size_m


@dataclass(frozen=True)
class Wind:
    """Wind blowing FROM ``from_deg`` (compass) at ``speed_kmh``."""

    from_deg: float
    speed_kmh: float


class LaunchKind(Enum):
    AUTO_DISCOVERED = "auto_discovered"
    KNOWN = "known"


@dataclass
class Launch:
    id: int
    cell: CellIdx
    altitude_m: float
    aspect_deg: float
    aspect_window_deg: Tuple[float, float]
    slope_deg: float
    kind: LaunchKind = LaunchKind.AUTO_DISCOVERED
    warnings: List[str] = field(default_factory=list)


def angle_diff_deg(a: float, b: float) -> float:
    """Signed smallest difference ``a - b`` in degrees, within [-180, 180)."""
    return (a - b + 180.0) % 360.0 - 180.0