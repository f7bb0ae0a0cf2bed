"""Hiking-cost estimation on the DEM grid.

Uses Tobler's hiking function as edge weights for a grid Dijkstra from one
or more seeded cells:

    walk_speed_kmh = 6 * exp(-3.5 * |dh/dx + 0.05|)

Walking is fastest on a 5% downhill grade. Both steep climbs and steep
descents slow it down.
"""

from __future__ import annotations

import heapq
import itertools
import math
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Tuple

from .model import CellIdx, Dem

_NEIGHBORS = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

_MIN_SPEED_KMH = 0.05


class SacClass(Enum):
    """SAC hiking scale class."""

    T1 = "T1"  # Hiking: wide, well-marked trail.
    T2 = "T2"  # Mountain hiking.
    T3 = "T3"  # Demanding mountain hiking.
    T4 = "T4"  # Alpine hiking: off-trail, scrambling.
    T5 = "T5"  # Demanding alpine.

    def cost_multiplier(self) -> float:
        """Factor applied to walking time on terrain of this class."""
        return _MULTIPLIERS[self]


_MULTIPLIERS = {
    SacClass.T1: 1.0,
    SacClass.T2: 1.2,
    SacClass.T3: 1.5,
    SacClass.T4: 2.0,
    SacClass.T5: 3.0,
}


@dataclass(frozen=True)
class HikeParams:
    """Settings for the hiking-time field."""

    # SAC class assumed when no trail metadata is available.
    default_sac: SacClass = SacClass.T2
    # Cells whose cumulative cost would exceed this many seconds are not expanded.
    max_cost_seconds: float = 6.0 * 3600.0


@dataclass
class HikeField:
    """Per-cell cumulative hiking cost in seconds; NaN means unreached."""

    seconds: List[float]


def tobler_speed_kmh(slope_pct: float) -> float:
    """Tobler's hiking function: walking speed in km/h for a slope dh/dx."""
    return 6.0 * math.exp(-3.5 * abs(slope_pct + 0.05))


def _edge_seconds(dem: Dem, a: CellIdx, b: CellIdx, mult: float) -> Optional[float]:
    za = dem.get(a.row, a.col)
    zb = dem.get(b.row, b.col)
    if za is None or zb is None:
        return None
    dist = dem.distance_m(a, b)
    speed_kmh = max(tobler_speed_kmh((zb - za) / dist), _MIN_SPEED_KMH)
    speed_ms = speed_kmh * 1000.0 / 3600.0
    return dist / speed_ms * mult


def hike_field(
    dem: Dem, seeds: Iterable[Tuple[CellIdx, float]], params: HikeParams
) -> HikeField:
    """Hiking-time field from seeded cells, each with its own initial cost.

    Seeds outside the grid are ignored. Where several seeds compete, the
    lowest cumulative cost wins.
    """
    cost = [math.nan] * dem.cell_count()
    heap: List[Tuple[int, int, CellIdx]] = []
    counter = itertools.count()
    mult = params.default_sac.cost_multiplier()

    for cell, init in seeds:
        if not dem.in_bounds(cell.row, cell.col):
            continue
        i = dem.idx(cell.row, cell.col)
        if math.isfinite(cost[i]) and cost[i] <= init:
            continue
        cost[i] = init
        heapq.heappush(heap, (int(max(init * 1000.0, 0.0)), next(counter), cell))

    while heap:
        cost_ms, _, cell = heapq.heappop(heap)
        cur = cost_ms / 1000.0
        known = cost[dem.idx(cell.row, cell.col)]
        if math.isfinite(known) and known + 1e-3 < cur:
            continue
        if cur > params.max_cost_seconds:
            continue

        for dr, dc in _NEIGHBORS:
            nr, nc = cell.row + dr, cell.col + dc
            if not dem.in_bounds(nr, nc):
                continue
            neighbor = CellIdx(nr, nc)
            edge = _edge_seconds(dem, cell, neighbor, mult)
            if edge is None:
                continue
            new_cost = cur + edge
            if new_cost > params.max_cost_seconds:
                continue
            ni = dem.idx(nr, nc)
            prev = cost[ni]
            if not math.isfinite(prev) or new_cost + 1e-3 < prev:
                cost[ni] = new_cost
                heapq.heappush(heap, (int(new_cost * 1000.0), next(counter), neighbor))

    return HikeField(seconds=cost)