"""Single-source glide-reachability flood.

From a launch cell and altitude, compute for every reachable ground cell the
maximum MSL altitude at which it can be overflown. A cell is unreachable when
that altitude would fall below ``terrain + safety_buffer_m``.

The search is Dijkstra on a max-heap of altitudes. Edges are 8-connected and
cost ``distance / ground_glide_ratio`` meters of altitude. Wind changes the
ground glide ratio per direction.
"""

from __future__ import annotations

import heapq
import itertools
import math
from dataclasses import dataclass
from typing import List, Optional

from .model import CellIdx, Dem, Launch, Wind

_SQRT_2 = math.sqrt(2.0)

_NEIGHBORS = (
    (-1, 0, 1.0),
    (1, 0, 1.0),
    (0, -1, 1.0),
    (0, 1, 1.0),
    (-1, -1, _SQRT_2),
    (-1, 1, _SQRT_2),
    (1, -1, _SQRT_2),
    (1, 1, _SQRT_2),
)


@dataclass(frozen=True)
class GlideParams:
    """Glider model used by the flood."""

    # Still-air glide ratio (e.g. 8.0 for an EN-A/B at trim).
    glide_ratio: float = 8.0
    # Minimum AGL clearance for a cell to count as reachable en route (m).
    safety_buffer_m: float = 15.0
    # AGL already gained once airborne, added to the launch altitude (m).
    takeoff_initial_agl_m: float = 10.0
    # Best-glide airspeed (m/s); sink rate is airspeed / glide_ratio.
    airspeed_ms: float = 10.0
    # Wind affecting the glide path; None means still air.
    wind: Optional[Wind] = None


@dataclass
class FloodResult:
    """Per-cell maximum MSL altitude (NaN = unreached) plus summary stats."""

    max_alt_msl: List[float]
    max_distance_m: float
    farthest_cell: Optional[CellIdx]
    reachable_cells: int
    area_m2: float


@dataclass
class FloodSummary:
    """Flood statistics without the per-cell altitude grid."""

    max_distance_m: float
    farthest_cell: Optional[CellIdx]
    reachable_cells: int
    area_m2: float


def _effective_glide_ratios(params: GlideParams) -> List[float]:
    """Ground glide ratio per neighbor direction; NaN where no headway is made."""
    sink_ms = max(params.airspeed_ms / max(params.glide_ratio, 0.1), 0.01)
    wind = params.wind
    if wind is not None and wind.speed_kmh > 0.0:
        wind_to_rad = math.radians(wind.from_deg + 180.0)
        wind_ms = wind.speed_kmh / 3.6
    else:
        wind_to_rad, wind_ms = 0.0, 0.0

    ratios = []
    for dr, dc, _ in _NEIGHBORS:
        glide_dir_rad = math.atan2(dc, -dr)
        tailwind_ms = wind_ms * math.cos(glide_dir_rad - wind_to_rad) if wind_ms > 0.0 else 0.0
        ground_speed = params.airspeed_ms + tailwind_ms
        ratios.append(math.nan if ground_speed < 0.5 else ground_speed / sink_ms)
    return ratios


def flood(dem: Dem, launch: Launch, params: GlideParams) -> FloodResult:
    """Compute the maximum reachable altitude over every cell from one launch."""
    max_alt = [math.nan] * dem.cell_count()
    cs = dem.cell_size_m
    ratios = _effective_glide_ratios(params)

    launch_alt = launch.altitude_m + params.takeoff_initial_agl_m
    max_alt[dem.idx(launch.cell.row, launch.cell.col)] = launch_alt

    counter = itertools.count()
    heap = [(-int(launch_alt * 1000.0), next(counter), launch.cell)]

    max_dist = 0.0
    farthest: Optional[CellIdx] = None
    reachable = 0

    while heap:
        neg_alt_mm, _, cell = heapq.heappop(heap)
        cur = -neg_alt_mm / 1000.0
        if max_alt[dem.idx(cell.row, cell.col)] > cur + 1e-3:
            continue

        for (dr, dc, dist_factor), gr in zip(_NEIGHBORS, ratios):
            if not math.isfinite(gr):
                continue
            nr, nc = cell.row + dr, cell.col + dc
            if not dem.in_bounds(nr, nc):
                continue
            ni = dem.idx(nr, nc)
            terrain = dem.data[ni]
            if not math.isfinite(terrain):
                continue
            new_alt = cur - (cs * dist_factor) / gr
            if new_alt - terrain < params.safety_buffer_m:
                continue
            prev = max_alt[ni]
            first_visit = not math.isfinite(prev)
            if not first_visit and new_alt <= prev + 1e-2:
                continue
            neighbor = CellIdx(nr, nc)
            if first_visit:
                reachable += 1
                d = math.hypot(nr - launch.cell.row, nc - launch.cell.col) * cs
                if d > max_dist:
                    max_dist = d
                    farthest = neighbor
            max_alt[ni] = new_alt
            heapq.heappush(heap, (-int(new_alt * 1000.0), next(counter), neighbor))

    return FloodResult(
        max_alt_msl=max_alt,
        max_distance_m=max_dist,
        farthest_cell=farthest,
        reachable_cells=reachable,
        area_m2=reachable * dem.area_m2(),
    )


def flood_summary(dem: Dem, launch: Launch, params: GlideParams) -> FloodSummary:
    """Run a flood and keep only its summary statistics."""
    result = flood(dem, launch, params)
    return FloodSummary(
        max_distance_m=result.max_distance_m,
        farthest_cell=result.farthest_cell,
        reachable_cells=result.reachable_cells,
        area_m2=result.area_m2,
    )