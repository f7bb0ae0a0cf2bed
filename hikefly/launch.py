"""Auto-discovery of candidate launch sites from a DEM.

A cell qualifies when its slope is in range, its roughness is low enough and
its aspect lies within the allowed arc. Candidates within a dedupe radius of a
higher-scoring sibling are dropped.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Tuple

from .model import CellIdx, Dem, Launch, LaunchKind
from .terrain import roughness, slope_aspect

_SLOPE_TARGET_DEG = 30.0


@dataclass
class DiscoveryParams:
    """Filters and limits for launch discovery."""

    slope_deg_range: Tuple[float, float] = (22.0, 38.0)
    max_roughness_m: float = 1.5
    aspect_arc: Tuple[float, float] = (90.0, 270.0)  # E through S to W
    launch_arc_half_width_deg: float = 45.0
    dedupe_radius_m: float = 100.0
    max_launches: int = 200


@dataclass
class _Candidate:
    cell: CellIdx
    altitude_m: float
    slope_deg: float
    aspect_deg: float
    score: float


def aspect_in_arc(aspect: float, arc: Tuple[float, float]) -> bool:
    """Whether a compass aspect lies in the inclusive arc; wraparound supported."""
    lo, hi = arc
    if lo <= hi:
        return lo <= aspect <= hi
    return aspect >= lo or aspect <= hi


def _candidates(dem: Dem, params: DiscoveryParams):
    sa = slope_aspect(dem)
    rough = roughness(dem)
    slope_lo, slope_hi = params.slope_deg_range

    for r in range(dem.rows):
        for c in range(dem.cols):
            i = dem.idx(r, c)
            s, a, rg = sa.slope_deg[i], sa.aspect_deg[i], rough[i]
            if not (math.isfinite(s) and math.isfinite(a) and math.isfinite(rg)):
                continue
            if s < slope_lo or s > slope_hi:
                continue
            if rg > params.max_roughness_m:
                continue
            if not aspect_in_arc(a, params.aspect_arc):
                continue
            alt = dem.get(r, c)
            if alt is None:
                continue
            # Prefer ~30° slopes, low roughness and high altitude.
            slope_penalty = ((s - _SLOPE_TARGET_DEG) / 8.0) ** 2
            rough_penalty = (rg / params.max_roughness_m) ** 2
            score = alt - 50.0 * slope_penalty - 50.0 * rough_penalty
            yield _Candidate(CellIdx(r, c), alt, s, a, score)


def discover(dem: Dem, params: DiscoveryParams) -> List[Launch]:
    """Find, rank and deduplicate candidate launches, best first."""
    ranked = sorted(_candidates(dem, params), key=lambda cand: -cand.score)

    r2_dedupe = (params.dedupe_radius_m / dem.cell_size_m) ** 2
    kept: List[_Candidate] = []
    for cand in ranked:
        if len(kept) >= params.max_launches:
            break
        too_close = any(
            (cand.cell.row - k.cell.row) ** 2 + (cand.cell.col - k.cell.col) ** 2 < r2_dedupe
            for k in kept
        )
        if not too_close:
            kept.append(cand)

    half = params.launch_arc_half_width_deg
    return [
        Launch(
            id=i,
            cell=cand.cell,
            altitude_m=cand.altitude_m,
            aspect_deg=cand.aspect_deg,
            aspect_window_deg=(
                (cand.aspect_deg - half + 360.0) % 360.0,
                (cand.aspect_deg + half) % 360.0,
            ),
            slope_deg=cand.slope_deg,
            kind=LaunchKind.AUTO_DISCOVERED,
            warnings=[],
        )
        for i, cand in enumerate(kept)
    ]