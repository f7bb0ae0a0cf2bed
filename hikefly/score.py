"""Scoring and ranking of launches.

``score = glide_value / hike_cost**alpha * wind_factor``, where the wind
factor is a softened cosine of the mismatch between wind and launch aspect.
A Pareto helper finds the (hike, glide) frontier.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence

from .model import Launch, Wind, angle_diff_deg


class GlideMetric(Enum):
    """Which glide statistic counts as the glide value."""

    MAX_DISTANCE_M = "max_distance_m"
    AREA_M2 = "area_m2"


@dataclass(frozen=True)
class ScoringParams:
    metric: GlideMetric = GlideMetric.MAX_DISTANCE_M
    # Exponent on hike cost; 1.0 means glide value per second of hiking.
    alpha: float = 1.0
    # Half-width (deg) inside which the wind factor stays at full strength.
    wind_full_strength_deg: float = 15.0


@dataclass
class GlideStats:
    max_distance_m: float
    area_m2: float


@dataclass
class Scored:
    launch: Launch
    glide_value: float
    hike_seconds: float
    wind_factor: float
    score: float


def wind_factor(launch_aspect_deg: float, wind: Wind, full_strength_deg: float) -> float:
    """Wind factor in [0, 1]: 1 within the full-strength band, then a cosine falloff."""
    delta = abs(angle_diff_deg(wind.from_deg, launch_aspect_deg))
    if delta <= full_strength_deg:
        return 1.0
    beyond = delta - full_strength_deg
    if beyond >= 90.0:
        return 0.0
    return max(math.cos(math.radians(beyond)), 0.0)


def score_launch(
    launch: Launch,
    glide: GlideStats,
    hike_seconds: float,
    wind: Optional[Wind],
    params: ScoringParams,
) -> Scored:
    """Score one launch from its glide stats, hike cost and the wind."""
    if params.metric is GlideMetric.AREA_M2:
        glide_value = float(glide.area_m2)
    else:
        glide_value = glide.max_distance_m
    wf = 1.0 if wind is None else wind_factor(launch.aspect_deg, wind, params.wind_full_strength_deg)
    denom = max(hike_seconds, 1.0) ** params.alpha
    return Scored(
        launch=launch,
        glide_value=glide_value,
        hike_seconds=hike_seconds,
        wind_factor=wf,
        score=glide_value / denom * wf,
    )


def _dominates(b: Scored, a: Scored) -> bool:
    weakly = b.hike_seconds <= a.hike_seconds and b.glide_value >= a.glide_value
    strictly = b.hike_seconds < a.hike_seconds or b.glide_value > a.glide_value
    return weakly and strictly


def pareto_frontier(scored: Sequence[Scored]) -> List[int]:
    """Indices of non-dominated entries, ordered by ascending hike time."""
    front = [
        i
        for i, a in enumerate(scored)
        if not any(_dominates(b, a) for j, b in enumerate(scored) if j != i)
    ]
    return sorted(front, key=lambda i: scored[i].hike_seconds)