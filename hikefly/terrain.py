"""Slope, aspect and roughness grids derived from a DEM.

Grids are row-major, the same shape as the DEM. Edge cells and cells whose
3x3 neighborhood contains nodata are NaN.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .model import Dem

_OFFSETS = [(dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1)]


@dataclass
class SlopeAspect:
    """Slope in degrees [0, 90) and downhill compass aspect [0, 360), NaN if undefined."""

    slope_deg: List[float]
    aspect_deg: List[float]


def _window(dem: Dem, r: int, c: int) -> Optional[Tuple[float, ...]]:
    """The 3x3 neighborhood in row-major order, or None if any cell is nodata."""
    values = []
    for dr, dc in _OFFSETS:
        z = dem.get(r + dr, c + dc)
        if z is None:
            return None
        values.append(z)
    return tuple(values)


def _interior(dem: Dem):
    for r in range(1, dem.rows - 1):
        for c in range(1, dem.cols - 1):
            yield r, c


def slope_aspect(dem: Dem) -> SlopeAspect:
    """Slope and aspect via Horn's 3x3 method; aspect is the downhill direction."""
    n = dem.cell_count()
    slope = [math.nan] * n
    aspect = [math.nan] * n
    denom = 8.0 * dem.cell_size_m

    for r, c in _interior(dem):
        win = _window(dem, r, c)
        if win is None:
            continue
        a, b, cc, d, _, f, g, h, i = win
        dz_dx = ((cc + 2.0 * f + i) - (a + 2.0 * d + g)) / denom
        # Positive when terrain rises northward (row 0 is north).
        dz_dn = ((a + 2.0 * b + cc) - (g + 2.0 * h + i)) / denom

        mag = math.hypot(dz_dx, dz_dn)
        idx = dem.idx(r, c)
        slope[idx] = math.degrees(math.atan(mag))
        if mag >= 1e-6:
            deg = math.degrees(math.atan2(-dz_dx, -dz_dn))
            aspect[idx] = deg + 360.0 if deg < 0.0 else deg

    return SlopeAspect(slope_deg=slope, aspect_deg=aspect)


def _det3(m) -> float:
    return (
        m[0][0] * (m[1][1] * m[2][2] - m[1][2] * m[2][1])
        - m[0][1] * (m[1][0] * m[2][2] - m[1][2] * m[2][0])
        + m[0][2] * (m[1][0] * m[2][1] - m[1][1] * m[2][0])
    )


def roughness(dem: Dem) -> List[float]:
    """RMS residual (meters) of each 3x3 neighborhood against its best-fit plane."""
    out = [math.nan] * dem.cell_count()

    for r, c in _interior(dem):
        win = _window(dem, r, c)
        if win is None:
            continue
        samples = [(float(dc), float(-dr), z) for (dr, dc), z in zip(_OFFSETS, win)]

        nf = float(len(samples))
        sx = sum(x for x, _, _ in samples)
        sy = sum(y for _, y, _ in samples)
        sz = sum(z for _, _, z in samples)
        sxx = sum(x * x for x, _, _ in samples)
        syy = sum(y * y for _, y, _ in samples)
        sxy = sum(x * y for x, y, _ in samples)
        sxz = sum(x * z for x, _, z in samples)
        syz = sum(y * z for _, y, z in samples)

        # Normal equations for z = a + b*x + c*y, solved by Cramer's rule.
        matrix = [[nf, sx, sy], [sx, sxx, sxy], [sy, sxy, syy]]
        rhs = [sz, sxz, syz]
        det = _det3(matrix)
        if abs(det) < 1e-12:
            continue
        coeffs = []
        for k in range(3):
            replaced = [
                [rhs[row] if col == k else matrix[row][col] for col in range(3)]
                for row in range(3)
            ]
            coeffs.append(_det3(replaced) / det)
        pa, pb, pc = coeffs

        sse = sum((z - (pa + pb * x + pc * y)) ** 2 for x, y, z in samples)
        out[dem.idx(r, c)] = math.sqrt(sse / nf)

    return out