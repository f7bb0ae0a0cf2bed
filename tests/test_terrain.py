import math

from hikefly.model import LV95, Dem
from hikefly.terrain import roughness, slope_aspect


def flat_dem():
    return Dem.from_fn(5, 5, 25.0, LV95(0.0, 0.0), lambda r, c: 1000.0)


def ramp_south_dem():
    # Terrain rises to the north, so the slope faces south.
    return Dem.from_fn(5, 5, 25.0, LV95(0.0, 0.0), lambda r, c: 1000.0 + (4 - r) * 25.0)


def test_flat_terrain_has_zero_slope():
    sa = slope_aspect(flat_dem())
    center = sa.slope_deg[2 * 5 + 2]
    assert abs(center) < 1e-3


def test_flat_terrain_has_no_aspect():
    sa = slope_aspect(flat_dem())
    undefined = sum(1 for v in sa.aspect_deg if math.isnan(v))
    assert undefined == 25


def test_south_ramp_aspect_is_180():
    sa = slope_aspect(ramp_south_dem())
    aspect = sa.aspect_deg[2 * 5 + 2]
    slope = sa.slope_deg[2 * 5 + 2]
    assert 30.0 < slope < 60.0
    assert abs(aspect - 180.0) < 1.0


def test_east_ramp_aspect_points_east():
    dem = Dem.from_fn(5, 5, 25.0, LV95(0.0, 0.0), lambda r, c: 1000.0 - c * 10.0)
    sa = slope_aspect(dem)
    assert abs(sa.aspect_deg[dem.idx(2, 2)] - 90.0) < 1.0


def test_edges_are_nan():
    sa = slope_aspect(ramp_south_dem())
    rough = roughness(ramp_south_dem())
    for c in range(5):
        assert math.isnan(sa.slope_deg[c])
        assert math.isnan(rough[c])
    assert len(sa.slope_deg) == 25
    assert len(rough) == 25


def test_small_dem_is_all_nan():
    dem = Dem.from_fn(2, 4, 25.0, LV95(0.0, 0.0), lambda r, c: float(r + c))
    sa = slope_aspect(dem)
    assert [math.isnan(v) for v in sa.slope_deg] == [True] * 8
    assert [math.isnan(v) for v in roughness(dem)] == [True] * 8


def test_nodata_neighbor_gives_nan():
    dem = Dem.from_fn(
        5, 5, 25.0, LV95(0.0, 0.0), lambda r, c: math.nan if (r, c) == (1, 1) else 1000.0
    )
    sa = slope_aspect(dem)
    rough = roughness(dem)
    assert math.isnan(sa.slope_deg[dem.idx(2, 2)])
    assert math.isnan(rough[dem.idx(2, 2)])
    assert abs(sa.slope_deg[dem.idx(3, 3)]) < 1e-3


def test_flat_terrain_has_zero_roughness():
    r = roughness(flat_dem())
    assert abs(r[2 * 5 + 2]) < 1e-3


def test_planar_ramp_has_zero_roughness():
    r = roughness(ramp_south_dem())
    assert abs(r[2 * 5 + 2]) < 1e-3


def test_bump_has_positive_roughness():
    dem = Dem.from_fn(
        5, 5, 25.0, LV95(0.0, 0.0), lambda r, c: 1010.0 if (r, c) == (2, 2) else 1000.0
    )
    r = roughness(dem)
    assert r[dem.idx(2, 2)] > 1.0