import math

import pytest

from hikefly.model import (
    LV95,
    CellIdx,
    Dem,
    Launch,
    LaunchKind,
    Wind,
    angle_diff_deg,
)


def make_dem(rows=4, cols=5):
    return Dem.from_fn(rows, cols, 25.0, LV95(0.0, 0.0), lambda r, c: 100.0 * r + c)


def test_from_fn_fills_every_cell():
    dem = make_dem()
    assert dem.cell_count() == len(dem.data)
    for r in range(dem.rows):
        for c in range(dem.cols):
            assert dem.get(r, c) == 100.0 * r + c


def test_idx_is_row_major_and_unique():
    dem = make_dem()
    indices = [dem.idx(r, c) for r in range(dem.rows) for c in range(dem.cols)]
    assert indices == list(range(dem.cell_count()))
    for r in range(dem.rows):
        for c in range(dem.cols):
            assert divmod(dem.idx(r, c), dem.cols) == (r, c)


def test_get_out_of_bounds_returns_none():
    dem = make_dem()
    assert dem.get(-1, 0) is None
    assert dem.get(0, dem.cols) is None
    assert dem.get(dem.rows, 0) is None


def test_get_nodata_returns_none():
    dem = Dem.from_fn(3, 3, 25.0, LV95(0.0, 0.0), lambda r, c: math.nan if r == c else 1.0)
    assert dem.get(1, 1) is None
    assert dem.get(0, 1) == 1.0


def test_in_bounds_edges():
    dem = make_dem()
    assert dem.in_bounds(0, 0)
    assert dem.in_bounds(dem.rows - 1, dem.cols - 1)
    assert not dem.in_bounds(-1, 0)
    assert not dem.in_bounds(0, -1)
    assert not dem.in_bounds(dem.rows, 0)


def test_distance_is_symmetric_and_scales_with_cell_size():
    dem = make_dem()
    a, b = CellIdx(0, 0), CellIdx(3, 4)
    assert dem.distance_m(a, b) == dem.distance_m(b, a)
    assert dem.distance_m(a, a) == 0.0
    step = dem.distance_m(CellIdx(0, 0), CellIdx(0, 1))
    assert step == dem.cell_size_m
    diag = dem.distance_m(CellIdx(0, 0), CellIdx(1, 1))
    assert diag == pytest.approx(step * math.sqrt(2))


def test_area_is_square_of_cell_size():
    dem = make_dem()
    assert dem.area_m2() == dem.cell_size_m ** 2


def test_wrong_data_length_raises():
    with pytest.raises(ValueError):
        Dem(2, 2, 25.0, LV95(0.0, 0.0), [1.0, 2.0, 3.0])


def test_angle_diff_equal_is_zero_and_antisymmetric():
    assert angle_diff_deg(123.0, 123.0) == 0.0
    for a, b in [(10.0, 30.0), (350.0, 10.0), (0.0, 90.0)]:
        assert angle_diff_deg(a, b) == pytest.approx(-angle_diff_deg(b, a))


def test_angle_diff_wraps_around_north():
    assert abs(angle_diff_deg(350.0, 10.0)) == pytest.approx(abs(angle_diff_deg(10.0, 30.0)))
    for a in range(0, 720, 17):
        d = angle_diff_deg(float(a), 200.0)
        assert -180.0 <= d < 180.0


def test_launch_defaults():
    launch = Launch(
        id=3,
        cell=CellIdx(1, 2),
        altitude_m=1000.0,
        aspect_deg=180.0,
        aspect_window_deg=(135.0, 225.0),
        slope_deg=30.0,
    )
    assert launch.kind is LaunchKind.AUTO_DISCOVERED
    assert launch.warnings == []
    assert Wind(180.0, 18.0).from_deg == 180.0