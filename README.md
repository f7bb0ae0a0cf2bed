# hikefly

Terrain analysis for hike-and-fly paragliding. `hikefly` works on a regular
elevation grid, a DEM in Swiss LV95 metres. It finds launch sites, works out
where you can glide from each one and how long the hike up takes, and then
ranks the launches.

The package uses only the standard library.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `hikefly.model` holds the grid and its basic types:
  - `Dem` is a row-major grid with NaN as nodata. It has `from_fn`, `idx`, `get`, `in_bounds`, `cell_count`, `distance_m` and `area_m2`.
  - `CellIdx` is a row/col position, with row 0 at the north edge.
  - `LV95` is an easting/northing pair.
  - `Wind` is `from_deg` plus `speed_kmh`.
  - `Launch` is a launch site and `LaunchKind` is its kind: `AUTO_DISCOVERED` or `KNOWN`.
  - `angle_diff_deg(a, b)` returns the signed smallest difference, in the range [-180, 180).
- `hikefly.terrain`:
  - `slope_aspect(dem)` returns a `SlopeAspect` holding the slope and downhill aspect grids, computed with Horn's 3x3 method.
  - `roughness(dem)` returns the RMS residual of each 3x3 neighbourhood against its best-fit plane.
  - Edge cells are NaN in both grids, and so are cells next to nodata.
- `hikefly.launch`:
  - `discover(dem, params)` filters cells by slope, roughness and aspect arc. It ranks the cells that pass, preferring high altitude, slopes near 30° and smooth ground. It then drops any candidate that lies within the dedupe radius of a better one.
  - `DiscoveryParams` holds the thresholds.
  - `aspect_in_arc(aspect, arc)` checks an aspect against an arc. The arc may wrap past north.
- `hikefly.glide`:
  - `flood(dem, launch, params)` is a max-altitude Dijkstra search over 8-connected cells. It returns a `FloodResult` with the highest altitude at which each cell can be overflown, the farthest reached cell, the number of reachable cells and the reachable area.
  - `GlideParams` sets the glide ratio, safety buffer, take-off clearance, airspeed and optional wind. A headwind too strong to make headway blocks that direction.
  - `flood_summary` returns only the statistics, as a `FloodSummary`.
- `hikefly.hike`:
  - `hike_field(dem, seeds, params)` builds a hiking-time field in seconds, using Tobler's hiking function. It starts from one or more `(CellIdx, initial_seconds)` seeds.
  - `tobler_speed_kmh` gives the walking speed for a slope.
  - `SacClass.cost_multiplier()` scales the walking time for each trail class.
  - `HikeParams` sets the class and the time cap.
- `hikefly.score`:
  - `score_launch` scores a launch as glide value ÷ hike seconds^alpha × wind factor. The glide value is the distance or the area, chosen by `GlideMetric` in `ScoringParams`.
  - `wind_factor` is 1 within the full-strength band. Past it, the factor falls off as a cosine.
  - `pareto_frontier` returns the indices of the non-dominated launches on (hike time, glide value), sorted by hike time.

## Example

```python
from hikefly.model import Dem, LV95, Wind
from hikefly.launch import discover, DiscoveryParams
from hikefly.glide import flood_summary, GlideParams
from hikefly.hike import hike_field, HikeParams
from hikefly.score import GlideStats, score_launch, pareto_frontier, ScoringParams

# A synthetic cone-shaped mountain on a 25 m grid.
def cone(r, c):
    dist = ((r - 40) ** 2 + (c - 40) ** 2) ** 0.5 * 25.0
    return max(1500.0 - dist * 0.58, 0.0)

dem = Dem.from_fn(81, 81, 25.0, LV95(0.0, 0.0), cone)

launches = discover(dem, DiscoveryParams())
trailhead = launches[0].cell  # or any ground cell
hike = hike_field(dem, [(trailhead, 0.0)], HikeParams())

wind = Wind(180.0, 10.0)
scored = []
for launch in launches:
    summary = flood_summary(dem, launch, GlideParams(wind=wind))
    stats = GlideStats(summary.max_distance_m, summary.area_m2)
    seconds = hike.seconds[dem.idx(launch.cell.row, launch.cell.col)]
    scored.append(score_launch(launch, stats, seconds, wind, ScoringParams()))

for i in pareto_frontier(scored):
    s = scored[i]
    print(s.launch.id, round(s.hike_seconds), round(s.glide_value))
```

## Defaults

- Discovery keeps slopes from 22° to 38° that face E through S to W. It uses a 100 m dedupe radius and returns at most 200 launches.
- Glide assumes a ratio of 8, a 15 m safety buffer, 10 m of take-off clearance and 10 m/s airspeed.
- Hiking uses SAC class T2 and stops at 6 hours.

## What it does not do

`hikefly` is a library only. It does not:

- provide a command-line tool;
- download elevation data, trails, lifts or airspace and warning zones;
- read or write grids or other data files.

Build the `Dem` yourself, for example with `Dem.from_fn` or from a list of elevations.