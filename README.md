# boschetch

A geometric model of the Bosch deep reactive ion etching (DRIE) process.

The Bosch process alternates a short isotropic etch with a passivation step,
cycle after cycle. This leaves *scallops* on the trench sidewalls.
`boschetch` describes the resulting profile with two geometric
distributions. Each one gives a signed distance around a surface point:

- `ViaDistribution` is the box-shaped via cut down to the trench bottom. When
  tapering is on, the depth shrinks towards the edge of the via.
- `BoschDistribution` is the per-cycle isotropic etch. It places a scallop in
  the middle of every cycle and narrows the scallops below the start of
  tapering. It can also widen every n-th cycle into a "sausage" cycle.

Both distributions work in two or three dimensions. The last coordinate is
the vertical axis, and etching goes towards negative values.

## Installation

```
pip install .
```

The package needs no third-party libraries. To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

### Process parameters

`boschetch.process_data.BoschProcessData` is a dataclass that holds one etch
run: `num_cycles`, `depth_per_cycle`, `iso_rate`, `start_width` and
`bottom_width` (half widths), `taper_start`, `top_offset`, `mask_origin`,
`grid_delta`, `sausage_cycle`, `sausage_etch_rate`, `lateral_ratio` and the
derived `num_taper_cycles`, `taper_ratio` and `trench_bottom`.

`BoschProcessData.lateral_ratio_from_etch_ratio(ratio)` returns
`1 - ratio`, clamped to the range 0 to 1. Store the result in
`lateral_ratio`; it shapes the scallop "lens".

### Preparing a process

`boschetch.process.BoschProcess(data, dimension)` takes the process data and
a dimension of 2 or 3. Any other dimension raises `ValueError`.

- `prepare()` fills in the derived values in place and returns the data. It
  sets the trench bottom from the cycles, the top offset and the grid
  spacing. If the bottom and start widths differ and the start of tapering
  lies above the trench bottom, it also rounds the taper start to a cycle
  and works out the number of tapering cycles, the taper ratio and the final
  trench bottom. A start width of zero raises `ValueError`.
- `distributions()` returns a `(ViaDistribution, BoschDistribution)` pair.
  Each one holds its own copy of the current data.
- `taper_ratio_from_re(r_e)` solves for the per-cycle taper ratio that
  narrows the via to `r_e` of its width over the tapering cycles.
- `z_from_taper_ratio()` gives the depth that the tapered part of the trench
  takes up.

```python
from boschetch.process import BoschProcess
from boschetch.process_data import BoschProcessData

data = BoschProcessData(
    num_cycles=100,
    depth_per_cycle=-0.37,
    iso_rate=-0.22,
    start_width=0.4,
    bottom_width=0.2,
    taper_start=-24.5,
    grid_delta=0.025,
)
process = BoschProcess(data, 2)
process.prepare()
via, scallops = process.distributions()
```

### Distributions

Both classes in `boschetch.distributions` take `(data, dimension)` and
provide:

- `is_inside(initial, candidate, eps=0.0)` tells whether `candidate` can be
  reached from the surface point `initial`;
- `signed_distance(initial, candidate)` returns the signed distance of
  `candidate` from the shape placed at `initial`;
- `bounds()` returns the extent of the shape as six values, a (min, max)
  pair for each axis.

`ViaDistribution.depth(initial)` gives the etch depth below a point.
`BoschDistribution.radius(z)` gives the signed scallop radius at height `z`,
and `BoschDistribution.calc_z(n)` gives the depth below the taper start after
`n` tapering cycles.

### Root finding

`boschetch.bisect.find_root(func, lower, upper, eps, max_iterations)` is a
plain bisection:

```python
from boschetch.bisect import find_root

root = find_root(lambda x: x - 0.25, 0.0, 1.0, 1e-9, 100)
```

It raises `NoSignChangeError`, a `ValueError`, if the function has the same
sign at both limits.

### Ash time model

`re_from_ash_time(a_t)` maps the ash time of a run to the ratio of bottom
width to top width. The result is 0 for short ash times, 1 for long ones,
and fitted in between:

```python
from boschetch.process import re_from_ash_time

re_from_ash_time(0.0)   # 0.0
re_from_ash_time(4.0)   # 1.0
```

## Command line

```
boschetch
```

The command first prints the width ratio for each ash time, one per line.
Then, for each ratio, it sets up a tapered Bosch process, runs `prepare()`
and prints the derived values:

- `d_c`, the depth per cycle;
- `N_t`, the number of tapering cycles;
- `L_t`, the start of tapering;
- `r_e`, the width ratio;
- `x`, the taper ratio;
- `L_b`, the trench bottom.

Options:

- `--grid-delta` sets the grid spacing (default 0.025).
- `--mask-radius` sets the mask radius, which is the top half width (default 0.4).
- `--cycles` sets the number of cycles (default 100).
- `--etch-rate` sets the depth per cycle; the isotropic rate is 0.6 times this value (default about -0.37).
- `--taper-start` sets where tapering starts (default -24.5).
- `--lateral-ratio` sets the lateral etch ratio (default 0.5).
- `--dimension` is 2 or 3 (default 2).
- `--ash-times` takes one or more ash times (default 0 1 1.2 1.5 2 2.5 4).

If `prepare()` fails, the command prints the error and exits with status 1.

## What this package does not do

`boschetch` computes process parameters and gives the distance functions
that describe each etch step. It holds no level-set grid and builds no
masks. It does not advect a surface through the distributions, and it writes
no surface or volume meshes. To get etched profiles, apply the distributions
with a geometric advection engine of your own.