# flowgrid

flowgrid provides two groups of tools.

* **Advection field tools.** These cover a 121 × 121 scalar grid padded with
  ghost points and paired with staggered velocity arrays. The package gives
  you the grid layout, zero-gradient boundary filling, per-step min/max
  diagnostics, and contour and surface plots of a field.
* **Tiled stencil.** This splits a rectangular domain into tiles laid out on a
  grid of processing elements. On each iteration the tiles swap ghost rows and
  columns with their neighbours and then apply a five-point sum stencil. At
  the end the tiles are gathered back into the full matrix.

## Installation

```
pip install .
```

To include the test requirements:

```
pip install ".[test]"
```

## Command line

```
flowgrid-stencil 8 8 10
flowgrid-stencil 12 12 5 --pes 4
```

The positional arguments are `height`, `width` and `iterations`. The option
`-n` / `--pes` sets the number of processing elements and defaults to 1.

The elements are arranged in a grid whose number of columns is the largest
prime factor of the element count. The width must divide evenly by the number
of columns, and the height by the number of rows.

The command prints three things, in this order:

1. The arrangement.
2. The time the iterations took.
3. The assembled matrix. Each output line holds one value of the second
   index, written as tab-terminated values with three decimals.

Argument errors are reported by `argparse`, which exits with status 2. A domain
that does not split evenly over the grid prints a message and exits with
status 1.

## Library

| Module | What it provides |
| --- | --- |
| `flowgrid.grid` | `GridSpec`: sizes, ghost width, the index bounds `i1`, `i2`, `j1`, `j2`, and array shapes. `Fields`: `s`, `u`, `v`, with `Fields.zeros(grid)`. |
| `flowgrid.boundary` | `apply_boundary(s, i1, i2, j1, j2)`: copies edge values outward into up to three ghost points on each side, in place. |
| `flowgrid.diagnostics` | `field_stats(s, i1, i2, j1, j2, step, dt)` returns a `FieldStats`. `format_stats` and `stats_header` produce the table lines. |
| `flowgrid.contour_levels` | `find_extrema`, `FieldExtrema`, `min_max_label`, `time_label`, `positive_levels`, `negative_levels`, `contour_color` and `palette`. |
| `flowgrid.contour` | `plot_contours(s, cint, simtime, title, colors, plot_zero, nest, name, path)`: a labelled contour plot with an optional nest box. |
| `flowgrid.surface` | `surface_labels(s, simtime, nyuse)` and `plot_surface(s, simtime, angh, angv, title, name, nyuse, path)`: a 3-D surface view. |
| `flowgrid.tiling` | `ProcessGrid` (`for_count`, `coords`), `max_prime_factor`, `init_stencil`, `stencil_2d`, `interior`, `place_tile`, `format_matrix`, and the ghost helpers `row_out`, `col_out`, `row_in`, `col_in`. |
| `flowgrid.stencil` | `DistributedStencil` with `exchange_ghosts()`, `step()`, `run(iterations)` and `gather()`. Also `parse_args` and `main` for the command. |

An example:

```python
from flowgrid.tiling import ProcessGrid, max_prime_factor
from flowgrid.stencil import DistributedStencil

max_prime_factor(12)           # 3
ProcessGrid.for_count(12)      # ProcessGrid(rows=4, cols=3)

result = DistributedStencil(width=8, height=8, num_pes=4).run(10)
```

The plotting functions return a matplotlib `Figure`. When you pass `path`, they
also save the figure to that file. No display is needed.

## What it does not do

The package does not integrate the advection problem in time. It has no
initial cone or rotating velocity field, no advection scheme and no command
that steps the field forward. It provides the grid, boundary, diagnostic and
plotting pieces; you supply the field values and the time stepping.

## Tests

```
pytest
```