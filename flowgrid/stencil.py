"""A five-point stencil split into tiles that exchange ghost cells."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Sequence

import numpy as np

from flowgrid.tiling import (
    ProcessGrid,
    col_in,
    col_out,
    format_matrix,
    init_stencil,
    interior,
    place_tile,
    row_in,
    row_out,
    stencil_2d,
)


class DistributedStencil:
    """A ``width`` x ``height`` stencil computed as one tile per processing element.

    The elements form a grid from :meth:`ProcessGrid.for_count`; each tile
    swaps its edge values with its neighbours before every step.
    """

    def __init__(self, width: int, height: int, num_pes: int = 1) -> None:
        if width < 1 or height < 1:
            raise ValueError("width and height must be positive")
        self.grid = ProcessGrid.for_count(num_pes)
        self.width = width
        self.height = height
        self.tile_width, wrem = divmod(width, self.grid.cols)
        self.tile_height, hrem = divmod(height, self.grid.rows)
        if wrem or hrem or self.tile_width < 1 or self.tile_height < 1:
            raise ValueError(
                f"a {width} x {height} stencil does not split evenly over a "
                f"{self.grid.rows} x {self.grid.cols} grid"
            )
        self.tiles = [
            init_stencil(x * self.tile_width, y * self.tile_height,
                         self.tile_width, self.tile_height)
            for x, y in map(self.grid.coords, range(self.grid.num_pes))
        ]
        self.iteration = 0

    def exchange_ghosts(self) -> None:
        """Fill every tile's ghost border from its east/west/north/south neighbours."""
        w, h, cols = self.tile_width, self.tile_height, self.grid.cols
        for rank, tile in enumerate(self.tiles):
            x, y = self.grid.coords(rank)
            if x < cols - 1:
                east = self.tiles[rank + 1]
                col_in(east, 0, col_out(tile, w))
                col_in(tile, w + 1, col_out(east, 1))
            if y < self.grid.rows - 1:
                south = self.tiles[rank + cols]
                row_in(south, 0, row_out(tile, h))
                row_in(tile, h + 1, row_out(south, 1))

    def step(self) -> None:
        """Exchange ghost cells, then apply the stencil on every tile."""
        self.exchange_ghosts()
        self.tiles = [stencil_2d(tile) for tile in self.tiles]
        self.iteration += 1

    def run(self, iterations: int) -> np.ndarray:
        """Take ``iterations`` steps and return the gathered result."""
        if iterations < 0:
            raise ValueError("iterations must not be negative")
        for _ in range(iterations):
            self.step()
        return self.gather()

    def gather(self) -> np.ndarray:
        """The whole ``width`` x ``height`` field assembled from the tiles."""
        result = np.zeros((self.width, self.height), dtype=np.float32)
        for rank, tile in enumerate(self.tiles):
            x, y = self.grid.coords(rank)
            place_tile(result, interior(tile), x * self.tile_width, y * self.tile_height)
        return result


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Read ``height width iterations`` and the number of processing elements."""
    parser = argparse.ArgumentParser(
        prog="flowgrid-stencil", description="Run a tiled five-point stencil."
    )
    parser.add_argument("height", type=int)
    parser.add_argument("width", type=int)
    parser.add_argument("iterations", type=int)
    parser.add_argument(
        "-n", "--pes", type=int, default=1, help="number of processing elements"
    )
    args = parser.parse_args(argv)
    if args.width <= 0 or args.height <= 0:
        parser.error("width and height must be positive")
    if args.iterations < 0:
        parser.error("iterations must not be negative")
    if args.pes < 1:
        parser.error("at least one processing element is needed")
    return args


def main(argv: Sequence[str] | None = None) -> int:
    """Run the stencil and print the timing and the final field."""
    args = parse_args(argv)
    try:
        stencil = DistributedStencil(args.width, args.height, args.pes)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    grid = stencil.grid
    print(
        "[0] there are %d pes, divided into a %d x %d grid."
        % (grid.num_pes, grid.rows, grid.cols)
    )
    start = time.perf_counter()
    result = stencil.run(args.iterations)
    elapsed = time.perf_counter() - start
    print(
        "[0] It took %.3f seconds to run %d iterations." % (elapsed, args.iterations)
    )
    print("[0] Final results:")
    sys.stdout.write(format_matrix(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())