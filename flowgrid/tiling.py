"""Tiles of a five-point stencil grid and the process grid that owns them."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

SCALING_FACTOR = np.float32(0.125)


def max_prime_factor(n: int) -> int:
    """The largest prime factor of ``n``; 1 for ``n == 1``."""
    if n < 1:
        raise ValueError("n must be a positive integer")
    if n == 1:
        return 1
    largest = -1
    while n % 2 == 0:
        largest = 2
        n >>= 1
    factor = 3
    while factor * factor <= n:
        while n % factor == 0:
            largest = factor
            n //= factor
        factor += 2
    if n > 2:
        largest = n
    return largest


@dataclass(frozen=True)
class ProcessGrid:
    """A ``rows`` x ``cols`` arrangement of processing elements.

    Rank ``r`` sits at column ``r % cols`` and row ``r // cols``.
    """

    rows: int
    cols: int

    @property
    def num_pes(self) -> int:
        return self.rows * self.cols

    @classmethod
    def for_count(cls, num_pes: int) -> "ProcessGrid":
        """Split ``num_pes`` into columns of its largest prime factor."""
        if num_pes < 1:
            raise ValueError("at least one processing element is needed")
        cols = max_prime_factor(num_pes)
        return cls(rows=num_pes // cols, cols=cols)

    def coords(self, rank: int) -> tuple[int, int]:
        """The ``(x, y)`` position of ``rank`` in the grid."""
        if not 0 <= rank < self.num_pes:
            raise ValueError(f"rank {rank} is outside the grid")
        return rank % self.cols, rank // self.cols


def init_stencil(x_off: int, y_off: int, m: int, n: int) -> np.ndarray:
    """An ``(m + 2) x (n + 2)`` tile with a zero ghost border.

    Interior point ``(i, j)`` holds ``0.125 * (i + x_off) * (j + y_off)``.
    """
    if m < 1 or n < 1:
        raise ValueError("tile dimensions must be positive")
    i = np.arange(1, m + 1, dtype=np.int64)[:, np.newaxis]
    j = np.arange(1, n + 1, dtype=np.int64)[np.newaxis, :]
    tile = np.zeros((m + 2, n + 2), dtype=np.float32)
    tile[1:-1, 1:-1] = ((i + x_off) * (j + y_off)).astype(np.float32) * SCALING_FACTOR
    return tile


def _check_tile(tile: np.ndarray) -> None:
    if tile.ndim != 2 or tile.shape[0] < 3 or tile.shape[1] < 3:
        raise ValueError("tile must be two-dimensional with a ghost border")


def stencil_2d(tile: np.ndarray) -> np.ndarray:
    """One five-point step: each interior point becomes the sum of itself
    and its four neighbours. The ghost border is carried over unchanged."""
    tile = np.asarray(tile, dtype=np.float32)
    _check_tile(tile)
    out = tile.copy()
    out[1:-1, 1:-1] = (
        tile[2:, 1:-1]
        + tile[:-2, 1:-1]
        + tile[1:-1, 1:-1]
        + tile[1:-1, :-2]
        + tile[1:-1, 2:]
    )
    return out


def interior(tile: np.ndarray) -> np.ndarray:
    """A copy of the tile without its ghost border."""
    tile = np.asarray(tile)
    _check_tile(tile)
    return tile[1:-1, 1:-1].copy()


def place_tile(dst: np.ndarray, tile: np.ndarray, x: int, y: int) -> None:
    """Write ``tile`` into ``dst`` with its corner at ``(x, y)``, in place."""
    tile = np.asarray(tile)
    ww, hh = tile.shape
    if x < 0 or y < 0 or x + ww > dst.shape[0] or y + hh > dst.shape[1]:
        raise ValueError("tile does not fit at that offset")
    dst[x : x + ww, y : y + hh] = tile


def format_matrix(a: np.ndarray) -> str:
    """Text of ``a`` with its second index running down the lines.

    Every value is written with three decimals and followed by a tab.
    """
    a = np.asarray(a)
    if a.ndim != 2:
        raise ValueError("matrix must be two-dimensional")
    return "".join(
        "".join("%.3f\t" % float(value) for value in column) + "\n"
        for column in a.T
    )


def row_out(tile: np.ndarray, y: int) -> np.ndarray:
    """The interior values of line ``y`` across the first index."""
    _check_tile(tile)
    return np.array(tile[1:-1, y], dtype=np.float32)


def col_out(tile: np.ndarray, x: int) -> np.ndarray:
    """The interior values of line ``x`` across the second index."""
    _check_tile(tile)
    return np.array(tile[x, 1:-1], dtype=np.float32)


def row_in(tile: np.ndarray, y: int, values: np.ndarray) -> None:
    """Store ``values`` into the interior of line ``y``, in place."""
    _check_tile(tile)
    values = np.asarray(values)
    if values.shape != (tile.shape[0] - 2,):
        raise ValueError("row length does not match the tile")
    tile[1:-1, y] = values


def col_in(tile: np.ndarray, x: int, values: np.ndarray) -> None:
    """Store ``values`` into the interior of line ``x``, in place."""
    _check_tile(tile)
    values = np.asarray(values)
    if values.shape != (tile.shape[1] - 2,):
        raise ValueError("column length does not match the tile")
    tile[x, 1:-1] = values