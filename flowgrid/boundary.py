"""Zero-gradient boundary conditions on the ghost zones."""

from __future__ import annotations

import numpy as np

GHOST_DEPTH = 3


def apply_boundary(s: np.ndarray, i1: int, i2: int, j1: int, j2: int) -> None:
    """Copy edge values of ``s`` outward into its ghost zones, in place.

    Up to three ghost points beyond each edge are filled, as far as the
    array reaches. Corners are left as they are.
    """
    if s.ndim != 2:
        raise ValueError("field must be two-dimensional")
    nrows, ncols = s.shape
    if not (0 <= i1 <= i2 < nrows and 0 <= j1 <= j2 < ncols):
        raise ValueError("index bounds lie outside the field")

    rows = slice(i1, i2 + 1)
    s[rows, max(j1 - GHOST_DEPTH, 0) : j1] = s[rows, j1 : j1 + 1]
    s[rows, j2 + 1 : min(j2 + 1 + GHOST_DEPTH, ncols)] = s[rows, j2 : j2 + 1]

    cols = slice(j1, j2 + 1)
    s[max(i1 - GHOST_DEPTH, 0) : i1, cols] = s[i1 : i1 + 1, cols]
    s[i2 + 1 : min(i2 + 1 + GHOST_DEPTH, nrows), cols] = s[i2 : i2 + 1, cols]