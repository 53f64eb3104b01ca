"""Grid layout for the two-dimensional advection model."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

NX = 121
BC_WIDTH = 2
MAXSTEP = 600


@dataclass(frozen=True)
class GridSpec:
    """Sizes and index bounds of a grid with ghost zones on every side.

    Physical points of the scalar field run over ``i1..i2`` and ``j1..j2``
    (inclusive). The storage arrays carry ``bc_width`` extra points on each
    side.
    """

    nx: int = NX
    ny: int | None = None
    bc_width: int = BC_WIDTH
    maxstep: int = MAXSTEP

    def __post_init__(self) -> None:
        if self.ny is None:
            object.__setattr__(self, "ny", self.nx)
        if self.bc_width < 1:
            raise ValueError("bc_width must be at least 1")
        if self.nx <= self.bc_width or self.ny <= self.bc_width:
            raise ValueError("grid must be larger than its boundary width")
        if self.maxstep < 0:
            raise ValueError("maxstep must not be negative")

    @property
    def i1(self) -> int:
        return self.bc_width - 1

    @property
    def i2(self) -> int:
        return self.i1 + self.nx - self.bc_width - 1

    @property
    def j1(self) -> int:
        return self.bc_width - 1

    @property
    def j2(self) -> int:
        return self.j1 + self.ny - self.bc_width - 1

    @property
    def nxdim(self) -> int:
        return self.nx + 2 * self.bc_width

    @property
    def nydim(self) -> int:
        return self.ny + 2 * self.bc_width

    @property
    def scalar_shape(self) -> tuple[int, int]:
        return (self.nxdim, self.nydim)

    @property
    def u_shape(self) -> tuple[int, int]:
        return (self.nx + 1, self.ny)

    @property
    def v_shape(self) -> tuple[int, int]:
        return (self.nx, self.ny + 1)


@dataclass
class Fields:
    """The advected scalar ``s`` and the staggered velocities ``u`` and ``v``."""

    s: np.ndarray
    u: np.ndarray
    v: np.ndarray

    @classmethod
    def zeros(cls, grid: GridSpec) -> "Fields":
        """Zero-filled single-precision fields sized for ``grid``."""
        return cls(
            s=np.zeros(grid.scalar_shape, dtype=np.float32),
            u=np.zeros(grid.u_shape, dtype=np.float32),
            v=np.zeros(grid.v_shape, dtype=np.float32),
        )