"""Surface views of a two-dimensional field."""

from __future__ import annotations

import os

import numpy as np
from matplotlib.figure import Figure


def _used_part(s: np.ndarray, nyuse: int | None) -> np.ndarray:
    s = np.asarray(s)
    if s.ndim != 2 or s.size == 0:
        raise ValueError("field must be a non-empty two-dimensional array")
    if nyuse is None:
        return s
    if not 1 <= nyuse <= s.shape[1]:
        raise ValueError("nyuse must lie between 1 and the second dimension")
    return s[:, :nyuse]


def surface_labels(
    s: np.ndarray, simtime: float, nyuse: int | None = None
) -> tuple[str, str]:
    """The min/max label and the time label for a surface view.

    Only the first ``nyuse`` entries of the second dimension are searched.
    """
    part = _used_part(s, nyuse)
    mmlabel = "MIN=%.3f  MAX=%.3f" % (float(part.min()), float(part.max()))
    tlabel = "TIME = %.4f" % simtime
    return mmlabel, tlabel


def plot_surface(
    s: np.ndarray,
    simtime: float,
    angh: float,
    angv: float,
    title: str,
    name: str,
    nyuse: int | None = None,
    path: str | os.PathLike | None = None,
) -> Figure:
    """Draw ``s`` as a surface seen from ``angh`` degrees around and ``angv`` above.

    The figure carries the title, the min/max and time labels and ``name``.
    It is saved to ``path`` when one is given, and returned.
    """
    part = np.asarray(_used_part(s, nyuse), dtype=np.float64)
    mmlabel, tlabel = surface_labels(s, simtime, nyuse)

    fig = Figure(figsize=(8, 8))
    fig.text(0.50, 0.97, title, ha="center", va="center", fontsize=14)
    fig.text(0.95, 0.02, mmlabel, ha="right", va="center", fontsize=10)
    fig.text(0.05, 0.02, tlabel, ha="left", va="center", fontsize=10)
    fig.text(0.02, 0.99, name, ha="center", va="top", rotation=90, fontsize=8)

    ax = fig.add_subplot(projection="3d")
    ii, jj = np.meshgrid(
        np.arange(part.shape[0]), np.arange(part.shape[1]), indexing="ij"
    )
    ax.plot_surface(ii, jj, part, cmap="viridis", linewidth=0)
    ax.view_init(elev=angv, azim=angh)
    ax.set_xlabel("I")
    ax.set_ylabel("J")

    if path is not None:
        fig.savefig(path)
    return fig