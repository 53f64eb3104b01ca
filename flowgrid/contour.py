"""Contour plots of a two-dimensional field with extrema and time labels."""

from __future__ import annotations

import os
from collections.abc import Sequence

import numpy as np
from matplotlib.axes import Axes
from matplotlib.figure import Figure

from flowgrid.contour_levels import (
    LABEL_COLOR,
    NEGATIVE_COLOR,
    contour_color,
    find_extrema,
    min_max_label,
    negative_levels,
    palette,
    positive_levels,
    time_label,
)

FIGURE_INCHES = 8.0
BOX_THICKNESS = 3.0
HIGH_LOW_SIZE = 0.025
TITLE_SIZE = 0.020
TIME_LABEL_SIZE = 0.014
NAME_SIZE = 0.01


def _points(size: float) -> float:
    """Font size in points for a text height given as a fraction of the figure."""
    return size * FIGURE_INCHES * 72.0


def _nest_box(nest: Sequence[int] | None) -> tuple[int, int, int, int] | None:
    if nest is None:
        return None
    box = tuple(int(v) for v in nest)
    if len(box) != 4:
        raise ValueError("nest must hold four values: x1, x2, y1, y2")
    if box[0] < 0:
        return None
    return box  # type: ignore[return-value]


def _draw_pass(
    ax: Axes,
    xx: np.ndarray,
    yy: np.ndarray,
    field: np.ndarray,
    levels: tuple[float, ...],
    colors: int,
) -> None:
    rgb = palette(colors)
    line_colors = [rgb[contour_color(v)] for v in levels]
    styles = [
        "dashed" if contour_color(v) == NEGATIVE_COLOR and colors < 0 else "solid"
        for v in levels
    ]
    ax.contour(
        xx,
        yy,
        field,
        levels=list(levels),
        colors=line_colors,
        linestyles=styles,
        linewidths=1.0,
    )


def plot_contours(
    s: np.ndarray,
    cint: float,
    simtime: float,
    title: str = "",
    colors: int = 0,
    plot_zero: bool = True,
    nest: Sequence[int] | None = None,
    name: str = "",
    path: str | os.PathLike | None = None,
) -> Figure:
    """Contour ``s`` at multiples of ``cint`` and label its extrema and time.

    Grid point ``s[i, j]`` is drawn at ``(i + 1, j + 1)``. ``colors`` picks
    the palette (0: positive red, negative blue; >0 reversed; <0 all black
    with negative contours dashed). With ``plot_zero`` false the zero
    contour is omitted. ``nest`` is ``(x1, x2, y1, y2)`` in grid indices;
    a box is drawn around it unless ``x1`` is negative. The figure is
    saved to ``path`` when one is given, and returned.
    """
    field = np.asarray(s, dtype=np.float64)
    if field.ndim != 2 or field.shape[0] < 2 or field.shape[1] < 2:
        raise ValueError("field must be a two-dimensional array of at least 2 x 2")
    if not cint > 0:
        raise ValueError("contour interval must be positive")
    box = _nest_box(nest)

    extrema = find_extrema(field)
    mmlabel = min_max_label(extrema)
    tlabel = time_label(simtime)
    label_rgb = palette(colors)[LABEL_COLOR]

    fig = Figure(figsize=(FIGURE_INCHES, FIGURE_INCHES))
    fig.text(0.50, 0.97, title, ha="center", va="center",
             fontsize=_points(TITLE_SIZE))
    fig.text(0.95, 0.03, mmlabel, ha="right", va="center",
             fontsize=_points(extrema.label_size))
    fig.text(0.05, 0.03, tlabel, ha="left", va="center",
             fontsize=_points(TIME_LABEL_SIZE))
    fig.text(0.02, 0.94, name, ha="center", va="top", rotation=90,
             fontsize=_points(NAME_SIZE))

    ax = fig.add_axes((0.1, 0.1, 0.8, 0.8))
    nx, ny = field.shape
    xx, yy = np.meshgrid(
        np.arange(1, nx + 1, dtype=np.float64),
        np.arange(1, ny + 1, dtype=np.float64),
        indexing="ij",
    )

    smin, smax = extrema.smin, extrema.smax
    for levels in (
        positive_levels(smin, smax, cint, plot_zero),
        negative_levels(smin, smax, cint),
    ):
        if levels:
            _draw_pass(ax, xx, yy, field, levels, colors)

    if not extrema.constant:
        ax.text(extrema.imax + 1, extrema.jmax + 1, "H\n%.3g" % smax,
                ha="center", va="center", color=label_rgb,
                fontsize=_points(HIGH_LOW_SIZE) / 2)
        ax.text(extrema.imin + 1, extrema.jmin + 1, "L\n%.3g" % smin,
                ha="center", va="center", color=label_rgb,
                fontsize=_points(HIGH_LOW_SIZE) / 2)

    if box is not None:
        x1, x2, y1, y2 = box
        ax.plot(
            [x1 + 1, x2 + 1, x2 + 1, x1 + 1, x1 + 1],
            [y1 + 1, y1 + 1, y2 + 1, y2 + 1, y1 + 1],
            color=label_rgb,
            linewidth=BOX_THICKNESS,
        )

    ax.set_xlim(1, nx)
    ax.set_ylim(1, ny)
    ax.set_aspect("equal")
    ax.tick_params(colors=label_rgb)

    if path is not None:
        fig.savefig(path)
    return fig