"""Contour levels, labels and colours for contour plots of a field."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

RGB = tuple[float, float, float]

BLACK: RGB = (0.0, 0.0, 0.0)
RED: RGB = (1.0, 0.0, 0.0)
GREEN: RGB = (0.0, 1.0, 0.0)
BLUE: RGB = (0.0, 0.0, 1.0)

POSITIVE_COLOR = 1
ZERO_COLOR = 2
NEGATIVE_COLOR = 3
LABEL_COLOR = 4

# Line pattern used for negative contours when everything is drawn in black.
NEGATIVE_DASH_PATTERN = 21845

_LABEL_LIMIT = 999.0


@dataclass(frozen=True)
class FieldExtrema:
    """Minimum and maximum of a field with the positions where they occur."""

    smin: float
    imin: int
    jmin: int
    smax: float
    imax: int
    jmax: int

    @property
    def constant(self) -> bool:
        """True when the field holds a single value."""
        return self.smin == self.smax

    @property
    def label_size(self) -> float:
        """Text height of the min/max label, smaller for wide numbers."""
        if self.constant or (self.smin > -_LABEL_LIMIT and self.smax < _LABEL_LIMIT):
            return 0.014
        return 0.013


def find_extrema(s: np.ndarray) -> FieldExtrema:
    """Locate the extrema of ``s``.

    The field is scanned with the second index outermost, starting from
    ``s[0, 0]``; the first occurrence in that order wins ties.
    """
    s = np.asarray(s)
    if s.ndim != 2 or s.size == 0:
        raise ValueError("field must be a non-empty two-dimensional array")
    scan = s.T
    jmin, imin = np.unravel_index(int(np.argmin(scan)), scan.shape)
    jmax, imax = np.unravel_index(int(np.argmax(scan)), scan.shape)
    return FieldExtrema(
        smin=float(s[imin, jmin]),
        imin=int(imin),
        jmin=int(jmin),
        smax=float(s[imax, jmax]),
        imax=int(imax),
        jmax=int(jmax),
    )


def min_max_label(extrema: FieldExtrema) -> str:
    """The text describing the field's extrema, or its value if constant."""
    e = extrema
    if e.constant:
        if abs(e.smin) < _LABEL_LIMIT:
            return "CONSTANT FIELD = %10.5f" % e.smin
        return "CONSTANT FIELD = %.3f" % e.smin
    if e.smin > -_LABEL_LIMIT and e.smax < _LABEL_LIMIT:
        fmt = "MIN =%8.3f (%4d,%3d), MAX =%8.3f (%4d,%3d)"
    else:
        fmt = "MIN =%.3f (%4d,%3d), MAX =%.3f (%4d,%3d)"
    return fmt % (e.smin, e.imin, e.jmin, e.smax, e.imax, e.jmax)


def time_label(simtime: float) -> str:
    """The integration-time label."""
    return "TIME=%8.3f" % simtime


def _check_interval(cint: float) -> None:
    if not cint > 0:
        raise ValueError("contour interval must be positive")


def _truncated_multiple(value: float, cint: float) -> float:
    return cint * float(int(value / cint))


def _levels(cmin: float, cmax: float, cint: float) -> tuple[float, ...]:
    if cmax < cmin:
        return ()
    count = int(math.floor((cmax - cmin) / cint + 1e-6)) + 1
    return tuple(cmin + k * cint for k in range(count))


def positive_levels(
    smin: float, smax: float, cint: float, plot_zero: bool = True
) -> tuple[float, ...]:
    """Non-negative contour levels for a field spanning ``smin..smax``.

    Levels are multiples of ``cint``. With ``plot_zero`` false the zero
    contour is left out. An empty tuple means no positive pass is drawn.
    """
    _check_interval(cint)
    wanted = (
        (plot_zero and smax >= 0.0)
        or (not plot_zero and smax >= cint)
        or (smin == smax and smin == 0.0)
    )
    if not wanted:
        return ()
    cmin = _truncated_multiple(smin, cint)
    if cmin < 0.0:
        cmin = 0.0
    if cmin == 0.0 and not plot_zero:
        cmin = cint
    cmax = _truncated_multiple(smax, cint)
    if cmax < cmin:
        cmax = cmin
    return _levels(cmin, cmax, cint)


def negative_levels(smin: float, smax: float, cint: float) -> tuple[float, ...]:
    """Negative contour levels for a field spanning ``smin..smax``.

    Empty when the field has no negative values.
    """
    _check_interval(cint)
    if not smin < 0:
        return ()
    cmin = _truncated_multiple(smin, cint)
    if cmin > -cint:
        cmin = -cint
    cmax = -cint if smax >= 0.0 else _truncated_multiple(smax, cint)
    return _levels(cmin, cmax, cint)


def contour_color(value: float) -> int:
    """Colour index of a contour line at ``value``: positive, zero or negative."""
    if value > 0.0:
        return POSITIVE_COLOR
    if value == 0.0:
        return ZERO_COLOR
    return NEGATIVE_COLOR


def palette(colors: int) -> dict[int, RGB]:
    """RGB colours for each colour index.

    ``colors == 0`` draws positive contours red and negative blue, a
    positive value reverses that, and a negative value draws everything
    black. Labels are always black.
    """
    if colors == 0:
        positive, zero, negative = RED, GREEN, BLUE
    elif colors > 0:
        positive, zero, negative = BLUE, GREEN, RED
    else:
        positive = zero = negative = BLACK
    return {
        POSITIVE_COLOR: positive,
        ZERO_COLOR: zero,
        NEGATIVE_COLOR: negative,
        LABEL_COLOR: BLACK,
    }