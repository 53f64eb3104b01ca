"""Per-step extrema of the scalar field and their printed form."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class FieldStats:
    """Minimum and maximum of the field with their grid positions."""

    step: int
    time: float
    smin: float
    imin: int
    jmin: int
    smax: float
    imax: int
    jmax: int


def field_stats(
    s: np.ndarray, i1: int, i2: int, j1: int, j2: int, step: int, dt: float
) -> FieldStats:
    """Find the extrema of ``s``.

    The search starts from ``s[i1, j1]`` and then scans rows ``i1+1..i2``
    and columns ``j1+1..j2``; the first strict improvement wins.
    """
    s = np.asarray(s)
    if s.ndim != 2:
        raise ValueError("field must be two-dimensional")
    if not (0 <= i1 <= i2 < s.shape[0] and 0 <= j1 <= j2 < s.shape[1]):
        raise ValueError("index bounds lie outside the field")

    start = s[i1, j1]
    smin = smax = start
    imin = imax = i1
    jmin = jmax = j1

    region = s[i1 + 1 : i2 + 1, j1 + 1 : j2 + 1]
    if region.size:
        a, b = np.unravel_index(int(np.argmax(region)), region.shape)
        if region[a, b] > smax:
            smax, imax, jmax = region[a, b], i1 + 1 + int(a), j1 + 1 + int(b)
        a, b = np.unravel_index(int(np.argmin(region)), region.shape)
        if region[a, b] < smin:
            smin, imin, jmin = region[a, b], i1 + 1 + int(a), j1 + 1 + int(b)

    time = float(np.float32(step) * np.float32(dt))
    return FieldStats(
        step=step,
        time=time,
        smin=float(smin),
        imin=imin,
        jmin=jmin,
        smax=float(smax),
        imax=imax,
        jmax=jmax,
    )


def stats_header() -> str:
    """Column titles for the per-step statistics table."""
    return "%5s %9s %9s %4s %4s %9s %4s %4s" % (
        "Step", "Time", "Max", "at I", "J", "Min", "at I", "J",
    )


def format_stats(stats: FieldStats) -> str:
    """One table line: step, time, minimum with position, maximum with position."""
    return "%5d %9.5f %9.5f %4d %4d %9.5f %4d %4d" % (
        stats.step,
        stats.time,
        stats.smin,
        stats.imin,
        stats.jmin,
        stats.smax,
        stats.imax,
        stats.jmax,
    )