# -*- coding: utf-8 -*-
# Foilwise/foilwise/span/interpolate.py

"""
Project: Foilwise
Date: 10/19/2026

Purpose:
--------
Build intermediate airfoil sections along a spanwise coordinate from a family of input
sections that share point count and per-index correspondence.

Method:
-------
   - Stack the inputs into an array of shape (n_stations, n_points, 2).
   - Interpolate along the station axis with scipy's Akima1DInterpolator. Every point
     index and every coordinate is an independent 1D piecewise-cubic interpolant: no
     overshoot between stations, no requirement for evenly spaced stations.
   - With exactly two stations the Akima scheme reduces to the straight line between
     them, so scipy's linear interp1d is used instead.
   - Targets equal to an input station copy that section verbatim.

Notes:
------
   - No resampling is performed; inputs must already have identical point counts.
   - Inputs are never mutated; outputs are new, independent Airfoils.
"""

from typing import List, Sequence
import numpy as np
from scipy.interpolate import Akima1DInterpolator, interp1d
from ..core.airfoil import Airfoil
from ..core.errors import InconsistentPointCount


def _validated_span(span, n_airfoils: int) -> np.ndarray:
    s = np.asarray(span, dtype=np.float64)
    if s.ndim != 1 or s.shape[0] != n_airfoils:
        raise ValueError(
            f"Expected {n_airfoils} span coordinates (one per airfoil), got shape {s.shape}."
        )
    if not np.isfinite(s).all():
        raise ValueError("Span coordinates must be finite.")
    ds = np.diff(s)
    if not (np.all(ds > 0.0) or np.all(ds < 0.0)):
        raise ValueError("Span coordinates must be strictly monotonic.")
    return s


def _stack(airfoils: Sequence[Airfoil]) -> np.ndarray:
    counts = [len(af) for af in airfoils]
    if any(c != counts[0] for c in counts):
        raise InconsistentPointCount(
            "Airfoils must have the same number of points!",
            {"names": [af.name for af in airfoils], "counts": counts},
        )
    return np.stack([af.points for af in airfoils], axis=0)


def interpolate_airfoils(airfoils: Sequence[Airfoil],
                         span: Sequence[float],
                         span_targets: Sequence[float],
                         *,
                         extrapolate: bool = False) -> List[Airfoil]:
    """
    Interpolate airfoil sections at `span_targets`.

    Parameters
    ----------
    airfoils : sequence of Airfoil
        Input sections (at least two), all with the same point count.
    span : sequence of float
        Span coordinate of each input section; strictly increasing or decreasing.
    span_targets : sequence of float
        Stations to produce.
    extrapolate : bool, optional
        Allow targets outside [min(span), max(span)] (default: False).

    Returns
    -------
    list of Airfoil
        One section per target, named "Interpolation 1", "Interpolation 2", ...

    Raises
    ------
    InconsistentPointCount
        If the inputs do not share one point count.
    ValueError
        Fewer than two airfoils, malformed span coordinates, or targets out of range
        without `extrapolate`.
    """
    airfoils = list(airfoils)
    if len(airfoils) < 2:
        raise ValueError("Need at least two airfoils to interpolate along the span.")
    s = _validated_span(span, len(airfoils))
    data = _stack(airfoils)

    targets = np.atleast_1d(np.asarray(span_targets, dtype=np.float64))
    if targets.ndim != 1 or not np.isfinite(targets).all():
        raise ValueError("Target span coordinates must be a finite 1D sequence.")
    s_min, s_max = float(np.min(s)), float(np.max(s))
    if not extrapolate and targets.size and (targets.min() < s_min or targets.max() > s_max):
        raise ValueError(
            f"Target span coordinates must lie within [{s_min}, {s_max}]; pass extrapolate=True to allow."
        )

    # scipy wants increasing abscissas
    if s[0] > s[-1]:
        s = s[::-1]
        data = data[::-1]

    if s.shape[0] == 2:
        f = interp1d(s, data, axis=0, kind="linear", fill_value="extrapolate", assume_sorted=True)
        values = f(targets)
    else:
        values = Akima1DInterpolator(s, data, axis=0)(targets, extrapolate=extrapolate)

    out = []
    for k, t in enumerate(targets):
        knot = np.flatnonzero(s == t)
        pts = data[knot[0]] if knot.size else values[k]
        out.append(Airfoil(pts[:, 0].copy(), pts[:, 1].copy(), f"Interpolation {k + 1}"))
    return out
