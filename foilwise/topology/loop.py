# -*- coding: utf-8 -*-
# Foilwise/foilwise/topology/loop.py

"""
Project: Foilwise
Date: 10/19/2026

Purpose:
--------
This module owns *connectivity-level* concerns of an airfoil loop:
   - Signed area and orientation (CW/CCW),
   - Re-orientation to the TE→upper→LE→lower convention with TE kept at index 0.

Notes:
------------
   - Pure NumPy; no logging, plotting, or file I/O.
   - Works with arrays shaped (N, 2). The closing edge (last → first) is implicit;
     an explicitly repeated first point contributes a zero-length edge.
"""

import numpy as np
from ._validation import _as_xy


def signed_area(points: np.ndarray) -> float:
    """
    Shoelace signed area for a closed polygonal loop.

    Conventions
    -----------
    - Positive area => counter-clockwise (CCW) orientation.
    - The wrap-around edge (last → first) is part of the sum.

    Raises
    ------
    ValueError
        If input is not (N, 2), has N < 3, or holds NaN/inf.
    """
    pts = _as_xy(points, min_points=3, finite=True)
    x = pts[:, 0]
    y = pts[:, 1]
    # Roll by -1 to represent edges (i -> i+1), implicitly connects last->first
    area2 = np.dot(x, np.roll(y, -1)) - np.dot(y, np.roll(x, -1))
    return 0.5 * float(area2)


def orientation(points: np.ndarray) -> str:
    """
    Return "CCW" if the loop is counter-clockwise, else "CW".

    Zero area (degenerate polygons) is reported as "CW".
    """
    return "CCW" if signed_area(points) > 0.0 else "CW"


def orient_ccw(points: np.ndarray) -> np.ndarray:
    """
    Return a copy of the loop traversed counter-clockwise, keeping row 0 first.

    For a clockwise loop the order of rows 1..N-1 is reversed, so that
    TE → lower → LE → upper becomes TE → upper → LE → lower. An explicitly
    repeated TE at the end stays at the end. No angular re-sorting is done.
    """
    P = _as_xy(points, finite=True).copy()
    if orientation(P) == "CCW":
        return P
    closed = P.shape[0] > 3 and np.array_equal(P[0], P[-1])
    if closed:
        core = P[1:-1][::-1]
        return np.vstack((P[:1], core, P[:1]))
    return np.vstack((P[:1], P[1:][::-1]))
