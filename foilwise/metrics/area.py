# -*- coding: utf-8 -*-
# Foilwise/foilwise/metrics/area.py

"""
Project: Foilwise
Date: 10/19/2026

Purpose:
--------
Polygon area and centroid of an airfoil outline (shoelace family of formulas).

Notes:
------
   - The wrap-around edge (last → first) is always included.
   - `area` is orientation independent; `centroid` divides by the *signed* area so that
     the sign of the cross terms cancels for either orientation.
"""

import numpy as np
from ..core.errors import DegenerateGeometry
from ..topology.loop import signed_area

_AREA_RTOL = 1e-12


def area(airfoil) -> float:
    """Enclosed area, always >= 0."""
    return abs(signed_area(airfoil.points))


def centroid(airfoil) -> np.ndarray:
    """
    Area centroid (cx, cy) of the closed outline.

    References
    ----------
    https://en.wikipedia.org/wiki/Centroid#Of_a_polygon

    Raises
    ------
    DegenerateGeometry
        If the signed area is zero to round-off (collinear or coincident points).
    """
    pts = airfoil.points
    a = signed_area(pts)
    x, y = pts[:, 0], pts[:, 1]
    # round-off floor for collinear outlines, relative to the bounding box
    if abs(a) <= _AREA_RTOL * max(np.ptp(x), np.ptp(y)) ** 2:
        raise DegenerateGeometry(
            "Zero enclosed area; centroid undefined.",
            {"name": airfoil.name, "n": len(airfoil), "signed_area": a},
        )
    xn, yn = np.roll(x, -1), np.roll(y, -1)
    cross = x * yn - xn * y
    cx = float(np.sum((x + xn) * cross)) / (6.0 * a)
    cy = float(np.sum((y + yn) * cross)) / (6.0 * a)
    return np.array([cx, cy], dtype=np.float64)
