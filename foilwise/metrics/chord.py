# -*- coding: utf-8 -*-
# Foilwise/foilwise/metrics/chord.py

"""
Project: Foilwise
Date: 10/19/2026

Purpose:
--------
Chord-line and curve-length quantities: chord length, twist of the chord line against
the x axis, and open-curve arclength.
"""

import math
import numpy as np
from ..topology._validation import _as_xy
from ..topology.edges import trailing_edge, leading_edge


def chord_length(airfoil) -> float:
    """Euclidean distance between TE and LE."""
    te = trailing_edge(airfoil)
    le = leading_edge(airfoil)
    return float(math.hypot(te[0] - le[0], te[1] - le[1]))


def twist(airfoil) -> float:
    """
    Signed angle [rad] of the chord vector LE → TE against +x, via atan2.

    Zero for an airfoil whose TE lies straight downstream of its LE.
    """
    te = trailing_edge(airfoil)
    le = leading_edge(airfoil)
    return float(math.atan2(te[1] - le[1], te[0] - le[0]))


def twist_deg(airfoil) -> float:
    """Twist [deg]."""
    return twist(airfoil) * 180.0 / math.pi


def cumulative_arclength(points) -> np.ndarray:
    """
    Running arclength along an open polyline: S[0] = 0, S[-1] = total length.
    No wrap-around segment is added.
    """
    pts = _as_xy(points)
    if pts.shape[0] == 0:
        return np.zeros(0, dtype=np.float64)
    seg = np.linalg.norm(pts[1:] - pts[:-1], axis=1)
    return np.concatenate(([0.0], np.cumsum(seg)))


def arclength(points) -> float:
    """Total length of an open polyline."""
    s = cumulative_arclength(points)
    return float(s[-1]) if s.size else 0.0
