# -*- coding: utf-8 -*-
# Foilwise/foilwise/topology/edges.py

"""
Project: Foilwise
Date: 10/19/2026

Purpose:
--------
Deterministic locators for the two extremal points of an airfoil loop.

Conventions:
------------
   - "TE" is the first stored point, by convention; it is not searched for.
   - "LE" is the stored point farthest (Euclidean) from the TE. Ties resolve to the
     first occurrence in traversal order (stable argmax), so the LE is always a
     literal member of the stored sequence.
   - Both definitions are rotation-invariant; no chord-aligned frame is required.
"""

import numpy as np
from ..core.errors import DegenerateGeometry


def trailing_edge(airfoil) -> np.ndarray:
    """Trailing edge (TE) point = (x[0], y[0])."""
    return np.array([airfoil.x[0], airfoil.y[0]], dtype=np.float64)


def distances_from_te(airfoil) -> np.ndarray:
    """Euclidean distance of every stored point from the TE."""
    return np.hypot(airfoil.x - airfoil.x[0], airfoil.y - airfoil.y[0])


def leading_edge_index(airfoil) -> int:
    """
    Index of the leading edge (LE) point.

    Raises
    ------
    DegenerateGeometry
        If every point coincides with the TE.
    """
    d = distances_from_te(airfoil)
    i_le = int(np.argmax(d))
    if d[i_le] == 0.0:
        raise DegenerateGeometry(
            "All points coincide with the trailing edge; leading edge undefined.",
            {"name": airfoil.name, "n": len(airfoil)},
        )
    return i_le


def leading_edge(airfoil) -> np.ndarray:
    """Leading edge (LE) point = stored point farthest from the TE."""
    i_le = leading_edge_index(airfoil)
    return np.array([airfoil.x[i_le], airfoil.y[i_le]], dtype=np.float64)


# Short aliases matching the usual airfoil vocabulary.
TE = trailing_edge
LE = leading_edge
