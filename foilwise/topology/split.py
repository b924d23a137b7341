# -*- coding: utf-8 -*-
# Foilwise/foilwise/topology/split.py

"""
Project: Foilwise
Date: 10/19/2026

Purpose:
--------
Partition an airfoil loop into its upper and lower surfaces at the leading edge.

Conventions:
------------
   - Storage order is TE → upper → LE → lower → TE.
   - upper = rows [0, i_LE] inclusive (TE ... LE).
   - lower = rows [i_LE + 1, N - 1] (the remainder back toward the TE).
   - Every point lands in exactly one of the two; len(upper) + len(lower) == N.
"""

from typing import Tuple
import numpy as np
from ..core.errors import GeometryInconsistency
from .edges import leading_edge


def le_index_by_match(airfoil, le: np.ndarray) -> int:
    """
    Index of the first stored point whose coordinates equal `le` exactly.

    Raises
    ------
    GeometryInconsistency
        If no stored point matches (e.g. `le` came from transformed coordinates).
    """
    hits = np.flatnonzero((airfoil.x == le[0]) & (airfoil.y == le[1]))
    if hits.size == 0:
        raise GeometryInconsistency(
            "Leading edge is not a member of the stored point sequence.",
            {"name": airfoil.name, "le": (float(le[0]), float(le[1]))},
        )
    return int(hits[0])


def upper_lower(airfoil) -> Tuple[np.ndarray, np.ndarray]:
    """
    Split the loop at the leading edge.

    Returns
    -------
    (upper, lower)
        Fresh (k, 2) arrays; `upper` ends with the LE, `lower` starts right after it.
    """
    i_le = le_index_by_match(airfoil, leading_edge(airfoil))
    pts = airfoil.points
    return pts[:i_le + 1].copy(), pts[i_le + 1:].copy()


def upper(airfoil) -> np.ndarray:
    """Upper surface points (TE → LE)."""
    return upper_lower(airfoil)[0]


def lower(airfoil) -> np.ndarray:
    """Lower surface points (after LE → TE)."""
    return upper_lower(airfoil)[1]
