# -*- coding: utf-8 -*-
# Foilwise/foilwise/topology/__init__.py

"""
Project: Foilwise
Date: 10/19/2026

Topology Subfolder:
-------------------
Connectivity-level operations on airfoil loops: orientation, edge location and
surface segmentation.

Modules:
--------
- loop:        Signed area, orientation detection (CW/CCW), CCW re-orientation that
               keeps the TE at index 0.

- edges:       TE (index 0 by convention) and LE (farthest point from TE, stable argmax).

- split:       Upper/lower partition at the LE by exact coordinate match.

- _validation: Shared (N, 2) array checks.
"""

from .edges import trailing_edge, leading_edge, leading_edge_index, TE, LE
from .split import upper_lower, upper, lower
from .loop import signed_area, orientation, orient_ccw

__all__ = [
    "trailing_edge", "leading_edge", "leading_edge_index", "TE", "LE",
    "upper_lower", "upper", "lower",
    "signed_area", "orientation", "orient_ccw",
]
