# -*- coding: utf-8 -*-
# Foilwise/foilwise/metrics/__init__.py

"""
Project: Foilwise
Date: 10/19/2026

Modules:
--------
- area:     Enclosed area (shoelace) and area centroid.
- chord:    Chord length, twist, open-curve arclength.
- sections: Upper/lower pairing, camberline and thickness distribution.

Exports:
--------
- describe: dictionary of the scalar descriptors of one airfoil (for reports/CSV).
"""

from typing import Dict

from .area import area, centroid
from .chord import chord_length, twist, twist_deg, arclength, cumulative_arclength
from .sections import (
    PAIRING_MODES, paired_surfaces, camberline, thickness,
    thickness_max, thickness_te, camber_length,
)

__all__ = [
    "area", "centroid",
    "chord_length", "twist", "twist_deg", "arclength", "cumulative_arclength",
    "PAIRING_MODES", "paired_surfaces", "camberline", "thickness",
    "thickness_max", "thickness_te", "camber_length",
    "describe",
]


def describe(airfoil, pairing: str = "truncate") -> Dict[str, object]:
    """
    Scalar descriptors of one airfoil.

    Returns a dict with: name, n, chord, twist_deg, area, centroid_x, centroid_y,
    thickness_max, thickness_te, camber_length.
    """
    c = centroid(airfoil)
    return {
        "name": airfoil.name,
        "n": len(airfoil),
        "chord": chord_length(airfoil),
        "twist_deg": twist_deg(airfoil),
        "area": area(airfoil),
        "centroid_x": float(c[0]),
        "centroid_y": float(c[1]),
        "thickness_max": thickness_max(airfoil, pairing),
        "thickness_te": thickness_te(airfoil, pairing),
        "camber_length": camber_length(airfoil, pairing),
    }
