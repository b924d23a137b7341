# -*- coding: utf-8 -*-
# Foilwise/foilwise/ops/transforms.py

"""
Project: Foilwise
Date: 10/19/2026

Purpose:
--------
Rigid and affine transforms of an airfoil. Each operation has an in-place form that
overwrites `airfoil.x` / `airfoil.y`, and a pure form (past-tense name) that returns a
new Airfoil and leaves its input untouched.

Main Tasks:
-----------
    1. scale / scaled:         p' = (p - o) * k + o, o = LE or (0, 0).
    2. rotate / rotated:       p' = R(angle) (p - axis) + axis, axis defaults to LE.
    3. translate / translated: p' = p + (dx, dy).
    4. normalize / normalized: derotate about LE, divide by chord, move LE to origin.
"""

import math
from typing import Optional, Sequence
import numpy as np
from ..core.airfoil import Airfoil
from ..core.errors import DegenerateGeometry
from ..topology.edges import leading_edge
from ..metrics.chord import chord_length, twist


def _assign(airfoil: Airfoil, pts: np.ndarray) -> None:
    airfoil.x = np.ascontiguousarray(pts[:, 0], dtype=np.float64)
    airfoil.y = np.ascontiguousarray(pts[:, 1], dtype=np.float64)


def _rotation_matrix(angle: float) -> np.ndarray:
    c, s = math.cos(angle), math.sin(angle)
    return np.array([[c, -s], [s, c]], dtype=float)


# --------------------
# In place
# --------------------
def scale(airfoil: Airfoil, factor: float, origin_at_le: bool = True) -> None:
    """Scale about the LE (default) or about (0, 0)."""
    origin = leading_edge(airfoil) if origin_at_le else np.zeros(2)
    _assign(airfoil, (airfoil.points - origin) * float(factor) + origin)


def rotate(airfoil: Airfoil, angle: float, axis: Optional[Sequence[float]] = None) -> None:
    """Rotate by `angle` [rad] (counter-clockwise positive) about `axis` (default LE)."""
    a = leading_edge(airfoil) if axis is None else np.asarray(axis, dtype=np.float64)
    R = _rotation_matrix(float(angle))
    _assign(airfoil, (airfoil.points - a) @ R.T + a)


def rotate_deg(airfoil: Airfoil, angle_deg: float, axis: Optional[Sequence[float]] = None) -> None:
    """Rotate by `angle_deg` [deg] about `axis` (default LE)."""
    rotate(airfoil, math.radians(angle_deg), axis=axis)


def translate(airfoil: Airfoil, dx: float, dy: float) -> None:
    airfoil.x = airfoil.x + float(dx)
    airfoil.y = airfoil.y + float(dy)


def normalize(airfoil: Airfoil) -> None:
    """
    Bring the airfoil to chord 1, twist 0 and LE at (0, 0).

    Steps
    -----
    1) Measure LE and twist on the original geometry.
    2) Rotate by -twist about that LE (LE → TE becomes +x).
    3) Measure the chord on the derotated geometry.
    4) p' = (p - LE) / chord.

    Raises
    ------
    DegenerateGeometry
        If the chord length is zero.
    """
    le = leading_edge(airfoil)
    rotate(airfoil, -twist(airfoil), axis=le)

    c = chord_length(airfoil)
    if c == 0.0:
        raise DegenerateGeometry("Zero chord length; cannot normalize.", {"name": airfoil.name})
    _assign(airfoil, (airfoil.points - le) / c)


# --------------------
# Pure variants
# --------------------
def scaled(airfoil: Airfoil, factor: float, origin_at_le: bool = True) -> Airfoil:
    out = airfoil.copy()
    scale(out, factor, origin_at_le=origin_at_le)
    return out


def rotated(airfoil: Airfoil, angle: float, axis: Optional[Sequence[float]] = None) -> Airfoil:
    out = airfoil.copy()
    rotate(out, angle, axis=axis)
    return out


def rotated_deg(airfoil: Airfoil, angle_deg: float, axis: Optional[Sequence[float]] = None) -> Airfoil:
    out = airfoil.copy()
    rotate_deg(out, angle_deg, axis=axis)
    return out


def translated(airfoil: Airfoil, dx: float, dy: float) -> Airfoil:
    out = airfoil.copy()
    translate(out, dx, dy)
    return out


def normalized(airfoil: Airfoil) -> Airfoil:
    out = airfoil.copy()
    normalize(out)
    return out
