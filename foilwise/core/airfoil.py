# -*- coding: utf-8 -*-
# Foilwise/foilwise/core/airfoil.py

"""
Project: Foilwise
Date: 10/19/2026

Purpose:
--------
Coordinate container for a single 2D airfoil section. Holds the ordered (x, y) polyline
and a display name; every derived quantity (LE/TE, split, camber, area, ...) is computed
on demand by the topology/metrics packages and never cached here.

Conventions:
------------
   - Index 0 is the trailing edge (TE).
   - Traversal is TE → upper surface → LE → lower surface → TE, visited once.
   - The closing edge (last point → first point) is implicit; a repeated TE at the end
     is allowed and kept as-is.

Notes:
------
   - Construction validates array structure only. Point order is never changed silently;
     use `canonicalized()` to re-orient a clockwise loop explicitly.
   - Accessors return copies; in-place transforms overwrite `x` and `y`.
"""

from typing import Iterable, Optional
import numpy as np
from .errors import InconsistentPointCount


class Airfoil:
    """
    Ordered closed polyline describing an airfoil section.

    Parameters
    ----------
    x, y : array_like
        Abscissas and ordinates, one-dimensional, equal length, at least 3 points.
    name : str
        Display label.

    Raises
    ------
    ValueError
        If the coordinates are not 1D, differ in length, have fewer than 3 points
        or contain non-finite values.
    """

    def __init__(self, x: Iterable[float], y: Iterable[float], name: str = "Airfoil"):
        x_arr, y_arr = _validated_xy(x, y)
        self.x = x_arr
        self.y = y_arr
        self.name = str(name)

    @classmethod
    def from_points(cls, points: np.ndarray, name: str = "Airfoil") -> "Airfoil":
        """Build from an (N, 2) array of (x, y) rows."""
        pts = np.asarray(points, dtype=np.float64)
        if pts.ndim != 2 or pts.shape[1] != 2:
            raise ValueError(f"Expected (N, 2) array for points, got shape {pts.shape}.")
        return cls(pts[:, 0], pts[:, 1], name)

    # --------------------
    # Primitive accessors
    # --------------------
    def __len__(self) -> int:
        return int(self.x.shape[0])

    @property
    def points(self) -> np.ndarray:
        """Fresh (N, 2) array of the stored coordinates."""
        return np.column_stack((self.x, self.y))

    def data(self) -> np.ndarray:
        """Alias of `points`, kept for symmetry with the file formats."""
        return self.points

    def copy(self, name: Optional[str] = None) -> "Airfoil":
        """Independent copy (coordinates are duplicated, not shared)."""
        return Airfoil(self.x.copy(), self.y.copy(), self.name if name is None else name)

    def __add__(self, other: "Airfoil") -> "Airfoil":
        if not isinstance(other, Airfoil):
            return NotImplemented
        return mean_airfoil(self, other)

    def __repr__(self) -> str:
        return f"Airfoil(name={self.name!r}, n={len(self)})"

    def summary(self) -> str:
        """Multi-line report: point count, chord, maximum thickness and area."""
        from ..metrics import area, chord_length, thickness_max

        title = f"──── Airfoil {self.name} ────"
        rows = [
            title,
            f" n                {len(self):9d}",
            f" chord            {chord_length(self):9.2f}",
            f" thickness_max    {thickness_max(self):9.2e}",
            f" area             {area(self):9.2e}",
        ]
        return "\n".join(rows)

    # --------------------
    # Transform shortcuts
    # --------------------
    def scale(self, factor: float, origin_at_le: bool = True) -> None:
        from ..ops.transforms import scale
        scale(self, factor, origin_at_le=origin_at_le)

    def rotate(self, angle: float, axis=None) -> None:
        from ..ops.transforms import rotate
        rotate(self, angle, axis=axis)

    def rotate_deg(self, angle_deg: float, axis=None) -> None:
        from ..ops.transforms import rotate_deg
        rotate_deg(self, angle_deg, axis=axis)

    def normalize(self) -> None:
        from ..ops.transforms import normalize
        normalize(self)

    def scaled(self, factor: float, origin_at_le: bool = True) -> "Airfoil":
        from ..ops.transforms import scaled
        return scaled(self, factor, origin_at_le=origin_at_le)

    def rotated(self, angle: float, axis=None) -> "Airfoil":
        from ..ops.transforms import rotated
        return rotated(self, angle, axis=axis)

    def normalized(self) -> "Airfoil":
        from ..ops.transforms import normalized
        return normalized(self)

    def canonicalized(self) -> "Airfoil":
        """
        Copy re-ordered to the counter-clockwise TE→upper→LE→lower convention.
        Index 0 (the TE) stays in place; a clockwise loop has the rest of its order
        reversed.
        """
        from ..topology.loop import orient_ccw
        return Airfoil.from_points(orient_ccw(self.points), self.name)


def mean_airfoil(a: Airfoil, b: Airfoil) -> Airfoil:
    """
    Elementwise mean of two airfoils paired index by index (no resampling).

    Raises
    ------
    InconsistentPointCount
        If the airfoils do not have the same number of points.
    """
    if len(a) != len(b):
        raise InconsistentPointCount(
            "Airfoils must have the same number of points to be averaged.",
            {"left": a.name, "n_left": len(a), "right": b.name, "n_right": len(b)},
        )
    return Airfoil((a.x + b.x) / 2.0, (a.y + b.y) / 2.0, "Mean Airfoil")


def _validated_xy(x, y):
    x_arr = np.array(x, dtype=np.float64)
    y_arr = np.array(y, dtype=np.float64)
    if x_arr.ndim != 1 or y_arr.ndim != 1:
        raise ValueError(
            f"Expected 1D coordinate sequences, got shapes {x_arr.shape} and {y_arr.shape}."
        )
    if x_arr.shape[0] != y_arr.shape[0]:
        raise ValueError(
            f"x and y must have the same length, got {x_arr.shape[0]} and {y_arr.shape[0]}."
        )
    if x_arr.shape[0] < 3:
        raise ValueError("Need at least 3 points to form an airfoil outline.")
    bad = ~(np.isfinite(x_arr) & np.isfinite(y_arr))
    if bad.any():
        raise ValueError(f"Non-finite coordinates detected at indices: {np.flatnonzero(bad).tolist()}")
    return x_arr, y_arr
