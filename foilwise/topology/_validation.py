# -*- coding: utf-8 -*-
# Foilwise/foilwise/topology/_validation.py

"""
Project: Foilwise
Date: 10/19/2026

Purpose:
--------
Shared coercion and validation for point arrays handed to topology and metrics helpers.
"""

import numpy as np


def _as_xy(points, min_points: int = 0, finite: bool = False) -> np.ndarray:
    """
    Coerce `points` to a float64 (N, 2) array and check it.

    Args
    ----
    min_points : int
        Smallest acceptable N (e.g. 3 for a closed loop).
    finite : bool
        Also reject NaN/inf coordinates.

    Raises
    ------
    ValueError
        If `points` is None, not (N, 2), too short, or (with `finite`) non-finite.
    """
    if points is None:
        raise ValueError("No points provided.")
    pts = np.asarray(points, dtype=np.float64)
    if pts.ndim != 2 or pts.shape[1] != 2:
        raise ValueError(f"Expected an (N, 2) point array, got shape {pts.shape}.")
    if pts.shape[0] < min_points:
        raise ValueError(f"Need at least {min_points} points, got {pts.shape[0]}.")
    if finite:
        bad = np.flatnonzero(~np.isfinite(pts).all(axis=1))
        if bad.size:
            raise ValueError(f"Non-finite coordinates in rows {bad.tolist()}.")
    return pts
