# -*- coding: utf-8 -*-
# Foilwise/foilwise/ops/__init__.py

"""
Project: Foilwise
Date: 10/19/2026

Ops Subfolder:
--------------
Geometric transforms of an Airfoil (see `transforms`). In-place names mutate their
target; past-tense names return a new Airfoil.
"""

from .transforms import (
    scale, rotate, rotate_deg, translate, normalize,
    scaled, rotated, rotated_deg, translated, normalized,
)

__all__ = [
    "scale", "rotate", "rotate_deg", "translate", "normalize",
    "scaled", "rotated", "rotated_deg", "translated", "normalized",
]
