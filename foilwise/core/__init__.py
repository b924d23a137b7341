# -*- coding: utf-8 -*-
# Foilwise/foilwise/core/__init__.py

"""
Project: Foilwise
Date: 10/19/2026

Core Subpackage:
----------------
Data model and error types shared by every other subpackage.

Modules:
--------
- airfoil: `Airfoil` coordinate container and `mean_airfoil`.
- errors:  Typed exceptions (GeometryError family, ConfigError).
"""

from .airfoil import Airfoil, mean_airfoil
from .errors import (
    GeometryError, InconsistentPointCount, DegenerateGeometry,
    GeometryInconsistency, UnsupportedFormat, ConfigError,
)

__all__ = [
    "Airfoil", "mean_airfoil",
    "GeometryError", "InconsistentPointCount", "DegenerateGeometry",
    "GeometryInconsistency", "UnsupportedFormat", "ConfigError",
]
