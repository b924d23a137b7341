# -*- coding: utf-8 -*-
# Foilwise/foilwise/__init__.py

"""
Project: Foilwise
Date: 10/19/2026

Modules:
--------
- core:     `Airfoil` container, `mean_airfoil`, typed errors, `FileFormat`.

- topology: TE/LE location, upper/lower split, orientation and CCW re-ordering.

- metrics:  Area, centroid, chord, twist, camberline, thickness, arclength, `describe`.

- ops:      In-place and pure transforms (scale, rotate, translate, normalize).

- span:     Akima interpolation of airfoil families along a span coordinate.

- loaders:  `.dat` / `.csv` readers and `load_airfoil`.

- writers:  `.dat` / `.csv` writers (`save`) and the DUST layout (`save_dust`).

- post:     matplotlib views (import explicitly: `foilwise.post.plot_airfoil`).

- config:   Defaults + overrides settings builder.

- api:      Facade for load/normalize/describe/interpolate/export/batch workflows.

Usage:
    from foilwise import Airfoil, interpolate_airfoils
"""

from .core import (
    Airfoil, mean_airfoil,
    GeometryError, InconsistentPointCount, DegenerateGeometry,
    GeometryInconsistency, UnsupportedFormat, ConfigError,
)
from .span import interpolate_airfoils

__version__ = "0.1.0"

__all__ = [
    "Airfoil", "mean_airfoil", "interpolate_airfoils",
    "GeometryError", "InconsistentPointCount", "DegenerateGeometry",
    "GeometryInconsistency", "UnsupportedFormat", "ConfigError",
    "core", "topology", "metrics", "ops", "span", "loaders", "writers", "post",
    "config", "api",
]
