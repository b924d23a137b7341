# -*- coding: utf-8 -*-
# Foilwise/foilwise/loaders/__init__.py

"""
Project: Foilwise
Date: 10/19/2026

Loaders Subpackage:
-------------------
File format-specific readers returning `(x, y, name)`, plus extension dispatch.

Modules:
--------
- dat_loader: header line (name) followed by `x y` rows.
- csv_loader: tabular file with columns `x`, `y`, `name`.
- dispatcher: `get_loader_function` and `load_airfoil` (path → Airfoil).

Assumptions & Notes:
--------------------
- Point order is preserved as stored in the file unless `canonicalize=True`.
- No unit conversion, deduplication or closure is applied.
"""

from .dat_loader import load_dat
from .csv_loader import load_csv
from .dispatcher import get_loader_function, load_airfoil

__all__ = ["load_dat", "load_csv", "get_loader_function", "load_airfoil"]
