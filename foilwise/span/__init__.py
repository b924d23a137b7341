# -*- coding: utf-8 -*-
# Foilwise/foilwise/span/__init__.py

"""
Project: Foilwise
Date: 10/19/2026

Span Subfolder:
---------------
- interpolate: Akima interpolation of airfoil families along a span coordinate.
"""

from .interpolate import interpolate_airfoils

__all__ = ["interpolate_airfoils"]
