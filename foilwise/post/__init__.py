# -*- coding: utf-8 -*-
# Foilwise/foilwise/post/__init__.py

"""
Project: Foilwise
Date: 10/19/2026

Post Subpackage:
----------------
- plot_airfoil: matplotlib views (single section with surfaces/camber/centroid,
                multi-section overlay). Import this subpackage explicitly; the core
                packages never import matplotlib.
"""

__all__ = ["plot_airfoil"]
