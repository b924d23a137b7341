# -*- coding: utf-8 -*-
# Foilwise/foilwise/writers/dat_writer.py

"""
Project: Foilwise
Date: 10/19/2026

Purpose:
--------
Emit the `.dat` point-list format: the airfoil name on the first line, then one `x y`
row per stored point, in storage order.
"""

import io
from typing import Optional
from ._text import fmt_float


def render_dat(airfoil, float_format: Optional[str] = None) -> str:
    buf = io.StringIO()
    W = buf.write
    W(f"{airfoil.name}\n")
    for x, y in zip(airfoil.x, airfoil.y):
        W(f"{fmt_float(x, float_format)} {fmt_float(y, float_format)}\n")
    return buf.getvalue()
