# -*- coding: utf-8 -*-
# Foilwise/foilwise/writers/dust_writer.py

"""
Project: Foilwise
Date: 10/19/2026

Purpose:
--------
Emit the section format expected by the DUST aerodynamic solver.

The solver wants the curve to start at the TE, run along the lower side to the LE, then
along the upper side back to the TE. Storage order is TE → upper → LE → lower, so the
rows are written reversed. First and last point need not coincide (open TE); no
deduplication is done.

Layout:
-------
    <point count>
    x y        (reversed storage order)
    ...
"""

import io
from typing import Optional
from ._text import fmt_float


def render_dust(airfoil, float_format: Optional[str] = None) -> str:
    buf = io.StringIO()
    W = buf.write
    W(f"{len(airfoil)}\n")
    for x, y in zip(airfoil.x[::-1], airfoil.y[::-1]):
        W(f"{fmt_float(x, float_format)} {fmt_float(y, float_format)}\n")
    return buf.getvalue()
