# -*- coding: utf-8 -*-
# Foilwise/foilwise/writers/csv_writer.py

"""
Project: Foilwise
Date: 10/19/2026

Purpose:
--------
Emit the tabular `.csv` format: header `x,y,name`, one row per point, name replicated
on every row.
"""

import csv
import io
from typing import Optional
from ._text import fmt_float


def render_csv(airfoil, float_format: Optional[str] = None) -> str:
    buf = io.StringIO()
    w = csv.writer(buf, lineterminator="\n")
    w.writerow(["x", "y", "name"])
    for x, y in zip(airfoil.x, airfoil.y):
        w.writerow([fmt_float(x, float_format), fmt_float(y, float_format), airfoil.name])
    return buf.getvalue()
