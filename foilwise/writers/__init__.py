# -*- coding: utf-8 -*-
# Foilwise/foilwise/writers/__init__.py

"""
Project: Foilwise
Date: 10/19/2026

Writers Subpackage:
-------------------
- dat_writer:  name line + `x y` rows.
- csv_writer:  `x,y,name` table.
- dust_writer: point count + reversed `x y` rows for the DUST solver.
- dispatcher:  `save` (by extension) and `save_dust`; atomic writes.
"""

from .dispatcher import save, save_dust
from .dat_writer import render_dat
from .csv_writer import render_csv
from .dust_writer import render_dust

__all__ = ["save", "save_dust", "render_dat", "render_csv", "render_dust"]
