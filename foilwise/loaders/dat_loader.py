# -*- coding: utf-8 -*-
# Foilwise/foilwise/loaders/dat_loader.py

"""
Project: Foilwise
Date: 10/19/2026

Purpose:
--------
Read an airfoil from a `.dat`-style file: a header line holding the airfoil name,
followed by `x y` rows.

Main Features:
--------------
   1) Name = first non-blank line, leading '#' removed, whitespace trimmed.
   2) Blank lines and full-line '#' comments after the header are skipped.
   3) Accepts comma- or whitespace-separated columns; extra columns are ignored.

Notes:
------
   - Pure I/O parsing; no closure, re-ordering or normalization.
"""

from typing import List, Tuple
import numpy as np


def _clean_name(raw: str) -> str:
    name = raw.strip()
    if name.startswith("#"):
        name = name[1:]
    return name.strip()


def load_dat(filename: str) -> Tuple[np.ndarray, np.ndarray, str]:
    """
    Load an airfoil `.dat` file.

    Parameters
    ----------
    filename : str
        Path to the `.dat` file.

    Returns
    -------
    (x, y, name)
        float64 arrays of equal length and the header name.

    Raises
    ------
    RuntimeError
        If the file has no header, no numeric rows, or a row cannot be parsed.
    """
    try:
        name = None
        data: List[Tuple[float, float]] = []
        with open(filename, "r", encoding="utf-8", errors="ignore") as f:
            for line in f:
                line = line.strip()
                if not line:
                    continue
                if name is None:
                    name = _clean_name(line)
                    continue
                if line.startswith("#"):
                    continue
                parts = line.replace(",", " ").split()
                if len(parts) < 2:
                    raise RuntimeError("Expected 2 columns (x, y), got: {!r}".format(line))
                data.append((float(parts[0]), float(parts[1])))

        if name is None:
            raise RuntimeError("Empty file; no header line found.")
        if not data:
            raise RuntimeError("No numeric data found after the header.")

        pts = np.asarray(data, dtype=np.float64)
        return pts[:, 0].copy(), pts[:, 1].copy(), name

    except (OSError, ValueError, RuntimeError) as e:
        # Wrap with file context for easier debugging upstream
        raise RuntimeError("[dat_loader] Failed to load airfoil from {}: {}".format(filename, e)) from e
