# -*- coding: utf-8 -*-
# Foilwise/foilwise/loaders/csv_loader.py

"""
Project: Foilwise
Date: 10/19/2026

Purpose:
--------
Read an airfoil from a tabular `.csv` file with named columns `x`, `y` and `name`.
The name is replicated on every row; the first row's value is used.
"""

import csv
from typing import List, Tuple
import numpy as np

_REQUIRED = ("x", "y", "name")


def load_csv(filename: str) -> Tuple[np.ndarray, np.ndarray, str]:
    """
    Load an airfoil `.csv` file.

    Returns
    -------
    (x, y, name)

    Raises
    ------
    RuntimeError
        If a required column is missing, there are no rows, or a value is not numeric.
    """
    try:
        xs: List[float] = []
        ys: List[float] = []
        name = None
        with open(filename, "r", encoding="utf-8", newline="") as f:
            reader = csv.DictReader(f)
            header = [h.strip() for h in (reader.fieldnames or [])]
            missing = [c for c in _REQUIRED if c not in header]
            if missing:
                raise RuntimeError("Missing column(s) {}; header is {}".format(missing, header))
            reader.fieldnames = header
            for row in reader:
                xs.append(float(row["x"]))
                ys.append(float(row["y"]))
                if name is None:
                    name = (row["name"] or "").strip().lstrip("#").strip()

        if not xs:
            raise RuntimeError("No data rows found.")
        return np.asarray(xs, dtype=np.float64), np.asarray(ys, dtype=np.float64), name

    except (OSError, TypeError, ValueError, RuntimeError) as e:
        raise RuntimeError("[csv_loader] Failed to load airfoil from {}: {}".format(filename, e)) from e
