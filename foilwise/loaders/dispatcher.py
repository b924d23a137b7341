# -*- coding: utf-8 -*-
# Foilwise/foilwise/loaders/dispatcher.py

"""
Project: Foilwise
Date: 10/19/2026

Purpose:
--------
Route a file path to its loader function and build an Airfoil from the result.
"""

import logging
import os
from typing import Callable, Dict
from ..core.airfoil import Airfoil
from ..core.formats import FileFormat
from .dat_loader import load_dat
from .csv_loader import load_csv

logger = logging.getLogger(__name__)

_LOADERS: Dict[FileFormat, Callable] = {
    FileFormat.DAT: load_dat,
    FileFormat.CSV: load_csv,
}


def get_loader_function(path: str) -> Callable:
    """
    Loader function for the format of `path` (or of a bare extension).

    Raises
    ------
    UnsupportedFormat
        If the extension is not supported.
    """
    return _LOADERS[FileFormat.from_path(path)]


def load_airfoil(path: str, *, canonicalize: bool = False) -> Airfoil:
    """
    Load an Airfoil from `.dat` or `.csv`.

    Parameters
    ----------
    path : str
        File to read.
    canonicalize : bool, optional
        Re-orient a clockwise loop to the CCW convention, keeping the TE first.

    Raises
    ------
    FileNotFoundError
        If `path` does not exist.
    UnsupportedFormat
        If the extension is not supported.
    RuntimeError
        If parsing fails.
    """
    loader = get_loader_function(path)
    if not os.path.exists(path):
        raise FileNotFoundError(f"[load_airfoil] File not found: {path}")

    x, y, name = loader(path)
    af = Airfoil(x, y, name)
    if canonicalize:
        af = af.canonicalized()
    logger.info("[load_airfoil] Loaded '%s' from %s with %d points.", af.name, path, len(af))
    return af
