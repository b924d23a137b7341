# -*- coding: utf-8 -*-
# Foilwise/foilwise/writers/dispatcher.py

"""
Project: Foilwise
Date: 10/19/2026

Purpose:
--------
Public writer entry points. `save` picks the renderer from the file extension;
`save_dust` always writes the solver-specific layout.
"""

import logging
from typing import Callable, Dict, Optional
from ..core.formats import FileFormat
from ._text import write_text_atomic
from .dat_writer import render_dat
from .csv_writer import render_csv
from .dust_writer import render_dust

logger = logging.getLogger(__name__)

_RENDERERS: Dict[FileFormat, Callable] = {
    FileFormat.DAT: render_dat,
    FileFormat.CSV: render_csv,
}


def save(airfoil, path: str, *, float_format: Optional[str] = None) -> str:
    """
    Write `airfoil` as `.dat` or `.csv`, chosen by the extension of `path`.

    Returns
    -------
    str
        The path that was written.

    Raises
    ------
    UnsupportedFormat
        If the extension is not supported.
    """
    render = _RENDERERS[FileFormat.from_path(path)]
    out = write_text_atomic(render(airfoil, float_format), path)
    logger.info("[save] '%s' written to: %s", airfoil.name, out)
    return out


def save_dust(airfoil, path: str, *, float_format: Optional[str] = None) -> str:
    """Write `airfoil` in the DUST section layout (count line, reversed rows)."""
    out = write_text_atomic(render_dust(airfoil, float_format), path)
    logger.info("[save_dust] '%s' written to: %s", airfoil.name, out)
    return out
