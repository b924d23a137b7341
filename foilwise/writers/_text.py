# -*- coding: utf-8 -*-
# Foilwise/foilwise/writers/_text.py

"""
Project: Foilwise
Date: 10/19/2026

Purpose:
--------
Private helpers shared by the writers: float rendering and atomic text output.
"""

import os
import tempfile
from pathlib import Path
from typing import Optional


def fmt_float(value: float, float_format: Optional[str] = None) -> str:
    """Shortest round-trip repr by default, else `format(value, float_format)`."""
    if float_format is None:
        return repr(float(value))
    return format(float(value), float_format)


def write_text_atomic(text: str, path: str) -> str:
    """
    Write `text` as UTF-8 so that `path` holds either the old or the complete new file.

    The payload goes to a sibling temporary file that is renamed over `path`; on failure
    the temporary file is removed and the error propagates. Returns `path` as a string.
    """
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix="." + target.name + ".", suffix=".tmp", dir=str(target.parent))
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as fh:
            fh.write(text)
        os.replace(tmp_name, str(target))
    except BaseException:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise
    return str(target)
