# -*- coding: utf-8 -*-
# Foilwise/foilwise/core/formats.py

"""
Project: Foilwise
Date: 10/19/2026

Purpose:
--------
Closed set of on-disk point-list formats, resolved from a file extension. Loader and
writer dispatch tables are keyed by these members, so a new format is one enum member
plus one entry per table.
"""

import os
from enum import Enum
from .errors import UnsupportedFormat


class FileFormat(Enum):
    DAT = "dat"
    CSV = "csv"

    @classmethod
    def from_path(cls, path: str) -> "FileFormat":
        """
        Resolve the format from a path or a bare extension ('dat', '.csv', 'foil.DAT').

        Raises
        ------
        UnsupportedFormat
            If the extension is not a known format.
        """
        ext = os.path.splitext(path)[1] if "." in os.path.basename(path).lstrip(".") else path
        ext = ext.lower().lstrip(".")
        try:
            return cls(ext)
        except ValueError:
            raise UnsupportedFormat(
                "Unsupported file type.",
                {"path": path, "supported": [f.value for f in cls]},
            ) from None
