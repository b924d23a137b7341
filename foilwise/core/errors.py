# -*- coding: utf-8 -*-
# Foilwise/foilwise/core/errors.py

"""
Project: Foilwise
Date: 10/19/2026

Purpose
-------
Typed exceptions for airfoil geometry, I/O dispatch and settings, with compact,
context-aware messages so batch callers can report failures per item.

Main Tasks
----------
    1. Define GeometryError(message, context) with a compact context suffix in __str__.
    2. Provide typed subclasses: InconsistentPointCount, DegenerateGeometry,
       GeometryInconsistency, UnsupportedFormat.
    3. Provide ConfigError for invalid settings (see foilwise.config).

Notes
-----
- Both base classes derive from ValueError so callers catching ValueError keep working.
- Context is optional; long values are truncated for readability.
"""

__all__ = [
    "GeometryError",
    "InconsistentPointCount",
    "DegenerateGeometry",
    "GeometryInconsistency",
    "UnsupportedFormat",
    "ConfigError",
]


def _format_context(ctx):
    """Return a compact ' | key1=val1, key2=val2' string or '' if no context."""
    if not ctx:
        return ""
    parts = []
    for k in sorted(ctx.keys()):
        sv = repr(ctx[k])
        if len(sv) > 120:
            sv = sv[:117] + "..."
        parts.append("{}={}".format(k, sv))
    return " | " + ", ".join(parts)


class GeometryError(ValueError):
    """
    Base class for errors raised by airfoil geometry operations.

    Parameters
    ----------
    message : str
        Human-readable error.
    context : dict, optional
        Extra fields appended in the string form (e.g., {"name": "NACA0012", "n": 51}).
    """
    def __init__(self, message, context=None):
        self.context = dict(context) if context else None
        super().__init__(message)

    def __str__(self):
        base = super().__str__()
        return base + _format_context(self.context)


class InconsistentPointCount(GeometryError):
    """
    Airfoils (or the two surfaces of one airfoil) were combined, paired or
    interpolated without matching point counts.
    """


class DegenerateGeometry(GeometryError):
    """
    Zero-area or coincident-point configurations:
      - every point coincides with the trailing edge (LE undefined)
      - zero signed area (centroid undefined)
      - zero chord length (normalization undefined)
    """


class GeometryInconsistency(GeometryError):
    """The derived leading edge was not found verbatim among the stored points."""


class UnsupportedFormat(GeometryError):
    """File extension not recognized by the loader/writer dispatch."""


class ConfigError(ValueError):
    """Invalid settings key or value (see foilwise.config.build_settings)."""
    def __init__(self, message, context=None):
        self.context = dict(context) if context else None
        super().__init__(message)

    def __str__(self):
        base = super().__str__()
        return base + _format_context(self.context)
