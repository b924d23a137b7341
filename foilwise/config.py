# -*- coding: utf-8 -*-
# Foilwise/foilwise/config.py

"""
Project: Foilwise
Date: 10/19/2026

Purpose
-------
Assemble run settings for the facade (`foilwise.api`) from sectioned defaults and user
overrides, with per-key validation.

Main Tasks
----------
    1. Flatten curated defaults (sections: GEOMETRY, SPAN, IO).
    2. Normalize override keys (lower-case, stripped) and reject unknown keys.
    3. Validate each value against its expected kind and raise ConfigError with context.

Notes
-----
- Settings are plain dicts; callers may keep and reuse the result of build_settings().
"""

from typing import Any, Dict, Mapping, Optional
from .core.errors import ConfigError
from .metrics.sections import PAIRING_MODES


_DEFAULTS_SECTIONS = [
    ("GEOMETRY", {
        "pairing": "truncate",     # camber/thickness pairing mode
        "canonicalize": False,     # re-orient CW loops to CCW on load
    }),
    ("SPAN", {
        "extrapolate": False,      # allow span targets outside the input stations
    }),
    ("IO", {
        "float_format": None,      # None → shortest round-trip repr, else e.g. ".8f"
    }),
]


def _flatten_defaults(sections):
    flat = {}
    for _, entries in sections:
        flat.update(entries)
    return flat


DEFAULTS = _flatten_defaults(_DEFAULTS_SECTIONS)


def normalize_keys(params):  # type: (Mapping[str, Any]) -> Dict[str, Any]
    """Lower-case and strip keys; unknown keys raise ConfigError."""
    out = {}
    for k, v in params.items():
        key = str(k).strip().lower()
        if key not in DEFAULTS:
            raise ConfigError("Unknown settings key.", {"key": k, "known": sorted(DEFAULTS)})
        out[key] = v
    return out


def validate(settings):  # type: (Mapping[str, Any]) -> None
    """Per-key checks; raises ConfigError on the first bad value."""
    if settings["pairing"] not in PAIRING_MODES:
        raise ConfigError("Invalid pairing mode.", {"value": settings["pairing"], "allowed": PAIRING_MODES})
    for key in ("canonicalize", "extrapolate"):
        if not isinstance(settings[key], bool):
            raise ConfigError("Expected a boolean.", {"key": key, "value": settings[key]})
    fmt = settings["float_format"]
    if fmt is not None:
        if not isinstance(fmt, str):
            raise ConfigError("float_format must be a string or None.", {"value": fmt})
        try:
            format(1.0, fmt)
        except ValueError as e:
            raise ConfigError("float_format is not a valid float format spec.", {"value": fmt, "error": str(e)})


def build_settings(params=None):  # type: (Optional[Mapping[str, Any]]) -> Dict[str, Any]
    """
    Merge defaults with user overrides and validate.

    Args
    ----
    params : Mapping or None
        Overrides, e.g. {"pairing": "strict", "extrapolate": True}.

    Returns
    -------
    dict
        Complete, validated settings.
    """
    settings = dict(DEFAULTS)
    if params:
        settings.update(normalize_keys(params))
    validate(settings)
    return settings
