# -*- coding: utf-8 -*-
# Foilwise/foilwise/api.py

"""
Project: Foilwise
Date: 10/19/2026

Purpose
-------
Thin facade for common airfoil workflows, driven by a settings dict
(`foilwise.config.build_settings`).

Main Tasks
----------
    1. `load` / `load_and_normalize` → read a `.dat`/`.csv` file into an Airfoil.
    2. `describe_airfoil` → scalar descriptors using the configured pairing mode.
    3. `interpolate_span` → Akima sections along the span.
    4. `export` → write `.dat`/`.csv`, or the DUST layout.
    5. `process_batch` → load+normalize+describe many files, skipping failing items.

Notes
-----
- Detailed behavior lives in the loaders, metrics, ops, span and writers packages.
"""

import logging
from typing import Dict, List, Mapping, Optional, Sequence, Tuple
from .config import build_settings
from .core.airfoil import Airfoil
from .core.errors import GeometryError
from .loaders import load_airfoil
from .metrics import describe
from .ops import normalize
from .span import interpolate_airfoils
from .writers import save, save_dust

logger = logging.getLogger(__name__)

__all__ = [
    "load",
    "load_and_normalize",
    "describe_airfoil",
    "interpolate_span",
    "export",
    "process_batch",
]


def load(path: str, settings: Optional[Mapping[str, object]] = None) -> Airfoil:
    """Load an airfoil, re-orienting it when `canonicalize` is set."""
    cfg = build_settings(settings)
    return load_airfoil(path, canonicalize=cfg["canonicalize"])


def load_and_normalize(path: str, settings: Optional[Mapping[str, object]] = None) -> Airfoil:
    """Load an airfoil and normalize it in place (chord 1, twist 0, LE at origin)."""
    af = load(path, settings)
    normalize(af)
    logger.info("[load_and_normalize] '%s' normalized.", af.name)
    return af


def describe_airfoil(airfoil: Airfoil, settings: Optional[Mapping[str, object]] = None) -> Dict[str, object]:
    cfg = build_settings(settings)
    return describe(airfoil, pairing=cfg["pairing"])


def interpolate_span(airfoils: Sequence[Airfoil],
                     span: Sequence[float],
                     targets: Sequence[float],
                     settings: Optional[Mapping[str, object]] = None) -> List[Airfoil]:
    cfg = build_settings(settings)
    out = interpolate_airfoils(airfoils, span, targets, extrapolate=cfg["extrapolate"])
    logger.info("[interpolate_span] %d sections from %d inputs.", len(out), len(airfoils))
    return out


def export(airfoil: Airfoil,
           path: str,
           *,
           dust: bool = False,
           settings: Optional[Mapping[str, object]] = None) -> str:
    """Write `airfoil` by extension, or in the DUST layout when `dust=True`."""
    cfg = build_settings(settings)
    if dust:
        return save_dust(airfoil, path, float_format=cfg["float_format"])
    return save(airfoil, path, float_format=cfg["float_format"])


def process_batch(paths: Sequence[str],
                  settings: Optional[Mapping[str, object]] = None
                  ) -> Tuple[Dict[str, Dict[str, object]], Dict[str, str]]:
    """
    Load, normalize and describe each file; a failing item is logged and skipped.

    Returns
    -------
    (results, failures)
        results: path → descriptor dict; failures: path → error message.
    """
    cfg = build_settings(settings)
    results: Dict[str, Dict[str, object]] = {}
    failures: Dict[str, str] = {}
    for path in paths:
        try:
            af = load_and_normalize(path, cfg)
            results[path] = describe(af, pairing=cfg["pairing"])
        except (GeometryError, RuntimeError, OSError) as e:
            logger.warning("[process_batch] Skipping %s: %s", path, e)
            failures[path] = str(e)
    return results, failures
