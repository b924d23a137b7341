# -*- coding: utf-8 -*-
# Foilwise/foilwise/metrics/sections.py

"""
Project: Foilwise
Date: 10/19/2026

Purpose:
--------
Camberline and thickness distribution from index-paired upper/lower surface points.

Pairing:
--------
   - upper surface without the LE (TE → just before LE),
   - lower surface reversed (TE end → just after LE),
   - pair k joins the k-th point of each, so pair 0 sits at the trailing edge.

Pairing modes:
--------------
   - "truncate" (default): pairs are taken from the TE end and the surplus points at the
                 LE end of the longer surface are dropped. A warning is logged.
   - "strict": both sequences must have the same length, otherwise
               InconsistentPointCount is raised.
"""

import logging
from typing import Tuple
import numpy as np
from ..core.errors import InconsistentPointCount
from ..topology.split import upper_lower
from .chord import arclength

logger = logging.getLogger(__name__)

PAIRING_MODES = ("truncate", "strict")


def paired_surfaces(airfoil, pairing: str = "truncate") -> Tuple[np.ndarray, np.ndarray]:
    """
    Return (u, l) arrays of equal length m; row k of each forms one pair.

    Raises
    ------
    ValueError
        If `pairing` is not one of PAIRING_MODES.
    InconsistentPointCount
        In strict mode, when the surfaces have different point counts.
    """
    if pairing not in PAIRING_MODES:
        raise ValueError("Unsupported pairing '{}'; expected one of {}.".format(pairing, PAIRING_MODES))

    up, lo = upper_lower(airfoil)
    u = up[:-1]
    l = lo[::-1]
    if u.shape[0] != l.shape[0]:
        if pairing == "strict":
            raise InconsistentPointCount(
                "Upper and lower surfaces have different point counts.",
                {"name": airfoil.name, "n_upper": int(u.shape[0]), "n_lower": int(l.shape[0])},
            )
        m = min(u.shape[0], l.shape[0])
        logger.warning(
            "[paired_surfaces] '%s': upper has %d points, lower has %d; keeping %d pairs from the TE.",
            airfoil.name, u.shape[0], l.shape[0], m,
        )
        u, l = u[:m], l[:m]
    return u, l


def camberline(airfoil, pairing: str = "truncate") -> np.ndarray:
    """Midpoints of the paired surface points, (m, 2), ordered TE → LE."""
    u, l = paired_surfaces(airfoil, pairing)
    return (u + l) / 2.0


def thickness(airfoil, pairing: str = "truncate") -> np.ndarray:
    """Distance between the paired surface points, (m,), ordered TE → LE."""
    u, l = paired_surfaces(airfoil, pairing)
    return np.linalg.norm(u - l, axis=1)


def thickness_max(airfoil, pairing: str = "truncate") -> float:
    t = thickness(airfoil, pairing)
    if t.size == 0:
        raise InconsistentPointCount("No surface pairs available.", {"name": airfoil.name})
    return float(np.max(t))


def thickness_te(airfoil, pairing: str = "truncate") -> float:
    """Thickness of the pair nearest the trailing edge."""
    t = thickness(airfoil, pairing)
    if t.size == 0:
        raise InconsistentPointCount("No surface pairs available.", {"name": airfoil.name})
    return float(t[0])


def camber_length(airfoil, pairing: str = "truncate") -> float:
    """Arclength of the camberline (open curve)."""
    return arclength(camberline(airfoil, pairing))
