# -*- coding: utf-8 -*-
# Foilwise/foilwise/post/plot_airfoil.py

"""
Project: Foilwise
Date: 10/19/2026

Purpose:
--------
Matplotlib views of airfoils for quick visual QA: one section with its upper/lower
surfaces, camberline and centroid, or several outlines overlaid. Read-only with respect
to the geometry.
"""

from typing import Optional, Sequence, Tuple
import numpy as np
import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from ..topology.split import upper_lower
from ..metrics import camberline, centroid


def figure_size(airfoil) -> Tuple[float, float]:
    """(width, height) in inches: 18 cm wide, height from the y-extent of the section."""
    extent = float(np.max(airfoil.y) - np.min(airfoil.y))
    width = 18 / 2.54
    if extent == 0.0:
        return width, width / 5.0
    fct_size = 1.0 / abs(extent)
    space = 1.0 if fct_size > 5 else 0.5
    height = width / fct_size + min(1.0, space)
    return width, height


def _finish(ax: Axes, created_fig: bool, show: bool, save_path: Optional[str], dpi: int) -> None:
    if save_path:
        ax.figure.savefig(save_path, dpi=dpi)
    if show and created_fig:
        plt.show()
    elif created_fig:
        plt.close(ax.figure)


def plot_airfoil(airfoil,
                 *,
                 show: bool = True,
                 save_path: Optional[str] = None,
                 ax: Optional[Axes] = None,
                 legend: bool = False,
                 dpi: int = 300) -> Axes:
    """
    Plot one airfoil: upper and lower surfaces, camberline (dashed) and centroid (x).

    Parameters
    ----------
    show : bool
        If True and we created the figure, display it.
    save_path : Optional[str]
        If given, save the figure to this path.
    ax : Optional[matplotlib.axes.Axes]
        Existing Axes to draw on; if None, a figure is created.
    """
    u, l = upper_lower(airfoil)
    c = camberline(airfoil)
    center = centroid(airfoil)

    created_fig = False
    if ax is None:
        plt.figure(figsize=figure_size(airfoil))
        ax = plt.gca()
        created_fig = True
    ax.plot(u[:, 0], u[:, 1], ".-", lw=1, ms=2, c="tab:red", label="upper")
    ax.plot(l[:, 0], l[:, 1], ".-", lw=1, ms=2, c="tab:blue", label="lower")
    ax.plot(c[:, 0], c[:, 1], "--", lw=0.5, c="tab:green", label="camber")
    ax.plot(center[0], center[1], "x", c="k", label="centroid")
    ax.set_aspect("equal", adjustable="box")
    ax.set_xlim(float(np.min(airfoil.x)) - 0.01, float(np.max(airfoil.x)) + 0.01)
    ax.set_title(airfoil.name)
    ax.set_xlabel("x")
    ax.set_ylabel("y")
    if legend:
        ax.legend()
    _finish(ax, created_fig, show, save_path, dpi)
    return ax


def plot_airfoils(airfoils: Sequence,
                  *,
                  show: bool = True,
                  save_path: Optional[str] = None,
                  ax: Optional[Axes] = None,
                  legend: bool = True,
                  dpi: int = 300) -> Axes:
    """Overlay the outlines of several airfoils, labelled by name."""
    if not airfoils:
        raise ValueError("Expected at least one airfoil to plot.")
    created_fig = False
    if ax is None:
        sizes = [figure_size(af) for af in airfoils]
        plt.figure(figsize=(max(s[0] for s in sizes), max(s[1] for s in sizes)))
        ax = plt.gca()
        created_fig = True
    for af in airfoils:
        ax.plot(af.x, af.y, "-", lw=1, label=af.name)
    xmin = min(float(np.min(af.x)) for af in airfoils)
    xmax = max(float(np.max(af.x)) for af in airfoils)
    ax.set_aspect("equal", adjustable="box")
    ax.set_xlim(xmin - 0.01, xmax + 0.01)
    ax.set_xlabel("x")
    ax.set_ylabel("y")
    if legend:
        ax.legend()
    _finish(ax, created_fig, show, save_path, dpi)
    return ax
