# -*- coding: utf-8 -*-
# Foilwise/tests/conftest.py

import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from foilwise import Airfoil


def make_section(n_half=20, t=0.06, camber=0.0, name="section"):
    """
    Closed section with 2*n_half + 1 points: TE (1, 0) → upper → LE (0, 0) → lower → TE.

    Upper/lower points at the same index from the TE share x, so pairs are vertical:
    thickness = 2 t sin(theta), camberline y = 4 camber x (1 - x).
    """
    theta = np.linspace(0.0, 2.0 * np.pi, 2 * n_half + 1)
    x = 0.5 * (1.0 + np.cos(theta))
    y = t * np.sin(theta) + 4.0 * camber * x * (1.0 - x)
    return Airfoil(x, y, name)


@pytest.fixture
def diamond():
    return Airfoil([1.0, 0.0, -1.0, 0.0], [0.0, 0.1, 0.0, -0.1], "diamond")


@pytest.fixture
def section():
    return make_section(name="symmetric")


@pytest.fixture
def cambered():
    return make_section(camber=0.04, name="cambered")


@pytest.fixture
def write_dat(tmp_path):
    """Write raw `.dat` text and return its path."""
    def _write(text, fname="foil.dat"):
        p = tmp_path / fname
        p.write_text(text, encoding="utf-8")
        return str(p)
    return _write
