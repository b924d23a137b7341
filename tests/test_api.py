import os

import numpy as np
import pytest

import main
from foilwise import GeometryError, api
from foilwise.metrics import chord_length, twist
from foilwise.ops import rotated, scaled
from foilwise.topology import LE
from foilwise.writers import save

from .conftest import make_section


@pytest.fixture
def files(tmp_path):
    root = rotated(scaled(make_section(name="root"), 2.0), 0.1)
    tip = make_section(t=0.04, name="tip")
    paths = []
    for af in (root, tip):
        p = str(tmp_path / (af.name + ".dat"))
        save(af, p)
        paths.append(p)
    return paths


def test_load_and_normalize(files):
    af = api.load_and_normalize(files[0])
    assert af.name == "root"
    assert chord_length(af) == pytest.approx(1.0)
    assert twist(af) == pytest.approx(0.0, abs=1e-12)
    np.testing.assert_allclose(LE(af), [0.0, 0.0], atol=1e-12)


def test_describe_uses_pairing_setting(diamond):
    d = api.describe_airfoil(diamond)
    assert d["area"] == pytest.approx(0.2)
    with pytest.raises(GeometryError):
        api.describe_airfoil(diamond, {"pairing": "strict"})


def test_interpolate_span_extrapolate_setting(files):
    afs = [api.load_and_normalize(p) for p in files]
    with pytest.raises(ValueError):
        api.interpolate_span(afs, [0.0, 1.0], [1.2])
    out = api.interpolate_span(afs, [0.0, 1.0], [1.2], {"extrapolate": True})
    assert len(out) == 1


def test_export(tmp_path, diamond):
    p = api.export(diamond, str(tmp_path / "d.dat"), dust=True)
    assert open(p, encoding="utf-8").readline().strip() == "4"
    p = api.export(diamond, str(tmp_path / "d.csv"))
    assert api.load(p).name == "diamond"


def test_process_batch_skips_failures(files, write_dat, tmp_path):
    bad = write_dat("dot\n1 0\n1 0\n1 0\n", "dot.dat")
    results, failures = api.process_batch(files + [bad, str(tmp_path / "x.txt")])
    assert set(results) == set(files)
    assert set(failures) == {bad, str(tmp_path / "x.txt")}
    assert results[files[1]]["thickness_max"] == pytest.approx(0.08)


def test_main_end_to_end(files, tmp_path):
    out = tmp_path / "out"
    rc = main.main(files + ["--span", "0", "1", "--n", "3", "--out", str(out), "--plot"])
    assert rc == 0
    names = sorted(os.listdir(out))
    assert "Interpolation_1.dat" in names
    assert "Interpolation_3_dust.dat" in names
    assert "sections.png" in names
