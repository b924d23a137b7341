import math

import numpy as np
import pytest

from foilwise import Airfoil, DegenerateGeometry, InconsistentPointCount
from foilwise.metrics import (
    area, centroid, chord_length, twist, twist_deg, arclength, cumulative_arclength,
    paired_surfaces, camberline, thickness, thickness_max, thickness_te,
    camber_length, describe,
)
from foilwise.ops import scaled, rotated


def test_diamond_scalars(diamond):
    assert chord_length(diamond) == pytest.approx(2.0)
    assert area(diamond) == pytest.approx(0.2)
    np.testing.assert_allclose(centroid(diamond), [0.0, 0.0], atol=1e-12)


def test_area_is_orientation_independent(diamond):
    cw = Airfoil(diamond.x[::-1], diamond.y[::-1])
    assert area(cw) == pytest.approx(area(diamond))
    assert area(cw) >= 0.0


def test_area_scales_quadratically(section):
    for k in (0.5, 2.0, 3.7):
        assert area(scaled(section, k)) == pytest.approx(k ** 2 * area(section))


def test_centroid_of_triangle_either_orientation():
    ccw = Airfoil([0.0, 3.0, 0.0], [0.0, 0.0, 3.0])
    cw = Airfoil([0.0, 0.0, 3.0], [0.0, 3.0, 0.0])
    np.testing.assert_allclose(centroid(ccw), [1.0, 1.0])
    np.testing.assert_allclose(centroid(cw), [1.0, 1.0])


def test_centroid_of_collinear_points_is_degenerate():
    af = Airfoil([0.0, 1.0, 2.0], [0.0, 1.0, 2.0], "line")
    with pytest.raises(DegenerateGeometry):
        centroid(af)


def test_centroid_of_noninteger_collinear_points_is_degenerate():
    x = np.array([1.0, 0.1, 0.7])
    af = Airfoil(x, 3.0 * x, "line")
    with pytest.raises(DegenerateGeometry):
        centroid(af)


def test_centroid_of_coincident_points_is_degenerate():
    af = Airfoil([0.3, 0.3, 0.3], [0.7, 0.7, 0.7], "dot")
    with pytest.raises(DegenerateGeometry):
        centroid(af)


def test_centroid_of_small_valid_outline():
    # a tiny but genuine triangle stays above the round-off floor
    af = Airfoil([1e-3, 0.0, 0.0], [0.0, 1e-3, 0.0], "tiny")
    np.testing.assert_allclose(centroid(af), [1e-3 / 3.0, 1e-3 / 3.0])


def test_section_centroid_lies_on_chord(section):
    c = centroid(section)
    assert c[1] == pytest.approx(0.0, abs=1e-12)
    assert c[0] == pytest.approx(0.5, abs=1e-12)


def test_chord_and_twist_of_rotated_section(section):
    r = rotated(section, math.radians(10.0))
    assert chord_length(r) == pytest.approx(1.0)
    # chord vector LE -> TE turns with the section
    assert twist_deg(r) == pytest.approx(10.0)
    assert twist(r) == pytest.approx(math.radians(10.0))
    assert twist(section) == pytest.approx(0.0, abs=1e-12)


def test_thickness_of_symmetric_section(section):
    t = thickness(section)
    assert t.shape == (20,)
    assert thickness_max(section) == pytest.approx(0.12)
    assert int(np.argmax(t)) == 10
    assert thickness_te(section) == pytest.approx(0.0, abs=1e-12)


def test_camberline_of_symmetric_section_is_flat(section):
    c = camberline(section)
    assert c.shape == (20, 2)
    np.testing.assert_allclose(c[:, 1], 0.0, atol=1e-12)
    # ordered from the trailing edge toward the leading edge
    assert c[0, 0] == pytest.approx(1.0)
    assert np.all(np.diff(c[:, 0]) < 0.0)


def test_camberline_follows_camber(cambered):
    c = camberline(cambered)
    np.testing.assert_allclose(c[:, 1], 0.16 * c[:, 0] * (1.0 - c[:, 0]), atol=1e-12)
    # camber shifts both surfaces equally, so thickness is unchanged
    assert thickness_max(cambered) == pytest.approx(0.12)


def test_camber_length_is_open_curve_length(section):
    last_x = 0.5 * (1.0 + math.cos(19.0 * math.pi / 20.0))
    assert camber_length(section) == pytest.approx(1.0 - last_x)


def test_strict_pairing_rejects_unequal_surfaces(diamond):
    with pytest.raises(InconsistentPointCount):
        camberline(diamond, pairing="strict")
    with pytest.raises(InconsistentPointCount):
        thickness(diamond, pairing="strict")


def test_truncate_pairing_keeps_pairs_from_trailing_edge(diamond, caplog):
    with caplog.at_level("WARNING"):
        u, l = paired_surfaces(diamond, pairing="truncate")
    np.testing.assert_array_equal(u, [[1.0, 0.0]])
    np.testing.assert_array_equal(l, [[0.0, -0.1]])
    assert thickness_te(diamond, pairing="truncate") == pytest.approx(math.hypot(1.0, 0.1))
    assert "keeping 1 pairs" in caplog.text


def test_open_trailing_edge_pairs_by_default(caplog):
    # three upper points before the LE, two lower points after it
    af = Airfoil(
        [1.0, 0.6, 0.3, 0.0, 0.4, 1.0],
        [0.01, 0.05, 0.05, 0.0, -0.04, -0.01],
        "open_te",
    )
    with caplog.at_level("WARNING"):
        c = camberline(af)
    np.testing.assert_allclose(c, [[1.0, 0.0], [0.5, 0.005]])
    assert thickness_te(af) == pytest.approx(0.02)
    assert describe(af)["camber_length"] == pytest.approx(math.hypot(0.5, 0.005))
    assert "keeping 2 pairs" in caplog.text


def test_unknown_pairing_mode(section):
    with pytest.raises(ValueError):
        camberline(section, pairing="longest")


def test_arclength_has_no_wraparound():
    pts = np.array([[0.0, 0.0], [3.0, 4.0], [3.0, 8.0]])
    assert arclength(pts) == pytest.approx(9.0)
    np.testing.assert_allclose(cumulative_arclength(pts), [0.0, 5.0, 9.0])
    assert arclength(np.zeros((0, 2))) == 0.0


def test_describe(section):
    d = describe(section)
    assert d["name"] == "symmetric"
    assert d["n"] == 41
    assert d["chord"] == pytest.approx(1.0)
    assert d["thickness_max"] == pytest.approx(0.12)
    assert set(d) == {
        "name", "n", "chord", "twist_deg", "area", "centroid_x", "centroid_y",
        "thickness_max", "thickness_te", "camber_length",
    }
