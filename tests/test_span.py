import numpy as np
import pytest

from foilwise import Airfoil, InconsistentPointCount, interpolate_airfoils
from foilwise.ops import scaled, translated

from .conftest import make_section


@pytest.fixture
def family(section, cambered):
    tip = scaled(make_section(t=0.03, name="tip"), 0.6)
    return [section, cambered, tip]


def test_reproduces_inputs_at_stations(family):
    out = interpolate_airfoils(family, [0.0, 0.4, 1.0], [0.0, 0.4, 1.0])
    for got, ref in zip(out, family):
        np.testing.assert_array_equal(got.x, ref.x)
        np.testing.assert_array_equal(got.y, ref.y)


def test_output_names_and_point_count(family):
    out = interpolate_airfoils(family, [0.0, 0.4, 1.0], np.linspace(0.0, 1.0, 5))
    assert [af.name for af in out] == ["Interpolation {}".format(i) for i in range(1, 6)]
    assert all(len(af) == len(family[0]) for af in out)


def test_rejects_different_point_counts():
    a = make_section(n_half=25, name="a")                      # 51 points
    b = Airfoil(a.x[:-1], a.y[:-1], "b")                       # 50 points
    with pytest.raises(InconsistentPointCount):
        interpolate_airfoils([a, b], [0.0, 1.0], [0.5])


def test_linear_family_is_reproduced(section):
    # coordinates scaled about the origin vary linearly with the station
    family = [scaled(section, k, origin_at_le=False) for k in (1.0, 2.0, 3.0, 4.0)]
    out = interpolate_airfoils(family, [0.0, 1.0, 2.0, 3.0], [0.5, 1.25, 2.9])
    for af, k in zip(out, (1.5, 2.25, 3.9)):
        np.testing.assert_allclose(af.points, section.points * k, atol=1e-12)


def test_two_stations_give_the_mean(section, cambered):
    out = interpolate_airfoils([section, cambered], [0.0, 1.0], [0.5])
    np.testing.assert_allclose(out[0].points, (section + cambered).points, atol=1e-12)


def test_decreasing_stations(section):
    family = [scaled(section, k, origin_at_le=False) for k in (3.0, 2.0, 1.0)]
    out = interpolate_airfoils(family, [1.0, 0.5, 0.0], [0.25, 1.0])
    np.testing.assert_allclose(out[0].points, section.points * 1.5, atol=1e-12)
    np.testing.assert_array_equal(out[1].points, family[0].points)


def test_no_overshoot_between_flat_stations(section):
    offsets = [0.0, 0.0, 0.0, 1.0, 1.0, 1.0]
    family = [translated(section, 0.0, d) for d in offsets]
    targets = np.linspace(1.0, 4.0, 31)
    out = interpolate_airfoils(family, np.arange(6.0), targets)
    shift = np.array([af.y[0] - section.y[0] for af in out])
    assert shift.min() >= -1e-12
    assert shift.max() <= 1.0 + 1e-12
    np.testing.assert_allclose(shift[targets <= 2.0], 0.0, atol=1e-12)


def test_targets_out_of_range(family):
    with pytest.raises(ValueError):
        interpolate_airfoils(family, [0.0, 0.4, 1.0], [1.5])
    out = interpolate_airfoils(family, [0.0, 0.4, 1.0], [1.5], extrapolate=True)
    assert np.isfinite(out[0].points).all()


def test_inputs_are_not_mutated(family):
    before = [af.points for af in family]
    out = interpolate_airfoils(family, [0.0, 0.4, 1.0], [0.0, 0.7])
    out[0].x[0] = 123.0
    for af, pts in zip(family, before):
        np.testing.assert_array_equal(af.points, pts)


@pytest.mark.parametrize("span", [
    [0.0, 1.0],            # wrong length
    [0.0, 0.5, 0.5],       # not strictly monotonic
    [0.0, 1.0, 0.5],       # not monotonic
    [0.0, np.nan, 1.0],    # non-finite
])
def test_invalid_span(family, span):
    with pytest.raises(ValueError):
        interpolate_airfoils(family, span, [0.2])


def test_needs_two_airfoils(section):
    with pytest.raises(ValueError):
        interpolate_airfoils([section], [0.0], [0.0])
