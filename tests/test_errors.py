import pytest

from foilwise import (
    GeometryError, InconsistentPointCount, DegenerateGeometry,
    GeometryInconsistency, UnsupportedFormat,
)


@pytest.mark.parametrize("cls", [
    InconsistentPointCount, DegenerateGeometry, GeometryInconsistency, UnsupportedFormat,
])
def test_hierarchy(cls):
    assert issubclass(cls, GeometryError)
    assert issubclass(cls, ValueError)


def test_message_without_context():
    assert str(DegenerateGeometry("Zero area.")) == "Zero area."


def test_context_suffix_is_sorted_and_truncated():
    err = InconsistentPointCount("Mismatch.", {"n_b": 51, "n_a": 50, "names": "x" * 300})
    text = str(err)
    assert text.startswith("Mismatch. | n_a=50, n_b=51, names=")
    assert text.endswith("...")
    assert err.context["n_a"] == 50
