import pytest

from foilwise import ConfigError
from foilwise.config import DEFAULTS, build_settings


def test_defaults():
    s = build_settings()
    assert s == DEFAULTS
    assert s["pairing"] == "truncate"
    assert s["extrapolate"] is False
    assert s is not DEFAULTS


def test_overrides_are_normalized():
    s = build_settings({" Pairing ": "strict", "EXTRAPOLATE": True})
    assert s["pairing"] == "strict"
    assert s["extrapolate"] is True
    assert s["canonicalize"] is False


@pytest.mark.parametrize("params", [
    {"unknown": 1},
    {"pairing": "longest"},
    {"extrapolate": "yes"},
    {"canonicalize": 1},
    {"float_format": 8},
    {"float_format": "q"},
])
def test_invalid_settings(params):
    with pytest.raises(ConfigError):
        build_settings(params)


def test_error_message_carries_context():
    with pytest.raises(ConfigError) as exc:
        build_settings({"pairing": "longest"})
    assert "value='longest'" in str(exc.value)
    assert exc.value.context["value"] == "longest"
