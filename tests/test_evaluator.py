"""Trig readings, asymptote handling and readout formatting."""

from __future__ import annotations

import math

from hypothesis import assume, given
from hypothesis import strategies as st
import pytest

from trig_explorer.core import evaluate, format_value
from trig_explorer.core.evaluator import display_value
from trig_explorer.models import FUNCTION_IDS, Thresholds

angles = st.floats(min_value=-1e4, max_value=1e4, allow_nan=False, allow_infinity=False)


@given(theta=st.floats(min_value=-1e6, max_value=1e6, allow_nan=False))
def test_pythagorean_identity(theta: float) -> None:
    r = evaluate(theta)
    assert r.sin**2 + r.cos**2 == pytest.approx(1.0, abs=1e-6)


@given(theta=angles)
def test_tan_is_sin_over_cos_where_defined(theta: float) -> None:
    r = evaluate(theta)
    if r.tan is None:
        assert abs(r.cos) < 0.01
    else:
        assert r.tan == pytest.approx(r.sin / r.cos)


@given(theta=st.floats(min_value=-100.0, max_value=100.0, allow_nan=False))
def test_readings_are_two_pi_periodic(theta: float) -> None:
    assume(abs(math.cos(theta)) > 0.02 and abs(math.sin(theta)) > 0.02)
    a = evaluate(theta).as_dict()
    b = evaluate(theta + 2 * math.pi).as_dict()
    for name in FUNCTION_IDS:
        assert a[name] is not None and b[name] is not None
        assert b[name] == pytest.approx(a[name], abs=1e-6)


@given(theta=angles)
def test_readings_never_leak_nan_or_infinity(theta: float) -> None:
    for value in evaluate(theta).as_dict().values():
        assert value is None or math.isfinite(value)


@pytest.mark.parametrize(
    ("angle", "field"),
    [
        (math.pi / 2, "tan"),
        (math.pi / 2, "sec"),
        (3 * math.pi / 2, "tan"),
        (0.0, "cot"),
        (0.0, "csc"),
        (math.pi, "csc"),
        (math.pi, "cot"),
    ],
)
def test_asymptotes_are_undefined(angle: float, field: str) -> None:
    assert evaluate(angle).value(field) is None


def test_forty_five_degrees() -> None:
    r = evaluate(math.pi / 4)
    shown = {name: format_value(v) for name, v in r.as_dict().items()}
    assert shown == {
        "sin": "0.707",
        "cos": "0.707",
        "tan": "1.000",
        "cot": "1.000",
        "sec": "1.414",
        "csc": "1.414",
    }


def test_zero_angle() -> None:
    r = evaluate(0.0)
    assert r.sin == 0.0
    assert r.cos == 1.0
    assert r.tan == 0.0
    assert r.cot is None
    assert r.sec == 1.0
    assert r.csc is None
    assert format_value(r.cot) == "∞"
    assert format_value(r.tan) == "0.000"


def test_epsilon_is_tunable() -> None:
    angle = math.pi / 2 - 0.05  # cos ~ 0.05
    assert evaluate(angle).tan is not None
    assert evaluate(angle, Thresholds(epsilon=0.1)).tan is None


def test_display_value_hides_huge_magnitudes() -> None:
    assert display_value(99.0) == 99.0
    assert display_value(-150.0) is None
    assert display_value(None) is None
    assert display_value(150.0, Thresholds(value_display_bound=200.0)) == 150.0


def test_format_value_has_no_negative_zero() -> None:
    assert format_value(-0.0001) == "0.000"
    assert format_value(-0.5) == "-0.500"
    assert format_value(1.23456, digits=2) == "1.23"


def test_unknown_function_is_rejected() -> None:
    with pytest.raises(ValueError):
        evaluate(1.0).value("sinh")
