"""Waveform sampling, discontinuity breaks and the current-position marker."""

from __future__ import annotations

import math

from hypothesis import given, settings
from hypothesis import strategies as st
import numpy as np
import pytest

from trig_explorer.core import marker_position, sample, sample_all
from trig_explorer.models import FUNCTION_IDS

POLES = {
    "tan": (math.pi / 2, 3 * math.pi / 2),
    "sec": (math.pi / 2, 3 * math.pi / 2),
    "cot": (math.pi,),
    "csc": (math.pi,),
}


@pytest.mark.parametrize("function_id", ["sin", "cos"])
def test_always_defined_functions_are_one_polyline(function_id: str) -> None:
    wave = sample(function_id, resolution=100)
    assert wave.is_continuous
    (line,) = wave.polylines
    assert line.shape == (101, 2)
    assert line[0, 0] == 0.0
    assert line[-1, 0] == pytest.approx(2 * math.pi)
    assert np.allclose(line[:, 1], getattr(np, function_id)(line[:, 0]))


@given(resolution=st.integers(min_value=4, max_value=2000))
@settings(deadline=None, max_examples=60)
def test_tan_splits_at_both_asymptotes(resolution: int) -> None:
    wave = sample("tan", resolution=resolution)
    assert len(wave.polylines) >= 2
    for line in wave.polylines:
        for pole in POLES["tan"]:
            assert not (line[0, 0] < pole < line[-1, 0])


@pytest.mark.parametrize(
    ("function_id", "expected"),
    [("tan", 3), ("sec", 3), ("cot", 2), ("csc", 2)],
)
def test_branch_counts_at_default_resolution(function_id: str, expected: int) -> None:
    wave = sample(function_id)
    assert len(wave.polylines) == expected
    for line in wave.polylines:
        assert np.all(np.abs(line[:, 1]) <= 3.0)
        for pole in POLES[function_id]:
            assert not (line[0, 0] < pole < line[-1, 0])


def test_pole_between_samples_is_not_bridged() -> None:
    # resolution 6 never lands near tan's bound, only the sign change breaks it
    wave = sample("tan", resolution=6)
    assert len(wave.polylines) == 3
    assert [len(line) for line in wave.polylines] == [2, 3, 2]


def test_bound_controls_breaks() -> None:
    tight = sample("sec", resolution=200, bound=1.5)
    loose = sample("sec", resolution=200, bound=50.0)
    assert tight.point_count() < loose.point_count()
    assert max(np.max(np.abs(line[:, 1])) for line in tight.polylines) <= 1.5


def test_custom_domain() -> None:
    wave = sample("sin", resolution=4, domain=(0.0, math.pi))
    xs = wave.polylines[0][:, 0]
    assert np.allclose(xs, np.linspace(0.0, math.pi, 5))


def test_sample_all_defaults_to_every_function() -> None:
    waves = sample_all(resolution=20)
    assert list(waves) == list(FUNCTION_IDS)
    assert all(w.function == name for name, w in waves.items())


def test_invalid_arguments() -> None:
    with pytest.raises(ValueError):
        sample("tan", resolution=0)
    with pytest.raises(ValueError):
        sample("arcsin")
    with pytest.raises(ValueError):
        marker_position("arcsin", 1.0)


def test_marker_position_on_curve() -> None:
    x, y = marker_position("tan", math.pi / 4)
    assert x == pytest.approx(math.pi / 4)
    assert y == pytest.approx(1.0)

    x, y = marker_position("sin", 2 * math.pi + 0.5)
    assert x == pytest.approx(0.5)
    assert y == pytest.approx(math.sin(0.5))


def test_marker_hidden_near_asymptotes() -> None:
    assert marker_position("tan", math.pi / 2) is None
    assert marker_position("cot", 0.0) is None
    assert marker_position("csc", math.pi) is None
    # sec(1.4) ~ 5.88 is defined but outside the wave bound
    assert marker_position("sec", 1.4) is None
    assert marker_position("sec", 1.4, bound=10.0) is not None


@given(theta=st.floats(min_value=-50.0, max_value=50.0))
def test_marker_never_exceeds_bound(theta: float) -> None:
    for function_id in FUNCTION_IDS:
        marker = marker_position(function_id, theta)
        if marker is not None:
            assert 0.0 <= marker[0] < 2 * math.pi
            assert abs(marker[1]) <= 3.0
