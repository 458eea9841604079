import math

from hypothesis import given
from hypothesis import strategies as st
import numpy as np
import pytest

from trig_explorer.utils import TWO_PI, clamp, format_angle, normalize_angle, plot_to_screen


@given(angle=st.floats(min_value=-1e6, max_value=1e6))
def test_normalize_angle_range(angle: float) -> None:
    assert 0.0 <= normalize_angle(angle) < TWO_PI


def test_normalize_angle_values() -> None:
    assert normalize_angle(-1e-20) == 0.0
    assert normalize_angle(TWO_PI) == 0.0
    assert normalize_angle(3.5 * math.pi) == pytest.approx(1.5 * math.pi)


def test_clamp() -> None:
    assert clamp(5.0, 0.0, 1.0) == 1.0
    assert clamp(-5.0, 0.0, 1.0) == 0.0
    assert clamp(0.5, 0.0, 1.0) == 0.5


def test_format_angle() -> None:
    assert format_angle(math.pi / 4) == "45° / 0.25π"
    assert format_angle(-math.pi / 2) == "270° / 1.50π"


def test_plot_to_screen_inverts_y() -> None:
    pts = np.array([[0.0, 0.0], [math.pi, 1.0], [TWO_PI, -2.0]])
    out = plot_to_screen(pts, origin=(20.0, 100.0), x_scale=10.0, y_scale=50.0)
    assert np.allclose(out[:, 0], [20.0, 20.0 + 10.0 * math.pi, 20.0 + 10.0 * TWO_PI])
    assert np.allclose(out[:, 1], [100.0, 50.0, 200.0])


def test_plot_to_screen_accepts_single_point() -> None:
    out = plot_to_screen((1.0, 1.0), origin=(0.0, 0.0), x_scale=2.0, y_scale=3.0)
    assert out.shape == (1, 2)
    assert tuple(out[0]) == (2.0, -3.0)
