"""Geometry helpers shared by the core and the UI layers."""

import math
from typing import Tuple

import numpy as np

TWO_PI = 2.0 * math.pi


def normalize_angle(angle: float) -> float:
    """Map ``angle`` (radians) into the half-open interval ``[0, 2π)``."""
    wrapped = math.fmod(angle, TWO_PI)
    if wrapped < 0.0:
        wrapped += TWO_PI
    # fmod of a tiny negative value plus 2π rounds back up to exactly 2π
    if wrapped >= TWO_PI:
        wrapped = 0.0
    return wrapped


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp ``value`` to the inclusive range ``[lo, hi]``."""
    return max(lo, min(hi, value))


def format_angle(angle: float) -> str:
    """Return the ``"45° / 0.25π"`` label used next to the angle slider."""
    a = normalize_angle(angle)
    return f"{math.degrees(a):.0f}° / {a / math.pi:.2f}π"


def plot_to_screen(
    points: np.ndarray,
    origin: Tuple[float, float],
    x_scale: float,
    y_scale: float,
) -> np.ndarray:
    """Map ``(t, value)`` rows into an inverted-Y screen frame.

    ``origin`` is the screen position of ``(0, 0)``; ``x_scale`` and
    ``y_scale`` are pixels per unit along each axis.
    """
    pts = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    out = np.empty_like(pts)
    out[:, 0] = origin[0] + pts[:, 0] * x_scale
    out[:, 1] = origin[1] - pts[:, 1] * y_scale
    return out


__all__ = ["TWO_PI", "normalize_angle", "clamp", "format_angle", "plot_to_screen"]
