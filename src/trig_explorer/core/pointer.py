"""Pointer position to angle conversion."""

import math

from ..utils import TWO_PI


def pointer_to_angle(
    pointer_x: float, pointer_y: float, center_x: float, center_y: float
) -> float:
    """Angle of the vector ``center -> pointer`` in ``[0, 2π)``.

    Screen Y grows downward while the mathematical angle grows
    counter-clockwise, so the vertical component is negated. A pointer that
    coincides with the centre yields whatever ``math.atan2(0.0, 0.0)``
    returns (``0.0``); it never raises.
    """
    dx = float(pointer_x) - float(center_x)
    dy = -(float(pointer_y) - float(center_y))
    angle = math.atan2(dy, dx)
    if angle < 0.0:
        angle += TWO_PI
    # atan2 of a tiny negative dy plus 2π rounds up to exactly 2π
    if angle >= TWO_PI:
        angle = 0.0
    return angle


__all__ = ["pointer_to_angle"]
