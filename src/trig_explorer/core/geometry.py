"""Line-segment constructions of the six functions on the unit circle.

All coordinates are in the inverted-Y frame of the drawing surface: the
circle is centred at ``center`` and a positive sine moves the point up,
i.e. towards smaller Y. This matches :func:`~trig_explorer.core.pointer.pointer_to_angle`,
so feeding :attr:`CircleGeometry.point` back through it reproduces the angle.

Constructions (``c`` = centre, ``r`` = radius, ``P`` = point on circle):

* ``cos``: ``c`` to the foot of ``P`` on the horizontal axis
* ``sin``: that foot up (or down) to ``P``
* ``tan``: along the tangent line at angle 0, from ``(c.x + r, c.y)``
* ``sec``: from ``c`` along the line OP to the end of the tangent segment
* ``cot``: along the tangent line at angle π/2, from ``(c.x, c.y - r)``
* ``csc``: from ``c`` along the line OP to the end of the cotangent segment

A ratio construction is left out entirely when its reading is undefined or
its magnitude reaches the configured clamp; it is never truncated.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from ..models import DEFAULT_THRESHOLDS, FUNCTION_IDS, Thresholds
from .evaluator import TrigReading, evaluate

Point = Tuple[float, float]

RADIUS_TAG = "radius"
AXIS_X_TAG = "axis-x"
AXIS_Y_TAG = "axis-y"
SEGMENT_TAGS: Tuple[str, ...] = FUNCTION_IDS + (RADIUS_TAG, AXIS_X_TAG, AXIS_Y_TAG)


@dataclass(frozen=True)
class GeometrySegment:
    tag: str
    start: Point
    end: Point


@dataclass(frozen=True)
class CircleGeometry:
    """Everything needed to draw the unit-circle diagram for one angle."""

    center: Point
    radius: float
    point: Point
    reading: TrigReading
    segments: Tuple[GeometrySegment, ...]

    def by_tag(self, tag: str) -> Optional[GeometrySegment]:
        for seg in self.segments:
            if seg.tag == tag:
                return seg
        return None

    def tags(self) -> Tuple[str, ...]:
        return tuple(seg.tag for seg in self.segments)


def _within_clamp(
    function_id: str, reading: TrigReading, thresholds: Thresholds
) -> Optional[float]:
    value = reading.value(function_id)
    if value is None or abs(value) >= thresholds.segment_clamp(function_id):
        return None
    return value


def build_circle_geometry(
    angle: float,
    radius: float,
    center: Point = (0.0, 0.0),
    functions: Iterable[str] = FUNCTION_IDS,
    thresholds: Thresholds = DEFAULT_THRESHOLDS,
) -> CircleGeometry:
    """Build the segment list for ``angle`` on a circle of ``radius``.

    ``functions`` selects which of the six constructions are produced; the
    radius and both axes are always included.
    """
    if radius <= 0:
        raise ValueError(f"Radius must be positive, got {radius!r}.")
    wanted = set(functions)
    unknown = wanted.difference(FUNCTION_IDS)
    if unknown:
        raise ValueError(f"Unknown trigonometric functions: {sorted(unknown)}")

    r = float(radius)
    cx, cy = float(center[0]), float(center[1])
    reading = evaluate(angle, thresholds)
    px = cx + r * reading.cos
    py = cy - r * reading.sin
    origin = (cx, cy)
    foot = (px, cy)

    segments = [
        GeometrySegment(AXIS_X_TAG, (cx - r, cy), (cx + r, cy)),
        GeometrySegment(AXIS_Y_TAG, (cx, cy - r), (cx, cy + r)),
        GeometrySegment(RADIUS_TAG, origin, (px, py)),
    ]
    if "cos" in wanted:
        segments.append(GeometrySegment("cos", origin, foot))
    if "sin" in wanted:
        segments.append(GeometrySegment("sin", foot, (px, py)))

    tan = _within_clamp("tan", reading, thresholds)
    if tan is not None and "tan" in wanted:
        segments.append(
            GeometrySegment("tan", (cx + r, cy), (cx + r, cy - r * tan))
        )
    sec = _within_clamp("sec", reading, thresholds)
    if sec is not None and reading.tan is not None and "sec" in wanted:
        segments.append(
            GeometrySegment("sec", origin, (cx + r, cy - r * reading.tan))
        )

    cot = _within_clamp("cot", reading, thresholds)
    if cot is not None and "cot" in wanted:
        segments.append(
            GeometrySegment("cot", (cx, cy - r), (cx + r * cot, cy - r))
        )
    csc = _within_clamp("csc", reading, thresholds)
    if csc is not None and reading.cot is not None and "csc" in wanted:
        segments.append(
            GeometrySegment("csc", origin, (cx + r * reading.cot, cy - r))
        )

    return CircleGeometry(
        center=origin,
        radius=r,
        point=(px, py),
        reading=reading,
        segments=tuple(segments),
    )


__all__ = [
    "Point",
    "GeometrySegment",
    "CircleGeometry",
    "SEGMENT_TAGS",
    "RADIUS_TAG",
    "AXIS_X_TAG",
    "AXIS_Y_TAG",
    "build_circle_geometry",
]
