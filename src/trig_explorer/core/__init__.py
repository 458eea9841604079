"""Angle interaction and derived geometry/waveform computations."""

from ..models import DEFAULT_THRESHOLDS, FUNCTION_IDS, Thresholds
from .angle import DEFAULT_ANGLE, AngleModel
from .drag import DragController, DragState
from .evaluator import TrigReading, display_value, evaluate, format_value
from .geometry import CircleGeometry, GeometrySegment, build_circle_geometry
from .pointer import pointer_to_angle
from .waveform import WavePath, marker_position, sample, sample_all

__all__ = [
    "AngleModel",
    "DEFAULT_ANGLE",
    "DragController",
    "DragState",
    "TrigReading",
    "evaluate",
    "display_value",
    "format_value",
    "CircleGeometry",
    "GeometrySegment",
    "build_circle_geometry",
    "pointer_to_angle",
    "WavePath",
    "sample",
    "sample_all",
    "marker_position",
    "Thresholds",
    "DEFAULT_THRESHOLDS",
    "FUNCTION_IDS",
]
