"""Evaluation of the six trigonometric functions at a single angle."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Optional

from ..models import DEFAULT_THRESHOLDS, FUNCTION_IDS, Thresholds


@dataclass(frozen=True)
class TrigReading:
    """Snapshot of sin, cos, tan, cot, sec and csc at ``angle``.

    The ratio fields are ``None`` when their denominator is within
    ``epsilon`` of zero. They never hold NaN or an infinity.
    """

    angle: float
    sin: float
    cos: float
    tan: Optional[float]
    cot: Optional[float]
    sec: Optional[float]
    csc: Optional[float]

    def value(self, function_id: str) -> Optional[float]:
        if function_id not in FUNCTION_IDS:
            raise ValueError(f"Unknown trigonometric function {function_id!r}.")
        return getattr(self, function_id)

    def as_dict(self) -> Dict[str, Optional[float]]:
        return {name: getattr(self, name) for name in FUNCTION_IDS}


def evaluate(angle: float, thresholds: Thresholds = DEFAULT_THRESHOLDS) -> TrigReading:
    """Compute a :class:`TrigReading` for ``angle`` (radians, any real)."""
    s = math.sin(angle)
    c = math.cos(angle)
    eps = thresholds.epsilon
    cos_ok = abs(c) >= eps
    sin_ok = abs(s) >= eps
    return TrigReading(
        angle=float(angle),
        sin=s,
        cos=c,
        tan=s / c if cos_ok else None,
        cot=c / s if sin_ok else None,
        sec=1.0 / c if cos_ok else None,
        csc=1.0 / s if sin_ok else None,
    )


def display_value(
    value: Optional[float], thresholds: Thresholds = DEFAULT_THRESHOLDS
) -> Optional[float]:
    """Return ``value`` unless it is undefined or too large to show as a number."""
    if value is None or abs(value) > thresholds.value_display_bound:
        return None
    return value


def format_value(
    value: Optional[float],
    thresholds: Thresholds = DEFAULT_THRESHOLDS,
    digits: int = 3,
) -> str:
    shown = display_value(value, thresholds)
    if shown is None:
        return "∞"
    text = f"{shown:.{digits}f}"
    # no "-0.000"
    if float(text) == 0.0:
        text = f"{0.0:.{digits}f}"
    return text


__all__ = ["TrigReading", "evaluate", "display_value", "format_value"]
