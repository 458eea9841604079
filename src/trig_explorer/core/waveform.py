"""Sampling of the six functions over one period into drawable polylines."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional, Tuple

import numpy as np

from ..models import DEFAULT_THRESHOLDS, FUNCTION_IDS, Thresholds
from ..utils import TWO_PI, normalize_angle
from .evaluator import evaluate

Point = Tuple[float, float]
Domain = Tuple[float, float]

DEFAULT_RESOLUTION = 100
DEFAULT_DOMAIN: Domain = (0.0, TWO_PI)

_ArrayFn = Callable[[np.ndarray], np.ndarray]

# function id -> (numerator, denominator); None marks an always-defined function
_RATIOS: Dict[str, Tuple[_ArrayFn, Optional[_ArrayFn]]] = {
    "sin": (np.sin, None),
    "cos": (np.cos, None),
    "tan": (np.sin, np.cos),
    "cot": (np.cos, np.sin),
    "sec": (np.ones_like, np.cos),
    "csc": (np.ones_like, np.sin),
}


@dataclass(frozen=True)
class WavePath:
    """Polylines of ``(t, value)`` rows; consecutive polylines are disjoint."""

    function: str
    polylines: Tuple[np.ndarray, ...]

    @property
    def is_continuous(self) -> bool:
        return len(self.polylines) == 1

    def point_count(self) -> int:
        return int(sum(len(p) for p in self.polylines))


def _check_function(function_id: str) -> None:
    if function_id not in _RATIOS:
        raise ValueError(f"Unknown trigonometric function {function_id!r}.")


def _split_runs(keep: np.ndarray, breaks: np.ndarray) -> List[Tuple[int, int]]:
    """Return ``[start, stop)`` index runs of kept samples.

    ``breaks[i]`` is True when samples ``i`` and ``i + 1`` must not be joined
    even though both are kept.
    """
    runs: List[Tuple[int, int]] = []
    start: Optional[int] = None
    for i, ok in enumerate(keep):
        if not ok:
            if start is not None:
                runs.append((start, i))
                start = None
            continue
        if start is None:
            start = i
        elif breaks[i - 1]:
            runs.append((start, i))
            start = i
    if start is not None:
        runs.append((start, len(keep)))
    return runs


def sample(
    function_id: str,
    resolution: int = DEFAULT_RESOLUTION,
    domain: Domain = DEFAULT_DOMAIN,
    bound: float = DEFAULT_THRESHOLDS.wave_bound,
) -> WavePath:
    """Evaluate ``function_id`` at ``resolution + 1`` evenly spaced points.

    A polyline ends where the value is non-finite or exceeds ``bound`` and a
    new one starts at the next sample back within bound. For the ratio
    functions it also ends where the denominator changes sign between two
    neighbouring samples, so a pole that falls between samples is never
    bridged by a steep connecting segment.
    """
    _check_function(function_id)
    n = int(resolution)
    if n < 1:
        raise ValueError(f"Resolution must be at least 1, got {resolution!r}.")
    lo, hi = float(domain[0]), float(domain[1])
    t = np.linspace(lo, hi, n + 1)

    numerator, denominator = _RATIOS[function_id]
    if denominator is None:
        values = numerator(t)
        return WavePath(function_id, (np.column_stack((t, values)),))

    den = denominator(t)
    with np.errstate(divide="ignore", invalid="ignore"):
        values = numerator(t) / den
    keep = np.isfinite(values) & (np.abs(values) <= bound)
    breaks = np.signbit(den[:-1]) != np.signbit(den[1:])

    polylines = tuple(
        np.column_stack((t[a:b], values[a:b])) for a, b in _split_runs(keep, breaks)
    )
    return WavePath(function_id, polylines)


def sample_all(
    functions: Iterable[str] = FUNCTION_IDS,
    resolution: int = DEFAULT_RESOLUTION,
    domain: Domain = DEFAULT_DOMAIN,
    bound: float = DEFAULT_THRESHOLDS.wave_bound,
) -> Dict[str, WavePath]:
    return {f: sample(f, resolution, domain, bound) for f in functions}


def marker_position(
    function_id: str,
    angle: float,
    bound: float = DEFAULT_THRESHOLDS.wave_bound,
    thresholds: Thresholds = DEFAULT_THRESHOLDS,
) -> Optional[Point]:
    """Point on ``function_id``'s graph at ``angle``, or None when out of bound.

    The X coordinate is the angle normalized into ``[0, 2π)``. This is
    evaluated exactly at ``angle`` and does not depend on the sampling
    resolution.
    """
    _check_function(function_id)
    value = evaluate(angle, thresholds).value(function_id)
    if value is None or not math.isfinite(value) or abs(value) > bound:
        return None
    return normalize_angle(angle), value


__all__ = [
    "WavePath",
    "DEFAULT_RESOLUTION",
    "DEFAULT_DOMAIN",
    "sample",
    "sample_all",
    "marker_position",
]
