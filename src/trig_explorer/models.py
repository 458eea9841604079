"""Dataclasses describing thresholds and user preferences for trig_explorer."""

from __future__ import annotations

import json
import math
from dataclasses import asdict, dataclass, field
from typing import Dict, List, Tuple

FUNCTION_IDS: Tuple[str, ...] = ("sin", "cos", "tan", "cot", "sec", "csc")


@dataclass(frozen=True)
class Thresholds:
    """Numeric bounds used when turning trig values into something drawable.

    ``epsilon`` is the only mathematical threshold: a denominator whose
    magnitude falls below it makes the ratio undefined. The remaining fields
    are presentation limits and are tuned independently of each other.
    """

    epsilon: float = 0.01
    value_display_bound: float = 100.0
    tan_segment_clamp: float = 10.0
    cot_segment_clamp: float = 10.0
    sec_segment_clamp: float = 5.0
    csc_segment_clamp: float = 5.0
    wave_bound: float = 3.0

    def __post_init__(self) -> None:
        for name, value in asdict(self).items():
            if not math.isfinite(value) or value <= 0.0:
                raise ValueError(f"Threshold {name} must be a positive number, got {value!r}.")

    def segment_clamp(self, function_id: str) -> float:
        return float(getattr(self, f"{function_id}_segment_clamp"))


DEFAULT_THRESHOLDS = Thresholds()


@dataclass
class WaveParams:
    """Sampling configuration for the waveform diagram."""

    resolution: int = 100


@dataclass
class UIState:
    """User-interface level preferences for the explorer window."""

    circle_radius: int = 120
    visible_functions: List[str] = field(default_factory=lambda: list(FUNCTION_IDS))
    show_identity: bool = True


@dataclass
class AppConfig:
    """Persisted configuration for the application (never the angle itself)."""

    thresholds: Thresholds = field(default_factory=Thresholds)
    wave: WaveParams = field(default_factory=WaveParams)
    ui: UIState = field(default_factory=UIState)

    def to_json(self) -> str:
        return json.dumps(asdict(self), indent=2)

    @staticmethod
    def from_json(text: str) -> "AppConfig":
        data: Dict = json.loads(text)
        t = data.get("thresholds", {})
        w = data.get("wave", {})
        u = data.get("ui", {})
        defaults = Thresholds()
        visible = u.get("visible_functions", list(FUNCTION_IDS))
        return AppConfig(
            thresholds=Thresholds(
                epsilon=float(t.get("epsilon", defaults.epsilon)),
                value_display_bound=float(
                    t.get("value_display_bound", defaults.value_display_bound)
                ),
                tan_segment_clamp=float(
                    t.get("tan_segment_clamp", defaults.tan_segment_clamp)
                ),
                cot_segment_clamp=float(
                    t.get("cot_segment_clamp", defaults.cot_segment_clamp)
                ),
                sec_segment_clamp=float(
                    t.get("sec_segment_clamp", defaults.sec_segment_clamp)
                ),
                csc_segment_clamp=float(
                    t.get("csc_segment_clamp", defaults.csc_segment_clamp)
                ),
                wave_bound=float(t.get("wave_bound", defaults.wave_bound)),
            ),
            wave=WaveParams(resolution=max(1, int(w.get("resolution", 100)))),
            ui=UIState(
                circle_radius=max(1, int(u.get("circle_radius", 120))),
                visible_functions=[str(f) for f in visible if f in FUNCTION_IDS],
                show_identity=bool(u.get("show_identity", True)),
            ),
        )


__all__ = [
    "FUNCTION_IDS",
    "Thresholds",
    "DEFAULT_THRESHOLDS",
    "WaveParams",
    "UIState",
    "AppConfig",
]
