"""Configuration dataclasses and their JSON persistence."""

from __future__ import annotations

import json

import pytest

from trig_explorer.models import (
    DEFAULT_THRESHOLDS,
    FUNCTION_IDS,
    AppConfig,
    Thresholds,
    UIState,
    WaveParams,
)


def test_default_thresholds() -> None:
    t = DEFAULT_THRESHOLDS
    assert t.epsilon == 0.01
    assert t.value_display_bound == 100.0
    assert t.wave_bound == 3.0
    assert t.segment_clamp("tan") == 10.0
    assert t.segment_clamp("cot") == 10.0
    assert t.segment_clamp("sec") == 5.0
    assert t.segment_clamp("csc") == 5.0


def test_config_json_round_trip() -> None:
    cfg = AppConfig(
        thresholds=Thresholds(epsilon=0.001, wave_bound=4.0),
        wave=WaveParams(resolution=250),
        ui=UIState(circle_radius=90, visible_functions=["sin", "cos", "tan"]),
    )
    restored = AppConfig.from_json(cfg.to_json())
    assert restored == cfg


def test_config_never_stores_an_angle() -> None:
    data = json.loads(AppConfig().to_json())
    assert set(data) == {"thresholds", "wave", "ui"}
    assert "angle" not in json.dumps(data)


def test_missing_keys_fall_back_to_defaults() -> None:
    cfg = AppConfig.from_json(json.dumps({"ui": {"circle_radius": 80}}))
    assert cfg.ui.circle_radius == 80
    assert cfg.ui.visible_functions == list(FUNCTION_IDS)
    assert cfg.thresholds == Thresholds()
    assert cfg.wave.resolution == 100


def test_unknown_functions_and_bad_sizes_are_cleaned() -> None:
    text = json.dumps(
        {
            "wave": {"resolution": 0},
            "ui": {"circle_radius": -3, "visible_functions": ["sin", "sinh", "sec"]},
        }
    )
    cfg = AppConfig.from_json(text)
    assert cfg.ui.visible_functions == ["sin", "sec"]
    assert cfg.ui.circle_radius == 1
    assert cfg.wave.resolution == 1


def test_malformed_json_raises_value_error() -> None:
    with pytest.raises(ValueError):
        AppConfig.from_json("{not json")


@pytest.mark.parametrize(
    "overrides",
    [
        {"epsilon": 0.0},
        {"epsilon": -0.01},
        {"value_display_bound": 0.0},
        {"tan_segment_clamp": -1.0},
        {"csc_segment_clamp": 0.0},
        {"wave_bound": float("nan")},
    ],
)
def test_thresholds_must_be_positive(overrides) -> None:
    with pytest.raises(ValueError):
        Thresholds(**overrides)
    with pytest.raises(ValueError):
        AppConfig.from_json(json.dumps({"thresholds": overrides}))
