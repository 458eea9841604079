"""Utility helpers for trig_explorer."""

from .geometry import TWO_PI, clamp, format_angle, normalize_angle, plot_to_screen

__all__ = ["TWO_PI", "clamp", "format_angle", "normalize_angle", "plot_to_screen"]
