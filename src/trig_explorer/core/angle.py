"""The single owned angle value shared by every derived view."""

from __future__ import annotations

import logging
import math
from typing import Callable, List

from ..utils import normalize_angle

logger = logging.getLogger(__name__)

DEFAULT_ANGLE = math.pi / 4.0

AngleListener = Callable[[float], None]


class AngleModel:
    """Holds the current angle in radians and notifies subscribers on change.

    Any finite real number is accepted; the display form is obtained through
    :meth:`normalized` and :meth:`degrees`. Listeners are called synchronously
    in subscription order, so every derived value is recomputed before
    :meth:`set` returns.
    """

    def __init__(self, initial: float = DEFAULT_ANGLE) -> None:
        self._angle = self._checked(initial)
        self._version = 0
        self._listeners: List[AngleListener] = []

    @staticmethod
    def _checked(angle: float) -> float:
        value = float(angle)
        if not math.isfinite(value):
            raise ValueError(f"Angle must be a finite real number, got {angle!r}.")
        return value

    @property
    def version(self) -> int:
        return self._version

    def get(self) -> float:
        return self._angle

    def set(self, angle: float) -> None:
        value = self._checked(angle)
        self._angle = value
        self._version += 1
        for listener in list(self._listeners):
            listener(value)

    def set_degrees(self, degrees: float) -> None:
        """Slider entry point: ``degrees`` (conventionally 0-360) in, radians stored."""
        self.set(math.radians(float(degrees)))

    def normalized(self) -> float:
        return normalize_angle(self._angle)

    def degrees(self) -> float:
        return math.degrees(self.normalized())

    def subscribe(self, listener: AngleListener) -> Callable[[], None]:
        """Register ``listener`` and return a callable that removes it again."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe


__all__ = ["AngleModel", "AngleListener", "DEFAULT_ANGLE"]
