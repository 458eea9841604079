"""Pointer drag state machine feeding the angle model."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Tuple

from .angle import AngleModel
from .pointer import pointer_to_angle

logger = logging.getLogger(__name__)


class DragState(Enum):
    IDLE = "idle"
    DRAGGING = "dragging"


class DragController:
    """Tracks whether the pointer is engaged and turns positions into angles.

    ``pointer_release`` must also be wired to releases that happen outside
    the interactive element; otherwise a drag that ends off the element
    stays active.
    """

    def __init__(
        self, model: AngleModel, center: Tuple[float, float] = (0.0, 0.0)
    ) -> None:
        self.model = model
        self.state = DragState.IDLE
        self._center = (float(center[0]), float(center[1]))

    @property
    def center(self) -> Tuple[float, float]:
        return self._center

    @property
    def dragging(self) -> bool:
        return self.state is DragState.DRAGGING

    def set_center(self, x: float, y: float) -> None:
        self._center = (float(x), float(y))

    def _update_angle(self, x: float, y: float) -> None:
        cx, cy = self._center
        self.model.set(pointer_to_angle(x, y, cx, cy))

    def pointer_engage(self, x: float, y: float) -> None:
        if self.state is DragState.IDLE:
            logger.debug("Drag started at (%.1f, %.1f).", x, y)
            self.state = DragState.DRAGGING
        self._update_angle(x, y)

    def pointer_move(self, x: float, y: float) -> bool:
        """Update the angle while dragging; returns False (no-op) when idle."""
        if self.state is not DragState.DRAGGING:
            return False
        self._update_angle(x, y)
        return True

    def pointer_release(self) -> None:
        if self.state is DragState.DRAGGING:
            logger.debug("Drag released.")
        self.state = DragState.IDLE


__all__ = ["DragState", "DragController"]
