"""Qt helper utilities."""

from typing import Iterable, Tuple

import numpy as np
from PySide6 import QtCore, QtGui


def to_qpointf(point: Tuple[float, float]) -> QtCore.QPointF:
    return QtCore.QPointF(float(point[0]), float(point[1]))


def polylines_to_path(polylines: Iterable[np.ndarray]) -> QtGui.QPainterPath:
    """Build one :class:`~PySide6.QtGui.QPainterPath` from screen-space polylines.

    Each polyline starts a new subpath, so separate branches are never
    joined by a connecting stroke. A single-point polyline still gets a
    ``moveTo`` and draws nothing on its own.
    """
    path = QtGui.QPainterPath()
    for poly in polylines:
        pts = np.asarray(poly, dtype=np.float64).reshape(-1, 2)
        if pts.shape[0] == 0:
            continue
        path.moveTo(float(pts[0, 0]), float(pts[0, 1]))
        for x, y in pts[1:]:
            path.lineTo(float(x), float(y))
    return path


__all__ = ["to_qpointf", "polylines_to_path"]
