"""Qt application entry point for the trig_explorer unit-circle tool."""

from __future__ import annotations

import logging
import math
import sys
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from PySide6 import QtCore, QtGui, QtWidgets

APP_VERSION: str

if __package__ in (None, ""):
    PACKAGE_ROOT = Path(__file__).resolve().parents[1]
    if str(PACKAGE_ROOT) not in sys.path:
        sys.path.insert(0, str(PACKAGE_ROOT))

    import trig_explorer as _pkg

    from trig_explorer.core import (
        AngleModel,
        DragController,
        build_circle_geometry,
        evaluate,
        format_value,
        marker_position,
        sample_all,
    )
    from trig_explorer.core.waveform import WavePath
    from trig_explorer.logging_config import level_from_env, setup_logging
    from trig_explorer.models import FUNCTION_IDS, AppConfig, Thresholds
    from trig_explorer.utils import TWO_PI, format_angle, normalize_angle, plot_to_screen
    from trig_explorer.utils.qt import polylines_to_path, to_qpointf

    APP_VERSION = getattr(_pkg, "__version__", "0.0.0")
else:
    from . import __version__ as APP_VERSION
    from .core import (
        AngleModel,
        DragController,
        build_circle_geometry,
        evaluate,
        format_value,
        marker_position,
        sample_all,
    )
    from .core.waveform import WavePath
    from .logging_config import level_from_env, setup_logging
    from .models import FUNCTION_IDS, AppConfig, Thresholds
    from .utils import TWO_PI, format_angle, normalize_angle, plot_to_screen
    from .utils.qt import polylines_to_path, to_qpointf

logger = logging.getLogger(__name__)

COLORS: Dict[str, QtGui.QColor] = {
    "sin": QtGui.QColor("#ef4444"),
    "cos": QtGui.QColor("#3b82f6"),
    "tan": QtGui.QColor("#eab308"),
    "cot": QtGui.QColor("#f97316"),
    "sec": QtGui.QColor("#8b5cf6"),
    "csc": QtGui.QColor("#10b981"),
}
PRIMARY_FUNCTIONS = ("sin", "cos")
RECIPROCAL_FUNCTIONS = ("tan", "cot", "sec", "csc")


def _function_pen(function_id: str, width: float, dashed: bool) -> QtGui.QPen:
    pen = QtGui.QPen(COLORS[function_id])
    pen.setWidthF(width)
    if dashed:
        pen.setStyle(QtCore.Qt.PenStyle.DashLine)
    return pen


# --------------------------- Global release filter ----------------------------


class GlobalReleaseFilter(QtCore.QObject):
    """Ends a drag on any release seen by the application, not just the circle."""

    RELEASE_EVENTS = (
        QtCore.QEvent.Type.MouseButtonRelease,
        QtCore.QEvent.Type.TouchEnd,
        QtCore.QEvent.Type.TouchCancel,
        QtCore.QEvent.Type.ApplicationDeactivate,
    )

    def __init__(
        self, controller: DragController, parent: Optional[QtCore.QObject] = None
    ) -> None:
        super().__init__(parent)
        self._controller = controller

    def eventFilter(self, watched: QtCore.QObject, event: QtCore.QEvent) -> bool:
        if event.type() in self.RELEASE_EVENTS and self._controller.dragging:
            self._controller.pointer_release()
        return False


# ------------------------------ Unit Circle -----------------------------------


class UnitCircleWidget(QtWidgets.QWidget):
    """Draws the circle constructions and turns drags into angle updates."""

    MARGIN_PX = 30

    def __init__(
        self,
        model: AngleModel,
        cfg: AppConfig,
        parent: Optional[QtWidgets.QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self._model = model
        self._cfg = cfg
        self._visible: List[str] = list(cfg.ui.visible_functions)
        self.drag = DragController(model)
        self.setMinimumSize(300, 300)
        self.setSizePolicy(
            QtWidgets.QSizePolicy.Policy.Expanding,
            QtWidgets.QSizePolicy.Policy.Expanding,
        )
        self.setAttribute(QtCore.Qt.WidgetAttribute.WA_AcceptTouchEvents, True)
        self.setCursor(QtCore.Qt.CursorShape.PointingHandCursor)
        self._sync_center()

    # ----------------------------- Properties ---------------------------------

    def radius(self) -> float:
        available = min(self.width(), self.height()) / 2.0 - self.MARGIN_PX
        return float(max(10.0, min(float(self._cfg.ui.circle_radius), available)))

    def center(self) -> QtCore.QPointF:
        return QtCore.QPointF(self.width() / 2.0, self.height() / 2.0)

    def set_visible_functions(self, functions: Iterable[str]) -> None:
        self._visible = [f for f in functions if f in FUNCTION_IDS]
        self.update()

    def _sync_center(self) -> None:
        c = self.center()
        self.drag.set_center(c.x(), c.y())

    def resizeEvent(self, e: QtGui.QResizeEvent) -> None:
        super().resizeEvent(e)
        self._sync_center()

    # ----------------------------- Interaction --------------------------------

    def mousePressEvent(self, e: QtGui.QMouseEvent) -> None:
        if e.button() != QtCore.Qt.MouseButton.LeftButton:
            e.ignore()
            return
        pos = e.position()
        self._sync_center()
        self.drag.pointer_engage(pos.x(), pos.y())
        e.accept()

    def mouseMoveEvent(self, e: QtGui.QMouseEvent) -> None:
        pos = e.position()
        self.drag.pointer_move(pos.x(), pos.y())

    def mouseReleaseEvent(self, e: QtGui.QMouseEvent) -> None:
        self.drag.pointer_release()
        e.accept()

    def event(self, e: QtCore.QEvent) -> bool:
        etype = e.type()
        if isinstance(e, QtGui.QTouchEvent) and etype in (
            QtCore.QEvent.Type.TouchBegin,
            QtCore.QEvent.Type.TouchUpdate,
            QtCore.QEvent.Type.TouchEnd,
            QtCore.QEvent.Type.TouchCancel,
        ):
            points = e.points()
            if etype in (
                QtCore.QEvent.Type.TouchEnd,
                QtCore.QEvent.Type.TouchCancel,
            ):
                self.drag.pointer_release()
            elif points:
                pos = points[0].position()
                if etype == QtCore.QEvent.Type.TouchBegin:
                    self._sync_center()
                    self.drag.pointer_engage(pos.x(), pos.y())
                else:
                    self.drag.pointer_move(pos.x(), pos.y())
            e.accept()
            return True
        return super().event(e)

    # ----------------------------- Painting -----------------------------------

    def paintEvent(self, e: QtGui.QPaintEvent) -> None:
        painter = QtGui.QPainter(self)
        painter.setRenderHint(QtGui.QPainter.RenderHint.Antialiasing, True)

        c = self.center()
        r = self.radius()
        angle = self._model.get()
        geo = build_circle_geometry(
            angle,
            r,
            center=(c.x(), c.y()),
            functions=self._visible,
            thresholds=self._cfg.thresholds,
        )
        fg = self.palette().color(QtGui.QPalette.ColorRole.WindowText)

        # Full-width grid lines, then the circle itself
        painter.setPen(QtGui.QPen(QtGui.QColor(204, 204, 204), 1))
        painter.drawLine(QtCore.QPointF(0, c.y()), QtCore.QPointF(self.width(), c.y()))
        painter.drawLine(QtCore.QPointF(c.x(), 0), QtCore.QPointF(c.x(), self.height()))
        painter.setPen(QtGui.QPen(fg, 1.5))
        painter.setBrush(QtCore.Qt.BrushStyle.NoBrush)
        painter.drawEllipse(c, r, r)

        radius_seg = geo.by_tag("radius")
        if radius_seg is not None:
            pen = QtGui.QPen(fg, 1)
            pen.setStyle(QtCore.Qt.PenStyle.DashLine)
            painter.setPen(pen)
            painter.drawLine(to_qpointf(radius_seg.start), to_qpointf(radius_seg.end))

        for seg in geo.segments:
            if seg.tag not in COLORS:
                continue
            primary = seg.tag in ("sin", "cos", "tan")
            painter.setPen(_function_pen(seg.tag, 3.0 if primary else 2.0, not primary))
            painter.drawLine(to_qpointf(seg.start), to_qpointf(seg.end))

        # Angle arc; QPainterPath angles run counter-clockwise on screen
        deg = math.degrees(geo.reading.angle) % 360.0
        arc = QtGui.QPainterPath()
        arc.moveTo(c)
        arc.arcTo(QtCore.QRectF(c.x() - 30, c.y() - 30, 60, 60), 0.0, deg)
        arc.closeSubpath()
        painter.setPen(QtGui.QPen(fg, 1))
        painter.setBrush(QtGui.QBrush(QtGui.QColor(100, 100, 100, 51)))
        painter.drawPath(arc)

        painter.setBrush(QtGui.QBrush(fg))
        painter.drawEllipse(to_qpointf(geo.point), 6, 6)

        painter.setPen(QtGui.QPen(fg))
        painter.drawText(QtCore.QPointF(c.x() + 40, c.y() - 40), f"{deg:.0f}°")


# ------------------------------- Wave Diagram ---------------------------------


class WaveDiagramWidget(QtWidgets.QWidget):
    """One period of each visible function plus the current-angle markers."""

    PADDING_PX = 20

    def __init__(
        self,
        model: AngleModel,
        cfg: AppConfig,
        parent: Optional[QtWidgets.QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self._model = model
        self._cfg = cfg
        self._visible: List[str] = list(cfg.ui.visible_functions)
        self._paths: Dict[str, WavePath] = {}
        self._resample()
        self.setMinimumSize(400, 200)
        self.setSizePolicy(
            QtWidgets.QSizePolicy.Policy.Expanding,
            QtWidgets.QSizePolicy.Policy.Expanding,
        )

    def _resample(self) -> None:
        self._paths = sample_all(
            self._visible,
            resolution=self._cfg.wave.resolution,
            bound=self._cfg.thresholds.wave_bound,
        )
        logger.debug(
            "Resampled %d waveforms at resolution %d.",
            len(self._paths),
            self._cfg.wave.resolution,
        )

    def set_visible_functions(self, functions: Iterable[str]) -> None:
        self._visible = [f for f in functions if f in FUNCTION_IDS]
        self._resample()
        self.update()

    def paths(self) -> Dict[str, WavePath]:
        return dict(self._paths)

    def paintEvent(self, e: QtGui.QPaintEvent) -> None:
        painter = QtGui.QPainter(self)
        painter.setRenderHint(QtGui.QPainter.RenderHint.Antialiasing, True)
        painter.setClipRect(self.rect())

        pad = float(self.PADDING_PX)
        width = float(self.width())
        height = float(self.height())
        plot_w = max(1.0, width - 2 * pad)
        plot_h = max(1.0, height - 2 * pad)
        center_y = height / 2.0
        x_scale = plot_w / TWO_PI
        y_scale = plot_h / 2.5
        origin = (pad, center_y)

        # Axes and period labels
        painter.setPen(QtGui.QPen(QtGui.QColor(204, 204, 204), 1))
        painter.drawLine(QtCore.QPointF(pad, center_y), QtCore.QPointF(width - pad, center_y))
        painter.drawLine(QtCore.QPointF(pad, pad), QtCore.QPointF(pad, height - pad))
        painter.setPen(QtGui.QPen(QtGui.QColor(153, 153, 153)))
        for t, label in ((0.0, "0 (0°)"), (math.pi, "π (180°)"), (TWO_PI, "2π (360°)")):
            x = pad + t * x_scale
            rect = QtCore.QRectF(x - 40, center_y + 6, 80, 18)
            painter.drawText(rect, QtCore.Qt.AlignmentFlag.AlignCenter, label)

        painter.setBrush(QtCore.Qt.BrushStyle.NoBrush)
        ordered = [f for f in RECIPROCAL_FUNCTIONS + PRIMARY_FUNCTIONS if f in self._paths]
        for function_id in ordered:
            wave = self._paths[function_id]
            primary = function_id in PRIMARY_FUNCTIONS
            screen = [plot_to_screen(p, origin, x_scale, y_scale) for p in wave.polylines]
            painter.setPen(_function_pen(function_id, 2.0 if primary else 1.5, not primary))
            painter.drawPath(polylines_to_path(screen))

        # Current angle line and the markers sitting on each curve
        angle = self._model.get()
        current_x = pad + normalize_angle(angle) * x_scale
        fg = self.palette().color(QtGui.QPalette.ColorRole.WindowText)
        line_pen = QtGui.QPen(fg, 1)
        line_pen.setStyle(QtCore.Qt.PenStyle.DotLine)
        painter.setPen(line_pen)
        painter.drawLine(
            QtCore.QPointF(current_x, pad), QtCore.QPointF(current_x, height - pad)
        )
        for function_id in ordered:
            marker = marker_position(
                function_id,
                angle,
                bound=self._cfg.thresholds.wave_bound,
                thresholds=self._cfg.thresholds,
            )
            if marker is None:
                continue
            pt = plot_to_screen(marker, origin, x_scale, y_scale)[0]
            size = 4 if function_id in PRIMARY_FUNCTIONS else 3
            painter.setPen(QtCore.Qt.PenStyle.NoPen)
            painter.setBrush(QtGui.QBrush(COLORS[function_id]))
            painter.drawEllipse(QtCore.QPointF(pt[0], pt[1]), size, size)


# ---------------------------- Identity Panel ----------------------------------


class IdentityPanel(QtWidgets.QGroupBox):
    """Shows sin²θ + cos²θ = 1 with the current values substituted."""

    def __init__(
        self, thresholds: Thresholds, parent: Optional[QtWidgets.QWidget] = None
    ) -> None:
        super().__init__("Pythagorean Identity", parent)
        self._thresholds = thresholds
        self.formula_label = QtWidgets.QLabel(
            f"<span style='color:{COLORS['sin'].name()}'>sin²(θ)</span> + "
            f"<span style='color:{COLORS['cos'].name()}'>cos²(θ)</span> = 1"
        )
        self.formula_label.setTextFormat(QtCore.Qt.TextFormat.RichText)
        self.substitution_label = QtWidgets.QLabel()
        self.squares_label = QtWidgets.QLabel()
        self.squares_label.setStyleSheet("color: #777;")
        v = QtWidgets.QVBoxLayout(self)
        v.addWidget(self.formula_label)
        v.addWidget(self.substitution_label)
        v.addWidget(self.squares_label)

    def set_angle(self, angle: float) -> None:
        t = self._thresholds
        reading = evaluate(angle, t)
        self.substitution_label.setText(
            f"({format_value(reading.sin, t)})² + ({format_value(reading.cos, t)})² = 1"
        )
        self.squares_label.setText(
            f"{format_value(reading.sin ** 2, t)} + {format_value(reading.cos ** 2, t)} ≈ 1.000"
        )


# ---------------------------- Control Panel UI --------------------------------


class ControlPanel(QtWidgets.QWidget):
    angleDegreesChanged = QtCore.Signal(int)
    visibleFunctionsChanged = QtCore.Signal(list)

    def __init__(
        self, cfg: AppConfig, parent: Optional[QtWidgets.QWidget] = None
    ) -> None:
        super().__init__(parent)
        self._cfg = cfg

        self.angle_label = QtWidgets.QLabel()
        self.slider = QtWidgets.QSlider(QtCore.Qt.Orientation.Horizontal)
        self.slider.setRange(0, 360)
        self.slider.setToolTip("Angle in degrees")
        self.slider.valueChanged.connect(self.angleDegreesChanged)

        self.value_labels: Dict[str, QtWidgets.QLabel] = {}
        values_grid = QtWidgets.QGridLayout()
        for i, function_id in enumerate(FUNCTION_IDS):
            title = QtWidgets.QLabel(function_id.upper())
            title.setStyleSheet(f"color: {COLORS[function_id].name()}; font-weight: bold;")
            value = QtWidgets.QLabel("-")
            value.setTextInteractionFlags(
                QtCore.Qt.TextInteractionFlag.TextSelectableByMouse
            )
            self.value_labels[function_id] = value
            row, col = divmod(i, 3)
            values_grid.addWidget(title, row * 2, col)
            values_grid.addWidget(value, row * 2 + 1, col)

        self.function_checks: Dict[str, QtWidgets.QCheckBox] = {}
        checks_row = QtWidgets.QHBoxLayout()
        for function_id in RECIPROCAL_FUNCTIONS:
            check = QtWidgets.QCheckBox(function_id)
            check.setChecked(function_id in cfg.ui.visible_functions)
            check.toggled.connect(self._on_check_toggled)
            self.function_checks[function_id] = check
            checks_row.addWidget(check)
        checks_row.addStretch(1)

        form = QtWidgets.QFormLayout()
        form.addRow("Angle:", self.angle_label)
        form.addRow(self.slider)
        form.addRow("Show:", checks_row)

        v = QtWidgets.QVBoxLayout(self)
        v.addLayout(form)
        v.addLayout(values_grid)
        v.addStretch(1)

    def visible_functions(self) -> List[str]:
        shown = [f for f, check in self.function_checks.items() if check.isChecked()]
        return list(PRIMARY_FUNCTIONS) + shown

    def _on_check_toggled(self, _checked: bool) -> None:
        self.visibleFunctionsChanged.emit(self.visible_functions())

    def set_angle(self, angle: float) -> None:
        self.angle_label.setText(format_angle(angle))
        self.slider.blockSignals(True)
        self.slider.setValue(int(round(math.degrees(normalize_angle(angle)))))
        self.slider.blockSignals(False)
        reading = evaluate(angle, self._cfg.thresholds)
        for function_id, value in reading.as_dict().items():
            self.value_labels[function_id].setText(
                format_value(value, self._cfg.thresholds)
            )


# ------------------------------- Main Window ----------------------------------


class MainWindow(QtWidgets.QWidget):
    def __init__(self, model: AngleModel, cfg: AppConfig, app_version: str) -> None:
        super().__init__(None)
        self.setWindowTitle(f"trig_explorer {app_version or 'unknown'} - Trigonometry Explorer")

        self.circle = UnitCircleWidget(model, cfg, self)
        self.wave = WaveDiagramWidget(model, cfg, self)
        self.controls = ControlPanel(cfg, self)
        self.identity = IdentityPanel(cfg.thresholds, self)
        self.identity.setVisible(cfg.ui.show_identity)

        left = QtWidgets.QVBoxLayout()
        left.addWidget(QtWidgets.QLabel("<h3>Unit Circle</h3>"))
        left.addWidget(self.circle, stretch=1)
        left.addWidget(self.controls)

        right = QtWidgets.QVBoxLayout()
        right.addWidget(QtWidgets.QLabel("<h3>Wave Function</h3>"))
        right.addWidget(self.wave, stretch=1)
        hint = QtWidgets.QLabel(
            "The x-axis is the angle in radians (and degrees); "
            "the y-axis is the value of each function."
        )
        hint.setWordWrap(True)
        right.addWidget(hint)
        right.addWidget(self.identity)

        h = QtWidgets.QHBoxLayout(self)
        h.addLayout(left, stretch=1)
        h.addLayout(right, stretch=1)


# ---------------------------- Main Controller ---------------------------------


class MainController(QtCore.QObject):
    def __init__(
        self,
        app: QtWidgets.QApplication,
        cfg: Optional[AppConfig] = None,
        config_path: Optional[Path] = None,
    ) -> None:
        super().__init__(None)
        self.app = app
        self._config_path_override = config_path
        self.cfg = cfg if cfg is not None else self._load_config()

        # The one angle every view derives from
        self.model = AngleModel()

        self._app_version = app.applicationVersion() or APP_VERSION
        self.window = MainWindow(self.model, self.cfg, self._app_version)

        self.release_filter = GlobalReleaseFilter(self.window.circle.drag, self)
        self.app.installEventFilter(self.release_filter)

        self.window.controls.angleDegreesChanged.connect(self.model.set_degrees)
        self.window.controls.visibleFunctionsChanged.connect(self._on_visible_changed)
        self._unsubscribe = self.model.subscribe(self._on_angle_changed)

        self._on_angle_changed(self.model.get())

    # ---------------------------- Config I/O ----------------------------------

    def _config_path(self) -> Path:
        if self._config_path_override is not None:
            return self._config_path_override
        return Path.home() / ".trig_explorer_config.json"

    def _load_config(self) -> AppConfig:
        p = self._config_path()
        if p.exists():
            try:
                cfg = AppConfig.from_json(p.read_text(encoding="utf-8"))
                logger.info("Loaded configuration from %s", p)
                return cfg
            except (OSError, ValueError, KeyError, TypeError, AttributeError) as exc:
                logger.warning("Ignoring unreadable configuration %s: %s", p, exc)
        return AppConfig()

    def save_config(self) -> None:
        p = self._config_path()
        try:
            p.write_text(self.cfg.to_json(), encoding="utf-8")
            logger.debug("Saved configuration to %s", p)
        except OSError as exc:
            logger.warning("Could not save configuration to %s: %s", p, exc)

    # ---------------------------- Event Handlers ------------------------------

    def _on_angle_changed(self, angle: float) -> None:
        self.window.controls.set_angle(angle)
        self.window.identity.set_angle(angle)
        self.window.circle.update()
        self.window.wave.update()

    def _on_visible_changed(self, functions: List[str]) -> None:
        self.cfg.ui.visible_functions = list(functions)
        self.window.circle.set_visible_functions(functions)
        self.window.wave.set_visible_functions(functions)
        self.save_config()

    def shutdown(self) -> None:
        self._unsubscribe()
        self.app.removeEventFilter(self.release_filter)
        self.save_config()


# ---------------------------------- Main --------------------------------------


def main() -> None:
    setup_logging(level_from_env())
    app = QtWidgets.QApplication(sys.argv)
    app.setApplicationName("trig_explorer")
    app.setApplicationVersion(APP_VERSION)

    ctrl = MainController(app)
    ctrl.window.resize(1000, 640)
    ctrl.window.show()
    ret = app.exec()

    ctrl.shutdown()
    sys.exit(ret)


if __name__ == "__main__":
    main()
