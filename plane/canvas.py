"""Plane canvas: QPainter rendering of the complex plane and plotted points.

Click to add a point, scroll or pinch to zoom, Home to reset the view.
All coordinate math goes through plane.mapper; this widget only owns the
current ViewState and the PointCollection.
"""

from __future__ import annotations

import math
from dataclasses import replace

from PyQt6.QtCore import Qt, QEvent, QPointF, QRectF, pyqtSignal
from PyQt6.QtGui import (
    QPainter, QPen, QBrush, QColor, QFont, QRadialGradient, QPainterPath,
)
from PyQt6.QtWidgets import QWidget

from complex_number import Complex
from plane.mapper import (
    ViewState, to_pixel, to_complex, zoom, wheel_factor, pinch_factor,
    touch_distance, recenter, initial_view, polar_info, point_label,
    grid_offsets, axis_ticks,
)
from plane.points import PointCollection, PlottedPoint


BACKGROUND_INNER = QColor(0x1A, 0x1A, 0x2E)
BACKGROUND_OUTER = QColor(0x16, 0x21, 0x3E)
GRID_COLOR = QColor(255, 255, 255, 25)
AXIS_COLOR = QColor(255, 255, 255, 204)
LABEL_COLOR = QColor(255, 255, 255, 178)
TRAIL_COLOR = QColor(255, 255, 255, 76)
POLAR_COLOR = QColor(255, 255, 255, 76)
POLAR_LABEL_COLOR = QColor(255, 255, 0)

POINT_RADIUS = 6
GLOW_RADIUS = 4
ANGLE_ARC_RADIUS = 30
ARROW_LENGTH = 10
ARROW_HALF_WIDTH = 5


class PlaneCanvas(QWidget):
    """Widget that draws the complex plane and handles zoom interactions."""

    point_added = pyqtSignal(float, float)  # real, imag (click or tap)
    scale_changed = pyqtSignal(float)

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setMinimumSize(400, 400)
        self.setMouseTracking(True)
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)
        self.setAttribute(Qt.WidgetAttribute.WA_AcceptTouchEvents)
        self.setCursor(Qt.CursorShape.CrossCursor)

        self.points = PointCollection()
        self._view = initial_view(self.width(), self.height())
        self._initialized = False

        # Pinch state: finger distance at the previous touch update
        self._pinch_distance: float | None = None
        self._pinched = False

        self._hover_value: Complex | None = None

    # -- Public interface --

    @property
    def view(self) -> ViewState:
        return self._view

    @property
    def hover_value(self) -> Complex | None:
        return self._hover_value

    def add_point(self, value: Complex, color: str | None = None) -> PlottedPoint:
        point = self.points.add(value, color)
        self.update()
        return point

    def clear(self) -> None:
        self.points.clear()
        self.update()

    def set_show_grid(self, show: bool) -> None:
        self._view = replace(self._view, show_grid=show)
        self.update()

    def set_show_polar(self, show: bool) -> None:
        self._view = replace(self._view, show_polar=show)
        self.update()

    def set_show_trail(self, show: bool) -> None:
        self._view = replace(self._view, show_trail=show)
        self.points.set_trail_enabled(show)
        self.update()

    def zoom_by(self, factor: float) -> None:
        old_scale = self._view.scale
        self._view = zoom(self._view, factor)
        if self._view.scale != old_scale:
            self.scale_changed.emit(self._view.scale)
        self.update()

    def reset_view(self) -> None:
        """Re-derive scale and origin from the current size."""
        v = self._view
        self._view = initial_view(
            self.width(), self.height(),
            show_grid=v.show_grid, show_polar=v.show_polar,
            show_trail=v.show_trail,
        )
        self.scale_changed.emit(self._view.scale)
        self.update()

    # -- Qt events --

    def resizeEvent(self, event):
        if not self._initialized:
            self._initialized = True
            self.reset_view()
        else:
            self._view = recenter(self._view, self.width(), self.height())
        super().resizeEvent(event)

    def mousePressEvent(self, event):
        if event.button() == Qt.MouseButton.LeftButton:
            pos = event.position()
            self._add_at_pixel(pos.x(), pos.y())

    def mouseMoveEvent(self, event):
        pos = event.position()
        self._hover_value = to_complex(pos.x(), pos.y(), self._view)

    def leaveEvent(self, event):
        self._hover_value = None
        super().leaveEvent(event)

    def wheelEvent(self, event):
        dy = event.angleDelta().y()
        if dy == 0:
            event.ignore()
            return
        # Qt reports scroll-up as positive; wheel_factor uses the
        # browser sign where scroll-down is positive
        self.zoom_by(wheel_factor(-dy))
        event.accept()

    def keyPressEvent(self, event):
        key = event.key()
        if key == Qt.Key.Key_Home:
            self.reset_view()
        elif key in (Qt.Key.Key_Plus, Qt.Key.Key_Equal):
            self.zoom_by(wheel_factor(-1))
        elif key == Qt.Key.Key_Minus:
            self.zoom_by(wheel_factor(1))
        else:
            super().keyPressEvent(event)

    def event(self, event):
        if event.type() in (
            QEvent.Type.TouchBegin, QEvent.Type.TouchUpdate,
            QEvent.Type.TouchEnd, QEvent.Type.TouchCancel,
        ):
            self._handle_touch(event)
            return True
        return super().event(event)

    def _handle_touch(self, event) -> None:
        """Two fingers pinch-zoom; a single-finger tap adds a point."""
        event.accept()
        etype = event.type()
        touch_points = event.points()

        if etype == QEvent.Type.TouchBegin:
            self._pinch_distance = None
            self._pinched = False

        if len(touch_points) >= 2:
            p1 = touch_points[0].position()
            p2 = touch_points[1].position()
            distance = touch_distance((p1.x(), p1.y()), (p2.x(), p2.y()))
            if self._pinch_distance is not None:
                self.zoom_by(pinch_factor(self._pinch_distance, distance))
            self._pinch_distance = distance
            self._pinched = True
        else:
            self._pinch_distance = None

        if etype == QEvent.Type.TouchEnd:
            if not self._pinched and len(touch_points) == 1:
                pos = touch_points[0].position()
                self._add_at_pixel(pos.x(), pos.y())
            self._pinch_distance = None
            self._pinched = False
        elif etype == QEvent.Type.TouchCancel:
            self._pinch_distance = None
            self._pinched = False

    def _add_at_pixel(self, x: float, y: float) -> None:
        value = to_complex(x, y, self._view)
        self.add_point(value)
        self.point_added.emit(value.real, value.imag)

    # -- Drawing --

    def _draw_background(self, painter: QPainter) -> None:
        v = self._view
        w, h = self.width(), self.height()
        gradient = QRadialGradient(QPointF(v.center_x, v.center_y), max(w, h))
        gradient.setColorAt(0, BACKGROUND_INNER)
        gradient.setColorAt(1, BACKGROUND_OUTER)
        painter.fillRect(self.rect(), QBrush(gradient))

    def _draw_grid(self, painter: QPainter) -> None:
        v = self._view
        w, h = self.width(), self.height()
        pen = QPen(GRID_COLOR)
        pen.setWidthF(1.0)
        painter.setPen(pen)
        for offset in grid_offsets(v):
            for x in (v.center_x + offset, v.center_x - offset):
                painter.drawLine(QPointF(x, 0), QPointF(x, h))
            for y in (v.center_y + offset, v.center_y - offset):
                painter.drawLine(QPointF(0, y), QPointF(w, y))

    def _draw_arrow(self, painter: QPainter, x: float, y: float,
                    angle: float) -> None:
        """Filled arrowhead with its tip at (x, y) pointing along angle."""
        painter.save()
        painter.translate(x, y)
        painter.rotate(math.degrees(angle))
        path = QPainterPath()
        path.moveTo(0, 0)
        path.lineTo(-ARROW_LENGTH, -ARROW_HALF_WIDTH)
        path.lineTo(-ARROW_LENGTH, ARROW_HALF_WIDTH)
        path.closeSubpath()
        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(QBrush(AXIS_COLOR))
        painter.drawPath(path)
        painter.restore()

    def _draw_axes(self, painter: QPainter) -> None:
        v = self._view
        w, h = self.width(), self.height()
        pen = QPen(AXIS_COLOR)
        pen.setWidthF(2.0)
        painter.setPen(pen)
        painter.drawLine(QPointF(0, v.center_y), QPointF(w, v.center_y))
        painter.drawLine(QPointF(v.center_x, 0), QPointF(v.center_x, h))

        self._draw_arrow(painter, w - 20, v.center_y, 0.0)
        self._draw_arrow(painter, v.center_x, 20, -math.pi / 2)

    def _draw_labels(self, painter: QPainter) -> None:
        v = self._view
        w, h = self.width(), self.height()

        font = QFont()
        font.setPointSizeF(11)
        painter.setFont(font)
        painter.setPen(LABEL_COLOR)
        painter.drawText(QPointF(w - 60, v.center_y - 10), "Real")

        painter.save()
        painter.translate(v.center_x + 15, 90)
        painter.rotate(-90)
        painter.drawText(QPointF(0, 0), "Imaginary")
        painter.restore()

        font.setPointSizeF(9)
        painter.setFont(font)
        metrics = painter.fontMetrics()
        real_ticks, imag_ticks = axis_ticks(v, w, h)
        for tick in real_ticks:
            text = str(tick.value)
            half = metrics.horizontalAdvance(text) / 2
            painter.drawText(QPointF(tick.position - half, v.center_y + 20), text)
        for tick in imag_ticks:
            text = str(tick.value)
            width = metrics.horizontalAdvance(text)
            painter.drawText(QPointF(v.center_x - 12 - width, tick.position + 5), text)

    def _draw_trail(self, painter: QPainter) -> None:
        trail = list(self.points.trail)
        if len(trail) < 2:
            return
        path = QPainterPath()
        path.moveTo(*to_pixel(trail[0].value, self._view))
        for point in trail[1:]:
            path.lineTo(*to_pixel(point.value, self._view))
        pen = QPen(TRAIL_COLOR)
        pen.setWidthF(1.0)
        painter.setPen(pen)
        painter.setBrush(Qt.BrushStyle.NoBrush)
        painter.drawPath(path)

    def _draw_polar_info(self, painter: QPainter, point: PlottedPoint,
                         x: float, y: float) -> None:
        v = self._view
        info = polar_info(point.value, v)
        origin = QPointF(v.center_x, v.center_y)

        pen = QPen(POLAR_COLOR)
        pen.setWidthF(1.0)
        pen.setStyle(Qt.PenStyle.DashLine)
        painter.setPen(pen)
        painter.setBrush(Qt.BrushStyle.NoBrush)
        painter.drawEllipse(origin, info.radius_px, info.radius_px)

        # Angle arc from the positive real axis, counter-clockwise on screen
        pen.setStyle(Qt.PenStyle.SolidLine)
        painter.setPen(pen)
        arc_rect = QRectF(
            v.center_x - ANGLE_ARC_RADIUS, v.center_y - ANGLE_ARC_RADIUS,
            2 * ANGLE_ARC_RADIUS, 2 * ANGLE_ARC_RADIUS,
        )
        painter.drawArc(arc_rect, 0, int(math.degrees(info.theta) * 16))

        font = QFont()
        font.setPointSizeF(8.5)
        painter.setFont(font)
        painter.setPen(POLAR_LABEL_COLOR)
        painter.drawText(QPointF(x + 10, y + 14), info.label)

    def _draw_point(self, painter: QPainter, point: PlottedPoint) -> None:
        v = self._view
        x, y = to_pixel(point.value, v)
        color = QColor(point.color)

        pen = QPen(color)
        pen.setWidthF(2.0)
        painter.setPen(pen)
        painter.drawLine(QPointF(v.center_x, v.center_y), QPointF(x, y))

        painter.setPen(Qt.PenStyle.NoPen)
        glow = QColor(color)
        glow.setAlpha(70)
        painter.setBrush(QBrush(glow))
        painter.drawEllipse(QPointF(x, y), POINT_RADIUS + 4, POINT_RADIUS + 4)
        painter.setBrush(QBrush(color))
        painter.drawEllipse(QPointF(x, y), POINT_RADIUS, POINT_RADIUS)
        painter.setBrush(QBrush(color.lighter(140)))
        painter.drawEllipse(QPointF(x, y), GLOW_RADIUS, GLOW_RADIUS)

        if v.show_polar:
            self._draw_polar_info(painter, point, x, y)

        font = QFont()
        font.setPointSizeF(9)
        painter.setFont(font)
        painter.setPen(QColor(255, 255, 255))
        painter.drawText(QPointF(x + 10, y - 10), point_label(point.value))

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        self._draw_background(painter)
        if self._view.show_grid:
            self._draw_grid(painter)
        self._draw_axes(painter)
        self._draw_labels(painter)

        if self._view.show_trail:
            self._draw_trail(painter)

        for point in self.points.points:
            self._draw_point(painter, point)

        painter.end()
