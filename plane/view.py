"""Plane view: orchestrates the plane canvas, controls, and demo playback.

This is a QWidget suitable for embedding in a QStackedWidget.
"""

from __future__ import annotations

import logging

from PyQt6.QtCore import Qt, QTimer
from PyQt6.QtWidgets import QWidget, QHBoxLayout, QSplitter

from complex_number import Complex, format_number
from plane.canvas import PlaneCanvas
from plane.controls import PlaneControls
from plane.demo import CLEAR, PLOT, DemoStep, build_demo_schedule
from plane.mapper import WHEEL_ZOOM_IN, WHEEL_ZOOM_OUT
from ui_common import show_notification, SUCCESS, ERROR

logger = logging.getLogger(__name__)

# Delay before the example point appears on first activation
INITIAL_POINT_DELAY_MS = 500
INITIAL_POINT = Complex(3.0, 2.0)


class PlaneView(QWidget):
    """Complete plane mode: canvas + controls + demo wiring."""

    def __init__(self, parent=None):
        super().__init__(parent)

        self.canvas = PlaneCanvas()
        self.controls = PlaneControls()

        splitter = QSplitter(Qt.Orientation.Horizontal)
        splitter.addWidget(self.canvas)
        splitter.addWidget(self.controls)
        splitter.setStretchFactor(0, 3)
        splitter.setStretchFactor(1, 1)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(splitter)

        # Pending demo timers, kept so playback can be cancelled
        self._demo_timers: list[QTimer] = []
        self._seeded = False

        # Wire signals
        self.canvas.point_added.connect(self.controls.set_point)
        self.canvas.scale_changed.connect(self.controls.set_scale)
        self.controls.plot_clicked.connect(self._on_plot)
        self.controls.clear_clicked.connect(self._on_clear)
        self.controls.demo_clicked.connect(self.play_demo)
        self.controls.grid_toggled.connect(self._on_grid_toggled)
        self.controls.polar_toggled.connect(self._on_polar_toggled)
        self.controls.trail_toggled.connect(self._on_trail_toggled)
        self.controls.zoom_in_clicked.connect(
            lambda: self.canvas.zoom_by(WHEEL_ZOOM_IN)
        )
        self.controls.zoom_out_clicked.connect(
            lambda: self.canvas.zoom_by(WHEEL_ZOOM_OUT)
        )
        self.controls.reset_view_clicked.connect(self.canvas.reset_view)

        self.controls.set_scale(self.canvas.view.scale)

    # -- Public interface for mode switching --

    def activate(self) -> None:
        """Called when switching to plane mode."""
        if not self._seeded:
            self._seeded = True
            QTimer.singleShot(
                INITIAL_POINT_DELAY_MS,
                lambda: self.canvas.add_point(INITIAL_POINT),
            )
        self.canvas.setFocus()

    def deactivate(self) -> None:
        """Called when switching away from plane mode."""
        self.cancel_demo()

    # -- Demo playback --

    def play_demo(self) -> None:
        self.cancel_demo()
        self.canvas.clear()
        steps = build_demo_schedule()
        logger.debug("Playing demo with %d steps", len(steps))
        for step in steps:
            self._schedule_step(step)

    def cancel_demo(self) -> None:
        for timer in self._demo_timers:
            timer.stop()
            timer.deleteLater()
        self._demo_timers.clear()

    def _schedule_step(self, step: DemoStep) -> None:
        timer = QTimer(self)
        timer.setSingleShot(True)
        timer.setInterval(step.at_ms)
        timer.timeout.connect(lambda s=step, t=timer: self._run_step(s, t))
        self._demo_timers.append(timer)
        timer.start()

    def _run_step(self, step: DemoStep, timer: QTimer) -> None:
        if timer in self._demo_timers:
            self._demo_timers.remove(timer)
            timer.deleteLater()
        logger.debug("Demo step at %d ms: %s %s", step.at_ms, step.action, step.value)
        if step.action == CLEAR:
            self.canvas.clear()
        elif step.action == PLOT:
            self.canvas.add_point(step.value, step.color)

    # -- Slots --

    def _on_plot(self) -> None:
        try:
            real, imag = self.controls.get_point()
        except ValueError:
            show_notification(self, "Please enter valid numbers.", ERROR)
            return
        self.canvas.add_point(Complex(real, imag))
        text = f"Plotted: {format_number(real)} + {format_number(imag)}i"
        show_notification(self, text, SUCCESS)

    def _on_clear(self) -> None:
        self.cancel_demo()
        self.canvas.clear()
        show_notification(self, "Canvas cleared", SUCCESS)

    def _on_grid_toggled(self, checked: bool) -> None:
        self.canvas.set_show_grid(checked)
        show_notification(
            self, f"Grid {'enabled' if checked else 'disabled'}", SUCCESS,
        )

    def _on_polar_toggled(self, checked: bool) -> None:
        self.canvas.set_show_polar(checked)
        show_notification(
            self,
            f"Polar coordinates {'enabled' if checked else 'disabled'}",
            SUCCESS,
        )

    def _on_trail_toggled(self, checked: bool) -> None:
        self.canvas.set_show_trail(checked)
        show_notification(
            self, f"Trail {'enabled' if checked else 'disabled'}", SUCCESS,
        )
