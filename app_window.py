"""App window: QStackedWidget with toolbar for mode switching.

Hosts both CalculatorView and PlaneView, the dark theme toggle (persisted
with QSettings), and the window-wide keyboard shortcuts.
"""

import logging

from PyQt6.QtCore import Qt, QSettings, QTimer
from PyQt6.QtGui import QAction, QActionGroup, QKeySequence, QShortcut
from PyQt6.QtWidgets import (
    QMainWindow, QStackedWidget, QToolBar, QStatusBar, QLabel, QWidget,
    QSizePolicy,
)

from calculator.view import CalculatorView
from plane.view import PlaneView
from ui_common import theme_stylesheet

logger = logging.getLogger(__name__)

SETTINGS_ORG = "complex-plane"
SETTINGS_APP = "ComplexPlane"
DARK_THEME_KEY = "darkTheme"


class AppWindow(QMainWindow):
    """Top-level window with mode switching between calculator and plane."""

    # Mode indices
    CALCULATOR_MODE = 0
    PLANE_MODE = 1

    MODE_NAMES = {"calculator": CALCULATOR_MODE, "plane": PLANE_MODE}

    def __init__(self, initial_mode=CALCULATOR_MODE, settings=None):
        super().__init__()
        self.setWindowTitle("Complex Plane")
        self.resize(1200, 750)

        self._settings = settings or QSettings(SETTINGS_ORG, SETTINGS_APP)

        # --- Views ---
        self.calculator_view = CalculatorView()
        self.plane_view = PlaneView()

        # --- Stacked widget ---
        self.stack = QStackedWidget()
        self.stack.addWidget(self.calculator_view)  # index 0
        self.stack.addWidget(self.plane_view)       # index 1
        self.setCentralWidget(self.stack)

        # --- Toolbar ---
        toolbar = QToolBar("Mode")
        toolbar.setMovable(False)
        self.addToolBar(Qt.ToolBarArea.TopToolBarArea, toolbar)

        self._mode_group = QActionGroup(self)
        self._mode_group.setExclusive(True)

        self._calculator_action = QAction("Calculator", self)
        self._calculator_action.setCheckable(True)
        self._calculator_action.triggered.connect(
            lambda: self._switch_mode(self.CALCULATOR_MODE)
        )
        self._mode_group.addAction(self._calculator_action)
        toolbar.addAction(self._calculator_action)

        self._plane_action = QAction("Complex Plane", self)
        self._plane_action.setCheckable(True)
        self._plane_action.triggered.connect(
            lambda: self._switch_mode(self.PLANE_MODE)
        )
        self._mode_group.addAction(self._plane_action)
        toolbar.addAction(self._plane_action)

        spacer = QWidget()
        spacer.setSizePolicy(
            QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Preferred,
        )
        toolbar.addWidget(spacer)

        self._theme_action = QAction("Dark Theme", self)
        self._theme_action.setCheckable(True)
        self._theme_action.setToolTip("Ctrl+D")
        self._theme_action.toggled.connect(self._set_dark_theme)
        toolbar.addAction(self._theme_action)

        # --- Status bar ---
        self._status_bar = QStatusBar()
        self.setStatusBar(self._status_bar)
        self._coord_label = QLabel()
        self._points_label = QLabel()
        self._status_bar.addWidget(self._coord_label)
        self._status_bar.addWidget(self._points_label)

        # --- Shortcuts ---
        QShortcut(QKeySequence("Ctrl+Return"), self, activated=self._on_calculate_shortcut)
        QShortcut(QKeySequence("Ctrl+Enter"), self, activated=self._on_calculate_shortcut)
        QShortcut(QKeySequence("Ctrl+D"), self, activated=self._theme_action.toggle)

        # --- Theme ---
        dark = self._settings.value(DARK_THEME_KEY, False, type=bool)
        self._theme_action.setChecked(dark)
        self._apply_theme(dark)

        self._setup_hover_tracking()

        # --- Initial mode ---
        self.stack.setCurrentIndex(initial_mode)
        if initial_mode == self.PLANE_MODE:
            self._plane_action.setChecked(True)
            self.plane_view.activate()
        else:
            self._calculator_action.setChecked(True)
            self.calculator_view.activate()
        self._update_status_visibility()

    def _setup_hover_tracking(self):
        """Set up periodic hover coordinate updates."""
        self._hover_timer = QTimer(self)
        self._hover_timer.setInterval(100)  # 10 Hz updates
        self._hover_timer.timeout.connect(self._update_hover_coords)
        self._hover_timer.start()

    def _update_hover_coords(self):
        """Update the plane coordinate label from canvas hover state."""
        if self.stack.currentIndex() != self.PLANE_MODE:
            return

        canvas = self.plane_view.canvas
        value = canvas.hover_value
        if value is not None:
            self._coord_label.setText(f"  z = {value}  ")
        self._points_label.setText(f"  Points: {len(canvas.points)}  ")

    def _update_status_visibility(self):
        is_plane = self.stack.currentIndex() == self.PLANE_MODE
        self._coord_label.setVisible(is_plane)
        self._points_label.setVisible(is_plane)

    def _switch_mode(self, mode: int) -> None:
        current = self.stack.currentIndex()
        if current == mode:
            return

        if mode == self.PLANE_MODE:
            self.calculator_view.deactivate()
            self.stack.setCurrentIndex(self.PLANE_MODE)
            self.plane_view.activate()
        else:
            self.plane_view.deactivate()
            self.stack.setCurrentIndex(self.CALCULATOR_MODE)
            self.calculator_view.activate()

        self._update_status_visibility()
        logger.info(
            "Switched to %s mode",
            "plane" if mode == self.PLANE_MODE else "calculator",
        )

    def _on_calculate_shortcut(self):
        if self.stack.currentIndex() == self.CALCULATOR_MODE:
            self.calculator_view.calculate()

    def _set_dark_theme(self, dark: bool) -> None:
        self._apply_theme(dark)
        self._settings.setValue(DARK_THEME_KEY, dark)
        logger.info("Dark theme %s", "enabled" if dark else "disabled")

    def _apply_theme(self, dark: bool) -> None:
        self.setStyleSheet(theme_stylesheet(dark))
