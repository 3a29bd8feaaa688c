"""Plane controls: point entry, display toggles, zoom and demo buttons."""

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QGridLayout,
    QLabel, QPushButton, QGroupBox,
)

from calculator.results import parse_operand
from ui_common import make_number_field


class PlaneControls(QWidget):
    """Control panel for the plane visualizer mode."""

    # Signals
    plot_clicked = pyqtSignal()
    clear_clicked = pyqtSignal()
    demo_clicked = pyqtSignal()
    grid_toggled = pyqtSignal(bool)
    polar_toggled = pyqtSignal(bool)
    trail_toggled = pyqtSignal(bool)
    zoom_in_clicked = pyqtSignal()
    zoom_out_clicked = pyqtSignal()
    reset_view_clicked = pyqtSignal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self._init_ui()

    def _init_ui(self):
        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(8, 8, 8, 8)

        # --- Point entry ---
        entry_group = QGroupBox("Plot a Number")
        entry_layout = QGridLayout()
        entry_group.setLayout(entry_layout)

        self.real_field = make_number_field("Real part", "3")
        self.imag_field = make_number_field("Imaginary part", "2")
        entry_layout.addWidget(QLabel("Re"), 0, 0)
        entry_layout.addWidget(self.real_field, 0, 1)
        entry_layout.addWidget(QLabel("Im"), 1, 0)
        entry_layout.addWidget(self.imag_field, 1, 1)

        self.plot_btn = QPushButton("Plot")
        self.plot_btn.clicked.connect(lambda: self.plot_clicked.emit())
        entry_layout.addWidget(self.plot_btn, 2, 0, 1, 2)

        hint = QLabel("Click the plane to add a point")
        hint.setStyleSheet("color: #888; font-style: italic; font-size: 11px;")
        entry_layout.addWidget(hint, 3, 0, 1, 2)

        main_layout.addWidget(entry_group)

        # --- Display ---
        display_group = QGroupBox("Display")
        display_layout = QHBoxLayout()
        display_group.setLayout(display_layout)

        self.grid_btn = self._make_toggle("Grid", True, self.grid_toggled)
        self.polar_btn = self._make_toggle("Polar", False, self.polar_toggled)
        self.trail_btn = self._make_toggle("Trail", False, self.trail_toggled)
        display_layout.addWidget(self.grid_btn)
        display_layout.addWidget(self.polar_btn)
        display_layout.addWidget(self.trail_btn)

        main_layout.addWidget(display_group)

        # --- Navigation ---
        nav_group = QGroupBox("Navigation")
        nav_layout = QVBoxLayout()
        nav_group.setLayout(nav_layout)

        zoom_row = QHBoxLayout()
        zoom_in_btn = QPushButton("Zoom In")
        zoom_in_btn.clicked.connect(lambda: self.zoom_in_clicked.emit())
        zoom_out_btn = QPushButton("Zoom Out")
        zoom_out_btn.clicked.connect(lambda: self.zoom_out_clicked.emit())
        reset_btn = QPushButton("Reset")
        reset_btn.clicked.connect(lambda: self.reset_view_clicked.emit())
        zoom_row.addWidget(zoom_in_btn)
        zoom_row.addWidget(zoom_out_btn)
        zoom_row.addWidget(reset_btn)
        nav_layout.addLayout(zoom_row)

        self.scale_label = QLabel()
        self.scale_label.setStyleSheet("color: #aaa;")
        nav_layout.addWidget(self.scale_label)

        main_layout.addWidget(nav_group)

        # --- Actions ---
        actions_group = QGroupBox("Actions")
        actions_layout = QHBoxLayout()
        actions_group.setLayout(actions_layout)

        self.demo_btn = QPushButton("Demonstrate Operations")
        self.demo_btn.clicked.connect(lambda: self.demo_clicked.emit())
        self.clear_btn = QPushButton("Clear")
        self.clear_btn.clicked.connect(lambda: self.clear_clicked.emit())
        actions_layout.addWidget(self.demo_btn)
        actions_layout.addWidget(self.clear_btn)

        main_layout.addWidget(actions_group)
        main_layout.addStretch()

    def _make_toggle(self, text, checked, signal):
        btn = QPushButton(text)
        btn.setCheckable(True)
        btn.setChecked(checked)
        btn.toggled.connect(signal)
        return btn

    # -- Accessors --

    def get_point(self):
        """Return (real, imag) from the entry fields.

        Raises:
            ValueError: if either field is not a finite number.
        """
        return (
            parse_operand(self.real_field.text()),
            parse_operand(self.imag_field.text()),
        )

    def set_point(self, real, imag):
        """Show a point in the entry fields with 3 decimals."""
        self.real_field.setText(f"{real:.3f}")
        self.imag_field.setText(f"{imag:.3f}")

    def set_scale(self, scale):
        self.scale_label.setText(f"Scale: {scale:.1f} px/unit")
