"""Calculator view: two operand inputs and a grid of result cards.

This is a QWidget suitable for embedding in a QStackedWidget.
"""

from __future__ import annotations

import logging

from PyQt6.QtCore import Qt, QTimer
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QGridLayout, QGroupBox,
    QFrame, QLabel, QPushButton, QScrollArea,
)

from complex_number import Complex
from calculator.results import ResultCard, compute_results, parse_operand
from ui_common import (
    ValueTween, make_number_field, show_notification, SUCCESS, ERROR,
)

logger = logging.getLogger(__name__)

RESULT_COLUMNS = 4
TWEEN_DURATION_MS = 600
BUTTON_PRESS_MS = 150


class ResultCardWidget(QFrame):
    """A single titled result tile."""

    def __init__(self, card: ResultCard, parent=None):
        super().__init__(parent)
        self.setObjectName("resultCard")
        layout = QVBoxLayout(self)
        layout.setContentsMargins(10, 8, 10, 8)

        title = QLabel(card.title)
        title.setStyleSheet("font-weight: bold; font-size: 13px;")
        self.value_label = QLabel(card.value)
        self.value_label.setStyleSheet("font-family: monospace; font-size: 15px;")
        self.value_label.setTextInteractionFlags(
            Qt.TextInteractionFlag.TextSelectableByMouse
        )
        layout.addWidget(title)
        layout.addWidget(self.value_label)
        if card.description:
            desc = QLabel(card.description)
            desc.setStyleSheet("color: #888; font-size: 11px;")
            layout.addWidget(desc)


class CalculatorView(QWidget):
    """Complete calculator mode: operand inputs + results grid."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self._tweens: list[ValueTween] = []
        self._card_widgets: list[ResultCardWidget] = []
        self._init_ui()

    def _init_ui(self):
        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(12, 12, 12, 12)

        # --- Operands ---
        input_group = QGroupBox("Operands")
        input_layout = QGridLayout()
        input_group.setLayout(input_layout)

        self.real1_field = make_number_field("Real", "3")
        self.imag1_field = make_number_field("Imaginary", "2")
        self.real2_field = make_number_field("Real", "1")
        self.imag2_field = make_number_field("Imaginary", "4")

        input_layout.addWidget(QLabel("z₁ ="), 0, 0)
        input_layout.addWidget(self.real1_field, 0, 1)
        input_layout.addWidget(QLabel("+"), 0, 2)
        input_layout.addWidget(self.imag1_field, 0, 3)
        input_layout.addWidget(QLabel("i"), 0, 4)
        input_layout.addWidget(QLabel("z₂ ="), 1, 0)
        input_layout.addWidget(self.real2_field, 1, 1)
        input_layout.addWidget(QLabel("+"), 1, 2)
        input_layout.addWidget(self.imag2_field, 1, 3)
        input_layout.addWidget(QLabel("i"), 1, 4)

        button_row = QHBoxLayout()
        self.calculate_btn = QPushButton("Calculate")
        self.calculate_btn.setToolTip("Ctrl+Enter")
        self.calculate_btn.clicked.connect(self.calculate)
        button_row.addStretch()
        button_row.addWidget(self.calculate_btn)
        input_layout.addLayout(button_row, 2, 0, 1, 5)

        main_layout.addWidget(input_group)

        # --- Results ---
        self.results_group = QGroupBox("Results")
        self._results_layout = QGridLayout()
        self.results_group.setLayout(self._results_layout)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QFrame.Shape.NoFrame)
        scroll.setWidget(self.results_group)
        main_layout.addWidget(scroll, stretch=1)

        self.results_group.setVisible(False)

    # -- Public interface for mode switching --

    def activate(self) -> None:
        self.real1_field.setFocus()

    def deactivate(self) -> None:
        self._stop_tweens()

    # -- Calculation --

    def get_operands(self) -> tuple[Complex, Complex]:
        """Read both operands.

        Raises:
            ValueError: if any field is not a finite number.
        """
        z1 = Complex(
            parse_operand(self.real1_field.text()),
            parse_operand(self.imag1_field.text()),
        )
        z2 = Complex(
            parse_operand(self.real2_field.text()),
            parse_operand(self.imag2_field.text()),
        )
        return z1, z2

    def calculate(self) -> None:
        try:
            z1, z2 = self.get_operands()
        except ValueError:
            show_notification(
                self, "Please enter valid numeric values for all fields.", ERROR,
            )
            return

        cards = compute_results(z1, z2)
        logger.debug("Computed %d result cards for z1=%s z2=%s", len(cards), z1, z2)
        self._display_results(cards)
        show_notification(self, "Calculations completed successfully!", SUCCESS)
        self._press_feedback()

    def _display_results(self, cards: list[ResultCard]) -> None:
        self._stop_tweens()
        for widget in self._card_widgets:
            self._results_layout.removeWidget(widget)
            widget.deleteLater()
        self._card_widgets.clear()

        for i, card in enumerate(cards):
            widget = ResultCardWidget(card)
            row, col = divmod(i, RESULT_COLUMNS)
            self._results_layout.addWidget(widget, row, col)
            self._card_widgets.append(widget)

            if card.number is not None:
                tween = ValueTween(
                    widget.value_label, 0.0, card.number,
                    duration_ms=TWEEN_DURATION_MS, parent=self,
                )
                self._tweens.append(tween)
                tween.start()

        self.results_group.setVisible(True)

    def _stop_tweens(self) -> None:
        for tween in self._tweens:
            tween.stop()
            tween.deleteLater()
        self._tweens.clear()

    def _press_feedback(self) -> None:
        """Show the button pressed for a moment."""
        self.calculate_btn.setDown(True)
        QTimer.singleShot(
            BUTTON_PRESS_MS, lambda: self.calculate_btn.setDown(False),
        )
