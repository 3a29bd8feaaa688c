"""Shared UI widgets used by both calculator and plane modes.

Contains the Toast notification, the ValueTween label animator, input
field helpers, and the light/dark theme stylesheets.
"""

from PyQt6.QtCore import Qt, QTimer, QObject, QPointF, QRectF
from PyQt6.QtGui import QPainter, QColor, QFont, QLinearGradient
from PyQt6.QtWidgets import QWidget, QLineEdit, QLabel


ANIMATION_TICK_MS = 16  # ~60 fps

# Toast timing
TOAST_SHOW_DELAY_MS = 100
TOAST_SLIDE_MS = 300
TOAST_HIDE_AT_MS = 3000
TOAST_MARGIN = 20

SUCCESS = "success"
ERROR = "error"

_TOAST_COLORS = {
    SUCCESS: (QColor(0x4C, 0xAF, 0x50), QColor(0x45, 0xA0, 0x49)),
    ERROR: (QColor(0xF4, 0x43, 0x36), QColor(0xD3, 0x2F, 0x2F)),
}


# ---------------------------------------------------------------------------
# Animation math
# ---------------------------------------------------------------------------

def interpolate(start, end, elapsed_ms, duration_ms):
    """Linear interpolation by elapsed time, holding at end once done."""
    if duration_ms <= 0:
        return end
    progress = min(max(elapsed_ms / duration_ms, 0.0), 1.0)
    return start + (end - start) * progress


def toast_visible_fraction(elapsed_ms):
    """How much of the toast is slid into view (0 = hidden, 1 = fully in)."""
    if elapsed_ms < TOAST_SHOW_DELAY_MS:
        return 0.0
    if elapsed_ms < TOAST_HIDE_AT_MS:
        return min(1.0, (elapsed_ms - TOAST_SHOW_DELAY_MS) / TOAST_SLIDE_MS)
    return max(0.0, 1.0 - (elapsed_ms - TOAST_HIDE_AT_MS) / TOAST_SLIDE_MS)


def toast_finished(elapsed_ms):
    return elapsed_ms >= TOAST_HIDE_AT_MS + TOAST_SLIDE_MS


# ---------------------------------------------------------------------------
# Input helpers
# ---------------------------------------------------------------------------

def make_number_field(placeholder, value=""):
    """Create a QLineEdit for a single float operand."""
    field = QLineEdit()
    field.setPlaceholderText(placeholder)
    field.setText(value)
    field.setAlignment(Qt.AlignmentFlag.AlignRight)
    field.setMinimumWidth(80)
    return field


# ---------------------------------------------------------------------------
# ValueTween
# ---------------------------------------------------------------------------

class ValueTween(QObject):
    """Animates a QLabel's text from one number to another."""

    def __init__(self, label: QLabel, start, end, duration_ms=600,
                 digits=3, parent=None):
        super().__init__(parent)
        self._label = label
        self._start = start
        self._end = end
        self._duration_ms = duration_ms
        self._digits = digits
        self._elapsed_ms = 0
        self._timer = QTimer(self)
        self._timer.setInterval(ANIMATION_TICK_MS)
        self._timer.timeout.connect(self._tick)

    def start(self):
        self._elapsed_ms = 0
        self._show(self._start)
        self._timer.start()

    def stop(self):
        """Stop early and show the final value."""
        self._timer.stop()
        self._show(self._end)

    @property
    def running(self):
        return self._timer.isActive()

    def _show(self, value):
        self._label.setText(f"{value:.{self._digits}f}")

    def _tick(self):
        self._elapsed_ms += ANIMATION_TICK_MS
        self._show(interpolate(
            self._start, self._end, self._elapsed_ms, self._duration_ms,
        ))
        if self._elapsed_ms >= self._duration_ms:
            self._timer.stop()


# ---------------------------------------------------------------------------
# Toast
# ---------------------------------------------------------------------------

class Toast(QWidget):
    """Notification that slides in at the top-right of its parent.

    Deletes itself once it has slid back out.
    """

    def __init__(self, parent, message, kind=SUCCESS):
        super().__init__(parent)
        self.message = message
        self.kind = kind if kind in _TOAST_COLORS else ERROR
        self._elapsed_ms = 0
        self.setAttribute(Qt.WidgetAttribute.WA_TransparentForMouseEvents)

        self._font = QFont()
        self._font.setBold(True)
        self._font.setPointSizeF(11)
        self.setFont(self._font)
        metrics_width = self.fontMetrics().horizontalAdvance(message)
        self.resize(metrics_width + 60, 48)

        self._timer = QTimer(self)
        self._timer.setInterval(ANIMATION_TICK_MS)
        self._timer.timeout.connect(self._tick)

    def start(self):
        self._place()
        self.show()
        self.raise_()
        self._timer.start()

    def _place(self):
        parent = self.parentWidget()
        fraction = toast_visible_fraction(self._elapsed_ms)
        right_edge = parent.width() - TOAST_MARGIN
        # Fully hidden sits one toast width past the right edge
        x = right_edge - self.width() * fraction + (1 - fraction) * TOAST_MARGIN
        self.move(int(x), TOAST_MARGIN)

    def _tick(self):
        self._elapsed_ms += ANIMATION_TICK_MS
        if toast_finished(self._elapsed_ms):
            self._timer.stop()
            self.hide()
            self.deleteLater()
            return
        self._place()

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        rect = QRectF(self.rect())
        start_color, end_color = _TOAST_COLORS[self.kind]
        gradient = QLinearGradient(QPointF(0, 0), QPointF(rect.width(), rect.height()))
        gradient.setColorAt(0, start_color)
        gradient.setColorAt(1, end_color)

        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(gradient)
        painter.drawRoundedRect(rect, 10, 10)

        painter.setPen(QColor(255, 255, 255))
        painter.setFont(self._font)
        painter.drawText(rect, Qt.AlignmentFlag.AlignCenter, self.message)
        painter.end()


def show_notification(widget, message, kind=SUCCESS):
    """Show a toast over the top-level window containing widget."""
    host = widget.window()
    toast = Toast(host, message, kind)
    toast.start()
    return toast


# ---------------------------------------------------------------------------
# Themes
# ---------------------------------------------------------------------------

LIGHT_STYLE = """
QWidget { background: #f4f6fb; color: #222; }
QLineEdit { background: white; border: 1px solid #bbb; border-radius: 4px; padding: 3px; }
QPushButton { background: #667eea; color: white; border-radius: 6px; padding: 6px 12px; }
QPushButton:checked { background: #4353b8; }
QFrame#resultCard { background: white; border: 1px solid #dde; border-radius: 8px; }
"""

DARK_STYLE = """
QWidget { background: #1a1a2e; color: #e6e6e6; }
QLineEdit { background: #16213e; border: 1px solid #445; border-radius: 4px; padding: 3px; }
QPushButton { background: #4353b8; color: white; border-radius: 6px; padding: 6px 12px; }
QPushButton:checked { background: #2c3a8c; }
QFrame#resultCard { background: #16213e; border: 1px solid #334; border-radius: 8px; }
"""


def theme_stylesheet(dark):
    return DARK_STYLE if dark else LIGHT_STYLE
