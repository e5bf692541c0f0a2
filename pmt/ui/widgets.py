"""The countdown ring: white face, state-colored track, progress arc and readout.

Purely a renderer: it is handed a ``TimerView`` and repaints from it, it never
touches the timer itself.
"""

from PySide6.QtCore import Qt, QRectF
from PySide6.QtGui import QColor, QFont, QPainter, QPen
from PySide6.QtWidgets import QSizePolicy, QWidget
from pmt.core.countdown import TimerView
from pmt.ui.theme import COLORS, FONT_FAMILY, RING, progress_color, track_color
from pmt.util import format_duration


class CountdownRing(QWidget):

    def __init__(self, parent=None):
        super().__init__(parent)
        self._view = TimerView(running=False, elapsed=0, duration=1)
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
        self.setMinimumSize(120, 120)

    def set_view(self, view):
        self._view = view
        self.update()

    def readout(self):
        """Remaining time as M:SS."""
        return format_duration(self._view.duration - self._view.elapsed)

    def _progress(self):
        if self._view.duration <= 0:
            return 0.0
        return self._view.elapsed / self._view.duration

    def paintEvent(self, event):
        side = min(self.width(), self.height())
        if side <= 0:
            return
        face = QRectF((self.width() - side) / 2, (self.height() - side) / 2, side, side)
        inset = side / RING["inner_ratio"]
        ring_rect = face.adjusted(inset, inset, -inset, -inset)

        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing)

        # Face
        painter.setPen(Qt.NoPen)
        painter.setBrush(QColor(COLORS["face"]))
        painter.drawEllipse(face)

        # Track
        painter.setBrush(Qt.NoBrush)
        painter.setPen(QPen(QColor(track_color(self._view.running)), side / RING["outer_ratio"]))
        painter.drawEllipse(ring_rect)

        # Progress arc, clockwise from twelve o'clock
        progress = self._progress()
        if progress > 0:
            complete = self._view.elapsed == self._view.duration
            pen = QPen(QColor(progress_color(progress, complete)), side / RING["inner_ratio"])
            pen.setCapStyle(Qt.RoundCap)
            pen.setJoinStyle(Qt.RoundJoin)
            painter.setPen(pen)
            painter.drawArc(ring_rect, 90 * 16, -int(progress * 360 * 16))

        # Readout
        font = QFont(FONT_FAMILY, max(1, int(side / RING["font_ratio"] * 0.75)))
        font.setWeight(QFont.Black)
        painter.setFont(font)
        painter.setPen(QColor(COLORS["text"]))
        painter.drawText(face, Qt.AlignCenter, self.readout())
        painter.end()
