"""Duration dialog for the meeting timer."""

from PySide6.QtCore import Qt
from PySide6.QtGui import QFont
from PySide6.QtWidgets import (
    QDialog,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
)
from pmt.common.logger import log
from pmt.ui.theme import FONT_FAMILY
from pmt.util import filter_duration_text, format_duration, parse_duration

# Small modal asking for a new duration as M:SS or plain seconds. Opens from the Settings button in the main window.
class DurationDialog(QDialog):

    def __init__(self, parent, timer):
        super().__init__(parent)
        self.setWindowTitle("Settings")
        self.setModal(True)
        self._timer = timer

        # Settings shouldn't be edited against a live countdown
        if timer.running:
            timer.start_or_stop()

        outer = QVBoxLayout(self)

        row = QHBoxLayout()
        label = QLabel("Reset timer to")
        label.setFont(QFont(FONT_FAMILY, 14, QFont.Bold))
        row.addWidget(label)

        self._field = QLineEdit(format_duration(timer.duration))
        self._field.setPlaceholderText("Duration")
        self._field.setAlignment(Qt.AlignRight)
        self._field.setFixedWidth(70)
        self._field.textEdited.connect(self._on_edited)
        row.addWidget(self._field)
        outer.addLayout(row)

        ok_btn = QPushButton("OK")
        ok_btn.setDefault(True)  # Return in the field lands here too
        ok_btn.clicked.connect(self._commit)
        outer.addWidget(ok_btn, alignment=Qt.AlignCenter)

        self._field.setFocus()
        self._field.selectAll()

    # Only digits and colons survive, typed or pasted.
    def _on_edited(self, text):
        filtered = filter_duration_text(text)
        if filtered != text:
            self._field.setText(filtered)

    def _commit(self):
        seconds = parse_duration(self._field.text())
        log.info(f"Duration dialog committed '{self._field.text()}' ({seconds} seconds)")
        self._timer.set_duration(seconds)
        self.accept()
