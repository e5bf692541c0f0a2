import sys
from PySide6.QtCore import Qt, QTimer
from PySide6.QtGui import QFont
from PySide6.QtWidgets import (
    QApplication,
    QHBoxLayout,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)
from pmt.common.logger import log
from pmt.core import config
from pmt.core.countdown import CountdownTimer, PRESETS
from pmt.ui.dialogs import DurationDialog
from pmt.ui.keys import action_for_key
from pmt.ui.theme import COLORS, FONT_FAMILY
from pmt.ui.widgets import CountdownRing

# One second per tick
TICK_MS = 1000


# ---------------------------------------------------------------------------
# Main window
# ---------------------------------------------------------------------------

# Main window of the meeting timer. The ring on the left, presets and controls stacked on the right.
class MainWindow(QMainWindow):

    def __init__(self):
        super().__init__()
        self.setWindowTitle("Public Meeting Timer")

        # -- Load prefs --
        s = config.load_prefs()["settings"]
        self.start_fullscreen = s.get("start_fullscreen", True)
        self.always_on_top = s.get("always_on_top", False)
        if self.always_on_top:
            self.setWindowFlags(self.windowFlags() | Qt.WindowStaysOnTopHint)

        # -- Countdown --
        self.timer = CountdownTimer(config.load_duration())
        self._duration_saver = config.DurationSaver(self.timer.duration)
        self.timer.subscribe(self._on_timer_changed)
        self.timer.subscribe(self._duration_saver)

        # -- Build UI skeleton --
        central = QWidget()
        central.setStyleSheet(f"background-color: {COLORS['background']};")
        self.setCentralWidget(central)
        main_lay = QHBoxLayout(central)

        self._ring = CountdownRing()
        main_lay.addWidget(self._ring, 1)

        controls = QVBoxLayout()
        controls.addStretch()
        for label, seconds in PRESETS:
            controls.addWidget(self._make_button(f"⏲ {label}", lambda _=False, sec=seconds: self.timer.set_duration(sec)))
        adjust_row = QHBoxLayout()
        adjust_row.addWidget(self._make_button("+1 Min", lambda _=False: self.timer.add_minute()))
        adjust_row.addWidget(self._make_button("-1 Min", lambda _=False: self.timer.remove_minute()))
        controls.addLayout(adjust_row)
        controls.addSpacing(24)
        controls.addWidget(self._make_button("\U0001f6d1 Reset", lambda _=False: self.timer.reset()))
        self._start_btn = self._make_button("", lambda _=False: self.timer.start_or_stop())
        controls.addWidget(self._start_btn)
        controls.addSpacing(24)
        controls.addWidget(self._make_button("Settings", lambda _=False: self._open_settings()))
        controls.addStretch()
        main_lay.addLayout(controls)

        self.resize(480, 300)
        self._refresh()

        # -- Tick timer (1 s). Runs on the GUI thread, so ticks and button/key actions never overlap. --
        self._ticker = QTimer(self)
        self._ticker.timeout.connect(self.timer.tick)
        self._ticker.start(TICK_MS)

    # Buttons never take focus, otherwise Space/Return would click whichever one was pressed last instead of
    # reaching the shortcut handler.
    def _make_button(self, text, on_click):
        btn = QPushButton(text)
        btn.setFont(QFont(FONT_FAMILY, 16, QFont.Black))
        btn.setFlat(True)
        btn.setFocusPolicy(Qt.NoFocus)
        btn.setStyleSheet(f"color: {COLORS['button_text']}; text-align: left;")
        btn.clicked.connect(on_click)
        return btn

    # ------------------------------------------------------------------ #
    #  Timer updates                                                       #
    # ------------------------------------------------------------------ #

    def _on_timer_changed(self, timer):
        self._refresh()

    def _refresh(self):
        self._ring.set_view(self.timer.snapshot())
        labels = {"Pause": "⏸ Pause", "Start": "▶ Start", "Restart": "↪ Restart"}
        self._start_btn.setText(labels[self.timer.start_label()])

    def _open_settings(self):
        DurationDialog(self, self.timer).exec()

    # ------------------------------------------------------------------ #
    #  Keyboard shortcuts                                                  #
    # ------------------------------------------------------------------ #

    def keyPressEvent(self, event):
        action = action_for_key(event.key())
        if action is not None and not event.isAutoRepeat():
            log.debug(f"Key {event.key()} triggered '{action}'")
            getattr(self.timer, action)()
            event.accept()
            return
        super().keyPressEvent(event)

    # ------------------------------------------------------------------ #
    #  Window close                                                        #
    # ------------------------------------------------------------------ #

    def closeEvent(self, event):
        self._ticker.stop()
        self.timer.unsubscribe(self._on_timer_changed)
        self.timer.unsubscribe(self._duration_saver)
        log.info("Main window closed, tick timer stopped.")
        event.accept()


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def main():
    app = QApplication(sys.argv)
    window = MainWindow()
    if window.start_fullscreen:
        window.showFullScreen()
    else:
        window.show()
    sys.exit(app.exec())
