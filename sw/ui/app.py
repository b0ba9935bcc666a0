import sys
import time
from PySide6.QtCore import Qt
from PySide6.QtGui import QFont, QFontDatabase
from PySide6.QtWidgets import (
    QApplication,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)
from sw.common.logger import log
from sw.common.setup import PATHS
from sw.core import config
from sw.core.clock import tick_period_ms
from sw.core.display import render
from sw.core.timer_state import Command, TimerState
from sw.ui.clock import ClockSource


# Registers the bundled font file with Qt and returns its family name, or None if it couldn't be loaded. The
# window still works without it, just in the platform default font.
def load_font(font_file):
    if not font_file:
        return None
    path = PATHS.assets / font_file
    if not path.is_file():
        log.warning(f"Font file '{path}' not found, using the default font")
        return None
    font_id = QFontDatabase.addApplicationFont(str(path))
    if font_id == -1:
        log.warning(f"Qt could not load font file '{path}', using the default font")
        return None
    families = QFontDatabase.applicationFontFamilies(font_id)
    if not families:
        log.warning(f"Font file '{path}' has no font families, using the default font")
        return None
    log.debug(f"Loaded font family '{families[0]}' from '{path}'")
    return families[0]


# ---------------------------------------------------------------------------
# Main window
# ---------------------------------------------------------------------------

# Main window of the stopwatch. Owns the TimerState and is the only thing that feeds it commands.
class MainWindow(QMainWindow):

    def __init__(self, settings=None, clock=time.monotonic):
        super().__init__()
        s = settings if settings is not None else config.load_settings()
        self.settings = s

        self.setWindowTitle(s["window_title"])
        if s["always_on_top"]:
            self.setWindowFlags(self.windowFlags() | Qt.WindowStaysOnTopHint)

        self.state = TimerState(clock)
        self._view = None

        # -- Fonts --
        family = s["font_family"] or load_font(s["font_file"])
        self._time_font = QFont(family) if family else QFont()
        self._time_font.setPointSize(s["time_font_size"])
        self._button_font = QFont(family) if family else QFont()

        # -- Build UI --
        central = QWidget()
        self.setCentralWidget(central)
        lay = QVBoxLayout(central)
        pad = s["padding"]
        lay.setContentsMargins(pad, pad, pad, pad)
        lay.setSpacing(s["spacing"])

        self._time_label = QLabel()
        self._time_label.setFont(self._time_font)
        self._time_label.setAlignment(Qt.AlignCenter)
        lay.addWidget(self._time_label, 0, Qt.AlignCenter)

        btn_row = QHBoxLayout()
        btn_row.setSpacing(s["spacing"])
        btn_row.addStretch()
        self._toggle_btn = QPushButton()
        self._reset_btn = QPushButton("Reset")
        for btn in (self._toggle_btn, self._reset_btn):
            btn.setFont(self._button_font)
            btn.setMinimumWidth(s["button_min_width"])
            btn_row.addWidget(btn)
        btn_row.addStretch()
        self._toggle_btn.clicked.connect(self._on_toggle)
        self._reset_btn.clicked.connect(self._on_reset)
        lay.addLayout(btn_row)

        self.setFixedSize(s["window_width"], s["window_height"])
        self._refresh()

        # -- Tick source --
        self._clock_source = ClockSource(self)
        self._clock_source.tick.connect(self._on_tick)
        self._clock_source.start(tick_period_ms(s["fps"]))

    # ------------------------------------------------------------------ #
    #  Dispatch                                                            #
    # ------------------------------------------------------------------ #

    def dispatch(self, command):
        self.state.dispatch(command)
        self._refresh()

    def _on_toggle(self):
        self.dispatch(self._view.button_command)

    def _on_reset(self):
        self.dispatch(Command.RESET)

    def _on_tick(self):
        self.dispatch(Command.TICK)

    # ------------------------------------------------------------------ #
    #  Display                                                             #
    # ------------------------------------------------------------------ #

    @property
    def view(self):
        return self._view

    def _refresh(self):
        view = render(self.state)
        if view == self._view:
            return
        if self._view is None or view.duration_text != self._view.duration_text:
            self._time_label.setText(view.duration_text)
        if self._view is None or view.button_label != self._view.button_label:
            self._toggle_btn.setText(view.button_label)
        self._view = view


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def main():
    app = QApplication(sys.argv)
    window = MainWindow()
    window.show()
    log.info("Main window shown, entering event loop")
    sys.exit(app.exec())
