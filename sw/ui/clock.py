"""Qt-backed periodic tick source."""

from PySide6.QtCore import QObject, Qt, QTimer, Signal

from sw.common.logger import log
from sw.core.clock import ClockSourceError


class ClockSource(QObject):
    """Emits ``tick`` at a fixed period for the rest of the application's life.

    The source is one-shot: once started it cannot be stopped or restarted.
    Ticks carry no timestamp, listeners read their own clock.
    """
    tick = Signal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self._started = False
        self._timer = QTimer(self)
        self._timer.setTimerType(Qt.PreciseTimer)
        self._timer.timeout.connect(self._on_timeout)

    @property
    def started(self):
        return self._started

    @property
    def period_ms(self):
        return self._timer.interval()

    def start(self, period_ms):
        if self._started:
            raise ClockSourceError("Clock source is already running and cannot be restarted")
        if period_ms <= 0:
            raise ClockSourceError(f"Tick period must be positive, got {period_ms!r} ms")
        self._timer.start(period_ms)
        if not self._timer.isActive():
            raise ClockSourceError("Platform timer could not be started")
        self._started = True
        log.info(f"Clock source started with a {period_ms} ms period")

    def _on_timeout(self):
        self.tick.emit()
