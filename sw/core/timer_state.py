import time
from datetime import timedelta
from enum import Enum
from sw.common.logger import log


class TimerMode(Enum):
    IDLE = "idle"
    RUNNING = "running"
    STOPPED = "stopped"


# Everything the state machine can be fed. User buttons produce START/STOP/RESET, the clock source produces TICK.
class Command(Enum):
    START = "start"
    STOP = "stop"
    RESET = "reset"
    TICK = "tick"


# This object handles the actual time tracking. Instants are monotonic seconds (clock change immunity), while the
# running total is kept as unrounded float seconds in `elapsed`. It only becomes a timedelta when read, so per-tick
# rounding never builds up.
class TimerState:

    def __init__(self, clock=time.monotonic):
        self._clock = clock
        self.mode = TimerMode.IDLE
        self.elapsed = 0.0
        self.last_checkpoint = clock()

    @property
    def running(self):
        return self.mode is TimerMode.RUNNING

    # Total running time since the last reset, rounded to the microsecond only here.
    @property
    def accumulated(self):
        return timedelta(seconds=self.elapsed)

    # The single entry point for every input. `now` can be injected, otherwise the state's own clock is read.
    def dispatch(self, command, now=None):
        if now is None:
            now = self._clock()
        handler = self._HANDLERS[Command(command)]
        handler(self, now)

    # Start and stop methods for the timer. Starting a stopped timer resumes it, accumulated time is untouched.
    def start(self, now):
        if self.mode is TimerMode.RUNNING:
            return
        self.last_checkpoint = now
        self.mode = TimerMode.RUNNING
        log.debug(f"Started timer at mono {now}, resuming from {self.accumulated}")
    def stop(self, now):
        if self.mode is not TimerMode.RUNNING:
            return
        self._accumulate(now)
        self.mode = TimerMode.STOPPED
        log.debug(f"Stopped timer at mono {now} with {self.accumulated} accumulated")
    # Hard zero. Whatever was running since the last checkpoint is thrown away, not flushed first.
    def reset(self, now):
        self.elapsed = 0.0
        self.last_checkpoint = now
        self.mode = TimerMode.IDLE
        log.debug(f"Reset timer to 0 at mono {now}")

    # Folds the time since the last checkpoint into accumulated and moves the checkpoint forward.
    def tick(self, now):
        if self.mode is TimerMode.RUNNING:
            self._accumulate(now)

    def _accumulate(self, now):
        # An injected clock can go backwards, accumulated never does.
        delta = max(0.0, now - self.last_checkpoint)
        self.elapsed += delta
        self.last_checkpoint = now

    _HANDLERS = {
        Command.START: start,
        Command.STOP: stop,
        Command.RESET: reset,
        Command.TICK: tick,
    }

    def __repr__(self):
        return f"TimerState(mode={self.mode.name}, elapsed={self.elapsed}, last_checkpoint={self.last_checkpoint})"


# Reducer-style wrapper around dispatch(), returns the same (mutated) state so calls can be chained.
def update(state: TimerState, command: Command, now: float | None = None) -> TimerState:
    state.dispatch(command, now)
    return state
