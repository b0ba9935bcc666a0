import time

DEFAULT_FPS = 30
MILLISEC = 1000


class ClockSourceError(RuntimeError):
    """The periodic tick source could not be set up."""


# Converts a refresh rate into a whole-millisecond tick period, e.g. 30 fps -> 33 ms.
def tick_period_ms(fps=DEFAULT_FPS) -> int:
    if not isinstance(fps, (int, float)) or isinstance(fps, bool) or fps <= 0:
        raise ClockSourceError(f"Tick rate must be a positive number, got {fps!r}")
    period = int(MILLISEC // fps)
    if period <= 0:
        raise ClockSourceError(f"Tick rate {fps} is too high for a millisecond timer")
    return period


# Plain-Python tick stream for consumers that don't run a Qt event loop. Infinite, yields None once per period
# (seconds). Ticks carry nothing, readers are expected to check the clock themselves.
def ticks(period, sleep=time.sleep):
    # Checked at call time, not on first next().
    if period <= 0:
        raise ClockSourceError(f"Tick period must be positive, got {period!r}")

    def _stream():
        while True:
            sleep(period)
            yield None
    return _stream()
