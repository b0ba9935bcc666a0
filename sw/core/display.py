"""Derived, read-only view of a TimerState. Pure logic, no UI."""

from dataclasses import dataclass
from datetime import timedelta

from sw.core.timer_state import Command, TimerMode, TimerState

MINUTE = 60
HOUR = 60 * MINUTE

_BUTTON_LABELS = {
    TimerMode.IDLE: "Start",
    TimerMode.STOPPED: "Restart",
    TimerMode.RUNNING: "Stop",
}


@dataclass(frozen=True)
class TimerView:
    """Everything the window needs to draw one frame."""
    duration_text: str
    button_label: str
    button_command: Command


def format_duration(duration: timedelta) -> str:
    """Format a duration as HH:MM:SS.CC.

    Hours are unbounded (never wrapped at 24). Centiseconds are truncated,
    not rounded. Negative durations clamp to zero.
    """
    if duration < timedelta():
        duration = timedelta()
    seconds = duration.days * 86400 + duration.seconds
    centis = duration.microseconds // 10_000
    h, rem = divmod(seconds, HOUR)
    m, s = divmod(rem, MINUTE)
    return f"{h:02d}:{m:02d}:{s:02d}.{centis:02d}"


def button_label(mode: TimerMode) -> str:
    return _BUTTON_LABELS[mode]


def button_command(mode: TimerMode) -> Command:
    if mode is TimerMode.RUNNING:
        return Command.STOP
    return Command.START


def render(state: TimerState) -> TimerView:
    return TimerView(
        duration_text=format_duration(state.accumulated),
        button_label=button_label(state.mode),
        button_command=button_command(state.mode),
    )
