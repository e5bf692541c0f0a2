"""Countdown state for the meeting timer. Pure logic, no UI.

One ``CountdownTimer`` lives for the whole process. An external scheduler calls
``tick()`` once per second; the window calls the other mutators in response to
buttons and keys. Everything runs under one lock so a tick can never interleave
with a reset or a re-duration half way through.
"""

import threading
from collections.abc import Callable
from dataclasses import dataclass
from pmt.common.logger import log

DEFAULT_DURATION = 180
MIN_DURATION = 1

# Preset durations offered as buttons, in display order.
PRESETS = (
    ("5 Min", 5 * 60),
    ("3 Min", 3 * 60),
    ("10 Sec", 10),
)


# Read-only copy of the timer for renderers that poll.
@dataclass(frozen=True)
class TimerView:
    running: bool
    elapsed: int
    duration: int


# Anything under MIN_DURATION gets clamped up.
def _clamp_duration(seconds):
    seconds = int(seconds)
    if seconds < MIN_DURATION:
        log.warning(f"Duration of {seconds} seconds is below the minimum, clamping to {MIN_DURATION}")
        return MIN_DURATION
    return seconds


class CountdownTimer:

    def __init__(self, duration=DEFAULT_DURATION):
        self._lock = threading.RLock()
        self._listeners: list[Callable[["CountdownTimer"], None]] = []
        self.running = False
        self.elapsed = 0
        self.duration = _clamp_duration(duration)
        log.debug(f"Initialized countdown timer with duration of {self.duration} seconds")

    #region === Listeners ===

    # Registers a callback that gets the timer passed in after every state change.
    def subscribe(self, callback):
        with self._lock:
            if callback not in self._listeners:
                self._listeners.append(callback)
    def unsubscribe(self, callback):
        with self._lock:
            if callback in self._listeners:
                self._listeners.remove(callback)

    # Callbacks run outside the lock so they're free to read the timer (or mutate it) themselves.
    def _notify(self):
        with self._lock:
            listeners = list(self._listeners)
        for callback in listeners:
            callback(self)

    #endregion === Listeners ===

    #region === Mutators ===

    # Advances one second. Only does anything while running and short of the target, and stops itself on
    # hitting it.
    def tick(self):
        with self._lock:
            if not self.running or self.elapsed >= self.duration:
                return
            self.elapsed += 1
            if self.elapsed >= self.duration:
                self.running = False
                log.info(f"Countdown of {self.duration} seconds complete")
        self._notify()

    # Puts the timer back to 0:00 elapsed and stopped. Duration stays as is.
    def reset(self):
        with self._lock:
            self._reset_locked()
        self._notify()
    def _reset_locked(self):
        self.running = False
        self.elapsed = 0
        log.debug(f"Reset countdown timer (duration {self.duration})")

    # Reset, then retarget.
    def set_duration(self, seconds):
        with self._lock:
            self._reset_locked()
            self.duration = _clamp_duration(seconds)
            log.info(f"Set countdown duration to {self.duration} seconds")
        self._notify()

    # Start from stopped, pause from running. Starting a finished countdown starts it over from zero.
    def start_or_stop(self):
        with self._lock:
            if not self.running and self.elapsed >= self.duration:
                self._reset_locked()
            self.running = not self.running
            log.debug(f"{'Started' if self.running else 'Paused'} countdown at {self.elapsed}/{self.duration}")
        self._notify()

    def add_minute(self):
        with self._lock:
            self._reset_locked()
            self.duration += 60
            log.info(f"Added a minute, duration is now {self.duration} seconds")
        self._notify()

    # Only subtracts while the duration is over a minute.
    def remove_minute(self):
        with self._lock:
            self._reset_locked()
            if self.duration > 60:
                self.duration -= 60
                log.info(f"Removed a minute, duration is now {self.duration} seconds")
        self._notify()

    #endregion === Mutators ===

    #region === Derived values ===

    def progress(self):
        with self._lock:
            if self.duration <= 0:
                return 0.0
            return self.elapsed / self.duration

    def is_complete(self):
        with self._lock:
            return self.elapsed == self.duration

    def remaining_time(self):
        with self._lock:
            return self.duration - self.elapsed

    # Label for the start/stop control.
    def start_label(self):
        with self._lock:
            if self.running:
                return "Pause"
            return "Start" if self.elapsed < self.duration else "Restart"

    def snapshot(self):
        with self._lock:
            return TimerView(running=self.running, elapsed=self.elapsed, duration=self.duration)

    #endregion === Derived values ===
