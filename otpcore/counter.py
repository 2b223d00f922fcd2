"""
counter.py — counter sources that feed the HOTP engine.

- TimeCounter: TOTP counter, floor((now - T0) / X) as in RFC 6238.
- StaticCounter: a fixed, caller-owned HOTP counter value.

Both are immutable and read nothing but their own fields and (for
TimeCounter) the clock, so they can be shared across threads.
"""

import abc
import logging
import time
from typing import Callable

from .config import DEFAULT_T0, DEFAULT_TIME_STEP
from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

Clock = Callable[[], float]


class Counter(abc.ABC):
    """Anything that can produce the current HOTP counter value."""

    @abc.abstractmethod
    def count(self) -> int:
        raise NotImplementedError


class TimeCounter(Counter):
    """
    Counter derived from wall-clock time.

    Arguments:
        interval: X, step length in seconds (must be > 0)
        step: T0, epoch offset in seconds
        clock: zero-argument callable returning Unix time in seconds;
            defaults to time.time. Tests inject a fixed timestamp here.
    """

    def __init__(self, interval: int = DEFAULT_TIME_STEP, step: int = DEFAULT_T0,
                 clock: Clock = None):
        if interval <= 0:
            raise ConfigurationError(f"interval must be a positive number of seconds, got {interval}")
        self._interval = interval
        self._step = step
        self._clock = clock or time.time

    @property
    def interval(self) -> int:
        return self._interval

    @property
    def step(self) -> int:
        return self._step

    def _now(self) -> int:
        return int(self._clock())

    def count(self) -> int:
        # floor division rounds toward -inf, also when now < T0
        return (self._now() - self._step) // self._interval

    def remaining(self) -> int:
        """Seconds left before count() moves to the next value."""
        return self._interval - ((self._now() - self._step) % self._interval)

    def __repr__(self):
        return f"TimeCounter(interval={self._interval}, step={self._step})"


class StaticCounter(Counter):
    """
    Counter that always returns the value it was built with.

    HOTP callers own (and persist) their counter; wrapping it here lets
    HOTP.verify_code() check a window around it. Build a new StaticCounter
    when the stored counter moves.
    """

    def __init__(self, value: int = 0):
        self._value = value

    def count(self) -> int:
        return self._value

    def __repr__(self):
        return f"StaticCounter({self._value})"
