"""Stopwatch measurement and linear remaining-time estimation.

Every wall-clock read goes through an injectable ``clock`` returning
seconds as a float, so tests can drive time explicitly.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from datetime import timedelta

from pytimespan._constants import UNBOUNDED
from pytimespan._errors import (
    ERR_MSG_DURATION_OUT_OF_RANGE,
    ERR_MSG_MISSING_ARGUMENT,
    InvalidArgumentError,
    OutOfRangeError,
)
from pytimespan.formatting import FormatOptions, format_verbose

logger = logging.getLogger(__name__)

__all__ = [
    "Clock",
    "Stopwatch",
    "elapsed_time_string",
    "measure",
    "remaining_time",
    "remaining_time_string",
]

Clock = Callable[[], float]
"""Monotonic time source in seconds."""


class Stopwatch:
    """Accumulates elapsed time across start/stop cycles."""

    def __init__(self, clock: Clock = time.perf_counter) -> None:
        self._clock = clock
        self._accumulated = 0.0
        self._started_at: float | None = None

    @classmethod
    def start_new(cls, clock: Clock = time.perf_counter) -> Stopwatch:
        watch = cls(clock)
        watch.start()
        return watch

    @property
    def is_running(self) -> bool:
        return self._started_at is not None

    def start(self) -> None:
        if self._started_at is None:
            self._started_at = self._clock()

    def stop(self) -> None:
        if self._started_at is not None:
            self._accumulated += self._clock() - self._started_at
            self._started_at = None

    def reset(self) -> None:
        self._accumulated = 0.0
        self._started_at = None

    def restart(self) -> None:
        self.reset()
        self.start()

    @property
    def elapsed_seconds(self) -> float:
        running = self._clock() - self._started_at if self._started_at is not None else 0.0
        return self._accumulated + running

    @property
    def elapsed(self) -> timedelta:
        return timedelta(seconds=self.elapsed_seconds)

    @property
    def elapsed_milliseconds(self) -> int:
        return int(self.elapsed_seconds * 1000)

    def __enter__(self) -> Stopwatch:
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()


def _require(value: object, name: str) -> None:
    if value is None:
        raise InvalidArgumentError(ERR_MSG_MISSING_ARGUMENT, f"{name} is None")


def measure(action: Callable[[], object], *, clock: Clock = time.perf_counter) -> timedelta:
    """Run ``action`` and return how long it took."""
    if not callable(action):
        raise InvalidArgumentError(
            ERR_MSG_MISSING_ARGUMENT,
            f"action must be callable, got {type(action).__name__}",
        )
    with Stopwatch(clock) as watch:
        action()
    return watch.elapsed


def remaining_time(stopwatch: Stopwatch, completed: int, total: int) -> timedelta:
    """Estimate time left by linear extrapolation of the elapsed time.

    ``(total - completed) * elapsed / completed``; unbounded while nothing is
    completed or the total is zero.
    """
    _require(stopwatch, "stopwatch")
    if completed == 0 or total == 0:
        return UNBOUNDED

    remaining = total - completed
    millis = remaining * stopwatch.elapsed_milliseconds / completed
    try:
        return timedelta(milliseconds=millis)
    except OverflowError as e:
        raise OutOfRangeError(
            ERR_MSG_DURATION_OUT_OF_RANGE,
            f"remaining estimate of {millis} ms is not representable",
            wrapped=e,
        ) from e


def elapsed_time_string(stopwatch: Stopwatch, options: FormatOptions | None = None) -> str:
    """Verbose rendering of the stopwatch's elapsed time."""
    _require(stopwatch, "stopwatch")
    return format_verbose(stopwatch.elapsed, options)


def remaining_time_string(
    stopwatch: Stopwatch,
    completed: int,
    total: int,
    options: FormatOptions | None = None,
) -> str:
    """Verbose rendering of :func:`remaining_time`; ``"?"`` when unbounded."""
    estimate = remaining_time(stopwatch, completed, total)
    logger.debug("Remaining estimate for %d/%d: %s", completed, total, estimate)
    return format_verbose(estimate, options)
