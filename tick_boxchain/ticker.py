"""Ticker - idempotent start/stop over a periodic TimerSource."""
from __future__ import annotations

import logging
from collections.abc import Hashable
from typing import TYPE_CHECKING, Callable

from tick_boxchain.clock import Clock

if TYPE_CHECKING:
    from tick_boxchain.types import TimerSource

logger = logging.getLogger(__name__)


class Ticker:
    """Runs a callback every ``period_ms`` while active.

    The timer handle exists exactly while the ticker is active.
    """

    def __init__(self, timer: TimerSource, period_ms: int = 50) -> None:
        self._timer = timer
        self._clock = Clock(period_ms)
        self._handle: Hashable | None = None

    @property
    def active(self) -> bool:
        return self._handle is not None

    @property
    def clock(self) -> Clock:
        return self._clock

    def start(self, on_tick: Callable[[], None]) -> None:
        if self._handle is not None:
            return

        def _tick() -> None:
            self._clock.advance()
            on_tick()

        self._clock.reset()
        self._handle = self._timer.schedule(_tick, self._clock.period_ms)
        logger.debug("ticker started (period=%dms)", self._clock.period_ms)

    def stop(self) -> None:
        if self._handle is None:
            return
        handle = self._handle
        self._handle = None
        self._timer.cancel(handle)
        logger.debug("ticker stopped after %d ticks", self._clock.tick_number)
