"""TimerSource implementations: pygame event timers and a manual clock."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

import pygame


class PygameTimerSource:
    """Periodic timers backed by ``pygame.time.set_timer``.

    Each handle is a custom event type. The host loop passes events to
    :meth:`dispatch`, which runs the callback bound to that type.
    """

    def __init__(self) -> None:
        self._callbacks: dict[int, Callable[[], Any]] = {}
        self._free: list[int] = []

    def schedule(self, callback: Callable[[], Any], period_ms: int) -> int:
        event_type = self._free.pop() if self._free else pygame.event.custom_type()
        self._callbacks[event_type] = callback
        pygame.time.set_timer(event_type, period_ms)
        return event_type

    def cancel(self, handle: int) -> None:
        if self._callbacks.pop(handle, None) is None:
            return
        pygame.time.set_timer(handle, 0)
        # Drop ticks already queued so a reused event type starts clean.
        pygame.event.clear(handle)
        self._free.append(handle)

    def dispatch(self, event: pygame.event.Event) -> bool:
        callback = self._callbacks.get(event.type)
        if callback is None:
            return False
        callback()
        return True


@dataclass
class _Scheduled:
    callback: Callable[[], Any]
    period_ms: int
    next_due: int


class ManualTimerSource:
    """Deterministic TimerSource driven by explicit :meth:`advance` calls."""

    def __init__(self) -> None:
        self._now = 0
        self._next_handle = 0
        self._scheduled: dict[int, _Scheduled] = {}

    @property
    def now_ms(self) -> int:
        return self._now

    @property
    def pending(self) -> int:
        return len(self._scheduled)

    def schedule(self, callback: Callable[[], Any], period_ms: int) -> int:
        self._next_handle += 1
        self._scheduled[self._next_handle] = _Scheduled(
            callback, period_ms, self._now + period_ms
        )
        return self._next_handle

    def cancel(self, handle: int) -> None:
        self._scheduled.pop(handle, None)

    def advance(self, ms: int) -> int:
        """Move time forward by ``ms``, firing due callbacks in order.

        Returns the number of callbacks fired.
        """
        target = self._now + ms
        fired = 0
        while True:
            due = [
                (entry.next_due, handle)
                for handle, entry in self._scheduled.items()
                if entry.next_due <= target
            ]
            if not due:
                break
            when, handle = min(due)
            entry = self._scheduled[handle]
            self._now = when
            entry.next_due += entry.period_ms
            entry.callback()
            fired += 1
        self._now = target
        return fired

    def run_until_idle(self, limit_ms: int = 60_000) -> int:
        """Advance until nothing is scheduled or ``limit_ms`` has passed."""
        fired = 0
        deadline = self._now + limit_ms
        while self._scheduled and self._now < deadline:
            step = min(entry.next_due for entry in self._scheduled.values()) - self._now
            fired += self.advance(max(step, 0))
        return fired
