"""Cursor that walks the chain one settled position at a time."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from tick_boxchain.types import Outcome

if TYPE_CHECKING:
    from tick_boxchain.chain import Position

logger = logging.getLogger(__name__)


class SequenceCursor:
    """Tracks the animating position and which way to step after it settles.

    Reaching either end of the chain flips ``traversal_direction`` and
    keeps the cursor on the end position, so the next transition runs
    that position back the other way.
    """

    def __init__(self, start: Position, traversal_direction: int = 1) -> None:
        if traversal_direction not in (-1, 1):
            raise ValueError("traversal_direction must be -1 or 1")
        self._current = start
        self._traversal_direction = traversal_direction

    @property
    def current(self) -> Position:
        return self._current

    @property
    def traversal_direction(self) -> int:
        return self._traversal_direction

    @property
    def idle(self) -> bool:
        return not self._current.state.animating

    def begin_current(self, on_started: Callable[[], None] | None = None) -> Outcome:
        return self._current.begin(on_started)

    def advance(self, on_redraw: Callable[[], None] | None = None) -> Outcome:
        outcome = self._current.advance()
        if outcome is not Outcome.SETTLED:
            return outcome

        settled = self._current
        step = settled.neighbor(self._traversal_direction, self._reverse)
        self._current = step.position
        logger.debug(
            "position %d settled at %s, cursor -> %d",
            settled.index,
            settled.state.committed,
            self._current.index,
        )
        if on_redraw is not None:
            on_redraw()
        return outcome

    def _reverse(self) -> None:
        self._traversal_direction *= -1
