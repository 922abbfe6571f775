"""Per-position animation state machine."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable

from tick_boxchain.scale import SCALE_DIV, SCALE_GAP, per_tick_delta
from tick_boxchain.types import Outcome

logger = logging.getLogger(__name__)


@dataclass
class AnimationState:
    """Drives one progress value between its two settled ends, 0 and 1.

    ``direction`` is 0 while idle. ``committed`` holds the last settled
    value and is always 0 or 1 while idle.
    """

    progress: float = 0.0
    direction: int = 0
    committed: float = 0.0
    gap: float = field(default=SCALE_GAP, repr=False)
    divisor: float = field(default=SCALE_DIV, repr=False)

    @property
    def animating(self) -> bool:
        return self.direction != 0

    def advance(self, on_settled: Callable[[], None] | None = None) -> Outcome:
        """Move progress by one tick; SETTLED once a full unit is travelled."""
        if self.direction == 0:
            return Outcome.IDLE

        self.progress += per_tick_delta(
            self.progress, self.direction, 1, 1, self.gap, self.divisor
        )
        if abs(self.progress - self.committed) <= 1:
            return Outcome.CONTINUING

        self.progress = self.committed + self.direction
        self.direction = 0
        self.committed = self.progress
        logger.debug("state settled at %s", self.committed)
        if on_settled is not None:
            on_settled()
        return Outcome.SETTLED

    def begin(self, on_started: Callable[[], None] | None = None) -> Outcome:
        """Start moving toward the opposite end. Ignored while animating."""
        if self.direction != 0:
            return Outcome.IGNORED

        self.direction = int(1 - 2 * self.committed)
        if on_started is not None:
            on_started()
        return Outcome.STARTED
