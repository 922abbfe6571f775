"""Fixed-length doubly-linked chain of animatable positions."""
from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING, Callable

from tick_boxchain.drawing import draw_node
from tick_boxchain.scale import SCALE_DIV, SCALE_GAP
from tick_boxchain.state import AnimationState
from tick_boxchain.types import ConfigError, Outcome, Step

if TYPE_CHECKING:
    from tick_boxchain.config import Layout
    from tick_boxchain.types import Surface


class Position:
    """One element of the chain. Owns its AnimationState; links are non-owning."""

    __slots__ = ("_index", "state", "next", "previous")

    def __init__(self, index: int, state: AnimationState | None = None) -> None:
        self._index = index
        self.state = state if state is not None else AnimationState()
        self.next: Position | None = None
        self.previous: Position | None = None

    def __repr__(self) -> str:
        return f"Position(index={self._index}, state={self.state!r})"

    @property
    def index(self) -> int:
        return self._index

    def advance(self, on_settled: Callable[[], None] | None = None) -> Outcome:
        return self.state.advance(on_settled)

    def begin(self, on_started: Callable[[], None] | None = None) -> Outcome:
        return self.state.begin(on_started)

    def neighbor(
        self, direction: int, on_exhausted: Callable[[], None] | None = None
    ) -> Step:
        """Return the adjacent position in ``direction`` (-1 or +1).

        At either end of the chain the step is exhausted and lands on
        ``self``; ``on_exhausted`` fires in that case.
        """
        if direction == -1:
            target = self.previous
        elif direction == 1:
            target = self.next
        else:
            raise ValueError(f"direction must be -1 or 1, got {direction!r}")

        if target is None:
            if on_exhausted is not None:
                on_exhausted()
            return Step(self, True)
        return Step(target, False)

    def draw(self, surface: Surface, layout: Layout) -> None:
        """Draw this position and every position after it."""
        node: Position | None = self
        while node is not None:
            draw_node(surface, layout, node.index, node.state.progress)
            node = node.next


class NodeChain:
    """Positions ``0..count-1`` built up front and linked in index order."""

    def __init__(
        self, count: int, gap: float = SCALE_GAP, divisor: float = SCALE_DIV
    ) -> None:
        if count < 1:
            raise ConfigError("chain needs at least one position")
        self._positions: list[Position] = [
            Position(i, AnimationState(gap=gap, divisor=divisor)) for i in range(count)
        ]
        for prev, nxt in zip(self._positions, self._positions[1:]):
            prev.next = nxt
            nxt.previous = prev

    def __len__(self) -> int:
        return len(self._positions)

    def __getitem__(self, index: int) -> Position:
        return self._positions[index]

    def __iter__(self) -> Iterator[Position]:
        return iter(self._positions)

    @property
    def head(self) -> Position:
        return self._positions[0]

    @property
    def tail(self) -> Position:
        return self._positions[-1]

    def draw(self, surface: Surface, layout: Layout) -> None:
        self.head.draw(surface, layout)
