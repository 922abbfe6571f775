"""Shared types and protocols for the box-chain engine."""

from __future__ import annotations

from collections.abc import Hashable
from enum import Enum
from typing import Any, Callable, NamedTuple, Protocol, TYPE_CHECKING

if TYPE_CHECKING:
    from tick_boxchain.chain import Position

Color = tuple[int, int, int]


class Outcome(Enum):
    """Result of driving an AnimationState by one call."""

    IDLE = "idle"
    STARTED = "started"
    IGNORED = "ignored"
    CONTINUING = "continuing"
    SETTLED = "settled"


class Step(NamedTuple):
    """Where a cursor lands when it asks a position for its neighbor."""

    position: Position
    exhausted: bool


class ConfigError(ValueError):
    """Raised when a configuration value is out of range."""


class Surface(Protocol):
    """Canvas-like drawing target consumed by the drawing helpers."""

    stroke_color: Color
    fill_color: Color
    line_width: float
    line_cap: str

    def save(self) -> None: ...

    def restore(self) -> None: ...

    def translate(self, dx: float, dy: float) -> None: ...

    def begin_path(self) -> None: ...

    def move_to(self, x: float, y: float) -> None: ...

    def line_to(self, x: float, y: float) -> None: ...

    def stroke(self) -> None: ...

    def stroke_rect(self, x: float, y: float, w: float, h: float) -> None: ...

    def fill_rect(self, x: float, y: float, w: float, h: float) -> None: ...


class TimerSource(Protocol):
    """Periodic callback scheduler: fires until the handle is cancelled."""

    def schedule(self, callback: Callable[[], Any], period_ms: int) -> Hashable: ...

    def cancel(self, handle: Hashable) -> None: ...
