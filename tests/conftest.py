"""Shared fixtures for tick-boxchain tests."""
from __future__ import annotations

import pytest

from tick_boxchain import ManualTimerSource


class RecordingSurface:
    """Surface that records every primitive call as a tuple."""

    def __init__(self) -> None:
        self.calls: list[tuple] = []
        self.stroke_color = (0, 0, 0)
        self.fill_color = (0, 0, 0)
        self.line_width = 1.0
        self.line_cap = "butt"

    def save(self) -> None:
        self.calls.append(("save",))

    def restore(self) -> None:
        self.calls.append(("restore",))

    def translate(self, dx: float, dy: float) -> None:
        self.calls.append(("translate", dx, dy))

    def begin_path(self) -> None:
        self.calls.append(("begin_path",))

    def move_to(self, x: float, y: float) -> None:
        self.calls.append(("move_to", x, y))

    def line_to(self, x: float, y: float) -> None:
        self.calls.append(("line_to", x, y))

    def stroke(self) -> None:
        self.calls.append(("stroke",))

    def stroke_rect(self, x: float, y: float, w: float, h: float) -> None:
        self.calls.append(("stroke_rect", x, y, w, h))

    def fill_rect(self, x: float, y: float, w: float, h: float) -> None:
        self.calls.append(("fill_rect", x, y, w, h))

    def named(self, name: str) -> list[tuple]:
        return [c for c in self.calls if c[0] == name]


@pytest.fixture
def recording_surface() -> RecordingSurface:
    return RecordingSurface()


@pytest.fixture
def timers() -> ManualTimerSource:
    return ManualTimerSource()
