"""Canvas-style drawing surface on top of a pygame.Surface."""
from __future__ import annotations

from dataclasses import dataclass, replace

import pygame

from tick_boxchain.types import Color

_Point = tuple[float, float]


@dataclass(frozen=True, slots=True)
class _DrawState:
    dx: float = 0.0
    dy: float = 0.0
    stroke_color: Color = (0, 0, 0)
    fill_color: Color = (0, 0, 0)
    line_width: float = 1.0
    line_cap: str = "butt"


class PygameSurface:
    """Implements the Surface protocol with translation and style stacks.

    Paths are buffered as lists of points per subpath and stroked with
    ``pygame.draw.lines``. Round caps are drawn as circles on the ends.
    """

    def __init__(self, target: pygame.Surface) -> None:
        self._target = target
        self._state = _DrawState()
        self._stack: list[_DrawState] = []
        self._subpaths: list[list[_Point]] = []

    @property
    def target(self) -> pygame.Surface:
        return self._target

    @property
    def stroke_color(self) -> Color:
        return self._state.stroke_color

    @stroke_color.setter
    def stroke_color(self, value: Color) -> None:
        self._state = replace(self._state, stroke_color=value)

    @property
    def fill_color(self) -> Color:
        return self._state.fill_color

    @fill_color.setter
    def fill_color(self, value: Color) -> None:
        self._state = replace(self._state, fill_color=value)

    @property
    def line_width(self) -> float:
        return self._state.line_width

    @line_width.setter
    def line_width(self, value: float) -> None:
        self._state = replace(self._state, line_width=value)

    @property
    def line_cap(self) -> str:
        return self._state.line_cap

    @line_cap.setter
    def line_cap(self, value: str) -> None:
        if value not in ("butt", "round"):
            raise ValueError(f"unsupported line cap {value!r}")
        self._state = replace(self._state, line_cap=value)

    @property
    def depth(self) -> int:
        return len(self._stack)

    def save(self) -> None:
        self._stack.append(self._state)

    def restore(self) -> None:
        # Unbalanced restore is ignored, as on an HTML canvas.
        if self._stack:
            self._state = self._stack.pop()

    def translate(self, dx: float, dy: float) -> None:
        self._state = replace(self._state, dx=self._state.dx + dx, dy=self._state.dy + dy)

    def begin_path(self) -> None:
        self._subpaths = []

    def move_to(self, x: float, y: float) -> None:
        self._subpaths.append([self._to_device(x, y)])

    def line_to(self, x: float, y: float) -> None:
        if not self._subpaths:
            self._subpaths.append([])
        self._subpaths[-1].append(self._to_device(x, y))

    def stroke(self) -> None:
        for points in self._subpaths:
            if len(points) >= 2:
                self._stroke_points(points, closed=False)

    def stroke_rect(self, x: float, y: float, w: float, h: float) -> None:
        corners = [
            self._to_device(x, y),
            self._to_device(x + w, y),
            self._to_device(x + w, y + h),
            self._to_device(x, y + h),
        ]
        self._stroke_points(corners, closed=True)

    def fill_rect(self, x: float, y: float, w: float, h: float) -> None:
        left, top = self._to_device(min(x, x + w), min(y, y + h))
        rect = pygame.Rect(round(left), round(top), round(abs(w)), round(abs(h)))
        pygame.draw.rect(self._target, self._state.fill_color, rect)

    def _to_device(self, x: float, y: float) -> _Point:
        return (x + self._state.dx, y + self._state.dy)

    def _stroke_points(self, points: list[_Point], closed: bool) -> None:
        width = max(1, round(self._state.line_width))
        color = self._state.stroke_color
        pygame.draw.lines(self._target, color, closed, points, width)
        if width <= 2:
            return
        radius = width / 2
        if closed:
            # Fill the notches pygame leaves at thick corners.
            for point in points:
                pygame.draw.circle(self._target, color, point, radius)
        elif self._state.line_cap == "round":
            pygame.draw.circle(self._target, color, points[0], radius)
            pygame.draw.circle(self._target, color, points[-1], radius)
