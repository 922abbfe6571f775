"""Shape drawing on a canvas-like Surface."""
from __future__ import annotations

import math
from typing import TYPE_CHECKING

from tick_boxchain.scale import phase_scale

if TYPE_CHECKING:
    from tick_boxchain.config import Layout
    from tick_boxchain.types import Surface

ARC_START_DEG = -90
PHASES = 2


def draw_stroked_circle(surface: Surface, r: float, sc: float) -> None:
    """Stroke the arc of a circle clockwise from 12 o'clock, ``sc`` of a turn."""
    surface.begin_path()
    end = ARC_START_DEG + 360 * sc
    deg = ARC_START_DEG
    while deg <= end:
        rad = math.radians(deg)
        x = r * math.cos(rad)
        y = r * math.sin(rad)
        if deg == ARC_START_DEG:
            surface.move_to(x, y)
        else:
            surface.line_to(x, y)
        deg += 1
    surface.stroke()


def draw_box_circle(surface: Surface, size: float, sc1: float, sc2: float) -> None:
    """Box that stretches with ``sc2`` holding two arcs swept by ``sc1``."""
    r = size / 2
    surface.stroke_rect(-size, -size / 2, size, size + size * sc2)
    for i in range(2):
        surface.save()
        surface.translate(0, -r + 2 * r * sc2 * i)
        draw_stroked_circle(surface, r, sc1)
        surface.restore()


def draw_node(surface: Surface, layout: Layout, index: int, scale: float) -> None:
    sc1 = phase_scale(scale, 0, PHASES)
    sc2 = phase_scale(scale, 1, PHASES)
    surface.line_width = layout.stroke_width
    surface.line_cap = "round"
    surface.save()
    surface.translate(layout.gap * (index + 1), layout.height / 2)
    draw_box_circle(surface, layout.size, sc1, sc2)
    surface.restore()
