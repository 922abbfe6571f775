"""Scale functions that split one progress value into sequential phases."""
from __future__ import annotations

import math

SCALE_GAP = 0.05
SCALE_DIV = 0.51


def clamped_delta(scale: float, phase_index: int, phase_count: int) -> float:
    """Progress left after the phases before ``phase_index``, floored at 0."""
    return max(0.0, scale - phase_index / phase_count)


def phase_scale(scale: float, phase_index: int, phase_count: int) -> float:
    """Normalized [0, 1] progress of one phase.

    Phase ``k`` stays at 0 until ``scale`` reaches ``k / phase_count`` and
    saturates at 1 before phase ``k + 1`` starts to rise.
    """
    return min(1 / phase_count, clamped_delta(scale, phase_index, phase_count)) * phase_count


def direction_blend_factor(scale: float, divisor: float = SCALE_DIV) -> int:
    return math.floor(scale / divisor)


def mirror_value(
    scale: float, rate_a: float, rate_b: float, divisor: float = SCALE_DIV
) -> float:
    """Pick the rate regime for ``scale``; snaps from ``rate_a`` to ``rate_b``."""
    k = direction_blend_factor(scale, divisor)
    return (1 - k) / rate_a + k / rate_b


def per_tick_delta(
    scale: float,
    direction: int,
    rate_a: float,
    rate_b: float,
    gap: float = SCALE_GAP,
    divisor: float = SCALE_DIV,
) -> float:
    """Signed increment applied to progress on one tick."""
    return mirror_value(scale, rate_a, rate_b, divisor) * direction * gap
