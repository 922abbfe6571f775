"""Chain configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass

from tick_boxchain.types import Color, ConfigError


@dataclass(frozen=True, slots=True)
class Layout:
    """Geometry derived from a ChainConfig."""

    width: float
    height: float
    gap: float
    size: float
    stroke_width: float


@dataclass(frozen=True)
class ChainConfig:
    """Immutable configuration for a box chain.

    Attributes:
        width: Drawing surface width in pixels.
        height: Drawing surface height in pixels.
        nodes: Number of positions in the chain.
        scale_gap: Progress added per tick.
        scale_div: Threshold divisor for the rate step function.
        stroke_factor: Stroke width is ``min(width, height) / stroke_factor``.
        size_factor: Box size is ``gap / size_factor``.
        period_ms: Ticker period in milliseconds.
        fore_color: Stroke color of the shapes.
        back_color: Background fill color.
    """

    width: int = 800
    height: int = 400
    nodes: int = 5
    scale_gap: float = 0.05
    scale_div: float = 0.51
    stroke_factor: float = 90.0
    size_factor: float = 2.9
    period_ms: int = 50
    fore_color: Color = (0x67, 0x3A, 0xB7)
    back_color: Color = (0xBD, 0xBD, 0xBD)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ConfigError("width and height must be positive")
        if self.nodes < 1:
            raise ConfigError("nodes must be at least 1")
        if not 0 < self.scale_gap <= 1:
            raise ConfigError("scale_gap must be in (0, 1]")
        if not 0 < self.scale_div < 1:
            raise ConfigError("scale_div must be in (0, 1)")
        if self.stroke_factor <= 0 or self.size_factor <= 0:
            raise ConfigError("stroke_factor and size_factor must be positive")
        if self.period_ms <= 0:
            raise ConfigError("period_ms must be positive")

    def layout(self) -> Layout:
        gap = self.width / (self.nodes + 1)
        return Layout(
            width=self.width,
            height=self.height,
            gap=gap,
            size=gap / self.size_factor,
            stroke_width=min(self.width, self.height) / self.stroke_factor,
        )
