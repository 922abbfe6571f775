"""Stage - wires the chain, cursor and ticker to tap input and redraws."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from tick_boxchain.chain import NodeChain
from tick_boxchain.config import ChainConfig
from tick_boxchain.cursor import SequenceCursor
from tick_boxchain.ticker import Ticker
from tick_boxchain.types import Outcome

if TYPE_CHECKING:
    from tick_boxchain.types import Surface, TimerSource

logger = logging.getLogger(__name__)


class Stage:
    """Animates one chain position per tap.

    ``request_redraw`` is called whenever the picture changes; the host
    answers it by calling :meth:`render` on its surface.
    """

    def __init__(
        self,
        timer: TimerSource,
        request_redraw: Callable[[], None],
        config: ChainConfig | None = None,
    ) -> None:
        self._config = config if config is not None else ChainConfig()
        self._layout = self._config.layout()
        self._chain = NodeChain(
            self._config.nodes, self._config.scale_gap, self._config.scale_div
        )
        self._cursor = SequenceCursor(self._chain.head)
        self._ticker = Ticker(timer, self._config.period_ms)
        self._request_redraw = request_redraw
        logger.info(
            "stage ready: %d nodes, %dx%d, %dms period",
            self._config.nodes,
            self._config.width,
            self._config.height,
            self._config.period_ms,
        )

    @property
    def config(self) -> ChainConfig:
        return self._config

    @property
    def chain(self) -> NodeChain:
        return self._chain

    @property
    def cursor(self) -> SequenceCursor:
        return self._cursor

    @property
    def ticker(self) -> Ticker:
        return self._ticker

    @property
    def animating(self) -> bool:
        return not self._cursor.idle

    def handle_tap(self) -> bool:
        """Start the current position's transition. False if one is running."""
        if not self._cursor.idle:
            logger.info("tap ignored: position %d is animating", self._cursor.current.index)
            return False

        self._cursor.begin_current(self._request_redraw)
        self._ticker.start(self._on_tick)
        return True

    def _on_tick(self) -> None:
        self._request_redraw()
        if self._cursor.advance() is Outcome.SETTLED:
            self._ticker.stop()
            self._request_redraw()

    def render(self, surface: Surface) -> None:
        surface.fill_color = self._config.back_color
        surface.fill_rect(0, 0, self._config.width, self._config.height)
        surface.stroke_color = self._config.fore_color
        self._chain.draw(surface, self._layout)
