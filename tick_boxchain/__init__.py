"""tick-boxchain - A tap-driven chain of growing box shapes on a fixed tick."""

from tick_boxchain.chain import NodeChain, Position
from tick_boxchain.clock import Clock
from tick_boxchain.config import ChainConfig, Layout
from tick_boxchain.cursor import SequenceCursor
from tick_boxchain.stage import Stage
from tick_boxchain.state import AnimationState
from tick_boxchain.ticker import Ticker
from tick_boxchain.timers import ManualTimerSource, PygameTimerSource
from tick_boxchain.types import ConfigError, Outcome, Step, Surface, TimerSource

__all__ = [
    "AnimationState",
    "ChainConfig",
    "Clock",
    "ConfigError",
    "Layout",
    "ManualTimerSource",
    "NodeChain",
    "Outcome",
    "Position",
    "PygameTimerSource",
    "SequenceCursor",
    "Stage",
    "Step",
    "Surface",
    "Ticker",
    "TimerSource",
]
