"""Tick counter for a fixed-period ticker."""

from tick_boxchain.types import ConfigError


class Clock:
    def __init__(self, period_ms: int) -> None:
        if period_ms <= 0:
            raise ConfigError("period_ms must be positive")
        self._period_ms = period_ms
        self._tick_number = 0

    @property
    def period_ms(self) -> int:
        return self._period_ms

    @property
    def tps(self) -> float:
        return 1000 / self._period_ms

    @property
    def tick_number(self) -> int:
        return self._tick_number

    @property
    def elapsed_ms(self) -> int:
        return self._tick_number * self._period_ms

    def advance(self) -> int:
        self._tick_number += 1
        return self._tick_number

    def reset(self, tick_number: int = 0) -> None:
        self._tick_number = tick_number
