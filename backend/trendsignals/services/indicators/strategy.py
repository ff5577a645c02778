"""
SuperTrend Strategy

Engine facade over the calculations: one bar window in, one signal out.
Each call recomputes every series from scratch and keeps nothing.
"""

from typing import Sequence

from trendsignals.schemas.market import Bar
from trendsignals.schemas.signals import (
    Signal,
    SignalErrorCode,
    SignalResult,
    SuperTrendConfig,
)
from trendsignals.services.base import DegenerateNumericError, InsufficientDataError
from trendsignals.services.indicators.calculations import (
    SuperTrendSeries,
    bars_to_arrays,
    classify_signal,
    supertrend,
)


class SuperTrendStrategy:
    """
    SuperTrend signal strategy.

    get_signal() is strict and raises InsufficientDataError or
    DegenerateNumericError. evaluate() returns the same outcome as a
    SignalResult. The get_current_trend / get_distance_from_supertrend
    helpers are best-effort and fall back to UNKNOWN / 0.0.
    """

    def __init__(self, period: int = 10, multiplier: float = 3.0, warmup_bars: int = 10):
        self.config = SuperTrendConfig(
            period=period, multiplier=multiplier, warmup_bars=warmup_bars
        )

    @classmethod
    def from_config(cls, config: SuperTrendConfig) -> "SuperTrendStrategy":
        return cls(config.period, config.multiplier, config.warmup_bars)

    @property
    def period(self) -> int:
        return self.config.period

    @property
    def multiplier(self) -> float:
        return self.config.multiplier

    @property
    def min_bars(self) -> int:
        return self.config.min_bars

    def calculate(self, bars: Sequence[Bar]) -> SuperTrendSeries:
        """Compute the full SuperTrend series for the window."""
        data = bars_to_arrays(bars)
        return supertrend(
            data.highs, data.lows, data.closes, self.period, self.multiplier
        )

    def get_signal(self, bars: Sequence[Bar]) -> Signal:
        """Classify the latest bar. Raises on short or degenerate input."""
        if len(bars) < self.min_bars:
            raise InsufficientDataError(self.min_bars, len(bars))

        series = self.calculate(bars)
        return classify_signal(
            int(series.trend[-2]),
            int(series.trend[-1]),
            bars[-1].close,
            series.supertrend[-1],
        )

    def evaluate(self, bars: Sequence[Bar]) -> SignalResult:
        """Like get_signal, but reports engine failures as a SignalResult."""
        try:
            return SignalResult.success(self.get_signal(bars))
        except InsufficientDataError as e:
            return SignalResult.failure(SignalErrorCode.INSUFFICIENT_DATA, e.message)
        except DegenerateNumericError as e:
            return SignalResult.failure(SignalErrorCode.DEGENERATE_NUMERIC, e.message)

    def get_current_trend(self, bars: Sequence[Bar]) -> str:
        """UPTREND / DOWNTREND for the latest bar, or UNKNOWN."""
        result = self.evaluate(bars)
        return result.signal.trend.value if result.ok else "UNKNOWN"

    def get_distance_from_supertrend(self, bars: Sequence[Bar]) -> float:
        """Percent gap between the latest close and the SuperTrend line, or 0."""
        result = self.evaluate(bars)
        return result.signal.distance if result.ok else 0.0
