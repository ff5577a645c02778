"""
SuperTrend Calculations

Pure Python/NumPy implementation of the SuperTrend indicator:
True Range -> Wilder ATR -> basic/final bands -> trend state -> signal.
All math is deterministic. Nothing here logs, caches or retains state.

Index spaces:
    raw bars          0 .. N-1
    TR / ATR          0 .. N-2    (TR[t] belongs to raw bar t + 1)
    SuperTrend series 0 .. N-P-1  (series index j belongs to raw bar j + P)
"""

import math
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from trendsignals.schemas.market import Bar
from trendsignals.schemas.signals import Signal, SignalType, TrendDirection
from trendsignals.services.base import DegenerateNumericError, InsufficientDataError

UPTREND = 1
DOWNTREND = -1


@dataclass
class OHLCVData:
    """OHLCV data arrays for calculations."""

    timestamps: np.ndarray
    opens: np.ndarray
    highs: np.ndarray
    lows: np.ndarray
    closes: np.ndarray
    volumes: np.ndarray


@dataclass
class SuperTrendSeries:
    """Derived SuperTrend series for one bar window."""

    atr: np.ndarray
    final_upper: np.ndarray
    final_lower: np.ndarray
    supertrend: np.ndarray
    trend: np.ndarray
    offset: int  # raw bar index = series index + offset

    def __len__(self) -> int:
        return len(self.trend)


def bars_to_arrays(bars: Sequence[Bar]) -> OHLCVData:
    """Convert a bar list to numpy arrays, keeping caller order."""
    return OHLCVData(
        timestamps=np.array([b.timestamp for b in bars], dtype=np.int64),
        opens=np.array([b.open for b in bars], dtype=float),
        highs=np.array([b.high for b in bars], dtype=float),
        lows=np.array([b.low for b in bars], dtype=float),
        closes=np.array([b.close for b in bars], dtype=float),
        volumes=np.array([b.volume for b in bars], dtype=float),
    )


def _check_aligned(highs: np.ndarray, lows: np.ndarray, closes: np.ndarray) -> int:
    n = len(closes)
    if len(highs) != n or len(lows) != n:
        raise ValueError(
            f"high/low/close must have equal length, got {len(highs)}/{len(lows)}/{n}"
        )
    return n


# =============================================================================
# VOLATILITY
# =============================================================================


def true_range(highs: np.ndarray, lows: np.ndarray, closes: np.ndarray) -> np.ndarray:
    """
    True Range for bars 1..N-1.

    Bar 0 has no previous close, so the result has length N-1.
    """
    highs = np.asarray(highs, dtype=float)
    lows = np.asarray(lows, dtype=float)
    closes = np.asarray(closes, dtype=float)
    n = _check_aligned(highs, lows, closes)
    if n < 2:
        raise InsufficientDataError(2, n)

    prev_close = closes[:-1]
    h = highs[1:]
    l = lows[1:]
    return np.maximum(h - l, np.maximum(np.abs(h - prev_close), np.abs(l - prev_close)))


def atr(
    highs: np.ndarray, lows: np.ndarray, closes: np.ndarray, period: int = 10
) -> np.ndarray:
    """
    Average True Range with Wilder smoothing.

    Same indexing as true_range (length N-1). The seed is the mean of the
    first `period` TR values at index period-1; earlier entries are zero
    placeholders and must not be consumed.
    """
    if period <= 0:
        raise ValueError(f"period must be positive, got {period}")

    n = len(closes)
    if n <= period:
        raise InsufficientDataError(period + 1, n)

    tr = true_range(highs, lows, closes)
    result = np.zeros(len(tr))
    result[period - 1] = tr[:period].sum() / period

    for i in range(period, len(tr)):
        result[i] = (result[i - 1] * (period - 1) + tr[i]) / period

    return result


# =============================================================================
# TREND
# =============================================================================


def supertrend(
    highs: np.ndarray,
    lows: np.ndarray,
    closes: np.ndarray,
    period: int = 10,
    multiplier: float = 3.0,
) -> SuperTrendSeries:
    """
    SuperTrend line and trend flag.

    Series index j reads raw bar k = j + period and the ATR that ends at
    that bar (ATR index k - 1), so the first band uses the seeded ATR.
    Bands only move toward price while the trend holds; a close beyond the
    previous final band releases the ratchet.
    """
    highs = np.asarray(highs, dtype=float)
    lows = np.asarray(lows, dtype=float)
    closes = np.asarray(closes, dtype=float)
    n = _check_aligned(highs, lows, closes)
    if period <= 0:
        raise ValueError(f"period must be positive, got {period}")
    if n - period < 2:
        raise InsufficientDataError(period + 2, n)

    atr_values = atr(highs, lows, closes, period)

    size = n - period
    final_upper = np.zeros(size)
    final_lower = np.zeros(size)
    st = np.zeros(size)
    trend = np.zeros(size, dtype=np.int8)

    for j in range(size):
        k = j + period
        mid = (highs[k] + lows[k]) / 2
        band = multiplier * atr_values[k - 1]
        basic_upper = mid + band
        basic_lower = mid - band

        if j == 0:
            final_upper[0] = basic_upper
            final_lower[0] = basic_lower
            st[0] = basic_upper
            trend[0] = DOWNTREND
            continue

        prev_close = closes[k - 1]

        if basic_upper < final_upper[j - 1] or prev_close > final_upper[j - 1]:
            final_upper[j] = basic_upper
        else:
            final_upper[j] = final_upper[j - 1]

        if basic_lower > final_lower[j - 1] or prev_close < final_lower[j - 1]:
            final_lower[j] = basic_lower
        else:
            final_lower[j] = final_lower[j - 1]

        # Upper side wins ties while in a downtrend, lower side while in an uptrend
        if st[j - 1] == final_upper[j - 1]:
            if closes[k] <= final_upper[j]:
                st[j] = final_upper[j]
                trend[j] = DOWNTREND
            else:
                st[j] = final_lower[j]
                trend[j] = UPTREND
        else:
            if closes[k] >= final_lower[j]:
                st[j] = final_lower[j]
                trend[j] = UPTREND
            else:
                st[j] = final_upper[j]
                trend[j] = DOWNTREND

    return SuperTrendSeries(
        atr=atr_values,
        final_upper=final_upper,
        final_lower=final_lower,
        supertrend=st,
        trend=trend,
        offset=period,
    )


# =============================================================================
# SIGNAL
# =============================================================================


def trend_direction(flag: int) -> TrendDirection:
    """Map a +1/-1 trend flag to its direction."""
    return TrendDirection.UPTREND if flag == UPTREND else TrendDirection.DOWNTREND


def clamp_strength(value: float) -> float:
    return min(1.0, max(0.1, value))


def classify_signal(
    previous_trend: int, current_trend: int, close: float, supertrend_value: float
) -> Signal:
    """
    Classify the latest bar from the last two trend samples.

    A flip from down to up is a BUY, up to down is a SELL, anything else
    is a HOLD with fixed strength 0.5.
    """
    close = float(close)
    st = float(supertrend_value)
    if not math.isfinite(st) or st == 0:
        raise DegenerateNumericError(
            f"SuperTrend value is {st}, cannot compute distance",
            {"supertrend": st, "close": close},
        )
    if not math.isfinite(close):
        raise DegenerateNumericError(
            f"Latest close is {close}", {"supertrend": st, "close": close}
        )

    distance = abs((close - st) / st * 100)

    if previous_trend == DOWNTREND and current_trend == UPTREND:
        gap = (close - st) / st
        return Signal(
            type=SignalType.BUY,
            strength=clamp_strength(gap * 10),
            price=close,
            trend=TrendDirection.UPTREND,
            distance=distance,
            notes=(
                "SuperTrend BUY signal. Trend changed from DOWNTREND to UPTREND. "
                f"Distance: {gap * 100:.2f}%"
            ),
        )

    if previous_trend == UPTREND and current_trend == DOWNTREND:
        if close == 0:
            raise DegenerateNumericError(
                "Latest close is 0, cannot compute SELL strength",
                {"supertrend": st, "close": close},
            )
        gap = (st - close) / close
        return Signal(
            type=SignalType.SELL,
            strength=clamp_strength(gap * 10),
            price=close,
            trend=TrendDirection.DOWNTREND,
            distance=distance,
            notes=(
                "SuperTrend SELL signal. Trend changed from UPTREND to DOWNTREND. "
                f"Distance: {gap * 100:.2f}%"
            ),
        )

    direction = trend_direction(current_trend)
    return Signal(
        type=SignalType.HOLD,
        strength=0.5,
        price=close,
        trend=direction,
        distance=distance,
        notes=f"No trend change. Current trend: {direction.value}",
    )
