"""
CONTRACT 1: Bar History

Input: symbol / exchange / timeframe / lookback
Output: list[Bar]

Bars are supplied by a bar-history provider in chronological order.
The engine consumes them as-is and never re-sorts them.
"""

from enum import Enum
from pydantic import BaseModel, Field


# =============================================================================
# ENUMS
# =============================================================================


class Exchange(str, Enum):
    NSE = "NSE"
    BSE = "BSE"


class Timeframe(str, Enum):
    M1 = "1m"
    M5 = "5m"
    M15 = "15m"
    M30 = "30m"
    H1 = "1h"
    D1 = "1d"


# =============================================================================
# Bar
# =============================================================================


class Bar(BaseModel):
    """
    Single OHLCV candle.

    Price relations (low <= open, close <= high) are not validated:
    malformed bars flow through the engine as numeric noise.
    """

    timestamp: int = Field(..., description="Bar open time, epoch milliseconds")
    open: float
    high: float
    low: float
    close: float
    volume: float = Field(default=0.0, ge=0)

    @classmethod
    def from_candle(cls, candle: list) -> "Bar":
        """Build a bar from a broker candle row [ts, o, h, l, c, v]."""
        volume = candle[5] if len(candle) > 5 and candle[5] else 0
        return cls(
            timestamp=int(candle[0]),
            open=candle[1],
            high=candle[2],
            low=candle[3],
            close=candle[4],
            volume=volume,
        )
