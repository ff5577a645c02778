"""
CONTRACT 2: SuperTrend Signal Engine

Input: SignalRequest (bars for one instrument + SuperTrendConfig)
Output: SignalResult (Signal or a typed failure)

Pure Python/NumPy - the engine keeps no state between calls.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from trendsignals.schemas.market import Bar, Exchange


# =============================================================================
# ENUMS
# =============================================================================


class SignalType(str, Enum):
    BUY = "BUY"
    SELL = "SELL"
    HOLD = "HOLD"


class TrendDirection(str, Enum):
    UPTREND = "UPTREND"
    DOWNTREND = "DOWNTREND"


class SignalErrorCode(str, Enum):
    INSUFFICIENT_DATA = "INSUFFICIENT_DATA"
    DEGENERATE_NUMERIC = "DEGENERATE_NUMERIC"


# =============================================================================
# INPUT
# =============================================================================


class SuperTrendConfig(BaseModel):
    """SuperTrend parameters. Immutable per invocation."""

    model_config = ConfigDict(frozen=True)

    period: int = Field(default=10, gt=0, description="ATR / lookback window")
    multiplier: float = Field(default=3.0, gt=0, description="Band width factor")
    warmup_bars: int = Field(
        default=10,
        ge=0,
        description="Bars required beyond period before a signal is produced",
    )

    @property
    def min_bars(self) -> int:
        """Shortest window that yields a signal (two trend samples at least)."""
        return self.period + max(self.warmup_bars, 2)


class SignalRequest(BaseModel):
    """
    Request for a signal on one instrument.
    Sent by: strategy runner / recorder
    Received by: SignalService
    """

    symbol: str
    bars: list[Bar]
    config: Optional[SuperTrendConfig] = None


# =============================================================================
# OUTPUT
# =============================================================================


class Signal(BaseModel):
    """Classification of the most recent bar."""

    type: SignalType
    strength: float = Field(..., ge=0.1, le=1.0)
    price: float = Field(..., description="Latest close")
    trend: TrendDirection
    distance: float = Field(..., ge=0, description="% gap between price and SuperTrend")
    notes: str


class SignalResult(BaseModel):
    """Explicit success/failure wrapper around a Signal."""

    symbol: Optional[str] = None
    signal: Optional[Signal] = None
    error: Optional[SignalErrorCode] = None
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.signal is not None

    @classmethod
    def success(cls, signal: Signal, symbol: Optional[str] = None) -> "SignalResult":
        return cls(symbol=symbol, signal=signal)

    @classmethod
    def failure(
        cls, code: SignalErrorCode, message: str, symbol: Optional[str] = None
    ) -> "SignalResult":
        return cls(symbol=symbol, error=code, message=message)


class SignalRecord(BaseModel):
    """
    Signal row handed to a signal sink.
    Keyed by strategy and instrument; the sink owns it after save().
    """

    strategy_id: str
    symbol: str
    exchange: Exchange = Exchange.NSE
    signal_type: SignalType
    signal_strength: float
    price: float
    quantity: Optional[int] = None
    notes: str
    created_at: datetime = Field(default_factory=datetime.now)

    @classmethod
    def from_signal(
        cls,
        strategy_id: str,
        symbol: str,
        signal: Signal,
        exchange: Exchange = Exchange.NSE,
        quantity: Optional[int] = None,
    ) -> "SignalRecord":
        return cls(
            strategy_id=strategy_id,
            symbol=symbol,
            exchange=exchange,
            signal_type=signal.type,
            signal_strength=signal.strength,
            price=signal.price,
            quantity=quantity,
            notes=signal.notes,
        )
