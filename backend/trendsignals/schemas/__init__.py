"""
TrendSignals Schema Contracts

This module defines the contracts between the engine and its collaborators.
"""

from trendsignals.schemas.market import (
    Bar,
    Exchange,
    Timeframe,
)
from trendsignals.schemas.signals import (
    SignalType,
    TrendDirection,
    SignalErrorCode,
    SuperTrendConfig,
    SignalRequest,
    Signal,
    SignalResult,
    SignalRecord,
)

__all__ = [
    # Market
    "Bar",
    "Exchange",
    "Timeframe",
    # Signals
    "SignalType",
    "TrendDirection",
    "SignalErrorCode",
    "SuperTrendConfig",
    "SignalRequest",
    "Signal",
    "SignalResult",
    "SignalRecord",
]
