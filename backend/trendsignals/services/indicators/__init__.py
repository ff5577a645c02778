"""
SuperTrend Signal Engine

CONTRACT:
    Input:  SignalRequest (ordered OHLCV bars for one instrument)
    Output: SignalResult

RESPONSIBILITIES:
    - True Range and Wilder-smoothed ATR
    - Basic/final SuperTrend bands with the ratchet rule
    - Trend state per bar (UPTREND / DOWNTREND)
    - BUY / SELL / HOLD classification of the latest bar

PURE PYTHON - Uses NumPy for calculations.
All math is deterministic and reproducible.
"""

from trendsignals.services.indicators.interface import SignalServiceInterface
from trendsignals.services.indicators.service import SignalService, get_signal_service
from trendsignals.services.indicators.strategy import SuperTrendStrategy

__all__ = [
    "SignalServiceInterface",
    "SignalService",
    "get_signal_service",
    "SuperTrendStrategy",
]
