"""
Bar History

CONTRACT:
    Input:  symbol / exchange / timeframe / lookback
    Output: list[Bar]

RESPONSIBILITIES:
    - Supply chronological OHLCV windows to the signal engine
    - Own retries and upstream failures (ExternalAPIError)

Only the provider contract and a deterministic mock live here;
broker adapters are external collaborators.
"""

from trendsignals.services.data_ingestion.interface import BarHistoryProvider
from trendsignals.services.data_ingestion.mock_data import (
    MockBarProvider,
    generate_mock_bars,
)

__all__ = [
    "BarHistoryProvider",
    "MockBarProvider",
    "generate_mock_bars",
]
