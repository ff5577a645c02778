"""
Bar History Provider Interface

Defines the contract for the component that supplies OHLCV windows.
Retries and rate limiting belong to implementations of this contract,
never to the signal engine.
"""

from abc import ABC, abstractmethod

from trendsignals.schemas.market import Bar, Exchange, Timeframe


class BarHistoryProvider(ABC):
    """
    Bar History Provider Contract.

    INPUT:
        - symbol / exchange: Instrument to fetch
        - timeframe: Candle interval
        - lookback: Number of most recent candles

    OUTPUT: list[Bar]
        - Chronological ascending, at most `lookback` bars

    Raises ExternalAPIError when the upstream source fails.
    """

    @property
    def name(self) -> str:
        return type(self).__name__

    @abstractmethod
    async def get_bars(
        self,
        symbol: str,
        exchange: Exchange = Exchange.NSE,
        timeframe: Timeframe = Timeframe.D1,
        lookback: int = 100,
    ) -> list[Bar]:
        """Fetch the most recent `lookback` bars for an instrument."""
        pass
