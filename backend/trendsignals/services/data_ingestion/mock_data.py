"""
Mock Data Generator

Generates realistic mock bar history for development and testing.
Each symbol gets its own seeded random walk, so repeated fetches return
identical bars.
"""

import random
import zlib
from datetime import datetime, timedelta
from typing import Iterable, Optional

from trendsignals.schemas.market import Bar, Exchange, Timeframe
from trendsignals.services.base import ExternalAPIError
from trendsignals.services.data_ingestion.interface import BarHistoryProvider


# Base prices for common symbols
SYMBOL_BASE_PRICES = {
    "RELIANCE": 2450.0,
    "TCS": 3800.0,
    "INFY": 1500.0,
    "HDFCBANK": 1650.0,
    "ICICIBANK": 1050.0,
    "SBIN": 750.0,
    "ITC": 440.0,
    "TATAMOTORS": 950.0,
    "WIPRO": 480.0,
    "BHARTIARTL": 1150.0,
}

# Timeframe to milliseconds
TIMEFRAME_MS = {
    Timeframe.M1: 60_000,
    Timeframe.M5: 300_000,
    Timeframe.M15: 900_000,
    Timeframe.M30: 1_800_000,
    Timeframe.H1: 3_600_000,
    Timeframe.D1: 86_400_000,
}


def get_base_price(symbol: str, rng: random.Random) -> float:
    """Get base price for a symbol."""
    return SYMBOL_BASE_PRICES.get(symbol, 1000.0 + rng.random() * 1000)


def generate_mock_bars(
    symbol: str,
    timeframe: Timeframe = Timeframe.D1,
    lookback: int = 100,
    end_time: Optional[datetime] = None,
    seed: Optional[int] = None,
) -> list[Bar]:
    """Generate mock OHLCV bars as a random walk."""
    if end_time is None:
        end_time = datetime(2024, 1, 1)
    if seed is None:
        seed = zlib.crc32(symbol.encode())

    rng = random.Random(seed)
    bars = []
    interval_ms = TIMEFRAME_MS[timeframe]
    price = get_base_price(symbol, rng)
    volatility = price * 0.02  # 2% volatility

    timestamp = end_time - timedelta(milliseconds=interval_ms * lookback)

    for _ in range(lookback):
        # Random walk
        change = (rng.random() - 0.5) * volatility

        open_price = price
        close_price = open_price + change
        high_price = max(open_price, close_price) + rng.random() * volatility * 0.5
        low_price = min(open_price, close_price) - rng.random() * volatility * 0.5

        bars.append(
            Bar(
                timestamp=int(timestamp.timestamp() * 1000),
                open=round(open_price, 2),
                high=round(high_price, 2),
                low=round(low_price, 2),
                close=round(close_price, 2),
                volume=rng.randint(100_000, 5_000_000),
            )
        )

        price = close_price
        timestamp += timedelta(milliseconds=interval_ms)

    return bars


class MockBarProvider(BarHistoryProvider):
    """
    Bar history provider backed by generate_mock_bars.

    Symbols listed in `unavailable` raise ExternalAPIError to simulate
    an upstream outage.
    """

    def __init__(self, unavailable: Iterable[str] = ()):
        self.unavailable = {s.upper() for s in unavailable}

    async def get_bars(
        self,
        symbol: str,
        exchange: Exchange = Exchange.NSE,
        timeframe: Timeframe = Timeframe.D1,
        lookback: int = 100,
    ) -> list[Bar]:
        symbol = symbol.upper()
        if symbol in self.unavailable:
            raise ExternalAPIError(
                self.name,
                f"Historical data unavailable for {symbol}.{exchange.value}",
                {"symbol": symbol, "timeframe": timeframe.value},
            )
        return generate_mock_bars(symbol, timeframe, lookback)
