"""
SuperTrend signal demo.
Run with: python signal_demo.py [SYMBOL ...]
"""

import asyncio
import os
import sys

# Set working directory
backend_dir = os.path.dirname(os.path.abspath(__file__))
os.chdir(backend_dir)
sys.path.insert(0, backend_dir)

from dotenv import load_dotenv
load_dotenv(os.path.join(backend_dir, ".env"))


async def run_demo(symbols: list[str]):
    """Evaluate each symbol against mock bar history."""
    from trendsignals.core.config import configure_logging, get_settings
    from trendsignals.schemas.market import Timeframe
    from trendsignals.services.data_ingestion import MockBarProvider
    from trendsignals.services.indicators import get_signal_service
    from trendsignals.services.signals import InMemorySignalSink, evaluate_and_record

    configure_logging()
    settings = get_settings()
    provider = MockBarProvider()
    sink = InMemorySignalSink()
    service = get_signal_service()

    print("\n" + "=" * 60)
    print(f"{settings.app_name.upper()} - SUPERTREND DEMO")
    print(f"period={settings.supertrend_period} multiplier={settings.supertrend_multiplier}")
    print("=" * 60)

    print("\n[1] Health Check...")
    print("-" * 40)
    print(f"Service Healthy: {await service.health_check()}")

    print("\n[2] Signals...")
    print("-" * 40)
    for symbol in symbols:
        signal = await evaluate_and_record(
            provider, sink, "demo", symbol, timeframe=Timeframe.D1
        )
        if signal is None:
            print(f"{symbol}: no signal")
            continue
        print(f"\n{symbol}:")
        print(f"  Signal:   {signal.type.value} (strength {signal.strength:.2f})")
        print(f"  Price:    Rs.{signal.price:.2f}")
        print(f"  Trend:    {signal.trend.value}")
        print(f"  Distance: {signal.distance:.2f}%")
        print(f"  Notes:    {signal.notes}")

    print(f"\nRecorded {len(sink.records)} signals")
    print("=" * 60 + "\n")


if __name__ == "__main__":
    asyncio.run(run_demo(sys.argv[1:] or ["RELIANCE", "TCS", "INFY"]))
