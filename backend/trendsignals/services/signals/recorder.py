"""
Signal Recorder

Runs the SuperTrend engine for a single instrument and hands the result
to a signal sink:

    BarHistoryProvider -> SignalService -> SignalSink

Insufficient or degenerate data is reported as "no signal" (None) so the
caller can skip the instrument and try again later. Provider and sink
errors propagate unchanged.
"""

import logging
from typing import Optional

from trendsignals.core.config import get_settings
from trendsignals.schemas.market import Exchange, Timeframe
from trendsignals.schemas.signals import (
    Signal,
    SignalRecord,
    SignalRequest,
    SuperTrendConfig,
)
from trendsignals.services.data_ingestion.interface import BarHistoryProvider
from trendsignals.services.indicators.service import SignalService, get_signal_service
from trendsignals.services.signals.interface import SignalSink

logger = logging.getLogger(__name__)


async def evaluate_and_record(
    provider: BarHistoryProvider,
    sink: SignalSink,
    strategy_id: str,
    symbol: str,
    exchange: Exchange = Exchange.NSE,
    timeframe: Timeframe = Timeframe.D1,
    config: Optional[SuperTrendConfig] = None,
    quantity: Optional[int] = None,
    lookback: Optional[int] = None,
    service: Optional[SignalService] = None,
) -> Optional[Signal]:
    """
    Evaluate one instrument and persist its signal.

    Args:
        provider: Source of the OHLCV window
        sink: Destination for the resulting SignalRecord
        strategy_id: Key of the strategy the signal belongs to
        symbol: Instrument to evaluate
        exchange: Listing exchange
        timeframe: Candle interval
        config: SuperTrend parameters (settings defaults if omitted)
        quantity: Position size to attach to the record
        lookback: Bars to request (settings default if omitted)
        service: Signal service (module singleton if omitted)

    Returns:
        The recorded Signal, or None when the engine produced no signal
    """
    lookback = lookback or get_settings().default_lookback
    service = service or get_signal_service()

    bars = await provider.get_bars(symbol, exchange, timeframe, lookback)
    logger.info(f"Fetched {len(bars)} bars for {symbol}.{exchange.value} ({timeframe.value})")

    result = await service.execute(SignalRequest(symbol=symbol, bars=bars, config=config))
    if not result.ok:
        return None

    record = SignalRecord.from_signal(
        strategy_id, symbol, result.signal, exchange=exchange, quantity=quantity
    )
    await sink.save(record)
    logger.info(
        f"Recorded {result.signal.type.value} for {symbol} under strategy {strategy_id}"
    )
    return result.signal
