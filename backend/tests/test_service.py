import asyncio

import pytest

from trendsignals.core.config import Settings
from trendsignals.schemas.market import Bar, Exchange
from trendsignals.schemas.signals import (
    SignalErrorCode,
    SignalRequest,
    SignalType,
    SuperTrendConfig,
)
from trendsignals.services.base import ExternalAPIError
from trendsignals.services.data_ingestion import MockBarProvider, generate_mock_bars
from trendsignals.services.indicators import SignalService, get_signal_service
from trendsignals.services.signals import InMemorySignalSink, evaluate_and_record

from helpers import flat_then_rise, make_bars


def test_service_returns_signal_for_symbol():
    request = SignalRequest(
        symbol="RELIANCE",
        bars=make_bars(flat_then_rise()[:21]),
        config=SuperTrendConfig(period=10, multiplier=3.0),
    )

    result = asyncio.run(SignalService().execute(request))

    assert result.ok
    assert result.symbol == "RELIANCE"
    assert result.signal.type == SignalType.BUY
    assert result.error is None


def test_service_uses_settings_defaults_without_config():
    bars = generate_mock_bars("SBIN", lookback=100)
    request = SignalRequest(symbol="SBIN", bars=bars)

    result = asyncio.run(SignalService().execute(request))

    assert result.ok
    assert result.signal.price == bars[-1].close


def test_service_reports_insufficient_data():
    request = SignalRequest(symbol="ITC", bars=make_bars([440.0] * 5))

    result = asyncio.run(SignalService().execute(request))

    assert not result.ok
    assert result.error == SignalErrorCode.INSUFFICIENT_DATA
    assert "need" in result.message


def test_service_health_and_singleton():
    service = get_signal_service()
    assert service is get_signal_service()
    assert service.name == "SignalService"
    assert asyncio.run(service.health_check()) is True


def test_recorder_saves_signal_through_sink():
    sink = InMemorySignalSink()

    signal = asyncio.run(
        evaluate_and_record(
            MockBarProvider(), sink, "strat-1", "TCS", exchange=Exchange.BSE, quantity=5
        )
    )

    assert signal is not None
    assert len(sink.records) == 1
    record = sink.records[0]
    assert record.strategy_id == "strat-1"
    assert record.symbol == "TCS"
    assert record.exchange == Exchange.BSE
    assert record.quantity == 5
    assert record.signal_type == signal.type
    assert record.signal_strength == signal.strength
    assert record.notes == signal.notes


def test_recorder_skips_short_history():
    sink = InMemorySignalSink()

    signal = asyncio.run(
        evaluate_and_record(MockBarProvider(), sink, "strat-1", "INFY", lookback=15)
    )

    assert signal is None
    assert sink.records == []


def test_recorder_propagates_provider_failure():
    provider = MockBarProvider(unavailable=["WIPRO"])

    with pytest.raises(ExternalAPIError) as exc:
        asyncio.run(evaluate_and_record(provider, InMemorySignalSink(), "s", "wipro"))
    assert exc.value.service_name == "MockBarProvider"


def test_sink_history_is_newest_first_and_filtered():
    sink = InMemorySignalSink()
    provider = MockBarProvider()
    for strategy_id, symbol in [("a", "TCS"), ("b", "INFY"), ("a", "SBIN")]:
        asyncio.run(evaluate_and_record(provider, sink, strategy_id, symbol))

    assert [r.symbol for r in sink.history("a")] == ["SBIN", "TCS"]
    assert [r.symbol for r in sink.history(limit=1)] == ["SBIN"]


def test_mock_provider_is_deterministic():
    provider = MockBarProvider()
    first = asyncio.run(provider.get_bars("HDFCBANK", lookback=50))
    second = asyncio.run(provider.get_bars("hdfcbank", lookback=50))

    assert len(first) == 50
    assert first == second
    assert all(b.low <= min(b.open, b.close) and b.high >= max(b.open, b.close) for b in first)


def test_bar_from_broker_candle():
    bar = Bar.from_candle([1_700_000_000_000, 10.0, 11.0, 9.5, 10.5, None])

    assert bar.timestamp == 1_700_000_000_000
    assert bar.close == 10.5
    assert bar.volume == 0


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("SUPERTREND_PERIOD", "7")
    monkeypatch.setenv("SUPERTREND_MULTIPLIER", "2.5")

    settings = Settings()

    assert settings.supertrend_period == 7
    assert settings.supertrend_multiplier == 2.5
