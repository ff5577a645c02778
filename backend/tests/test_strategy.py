import pydantic
import pytest

from trendsignals.schemas.signals import SignalErrorCode, SignalType, TrendDirection
from trendsignals.services.base import InsufficientDataError
from trendsignals.services.data_ingestion.mock_data import SYMBOL_BASE_PRICES, generate_mock_bars
from trendsignals.services.indicators.strategy import SuperTrendStrategy

from helpers import flat_then_rise, make_bars, rise_then_drop


@pytest.fixture
def strategy():
    return SuperTrendStrategy(period=10, multiplier=3.0)


def test_buy_on_first_rising_bar(strategy):
    signal = strategy.get_signal(make_bars(flat_then_rise()[:21]))

    assert signal.type == SignalType.BUY
    assert signal.trend == TrendDirection.UPTREND
    assert signal.price == 102.0
    # close 102 sits 0.6 above the lower band at 101.4
    assert signal.strength == 0.1
    assert signal.distance == pytest.approx(0.6 / 101.4 * 100)
    assert signal.notes.startswith("SuperTrend BUY signal.")


def test_sell_on_drop_below_lower_band(strategy):
    signal = strategy.get_signal(make_bars(rise_then_drop()))

    # ATR ending at the drop bar: (1.3026431198 * 9 + 20) / 10
    upper = 100.0 + 3.0 * 3.17237880782
    assert signal.type == SignalType.SELL
    assert signal.trend == TrendDirection.DOWNTREND
    assert signal.price == 100.0
    assert signal.strength == pytest.approx((upper - 100.0) / 100.0 * 10, rel=1e-9)
    assert signal.distance == pytest.approx((upper - 100.0) / upper * 100, rel=1e-9)


def test_hold_after_flip(strategy):
    signal = strategy.get_signal(make_bars(flat_then_rise()))

    assert signal.type == SignalType.HOLD
    assert signal.trend == TrendDirection.UPTREND
    assert signal.strength == 0.5
    assert signal.price == 120.0
    assert signal.distance > 0
    assert signal.notes == "No trend change. Current trend: UPTREND"


def test_flat_history_holds_with_zero_distance(strategy):
    bars = make_bars([100.0] * 40)

    for end in range(strategy.min_bars, len(bars) + 1):
        signal = strategy.get_signal(bars[:end])
        assert signal.type == SignalType.HOLD
        assert signal.trend == TrendDirection.DOWNTREND
        assert signal.distance == 0.0


def test_window_of_period_bars_is_insufficient(strategy):
    bars = make_bars([100.0] * 10)

    with pytest.raises(InsufficientDataError):
        strategy.get_signal(bars)

    result = strategy.evaluate(bars)
    assert not result.ok
    assert result.error == SignalErrorCode.INSUFFICIENT_DATA
    assert strategy.get_current_trend(bars) == "UNKNOWN"
    assert strategy.get_distance_from_supertrend(bars) == 0.0


def test_warmup_sets_minimum_window():
    strict = SuperTrendStrategy(period=10, multiplier=3.0, warmup_bars=10)
    short = make_bars(flat_then_rise()[:19])
    with pytest.raises(InsufficientDataError) as exc:
        strict.get_signal(short)
    assert exc.value.required == 20

    # Without warm-up the math still needs two trend samples
    bare = SuperTrendStrategy(period=10, multiplier=3.0, warmup_bars=0)
    assert bare.min_bars == 12
    with pytest.raises(InsufficientDataError):
        bare.get_signal(make_bars([100.0] * 11))
    assert bare.get_signal(make_bars([100.0] * 12)).type == SignalType.HOLD


def test_zero_prices_are_degenerate(strategy):
    result = strategy.evaluate(make_bars([0.0] * 30))

    assert not result.ok
    assert result.error == SignalErrorCode.DEGENERATE_NUMERIC
    assert result.signal is None


def test_same_input_same_signal(strategy):
    bars = generate_mock_bars("HDFCBANK", lookback=100)
    assert strategy.get_signal(bars) == strategy.get_signal(bars)


def test_current_trend_and_distance_helpers(strategy):
    bars = make_bars(flat_then_rise())
    signal = strategy.get_signal(bars)

    assert strategy.get_current_trend(bars) == "UPTREND"
    assert strategy.get_distance_from_supertrend(bars) == signal.distance


@pytest.mark.parametrize("symbol", sorted(SYMBOL_BASE_PRICES))
def test_strength_bounds_over_every_window(strategy, symbol):
    bars = generate_mock_bars(symbol, lookback=120)

    for end in range(strategy.min_bars, len(bars) + 1):
        signal = strategy.get_signal(bars[:end])
        if signal.type == SignalType.HOLD:
            assert signal.strength == 0.5
        else:
            assert 0.1 <= signal.strength <= 1.0
        assert signal.distance >= 0


@pytest.mark.parametrize("kwargs", [{"period": 0}, {"multiplier": 0.0}, {"warmup_bars": -1}])
def test_invalid_config_is_rejected(kwargs):
    with pytest.raises(pydantic.ValidationError):
        SuperTrendStrategy(**kwargs)
