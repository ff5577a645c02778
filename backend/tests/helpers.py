from trendsignals.schemas.market import Bar

DAY_MS = 86_400_000


def make_bars(closes, spread=0.0):
    """Bars with open == close and a symmetric high/low spread."""
    return [
        Bar(
            timestamp=i * DAY_MS,
            open=c,
            high=c + spread,
            low=c - spread,
            close=c,
            volume=1000,
        )
        for i, c in enumerate(closes)
    ]


def flat_then_rise():
    """20 bars flat at 100, then +2 per bar up to 120."""
    return [100.0] * 20 + [100.0 + 2 * (i + 1) for i in range(10)]


def flat_then_fall():
    """20 bars flat at 100, then -2 per bar down to 80."""
    return [100.0] * 20 + [100.0 - 2 * (i + 1) for i in range(10)]


def rise_then_drop():
    """flat_then_rise followed by a single bar back at 100."""
    return flat_then_rise() + [100.0]
