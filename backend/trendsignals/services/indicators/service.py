"""
Signal Engine Service Implementation

Wraps SuperTrendStrategy behind the service contract.
NO I/O - the bars arrive in the request.
"""

import logging
from typing import Optional

from trendsignals.core.config import get_settings
from trendsignals.schemas.signals import SignalRequest, SignalResult, SuperTrendConfig
from trendsignals.services.indicators.interface import SignalServiceInterface
from trendsignals.services.indicators.strategy import SuperTrendStrategy

logger = logging.getLogger(__name__)


def default_config() -> SuperTrendConfig:
    """SuperTrend config from application settings."""
    settings = get_settings()
    return SuperTrendConfig(
        period=settings.supertrend_period,
        multiplier=settings.supertrend_multiplier,
        warmup_bars=settings.warmup_bars,
    )


class SignalService(SignalServiceInterface):
    """
    SuperTrend Signal Service.

    Stateless: a new strategy is built per request, so concurrent
    requests for different instruments share nothing.
    """

    @property
    def name(self) -> str:
        return "SignalService"

    async def execute(self, input_data: SignalRequest) -> SignalResult:
        """Evaluate the latest bar of the request's window."""
        config = input_data.config or default_config()
        strategy = SuperTrendStrategy.from_config(config)

        result = strategy.evaluate(input_data.bars)
        result.symbol = input_data.symbol

        if result.ok:
            logger.debug(
                f"{input_data.symbol}: {result.signal.type.value} "
                f"strength={result.signal.strength:.2f} trend={result.signal.trend.value}"
            )
        else:
            logger.info(f"{input_data.symbol}: no signal ({result.error.value}) - {result.message}")

        return result

    async def health_check(self) -> bool:
        """Signal service is always healthy (pure computation)."""
        return True


# Singleton instance
_service_instance: Optional[SignalService] = None


def get_signal_service() -> SignalService:
    """Get or create signal service instance."""
    global _service_instance
    if _service_instance is None:
        _service_instance = SignalService()
    return _service_instance
