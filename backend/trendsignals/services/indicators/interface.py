"""
Signal Engine Service Interface

Defines the contract for the SuperTrend signal layer.
"""

from abc import abstractmethod

from trendsignals.services.base import BaseService
from trendsignals.schemas.signals import SignalRequest, SignalResult


class SignalServiceInterface(BaseService[SignalRequest, SignalResult]):
    """
    Signal Engine Service Contract.

    INPUT: SignalRequest
        - symbol: Instrument the bars belong to
        - bars: Chronological OHLCV window
        - config: SuperTrend period / multiplier (optional)

    OUTPUT: SignalResult
        - signal: BUY / SELL / HOLD for the latest bar, or
        - error: INSUFFICIENT_DATA / DEGENERATE_NUMERIC
    """

    @property
    def name(self) -> str:
        return "SignalService"

    @abstractmethod
    async def execute(self, input_data: SignalRequest) -> SignalResult:
        """Evaluate the SuperTrend signal for one instrument."""
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """Signal service is always healthy (pure computation)."""
        pass
