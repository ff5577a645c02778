"""
Signal Sink Interface

Contract for the component that stores signals produced by the engine.
"""

from abc import ABC, abstractmethod

from trendsignals.schemas.signals import SignalRecord


class SignalSink(ABC):
    """
    Signal Sink Contract.

    INPUT: SignalRecord keyed by strategy and instrument
    OUTPUT: None - the sink owns the record after save()
    """

    @abstractmethod
    async def save(self, record: SignalRecord) -> None:
        """Persist one signal record."""
        pass
