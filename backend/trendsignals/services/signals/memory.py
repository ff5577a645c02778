"""
In-memory signal sink for development and tests.
"""

from typing import Optional

from trendsignals.schemas.signals import SignalRecord
from trendsignals.services.signals.interface import SignalSink


class InMemorySignalSink(SignalSink):
    """Keeps saved records in insertion order."""

    def __init__(self):
        self.records: list[SignalRecord] = []

    async def save(self, record: SignalRecord) -> None:
        self.records.append(record)

    def history(
        self, strategy_id: Optional[str] = None, limit: int = 50
    ) -> list[SignalRecord]:
        """Most recent records first, optionally filtered by strategy."""
        records = [
            r for r in self.records if strategy_id is None or r.strategy_id == strategy_id
        ]
        return list(reversed(records))[:limit]
