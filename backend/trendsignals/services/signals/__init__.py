"""
Signal Recording

CONTRACT:
    Input:  strategy id + instrument
    Output: Signal (persisted through a SignalSink) or None

Evaluates exactly one instrument per call.
"""

from trendsignals.services.signals.interface import SignalSink
from trendsignals.services.signals.memory import InMemorySignalSink
from trendsignals.services.signals.recorder import evaluate_and_record

__all__ = [
    "SignalSink",
    "InMemorySignalSink",
    "evaluate_and_record",
]
