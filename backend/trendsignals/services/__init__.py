"""
TrendSignals Services

Service layer containing the signal engine and its collaborator contracts.
Each service has a defined interface (contract) and implementation.
"""

from trendsignals.services.base import BaseService

__all__ = ["BaseService"]
