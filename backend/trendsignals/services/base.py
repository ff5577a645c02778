"""
Base Service Interface

All services inherit from this base class.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

InputT = TypeVar("InputT")
OutputT = TypeVar("OutputT")


class BaseService(ABC, Generic[InputT, OutputT]):
    """
    Base class for all services.

    Each service:
    - Has a defined input type
    - Has a defined output type
    - Can validate its inputs
    - Can check its health
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Service name for logging."""
        pass

    @abstractmethod
    async def execute(self, input_data: InputT) -> OutputT:
        """
        Execute the service's main function.

        Args:
            input_data: Validated input conforming to InputT schema

        Returns:
            Output conforming to OutputT schema
        """
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """Check if service is healthy and can process requests."""
        pass

    async def validate_input(self, input_data: InputT) -> InputT:
        """
        Validate input data.
        Default implementation returns input as-is (Pydantic handles validation).
        """
        return input_data


class ServiceError(Exception):
    """Base exception for service errors."""

    def __init__(self, service_name: str, message: str, details: dict = None):
        self.service_name = service_name
        self.message = message
        self.details = details or {}
        super().__init__(f"[{service_name}] {message}")


class ExternalAPIError(ServiceError):
    """Bar history provider or signal sink call failed."""
    pass


# =============================================================================
# SIGNAL ENGINE ERRORS
# =============================================================================


class SignalEngineError(ServiceError):
    """Base class for failures raised by the SuperTrend engine."""

    def __init__(self, message: str, details: dict = None):
        super().__init__("SuperTrend", message, details)


class InsufficientDataError(SignalEngineError):
    """Not enough bars to seed ATR and produce two trend samples."""

    def __init__(self, required: int, available: int, message: str = None):
        self.required = required
        self.available = available
        super().__init__(
            message or f"Insufficient data: need {required} bars, got {available}",
            {"required": required, "available": available},
        )


class DegenerateNumericError(SignalEngineError):
    """Band or distance computation would divide by zero or go non-finite."""
    pass
