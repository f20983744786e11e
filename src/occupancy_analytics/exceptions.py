"""
Exceptions
==========

Typed errors raised at the input boundary of the analytics engine.

Insufficient data is never an error: components degrade to an empty or
``None`` result instead. These exceptions are reserved for input that
cannot be interpreted at all.
"""

from typing import Any, List, Optional


class OccupancyAnalyticsError(Exception):
    """Base exception for all occupancy analytics errors."""
    pass


class InputValidationError(OccupancyAnalyticsError, ValueError):
    """
    Raised when raw input fails boundary validation.
    
    Attributes:
        errors: Structured error list (pydantic ``errors()`` format)
    """
    
    def __init__(self, message: str, errors: Optional[List[Any]] = None) -> None:
        super().__init__(message)
        self.errors = errors or []


class ConfigurationError(OccupancyAnalyticsError):
    """Raised when configuration is invalid."""
    pass
