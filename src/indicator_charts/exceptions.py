"""Base exception classes for indicator_charts.

Exception classes support two patterns:
1. No-argument raise: raise DataError()
2. Contextual attributes: err = DataError(metric="gdp", period="20x9"); raise err
"""

from typing import Any


class ApplicationError(Exception):
    """Base exception for all application errors.

    Supports keyword arguments that are stored as attributes for debugging.
    """

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = self.__class__.__doc__ or "Application error occurred"
        super().__init__(message)
        for key, value in kwargs.items():
            setattr(self, key, value)


class ConfigurationError(ApplicationError):
    """Configuration is invalid or missing."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = "Configuration is invalid or missing"
        super().__init__(message, **kwargs)


class DataError(ApplicationError):
    """Data processing or parsing error."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = "Data processing or parsing error"
        super().__init__(message, **kwargs)


__all__ = [
    "ApplicationError",
    "ConfigurationError",
    "DataError",
]
