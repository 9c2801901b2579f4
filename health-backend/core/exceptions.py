"""Custom Exception Hierarchy for the Trackr Backend
This module defines a typed exception hierarchy that enables precise error
handling and structured error responses across the application.

Exception Handling Flow:
    1. Repository / provider layer raises a typed exception
    2. Aggregation code lets it propagate untouched
    3. The AI insights store converts it into its shared ``error`` slot
    4. FastAPI exception handlers (see main.py) convert the rest into the
       standard error envelope
"""

from __future__ import annotations

from typing import Any


class ServiceError(Exception):
    """Base exception for all service layer errors."""


class ValidationError(ServiceError):
    """Raised when input or payload validation fails."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        errors: list[dict[str, Any]] | None = None,
    ):
        self.message = message
        self.field = field
        self.errors = errors or []
        super().__init__(self.message)


class RepositoryError(ServiceError):
    """Raised when reading from or writing to the local store fails."""

    def __init__(self, message: str, operation: str | None = None):
        self.message = message
        self.operation = operation
        super().__init__(self.message)


class ProviderError(ServiceError):
    """Raised when an external provider (AI API) fails."""

    def __init__(self, message: str, provider: str | None = None, original_error: Exception | None = None):
        self.message = message
        self.provider = provider
        self.original_error = original_error
        super().__init__(self.message)


class ProviderTimeoutError(ProviderError):
    """Raised when a bounded provider call exceeds its ceiling."""

    def __init__(self, message: str, timeout: float | None = None, provider: str | None = None):
        super().__init__(message, provider=provider)
        self.timeout = timeout


class MalformedResponseError(ProviderError):
    """Raised when a provider answers with content that cannot be parsed."""


class ConfigurationError(ServiceError):
    """Raised when configuration is invalid or missing."""

    def __init__(self, message: str, key: str | None = None):
        self.message = message
        self.key = key
        super().__init__(self.message)


__all__ = [
    "ServiceError",
    "ValidationError",
    "RepositoryError",
    "ProviderError",
    "ProviderTimeoutError",
    "MalformedResponseError",
    "ConfigurationError",
]
