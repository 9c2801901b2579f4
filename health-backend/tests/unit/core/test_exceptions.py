"""Unit tests for custom exception hierarchy."""

from core.exceptions import (
    ConfigurationError,
    MalformedResponseError,
    ProviderError,
    ProviderTimeoutError,
    RepositoryError,
    ServiceError,
    ValidationError,
)


def test_validation_error():
    """ValidationError should capture message, field and detail."""

    error = ValidationError("Invalid payload", field="foods", errors=[{"loc": ("foods",)}])
    assert error.message == "Invalid payload"
    assert error.field == "foods"
    assert error.errors == [{"loc": ("foods",)}]
    assert isinstance(error, ServiceError)


def test_validation_error_defaults_to_empty_errors():
    assert ValidationError("bad").errors == []


def test_provider_error():
    """ProviderError should retain provider and original exception."""

    original = ValueError("API failed")
    error = ProviderError("Anthropic error", provider="anthropic", original_error=original)

    assert error.message == "Anthropic error"
    assert error.provider == "anthropic"
    assert error.original_error is original
    assert isinstance(error, ServiceError)


def test_provider_timeout_error_is_provider_error():
    error = ProviderTimeoutError("Food analysis timed out. Please try again.", timeout=30.0)

    assert isinstance(error, ProviderError)
    assert error.timeout == 30.0
    assert str(error) == "Food analysis timed out. Please try again."


def test_malformed_response_error_is_provider_error():
    error = MalformedResponseError("No text response from Claude", provider="anthropic")

    assert isinstance(error, ProviderError)
    assert error.provider == "anthropic"


def test_repository_error():
    """RepositoryError should include the failing operation."""

    error = RepositoryError("Read failed", operation="sleep_entries.get_all")
    assert error.operation == "sleep_entries.get_all"


def test_configuration_error_required_key():
    """ConfigurationError should store the missing key."""

    error = ConfigurationError("Missing key", key="CLAUDE_KEY")
    assert error.key == "CLAUDE_KEY"
