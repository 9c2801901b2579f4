"""Tests for AI client initialisation module."""

import importlib
import sys

import pytest

from core.exceptions import ConfigurationError


def reload_module():
    if "core.clients.ai" in sys.modules:
        del sys.modules["core.clients.ai"]
    return importlib.import_module("core.clients.ai")


def test_ai_clients_without_env(monkeypatch):
    """Without CLAUDE_KEY no client is created and lookups fail clearly."""

    monkeypatch.delenv("CLAUDE_KEY", raising=False)

    module = reload_module()

    assert module.ai_clients == {}
    with pytest.raises(ConfigurationError) as excinfo:
        module.get_anthropic_async_client()
    assert excinfo.value.key == "CLAUDE_KEY"


def test_ai_clients_with_env(monkeypatch):
    """Setting CLAUDE_KEY registers the async Anthropic client."""

    import anthropic

    class DummyClient:
        def __init__(self, *args, **kwargs):
            self.kwargs = kwargs

    monkeypatch.setenv("CLAUDE_KEY", "test")
    monkeypatch.setattr(anthropic, "AsyncAnthropic", DummyClient)

    module = reload_module()

    assert isinstance(module.ai_clients[module.ANTHROPIC_ASYNC], DummyClient)
    assert module.get_anthropic_async_client() is module.ai_clients[module.ANTHROPIC_ASYNC]


def test_client_created_lazily_after_import(monkeypatch):
    import anthropic

    class DummyClient:
        def __init__(self, *args, **kwargs):
            self.kwargs = kwargs

    monkeypatch.delenv("CLAUDE_KEY", raising=False)
    monkeypatch.setattr(anthropic, "AsyncAnthropic", DummyClient)
    module = reload_module()

    monkeypatch.setenv("CLAUDE_KEY", "late-key")
    client = module.get_anthropic_async_client()

    assert client.kwargs == {"api_key": "late-key"}
    module.reset_ai_clients()
    assert module.ai_clients == {}
