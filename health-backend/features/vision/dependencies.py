"""Dependency wiring for vision endpoints."""

from __future__ import annotations

from core.providers.anthropic_messages import AnthropicMessagesProvider


def get_vision_provider() -> AnthropicMessagesProvider:
    """Return a provider bound lazily to the shared Anthropic client."""

    return AnthropicMessagesProvider()


__all__ = ["get_vision_provider"]
