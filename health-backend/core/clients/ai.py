"""Initialise AI provider clients used across the application."""

from __future__ import annotations

import logging
from typing import Dict

from anthropic import AsyncAnthropic

from core.exceptions import ConfigurationError
from core.utils.env import get_env

logger = logging.getLogger(__name__)

ANTHROPIC_ASYNC = "anthropic_async"

ai_clients: Dict[str, object] = {}

try:
    if get_env("CLAUDE_KEY"):
        ai_clients[ANTHROPIC_ASYNC] = AsyncAnthropic(api_key=get_env("CLAUDE_KEY"))
        logger.info("Initialised Anthropic client")
except Exception as exc:  # pragma: no cover - init failure should crash fast
    logger.error("Error initialising AI clients: %s", exc)
    raise

logger.info("Initialised %s AI client(s)", len(ai_clients))


def get_anthropic_async_client() -> AsyncAnthropic:
    """Return the cached asynchronous Anthropic client.

    Lazily creates the client when ``CLAUDE_KEY`` was set after import, and
    raises :class:`ConfigurationError` when no key is configured at all.
    """

    client = ai_clients.get(ANTHROPIC_ASYNC)
    if client is not None:
        return client  # type: ignore[return-value]

    api_key = get_env("CLAUDE_KEY")
    if not api_key:
        raise ConfigurationError(
            "Claude API key not configured. Please add your API key in settings.",
            key="CLAUDE_KEY",
        )
    client = AsyncAnthropic(api_key=api_key)
    ai_clients[ANTHROPIC_ASYNC] = client
    logger.info("Initialised Anthropic client via helper")
    return client


def reset_ai_clients() -> None:
    """Drop cached clients so the next lookup picks up a new key."""

    ai_clients.clear()


__all__ = ["ai_clients", "get_anthropic_async_client", "reset_ai_clients"]
