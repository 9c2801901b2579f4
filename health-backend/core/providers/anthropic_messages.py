"""Thin async gateway around the Anthropic Messages API.

Only what the insights and vision features need: a single ``generate`` call
that returns the raw SDK response (content blocks intact), plus helpers to
build image blocks and pick text blocks out of a response.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional, Sequence

from core.clients.ai import get_anthropic_async_client
from core.exceptions import ProviderError

logger = logging.getLogger(__name__)

PROVIDER_NAME = "anthropic"


class AnthropicMessagesProvider:
    """Issue single, non-streaming Messages API requests."""

    provider_name = PROVIDER_NAME

    def __init__(
        self,
        client: Any | None = None,
        *,
        client_factory: Callable[[], Any] = get_anthropic_async_client,
    ) -> None:
        self._client = client
        self._client_factory = client_factory

    @property
    def client(self) -> Any:
        if self._client is None:
            self._client = self._client_factory()
        return self._client

    async def generate(
        self,
        *,
        messages: list[dict[str, Any]],
        model: str,
        max_tokens: int,
        system_prompt: Optional[str] = None,
    ) -> Any:
        """Send ``messages`` and return the SDK response object."""

        params: dict[str, Any] = {
            "model": model,
            "max_tokens": max_tokens,
            "messages": messages,
        }
        if system_prompt:
            params["system"] = system_prompt

        logger.debug(
            "Anthropic API call: model=%s, messages_count=%d, max_tokens=%d",
            model,
            len(messages),
            max_tokens,
        )

        client = self.client
        try:
            return await client.messages.create(**params)
        except ProviderError:
            raise
        except Exception as exc:
            logger.error("Anthropic generate error: %s", exc)
            raise ProviderError(
                f"Anthropic error: {exc}", provider=PROVIDER_NAME, original_error=exc
            ) from exc


def _block_type(block: Any) -> str | None:
    if isinstance(block, dict):
        return block.get("type")
    return getattr(block, "type", None)


def _block_text(block: Any) -> str:
    if isinstance(block, dict):
        return block.get("text") or ""
    return getattr(block, "text", "") or ""


def _content_blocks(response: Any) -> Sequence[Any]:
    if isinstance(response, dict):
        return response.get("content") or []
    return getattr(response, "content", None) or []


def find_text_block(response: Any) -> str | None:
    """Return the text of the first ``text`` block anywhere in the response."""

    for block in _content_blocks(response):
        if _block_type(block) == "text":
            return _block_text(block)
    return None


def first_block_text(response: Any) -> str | None:
    """Return the first block's text, or ``None`` when it is not a text block."""

    blocks = _content_blocks(response)
    if not blocks or _block_type(blocks[0]) != "text":
        return None
    return _block_text(blocks[0])


def build_image_block(data: str, media_type: str) -> dict[str, Any]:
    """Return a base64 image content block."""

    return {
        "type": "image",
        "source": {
            "type": "base64",
            "media_type": media_type,
            "data": data,
        },
    }


def build_user_message(*content: dict[str, Any] | str) -> dict[str, Any]:
    """Wrap content blocks (or plain prompt text) in a single user message."""

    if len(content) == 1 and isinstance(content[0], str):
        return {"role": "user", "content": content[0]}
    blocks = [
        {"type": "text", "text": item} if isinstance(item, str) else item
        for item in content
    ]
    return {"role": "user", "content": blocks}


__all__ = [
    "AnthropicMessagesProvider",
    "PROVIDER_NAME",
    "build_image_block",
    "build_user_message",
    "find_text_block",
    "first_block_text",
]
