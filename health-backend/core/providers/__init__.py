"""AI provider gateways."""

from .anthropic_messages import (
    PROVIDER_NAME,
    AnthropicMessagesProvider,
    build_image_block,
    build_user_message,
    find_text_block,
    first_block_text,
)

__all__ = [
    "AnthropicMessagesProvider",
    "PROVIDER_NAME",
    "build_image_block",
    "build_user_message",
    "find_text_block",
    "first_block_text",
]
