"""Factory modules for creating typed objects from raw conversation data."""

from .content_factory import (
    # Content type registry
    CONTENT_ITEM_CREATORS,
    # Content item creation
    create_content_item,
    create_message_content,
)
from .conversation_factory import (
    # Conversation creation
    create_chat_message,
    create_conversation,
)

__all__ = [
    # Content type registry
    "CONTENT_ITEM_CREATORS",
    # Content item creation
    "create_content_item",
    "create_message_content",
    # Conversation creation
    "create_chat_message",
    "create_conversation",
]
