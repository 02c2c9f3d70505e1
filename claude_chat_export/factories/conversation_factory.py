"""Factory for creating Conversation and ChatMessage instances from raw data.

The raw document is never modified; typed copies are built from it. Only a
missing or non-list `chat_messages` (or a message that is not an object) is
an error; every other anomaly degrades to an empty or absent field.
"""

import logging
from typing import Any, Optional, TypeVar, cast

from pydantic import BaseModel, ValidationError

from ..errors import MalformedDocumentError
from ..models import (
    Attachment,
    ChatMessage,
    Conversation,
    FileRef,
    Sender,
    SyncSource,
)
from .content_factory import create_message_content

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def _optional_str(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def _create_models(raw_items: Any, model_class: type[ModelT]) -> list[ModelT]:
    """Validate each dict in raw_items, dropping entries that do not fit."""
    if not isinstance(raw_items, list):
        return []
    models: list[ModelT] = []
    for item in cast(list[Any], raw_items):
        if not isinstance(item, dict):
            continue
        try:
            models.append(model_class.model_validate(item))
        except ValidationError as e:
            logger.debug("Skipping invalid %s: %s", model_class.__name__, e)
    return models


def create_chat_message(data: dict[str, Any]) -> ChatMessage:
    """Create a ChatMessage from a raw message dict.

    Files are read from `files_v2`, falling back to the legacy `files` key
    when `files_v2` is absent.
    """
    raw_files = data["files_v2"] if "files_v2" in data else data.get("files")
    return ChatMessage(
        uuid=_optional_str(data.get("uuid")),
        sender=_optional_str(data.get("sender")) or Sender.HUMAN.value,
        created_at=_optional_str(data.get("created_at")),
        content=create_message_content(data.get("content")),
        attachments=_create_models(data.get("attachments"), Attachment),
        files_v2=_create_models(raw_files, FileRef),
        sync_sources=_create_models(data.get("sync_sources"), SyncSource),
    )


def create_conversation(document: Any) -> Conversation:
    """Create a Conversation from a raw claude.ai conversation document.

    Raises:
        MalformedDocumentError: If the document is not an object, lacks a
            `chat_messages` list, or contains a message that is not an object
    """
    if not isinstance(document, dict):
        raise MalformedDocumentError("Conversation document must be a JSON object")
    data = cast(dict[str, Any], document)

    raw_messages = data.get("chat_messages")
    if raw_messages is None:
        raise MalformedDocumentError("Conversation document has no 'chat_messages'")
    if not isinstance(raw_messages, list):
        raise MalformedDocumentError(
            f"'chat_messages' must be a list, got {type(raw_messages).__name__}"
        )

    messages: list[ChatMessage] = []
    for index, raw_message in enumerate(cast(list[Any], raw_messages)):
        if not isinstance(raw_message, dict):
            raise MalformedDocumentError(
                f"Chat message {index} is not a JSON object"
            )
        messages.append(create_chat_message(cast(dict[str, Any], raw_message)))

    return Conversation(
        uuid=_optional_str(data.get("uuid")),
        name=_optional_str(data.get("name")),
        summary=_optional_str(data.get("summary")),
        created_at=_optional_str(data.get("created_at")),
        updated_at=_optional_str(data.get("updated_at")),
        chat_messages=messages,
    )
