"""Factory for creating ContentItem instances from raw content dicts.

Maps the `type` field of each item to its model class. Unknown types and
items whose payload fails validation become UnknownContent.
"""

import logging
from typing import Any, cast

from pydantic import BaseModel, ValidationError

from ..models import (
    CodeContent,
    ContentItem,
    ExampleContent,
    LinkContent,
    TextContent,
    ToolResultContent,
    ToolUseContent,
    UnknownContent,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Content Item Registry
# =============================================================================

# Maps content type strings to their model classes
CONTENT_ITEM_CREATORS: dict[str, type[BaseModel]] = {
    "text": TextContent,
    "tool_use": ToolUseContent,
    "tool_result": ToolResultContent,
    "code": CodeContent,
    "example": ExampleContent,
    "link": LinkContent,
}


def create_content_item(item_data: Any) -> ContentItem:
    """Create a ContentItem from raw data using the registry.

    Args:
        item_data: The raw item, normally a dict with a `type` key

    Returns:
        ContentItem instance, with fallback to UnknownContent
    """
    if not isinstance(item_data, dict):
        return UnknownContent(type=type(item_data).__name__)

    data = cast(dict[str, Any], item_data)
    content_type = data.get("type")
    type_name = content_type if isinstance(content_type, str) else ""

    model_class = CONTENT_ITEM_CREATORS.get(type_name)
    if model_class is None:
        return UnknownContent(type=type_name)

    try:
        return cast(ContentItem, model_class.model_validate(data))
    except ValidationError as e:
        logger.debug("Invalid %s content item, treating as unknown: %s", type_name, e)
        return UnknownContent(type=type_name)


def create_message_content(content_data: Any) -> list[ContentItem]:
    """Create a list of ContentItems from a chat message's `content`.

    Anything other than a list yields no items.
    """
    if not isinstance(content_data, list):
        return []
    return [create_content_item(item) for item in cast(list[Any], content_data)]
