"""Pydantic models for claude.ai conversation JSON structures.

Field names follow the claude.ai `chat_conversations` API so documents can be
validated without renaming. Every field the exporter does not strictly need
is optional: missing payloads degrade to "render nothing" rather than errors.
"""

from enum import Enum
from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, PrivateAttr, ValidationError


class Sender(str, Enum):
    """Participant that authored a chat message.

    Using str as base class keeps plain string comparisons working.
    """

    ASSISTANT = "assistant"
    HUMAN = "human"


class ExportFormat(str, Enum):
    """Output document format."""

    MARKDOWN = "markdown"
    JSON = "json"


# =============================================================================
# Content Item Models
# =============================================================================


class TextContent(BaseModel):
    type: Literal["text"]
    text: Optional[str] = None


class ArtifactInput(BaseModel):
    """Input of an `artifacts` tool invocation."""

    title: Optional[str] = None
    content: Optional[str] = None
    id: Optional[str] = None
    language: Optional[str] = None


class ToolUseContent(BaseModel):
    """A tool invocation; only `artifacts` invocations produce output."""

    type: Literal["tool_use"]
    name: Optional[str] = None
    input: Optional[dict[str, Any]] = None
    _artifact: Optional[ArtifactInput] = PrivateAttr(default=None)

    @property
    def artifact(self) -> Optional[ArtifactInput]:
        """Typed artifact input, or None when this is not an artifact.

        Lazily parsed and cached on first access.
        """
        if self.name != "artifacts" or not self.input:
            return None
        if self._artifact is None:
            try:
                parsed = ArtifactInput.model_validate(self.input)
            except ValidationError:
                return None
            self._artifact = parsed
        return self._artifact


class ToolResultContent(BaseModel):
    """Result of a tool invocation. Never rendered."""

    type: Literal["tool_result"]
    name: Optional[str] = None
    content: Any = None


class CodeContent(BaseModel):
    type: Literal["code"]
    code: Optional[str] = None
    language: Optional[str] = None


class ExampleContent(BaseModel):
    type: Literal["example"]
    content: Optional[str] = None


class LinkContent(BaseModel):
    type: Literal["link"]
    url: Optional[str] = None
    title: Optional[str] = None


class UnknownContent(BaseModel):
    """Content item whose `type` has no dedicated model.

    Also used when a known type carries a payload that fails validation.
    """

    type: str = ""


ContentItem = Union[
    TextContent,
    ToolUseContent,
    ToolResultContent,
    CodeContent,
    ExampleContent,
    LinkContent,
    UnknownContent,
]


# =============================================================================
# File Content Models
# =============================================================================


class Attachment(BaseModel):
    """Uploaded file whose text was extracted into the conversation."""

    file_name: Optional[str] = None
    file_type: Optional[str] = None
    file_size: Optional[int] = None
    extracted_content: Optional[str] = None


class FileRef(BaseModel):
    """Entry of `files_v2` (or the legacy `files` list)."""

    file_name: Optional[str] = None
    name: Optional[str] = None
    file_kind: Optional[str] = None
    content: Optional[str] = None

    @property
    def display_name(self) -> str:
        return self.name or self.file_name or "Untitled"


class SyncSource(BaseModel):
    """Externally synced content (e.g. a linked repository or document)."""

    name: Optional[str] = None
    type: Optional[str] = None
    content: Optional[str] = None


# =============================================================================
# Conversation Models
# =============================================================================


class ChatMessage(BaseModel):
    """One turn of the conversation."""

    uuid: Optional[str] = None
    sender: str = Sender.HUMAN.value
    created_at: Optional[str] = None
    content: list[ContentItem] = []
    attachments: list[Attachment] = []
    files_v2: list[FileRef] = []
    sync_sources: list[SyncSource] = []

    @property
    def is_assistant(self) -> bool:
        return self.sender == Sender.ASSISTANT


class Conversation(BaseModel):
    uuid: Optional[str] = None
    name: Optional[str] = None
    summary: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    chat_messages: list[ChatMessage]
