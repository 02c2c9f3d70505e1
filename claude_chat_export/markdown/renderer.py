"""Markdown renderer implementation for claude.ai conversations."""

import logging
import re
from typing import Any

from ..config import RenderConfig
from ..factories import create_conversation
from ..models import (
    ChatMessage,
    CodeContent,
    ContentItem,
    Conversation,
    ExampleContent,
    LinkContent,
    TextContent,
    ToolResultContent,
    ToolUseContent,
    UnknownContent,
)
from ..renderer import Renderer
from ..utils import format_timestamp

logger = logging.getLogger(__name__)

HORIZONTAL_RULE = "---"
SYNCED_CONTENT_DEFAULT_NAME = "Content"


class MarkdownRenderer(Renderer):
    """Markdown renderer for claude.ai conversations.

    Every fragment produced here ends with a blank line, so fragments can be
    concatenated in any order and still form separate Markdown blocks.
    """

    # -------------------------------------------------------------------------
    # Private Utility Methods
    # -------------------------------------------------------------------------

    def _block(self, text: str) -> str:
        """Terminate a fragment with a blank line."""
        return f"{text}\n\n"

    def _quote(self, text: str) -> str:
        """Prefix each line with '> ' to create a blockquote."""
        return "\n".join(f"> {line}" for line in text.split("\n"))

    def _code_fence(self, text: str, lang: str = "") -> str:
        """Wrap text in a fenced code block with adaptive delimiter.

        If the text contains backticks, uses a longer delimiter to avoid conflicts.
        """
        max_ticks = 2
        for match in re.finditer(r"`+", text):
            max_ticks = max(max_ticks, len(match.group()))
        fence = "`" * max(3, max_ticks + 1)
        return f"{fence}{lang}\n{text}\n{fence}"

    # -------------------------------------------------------------------------
    # Content Item Formatters
    # -------------------------------------------------------------------------

    def format_TextContent(self, content: TextContent) -> str:
        text = (content.text or "").strip()
        return self._block(text) if text else ""

    def format_ToolUseContent(self, content: ToolUseContent) -> str:
        # Only artifacts carry user-visible content
        artifact = content.artifact
        if artifact is None:
            return ""
        title = artifact.title or ""
        return self._block(f"### {title}") + self._block(artifact.content or "")

    def format_ToolResultContent(self, content: ToolResultContent) -> str:  # noqa: ARG002
        # Tool results are confirmations only
        return ""

    def format_CodeContent(self, content: CodeContent) -> str:
        if not content.code:
            return ""
        return self._block(self._code_fence(content.code.strip(), content.language or ""))

    def format_ExampleContent(self, content: ExampleContent) -> str:
        if not content.content:
            return ""
        return self._block("> Example:\n" + self._quote(content.content))

    def format_LinkContent(self, content: LinkContent) -> str:
        if not content.url:
            return ""
        return self._block(f"[{content.title or content.url}]({content.url})")

    def format_UnknownContent(self, content: UnknownContent) -> str:
        logger.debug("Skipping unhandled content type: %r", content.type)
        return ""

    def render_content_item(self, item: ContentItem) -> str:
        """Render a single content item as a Markdown fragment."""
        return self._dispatch_format(item)

    # -------------------------------------------------------------------------
    # Turn Assembly
    # -------------------------------------------------------------------------

    def _turn_header(self, message: ChatMessage, config: RenderConfig) -> str:
        label = config.assistant_label if message.is_assistant else config.human_label
        if config.include_timestamps:
            return self._block(f"### {label} - {format_timestamp(message.created_at)}")
        return self._block(f"### {label}")

    def _file_sections(self, message: ChatMessage) -> list[str]:
        """Render attachments, files and synced sources, in that order."""
        parts: list[str] = []
        for attachment in message.attachments:
            if attachment.extracted_content:
                parts.append(self._block("#### Attached File Content"))
                parts.append(self._block(self._code_fence(attachment.extracted_content)))

        for file in message.files_v2:
            parts.append(self._block(f"#### File: {file.display_name}"))
            if file.content:
                parts.append(self._block(self._code_fence(file.content)))

        for source in message.sync_sources:
            name = source.name or SYNCED_CONTENT_DEFAULT_NAME
            parts.append(self._block(f"#### Synced Content: {name}"))
            if source.content:
                parts.append(self._block(self._code_fence(source.content)))
        return parts

    def render_turn(self, message: ChatMessage, config: RenderConfig) -> str:
        """Render one chat message: header, content items, file content."""
        parts = [self._turn_header(message, config)]
        parts.extend(self.render_content_item(item) for item in message.content)
        if config.include_file_content:
            parts.extend(self._file_sections(message))
        return "".join(parts)

    # -------------------------------------------------------------------------
    # Core Generate Methods
    # -------------------------------------------------------------------------

    def _document_header(self, conversation: Conversation) -> list[str]:
        parts: list[str] = []
        if conversation.name:
            parts.append(self._block(f"# {conversation.name}"))
        parts.append(
            self._block(f"**Exported:** {format_timestamp(conversation.created_at)}")
        )
        if conversation.summary:
            parts.append(self._block(f"**Description:** {conversation.summary}"))
        parts.append(self._block(HORIZONTAL_RULE))
        return parts

    def render_conversation(
        self, conversation: Conversation, config: RenderConfig
    ) -> str:
        """Render a typed Conversation as a Markdown document."""
        messages = conversation.chat_messages
        if config.skip_trailing_turns > 0:
            messages = messages[: -config.skip_trailing_turns]

        parts = self._document_header(conversation)
        for message in messages:
            parts.append(self.render_turn(message, config))
            parts.append(self._block(HORIZONTAL_RULE))

        logger.debug(
            "Rendered %d of %d chat messages",
            len(messages),
            len(conversation.chat_messages),
        )
        return "".join(parts)

    def generate(self, document: Any, config: RenderConfig) -> str:
        """Generate Markdown from a raw conversation document.

        Raises:
            MalformedDocumentError: If the document has no `chat_messages` list
        """
        return self.render_conversation(create_conversation(document), config)
