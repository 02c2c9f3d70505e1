"""Exception hierarchy for claude-chat-export.

All project exceptions inherit from ChatExportError so the CLI can catch
them at a single boundary:

    ChatExportError
    ├── MalformedDocumentError   # conversation document has no usable turns
    ├── RetrievalError           # file, stdin or HTTP retrieval failed
    ├── OutputError              # exported text could not be written
    └── ConfigError              # config file unreadable or invalid
"""

from typing import Optional


class ChatExportError(Exception):
    """Base class for all claude-chat-export errors."""


class MalformedDocumentError(ChatExportError):
    """The conversation document lacks a `chat_messages` list."""


class RetrievalError(ChatExportError):
    """The conversation document could not be obtained."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ConfigError(ChatExportError):
    """A configuration file could not be read or validated."""


class OutputError(ChatExportError):
    """Exported text could not be written to its destination."""
