"""Export claude.ai conversations to Markdown or JSON."""

from .config import RenderConfig, load_config
from .converter import convert_conversation, export_conversation, load_conversation
from .errors import (
    ChatExportError,
    ConfigError,
    MalformedDocumentError,
    OutputError,
    RetrievalError,
)
from .models import ExportFormat

__all__ = [
    "RenderConfig",
    "load_config",
    "convert_conversation",
    "export_conversation",
    "load_conversation",
    "ChatExportError",
    "ConfigError",
    "MalformedDocumentError",
    "OutputError",
    "RetrievalError",
    "ExportFormat",
]
