#!/usr/bin/env python3
"""Convert claude.ai conversation documents to Markdown or JSON."""

import json
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Optional, Union

from .config import RenderConfig
from .errors import OutputError, RetrievalError
from .renderer import get_renderer
from .utils import export_filename

logger = logging.getLogger(__name__)

STDIO_PATH = "-"


# =============================================================================
# Conversation Loading Functions
# =============================================================================


def load_conversation(source: Union[Path, str]) -> Any:
    """Load a raw conversation document from a JSON file, or stdin for "-".

    Raises:
        RetrievalError: If the source cannot be read or is not valid JSON
    """
    try:
        if str(source) == STDIO_PATH:
            text = sys.stdin.read()
        else:
            with open(source, "r", encoding="utf-8") as f:
                text = f.read()
    except OSError as e:
        raise RetrievalError(f"Cannot read {source}: {e}") from e
    except UnicodeDecodeError as e:
        raise RetrievalError(f"{source} is not valid UTF-8: {e}") from e

    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise RetrievalError(f"{source} is not valid JSON: {e}") from e


# =============================================================================
# Conversion Functions
# =============================================================================


def convert_conversation(document: Any, config: Optional[RenderConfig] = None) -> str:
    """Render a raw conversation document in the configured export format.

    This is the entry point of the formatting engine: it performs no I/O and
    never modifies the document.

    Raises:
        MalformedDocumentError: If Markdown output is requested and the
            document has no `chat_messages` list
    """
    if config is None:
        config = RenderConfig()
    renderer = get_renderer(config.export_format)
    return renderer.generate(document, config)


def resolve_output_path(
    output: Optional[Union[Path, str]],
    config: RenderConfig,
    now: Optional[datetime] = None,
) -> Union[Path, str]:
    """Work out where exported text goes.

    None means a timestamped file in the current directory; a directory gets
    a timestamped file inside it; "-" means stdout.
    """
    if output is None:
        return Path.cwd() / export_filename(config.export_format, now)
    if str(output) == STDIO_PATH:
        return STDIO_PATH
    output_path = Path(output)
    if output_path.is_dir():
        return output_path / export_filename(config.export_format, now)
    return output_path


def write_output(text: str, destination: Union[Path, str]) -> None:
    """Write exported text to a file, or to stdout for "-".

    Raises:
        OutputError: If the file or its parent directory cannot be written
    """
    if str(destination) == STDIO_PATH:
        sys.stdout.write(text)
        sys.stdout.flush()
        return
    path = Path(destination)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    except OSError as e:
        raise OutputError(f"Cannot write {path}: {e}") from e
    logger.info("Wrote %d characters to %s", len(text), path)


def export_conversation(
    document: Any,
    config: Optional[RenderConfig] = None,
    output: Optional[Union[Path, str]] = None,
    now: Optional[datetime] = None,
) -> Union[Path, str]:
    """Convert a document and write it out, returning the destination.

    Nothing is written if conversion fails.
    """
    if config is None:
        config = RenderConfig()
    text = convert_conversation(document, config)
    destination = resolve_output_path(output, config, now)
    write_output(text, destination)
    return destination
