#!/usr/bin/env python3
"""CLI interface for claude-chat-export."""

import logging
import sys
from pathlib import Path
from typing import Any, Optional

import click

from .client import DEFAULT_BASE_URL, ClaudeClient
from .config import RenderConfig, load_config
from .converter import STDIO_PATH, export_conversation, load_conversation
from .errors import ChatExportError


def _load_document(
    input_path: Optional[str],
    org_id: Optional[str],
    conversation_id: Optional[str],
    session_key: Optional[str],
    base_url: str,
) -> Any:
    """Load the conversation from a file/stdin, or fetch it from claude.ai."""
    if conversation_id:
        if input_path:
            raise click.UsageError(
                "Give either INPUT_PATH or --conversation-id, not both"
            )
        if not org_id:
            raise click.UsageError("--conversation-id requires --org-id")
        with ClaudeClient(session_key, base_url=base_url) as client:
            return client.fetch_conversation(org_id, conversation_id)

    if not input_path:
        raise click.UsageError("Missing INPUT_PATH (use '-' for stdin)")
    return load_conversation(input_path)


@click.command()
@click.argument("input_path", type=str, required=False)
@click.option(
    "-o",
    "--output",
    type=str,
    help="Output file or directory, or '-' for stdout (default: claude-chat-<timestamp>.<ext> in the current directory)",
)
@click.option(
    "-f",
    "--format",
    "export_format",
    type=click.Choice(["markdown", "md", "json"]),
    default=None,
    help="Output format (default: markdown). json writes a pretty-printed copy of the source document.",
)
@click.option(
    "--timestamps/--no-timestamps",
    "include_timestamps",
    default=None,
    help="Show the date next to each message sender (default: on).",
)
@click.option(
    "--file-content/--no-file-content",
    "include_file_content",
    default=None,
    help="Include attached, uploaded and synced file content (default: on).",
)
@click.option(
    "--skip-last",
    "skip_trailing_turns",
    type=click.IntRange(min=0),
    default=None,
    help="Number of messages to leave out at the end of the conversation.",
)
@click.option("--assistant-name", "assistant_label", type=str, help="Label for assistant messages.")
@click.option("--human-name", "human_label", type=str, help="Label for human messages.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, exists=True, dir_okay=False),
    help="TOML file with export options.",
)
@click.option("--org-id", type=str, envvar="CLAUDE_ORG_ID", help="claude.ai organization id.")
@click.option("--conversation-id", type=str, help="Fetch this conversation from claude.ai.")
@click.option(
    "--session-key",
    type=str,
    envvar="CLAUDE_SESSION_KEY",
    help="claude.ai sessionKey cookie value (or set CLAUDE_SESSION_KEY).",
)
@click.option("--base-url", type=str, default=DEFAULT_BASE_URL, show_default=True, hidden=True)
@click.option(
    "--debug",
    is_flag=True,
    default=False,
    help="Show debug logging and full traceback on errors.",
)
def main(
    input_path: Optional[str],
    output: Optional[str],
    export_format: Optional[str],
    include_timestamps: Optional[bool],
    include_file_content: Optional[bool],
    skip_trailing_turns: Optional[int],
    assistant_label: Optional[str],
    human_label: Optional[str],
    config_path: Optional[Path],
    org_id: Optional[str],
    conversation_id: Optional[str],
    session_key: Optional[str],
    base_url: str,
    debug: bool,
) -> None:
    """Export a claude.ai conversation to Markdown or JSON.

    INPUT_PATH: Path to a conversation JSON document, or '-' to read stdin. Omit it when using --conversation-id.
    """
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    try:
        config = load_config(config_path) if config_path else RenderConfig()
        config = config.with_overrides(
            export_format=export_format,
            include_timestamps=include_timestamps,
            include_file_content=include_file_content,
            skip_trailing_turns=skip_trailing_turns,
            assistant_label=assistant_label,
            human_label=human_label,
        )

        document = _load_document(
            input_path, org_id, conversation_id, session_key, base_url
        )
        destination = export_conversation(document, config, output)
        if str(destination) != STDIO_PATH:
            click.echo(f"Successfully exported conversation to {destination}")

    except ChatExportError as e:
        click.echo(f"Error: {e}", err=True)
        if debug:
            import traceback

            traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
