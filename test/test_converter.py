#!/usr/bin/env python3
"""Tests for the conversion entry point, JSON export and output handling."""

import copy
import json
from datetime import datetime, timezone
from pathlib import Path

import pytest

from claude_chat_export.config import RenderConfig
from claude_chat_export.converter import (
    convert_conversation,
    export_conversation,
    load_conversation,
    resolve_output_path,
)
from claude_chat_export.errors import (
    MalformedDocumentError,
    OutputError,
    RetrievalError,
)
from claude_chat_export.models import ExportFormat
from claude_chat_export.renderer import Renderer, get_renderer

JSON_CONFIG = RenderConfig(export_format=ExportFormat.JSON)
FIXED_NOW = datetime(2024, 3, 5, 14, 30, 0, 123456, tzinfo=timezone.utc)


class TestJsonExport:
    def test_round_trip_reproduces_document(self, conversation_data):
        output = convert_conversation(conversation_data, JSON_CONFIG)
        assert json.loads(output) == conversation_data

    def test_output_is_pretty_printed(self, conversation_data):
        output = convert_conversation(conversation_data, JSON_CONFIG)
        assert output == json.dumps(conversation_data, indent=2, ensure_ascii=False)
        assert output.startswith('{\n  "uuid"')

    def test_non_ascii_kept_verbatim(self):
        document = {"name": "Café ☕", "chat_messages": []}
        assert "Café ☕" in convert_conversation(document, JSON_CONFIG)

    def test_skips_structural_checks(self):
        document = {"name": "no messages at all"}
        assert json.loads(convert_conversation(document, JSON_CONFIG)) == document

    def test_ignores_markdown_options(self, conversation_data):
        config = RenderConfig(export_format="json", skip_trailing_turns=2)
        output = json.loads(convert_conversation(conversation_data, config))
        assert len(output["chat_messages"]) == 3


class TestConvertConversation:
    def test_defaults_to_markdown(self, conversation_data):
        output = convert_conversation(conversation_data)
        assert output.startswith("# Parsing CSV files in Python\n\n")

    def test_does_not_modify_document(self, conversation_data):
        original = copy.deepcopy(conversation_data)
        convert_conversation(conversation_data)
        convert_conversation(conversation_data, JSON_CONFIG)
        assert conversation_data == original

    def test_malformed_markdown_document(self):
        with pytest.raises(MalformedDocumentError, match="chat_messages"):
            convert_conversation({"name": "x"})

    def test_unsupported_format(self):
        with pytest.raises(ValueError, match="Unsupported format"):
            get_renderer("html")

    def test_base_renderer_has_no_format(self, conversation_data):
        with pytest.raises(NotImplementedError):
            Renderer().generate(conversation_data, RenderConfig())


class TestLoadConversation:
    def test_load_from_file(self, conversation_path, conversation_data):
        assert load_conversation(conversation_path) == conversation_data

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(RetrievalError, match="Cannot read"):
            load_conversation(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path: Path):
        bad = tmp_path / "bad.json"
        bad.write_text("{not json", encoding="utf-8")
        with pytest.raises(RetrievalError, match="not valid JSON"):
            load_conversation(bad)

    def test_invalid_utf8(self, tmp_path: Path):
        bad = tmp_path / "binary.json"
        bad.write_bytes(b"\xff\xfe\x00")
        with pytest.raises(RetrievalError, match="not valid UTF-8"):
            load_conversation(bad)

    def test_load_from_stdin(self, monkeypatch: pytest.MonkeyPatch):
        import io

        monkeypatch.setattr("sys.stdin", io.StringIO('{"chat_messages": []}'))
        assert load_conversation("-") == {"chat_messages": []}


class TestOutput:
    def test_default_output_is_timestamped_file_in_cwd(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ):
        monkeypatch.chdir(tmp_path)
        path = resolve_output_path(None, RenderConfig(), FIXED_NOW)
        assert isinstance(path, Path)
        assert path.name == "claude-chat-2024-03-05T14-30-00-123Z.md"
        assert path.parent.resolve() == tmp_path.resolve()

    def test_directory_output(self, tmp_path: Path):
        path = resolve_output_path(tmp_path, JSON_CONFIG, FIXED_NOW)
        assert path == tmp_path / "claude-chat-2024-03-05T14-30-00-123Z.json"

    def test_explicit_file_output(self, tmp_path: Path):
        target = tmp_path / "out" / "chat.md"
        assert resolve_output_path(target, RenderConfig()) == target

    def test_stdout_output(self):
        assert resolve_output_path("-", RenderConfig()) == "-"

    def test_export_writes_file(self, tmp_path: Path, conversation_data):
        target = tmp_path / "nested" / "chat.md"
        destination = export_conversation(conversation_data, RenderConfig(), target)
        assert destination == target
        assert target.read_text(encoding="utf-8") == convert_conversation(
            conversation_data
        )

    def test_export_to_stdout(self, capsys, conversation_data):
        export_conversation(conversation_data, JSON_CONFIG, "-")
        assert json.loads(capsys.readouterr().out) == conversation_data

    def test_nothing_written_for_malformed_document(self, tmp_path: Path):
        target = tmp_path / "chat.md"
        with pytest.raises(MalformedDocumentError):
            export_conversation({"chat_messages": 5}, RenderConfig(), target)
        assert not target.exists()

    def test_unwritable_destination(self, tmp_path: Path, conversation_data):
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        with pytest.raises(OutputError, match="Cannot write"):
            export_conversation(
                conversation_data, RenderConfig(), blocker / "chat.md"
            )
