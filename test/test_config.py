"""Tests for RenderConfig construction and TOML loading."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from claude_chat_export.config import RenderConfig, config_from_mapping, load_config
from claude_chat_export.errors import ConfigError
from claude_chat_export.models import ExportFormat


class TestRenderConfig:
    def test_defaults(self):
        config = RenderConfig()
        assert config.include_timestamps is True
        assert config.include_file_content is True
        assert config.export_format == ExportFormat.MARKDOWN
        assert config.skip_trailing_turns == 0
        assert config.assistant_label == "Claude"
        assert config.human_label == "Human"

    def test_camel_case_names(self):
        config = config_from_mapping(
            {
                "includeTimestamps": False,
                "includeFileContent": False,
                "exportFormat": "json",
                "skipLastMessages": 2,
                "assistantName": "Claude",
                "humanName": "Phil",
            }
        )
        assert config.include_timestamps is False
        assert config.include_file_content is False
        assert config.export_format == ExportFormat.JSON
        assert config.skip_trailing_turns == 2
        assert config.human_label == "Phil"

    def test_unknown_keys_ignored(self):
        config = config_from_mapping({"colour": "blue", "human_label": "Me"})
        assert config.human_label == "Me"

    def test_md_shorthand(self):
        assert RenderConfig(export_format="md").export_format == ExportFormat.MARKDOWN

    def test_negative_skip_rejected(self):
        with pytest.raises(ConfigError):
            config_from_mapping({"skip_trailing_turns": -1})

    def test_unknown_format_rejected(self):
        with pytest.raises(ConfigError):
            config_from_mapping({"export_format": "html"})

    def test_is_immutable(self):
        config = RenderConfig()
        with pytest.raises(ValidationError):
            config.human_label = "changed"  # type: ignore[misc]

    def test_with_overrides_skips_none(self):
        base = RenderConfig(human_label="Phil", skip_trailing_turns=1)
        updated = base.with_overrides(human_label=None, skip_trailing_turns=3)
        assert updated.human_label == "Phil"
        assert updated.skip_trailing_turns == 3
        assert base.skip_trailing_turns == 1


class TestLoadConfig:
    def test_top_level_keys(self, tmp_path: Path):
        path = tmp_path / "export.toml"
        path.write_text(
            'include_timestamps = false\nhuman_label = "Phil"\n', encoding="utf-8"
        )
        config = load_config(path)
        assert config.include_timestamps is False
        assert config.human_label == "Phil"

    def test_export_table(self, tmp_path: Path):
        path = tmp_path / "export.toml"
        path.write_text(
            '[export]\nexportFormat = "json"\nskipLastMessages = 1\n', encoding="utf-8"
        )
        config = load_config(path)
        assert config.export_format == ExportFormat.JSON
        assert config.skip_trailing_turns == 1

    def test_invalid_toml(self, tmp_path: Path):
        path = tmp_path / "export.toml"
        path.write_text("this is = = not toml", encoding="utf-8")
        with pytest.raises(ConfigError, match="Invalid TOML"):
            load_config(path)

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(ConfigError, match="Cannot read"):
            load_config(tmp_path / "nope.toml")
