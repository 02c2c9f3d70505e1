"""Pytest configuration and shared fixtures."""

import json
from pathlib import Path
from typing import Any

import pytest

from claude_chat_export.config import RenderConfig
from claude_chat_export.markdown.renderer import MarkdownRenderer


@pytest.fixture
def test_data_dir() -> Path:
    """Return path to test data directory."""
    return Path(__file__).parent / "test_data"


@pytest.fixture
def conversation_path(test_data_dir: Path) -> Path:
    """Path to a representative conversation document."""
    return test_data_dir / "conversation.json"


@pytest.fixture
def conversation_data(conversation_path: Path) -> dict[str, Any]:
    """Representative conversation document, freshly loaded per test."""
    return json.loads(conversation_path.read_text(encoding="utf-8"))


@pytest.fixture
def renderer() -> MarkdownRenderer:
    """Create a MarkdownRenderer instance for testing."""
    return MarkdownRenderer()


@pytest.fixture
def plain_config() -> RenderConfig:
    """Config without timestamps, with custom labels."""
    return RenderConfig(
        include_timestamps=False,
        assistant_label="Claude",
        human_label="Phil",
    )
