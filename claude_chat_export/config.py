"""Export configuration.

RenderConfig is built once per run from defaults, an optional TOML file and
command-line overrides, and is immutable afterwards.
"""

import logging
from pathlib import Path
from typing import Any, Mapping

import toml
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigError
from .models import ExportFormat

logger = logging.getLogger(__name__)

DEFAULT_ASSISTANT_LABEL = "Claude"
DEFAULT_HUMAN_LABEL = "Human"


class RenderConfig(BaseModel):
    """Options controlling how a conversation is exported.

    Accepts snake_case names as well as the camelCase names used by the
    browser-console exporter (e.g. ``skipLastMessages``, ``assistantName``).
    Unknown keys are ignored.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    include_timestamps: bool = Field(
        default=True,
        validation_alias=AliasChoices("include_timestamps", "includeTimestamps"),
    )
    include_file_content: bool = Field(
        default=True,
        validation_alias=AliasChoices("include_file_content", "includeFileContent"),
    )
    export_format: ExportFormat = Field(
        default=ExportFormat.MARKDOWN,
        validation_alias=AliasChoices("export_format", "exportFormat"),
    )
    skip_trailing_turns: int = Field(
        default=0,
        ge=0,
        validation_alias=AliasChoices(
            "skip_trailing_turns", "skipTrailingTurns", "skipLastMessages"
        ),
    )
    assistant_label: str = Field(
        default=DEFAULT_ASSISTANT_LABEL,
        validation_alias=AliasChoices(
            "assistant_label", "assistantLabel", "assistantName"
        ),
    )
    human_label: str = Field(
        default=DEFAULT_HUMAN_LABEL,
        validation_alias=AliasChoices("human_label", "humanLabel", "humanName"),
    )

    @field_validator("export_format", mode="before")
    @classmethod
    def _normalize_format(cls, value: Any) -> Any:
        # "md" is accepted as shorthand, mirroring the CLI choices
        if isinstance(value, str) and value.lower() in ("md", "markdown"):
            return ExportFormat.MARKDOWN
        return value

    def with_overrides(self, **overrides: Any) -> "RenderConfig":
        """Return a copy with every non-None override applied."""
        values = self.model_dump()
        values.update({k: v for k, v in overrides.items() if v is not None})
        return RenderConfig.model_validate(values)


def config_from_mapping(data: Mapping[str, Any]) -> RenderConfig:
    """Build a RenderConfig from a mapping, raising ConfigError if invalid."""
    try:
        return RenderConfig.model_validate(dict(data))
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e


def load_config(path: Path) -> RenderConfig:
    """Load a RenderConfig from a TOML file.

    Options may sit at the top level or under an ``[export]`` table.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data: dict[str, Any] = toml.load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    except toml.TomlDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e

    section = data.get("export")
    if isinstance(section, dict):
        data = section
    logger.debug("Loaded config from %s: %s", path, sorted(data))
    return config_from_mapping(data)
