#!/usr/bin/env python3
"""Renderer base class and format lookup for conversation exports."""

from typing import Any

from .config import RenderConfig
from .models import ExportFormat


class Renderer:
    """Base class for conversation renderers.

    Subclasses implement format-specific rendering (Markdown, JSON).

    The method-based dispatcher pattern:
    - Subclasses define format_{ClassName}() methods for each model type
    - _dispatch_format() walks the object's MRO to find the most specific one
    - Objects with no matching method render as the empty string
    """

    def _dispatch_format(self, obj: Any) -> str:
        """Dispatch to format_{ClassName} method based on object type."""
        for cls in type(obj).__mro__:
            if cls is object:
                break
            if method := getattr(self, f"format_{cls.__name__}", None):
                return method(obj)
        return ""

    # -------------------------------------------------------------------------
    # Rendering Entry Points
    # -------------------------------------------------------------------------

    def generate(self, document: Any, config: RenderConfig) -> str:
        """Generate output from a raw conversation document."""
        raise NotImplementedError


def get_renderer(format: ExportFormat | str) -> Renderer:
    """Get a renderer instance for the specified format.

    Args:
        format: The output format ("markdown" or "json").

    Returns:
        A Renderer instance for the specified format.

    Raises:
        ValueError: If the format is not supported.
    """
    if format == ExportFormat.MARKDOWN:
        from .markdown.renderer import MarkdownRenderer

        return MarkdownRenderer()
    if format == ExportFormat.JSON:
        from .raw.renderer import JsonRenderer

        return JsonRenderer()
    raise ValueError(f"Unsupported format: {format}")
