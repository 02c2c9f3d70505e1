"""JSON renderer: a pretty-printed copy of the source document."""

import json
from typing import Any

from ..config import RenderConfig
from ..renderer import Renderer


class JsonRenderer(Renderer):
    """Lossless export of the raw conversation document.

    No turn rendering or structural checks take place; every field of the
    input, known or not, is reproduced.
    """

    def generate(self, document: Any, config: RenderConfig) -> str:  # noqa: ARG002
        return json.dumps(document, indent=2, ensure_ascii=False)
