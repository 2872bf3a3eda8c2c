"""Highlight - render source code as HTML with rule-based coloring.

Public API
----------
- convert_to_html(code, renderer) -> str
- render_source(code, *, language=None, config=None) -> str
- build_pipeline(order=DEFAULT_ORDER, *, keyword_table=None, comment_marker="//") -> Renderer
- build_pipeline_from_config(config) -> Renderer
"""

from __future__ import annotations

from spanlight.config import HighlightConfig
from spanlight.highlight.decorators import (  # noqa: F401
    CommentHighlighter,
    KeywordHighlighter,
    StringHighlighter,
)
from spanlight.highlight.pipeline import (  # noqa: F401
    build_pipeline,
    build_pipeline_from_config,
    execution_order,
)
from spanlight.highlight.renderer import (  # noqa: F401
    PlainRenderer,
    Renderer,
    escape_html,
)

SAMPLE_CODE = """
#include <iostream>
// Example code
int main() {
    string message = "Hello, World!";
    return 0;
}
"""


def convert_to_html(code: str, renderer: Renderer) -> str:
    """Escape raw code once and run it through ``renderer``."""
    return renderer.render(escape_html(code))


def render_source(
    code: str,
    *,
    language: str | None = None,
    config: HighlightConfig | None = None,
) -> str:
    """One-shot rendering.

    ``config`` wins when given; otherwise the defaults for ``language``
    (C++ when None) are used.
    """
    if config is None:
        config = HighlightConfig.for_language(language or "cpp")
    return convert_to_html(code, build_pipeline_from_config(config))
