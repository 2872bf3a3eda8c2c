"""Assemble a PlainRenderer and highlighting decorators into one Renderer.

``order`` is assembly order, innermost first: the first name listed wraps
the PlainRenderer directly and the last name listed becomes the entry point.
Passes therefore *run* in reverse order. With the default
``("keywords", "strings", "comments")`` the comment pass runs first, so a
``//`` inside a string literal starts a comment.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from spanlight.config import (
    COMMENTS,
    DEFAULT_ORDER,
    KEYWORDS,
    STRINGS,
    HighlightConfig,
    normalize_order,
)
from spanlight.highlight.decorators import (
    CommentHighlighter,
    KeywordHighlighter,
    StringHighlighter,
)
from spanlight.highlight.renderer import PlainRenderer, Renderer
from spanlight.log import get_logger

logger = get_logger(__name__)


def build_pipeline(
    order: Iterable[str] = DEFAULT_ORDER,
    *,
    keyword_table: Mapping[str, str] | Iterable[tuple[str, str]] | None = None,
    comment_marker: str = "//",
) -> Renderer:
    """Wrap a PlainRenderer in one decorator per pass name in ``order``.

    Raises ConfigError for unknown or repeated pass names. An empty order
    returns the bare PlainRenderer.
    """
    names = normalize_order(order)

    renderer: Renderer = PlainRenderer()
    for name in names:
        if name == KEYWORDS:
            renderer = KeywordHighlighter(renderer, keyword_table)
        elif name == STRINGS:
            renderer = StringHighlighter(renderer)
        elif name == COMMENTS:
            renderer = CommentHighlighter(renderer, comment_marker)

    logger.debug("assembled pipeline: %r", renderer)
    return renderer


def build_pipeline_from_config(config: HighlightConfig) -> Renderer:
    """Assemble the enabled passes of ``config`` in its configured order."""
    return build_pipeline(
        config.enabled_passes(),
        keyword_table=config.keyword_table,
        comment_marker=config.comment_marker,
    )


def execution_order(order: Iterable[str] = DEFAULT_ORDER) -> tuple[str, ...]:
    """The order in which passes actually see the text for a given assembly order."""
    return tuple(reversed(normalize_order(order)))
