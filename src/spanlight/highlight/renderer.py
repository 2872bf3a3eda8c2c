"""Renderer interface, the terminal <pre> renderer and the HTML escaper."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

PRE_OPEN = '<pre style="font-family: monospace;">'
PRE_CLOSE = "</pre>"


@runtime_checkable
class Renderer(Protocol):
    """Anything that turns (escaped, possibly marked-up) code text into HTML.

    ``PlainRenderer`` is the terminal implementation; the highlighters in
    ``spanlight.highlight.decorators`` each wrap another Renderer.
    """

    def render(self, text: str) -> str:
        ...


class PlainRenderer:
    """Wrap text in a monospace <pre> block without looking at it."""

    def render(self, text: str) -> str:
        return PRE_OPEN + text + PRE_CLOSE

    def __repr__(self) -> str:
        return "PlainRenderer()"


def escape_html(text: str) -> str:
    """Replace ``<`` with ``&lt;`` and ``>`` with ``&gt;``.

    Nothing else is touched: ``&`` and quotes pass through as-is. The
    highlighting passes rely on this to tell their own tags apart from code.
    """
    return text.replace("<", "&lt;").replace(">", "&gt;")


def color_span(color: str, content: str) -> str:
    """Wrap ``content`` in an inline-styled color span."""
    return f'<span style="color: {color};">{content}</span>'
