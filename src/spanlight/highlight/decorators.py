"""Highlighting decorators.

Each decorator owns one inner Renderer. ``render`` runs the decorator's own
pass over the text, then hands the result to the inner renderer, so in a
chain the outermost pass runs first and the PlainRenderer runs last.

Passes never edit a string in place. They walk a read cursor through the
input, copy unmatched spans into a list of pieces, append the replacement for
each match and join the pieces at the end. Tags and escaped entities left by
earlier passes are never matched. The string and comment passes also skip
the code wrapped by an earlier span; the keyword pass still colors keywords
there. See ``spanlight.highlight.scanning``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping

from spanlight.config import normalize_table
from spanlight.errors import ConfigError, RendererContractError
from spanlight.highlight.renderer import Renderer, color_span
from spanlight.highlight.scanning import MarkupIndex, is_word_boundary
from spanlight.lang import keyword_table
from spanlight.log import get_logger

logger = get_logger(__name__)

STRING_COLOR = "green"
COMMENT_COLOR = "gray"


class HighlightDecorator(ABC):
    """Shared plumbing: own an inner renderer and delegate to it."""

    def __init__(self, inner: Renderer) -> None:
        if not callable(getattr(inner, "render", None)):
            raise RendererContractError(type(self).__name__, inner)
        self.inner = inner

    @abstractmethod
    def highlight(self, text: str) -> str:
        """Return ``text`` with this pass's markup inserted."""

    def render(self, text: str) -> str:
        return self.inner.render(self.highlight(text))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.inner!r})"


class KeywordHighlighter(HighlightDecorator):
    """Color whole-word occurrences of each keyword in the table.

    Entries are applied in table order, each over the output of the previous
    one. A match counts only if neither neighbour is alphanumeric, so ``int``
    is found in ``int x`` and ``vector&lt;int&gt;`` but not in ``integer``.
    Keywords inside a comment or string colored by an earlier pass are still
    found; only the tags themselves are skipped.
    """

    def __init__(
        self,
        inner: Renderer,
        table: Mapping[str, str] | Iterable[tuple[str, str]] | None = None,
    ) -> None:
        super().__init__(inner)
        self.table = normalize_table(keyword_table("cpp") if table is None else table)

    def highlight(self, text: str) -> str:
        for keyword, color in self.table:
            text, count = self._apply(text, keyword, color)
            if count:
                logger.debug("keyword %r: %d match(es)", keyword, count)
        return text

    @staticmethod
    def _apply(text: str, keyword: str, color: str) -> tuple[str, int]:
        pieces: list[str] = []
        cursor = 0
        count = 0
        replacement = color_span(color, keyword)
        index = MarkupIndex(text, whole_elements=False)
        while True:
            pos = index.find(keyword, cursor)
            if pos == -1:
                break
            end = pos + len(keyword)
            pieces.append(text[cursor:pos])
            if is_word_boundary(text, pos, end):
                pieces.append(replacement)
                count += 1
            else:
                pieces.append(keyword)
            cursor = end
        pieces.append(text[cursor:])
        return "".join(pieces), count


class StringHighlighter(HighlightDecorator):
    """Color double-quoted literals, quotes included.

    A quote with no partner after it ends the scan: it and everything after
    it is left alone. Backslash escapes are not understood.
    """

    def highlight(self, text: str) -> str:
        pieces: list[str] = []
        cursor = 0
        count = 0
        index = MarkupIndex(text)
        while True:
            start = index.find('"', cursor)
            if start == -1:
                break
            end = index.find('"', start + 1)
            if end == -1:
                break
            pieces.append(text[cursor:start])
            pieces.append(color_span(STRING_COLOR, text[start:end + 1]))
            cursor = end + 1
            count += 1
        pieces.append(text[cursor:])
        if count:
            logger.debug("strings: %d literal(s)", count)
        return "".join(pieces)


class CommentHighlighter(HighlightDecorator):
    """Color line comments from the marker to the end of the line.

    The newline itself stays outside the span. The marker defaults to ``//``.
    """

    def __init__(self, inner: Renderer, marker: str = "//") -> None:
        super().__init__(inner)
        if not marker:
            raise ConfigError("Comment marker must be a non-empty string")
        self.marker = marker

    def highlight(self, text: str) -> str:
        pieces: list[str] = []
        cursor = 0
        count = 0
        index = MarkupIndex(text)
        while True:
            start = index.find(self.marker, cursor)
            if start == -1:
                break
            end = index.find("\n", start + len(self.marker))
            if end == -1:
                end = len(text)
            pieces.append(text[cursor:start])
            pieces.append(color_span(COMMENT_COLOR, text[start:end]))
            cursor = end
            count += 1
        pieces.append(text[cursor:])
        if count:
            logger.debug("comments: %d line comment(s)", count)
        return "".join(pieces)
