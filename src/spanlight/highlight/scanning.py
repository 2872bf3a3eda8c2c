"""Substring search that steps over markup already in the text.

Passes only ever see escaped code, so every ``<span ...>...</span>`` element
in their input was inserted by an earlier pass, and every ``&lt;`` / ``&gt;``
came from the escaper. There are two ways to step over them:

- whole elements (the default): a span's tags *and* the code it wraps are
  opaque. The string and comment passes use this; their matches may still
  *enclose* whole earlier elements, which keeps the result properly nested
  whatever the pass order.
- tags only: just the tag text and the entities are opaque, so the code
  inside an earlier span is still searched. The keyword pass uses this; a
  keyword never contains a tag, so its span always nests inside the one
  around it.
"""

from __future__ import annotations

import re
from bisect import bisect_right

_MARKUP_RE = re.compile(r"<span\b[^>]*>|</span>|&lt;|&gt;")


def markup_regions(text: str, whole_elements: bool = True) -> list[tuple[int, int]]:
    """Return sorted ``(start, end)`` ranges covered by markup.

    With ``whole_elements`` each top-level span element (open tag through its
    matching close tag, nested spans included) is one region; so is each
    escaper entity found outside a span. An unclosed span runs to the end of
    the text. Without it every tag and entity is a region of its own.
    """
    if not whole_elements:
        return [m.span() for m in _MARKUP_RE.finditer(text)]

    regions: list[tuple[int, int]] = []
    depth = 0
    open_at = 0
    for m in _MARKUP_RE.finditer(text):
        token = m.group()
        if token.startswith("<span"):
            if depth == 0:
                open_at = m.start()
            depth += 1
        elif token == "</span>":
            if depth == 0:
                regions.append((m.start(), m.end()))
                continue
            depth -= 1
            if depth == 0:
                regions.append((open_at, m.end()))
        elif depth == 0:
            regions.append((m.start(), m.end()))
    if depth:
        regions.append((open_at, len(text)))
    return regions


class MarkupIndex:
    """Search over one fixed string that skips its markup regions."""

    def __init__(self, text: str, whole_elements: bool = True) -> None:
        self.text = text
        self.regions = markup_regions(text, whole_elements)
        self._starts = [start for start, _ in self.regions]

    def region_at(self, pos: int) -> tuple[int, int] | None:
        """The markup region covering ``pos``, if any."""
        i = bisect_right(self._starts, pos) - 1
        if i >= 0 and pos < self.regions[i][1]:
            return self.regions[i]
        return None

    def find(self, needle: str, start: int = 0) -> int:
        """Like ``str.find``, but only returns matches lying wholly outside markup."""
        while True:
            idx = self.text.find(needle, start)
            if idx == -1:
                return -1
            region = self.region_at(idx)
            if region is not None:
                start = region[1]
                continue
            i = bisect_right(self._starts, idx)
            if i < len(self._starts) and self._starts[i] < idx + len(needle):
                start = idx + 1
                continue
            return idx


def is_word_boundary(text: str, start: int, end: int) -> bool:
    """True if ``text[start:end]`` has no alphanumeric neighbour on either side."""
    if start > 0 and text[start - 1].isalnum():
        return False
    if end < len(text) and text[end].isalnum():
        return False
    return True
