"""Tests for pipeline assembly and whole-chain rendering."""

import re

import pytest

from spanlight.config import HighlightConfig
from spanlight.errors import ConfigError
from spanlight.highlight import convert_to_html
from spanlight.highlight.decorators import (
    CommentHighlighter,
    KeywordHighlighter,
    StringHighlighter,
)
from spanlight.highlight.pipeline import (
    build_pipeline,
    build_pipeline_from_config,
    execution_order,
)
from spanlight.highlight.renderer import PRE_CLOSE, PRE_OPEN, PlainRenderer, escape_html

BLUE = '<span style="color: blue;">'
GREEN = '<span style="color: green;">'
GRAY = '<span style="color: gray;">'
END = "</span>"

_TAG_RE = re.compile(r"<(/?)(\w+)[^>]*>")


def assert_well_formed(html):
    """Every closing tag matches the innermost open tag."""
    stack = []
    for m in _TAG_RE.finditer(html):
        closing, name = m.groups()
        if closing:
            assert stack and stack[-1] == name, f"unbalanced </{name}> at {m.start()}"
            stack.pop()
        else:
            stack.append(name)
    assert stack == []


# ---------------------------------------------------------------------------
# build_pipeline - structure
# ---------------------------------------------------------------------------
class TestBuildPipeline:
    def test_default_chain_shape(self):
        r = build_pipeline()
        assert isinstance(r, CommentHighlighter)
        assert isinstance(r.inner, StringHighlighter)
        assert isinstance(r.inner.inner, KeywordHighlighter)
        assert isinstance(r.inner.inner.inner, PlainRenderer)

    def test_empty_order_is_plain(self):
        assert isinstance(build_pipeline([]), PlainRenderer)

    def test_custom_order(self):
        r = build_pipeline(["comments", "keywords"])
        assert isinstance(r, KeywordHighlighter)
        assert isinstance(r.inner, CommentHighlighter)

    def test_keyword_table_passed_through(self):
        r = build_pipeline(["keywords"], keyword_table={"foo": "red"})
        assert r.table == (("foo", "red"),)

    def test_comment_marker_passed_through(self):
        r = build_pipeline(["comments"], comment_marker="#")
        assert r.marker == "#"

    def test_unknown_pass(self):
        with pytest.raises(ConfigError, match="Unknown pass"):
            build_pipeline(["keywords", "numbers"])

    def test_repeated_pass(self):
        with pytest.raises(ConfigError, match="more than once"):
            build_pipeline(["strings", "strings"])

    def test_bare_string_rejected(self):
        with pytest.raises(ConfigError):
            build_pipeline("keywords")

    def test_execution_order_is_reversed(self):
        assert execution_order() == ("comments", "strings", "keywords")
        assert execution_order(["comments", "strings"]) == ("strings", "comments")


class TestBuildPipelineFromConfig:
    def test_disabled_pass_dropped(self):
        r = build_pipeline_from_config(HighlightConfig(enable_strings=False))
        assert isinstance(r, CommentHighlighter)
        assert isinstance(r.inner, KeywordHighlighter)

    def test_everything_disabled(self):
        config = HighlightConfig(
            enable_keywords=False, enable_strings=False, enable_comments=False
        )
        assert isinstance(build_pipeline_from_config(config), PlainRenderer)

    def test_language_defaults(self):
        r = build_pipeline_from_config(HighlightConfig.for_language("python"))
        assert r.marker == "#"
        assert ("def", "blue") in r.inner.inner.table


# ---------------------------------------------------------------------------
# Full chain rendering
# ---------------------------------------------------------------------------
class TestFullChain:
    @pytest.mark.parametrize("text", ["x = y + z;", "a < b", "", "main() {}\n"])
    def test_nothing_to_highlight(self, text):
        html = convert_to_html(text, build_pipeline())
        assert html == PRE_OPEN + escape_html(text) + PRE_CLOSE

    def test_end_to_end(self):
        code = 'int main() { string s = "ok"; // done\n }'
        html = convert_to_html(code, build_pipeline())
        assert html == (
            PRE_OPEN
            + f"{BLUE}int{END} main() {{ "
            + f"{GREEN}string{END} s = {GREEN}\"ok\"{END}; "
            + f"{GRAY}// done{END}\n }}"
            + PRE_CLOSE
        )
        assert html.count("<pre") == 1
        assert_well_formed(html)

    def test_keyword_inside_comment(self):
        html = convert_to_html("x; // int y\n", build_pipeline())
        assert html == PRE_OPEN + f"x; {GRAY}// {BLUE}int{END} y{END}\n" + PRE_CLOSE
        assert_well_formed(html)

    def test_keyword_inside_string(self):
        html = convert_to_html('cout << "string";', build_pipeline())
        assert html == (
            PRE_OPEN
            + f"{BLUE}cout{END} &lt;&lt; "
            + f'{GREEN}"{GREEN}string{END}"{END};'
            + PRE_CLOSE
        )
        assert_well_formed(html)

    def test_escaping_happens_once(self):
        html = convert_to_html("a<b", build_pipeline())
        assert "a&lt;b" in html
        assert "&amp;" not in html

    def test_inserted_markup_never_escaped(self):
        code = '#include <map>\nif (a < b) { cout << "x>y"; } // a<b\n'
        html = convert_to_html(code, build_pipeline())
        assert html.count("&lt;") == code.count("<")
        assert html.count("&gt;") == code.count(">")
        assert "&amp;" not in html
        assert "<span" in html
        assert_well_formed(html)

    def test_reusable_across_calls(self):
        r = build_pipeline()
        first = convert_to_html("int a;", r)
        convert_to_html("// other", r)
        assert convert_to_html("int a;", r) == first


# ---------------------------------------------------------------------------
# Order sensitivity - decorators do not commute
# ---------------------------------------------------------------------------
class TestOrderSensitivity:
    CODE = '"// not a comment"'

    def test_default_order_comment_wins(self):
        html = convert_to_html(self.CODE, build_pipeline())
        assert html == PRE_OPEN + f'"{GRAY}// not a comment"{END}' + PRE_CLOSE

    def test_strings_first_literal_wins(self):
        html = convert_to_html(self.CODE, build_pipeline(["keywords", "comments", "strings"]))
        assert html == PRE_OPEN + f'{GREEN}"// not a comment"{END}' + PRE_CLOSE

    def test_orders_differ(self):
        default = convert_to_html(self.CODE, build_pipeline())
        swapped = convert_to_html(self.CODE, build_pipeline(["keywords", "comments", "strings"]))
        assert default != swapped

    @pytest.mark.parametrize("order", [
        ["keywords", "strings", "comments"],
        ["keywords", "comments", "strings"],
        ["strings", "keywords", "comments"],
        ["strings", "comments", "keywords"],
        ["comments", "keywords", "strings"],
        ["comments", "strings", "keywords"],
    ])
    def test_markup_well_formed_in_every_order(self, order):
        code = (
            '#include <string>\n'
            'int f() { // "quoted" int\n'
            '    string s = "a // b"; return 0; // "x\n'
            '}\n'
        )
        assert_well_formed(convert_to_html(code, build_pipeline(order)))
