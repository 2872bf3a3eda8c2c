"""Tests for shared language utilities - no mocking needed."""

import pytest
from pygments.lexers import CLexer, CppLexer, JavaLexer, PythonLexer

from spanlight.errors import ConfigError
from spanlight.lang import (
    COMMENT_MARKERS,
    EXT_MAP,
    KEYWORD_TABLES,
    LEXER_MAP,
    comment_marker,
    detect_language,
    keyword_table,
)


class TestDetectLanguage:
    def test_cpp(self):
        assert detect_language("main.cpp") == "cpp"

    def test_c_header(self):
        assert detect_language("util.h") == "c"

    def test_java(self):
        assert detect_language("src/Main.java") == "java"

    def test_python(self):
        assert detect_language("app.py") == "python"

    def test_uppercase_extension(self):
        assert detect_language("MAIN.CPP") == "cpp"

    def test_falls_back_to_pygments(self):
        # .pyw is not in EXT_MAP; Pygments maps it to PythonLexer
        assert ".pyw" not in EXT_MAP
        assert detect_language("tool.pyw") == "python"

    def test_pygments_lexer_outside_map_defaults(self):
        assert detect_language("notes.md") == "cpp"

    def test_unknown_defaults_to_cpp(self):
        assert detect_language("data.unknownext") == "cpp"

    def test_none_defaults_to_cpp(self):
        assert detect_language(None) == "cpp"


class TestKeywordTables:
    def test_languages(self):
        assert set(KEYWORD_TABLES) == {"cpp", "c", "java", "python"}
        assert set(KEYWORD_TABLES) == set(COMMENT_MARKERS) == set(LEXER_MAP)

    def test_cpp_table_order(self):
        keywords = [kw for kw, _ in keyword_table("cpp")]
        assert keywords == [
            "int", "void", "class", "public", "private", "return",
            "if", "else", "for", "while", "#include", "cout", "string",
        ]

    def test_cpp_colors(self):
        table = dict(keyword_table("cpp"))
        assert table["#include"] == "red"
        assert table["return"] == "darkblue"
        assert table["string"] == "green"

    def test_no_empty_entries(self):
        for table in KEYWORD_TABLES.values():
            for keyword, color in table:
                assert keyword and color

    def test_unknown_language(self):
        with pytest.raises(ConfigError, match="Unknown language"):
            keyword_table("cobol")

    def test_comment_markers(self):
        assert comment_marker("cpp") == "//"
        assert comment_marker("python") == "#"
        with pytest.raises(ConfigError):
            comment_marker("cobol")


class TestLexerMap:
    def test_lexers_are_correct_types(self):
        assert LEXER_MAP["cpp"] is CppLexer
        assert LEXER_MAP["c"] is CLexer
        assert LEXER_MAP["java"] is JavaLexer
        assert LEXER_MAP["python"] is PythonLexer
