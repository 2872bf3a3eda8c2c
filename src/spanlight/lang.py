"""Keyword tables, comment markers and language detection shared across spanlight."""

from __future__ import annotations

from pathlib import Path

from pygments.lexers import CLexer, CppLexer, JavaLexer, PythonLexer
from pygments.lexers import get_lexer_for_filename
from pygments.util import ClassNotFound

from spanlight.errors import ConfigError

DEFAULT_LANGUAGE = "cpp"

EXT_MAP = {
    ".cpp": "cpp",
    ".cc": "cpp",
    ".cxx": "cpp",
    ".hpp": "cpp",
    ".c": "c",
    ".h": "c",
    ".java": "java",
    ".py": "python",
}

LEXER_MAP = {
    "cpp": CppLexer,
    "c": CLexer,
    "java": JavaLexer,
    "python": PythonLexer,
}

KeywordTable = tuple[tuple[str, str], ...]

# Order matters: earlier entries are applied to the whole text first.
KEYWORD_TABLES: dict[str, KeywordTable] = {
    "cpp": (
        ("int", "blue"),
        ("void", "blue"),
        ("class", "purple"),
        ("public", "purple"),
        ("private", "purple"),
        ("return", "darkblue"),
        ("if", "darkorange"),
        ("else", "darkorange"),
        ("for", "darkorange"),
        ("while", "darkorange"),
        ("#include", "red"),
        ("cout", "blue"),
        ("string", "green"),
    ),
    "c": (
        ("int", "blue"),
        ("void", "blue"),
        ("char", "blue"),
        ("double", "blue"),
        ("struct", "purple"),
        ("static", "purple"),
        ("return", "darkblue"),
        ("if", "darkorange"),
        ("else", "darkorange"),
        ("for", "darkorange"),
        ("while", "darkorange"),
        ("#include", "red"),
        ("#define", "red"),
        ("printf", "blue"),
    ),
    "java": (
        ("int", "blue"),
        ("void", "blue"),
        ("class", "purple"),
        ("public", "purple"),
        ("private", "purple"),
        ("protected", "purple"),
        ("static", "purple"),
        ("return", "darkblue"),
        ("new", "darkblue"),
        ("if", "darkorange"),
        ("else", "darkorange"),
        ("for", "darkorange"),
        ("while", "darkorange"),
        ("import", "red"),
        ("String", "green"),
    ),
    "python": (
        ("def", "blue"),
        ("class", "purple"),
        ("return", "darkblue"),
        ("if", "darkorange"),
        ("elif", "darkorange"),
        ("else", "darkorange"),
        ("for", "darkorange"),
        ("while", "darkorange"),
        ("import", "red"),
        ("from", "red"),
        ("None", "blue"),
        ("True", "blue"),
        ("False", "blue"),
        ("print", "blue"),
    ),
}

COMMENT_MARKERS = {
    "cpp": "//",
    "c": "//",
    "java": "//",
    "python": "#",
}


def detect_language(filename: str | None) -> str:
    """Guess the language of a source file from its name.

    The extension map is consulted first; anything else is handed to
    Pygments and mapped back through LEXER_MAP. Falls back to C++.
    """
    if not filename:
        return DEFAULT_LANGUAGE

    suffix = Path(filename).suffix.lower()
    if suffix in EXT_MAP:
        return EXT_MAP[suffix]

    try:
        lexer = get_lexer_for_filename(filename)
    except ClassNotFound:
        return DEFAULT_LANGUAGE

    for language, lexer_cls in LEXER_MAP.items():
        if type(lexer) is lexer_cls:
            return language
    return DEFAULT_LANGUAGE


def _check_language(language: str) -> None:
    if language not in KEYWORD_TABLES:
        raise ConfigError(
            f"Unknown language {language!r}; expected one of "
            f"{', '.join(sorted(KEYWORD_TABLES))}"
        )


def keyword_table(language: str) -> KeywordTable:
    """Return the keyword table for a language."""
    _check_language(language)
    return KEYWORD_TABLES[language]


def comment_marker(language: str) -> str:
    """Return the line-comment marker for a language."""
    _check_language(language)
    return COMMENT_MARKERS[language]
