"""CLI subcommand registration for rendering and keyword tables."""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from pathlib import Path
from typing import Any

from spanlight.config import PASS_NAMES, HighlightConfig, load_config
from spanlight.errors import InputError
from spanlight.lang import KEYWORD_TABLES, detect_language, keyword_table


def _add_language(parser: argparse.ArgumentParser, help_text: str) -> None:
    parser.add_argument(
        "--language",
        choices=sorted(KEYWORD_TABLES),
        default=None,
        help=help_text,
    )


def _parse_order(value: str) -> list[str]:
    names = [name.strip() for name in value.split(",") if name.strip()]
    for name in names:
        if name not in PASS_NAMES:
            raise argparse.ArgumentTypeError(
                f"unknown pass {name!r} (choose from {', '.join(PASS_NAMES)})"
            )
    return names


def register(subparsers: argparse._SubParsersAction) -> None:
    """Register the ``render``, ``demo`` and ``keywords`` subcommands."""
    rp = subparsers.add_parser("render", help="Render source code as highlighted HTML")
    rp.add_argument(
        "file",
        nargs="?",
        default=None,
        help="Source file to render ('-' or omitted reads stdin)",
    )
    _add_language(rp, "Language (detected from the file name if omitted)")
    rp.add_argument("--config", default=None, help="Path to a JSON config file")
    rp.add_argument(
        "--order",
        type=_parse_order,
        default=None,
        help="Comma-separated pass names, innermost first "
             "(default: keywords,strings,comments)",
    )
    rp.add_argument("--no-keywords", action="store_true", help="Skip keyword highlighting")
    rp.add_argument("--no-strings", action="store_true", help="Skip string highlighting")
    rp.add_argument("--no-comments", action="store_true", help="Skip comment highlighting")
    rp.add_argument("-o", "--output", default=None, help="Write HTML here instead of stdout")

    dp = subparsers.add_parser("demo", help="Render the built-in C++ sample")
    dp.add_argument("-o", "--output", default=None, help="Write HTML here instead of stdout")

    kp = subparsers.add_parser("keywords", help="Show the keyword table for a language")
    _add_language(kp, "Language (default: cpp)")


def resolve_config(args: argparse.Namespace) -> HighlightConfig:
    """Language defaults, then the config file, then command-line flags."""
    language = args.language
    if language is None:
        language = detect_language(None if args.file in (None, "-") else args.file)

    config = load_config(args.config, HighlightConfig.for_language(language))

    changes: dict[str, Any] = {}
    if args.order is not None:
        changes["pipeline_order"] = tuple(args.order)
    if args.no_keywords:
        changes["enable_keywords"] = False
    if args.no_strings:
        changes["enable_strings"] = False
    if args.no_comments:
        changes["enable_comments"] = False
    return replace(config, **changes) if changes else config


def _read_code(file: str | None) -> str:
    try:
        if file in (None, "-"):
            return sys.stdin.read()
        return Path(file).read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise InputError(f"{file or 'stdin'} is not valid UTF-8: {exc}") from exc


def run(args: argparse.Namespace) -> str | dict[str, Any]:
    """Dispatch to the appropriate command; returns HTML text or a JSON-able dict."""
    from spanlight.highlight import SAMPLE_CODE, render_source

    if args.command == "render":
        config = resolve_config(args)
        return render_source(_read_code(args.file), config=config)

    if args.command == "demo":
        return render_source(SAMPLE_CODE)

    if args.command == "keywords":
        language = args.language or "cpp"
        table = keyword_table(language)
        return {
            "language": language,
            "keywords": [{"keyword": kw, "color": color} for kw, color in table],
            "count": len(table),
        }

    return {"error": f"Unknown command: {args.command}"}
