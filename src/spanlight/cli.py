"""CLI entry point for spanlight."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from spanlight.errors import SpanlightError
from spanlight.log import get_logger, setup_logging

logger = get_logger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="spanlight",
        description="Render source code as HTML with simple syntax highlighting",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Log to stderr (-v info, -vv debug)",
    )
    sub = parser.add_subparsers(dest="command")

    from spanlight.highlight.cli import register as register_highlight

    register_highlight(sub)

    args = parser.parse_args(argv)

    if args.verbose:
        setup_logging(logging.DEBUG if args.verbose > 1 else logging.INFO)
    else:
        setup_logging()

    if args.command is None:
        parser.print_help()
        return 1

    from spanlight.highlight.cli import run

    try:
        result = run(args)
    except (SpanlightError, OSError) as exc:
        print(f"spanlight: error: {exc}", file=sys.stderr)
        return 2

    if isinstance(result, dict):
        json.dump(result, sys.stdout, indent=2)
        print()
        return 0

    output = getattr(args, "output", None)
    if output:
        Path(output).write_text(result + "\n", encoding="utf-8")
        logger.info("wrote %s", output)
    else:
        print(result)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
