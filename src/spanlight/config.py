"""Highlighting configuration: defaults, validation and JSON config files.

A config file is a JSON object; every key is optional::

    {
        "keywordTable": {"int": "blue", "return": "darkblue"},
        "enableKeywords": true,
        "enableStrings": true,
        "enableComments": false,
        "pipelineOrder": ["keywords", "strings", "comments"],
        "commentMarker": "//"
    }

``keywordTable`` may also be a list of ``[keyword, color]`` pairs, which is
the only way to spell a table whose order differs from key order.
``pipelineOrder`` is assembly order, innermost first.
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

from spanlight.errors import ConfigError
from spanlight.lang import KeywordTable, comment_marker, keyword_table

KEYWORDS = "keywords"
STRINGS = "strings"
COMMENTS = "comments"

PASS_NAMES = (KEYWORDS, STRINGS, COMMENTS)
DEFAULT_ORDER = (KEYWORDS, STRINGS, COMMENTS)

_FILE_KEYS = {
    "keywordTable": "keyword_table",
    "enableKeywords": "enable_keywords",
    "enableStrings": "enable_strings",
    "enableComments": "enable_comments",
    "pipelineOrder": "pipeline_order",
    "commentMarker": "comment_marker",
}


def normalize_table(
    table: Mapping[str, str] | Iterable[tuple[str, str]],
) -> KeywordTable:
    """Turn a mapping or an iterable of pairs into an ordered keyword table."""
    items = table.items() if isinstance(table, Mapping) else table
    result = []
    for entry in items:
        try:
            keyword, color = entry
        except (TypeError, ValueError):
            raise ConfigError(f"Keyword table entry {entry!r} is not a (keyword, color) pair") from None
        if not isinstance(keyword, str) or not keyword:
            raise ConfigError(f"Keyword must be a non-empty string, got {keyword!r}")
        if not isinstance(color, str) or not color:
            raise ConfigError(f"Color for {keyword!r} must be a non-empty string, got {color!r}")
        result.append((keyword, color))
    return tuple(result)


def normalize_order(order: Iterable[str]) -> tuple[str, ...]:
    """Validate a pass order: known names only, each at most once."""
    if isinstance(order, str):
        raise ConfigError(f"Pass order must be a list of names, got the string {order!r}")
    result = tuple(order)
    for name in result:
        if name not in PASS_NAMES:
            raise ConfigError(
                f"Unknown pass {name!r}; expected one of {', '.join(PASS_NAMES)}"
            )
    seen = set()
    for name in result:
        if name in seen:
            raise ConfigError(f"Pass {name!r} appears more than once in the order")
        seen.add(name)
    return result


@dataclass(frozen=True)
class HighlightConfig:
    """Everything needed to assemble a highlighting pipeline."""

    keyword_table: KeywordTable = field(default_factory=lambda: keyword_table("cpp"))
    enable_keywords: bool = True
    enable_strings: bool = True
    enable_comments: bool = True
    pipeline_order: tuple[str, ...] = DEFAULT_ORDER
    comment_marker: str = "//"

    def __post_init__(self) -> None:
        object.__setattr__(self, "keyword_table", normalize_table(self.keyword_table))
        object.__setattr__(self, "pipeline_order", normalize_order(self.pipeline_order))
        if not isinstance(self.comment_marker, str) or not self.comment_marker:
            raise ConfigError("Comment marker must be a non-empty string")

    @classmethod
    def for_language(cls, language: str, **overrides: Any) -> HighlightConfig:
        """Defaults for a language (keyword table and comment marker)."""
        base = {
            "keyword_table": keyword_table(language),
            "comment_marker": comment_marker(language),
        }
        base.update(overrides)
        return cls(**base)

    def enabled_passes(self) -> tuple[str, ...]:
        """The configured order with disabled passes dropped."""
        enabled = {
            KEYWORDS: self.enable_keywords,
            STRINGS: self.enable_strings,
            COMMENTS: self.enable_comments,
        }
        return tuple(name for name in self.pipeline_order if enabled[name])


def _check_bool(key: str, value: Any) -> bool:
    if not isinstance(value, bool):
        raise ConfigError(f"{key} must be true or false, got {value!r}")
    return value


def config_from_dict(data: Mapping[str, Any], base: HighlightConfig | None = None) -> HighlightConfig:
    """Overlay a decoded config-file object on ``base`` (defaults if None)."""
    unknown = sorted(set(data) - set(_FILE_KEYS))
    if unknown:
        raise ConfigError(f"Unknown config key(s): {', '.join(unknown)}")

    changes: dict[str, Any] = {}
    for key, value in data.items():
        attr = _FILE_KEYS[key]
        if attr.startswith("enable_"):
            changes[attr] = _check_bool(key, value)
        elif attr == "keyword_table":
            if not isinstance(value, (dict, list)):
                raise ConfigError(f"{key} must be an object or a list of pairs")
            changes[attr] = normalize_table(value)
        elif attr == "pipeline_order":
            if not isinstance(value, list):
                raise ConfigError(f"{key} must be a list of pass names")
            changes[attr] = normalize_order(value)
        else:
            changes[attr] = value

    return replace(base or HighlightConfig(), **changes)


def load_config(path: str | None, base: HighlightConfig | None = None) -> HighlightConfig:
    """Load a JSON config file on top of ``base``.

    ``None`` returns ``base`` (or the defaults) untouched. A path that does
    not exist, does not parse, or has the wrong shape raises ConfigError.
    """
    if path is None:
        return base or HighlightConfig()
    p = Path(path)
    if not p.is_file():
        raise ConfigError(f"Config file not found: {path}")
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except UnicodeDecodeError as exc:
        raise ConfigError(f"Config file {path} is not valid UTF-8: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Config file {path} is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a JSON object")
    return config_from_dict(data, base)
