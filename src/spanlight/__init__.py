"""spanlight - rule-based HTML syntax highlighting for source code."""

__version__ = "0.1.0"
