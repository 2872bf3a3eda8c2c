"""Shared exception classes for spanlight."""

from __future__ import annotations


class SpanlightError(Exception):
    """Base class for every error spanlight raises on purpose."""


class ConfigError(SpanlightError):
    """Raised when a keyword table, pass order or config file is invalid."""


class RendererContractError(SpanlightError, TypeError):
    """Raised when a decorator is built without a usable inner renderer."""

    def __init__(self, owner: str, inner: object) -> None:
        super().__init__(
            f"{owner} needs an inner renderer with a callable render(text) method, "
            f"got {type(inner).__name__}"
        )


class InputError(SpanlightError):
    """Raised when source code cannot be read as text."""
