from __future__ import annotations


class SnakeError(Exception):
    """Base class for errors raised by gridsnake."""


class BoardFullError(SnakeError):
    """Every cell of the board is occupied, so nothing can be placed."""


class ConfigError(SnakeError, ValueError):
    """A game configuration that cannot produce a valid initial board."""
