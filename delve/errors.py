"""Generation error types.

Two failure families abort level generation:

* ``ConfigurationError``: parameters that cannot yield a valid level (no room
  accepted, empty or zero-sum weight tables, out-of-order scale thresholds,
  rooms that do not fit the map).
* ``InvariantError``: caller broke a precondition (no player registered, an
  attempt to drop the player from a registry).

Occupied spawn points are not errors; population just skips them.
"""
from __future__ import annotations


class GenerationError(Exception):
    def __init__(self, message: str, code: str = "generation"):
        super().__init__(message)
        self.message = message
        self.code = code


class ConfigurationError(GenerationError):
    def __init__(self, message: str, code: str = "config"):
        super().__init__(message, code)


class InvariantError(GenerationError):
    def __init__(self, message: str, code: str = "invariant"):
        super().__init__(message, code)


__all__ = ["GenerationError", "ConfigurationError", "InvariantError"]
