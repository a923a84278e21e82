"""Exceptions raised by the Scout engine and round driver."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - import cycle guard for type checking only
    from .game import GameState


class ConfigurationError(ValueError):
    """Unsupported round configuration (player count, strategy name)."""


class IllegalActionError(ValueError):
    """An action violates a transition precondition or the rules."""


class RoundHalted(RuntimeError):
    """A strategy declined to act; ``state`` is the last valid GameState."""

    def __init__(self, state: "GameState", message: str = "Strategy halted the round") -> None:
        super().__init__(message)
        self.state = state


__all__ = ["ConfigurationError", "IllegalActionError", "RoundHalted"]
