"""Exceptions raised by the game session layer."""

from ..puzzle.errors import WordSearchError


class StorageError(WordSearchError):
    """Raised by storage backends when a read or write fails."""


class InvalidActionError(WordSearchError):
    """Raised when a host action is not allowed in the current phase."""

    def __init__(self, action: str, phase: str, reason: str = ""):
        message = f"Cannot {action} while {phase}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.action = action
        self.phase = phase
