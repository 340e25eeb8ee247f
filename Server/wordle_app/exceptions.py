"""
Game Exceptions

Error taxonomy for the game engine.

Programmer errors (ConfigurationError, LengthMismatchError) propagate as hard
failures. User-input errors derive from CommandRejected and are turned into a
rejected CommandResult at the engine's command boundary.
"""

from .models.game import RejectionReason


class WordleError(Exception):
    """Base class for all game errors."""
    pass


class ConfigurationError(WordleError):
    """Raised when the dictionary has no words for a requested length or the word file is unusable."""
    pass


class LengthMismatchError(WordleError):
    """Raised when a guess and the target word differ in length."""
    pass


class CommandRejected(WordleError):
    """Base class for user-input errors recovered at the command boundary."""

    reason = None

    def __init__(self, message: str, reason: RejectionReason = None):
        super().__init__(message)
        if reason is not None:
            self.reason = reason


class InvalidCharacterError(CommandRejected):
    """Raised when a typed character is not a single A-Z letter."""
    reason = RejectionReason.INVALID_CHARACTER


class IncompleteGuessError(CommandRejected):
    """Raised when a guess is submitted before the buffer is full."""
    reason = RejectionReason.INCOMPLETE_GUESS


class UnknownWordError(CommandRejected):
    """Raised when dictionary enforcement is on and the guess is not a known word."""
    reason = RejectionReason.UNKNOWN_WORD


class IllegalStateError(CommandRejected):
    """Raised when a command is not allowed in the current state (game over, buffer full or empty)."""
    reason = RejectionReason.GAME_OVER
