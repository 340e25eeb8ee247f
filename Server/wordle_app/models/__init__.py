"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import (
    CommandResult, GameState, GameStatus, Guess, KeyStatus, LetterVerdict, RejectionReason
)

__all__ = [
    'CommandResult', 'GameState', 'GameStatus', 'Guess',
    'KeyStatus', 'LetterVerdict', 'RejectionReason'
]
