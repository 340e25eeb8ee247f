"""
Keyboard Status Tracker

Folds guess verdicts into one display status per alphabet letter.
"""

from typing import Dict, Iterable, Mapping

from ..config.game_settings import ALPHABET
from ..models.game import Guess, KeyStatus

KeyboardState = Dict[str, KeyStatus]


def empty_keyboard() -> KeyboardState:
    return {letter: KeyStatus.UNSEEN for letter in ALPHABET}


def fold(keyboard: Mapping[str, KeyStatus], guess: Guess) -> KeyboardState:
    """
    Returns a new keyboard state with the guess applied.

    Status can only progress in priority order (UNSEEN < ABSENT < PRESENT < CORRECT),
    so folding the same guess twice changes nothing.
    """
    updated = dict(keyboard)
    for letter, verdict in guess.results:
        current_status = updated.get(letter, KeyStatus.UNSEEN)
        new_status = KeyStatus.from_verdict(verdict)
        if new_status.rank > current_status.rank:
            updated[letter] = new_status
    return updated


def recompute(guesses: Iterable[Guess]) -> KeyboardState:
    """Rebuilds keyboard state from scratch by folding guesses in order."""
    keyboard = empty_keyboard()
    for guess in guesses:
        keyboard = fold(keyboard, guess)
    return keyboard


def keyboard_to_dict(keyboard: Mapping[str, KeyStatus]) -> Dict[str, str]:
    return {letter: status.value for letter, status in keyboard.items()}
