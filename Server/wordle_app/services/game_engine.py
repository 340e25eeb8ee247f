"""
Game Engine

State machine for a single game: owns the target word, the submitted guesses,
the in-progress buffer and the outcome. Every command returns a CommandResult
with a fresh read-only snapshot; expected user-input errors are reported in the
result instead of being raised.

The engine has no internal locking. Callers that dispatch commands from several
threads must serialize them (see GameService).
"""

from types import MappingProxyType
from typing import List, Mapping, Optional

from ..config.game_settings import ALPHABET, DEFAULT_WORD_LENGTH, MAX_GUESSES
from ..exceptions import (
    CommandRejected, IllegalStateError, IncompleteGuessError, InvalidCharacterError, UnknownWordError
)
from ..models.game import CommandResult, GameState, GameStatus, Guess, KeyStatus, RejectionReason
from . import keyboard_tracker
from .dictionary import Dictionary
from .guess_evaluator import evaluate_guess


class GameEngine:
    """
    Wordle rules for one player.

    States: PLAYING -> {PLAYING, WON, LOST}. WON and LOST are terminal until
    new_game() replaces the whole game.
    """

    def __init__(self,
                 dictionary: Dictionary,
                 word_length: int = DEFAULT_WORD_LENGTH,
                 max_guesses: int = MAX_GUESSES,
                 enforce_dictionary: bool = False):
        self.dictionary = dictionary
        self.max_guesses = max_guesses
        self.enforce_dictionary = enforce_dictionary

        self._word_length = word_length
        self._target_word = ""
        self._guesses: List[Guess] = []
        self._buffer: List[str] = []
        self._status = GameStatus.PLAYING
        self._keyboard = keyboard_tracker.empty_keyboard()

        self.new_game(word_length)

    @property
    def word_length(self) -> int:
        return self._word_length

    @property
    def status(self) -> GameStatus:
        return self._status

    # Queries

    def get_state(self) -> GameState:
        return GameState(
            word_length=self._word_length,
            max_guesses=self.max_guesses,
            guesses=tuple(self._guesses),
            current_buffer=tuple(self._buffer),
            status=self._status,
            answer=self._target_word if self._status.is_terminal else None,
        )

    def get_keyboard_state(self) -> Mapping[str, KeyStatus]:
        return MappingProxyType(dict(self._keyboard))

    # Commands

    def new_game(self, word_length: Optional[int] = None) -> CommandResult:
        """
        Starts a fresh game, keeping the current word length when none is given.

        Raises:
            ConfigurationError: If the dictionary has no words of that length
        """
        if word_length is None:
            word_length = self._word_length

        target_word = self.dictionary.pick_random(word_length)

        self._word_length = word_length
        self._target_word = target_word
        self._guesses = []
        self._buffer = []
        self._status = GameStatus.PLAYING
        self._keyboard = keyboard_tracker.empty_keyboard()
        return self._accept()

    def add_letter(self, ch) -> CommandResult:
        try:
            self._require_playing()
            letter = self._normalize_letter(ch)
            if len(self._buffer) >= self._word_length:
                raise IllegalStateError("Guess is already complete", RejectionReason.BUFFER_FULL)
        except CommandRejected as e:
            return self._reject(e)

        self._buffer.append(letter)
        return self._accept()

    def remove_letter(self) -> CommandResult:
        try:
            self._require_playing()
            if not self._buffer:
                raise IllegalStateError("Nothing to delete", RejectionReason.BUFFER_EMPTY)
        except CommandRejected as e:
            return self._reject(e)

        self._buffer.pop()
        return self._accept()

    def submit_guess(self) -> CommandResult:
        try:
            self._require_playing()
            word = self._check_word(self._buffer)
        except CommandRejected as e:
            return self._reject(e)

        return self._score(word)

    def submit_word(self, word) -> CommandResult:
        """
        Types and submits a whole word in one step.

        The word is checked completely before anything changes, so a rejected
        word leaves the buffer exactly as the player had it.
        """
        try:
            self._require_playing()
            if not isinstance(word, str):
                raise InvalidCharacterError("Guess must be a valid string")
            letters = [self._normalize_letter(ch) for ch in word.strip()]
            if len(letters) > self._word_length:
                raise IllegalStateError(f"Guess must be exactly {self._word_length} letters",
                                        RejectionReason.BUFFER_FULL)
            word = self._check_word(letters)
        except CommandRejected as e:
            return self._reject(e)

        return self._score(word)

    # Helpers

    def _check_word(self, letters: List[str]) -> str:
        if len(letters) != self._word_length:
            raise IncompleteGuessError(f"Guess must be exactly {self._word_length} letters")
        word = "".join(letters)
        if self.enforce_dictionary and not self.dictionary.is_valid_guess(word):
            raise UnknownWordError("Word not in word list")
        return word

    def _score(self, word: str) -> CommandResult:
        guess = evaluate_guess(word, self._target_word)
        self._guesses.append(guess)
        self._buffer = []
        self._keyboard = keyboard_tracker.fold(self._keyboard, guess)

        if guess.is_solved:
            self._status = GameStatus.WON
        elif len(self._guesses) >= self.max_guesses:
            self._status = GameStatus.LOST
        return self._accept(guess=guess)

    def _require_playing(self) -> None:
        if self._status.is_terminal:
            raise IllegalStateError("Game is already over")

    @staticmethod
    def _normalize_letter(ch) -> str:
        if not isinstance(ch, str) or len(ch) != 1 or not ch.isascii() or ch.upper() not in ALPHABET:
            raise InvalidCharacterError(f"{ch!r} is not a letter A-Z")
        return ch.upper()

    def _accept(self, guess: Optional[Guess] = None) -> CommandResult:
        return CommandResult(accepted=True, state=self.get_state(), keyboard=self.get_keyboard_state(), guess=guess)

    def _reject(self, error: CommandRejected) -> CommandResult:
        return CommandResult(accepted=False, state=self.get_state(), keyboard=self.get_keyboard_state(),
                             reason=error.reason, message=str(error))
