"""
Game Service

Manages single-player game sessions for the HTTP and WebSocket layers.
"""

import threading
import uuid
from typing import Callable, Dict, Mapping, Optional, Tuple

from ..config.game_settings import DEFAULT_WORD_LENGTH, MAX_GUESSES
from ..models.game import CommandResult, GameState, KeyStatus
from .dictionary import Dictionary
from .game_engine import GameEngine


class GameService:
    """
    Registry of game sessions managed by unique game IDs.

    This class handles:
    - Session creation, lookup and deletion
    - Forwarding player commands to each session's GameEngine
    - Serializing commands, since GameEngine itself has no locking
    - Keeping the answer hidden until a game is over (via GameState snapshots)
    """

    def __init__(self,
                 dictionary: Dictionary,
                 default_word_length: int = DEFAULT_WORD_LENGTH,
                 max_guesses: int = MAX_GUESSES,
                 enforce_dictionary: bool = False):
        # Raises ConfigurationError if the default length has no words
        dictionary.words_of_length(default_word_length)

        self.dictionary = dictionary
        self.default_word_length = default_word_length
        self.max_guesses = max_guesses
        self.enforce_dictionary = enforce_dictionary
        self.games: Dict[str, GameEngine] = {}
        self._lock = threading.RLock()

    @property
    def supported_lengths(self):
        return self.dictionary.supported_lengths

    def is_supported_length(self, word_length) -> bool:
        return isinstance(word_length, int) and not isinstance(word_length, bool) \
            and word_length in self.supported_lengths

    def create_new_game(self, word_length: Optional[int] = None) -> str:
        """
        Creates a new game session with a randomly selected word.

        Args:
            word_length: Letters per word; defaults to the service default

        Returns:
            str: Unique game ID for this session
        """
        engine = GameEngine(
            self.dictionary,
            word_length=word_length or self.default_word_length,
            max_guesses=self.max_guesses,
            enforce_dictionary=self.enforce_dictionary,
        )
        game_id = str(uuid.uuid4())
        with self._lock:
            self.games[game_id] = engine
        return game_id

    def get_game_state(self, game_id: str) -> Optional[GameState]:
        """
        Returns the current game state for a session (without revealing the answer).

        Returns:
            GameState object or None if game not found
        """
        with self._lock:
            engine = self.games.get(game_id)
            return engine.get_state() if engine else None

    def get_keyboard_state(self, game_id: str) -> Optional[Mapping[str, KeyStatus]]:
        with self._lock:
            engine = self.games.get(game_id)
            return engine.get_keyboard_state() if engine else None

    def get_snapshot(self, game_id: str) -> Optional[Tuple[GameState, Mapping[str, KeyStatus]]]:
        """Returns (state, keyboard) read together, or None if game not found."""
        with self._lock:
            engine = self.games.get(game_id)
            return (engine.get_state(), engine.get_keyboard_state()) if engine else None

    def add_letter(self, game_id: str, letter) -> Optional[CommandResult]:
        return self._run(game_id, lambda engine: engine.add_letter(letter))

    def remove_letter(self, game_id: str) -> Optional[CommandResult]:
        return self._run(game_id, lambda engine: engine.remove_letter())

    def submit_guess(self, game_id: str) -> Optional[CommandResult]:
        return self._run(game_id, lambda engine: engine.submit_guess())

    def make_guess(self, game_id: str, guess) -> Optional[CommandResult]:
        """
        Types a whole word and submits it. A rejected word leaves the buffer unchanged.

        Returns:
            CommandResult or None if game not found
        """
        return self._run(game_id, lambda engine: engine.submit_word(guess))

    def restart_game(self, game_id: str, word_length: Optional[int] = None) -> Optional[CommandResult]:
        return self._run(game_id, lambda engine: engine.new_game(word_length))

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory.

        Returns:
            bool: True if game was deleted, False if not found
        """
        with self._lock:
            return self.games.pop(game_id, None) is not None

    def active_game_count(self) -> int:
        with self._lock:
            return len(self.games)

    def _run(self, game_id: str, command: Callable[[GameEngine], CommandResult]) -> Optional[CommandResult]:
        with self._lock:
            engine = self.games.get(game_id)
            if engine is None:
                return None
            return command(engine)


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(dictionary: Optional[Dictionary] = None,
                            default_word_length: Optional[int] = None,
                            enforce_dictionary: Optional[bool] = None) -> GameService:
    """Initialize the global game service instance from Config unless overridden."""
    from ..config import Config

    global _game_service
    _game_service = GameService(
        dictionary or Dictionary.from_json(Config.WORD_LIST_PATH),
        default_word_length=default_word_length or Config.DEFAULT_WORD_LENGTH,
        max_guesses=Config.MAX_GUESSES,
        enforce_dictionary=Config.ENFORCE_DICTIONARY if enforce_dictionary is None else enforce_dictionary,
    )
    return _game_service
