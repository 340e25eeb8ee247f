"""
Dictionary Service

Immutable word store partitioned by word length. Supplies target words and
validates guesses. Random selection is the only impure operation in the engine
and lives here.
"""

import random
from typing import Dict, FrozenSet, Iterable, Mapping, Optional, Sequence, Tuple

from ..config.game_settings import load_word_lists
from ..exceptions import ConfigurationError


class Dictionary:
    """
    Valid words grouped by length.

    Answer words can be drawn as targets; extra guesses are only accepted as
    guesses. Both are compared in uppercase.
    """

    def __init__(self,
                 words_by_length: Mapping[int, Iterable[str]],
                 extra_guesses: Iterable[str] = (),
                 rng: Optional[random.Random] = None):
        self._words: Dict[int, Tuple[str, ...]] = {}
        for length, words in words_by_length.items():
            normalized = tuple(dict.fromkeys(word.strip().upper() for word in words))
            if normalized:
                self._words[int(length)] = normalized

        self._valid: FrozenSet[str] = frozenset(
            [word for words in self._words.values() for word in words]
            + [word.strip().upper() for word in extra_guesses]
        )
        self._rng = rng or random.Random()

    @classmethod
    def from_json(cls, path: Optional[str] = None, rng: Optional[random.Random] = None) -> "Dictionary":
        """Build a dictionary from a word file (see game_settings.load_word_lists)."""
        answers, allowed = load_word_lists(path)
        extra = [word for words in allowed.values() for word in words]
        return cls(answers, extra_guesses=extra, rng=rng)

    @property
    def supported_lengths(self) -> Tuple[int, ...]:
        return tuple(sorted(self._words))

    def words_of_length(self, length: int) -> Tuple[str, ...]:
        """
        Returns every answer word of the given length.

        Raises:
            ConfigurationError: If no words of that length are configured
        """
        words = self._words.get(length)
        if not words:
            raise ConfigurationError(f"No words configured for length {length}")
        return words

    def pick_random(self, length: int) -> str:
        """Selects one answer word of the given length uniformly at random."""
        return self._rng.choice(self.words_of_length(length))

    def is_valid_guess(self, word: str) -> bool:
        if not isinstance(word, str):
            return False
        return word.strip().upper() in self._valid

    def __contains__(self, word) -> bool:
        return self.is_valid_guess(word)

    def __len__(self) -> int:
        return len(self._valid)

    def word_counts(self) -> Dict[int, int]:
        return {length: len(words) for length, words in sorted(self._words.items())}

    def as_word_lists(self) -> Dict[int, Sequence[str]]:
        return {length: list(words) for length, words in self._words.items()}
