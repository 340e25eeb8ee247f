"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Mapping, Optional, Tuple


class LetterVerdict(Enum):
    """Per-letter feedback for a submitted guess."""
    CORRECT = "CORRECT"
    PRESENT = "PRESENT"
    ABSENT = "ABSENT"

    @property
    def rank(self) -> int:
        return _VERDICT_RANK[self]


_VERDICT_RANK = {
    LetterVerdict.ABSENT: 0,
    LetterVerdict.PRESENT: 1,
    LetterVerdict.CORRECT: 2,
}


class KeyStatus(Enum):
    """Keyboard display status; UNSEEN until a letter appears in a submitted guess."""
    UNSEEN = "UNSEEN"
    ABSENT = "ABSENT"
    PRESENT = "PRESENT"
    CORRECT = "CORRECT"

    @property
    def rank(self) -> int:
        return _KEY_RANK[self]

    @classmethod
    def from_verdict(cls, verdict: LetterVerdict) -> "KeyStatus":
        return cls(verdict.value)


_KEY_RANK = {
    KeyStatus.UNSEEN: -1,
    KeyStatus.ABSENT: 0,
    KeyStatus.PRESENT: 1,
    KeyStatus.CORRECT: 2,
}


class GameStatus(Enum):
    """Game outcome. WON and LOST are terminal."""
    PLAYING = "PLAYING"
    WON = "WON"
    LOST = "LOST"

    @property
    def is_terminal(self) -> bool:
        return self is not GameStatus.PLAYING


class RejectionReason(Enum):
    """Why a command was refused without changing the game."""
    GAME_OVER = "GAME_OVER"
    BUFFER_FULL = "BUFFER_FULL"
    BUFFER_EMPTY = "BUFFER_EMPTY"
    INVALID_CHARACTER = "INVALID_CHARACTER"
    INCOMPLETE_GUESS = "INCOMPLETE_GUESS"
    UNKNOWN_WORD = "UNKNOWN_WORD"


@dataclass(frozen=True)
class Guess:
    """A scored guess: one (letter, verdict) pair per position."""
    results: Tuple[Tuple[str, LetterVerdict], ...]

    @property
    def word(self) -> str:
        return "".join(letter for letter, _ in self.results)

    @property
    def verdicts(self) -> Tuple[LetterVerdict, ...]:
        return tuple(verdict for _, verdict in self.results)

    @property
    def is_solved(self) -> bool:
        return all(verdict is LetterVerdict.CORRECT for _, verdict in self.results)

    def __len__(self) -> int:
        return len(self.results)

    def to_list(self):
        # Letter status as string for JSON serialization
        return [[letter, verdict.value] for letter, verdict in self.results]


@dataclass(frozen=True)
class GameState:
    """Read-only snapshot of one game. The target word is only revealed once the game is over."""
    word_length: int
    max_guesses: int
    guesses: Tuple[Guess, ...]
    current_buffer: Tuple[str, ...]
    status: GameStatus
    answer: Optional[str] = None

    @property
    def current_round(self) -> int:
        return len(self.guesses)

    @property
    def game_over(self) -> bool:
        return self.status.is_terminal

    @property
    def won(self) -> bool:
        return self.status is GameStatus.WON

    def to_dict(self) -> Dict:
        return {
            "word_length": self.word_length,
            "max_guesses": self.max_guesses,
            "current_round": self.current_round,
            "guesses": [guess.word for guess in self.guesses],
            "guess_results": [guess.to_list() for guess in self.guesses],
            "current_buffer": "".join(self.current_buffer),
            "status": self.status.value,
            "game_over": self.game_over,
            "won": self.won,
            "answer": self.answer,
        }


@dataclass(frozen=True)
class CommandResult:
    """Outcome of one engine command, carrying the state and keyboard snapshots taken with it."""
    accepted: bool
    state: GameState
    reason: Optional[RejectionReason] = None
    message: str = ""
    keyboard: Mapping[str, KeyStatus] = field(default_factory=dict, compare=False)
    guess: Optional[Guess] = field(default=None, compare=False)
