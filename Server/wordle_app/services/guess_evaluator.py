"""
Guess Evaluator

Implements the authentic Wordle letter evaluation algorithm as a pure function.
"""

from collections import Counter
from typing import List

from ..exceptions import LengthMismatchError
from ..models.game import Guess, LetterVerdict


def evaluate_guess(guess: str, target: str) -> Guess:
    """
    Scores a guess against the target word.

    Exact matches are resolved first so that a repeated letter is never
    reported more often than it occurs in the target; remaining letters are
    then marked PRESENT left to right while unmatched copies are left.

    Both words must already be in the same case.

    Raises:
        LengthMismatchError: If the guess and target differ in length
    """
    if len(guess) != len(target):
        raise LengthMismatchError(
            f"Guess has {len(guess)} letters but the target has {len(target)}"
        )

    verdicts: List[LetterVerdict] = [LetterVerdict.ABSENT] * len(target)
    remaining = Counter(target)

    # First pass: exact position matches
    for i, (g, t) in enumerate(zip(guess, target)):
        if g == t:
            verdicts[i] = LetterVerdict.CORRECT
            remaining[g] -= 1

    # Second pass: misplaced letters, capped by the unmatched count
    for i, g in enumerate(guess):
        if verdicts[i] is LetterVerdict.CORRECT:
            continue
        if remaining[g] > 0:
            verdicts[i] = LetterVerdict.PRESENT
            remaining[g] -= 1

    return Guess(results=tuple(zip(guess, verdicts)))
