"""
Game Configuration Constants Module

This module defines all game configuration constants and loads the bundled
word lists. All game parameters are centralized here to enable easy modification.
"""

import json
import os
from typing import Dict, Final, List, Mapping, Optional, Sequence, Tuple

from ..exceptions import ConfigurationError

MAX_GUESSES: Final[int] = 6
"""
Number of guess attempts (board rows) allowed per game.
Type: Final[int] - Immutable to prevent accidental modification
"""

SUPPORTED_WORD_LENGTHS: Final[Tuple[int, ...]] = (3, 4, 5)
DEFAULT_WORD_LENGTH: Final[int] = 5

ALPHABET: Final[str] = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

DEFAULT_WORD_LIST_PATH: Final[str] = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), 'words.json'
)


def _parse_length_table(table, source: str) -> Dict[int, List[str]]:
    if not isinstance(table, dict):
        raise ConfigurationError(f"{source} must map word lengths to arrays of words")

    words_by_length: Dict[int, List[str]] = {}
    for raw_length, words in table.items():
        try:
            length = int(raw_length)
        except (TypeError, ValueError):
            raise ConfigurationError(f"{source}: '{raw_length}' is not a word length")

        if not isinstance(words, list):
            raise ConfigurationError(f"{source}: words of length {length} must be an array")

        uppercase_words = [str(word).strip().upper() for word in words]
        for word in uppercase_words:
            if len(word) != length:
                raise ConfigurationError(f"Word '{word}' is not {length} characters long")
            if not word.isalpha() or not word.isascii():
                raise ConfigurationError(f"Word '{word}' contains non-alphabetic characters")

        words_by_length[length] = uppercase_words
    return words_by_length


def load_word_lists(path: Optional[str] = None) -> Tuple[Dict[int, List[str]], Dict[int, List[str]]]:
    """
    Load answer words and guess-only words from a JSON file.

    The file holds an object mapping word length to an array of words, plus an
    optional "allowed" object of the same shape for words that are accepted as
    guesses but never drawn as targets.

    Returns:
        Tuple of (answers, allowed), both keyed by word length

    Raises:
        ConfigurationError: If the file is missing, malformed, or holds invalid words
    """
    json_file_path = path or DEFAULT_WORD_LIST_PATH

    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except FileNotFoundError:
        raise ConfigurationError(f"Word list file not found: {json_file_path}")
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON in {json_file_path}: {e}")

    if not isinstance(data, dict):
        raise ConfigurationError("Word list file must contain an object keyed by word length")

    data = dict(data)
    allowed = _parse_length_table(data.pop("allowed", {}), "allowed")
    answers = _parse_length_table(data, "answers")

    if not any(answers.values()):
        raise ConfigurationError("Word list cannot be empty")

    return answers, allowed


# Curated word database loaded from JSON file
WORD_LISTS, ALLOWED_GUESSES = load_word_lists()


def validate_word_list_integrity(word_lists: Optional[Mapping[int, Sequence[str]]] = None,
                                 required_lengths: Sequence[int] = SUPPORTED_WORD_LENGTHS) -> bool:
    """
    Validates the integrity and consistency of the word database.

    This function performs validation to ensure:
    1. Coverage: every required word length has at least one word
    2. Length validation: every word matches the length it is filed under
    3. Character validation: only uppercase A-Z characters
    4. Uniqueness validation: no duplicate entries per length

    Returns:
        bool: True if word lists pass all validation checks

    Raises:
        ConfigurationError: If any validation check fails with detailed error message
    """
    if word_lists is None:
        word_lists = WORD_LISTS

    for length in required_lengths:
        if not word_lists.get(length):
            raise ConfigurationError(f"No words configured for length {length}")

    for length, words in word_lists.items():
        for index, word in enumerate(words):
            if len(word) != length:
                raise ConfigurationError(f"Word at index {index} '{word}' is not {length} characters long")
            if not all(char in ALPHABET for char in word):
                raise ConfigurationError(f"Word at index {index} '{word}' is not uppercase A-Z")

        if len(words) != len(set(words)):
            duplicates = sorted({word for word in words if words.count(word) > 1})
            raise ConfigurationError(f"Duplicate {length}-letter words found: {duplicates}")

    return True


def get_word_statistics(word_lists: Optional[Mapping[int, Sequence[str]]] = None) -> dict:
    """
    Analyzes word lists and returns statistical information for game balancing.

    Returns:
        dict: Statistical analysis including:
            - total_words: Number of words across all lengths
            - words_per_length: Count of words for each length
            - avg_vowel_count: Average vowels per word
            - most_common_letters: Five most frequent letters
    """
    if word_lists is None:
        word_lists = WORD_LISTS

    all_words = [word for words in word_lists.values() for word in words]
    if not all_words:
        return {"error": "Word list is empty"}

    vowels = set('AEIOU')
    total_vowels = sum(len([char for char in word if char in vowels]) for word in all_words)

    letter_frequency = {}
    for word in all_words:
        for char in word:
            letter_frequency[char] = letter_frequency.get(char, 0) + 1

    return {
        "total_words": len(all_words),
        "words_per_length": {str(length): len(words) for length, words in sorted(word_lists.items())},
        "avg_vowel_count": round(total_vowels / len(all_words), 2),
        "most_common_letters": sorted(letter_frequency.items(), key=lambda x: x[1], reverse=True)[:5]
    }


if __name__ == "__main__":

    try:
        validate_word_list_integrity()
        print(" Word list validation passed")

        stats = get_word_statistics()
        print(f" Game statistics: {stats}")
    except ConfigurationError as config_error:
        print(f" Configuration validation failed: {config_error}")
        exit(1)
