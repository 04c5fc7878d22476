"""
Game Configuration Constants Module

This module defines the game rule constants and the default in-memory
dictionary. Dictionaries are always supplied as plain lists of strings;
nothing here reads from disk or the network.
"""

from typing import Final, Iterable, List

# Core Game Configuration Constants
MAX_GUESSES: Final[int] = 6
"""
Maximum number of guess attempts allowed per game.
Type: Final[int] - Immutable to prevent accidental modification
"""

DEFAULT_WORDS: Final[List[str]] = [
    "POWER", "CAIRN", "FUNKY", "VIVID", "DANCE",
    "WHEEL", "PUMPS", "THICK", "ABLED", "ALLOY",
    "ALOOF", "BOOST", "CRANE", "SLATE", "GHOST",
    "PLANT", "GRAPE", "TRAIN", "BEACH", "LEVEL",
]
"""
Curated default dictionary. Every word is both a valid guess and an
eligible target.
"""


def validate_word_list_integrity(words: Iterable[str]) -> bool:
    """
    Validates the integrity and consistency of a raw word list.

    This function performs validation to ensure:
    1. Length validation: All words share one length
    2. Character validation: Only alphabetic characters allowed
    3. Uniqueness validation: No duplicate entries
    4. Format validation: Consistent uppercase formatting

    Args:
        words: Raw words to check

    Returns:
        bool: True if word list passes all validation checks

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    words = list(words)
    if not words:
        raise ValueError("Word list cannot be empty")

    expected_length = len(words[0])
    for index, word in enumerate(words):
        if len(word) != expected_length:
            raise ValueError(
                f"Word at index {index} '{word}' is not {expected_length} characters long"
            )

        if not word.isalpha():
            raise ValueError(f"Word at index {index} '{word}' contains non-alphabetic characters")

        if not word.isupper():
            raise ValueError(f"Word at index {index} '{word}' is not in uppercase format")

    if len(words) != len(set(words)):
        duplicates = sorted({word for word in words if words.count(word) > 1})
        raise ValueError(f"Duplicate words found in word list: {duplicates}")

    return True


if __name__ == "__main__":

    try:
        validate_word_list_integrity(DEFAULT_WORDS)
        print(" Word list validation passed")
        print(f" {len(DEFAULT_WORDS)} words, max guesses {MAX_GUESSES}")
    except ValueError as config_error:
        print(f" Configuration validation failed: {config_error}")
        exit(1)
