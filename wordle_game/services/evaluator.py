"""
Guess Evaluator

Pure functions that score a guess against the target and summarise what a
guess history has revealed about the target.
"""

from typing import Dict, Iterable, List, Optional

from ..models.game import LetterStatus, TargetLetterStatus


def evaluate(guess: str, target: str) -> List[LetterStatus]:
    """
    Implements the Wordle letter evaluation algorithm.

    Every guess position receives exactly one status. A letter that occurs
    k times in the target and m times in the guess is credited min(k, m)
    times. Target positions are processed left to right; each claims the
    guess letter at its own index when that is an unclaimed match
    (IN_POSITION), otherwise the earliest unclaimed guess position holding
    the same letter (IN_WORD). An earlier target letter can therefore claim
    a guess letter that a later target position would have matched exactly.

    Args:
        guess: Submitted word
        target: Secret word

    Returns:
        List[LetterStatus]: One status per guess position

    Raises:
        ValueError: If guess and target lengths differ
    """
    guess = guess.upper()
    target = target.upper()
    if len(guess) != len(target):
        raise ValueError(
            f"Guess length {len(guess)} does not match target length {len(target)}"
        )

    result: List[Optional[LetterStatus]] = [None] * len(guess)

    # Target letters claim guess letters left to right: the guess letter at
    # the same index if it is still free, otherwise the earliest free one
    for t, target_letter in enumerate(target):
        if result[t] is None and guess[t] == target_letter:
            result[t] = LetterStatus.IN_POSITION
            continue
        for g, guess_letter in enumerate(guess):
            if result[g] is None and guess_letter == target_letter:
                result[g] = LetterStatus.IN_WORD
                break

    return [LetterStatus.NOT_IN_WORD if status is None else status for status in result]


def target_coverage(submitted_guesses: Iterable[str], target: str) -> List[TargetLetterStatus]:
    """
    Report, per target position, whether past guesses have found that letter.

    A position is KNOWN_POSITION if any guess had the same letter at the same
    index, otherwise UNKNOWN_POSITION if any guess used the letter anywhere.
    Repeated target letters are not disambiguated: one guessed ``E`` marks
    every ``E`` in the target as at least UNKNOWN_POSITION.
    """
    target = target.upper()
    guesses = [guess.upper() for guess in submitted_guesses]

    coverage = []
    for i, letter in enumerate(target):
        if any(i < len(guess) and guess[i] == letter for guess in guesses):
            coverage.append(TargetLetterStatus.KNOWN_POSITION)
        elif any(letter in guess for guess in guesses):
            coverage.append(TargetLetterStatus.UNKNOWN_POSITION)
        else:
            coverage.append(TargetLetterStatus.NOT_GUESSED)
    return coverage


def best_letter_statuses(submitted_guesses: Iterable[str], target: str) -> Dict[str, LetterStatus]:
    """Best status reached by each guessed letter across all submitted guesses."""
    letter_status: Dict[str, LetterStatus] = {}
    for guess in submitted_guesses:
        guess = guess.upper()
        for letter, status in zip(guess, evaluate(guess, target)):
            # Status can only progress in priority order
            letter_status[letter] = max(status, letter_status.get(letter, status))
    return letter_status
