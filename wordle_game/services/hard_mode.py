"""
Hard Mode Rules

In hard mode every guess must reuse what earlier guesses revealed: letters
found at their exact position stay there, and letters found elsewhere in
the word must appear somewhere.
"""

from typing import List, Optional, Sequence, Tuple

from ..models.game import TargetLetterStatus
from ..models.submit_result import SubmitOutcome, SubmitResult
from .evaluator import target_coverage

# Omitting a known letter is reported before misplacing one
_KIND_RANK = {
    SubmitOutcome.NOT_USING_KNOWN_LETTER: 0,
    SubmitOutcome.NOT_USING_KNOWN_LETTER_AT_LOCATION: 1,
}


def _violations(guess: str, previous_guesses: Sequence[str], target: str) -> List[Tuple[SubmitResult, int]]:
    """All hard-mode violations paired with the target position they came from."""
    found = []
    coverage = target_coverage(previous_guesses, target)
    for position, (letter, status) in enumerate(zip(target, coverage)):
        if status is TargetLetterStatus.KNOWN_POSITION and guess[position] != letter:
            found.append((SubmitResult.not_using_known_letter_at_location(letter, position), position))
        elif status is TargetLetterStatus.UNKNOWN_POSITION and letter not in guess:
            found.append((SubmitResult.not_using_known_letter(letter), position))
    return found


def find_violation(guess: str, previous_guesses: Sequence[str], target: str) -> Optional[SubmitResult]:
    """
    Return the single hard-mode violation to report for ``guess``, if any.

    Coverage comes from ``previous_guesses`` only. When several rules are
    broken the choice never depends on the target's letter order: missing
    letters beat misplaced ones, then whichever appears first in the most
    recent previous guess wins.

    Args:
        guess: Candidate word, same length as ``target``
        previous_guesses: Guesses already accepted, oldest first
        target: Secret word

    Returns:
        SubmitResult describing the violation, or None if the guess complies
    """
    guess = guess.upper()
    target = target.upper()
    if not previous_guesses:
        return None

    last_guess = previous_guesses[-1].upper()

    def order(candidate: Tuple[SubmitResult, int]) -> Tuple[int, int, int]:
        result, position = candidate
        # Letters missing from the most recent guess sort last
        index = last_guess.find(result.letter)
        if index < 0:
            index = len(last_guess)
        return _KIND_RANK[result.outcome], index, position

    candidates = _violations(guess, previous_guesses, target)
    if not candidates:
        return None
    return min(candidates, key=order)[0]
