"""
Game Session

Owns the state of a single puzzle: the secret word, the guess history and
the row the player is currently typing. The target and the hard-mode flag
never change once a session exists; ``reset`` and ``toggle_hard_mode``
hand back a new session instead.
"""

import random
from typing import Dict, List, Optional, Tuple

from ..config.game_settings import MAX_GUESSES
from ..models.game import (
    EmptyLetter,
    GameState,
    LetterStatus,
    PendingLetter,
    SubmittedLetter,
    TargetLetterStatus,
    WordGuess,
)
from ..models.submit_result import SubmitResult
from ..models.word_list import EmptyWordListError, WordList
from .evaluator import best_letter_statuses, evaluate, target_coverage
from .hard_mode import find_violation


class GameSession:
    """
    One Wordle puzzle.

    Not thread-safe: callers sharing a session must serialise the mutators
    (``GameService`` does this with a lock).

    Args:
        word_list: Dictionary of valid guesses and eligible targets
        is_hard_mode: Enforce hard-mode rules on every submission
        rng: Random source used to draw the target (seed it for tests)
        max_guesses: Number of rows on the board

    Raises:
        EmptyWordListError: If ``word_list`` has no eligible targets
    """

    def __init__(self,
                 word_list: WordList,
                 is_hard_mode: bool = False,
                 rng: Optional[random.Random] = None,
                 max_guesses: int = MAX_GUESSES):
        if not word_list.targets:
            raise EmptyWordListError("Word list has no eligible target words")

        self._word_list = word_list
        self._is_hard_mode = is_hard_mode
        self._rng = rng if rng is not None else random.Random()
        self._max_guesses = max_guesses

        # Sorted so a seeded rng always draws the same word
        self._target = self._rng.choice(sorted(word_list.targets))

        self._submitted_guesses: List[str] = []
        self._current_input: List[str] = []

    # Read-only state

    @property
    def target(self) -> str:
        """The secret word. Only for end-of-game reveal."""
        return self._target

    @property
    def target_length(self) -> int:
        return len(self._target)

    @property
    def word_list(self) -> WordList:
        return self._word_list

    @property
    def is_hard_mode(self) -> bool:
        return self._is_hard_mode

    @property
    def max_guesses(self) -> int:
        return self._max_guesses

    @property
    def submitted_guesses(self) -> Tuple[str, ...]:
        return tuple(self._submitted_guesses)

    @property
    def current_input(self) -> str:
        return "".join(self._current_input)

    @property
    def is_game_start(self) -> bool:
        """True until the first guess is accepted."""
        return not self._submitted_guesses

    @property
    def state(self) -> GameState:
        if self._target in self._submitted_guesses:
            return GameState.WON
        if len(self._submitted_guesses) >= self._max_guesses:
            return GameState.LOST
        return GameState.PLAYING

    @property
    def guessed_letters(self) -> Dict[str, LetterStatus]:
        """Best status each letter has achieved so far (keyboard colouring)."""
        return best_letter_statuses(self._submitted_guesses, self._target)

    @property
    def target_coverage(self) -> List[TargetLetterStatus]:
        return target_coverage(self._submitted_guesses, self._target)

    @property
    def rendered_guesses(self) -> List[WordGuess]:
        """
        The whole board: scored rows, the active row, then empty rows.

        Always ``max_guesses`` rows of ``target_length`` tiles. The active
        row only appears while the game is being played.
        """
        rows: List[WordGuess] = []
        for guess in self._submitted_guesses:
            rows.append([
                SubmittedLetter(letter, status)
                for letter, status in zip(guess, evaluate(guess, self._target))
            ])

        if self.state is GameState.PLAYING:
            padding = self.target_length - len(self._current_input)
            rows.append(
                [PendingLetter(letter) for letter in self._current_input]
                + [EmptyLetter()] * padding
            )

        while len(rows) < self._max_guesses:
            rows.append([EmptyLetter()] * self.target_length)
        return rows

    # Input handling

    def add_letter(self, letter: str) -> None:
        """
        Append a letter to the active row.

        Ignored when the row is full or ``letter`` is not a single
        alphabetic character.
        """
        if self.state.is_over:
            return
        if not isinstance(letter, str) or len(letter) != 1 or not letter.isalpha():
            return
        if len(self._current_input) < self.target_length:
            self._current_input.append(letter.upper())

    def remove_letter(self) -> None:
        """Drop the last letter of the active row; ignored when empty."""
        if self.state.is_over:
            return
        if self._current_input:
            self._current_input.pop()

    def submit(self) -> SubmitResult:
        """
        Submit the active row.

        Checks run in a fixed order and the first failure is returned:
        game over, row length, dictionary membership, hard-mode rules.
        State only changes on success.

        Returns:
            SubmitResult: SUCCESS or the reason the guess was rejected
        """
        if self.state.is_over:
            return SubmitResult.game_over()

        guess = self.current_input
        if len(guess) != self.target_length:
            return SubmitResult.not_enough_letters()

        if guess not in self._word_list.words:
            return SubmitResult.not_in_word_list()

        if self._is_hard_mode:
            violation = find_violation(guess, self._submitted_guesses, self._target)
            if violation is not None:
                return violation

        self._submitted_guesses.append(guess)
        self._current_input = []
        return SubmitResult.success()

    # New sessions

    def reset(self) -> "GameSession":
        """Start over with a fresh target and the same settings."""
        return GameSession(
            self._word_list,
            is_hard_mode=self._is_hard_mode,
            rng=self._rng,
            max_guesses=self._max_guesses,
        )

    def toggle_hard_mode(self) -> "GameSession":
        """
        Flip hard mode before the first guess.

        Returns a new session with the flag flipped, or ``self`` unchanged
        once a guess has been accepted.
        """
        if not self.is_game_start:
            return self
        return GameSession(
            self._word_list,
            is_hard_mode=not self._is_hard_mode,
            rng=self._rng,
            max_guesses=self._max_guesses,
        )

    def __repr__(self) -> str:
        return (f"GameSession(state={self.state.value}, guesses={len(self._submitted_guesses)}"
                f"/{self._max_guesses}, hard_mode={self._is_hard_mode})")
