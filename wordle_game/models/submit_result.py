"""
Submission Result Model

The outcome of submitting the active row. Rejections are ordinary values
returned to the caller, never exceptions.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from ..utils.helpers import ordinalise


class SubmitOutcome(Enum):
    SUCCESS = "SUCCESS"
    NOT_ENOUGH_LETTERS = "NOT_ENOUGH_LETTERS"
    NOT_IN_WORD_LIST = "NOT_IN_WORD_LIST"
    NOT_USING_KNOWN_LETTER = "NOT_USING_KNOWN_LETTER"
    NOT_USING_KNOWN_LETTER_AT_LOCATION = "NOT_USING_KNOWN_LETTER_AT_LOCATION"
    GAME_OVER = "GAME_OVER"


_NEEDS_LETTER = {
    SubmitOutcome.NOT_USING_KNOWN_LETTER,
    SubmitOutcome.NOT_USING_KNOWN_LETTER_AT_LOCATION,
}


@dataclass(frozen=True)
class SubmitResult:
    """
    Tagged submission outcome.

    ``letter`` is set only for the two hard-mode outcomes and ``position``
    (zero-based) only for NOT_USING_KNOWN_LETTER_AT_LOCATION. Use the
    classmethod constructors rather than building instances by hand.
    """
    outcome: SubmitOutcome
    letter: Optional[str] = None
    position: Optional[int] = None

    def __post_init__(self):
        if (self.letter is not None) != (self.outcome in _NEEDS_LETTER):
            raise ValueError(f"{self.outcome.value} does not accept letter={self.letter!r}")
        needs_position = self.outcome is SubmitOutcome.NOT_USING_KNOWN_LETTER_AT_LOCATION
        if (self.position is not None) != needs_position:
            raise ValueError(f"{self.outcome.value} does not accept position={self.position!r}")

    @classmethod
    def success(cls) -> "SubmitResult":
        return cls(SubmitOutcome.SUCCESS)

    @classmethod
    def not_enough_letters(cls) -> "SubmitResult":
        return cls(SubmitOutcome.NOT_ENOUGH_LETTERS)

    @classmethod
    def not_in_word_list(cls) -> "SubmitResult":
        return cls(SubmitOutcome.NOT_IN_WORD_LIST)

    @classmethod
    def not_using_known_letter(cls, letter: str) -> "SubmitResult":
        return cls(SubmitOutcome.NOT_USING_KNOWN_LETTER, letter=letter)

    @classmethod
    def not_using_known_letter_at_location(cls, letter: str, position: int) -> "SubmitResult":
        return cls(SubmitOutcome.NOT_USING_KNOWN_LETTER_AT_LOCATION, letter=letter, position=position)

    @classmethod
    def game_over(cls) -> "SubmitResult":
        return cls(SubmitOutcome.GAME_OVER)

    @property
    def is_success(self) -> bool:
        return self.outcome is SubmitOutcome.SUCCESS

    @property
    def message(self) -> str:
        """Short player-facing explanation (empty on success)."""
        if self.outcome is SubmitOutcome.NOT_ENOUGH_LETTERS:
            return "Not enough letters"
        if self.outcome is SubmitOutcome.NOT_IN_WORD_LIST:
            return "Not in word list"
        if self.outcome is SubmitOutcome.NOT_USING_KNOWN_LETTER:
            return f"Must use letter {self.letter}"
        if self.outcome is SubmitOutcome.NOT_USING_KNOWN_LETTER_AT_LOCATION:
            return f"{ordinalise(self.position + 1)} letter should be {self.letter}"
        if self.outcome is SubmitOutcome.GAME_OVER:
            return "The game is over"
        return ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "outcome": self.outcome.value,
            "letter": self.letter,
            "position": self.position,
            "message": self.message,
        }
