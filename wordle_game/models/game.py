"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any, Dict, List, Optional, Union


class LetterStatus(IntEnum):
    """
    Score of one submitted letter against the target.

    Ordered so that ``max`` picks the best status seen for a letter.
    """
    NOT_IN_WORD = 0
    IN_WORD = 1
    IN_POSITION = 2


class TargetLetterStatus(Enum):
    """How well past guesses have covered one target position."""
    NOT_GUESSED = "NOT_GUESSED"
    UNKNOWN_POSITION = "UNKNOWN_POSITION"
    KNOWN_POSITION = "KNOWN_POSITION"


class GameState(Enum):
    """Overall session state. WON and LOST are terminal."""
    PLAYING = "PLAYING"
    WON = "WON"
    LOST = "LOST"

    @property
    def is_over(self) -> bool:
        return self is not GameState.PLAYING


# Board tiles. A tile is exactly one of the three classes below.

@dataclass(frozen=True)
class EmptyLetter:
    """No letter entered yet."""

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": "empty", "letter": None, "status": None}


@dataclass(frozen=True)
class PendingLetter:
    """Letter typed into the active row but not submitted."""
    letter: str

    def __post_init__(self):
        if not self.letter or len(self.letter) != 1:
            raise ValueError(f"Pending tile needs a single letter, got {self.letter!r}")

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": "pending", "letter": self.letter, "status": None}


@dataclass(frozen=True)
class SubmittedLetter:
    """Letter of a submitted guess together with its score."""
    letter: str
    status: LetterStatus

    def __post_init__(self):
        if not self.letter or len(self.letter) != 1:
            raise ValueError(f"Submitted tile needs a single letter, got {self.letter!r}")
        if not isinstance(self.status, LetterStatus):
            raise ValueError(f"Submitted tile needs a LetterStatus, got {self.status!r}")

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": "submitted", "letter": self.letter, "status": self.status.name}


LetterGuess = Union[EmptyLetter, PendingLetter, SubmittedLetter]
WordGuess = List[LetterGuess]


@dataclass
class GameSnapshot:
    """JSON-friendly view of one session (answer hidden while playing)."""
    game_id: str
    state: str
    hard_mode: bool
    can_toggle_hard_mode: bool
    word_length: int
    max_guesses: int
    guess_count: int
    current_input: str
    guesses: List[List[Dict[str, Any]]]
    guessed_letters: Dict[str, str]
    answer: Optional[str] = None  # Only included when game is over
    reveal: Optional[List[Dict[str, str]]] = None  # Target coverage, only when game is over
