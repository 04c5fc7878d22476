"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import (
    EmptyLetter,
    GameSnapshot,
    GameState,
    LetterGuess,
    LetterStatus,
    PendingLetter,
    SubmittedLetter,
    TargetLetterStatus,
    WordGuess,
)
from .submit_result import SubmitOutcome, SubmitResult
from .word_list import EmptyWordListError, WordList

__all__ = [
    'EmptyLetter', 'GameSnapshot', 'GameState', 'LetterGuess', 'LetterStatus',
    'PendingLetter', 'SubmittedLetter', 'TargetLetterStatus', 'WordGuess',
    'SubmitOutcome', 'SubmitResult',
    'EmptyWordListError', 'WordList',
]
