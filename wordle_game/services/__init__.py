"""
Services Package

Contains all business logic and service classes.
"""

from .evaluator import best_letter_statuses, evaluate, target_coverage
from .hard_mode import find_violation
from .game_session import GameSession
from .game_service import GameService, get_game_service, initialize_game_service

__all__ = [
    'evaluate', 'target_coverage', 'best_letter_statuses',
    'find_violation',
    'GameSession',
    'GameService', 'get_game_service', 'initialize_game_service'
]
