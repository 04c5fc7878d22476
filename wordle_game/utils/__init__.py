"""
Utilities Package

Contains utility functions, decorators, and helper modules.
"""

from .decorators import require_game
from .helpers import get_user_identity, ordinalise
from .game_logger import game_logger

__all__ = ['require_game', 'get_user_identity', 'ordinalise', 'game_logger']
