"""
Game Service

Keeps every running game session in memory, keyed by game id, and turns
sessions into snapshots that are safe to send to a client.
"""

import random
import threading
import uuid
from typing import Dict, Optional, Tuple

from ..config.game_settings import DEFAULT_WORDS, MAX_GUESSES, validate_word_list_integrity
from ..models.game import GameSnapshot, GameState
from ..models.submit_result import SubmitResult
from ..models.word_list import WordList
from ..utils.game_logger import game_logger
from .game_session import GameSession


class GameService:
    """
    Core game service managing multiple game sessions.

    This class handles:
    - Game session management with unique game IDs
    - Routing player input to the right session
    - Building snapshots without exposing answers mid-game

    All session mutations run under one lock, so concurrent request
    handlers can share a service.
    """

    def __init__(self,
                 word_list: Optional[WordList] = None,
                 rng: Optional[random.Random] = None,
                 max_guesses: int = MAX_GUESSES,
                 hard_mode_default: bool = False):
        if word_list is None:
            validate_word_list_integrity(DEFAULT_WORDS)
            word_list = WordList(DEFAULT_WORDS)
        self.word_list = word_list
        self.rng = rng if rng is not None else random.Random()
        self.max_guesses = max_guesses
        self.hard_mode_default = hard_mode_default
        self.games: Dict[str, GameSession] = {}
        self._lock = threading.RLock()

    def create_new_game(self, hard_mode: Optional[bool] = None) -> str:
        """
        Creates a new game session with a randomly selected word.

        Args:
            hard_mode: Start in hard mode (defaults to the service setting)

        Returns:
            str: Unique game ID for this session

        Raises:
            EmptyWordListError: If the word list has no eligible targets
        """
        if hard_mode is None:
            hard_mode = self.hard_mode_default

        game_id = str(uuid.uuid4())
        with self._lock:
            session = GameSession(self.word_list, is_hard_mode=hard_mode,
                                  rng=self.rng, max_guesses=self.max_guesses)
            self.games[game_id] = session

        game_logger.log_game_event(game_id, 'game_created', hard_mode=hard_mode,
                                   word_length=session.target_length)
        return game_id

    def get_session(self, game_id: str) -> Optional[GameSession]:
        """Returns the live session for ``game_id`` or None."""
        return self.games.get(game_id)

    def get_game_state(self, game_id: str) -> Optional[GameSnapshot]:
        """
        Returns the current game state for a session (without revealing the answer).

        Args:
            game_id: Unique game identifier

        Returns:
            GameSnapshot object or None if game not found
        """
        with self._lock:
            session = self.games.get(game_id)
            if session is None:
                return None
            return self._snapshot(game_id, session)

    def add_letter(self, game_id: str, letter: str) -> Optional[GameSnapshot]:
        with self._lock:
            session = self.games.get(game_id)
            if session is None:
                return None
            session.add_letter(letter)
            return self._snapshot(game_id, session)

    def remove_letter(self, game_id: str) -> Optional[GameSnapshot]:
        with self._lock:
            session = self.games.get(game_id)
            if session is None:
                return None
            session.remove_letter()
            return self._snapshot(game_id, session)

    def submit_guess(self, game_id: str) -> Optional[Tuple[SubmitResult, GameSnapshot]]:
        """
        Submits the active row of a session.

        Args:
            game_id: Unique game identifier

        Returns:
            Tuple of (SubmitResult, GameSnapshot) or None if game not found
        """
        with self._lock:
            session = self.games.get(game_id)
            if session is None:
                return None
            guess = session.current_input
            result = session.submit()
            state = session.state
            snapshot = self._snapshot(game_id, session)

        if result.is_success and state is GameState.WON:
            game_logger.log_game_event(game_id, 'game_won', target_word=snapshot.answer,
                                       guesses_used=snapshot.guess_count)
        elif result.is_success and state is GameState.LOST:
            game_logger.log_game_event(game_id, 'game_lost', target_word=snapshot.answer,
                                       final_guess=guess)
        return result, snapshot

    def reset_game(self, game_id: str) -> Optional[GameSnapshot]:
        """Replaces the session under ``game_id`` with a fresh one."""
        with self._lock:
            session = self.games.get(game_id)
            if session is None:
                return None
            session = session.reset()
            self.games[game_id] = session
            snapshot = self._snapshot(game_id, session)

        game_logger.log_game_event(game_id, 'game_reset', hard_mode=session.is_hard_mode)
        return snapshot

    def toggle_hard_mode(self, game_id: str) -> Optional[Tuple[bool, GameSnapshot]]:
        """
        Flips hard mode if no guess has been accepted yet.

        Returns:
            Tuple of (changed, GameSnapshot) or None if game not found
        """
        with self._lock:
            session = self.games.get(game_id)
            if session is None:
                return None
            toggled = session.toggle_hard_mode()
            changed = toggled is not session
            self.games[game_id] = toggled
            return changed, self._snapshot(game_id, toggled)

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory.

        Args:
            game_id: Unique game identifier

        Returns:
            bool: True if game was deleted, False if not found
        """
        with self._lock:
            if game_id in self.games:
                del self.games[game_id]
                return True
            return False

    def active_game_count(self) -> int:
        with self._lock:
            return sum(1 for session in self.games.values() if session.state is GameState.PLAYING)

    def _snapshot(self, game_id: str, session: GameSession) -> GameSnapshot:
        state = session.state
        answer = None
        reveal = None
        if state.is_over:
            answer = session.target
            reveal = [
                {'letter': letter, 'coverage': coverage.value}
                for letter, coverage in zip(session.target, session.target_coverage)
            ]

        return GameSnapshot(
            game_id=game_id,
            state=state.value,
            hard_mode=session.is_hard_mode,
            can_toggle_hard_mode=session.is_game_start,
            word_length=session.target_length,
            max_guesses=session.max_guesses,
            guess_count=len(session.submitted_guesses),
            current_input=session.current_input,
            guesses=[[tile.to_dict() for tile in row] for row in session.rendered_guesses],
            guessed_letters={letter: status.name for letter, status in sorted(session.guessed_letters.items())},
            answer=answer,
            reveal=reveal
        )


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(word_list: Optional[WordList] = None,
                            rng: Optional[random.Random] = None,
                            max_guesses: int = MAX_GUESSES,
                            hard_mode_default: bool = False) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    _game_service = GameService(word_list, rng=rng, max_guesses=max_guesses,
                                hard_mode_default=hard_mode_default)
    return _game_service
