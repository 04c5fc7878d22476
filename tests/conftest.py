import os
import random
import tempfile

# Keep log files out of the working tree; must run before the package is imported
os.environ.setdefault('LOG_DIR', tempfile.mkdtemp(prefix='wordle-logs-'))

import pytest

from wordle_game import create_app
from wordle_game.config import TestingConfig
from wordle_game.models import WordList
from wordle_game.services import GameSession
from wordle_game.services.game_service import initialize_game_service

GUESSES = [
    "PROBE", "CRANE", "PLANT", "ROVER", "COVER",
    "SLATE", "TOWER", "ALLOY", "BOOST", "GHOST",
]


@pytest.fixture
def word_list():
    """Every word is a valid guess; POWER is the only possible target."""
    return WordList.from_words(GUESSES, targets=["POWER"])


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def session(word_list, rng):
    return GameSession(word_list, rng=rng)


@pytest.fixture
def hard_session(word_list, rng):
    return GameSession(word_list, is_hard_mode=True, rng=rng)


def type_word(session, word):
    for letter in word:
        session.add_letter(letter)


def play(session, word):
    type_word(session, word)
    return session.submit()


@pytest.fixture
def game_service(word_list, rng):
    return initialize_game_service(word_list, rng=rng)


@pytest.fixture
def client(game_service):
    app = create_app(TestingConfig)
    with app.test_client() as client:
        yield client
