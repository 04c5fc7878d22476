import pytest

from wordle_game.config import DEFAULT_WORDS, validate_word_list_integrity
from wordle_game.models import (
    EmptyLetter,
    GameState,
    LetterStatus,
    PendingLetter,
    SubmitOutcome,
    SubmitResult,
    SubmittedLetter,
    WordList,
)
from wordle_game.utils import ordinalise


def test_word_list_normalises_and_deduplicates():
    words = WordList(["crane", "CRANE", ("slate", False)])
    assert words.words == {"CRANE", "SLATE"}
    assert words.targets == {"CRANE"}
    assert len(words) == 2
    assert "slate" in words
    assert "GHOST" not in words


def test_word_list_same_word_can_be_guess_and_target():
    words = WordList([("power", False), ("POWER", True)])
    assert words.words == {"POWER"}
    assert words.targets == {"POWER"}


def test_word_list_from_words():
    words = WordList.from_words(["crane", "slate"], targets=["power"])
    assert words.targets == {"POWER"}
    assert words.targets <= words.words
    assert words.words == {"CRANE", "SLATE", "POWER"}


def test_word_list_from_words_without_targets_makes_everything_a_target():
    words = WordList.from_words(["crane", "slate"])
    assert words.targets == words.words == {"CRANE", "SLATE"}


def test_letter_status_ordering():
    assert LetterStatus.NOT_IN_WORD < LetterStatus.IN_WORD < LetterStatus.IN_POSITION
    assert max(LetterStatus.IN_WORD, LetterStatus.NOT_IN_WORD) is LetterStatus.IN_WORD


def test_game_state_terminal_flags():
    assert not GameState.PLAYING.is_over
    assert GameState.WON.is_over
    assert GameState.LOST.is_over


def test_tiles_reject_illegal_states():
    with pytest.raises(ValueError):
        PendingLetter("")
    with pytest.raises(ValueError):
        SubmittedLetter("A", None)
    with pytest.raises(ValueError):
        SubmittedLetter("AB", LetterStatus.IN_WORD)


def test_tile_serialisation():
    assert EmptyLetter().to_dict() == {"kind": "empty", "letter": None, "status": None}
    assert PendingLetter("A").to_dict()["kind"] == "pending"
    assert SubmittedLetter("A", LetterStatus.IN_WORD).to_dict() == {
        "kind": "submitted", "letter": "A", "status": "IN_WORD",
    }


def test_submit_result_payload_validation():
    with pytest.raises(ValueError):
        SubmitResult(SubmitOutcome.SUCCESS, letter="A")
    with pytest.raises(ValueError):
        SubmitResult(SubmitOutcome.NOT_USING_KNOWN_LETTER)
    with pytest.raises(ValueError):
        SubmitResult(SubmitOutcome.NOT_USING_KNOWN_LETTER, letter="A", position=2)
    with pytest.raises(ValueError):
        SubmitResult(SubmitOutcome.NOT_USING_KNOWN_LETTER_AT_LOCATION, letter="A")


@pytest.mark.parametrize("result,message", [
    (SubmitResult.success(), ""),
    (SubmitResult.not_enough_letters(), "Not enough letters"),
    (SubmitResult.not_in_word_list(), "Not in word list"),
    (SubmitResult.not_using_known_letter("E"), "Must use letter E"),
    (SubmitResult.not_using_known_letter_at_location("P", 0), "1st letter should be P"),
    (SubmitResult.not_using_known_letter_at_location("R", 4), "5th letter should be R"),
    (SubmitResult.game_over(), "The game is over"),
])
def test_submit_result_messages(result, message):
    assert result.message == message


def test_submit_result_to_dict():
    assert SubmitResult.not_using_known_letter_at_location("W", 2).to_dict() == {
        "outcome": "NOT_USING_KNOWN_LETTER_AT_LOCATION",
        "letter": "W",
        "position": 2,
        "message": "3rd letter should be W",
    }


@pytest.mark.parametrize("n,expected", [
    (1, "1st"), (2, "2nd"), (3, "3rd"), (4, "4th"),
    (11, "11th"), (12, "12th"), (13, "13th"), (21, "21st"), (22, "22nd"),
])
def test_ordinalise(n, expected):
    assert ordinalise(n) == expected


def test_default_word_list_is_valid():
    assert validate_word_list_integrity(DEFAULT_WORDS)


@pytest.mark.parametrize("words", [
    [],
    ["CRANE", "SLATES"],
    ["CRANE", "SL4TE"],
    ["CRANE", "slate"],
    ["CRANE", "CRANE"],
])
def test_word_list_integrity_failures(words):
    with pytest.raises(ValueError):
        validate_word_list_integrity(words)
