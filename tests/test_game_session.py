import random

import pytest

from conftest import play, type_word
from wordle_game.models import (
    EmptyLetter,
    EmptyWordListError,
    GameState,
    LetterStatus,
    PendingLetter,
    SubmitOutcome,
    SubmitResult,
    SubmittedLetter,
    WordList,
)
from wordle_game.services import GameSession

LOSING_GUESSES = ["PROBE", "CRANE", "PLANT", "ROVER", "COVER", "SLATE"]


def test_new_session_starts_playing(session):
    assert session.target == "POWER"
    assert session.target_length == 5
    assert session.max_guesses == 6
    assert session.state is GameState.PLAYING
    assert session.submitted_guesses == ()
    assert session.current_input == ""
    assert session.is_game_start


def test_empty_target_pool_is_rejected():
    with pytest.raises(EmptyWordListError):
        GameSession(WordList([("CRANE", False)]))
    with pytest.raises(EmptyWordListError):
        GameSession(WordList([]))


def test_seeded_rng_draws_the_same_target():
    words = WordList(["AAAAA", "BBBBB", "CCCCC", "DDDDD"])
    first = GameSession(words, rng=random.Random(7))
    second = GameSession(words, rng=random.Random(7))
    assert first.target == second.target
    assert first.target in words.targets


def test_add_letter_uppercases_and_stops_at_word_length(session):
    type_word(session, "powers")
    assert session.current_input == "POWER"


@pytest.mark.parametrize("bad_input", ["POWERS", "po", "", "1", " ", None])
def test_add_letter_ignores_anything_but_a_single_letter(session, bad_input):
    session.add_letter(bad_input)
    assert session.current_input == ""


def test_multi_letter_input_cannot_fill_the_row(session):
    session.add_letter("po")
    session.add_letter("WER")
    assert session.current_input == ""
    assert session.submit().outcome is SubmitOutcome.NOT_ENOUGH_LETTERS
    assert all(len(row) == 5 for row in session.rendered_guesses)


def test_remove_letter(session):
    type_word(session, "PO")
    session.remove_letter()
    assert session.current_input == "P"


def test_remove_letter_on_empty_input_is_noop(session):
    session.remove_letter()
    assert session.current_input == ""


def test_submit_empty_input_is_not_enough_letters(session):
    assert session.submit() == SubmitResult.not_enough_letters()


def test_submit_short_word_keeps_input(session):
    type_word(session, "POW")
    assert session.submit().outcome is SubmitOutcome.NOT_ENOUGH_LETTERS
    assert session.current_input == "POW"
    assert session.submitted_guesses == ()


def test_submit_unknown_word_is_rejected(session):
    result = play(session, "ZZZZZ")
    assert result.outcome is SubmitOutcome.NOT_IN_WORD_LIST
    assert result.message == "Not in word list"
    assert session.current_input == "ZZZZZ"
    assert session.submitted_guesses == ()


def test_submit_success_clears_input(session):
    assert play(session, "crane").is_success
    assert session.submitted_guesses == ("CRANE",)
    assert session.current_input == ""
    assert not session.is_game_start


def test_winning_guess(session):
    assert play(session, "POWER").is_success
    assert session.state is GameState.WON


def test_six_misses_lose(session):
    for word in LOSING_GUESSES:
        assert session.state is GameState.PLAYING
        assert play(session, word).is_success
    assert session.state is GameState.LOST


def test_finished_game_rejects_further_input(session):
    play(session, "POWER")
    type_word(session, "CRANE")
    assert session.current_input == ""
    session.remove_letter()
    assert session.submit() == SubmitResult.game_over()
    assert session.submitted_guesses == ("POWER",)


def test_hard_mode_rejects_guess_missing_known_letter(hard_session):
    assert play(hard_session, "PROBE").is_success
    result = play(hard_session, "CRANE")
    assert result == SubmitResult.not_using_known_letter("O")
    assert result.message == "Must use letter O"
    assert hard_session.submitted_guesses == ("PROBE",)
    assert hard_session.current_input == "CRANE"


def test_normal_mode_ignores_hard_mode_rules(session):
    play(session, "PROBE")
    assert play(session, "CRANE").is_success


def test_dictionary_check_comes_before_hard_mode(hard_session):
    play(hard_session, "PROBE")
    assert play(hard_session, "ZZZZZ").outcome is SubmitOutcome.NOT_IN_WORD_LIST


def test_toggle_hard_mode_before_first_guess(session):
    toggled = session.toggle_hard_mode()
    assert toggled is not session
    assert toggled.is_hard_mode
    assert not session.is_hard_mode
    assert toggled.word_list == session.word_list


def test_toggle_hard_mode_after_first_guess_is_noop(session):
    play(session, "CRANE")
    assert session.toggle_hard_mode() is session
    assert not session.is_hard_mode


def test_reset_returns_fresh_session(hard_session):
    play(hard_session, "CRANE")
    type_word(hard_session, "PO")
    fresh = hard_session.reset()
    assert fresh is not hard_session
    assert fresh.is_hard_mode
    assert fresh.submitted_guesses == ()
    assert fresh.current_input == ""
    assert fresh.state is GameState.PLAYING
    assert hard_session.submitted_guesses == ("CRANE",)


def test_guessed_letters(session):
    play(session, "PROBE")
    assert session.guessed_letters == {
        "P": LetterStatus.IN_POSITION,
        "R": LetterStatus.IN_WORD,
        "O": LetterStatus.IN_WORD,
        "B": LetterStatus.NOT_IN_WORD,
        "E": LetterStatus.IN_WORD,
    }


def test_rendered_guesses_fresh_board(session):
    board = session.rendered_guesses
    assert len(board) == 6
    assert all(row == [EmptyLetter()] * 5 for row in board)


def test_rendered_guesses_mid_game(session):
    play(session, "PROBE")
    type_word(session, "CR")
    board = session.rendered_guesses

    assert len(board) == 6
    assert all(len(row) == 5 for row in board)
    assert board[0][0] == SubmittedLetter("P", LetterStatus.IN_POSITION)
    assert board[0][3] == SubmittedLetter("B", LetterStatus.NOT_IN_WORD)
    assert board[1] == [PendingLetter("C"), PendingLetter("R")] + [EmptyLetter()] * 3
    assert all(row == [EmptyLetter()] * 5 for row in board[2:])


def test_rendered_guesses_after_loss(session):
    for word in LOSING_GUESSES:
        play(session, word)
    board = session.rendered_guesses
    assert len(board) == 6
    assert all(isinstance(tile, SubmittedLetter) for row in board for tile in row)


def test_rendered_guesses_after_win(session):
    play(session, "POWER")
    board = session.rendered_guesses
    assert len(board) == 6
    assert board[0] == [SubmittedLetter(c, LetterStatus.IN_POSITION) for c in "POWER"]
    assert all(row == [EmptyLetter()] * 5 for row in board[1:])


def test_custom_board_size(word_list):
    session = GameSession(word_list, max_guesses=3)
    for word in ["CRANE", "SLATE", "GHOST"]:
        play(session, word)
    assert session.state is GameState.LOST
    assert len(session.rendered_guesses) == 3
