from wordle_game.models import SubmitOutcome, SubmitResult
from wordle_game.services import find_violation


def test_no_previous_guesses_means_no_violation():
    assert find_violation("CRANE", [], "POWER") is None


def test_compliant_guess_passes():
    assert find_violation("COVER", ["ROVER"], "POWER") is None


def test_missing_letter_beats_misplaced_letter():
    # PROBE fixes P at position 0 and reveals O, E and R somewhere
    result = find_violation("CRANE", ["PROBE"], "POWER")
    assert result == SubmitResult.not_using_known_letter("O")


def test_missing_letters_ordered_by_most_recent_guess_not_target():
    # O comes first in POWER, but R comes first in PROBE
    result = find_violation("PLANT", ["PROBE"], "POWER")
    assert result == SubmitResult.not_using_known_letter("R")


def test_misplaced_letters_ordered_by_most_recent_guess():
    # ROVER starts with R, so R is reported before the earlier target positions
    result = find_violation("SLATE", ["ROVER"], "POWER")
    assert result.outcome is SubmitOutcome.NOT_USING_KNOWN_LETTER_AT_LOCATION
    assert (result.letter, result.position) == ("R", 4)
    assert result.message == "5th letter should be R"


def test_misplaced_letters_known_from_older_guess_use_latest_guess_order():
    # Positions come from TOWER; RADIO decides the order and lacks W and E
    result = find_violation("SLATE", ["TOWER", "RADIO"], "POWER")
    assert result == SubmitResult.not_using_known_letter_at_location("R", 4)


def test_misplaced_letters_absent_from_latest_guess_fall_back_to_position():
    # RADIO has neither W nor E; W comes first in the target
    result = find_violation("COLOR", ["TOWER", "RADIO"], "POWER")
    assert result == SubmitResult.not_using_known_letter_at_location("W", 2)


def test_letter_found_elsewhere_may_move():
    # GHOST showed O is in the word but not at index 1; any position is fine
    assert find_violation("PROBE", ["GHOST"], "POWER") is None


def test_guess_is_compared_case_insensitively():
    assert find_violation("cover", ["rover"], "power") is None
