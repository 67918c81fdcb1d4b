import pytest

from algodeck.math_tricks import (
    column_title,
    impossible_dice_values,
    interesting_function_sum,
    max_teams,
)

PAIRS = [(0, 0), (5, 5), (10, 1), (2, 3), (17, 2), (2, 100), (7, 30), (13, 14)]


@pytest.mark.parametrize("a, b", PAIRS)
def test_max_teams_is_symmetric(a, b):
    assert max_teams(a, b) == max_teams(b, a)


@pytest.mark.parametrize("a, b", PAIRS)
def test_max_teams_respects_bounds(a, b):
    teams = max_teams(a, b)
    assert 0 <= teams <= min(a, b)
    assert teams <= (a + b) // 4


@pytest.mark.parametrize("a, b", PAIRS)
def test_max_teams_grows_with_people(a, b):
    assert max_teams(a + 1, b) >= max_teams(a, b)
    assert max_teams(a + 1, b + 3) >= max_teams(a, b) + 1


def test_max_teams_example_from_notes():
    assert max_teams(2, 100) == 2


def test_max_teams_nobody():
    assert max_teams(0, 0) == 0


@pytest.mark.parametrize("dice", [[4, 4], [5], [2, 3], [6, 1, 9, 3]])
def test_dice_at_maximum_total_only_top_face_possible(dice):
    assert impossible_dice_values(dice, sum(dice)) == [d - 1 for d in dice]


@pytest.mark.parametrize("dice", [[4, 4], [5], [2, 3], [6, 1, 9, 3]])
def test_dice_at_minimum_total_only_one_possible(dice):
    assert impossible_dice_values(dice, len(dice)) == [d - 1 for d in dice]


@pytest.mark.parametrize("dice, total", [([4, 4], 5), ([2, 3], 3), ([6, 1, 9, 3], 10)])
def test_dice_counts_within_face_range(dice, total):
    result = impossible_dice_values(dice, total)
    assert len(result) == len(dice)
    for faces, impossible in zip(dice, result):
        assert 0 <= impossible <= faces - 1


def _decode(title):
    number = 0
    for letter in title:
        number = number * 26 + ord(letter) - ord("A") + 1
    return number


@pytest.mark.parametrize("column", [1, 2, 25, 26, 27, 52, 53, 701, 702, 703, 18278, 2**31 - 1])
def test_column_title_round_trip(column):
    title = column_title(column)
    assert title.isalpha() and title.isupper()
    assert _decode(title) == column


def test_column_title_fixed_names():
    assert column_title(1) == "A"
    assert column_title(26) == "Z"
    assert column_title(27) == "AA"


def test_column_title_zero_is_empty():
    assert column_title(0) == ""


@pytest.mark.parametrize("value", [0, 1, 9, 10, 99, 12345])
def test_interesting_function_same_bounds(value):
    assert interesting_function_sum(value, value) == 0


@pytest.mark.parametrize("a, b, c", [(1, 9, 10), (0, 99, 1000), (17, 345, 100000), (5, 5, 50)])
def test_interesting_function_is_additive(a, b, c):
    assert interesting_function_sum(a, b) + interesting_function_sum(b, c) == (
        interesting_function_sum(a, c)
    )


@pytest.mark.parametrize("l, r", [(1, 9), (0, 100), (123, 4567)])
def test_interesting_function_counts_every_step(l, r):
    assert interesting_function_sum(l, r) >= r - l