from itertools import product

import pytest

from algodeck.recurrence import (
    check_record,
    count_routes,
    dice_throw_ways,
    n_choose_r_mod,
)


@pytest.mark.parametrize("n", range(2, 30))
def test_pascal_identity(n):
    for r in range(1, n):
        expected = (n_choose_r_mod(n - 1, r - 1) + n_choose_r_mod(n - 1, r)) % 1_000_000_007
        assert n_choose_r_mod(n, r) == expected


@pytest.mark.parametrize("n", range(1, 40))
def test_choose_symmetry_and_one(n):
    for r in range(n + 1):
        assert n_choose_r_mod(n, r) == n_choose_r_mod(n, n - r)
    assert n_choose_r_mod(n, 1) == n


def test_choose_more_than_available():
    assert n_choose_r_mod(3, 5) == 0


def test_choose_from_nothing_is_zero():
    assert n_choose_r_mod(0, 0) == 0


def test_choose_negative_r():
    with pytest.raises(ValueError):
        n_choose_r_mod(5, -1)


def test_choose_result_below_modulus():
    assert 0 <= n_choose_r_mod(1000, 500) < 1_000_000_007


def test_routes_known_example():
    assert count_routes([2, 3, 6, 8, 4], 1, 3, 5) == 4


def test_routes_no_fuel_same_city():
    assert count_routes([1, 2, 3], 1, 1, 0) == 1


def test_routes_negative_fuel():
    assert count_routes([1, 2, 3], 0, 2, -1) == 0


def test_routes_grow_with_fuel():
    values = [count_routes([1, 2, 3], 0, 2, fuel) for fuel in range(12)]
    assert values == sorted(values)


@pytest.mark.parametrize("faces, dice", [(2, 2), (4, 3), (6, 3), (3, 5)])
def test_dice_totals_cover_every_outcome(faces, dice):
    counts = [dice_throw_ways(faces, dice, t) for t in range(faces * dice + 1)]
    assert sum(counts) == faces**dice


@pytest.mark.parametrize("faces, dice", [(4, 3), (6, 2), (5, 4)])
def test_dice_symmetry(faces, dice):
    top = dice * (faces + 1)
    for t in range(dice, faces * dice + 1):
        assert dice_throw_ways(faces, dice, t) == dice_throw_ways(faces, dice, top - t)


@pytest.mark.parametrize("faces, dice, total", [(4, 2, 5), (6, 3, 10), (3, 3, 6)])
def test_dice_matches_enumeration(faces, dice, total):
    expected = sum(
        sum(roll) == total for roll in product(range(1, faces + 1), repeat=dice)
    )
    assert dice_throw_ways(faces, dice, total) == expected


def test_dice_total_out_of_reach():
    assert dice_throw_ways(6, 2, 13) == 0


@pytest.mark.parametrize("n", range(0, 7))
def test_record_matches_enumeration(n):
    expected = sum(
        record.count("A") < 2 and "LLL" not in record
        for record in map("".join, product("ALP", repeat=n))
    )
    assert check_record(n) == expected


def test_record_single_day_all_valid():
    assert check_record(1) == len("ALP")


def test_record_bounded_by_modulus():
    assert 0 <= check_record(10101) < 1_000_000_007