import pytest

from algodeck.monotonic_stack import (
    MOD,
    find_132_pattern,
    largest_rectangle_area,
    longest_valid_substring,
    remove_duplicate_letters,
    remove_duplicates,
    sum_subarray_mins,
)


@pytest.mark.parametrize("nums", [[], [1], [1, 2], [2, 1]])
def test_132_short_lists_have_no_pattern(nums):
    assert find_132_pattern(nums) is False


@pytest.mark.parametrize("nums", [[1, 2, 3, 4], [4, 3, 2, 1], [7, 7, 7, 7]])
def test_132_monotone_lists_have_no_pattern(nums):
    assert find_132_pattern(nums) is False


@pytest.mark.parametrize("prefix", [[], [5], [100, 0, 50], [9, 8, 7]])
def test_132_embedded_pattern_is_found(prefix):
    assert find_132_pattern(prefix + [10, 30, 20]) is True
    assert find_132_pattern([10] + prefix + [30, 20]) is True


def test_largest_rectangle_known_example():
    assert largest_rectangle_area([2, 1, 5, 6, 2, 3]) == 10


def test_largest_rectangle_empty():
    assert largest_rectangle_area([]) == 0


@pytest.mark.parametrize("height,count", [(3, 1), (4, 5), (1, 7)])
def test_largest_rectangle_uniform_bars(height, count):
    assert largest_rectangle_area([height] * count) == height * count


@pytest.mark.parametrize("heights", [[3, 1, 4, 1, 5, 9, 2, 6], [2, 4], [6, 2, 5, 4, 5, 1, 6]])
def test_largest_rectangle_bounds_and_symmetry(heights):
    area = largest_rectangle_area(heights)
    assert area >= max(heights)
    assert area >= min(heights) * len(heights)
    assert area == largest_rectangle_area(heights[::-1])


def test_remove_duplicates_known_example():
    assert remove_duplicates("deeedbbcccbdaa", 3) == "aa"


def test_remove_duplicates_nothing_to_remove():
    assert remove_duplicates("abcd", 2) == "abcd"


@pytest.mark.parametrize("s,k", [("pbbcggttciiippooaais", 2), ("aaabbbcccd", 3), ("abba", 2)])
def test_remove_duplicates_leaves_no_run_and_is_stable(s, k):
    result = remove_duplicates(s, k)
    assert all(result[i : i + k] != result[i] * k for i in range(len(result)))
    assert remove_duplicates(result, k) == result


@pytest.mark.parametrize("s,expected", [("bcabc", "abc"), ("cbacdcbc", "acdb")])
def test_remove_duplicate_letters_examples(s, expected):
    assert remove_duplicate_letters(s) == expected


def _is_subsequence(small, big):
    it = iter(big)
    return all(ch in it for ch in small)


@pytest.mark.parametrize(
    "s", ["aaaaaa", "ababab", "bcabcadag", "dcbaabcdewrta", "onsdffsa", "zxywzxwyu"]
)
def test_remove_duplicate_letters_invariants(s):
    result = remove_duplicate_letters(s)
    assert sorted(result) == sorted(set(s))
    assert _is_subsequence(result, s)


def test_remove_duplicate_letters_empty():
    assert remove_duplicate_letters("") == ""


def test_sum_subarray_mins_known_example():
    assert sum_subarray_mins([3, 1, 2, 4]) == 17


@pytest.mark.parametrize("value", [2, 5, 1000])
def test_sum_subarray_mins_single(value):
    assert sum_subarray_mins([value]) == value


@pytest.mark.parametrize("arr", [[11, 81, 94, 43, 3], [1, 3, 4, 5, 2, 3, 4, 1, 4], [2, 1, 2, 1]])
def test_sum_subarray_mins_reverse_invariant(arr):
    assert sum_subarray_mins(arr) == sum_subarray_mins(arr[::-1])


def test_sum_subarray_mins_is_reduced_modulo():
    result = sum_subarray_mins([10**9] * 50)
    assert 0 <= result < MOD


def test_longest_valid_substring_empty_and_closed_first():
    assert longest_valid_substring("") == 0
    assert longest_valid_substring(")(") == 0


def test_longest_valid_substring_example():
    assert longest_valid_substring("((()") == 2


@pytest.mark.parametrize("n", [1, 3, 6])
def test_longest_valid_substring_repeated_pairs(n):
    assert longest_valid_substring("()" * n) == 2 * n
    assert longest_valid_substring("(" + "()" * n) == 2 * n
    assert longest_valid_substring("()" * n + ")") == 2 * n