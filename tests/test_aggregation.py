from __future__ import annotations

import math
from decimal import Decimal
from fractions import Fraction

import pytest

from transaction_analysis.aggregation import (
    UnhashableKey,
    add_amounts,
    count_by_key,
    first_max_by,
    first_min_by,
    group_key,
    is_finite_number,
    is_real_number,
    is_record_sequence,
    most_frequent_sorted,
    round_half_away_from_zero,
    rounded_mean,
    sum_by_key,
    total,
)


def test_sum_by_key_keeps_first_encounter_order():
    rows = [("food", 5), ("rent", 100), ("food", 7), ("travel", 1)]
    totals = sum_by_key(rows, key=lambda r: r[0], value=lambda r: r[1])
    assert totals == {"food": 12, "rent": 100, "travel": 1}
    assert list(totals) == ["food", "rent", "travel"]


def test_count_by_key_handles_unknown_keys_without_special_cases():
    roles = ["bowl", "bat", "keeper-captain", "bowl", "ar"]
    assert count_by_key(roles, key=lambda r: r) == {
        "bowl": 2,
        "bat": 1,
        "keeper-captain": 1,
        "ar": 1,
    }


def test_first_extremes_prefer_input_order():
    rows = [("a", 3), ("b", 9), ("c", 9), ("d", 1), ("e", 1)]
    assert first_max_by(rows, lambda r: r[1]) == ("b", 9)
    assert first_min_by(rows, lambda r: r[1]) == ("d", 1)


@pytest.mark.parametrize(
    "values, expected",
    [
        (["Zara", "Amit", "Zara", "Amit"], "Amit"),
        (["Swiggy", "Salary", "Swiggy"], "Swiggy"),
        (["b", "a", "c"], "a"),
        (["only"], "only"),
        ([None, None, "x"], None),
        ([None, "x"], "x"),
        ([], None),
        ([1, "1", "1"], "1"),
        ([1, 1, "1"], 1),
        ([2, 1, 2, 1], 1),
    ],
)
def test_most_frequent_sorted(values, expected):
    assert most_frequent_sorted(values) == expected


def test_most_frequent_sorted_counts_runs_at_the_end():
    assert most_frequent_sorted(["a", "b", "b", "b", "a"]) == "b"


@pytest.mark.parametrize(
    "x, expected",
    [
        (0.5, 1),
        (1.5, 2),
        (2.5, 3),
        (1766.6666666666667, 1767),
        (1.49, 1),
        (-1.5, -2),
        (7, 7),
        (Decimal("2.5"), 3),
        (Fraction(5, 2), 3),
    ],
)
def test_round_half_away_from_zero(x, expected):
    assert round_half_away_from_zero(x) == expected


@pytest.mark.parametrize(
    "value, expected",
    [(1, True), (1.5, True), (Fraction(1, 3), True), (True, False), ("1", False), (None, False)],
)
def test_is_real_number(value, expected):
    assert is_real_number(value) is expected


@pytest.mark.parametrize(
    "value, expected",
    [([], True), ((), True), ("abc", False), (b"abc", False), ({}, False), (None, False)],
)
def test_is_record_sequence(value, expected):
    assert is_record_sequence(value) is expected


@pytest.mark.parametrize(
    "value, expected",
    [
        (1, True),
        (0.25, True),
        (Fraction(1, 3), True),
        (10**300, True),
        (math.inf, False),
        (-math.inf, False),
        (math.nan, False),
        (10**400, False),
        (Fraction(10**400, 3), False),
        (True, False),
        ("1", False),
    ],
)
def test_is_finite_number(value, expected):
    assert is_finite_number(value) is expected


def test_most_frequent_sorted_keeps_int_and_string_apart():
    # Three "1" strings outnumber two 1 ints; a text comparison would merge all five.
    assert most_frequent_sorted([1, "1", 1, "1", "1"]) == "1"


def test_rounded_mean_matches_plain_division():
    assert rounded_mean([1, 2]) == 2
    assert rounded_mean([5000, 200, 100]) == 1767
    assert rounded_mean([Fraction(1, 2), Fraction(1, 2)]) == 1


def test_rounded_mean_survives_float_overflow():
    # 1e308 + 1e308 is inf as a float; the mean itself is representable.
    assert rounded_mean([1e308, 1e308]) == round_half_away_from_zero(1e308)
    assert rounded_mean([1e308, 1e308, 1e308]) > 0


def test_total_saturates_when_an_int_total_meets_a_float():
    # The int total 2 * 10**308 cannot be converted for the float addition.
    assert total([10**308, 10**308, 1.5]) == math.inf
    assert add_amounts(10**308, 10**308) == 2 * 10**308
    assert total([]) == 0


def test_group_key_keeps_unhashable_values_apart_from_strings():
    assert group_key("food") == "food"
    assert group_key(("a", 1)) == ("a", 1)

    key = group_key(["x"])
    assert key == UnhashableKey("list", "['x']")
    assert key != "['x']"
    assert key != group_key((["x"],))
    assert str(key) == "list:['x']"


def test_sum_by_key_with_group_key_separates_lookalike_categories():
    rows = [(["x"], 1), ("['x']", 2), (["x"], 3)]
    totals = sum_by_key(rows, key=lambda r: group_key(r[0]), value=lambda r: r[1])
    assert totals == {UnhashableKey("list", "['x']"): 4, "['x']": 2}
