import pytest

from algokit.contest import (
    arrange_alternating,
    capitalize_first,
    is_palindrome_sequence,
    steps_to_reach,
    steps_to_reach_by_walking,
)


def test_arrange_even_length():
    assert arrange_alternating([4, 2, 3, 1]) == [1, 3, 2, 4]


def test_arrange_too_few_distinct():
    assert arrange_alternating([5, 5, 7, 7, 5]) is None


@pytest.mark.parametrize("values", [[3, 1, 2], [9, 1, 5, 5, 2, 8, 8], [10, 20, 30, 40, 50]])
def test_arrange_is_permutation(values):
    result = arrange_alternating(values)
    assert sorted(result) == sorted(values)


def test_arrange_odd_length_ends_with_median():
    values = [7, 3, 5, 1, 9]
    assert arrange_alternating(values)[-1] == sorted(values)[2]


def test_steps_example():
    assert steps_to_reach(2, 10, 4) == 2


def test_steps_unreachable():
    assert steps_to_reach(2, 9, 4) is None
    assert steps_to_reach(10, 2, 4) is None


@pytest.mark.parametrize(
    "start,target,step",
    [(0, 0, 3), (1, 13, 3), (1, 14, 3), (5, 2, 1), (-4, 8, 6), (7, 7, 2)],
)
def test_walking_agrees_with_formula(start, target, step):
    assert steps_to_reach_by_walking(start, target, step) == steps_to_reach(start, target, step)


def test_walking_rejects_non_positive_step():
    with pytest.raises(ValueError):
        steps_to_reach_by_walking(0, 5, 0)


def test_palindrome_sequence():
    assert is_palindrome_sequence([1, 2, 3, 2, 1])
    assert is_palindrome_sequence([])
    assert not is_palindrome_sequence([1, 2, 2, 3])


def test_capitalize_first():
    assert capitalize_first("hello") == "Hello"
    assert capitalize_first("") == ""
    assert capitalize_first("aBC") == "ABC"