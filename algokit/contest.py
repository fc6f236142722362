"""Small contest problems on sequences, arithmetic steps and strings."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def arrange_alternating(values: Iterable[int]) -> list[int] | None:
    """Interleave the smaller half with the larger half of the sorted values.

    Returns None when fewer than three distinct values are given.
    """
    ordered = sorted(values)
    if len(set(ordered)) <= 2:
        return None
    half = len(ordered) // 2
    lower = ordered[:half]
    upper = ordered[len(ordered) - half:]
    result = [value for pair in zip(lower, upper) for value in pair]
    if len(ordered) % 2:
        result.append(ordered[half])
    return result


def steps_to_reach(start: int, target: int, step: int) -> int | None:
    """Number of additions of step taking start to target, or None if impossible."""
    difference = target - start
    if difference >= 0 and difference % step == 0:
        return difference // step
    return None


def steps_to_reach_by_walking(start: int, target: int, step: int) -> int | None:
    """Same answer as steps_to_reach, found by adding step one at a time."""
    if start < target and step <= 0:
        raise ValueError("step must be positive to walk towards a larger target")
    steps = 0
    while start < target:
        start += step
        steps += 1
    return steps if start == target else None


def is_palindrome_sequence(values: Sequence) -> bool:
    """Tell whether the sequence reads the same from both ends."""
    return all(a == b for a, b in zip(values, reversed(values)))


def capitalize_first(word: str) -> str:
    """Upper-case the first character and leave the rest untouched."""
    return word[:1].upper() + word[1:]