"""Solvers for contest problems over lists of numbers."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import pairwise


def is_hard(responses: Iterable[int]) -> bool:
    """Tell whether anyone answered 1, meaning the problem is hard."""
    return any(response == 1 for response in responses)


def inverse_permutation(permutation: Sequence[int]) -> list[int]:
    """Return the inverse of a 1-based permutation."""
    result = [0] * len(permutation)
    for position, value in enumerate(permutation, start=1):
        result[value - 1] = position
    return result


def line_up_seconds(heights: Sequence[int]) -> int:
    """Return the adjacent swaps needed to put the tallest first and shortest last."""
    if not heights:
        raise ValueError("heights must not be empty")
    tallest = max(range(len(heights)), key=heights.__getitem__)
    lowest = min(heights)
    shortest = max(i for i, h in enumerate(heights) if h == lowest)
    seconds = (len(heights) - 1 - shortest) + tallest
    if tallest > shortest:
        seconds -= 1
    return seconds


def advancing_count(scores: Sequence[int], place: int) -> int:
    """Count participants scoring positively and at least the score at the given place."""
    if not 1 <= place <= len(scores):
        raise ValueError("place is out of range")
    threshold = scores[place - 1]
    return sum(1 for score in scores if score >= threshold and score > 0)


def average_percentage(percentages: Sequence[int]) -> float:
    """Return the mean of the given percentages."""
    if not percentages:
        raise ValueError("percentages must not be empty")
    return sum(percentages) / len(percentages)


def solvable_count(opinions: Iterable[Sequence[int]]) -> int:
    """Count problems that at least two of the three friends are sure about."""
    return sum(1 for opinion in opinions if sum(opinion) >= 2)


def moves_to_center(matrix: Sequence[Sequence[int]]) -> int:
    """Return the row and column swaps that bring the 1 to the centre of a 5x5 matrix."""
    position = None
    for row, cells in enumerate(matrix):
        for col, cell in enumerate(cells):
            if cell == 1:
                position = (row, col)
    if position is None:
        raise ValueError("matrix holds no 1")
    row, col = position
    return abs(row - 2) + abs(col - 2)


def magnet_groups(magnets: Sequence[int | str]) -> int:
    """Count groups of magnets, a new group starting wherever orientation changes."""
    if not magnets:
        return 0
    return 1 + sum(1 for left, right in pairwise(magnets) if left != right)


def rooms_with_space(rooms: Iterable[tuple[int, int]]) -> int:
    """Count rooms with space for two more people, given (living, capacity) pairs."""
    return sum(1 for living, capacity in rooms if living + 2 <= capacity)


def road_width(heights: Iterable[int], fence_height: int) -> int:
    """Return the road width needed: one per friend, two for those who must bend."""
    return sum(1 if height <= fence_height else 2 for height in heights)