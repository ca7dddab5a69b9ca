"""Solvers for string-processing contest problems."""

from __future__ import annotations

import string
from collections.abc import Iterable
from itertools import pairwise

_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def _ascii_lower(text: str) -> str:
    return text.translate(_TO_LOWER)


def _ascii_upper(text: str) -> str:
    return text.translate(_TO_UPPER)


def compare_ignore_case(first: str, second: str) -> int:
    """Compare two strings case-insensitively, returning -1, 0 or 1."""
    a, b = _ascii_lower(first), _ascii_lower(second)
    return (a > b) - (a < b)


def username_verdict(username: str) -> str:
    """Decide by the parity of distinct characters whether the user is female."""
    if len(set(username)) % 2 == 0:
        return "CHAT WITH HER!"
    return "IGNORE HIM!"


def stones_to_remove(colors: str) -> int:
    """Count stones to remove so no two neighbouring stones share a colour."""
    return sum(1 for left, right in pairwise(colors) if left == right)


def queue_after(arrangement: str, seconds: int) -> str:
    """Return the queue after each boy standing before a girl lets her pass, once per second."""
    queue = arrangement
    for _ in range(seconds):
        # Non-overlapping, left-to-right replacement: a boy moved back this
        # second cannot swap again until the next one.
        queue = queue.replace("BG", "GB")
    return queue


def capitalize_word(word: str) -> str:
    """Upper-case the first letter of a word, leaving the rest untouched."""
    if not word or word[0] in string.ascii_uppercase:
        return word
    return _ascii_upper(word[0]) + word[1:]


def bit_plus_plus(statements: Iterable[str]) -> int:
    """Run Bit++ statements on a variable starting at zero and return its value."""
    value = 0
    for statement in statements:
        if "++" in statement:
            value += 1
        elif "--" in statement:
            value -= 1
    return value


def helpful_maths(expression: str) -> str:
    """Reorder the summands of a sum so they appear in non-decreasing order."""
    return "+".join(sorted(expression.split("+")))


def is_reversed(word: str, candidate: str) -> bool:
    """Tell whether candidate is word spelled backwards."""
    return candidate == word[::-1]


def fix_case(word: str) -> str:
    """Convert the word to the case of the majority of its letters, lower on a tie."""
    upper = sum(1 for ch in word if ch in string.ascii_uppercase)
    lower = sum(1 for ch in word if ch in string.ascii_lowercase)
    if upper > lower:
        return _ascii_upper(word)
    return _ascii_lower(word)


def abbreviate(word: str) -> str:
    """Abbreviate words longer than ten characters as first letter, count, last letter."""
    if len(word) > 10:
        return f"{word[0]}{len(word) - 2}{word[-1]}"
    return word