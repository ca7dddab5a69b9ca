"""Solvers for arithmetic contest problems."""

from __future__ import annotations


def is_nearly_lucky(number: int) -> bool:
    """Tell whether the count of lucky digits (4 and 7) is itself 4 or 7."""
    lucky = sum(1 for digit in str(abs(number)) if digit in "47")
    return lucky in (4, 7)


def damaged_dragons(k: int, l: int, m: int, n: int, dragons: int) -> int:
    """Count dragons among 1..dragons whose number is divisible by any of k, l, m, n."""
    divisors = (k, l, m, n)
    if 1 in divisors:
        return dragons
    return sum(
        1 for i in range(2, dragons + 1) if any(i % d == 0 for d in divisors)
    )


def _has_distinct_digits(year: int) -> bool:
    digits = f"{year % 10000:04d}"
    return len(set(digits)) == len(digits)


def next_distinct_year(year: int) -> int:
    """Return the first year after the given one whose four digits are all distinct."""
    year += 1
    while not _has_distinct_digits(year):
        year += 1
    return year


def alternating_sum(n: int) -> int:
    """Return -1 + 2 - 3 + ... + (-1)^n * n."""
    even_count = n // 2
    odd_count = (n + 1) // 2
    return even_count * (even_count + 1) - odd_count * odd_count


def can_split_watermelon(weight: int) -> bool:
    """Tell whether the weight splits into two positive even parts."""
    return weight % 2 == 0 and weight > 2


def max_dominoes(rows: int, cols: int) -> int:
    """Return the number of 2x1 dominoes that fit on a rows x cols board."""
    return rows * cols // 2


def money_to_borrow(cost: int, money: int, bananas: int) -> int:
    """Return how much must be borrowed to buy bananas whose i-th costs i * cost."""
    total = cost * bananas * (bananas + 1) // 2
    return max(total - money, 0)


def elephant_moves(distance: int) -> int:
    """Return the fewest steps of length 1 to 5 that cover the distance."""
    if distance <= 0:
        return 0
    return -(-distance // 5)


def years_to_overtake(limak: int, bob: int) -> int:
    """Return the years until Limak, tripling yearly, outweighs Bob, doubling yearly.

    Raises ValueError when Limak's weight is not positive, as he would never grow.
    """
    if limak <= 0:
        raise ValueError("Limak's weight must be positive")
    year = 1
    while True:
        limak *= 3
        bob *= 2
        if limak > bob:
            return year
        year += 1


def wrong_subtraction(number: int, times: int) -> int:
    """Apply Tanya's subtraction of one the given number of times."""
    for _ in range(times):
        if number % 10 != 0:
            number -= 1
        else:
            number //= 10
    return number