"""Command-line front end that reads a problem's input and prints its answer."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable

from contest_solvers import numbers, sequences, text


class InputError(ValueError):
    """Raised when the problem input is missing data or malformed."""


class _Reader:
    """Reads whitespace-separated tokens and lines from problem input."""

    def __init__(self, data: str) -> None:
        self._data = data
        self._pos = 0

    def _skip_space(self) -> None:
        while self._pos < len(self._data) and self._data[self._pos].isspace():
            self._pos += 1

    def token(self) -> str:
        self._skip_space()
        start = self._pos
        while self._pos < len(self._data) and not self._data[self._pos].isspace():
            self._pos += 1
        if start == self._pos:
            raise InputError("unexpected end of input")
        return self._data[start:self._pos]

    def integer(self) -> int:
        word = self.token()
        try:
            return int(word)
        except ValueError:
            raise InputError(f"expected an integer, got {word!r}") from None

    def integers(self, count: int) -> list[int]:
        return [self.integer() for _ in range(count)]

    def tokens(self, count: int) -> list[str]:
        return [self.token() for _ in range(count)]

    def line(self, skip_space: bool = False) -> str:
        """Read up to the next newline, optionally skipping leading whitespace first."""
        if skip_space:
            self._skip_space()
        end = self._data.find("\n", self._pos)
        if end == -1:
            end = len(self._data)
        result = self._data[self._pos:end].rstrip("\r")
        self._pos = end
        if not result:
            raise InputError("unexpected end of input")
        return result


def _yes_no(flag: bool) -> str:
    return "YES" if flag else "NO"


def _count(reader: _Reader) -> int:
    count = reader.integer()
    if count < 0:
        raise InputError("count must not be negative")
    return count


def _p1030a(r: _Reader) -> str:
    return "HARD" if sequences.is_hard(r.integers(_count(r))) else "EASY"


def _p110a(r: _Reader) -> str:
    return _yes_no(numbers.is_nearly_lucky(r.integer()))


def _p112a(r: _Reader) -> str:
    first, second = r.tokens(2)
    return str(text.compare_ignore_case(first, second))


def _p136a(r: _Reader) -> str:
    permutation = r.integers(_count(r))
    try:
        inverse = sequences.inverse_permutation(permutation)
    except IndexError:
        raise InputError("input is not a permutation") from None
    return "".join(f"{value} " for value in inverse)


def _p144a(r: _Reader) -> str:
    return str(sequences.line_up_seconds(r.integers(_count(r))))


def _p148a(r: _Reader) -> str:
    k, l, m, n, d = r.integers(5)
    return str(numbers.damaged_dragons(k, l, m, n, d))


def _p158a(r: _Reader) -> str:
    n, k = r.integers(2)
    return str(sequences.advancing_count(r.integers(n), k))


def _p200b(r: _Reader) -> str:
    return f"{sequences.average_percentage(r.integers(_count(r))):.12f}"


def _p231a(r: _Reader) -> str:
    n = _count(r)
    return str(sequences.solvable_count(r.integers(3) for _ in range(n)))


def _p236a(r: _Reader) -> str:
    return text.username_verdict(r.line())


def _p263a(r: _Reader) -> str:
    return str(sequences.moves_to_center([r.integers(5) for _ in range(5)]))


def _p266a(r: _Reader) -> str:
    n = _count(r)
    return str(text.stones_to_remove(r.token()[:n]))


def _p266b(r: _Reader) -> str:
    _count(r)
    seconds = r.integer()
    return text.queue_after(r.line(skip_space=True), seconds)


def _p271a(r: _Reader) -> str:
    return str(numbers.next_distinct_year(r.integer()))


def _p281a(r: _Reader) -> str:
    return text.capitalize_word(r.token())


def _p282a(r: _Reader) -> str:
    return f"{text.bit_plus_plus(r.tokens(_count(r)))}\n"


def _p339a(r: _Reader) -> str:
    return text.helpful_maths(r.token())


def _p344a(r: _Reader) -> str:
    return str(sequences.magnet_groups(r.integers(_count(r))))


def _p41a(r: _Reader) -> str:
    word, candidate = r.tokens(2)
    return _yes_no(text.is_reversed(word, candidate))


def _p467a(r: _Reader) -> str:
    n = _count(r)
    return str(sequences.rooms_with_space(tuple(r.integers(2)) for _ in range(n)))


def _p486a(r: _Reader) -> str:
    return f"{numbers.alternating_sum(r.integer())}\n"


def _p4a(r: _Reader) -> str:
    return _yes_no(numbers.can_split_watermelon(r.integer()))


def _p50a(r: _Reader) -> str:
    rows, cols = r.integers(2)
    return str(numbers.max_dominoes(rows, cols))


def _p546a(r: _Reader) -> str:
    cost, money, bananas = r.integers(3)
    return str(numbers.money_to_borrow(cost, money, bananas))


def _p59a(r: _Reader) -> str:
    return text.fix_case(r.line())


def _p617a(r: _Reader) -> str:
    return str(numbers.elephant_moves(r.integer()))


def _p677a(r: _Reader) -> str:
    n, height = r.integers(2)
    return str(sequences.road_width(r.integers(n), height))


def _p71a(r: _Reader) -> str:
    return "".join(f"{text.abbreviate(word)}\n" for word in r.tokens(_count(r)))


def _p791a(r: _Reader) -> str:
    limak, bob = r.integers(2)
    return str(numbers.years_to_overtake(limak, bob))


def _p977a(r: _Reader) -> str:
    number, times = r.integers(2)
    return str(numbers.wrong_subtraction(number, times))


_SOLVERS: dict[str, Callable[[_Reader], str]] = {
    "1030A": _p1030a,
    "110A": _p110a,
    "112A": _p112a,
    "136A": _p136a,
    "144A": _p144a,
    "148A": _p148a,
    "158A": _p158a,
    "200B": _p200b,
    "231A": _p231a,
    "236A": _p236a,
    "263A": _p263a,
    "266A": _p266a,
    "266B": _p266b,
    "271A": _p271a,
    "281A": _p281a,
    "282A": _p282a,
    "339A": _p339a,
    "344A": _p344a,
    "41A": _p41a,
    "467A": _p467a,
    "486A": _p486a,
    "4A": _p4a,
    "50A": _p50a,
    "546A": _p546a,
    "59A": _p59a,
    "617A": _p617a,
    "677A": _p677a,
    "71A": _p71a,
    "791A": _p791a,
    "977A": _p977a,
}

PROBLEMS = tuple(sorted(_SOLVERS))


def solve(problem: str, text: str) -> str:
    """Solve the named problem for the given input text and return the printed answer.

    Raises KeyError for an unknown problem and InputError for bad input.
    """
    try:
        solver = _SOLVERS[problem.strip().upper()]
    except KeyError:
        raise KeyError(f"unknown problem: {problem}") from None
    return solver(_Reader(text))


def main(argv: list[str] | None = None) -> int:
    """Read a problem's input from standard input and print the answer."""
    parser = argparse.ArgumentParser(
        prog="contest-solvers",
        description="Solve a contest problem, reading its input from standard input.",
    )
    parser.add_argument("problem", help="problem identifier, one of: " + ", ".join(PROBLEMS))
    args = parser.parse_args(argv)
    try:
        answer = solve(args.problem, sys.stdin.read())
    except KeyError as error:
        print(error.args[0], file=sys.stderr)
        return 2
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    sys.stdout.write(answer)
    return 0