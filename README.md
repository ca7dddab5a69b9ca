# contest-solvers

Small, tested solutions to a set of introductory competitive-programming
problems. Each solution is a plain Python function that takes ordinary values
and returns the answer, so it can be used from code, from tests or from the
shell.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Library use

The solutions are grouped by the kind of input they work on.

`contest_solvers.text` holds the string problems:

```python
from contest_solvers.text import abbreviate, compare_ignore_case, is_reversed

abbreviate("localization")           # "l10n"
abbreviate("word")                   # "word"
compare_ignore_case("aaaa", "aaaA")  # 0
is_reversed("code", "edoc")          # True
```

Also available: `username_verdict`, `stones_to_remove`, `queue_after`,
`capitalize_word`, `bit_plus_plus`, `helpful_maths` and `fix_case`.

`contest_solvers.numbers` holds the arithmetic problems:

```python
from contest_solvers.numbers import can_split_watermelon, max_dominoes, next_distinct_year

can_split_watermelon(8)   # True
max_dominoes(2, 4)        # 4
next_distinct_year(1987)  # 2013
```

Also available: `is_nearly_lucky`, `damaged_dragons`, `alternating_sum`,
`money_to_borrow`, `elephant_moves`, `years_to_overtake` (raises `ValueError`
when the first weight is not positive) and `wrong_subtraction`.

`contest_solvers.sequences` holds the problems over lists and grids:

```python
from contest_solvers.sequences import inverse_permutation, solvable_count

inverse_permutation([2, 3, 4, 1])                   # [4, 1, 2, 3]
solvable_count([(1, 1, 0), (1, 1, 1), (1, 0, 0)])   # 2
```

Also available: `is_hard`, `line_up_seconds`, `advancing_count`,
`average_percentage`, `moves_to_center`, `magnet_groups`, `rooms_with_space`
and `road_width`. Functions that need a non-empty input or a valid position
raise `ValueError` otherwise.

## Command line

The `contest-solvers` command solves a problem from its contest input. Give it
the problem identifier and feed the input in the contest's own format on
standard input:

```
printf '3\n0 0 1\n' | contest-solvers 1030A
```

prints `HARD`.

Every problem in the package can be solved this way: `1030A`, `110A`, `112A`,
`136A`, `144A`, `148A`, `158A`, `200B`, `231A`, `236A`, `263A`, `266A`,
`266B`, `271A`, `281A`, `282A`, `339A`, `344A`, `41A`, `467A`, `486A`, `4A`,
`50A`, `546A`, `59A`, `617A`, `677A`, `71A`, `791A` and `977A`. The
identifier is matched without regard to case or surrounding spaces.

The answer is written exactly as the contest expects it, without an added
newline except where the answer itself ends in one (`71A` prints one word per
line; `282A` and `486A` end with a newline; `136A` leaves a space after each
number; `200B` prints twelve decimal places).

Exit status is 0 on success, 2 for an unknown problem identifier and 1 for
input that is missing data or malformed, with a message on standard error.

The same is available from code through `contest_solvers.cli.solve(problem,
text)`, which takes the identifier and the input text and returns the output
text. It raises `KeyError` for an unknown problem and
`contest_solvers.cli.InputError` (a `ValueError`) for bad input. The tuple
`contest_solvers.cli.PROBLEMS` lists the known identifiers.