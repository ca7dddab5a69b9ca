import pytest

from contest_solvers.text import (
    abbreviate,
    bit_plus_plus,
    capitalize_word,
    compare_ignore_case,
    fix_case,
    helpful_maths,
    is_reversed,
    queue_after,
    stones_to_remove,
    username_verdict,
)


@pytest.mark.parametrize(
    "first, second",
    [("aaaa", "aaaA"), ("abs", "Abz"), ("abcdefg", "AbCdEfF"), ("Zeta", "alpha")],
)
def test_compare_is_antisymmetric(first, second):
    assert compare_ignore_case(first, second) == -compare_ignore_case(second, first)
    assert compare_ignore_case(first, second) in {-1, 0, 1}


def test_compare_ignores_case():
    assert compare_ignore_case("Hello", "hELLO") == compare_ignore_case("hello", "hello")
    assert compare_ignore_case("abs", "Abz") < 0
    assert compare_ignore_case("abcdefg", "AbCdEfF") > 0


def test_username_verdict():
    assert username_verdict("wjmzbmr") == "CHAT WITH HER!"
    assert username_verdict("xiaodao") == "IGNORE HIM!"
    assert username_verdict("sevenkplus") == "CHAT WITH HER!"


@pytest.mark.parametrize("length", [1, 2, 5, 50])
def test_stones_all_same_colour(length):
    assert stones_to_remove("R" * length) == length - 1


def test_stones_alternating_needs_nothing():
    assert stones_to_remove("RGBRGB") == stones_to_remove("R")


def test_queue_sample():
    assert queue_after("BBGBG", 1) == "BGBGB"


def test_queue_zero_seconds_unchanged():
    assert queue_after("BBGBG", 0) == "BBGBG"


@pytest.mark.parametrize("arrangement", ["BBGBG", "GGGB", "BGBGBGBG", "BBBGGG"])
def test_queue_preserves_people_and_settles(arrangement):
    after = queue_after(arrangement, 3)
    assert sorted(after) == sorted(arrangement)
    settled = queue_after(arrangement, len(arrangement))
    assert settled == "G" * arrangement.count("G") + "B" * arrangement.count("B")


def test_capitalize_keeps_capitalized_word():
    assert capitalize_word("ApPLe") == "ApPLe"


def test_capitalize_lower_word():
    result = capitalize_word("konjac")
    assert result[0].isupper()
    assert result[1:] == "konjac"[1:]
    assert capitalize_word(result) == result


def test_bit_plus_plus():
    assert bit_plus_plus(["X++", "++X"]) == len(["X++", "++X"])
    assert bit_plus_plus(["X--"] * 3) == -3
    assert bit_plus_plus(["++X", "X--"]) == bit_plus_plus([])


def test_helpful_maths_sample():
    assert helpful_maths("3+2+1") == "1+2+3"


@pytest.mark.parametrize("expression", ["1+1+3+1+3", "2", "3+3+1+2+2"])
def test_helpful_maths_sorted_and_stable(expression):
    result = helpful_maths(expression)
    summands = result.split("+")
    assert summands == sorted(summands)
    assert sorted(summands) == sorted(expression.split("+"))
    assert helpful_maths(result) == result


def test_is_reversed():
    assert is_reversed("code", "edoc")
    assert not is_reversed("abb", "aba")
    assert not is_reversed("code", "code")
    assert not is_reversed("ab", "bab")


def test_fix_case():
    assert fix_case("HoUse") == "HoUse".lower()
    assert fix_case("ViP") == "ViP".upper()
    assert fix_case("maTRIx") == "maTRIx".lower()
    assert fix_case("aB") == "aB".lower()


def test_abbreviate():
    assert abbreviate("localization") == "l10n"
    assert abbreviate("word") == "word"
    assert abbreviate("a" * 10) == "a" * 10