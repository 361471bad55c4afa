import string

import pytest

from pipex.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)

ASCII = [chr(code) for code in range(128)]


@pytest.mark.parametrize("ch", ASCII)
def test_is_alpha_matches_ascii_letters(ch):
    assert is_alpha(ch) == (ch in string.ascii_letters)


@pytest.mark.parametrize("ch", ASCII)
def test_is_digit_matches_ascii_digits(ch):
    assert is_digit(ch) == (ch in string.digits)


@pytest.mark.parametrize("ch", ASCII)
def test_is_alnum_is_union_of_alpha_and_digit(ch):
    assert is_alnum(ch) == (is_alpha(ch) or is_digit(ch))


@pytest.mark.parametrize("ch", ASCII)
def test_is_print_matches_printable_range(ch):
    expected = ch in string.printable and ch not in "\t\n\r\x0b\x0c"
    assert is_print(ch) == expected


def test_is_print_bounds():
    assert is_print(" ")
    assert is_print("~")
    assert not is_print(31)
    assert not is_print(127)


def test_is_ascii_bounds():
    assert is_ascii(0)
    assert is_ascii(127)
    assert not is_ascii(128)
    assert not is_ascii(-1)
    assert not is_ascii("é")


def test_non_ascii_letters_are_not_alpha():
    assert not is_alpha("é")
    assert not is_digit("٣")
    assert not is_alnum("ß")


def test_integer_codes_accepted():
    assert is_alpha(ord("a"))
    assert is_digit(ord("0"))
    assert not is_alpha(ord(" "))


@pytest.mark.parametrize("lower, upper", zip(string.ascii_lowercase, string.ascii_uppercase))
def test_case_conversion_pairs(lower, upper):
    assert to_upper(lower) == upper
    assert to_lower(upper) == lower


@pytest.mark.parametrize("ch", [c for c in ASCII if c not in string.ascii_letters])
def test_case_conversion_leaves_non_letters(ch):
    assert to_upper(ch) == ch
    assert to_lower(ch) == ch


def test_case_conversion_leaves_non_ascii():
    assert to_upper("é") == "é"
    assert to_lower("É") == "É"


def test_case_conversion_keeps_integer_form():
    assert to_upper(ord("a")) == ord("A")
    assert to_lower(ord("Z")) == ord("z")
    assert to_upper(500) == 500


@pytest.mark.parametrize("ch", string.ascii_letters)
def test_case_round_trip(ch):
    assert to_lower(to_upper(ch)) == ch.lower()
    assert to_upper(to_lower(ch)) == ch.upper()


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")
    with pytest.raises(ValueError):
        to_upper("")


def test_wrong_type_rejected():
    with pytest.raises(TypeError):
        is_digit(1.5)
    with pytest.raises(TypeError):
        is_alpha(True)