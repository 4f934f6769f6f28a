import pytest

from pushswap.validate import (
    InputError,
    check_doubles,
    check_input,
    check_number,
    parse_arguments,
)


@pytest.mark.parametrize("word", ["0", "42", "-7", "+15", "007"])
def test_check_number_accepts(word):
    assert check_number(word) is True


@pytest.mark.parametrize("word", ["", "-", "+", "1a", "--1", "+-2", "1 2", " 3"])
def test_check_number_rejects(word):
    assert check_number(word) is False


def test_check_doubles_distinct():
    assert check_doubles(["1", "2", "3"]) is True


def test_check_doubles_compares_parsed_values():
    assert check_doubles(["1", "+1"]) is False
    assert check_doubles(["05", "5"]) is False


def test_check_input_accepts_separate_arguments():
    check_input(["3", "-1", "2"])
    assert parse_arguments(["3", "-1", "2"]) == [3, -1, 2]


def test_check_input_accepts_single_spaced_argument():
    check_input(["3 -1  2"])
    assert parse_arguments(["3 -1  2"]) == [3, -1, 2]


def test_int_limits_accepted():
    check_input(["2147483647", "-2147483648"])
    assert parse_arguments(["2147483647", "-2147483648"]) == [2147483647, -2147483648]


@pytest.mark.parametrize(
    "args",
    [
        ["2147483648"],
        ["1", "-2147483649"],
        ["1", "abc"],
        ["1 x 3"],
        ["1", "2", "1"],
        ["4 4"],
        ["1", "2 3"],
    ],
)
def test_check_input_rejects(args):
    with pytest.raises(InputError) as info:
        check_input(args)
    assert str(info.value) == "Error"


def test_input_error_is_value_error():
    with pytest.raises(ValueError):
        check_input(["x"])


def test_blank_single_argument_holds_no_numbers():
    check_input(["   "])
    assert parse_arguments(["   "]) == []


def test_parse_arguments_empty():
    assert parse_arguments([]) == []


def test_parse_round_trips_through_text():
    numbers = [17, -4, 0, 99]
    text = " ".join(str(n) for n in numbers)
    check_input([text])
    assert parse_arguments([text]) == numbers