import pytest

from pushswap.numbers import INT_MAX, INT_MIN, atoi, atol, itoa, n_digits


@pytest.mark.parametrize("text", ["0", "42", "-17", "+9", "2147483647", "-2147483648"])
def test_atoi_plain_numbers(text):
    assert atoi(text) == int(text)


def test_atoi_skips_leading_whitespace():
    assert atoi(" \t\n\v\f\r-35") == int("-35")


def test_atoi_stops_at_first_non_digit():
    assert atoi("123abc456") == int("123")
    assert atoi("12 34") == int("12")


def test_atoi_double_sign_is_zero():
    assert atoi("--5") == 0
    assert atoi("+-5") == 0


def test_atoi_no_digits_is_zero():
    assert atoi("abc") == 0
    assert atoi("") == 0
    assert atoi("-") == 0


def test_atoi_wraps_at_32_bits():
    assert atoi("2147483648") == -2147483648
    assert atoi(str(INT_MAX)) == INT_MAX


def test_atol_keeps_values_beyond_int_range():
    assert atol("2147483648") == INT_MAX + 1
    assert atol("-2147483649") == INT_MIN - 1


def test_atol_wraps_at_64_bits():
    assert atol(str(2**63)) == -(2**63)


def test_atol_same_rules_as_atoi():
    for text in ["  +7x", "-0", "++1", "\t99"]:
        assert atol(text) == atoi(text)


def test_itoa_limits():
    assert itoa(INT_MIN) == "-2147483648"
    assert itoa(INT_MAX) == "2147483647"


def test_itoa_round_trip():
    for n in [0, 1, -1, 10, -999, 123456, INT_MIN, INT_MAX]:
        assert atoi(itoa(n)) == n


def test_itoa_rejects_out_of_range():
    with pytest.raises(OverflowError):
        itoa(INT_MAX + 1)


def test_n_digits_of_zero():
    assert n_digits(0, 10) == 1
    assert n_digits(0, 16) == 1


def test_n_digits_decimal_matches_text_length():
    for n in [1, 9, 10, 99, 100, INT_MAX, 2**64 - 1]:
        assert n_digits(n, 10) == len(str(n))


def test_n_digits_hex_matches_format_length():
    for n in [1, 15, 16, 255, 256, 2**32 - 1]:
        assert n_digits(n, 16) == len(format(n, "x"))


def test_n_digits_negative_counts_as_unsigned():
    assert n_digits(-1, 16) == len(format(2**64 - 1, "x"))


def test_n_digits_rejects_bad_base():
    with pytest.raises(ValueError):
        n_digits(5, 1)