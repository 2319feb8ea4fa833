import pytest

from pushswap.parsing import InputError, check_args, parse_arguments, parse_number


@pytest.mark.parametrize("n", [0, 1, -1, 42, -2147483648, 2147483647])
def test_parse_number_round_trip(n):
    assert parse_number(str(n)) == n


def test_parse_number_sign_and_whitespace():
    assert parse_number("+5") == 5
    assert parse_number(" \t\n-7") == -7
    assert parse_number("-0") == 0


def test_parse_number_eleven_digits_accepted():
    assert parse_number("99999999999") == 99999999999
    assert parse_number("-99999999999") == -99999999999


@pytest.mark.parametrize(
    "text",
    ["", "-", "+", "abc", "12a", "1 ", "--1", "+-1", "1.5", "123456789012", "9223372036854775807"],
)
def test_parse_number_rejects(text):
    with pytest.raises(InputError):
        parse_number(text)


def test_input_error_is_value_error():
    with pytest.raises(ValueError):
        parse_number("x")


def test_check_args_returns_values_in_order():
    args = ["3", "-1", "+7", "0"]
    assert check_args(args) == [parse_number(a) for a in args]


@pytest.mark.parametrize("args", [["1", "1"], ["0", "-0"], ["5", "+5"], ["2", "3", " 2"]])
def test_check_args_rejects_duplicates(args):
    with pytest.raises(InputError):
        check_args(args)


def test_check_args_rejects_invalid():
    with pytest.raises(InputError):
        check_args(["1", "two", "3"])


def test_check_args_empty():
    assert check_args([]) == []


def test_parse_arguments():
    assert parse_arguments(["3", "-1", "2"]) == [3, -1, 2]
    assert len(parse_arguments(["4", "4"])) == 2


def test_parse_arguments_rejects_invalid():
    with pytest.raises(InputError):
        parse_arguments(["1", ""])