import io
from decimal import Decimal, localcontext

import pytest

from datalabs.bigdiv import (
    DivisionError,
    ErrorKind,
    IntegerNumber,
    RealNumber,
    divide,
    format_real,
    info_text,
    main,
    normalize,
    parse_integer,
    parse_real,
    round_mantissa,
)


def _as_decimal(number):
    digits = "".join(map(str, number.mantissa)) or "0"
    return Decimal(f"{number.sign}0.{digits}E{number.order}")


def _quotient(dividend_text, divisor_text):
    dividend = parse_real(dividend_text)
    divisor = parse_integer(divisor_text)
    return normalize(round_mantissa(divide(dividend, divisor)))


@pytest.mark.parametrize(
    "text",
    ["+0.123E+5", "-0.5E-3", "+0.7E0", "-0.123456789012345678901234567891E+99999"],
)
def test_format_round_trip(text):
    assert format_real(parse_real(text)) == text


@pytest.mark.parametrize(
    "text",
    ["+123.45", "-0.00120e7", "+000123", "+1.5E-3", "-12345678901234567890.5", "+.25"],
)
def test_parse_real_keeps_value(text):
    number = parse_real(text)
    assert _as_decimal(number) == Decimal(text)
    assert number.mantissa[0] != 0


def test_parse_real_strips_newline():
    assert parse_real("+42\n") == parse_real("+42")


@pytest.mark.parametrize(
    "text, kind",
    [
        ("", ErrorKind.EMPTY_INPUT),
        ("\n", ErrorKind.EMPTY_INPUT),
        ("123", ErrorKind.NO_SIGN),
        ("+1.2.3", ErrorKind.LETTER),
        ("+12a", ErrorKind.LETTER),
        ("+1E100000", ErrorKind.ORDER),
        ("+1E-100000", ErrorKind.ORDER),
        ("+1Ex", ErrorKind.ORDER),
        ("+1E", ErrorKind.ORDER),
        ("+0.000", ErrorKind.NOTHING),
        ("+", ErrorKind.NOTHING),
        ("+" + "1" * 31, ErrorKind.TOO_LONG_MANTISSA),
        ("+" + "1" * 30 + "0", ErrorKind.TOO_LONG_MANTISSA),
        ("+" + "1" * 30 + ".", ErrorKind.TOO_LONG_MANTISSA),
    ],
)
def test_parse_real_errors(text, kind):
    with pytest.raises(DivisionError) as caught:
        parse_real(text)
    assert caught.value.kind is kind


def test_parse_real_accepts_thirty_digits_and_many_leading_zeros():
    full = parse_real("+" + "1" * 30 + "E5")
    assert len(full.mantissa) == 30
    padded = parse_real("+" + "0" * 40 + "7")
    assert _as_decimal(padded) == Decimal(7)


@pytest.mark.parametrize("text", ["+0007", "-123456789012345678901234567890", "+5"])
def test_parse_integer_value(text):
    number = parse_integer(text)
    assert number.sign == text[0]
    assert int("".join(map(str, number.digits))) == abs(int(text))


@pytest.mark.parametrize(
    "text, kind",
    [
        ("", ErrorKind.EMPTY_INPUT),
        ("7", ErrorKind.NO_SIGN),
        ("+12x", ErrorKind.LETTER),
        ("+000", ErrorKind.ZERO_DIVISOR),
        ("-", ErrorKind.ZERO_DIVISOR),
        ("+" + "9" * 31, ErrorKind.TOO_LONG_INTEGER),
    ],
)
def test_parse_integer_errors(text, kind):
    with pytest.raises(DivisionError) as caught:
        parse_integer(text)
    assert caught.value.kind is kind


def test_parse_integer_allows_leading_zeros_beyond_limit():
    number = parse_integer("+" + "0" * 40 + "1")
    assert number.digits == (1,)


@pytest.mark.parametrize("text", ["+0.123E+5", "-0.98765E-12", "+0.1E0"])
def test_divide_by_one_round_trips(text):
    assert format_real(_quotient(text, "+1")) == text
    assert format_real(_quotient(text, "-1")) == ("-" if text[0] == "+" else "+") + text[1:]


@pytest.mark.parametrize(
    "dividend, divisor",
    [("+1", "+3"), ("-123.456", "+7"), ("+2.5e-10", "-4"), ("-9", "-9")],
)
def test_quotient_is_close_to_exact_value(dividend, divisor):
    result = _quotient(dividend, divisor)
    with localcontext() as context:
        context.prec = 60
        expected = Decimal(dividend) / Decimal(divisor)
        error = abs(_as_decimal(result) - expected) / abs(expected)
    assert error < Decimal("1e-26")
    assert (result.sign == "-") == (expected < 0)


def test_one_third():
    assert format_real(_quotient("+1", "+3")) == "+0." + "3" * 29 + "E0"


def test_order_overflow():
    with pytest.raises(DivisionError) as caught:
        _quotient("+1E99999", "+1")
    assert caught.value.kind is ErrorKind.ORDER_OVERFLOW


def test_machine_zero():
    with pytest.raises(DivisionError) as caught:
        _quotient("+1E-99999", "+11")
    assert caught.value.kind is ErrorKind.MACHINE_ZERO


def test_divide_rejects_zero_divisor():
    with pytest.raises(DivisionError) as caught:
        divide(parse_real("+1"), IntegerNumber("+", (0,)))
    assert caught.value.kind is ErrorKind.ZERO_DIVISOR


def test_round_carries_into_new_digit():
    number = RealNumber("+", (9,) * 31, 4)
    rounded = round_mantissa(number)
    assert rounded.mantissa == (1,)
    assert rounded.order == number.order + 1


def test_round_down_clears_last_digit():
    digits = tuple((i % 9) + 1 for i in range(30)) + (4,)
    rounded = round_mantissa(RealNumber("-", digits, 2))
    assert rounded.mantissa == digits[:30]
    assert rounded.order == 2
    assert rounded.sign == "-"


def test_round_up_keeps_value_close():
    digits = (1, 2) + (0,) * 28 + (7,)
    number = RealNumber("+", digits, 0)
    rounded = round_mantissa(number)
    assert len(rounded.mantissa) <= 30
    assert _as_decimal(rounded) > _as_decimal(number)


def test_normalize_preserves_value():
    number = RealNumber("-", (0, 0, 1, 2), 5)
    normalized = normalize(number)
    assert _as_decimal(normalized) == _as_decimal(number)
    assert normalized.mantissa[0] != 0


def test_normalize_leaves_normalized_number():
    number = parse_real("+0.123E+5")
    assert normalize(number) == number


def test_format_zero_order_has_no_sign():
    assert format_real(parse_real("+0.7")).endswith("E0")


def test_real_number_rejects_bad_sign():
    with pytest.raises(ValueError):
        RealNumber("*", (1,), 0)


def test_error_message_matches_kind():
    error = DivisionError(ErrorKind.ZERO_DIVISOR)
    assert str(error) == ErrorKind.ZERO_DIVISOR.message


def test_info_text_mentions_formats():
    text = info_text()
    assert "'S1m.nES2K'" in text
    assert "'Sd'" in text


def test_main_success(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("+1\n+3\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Division went successfully, result:" in out
    assert format_real(_quotient("+1", "+3")) in out


def test_main_reports_error(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("abc\n"))
    assert main([]) == ErrorKind.NO_SIGN.value
    out = capsys.readouterr().out
    assert out.endswith(ErrorKind.NO_SIGN.message)


def test_main_reports_divisor_error(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("+5\n+0\n"))
    assert main([]) == ErrorKind.ZERO_DIVISOR.value
    assert capsys.readouterr().out.endswith(ErrorKind.ZERO_DIVISOR.message)