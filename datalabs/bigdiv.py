"""Division of a decimal real number by a decimal integer at fixed precision.

A real number is held as a sign, a mantissa of up to 30 significant digits
(read as ``0.d1d2d3...``) and a decimal order in the range -99999..99999.
Division is carried out on a 31-digit working mantissa; the last digit is
used only for rounding.
"""

from __future__ import annotations

import argparse
import re
import sys
from dataclasses import dataclass
from enum import Enum

MANTISSA_DIGITS = 30
WORKING_DIGITS = MANTISSA_DIGITS + 1
INTEGER_DIGITS = 30
ORDER_LIMIT = 99999

_DECIMAL_DIGITS = "0123456789"
_SIGNS = ("+", "-")
_ORDER_PATTERN = re.compile(r"\s*([+-]?[0-9]+)", re.ASCII)


class ErrorKind(Enum):
    """Reasons an input or a division is rejected, with the program's exit codes."""

    NO_SIGN = -1
    TOO_LONG_MANTISSA = -2
    LETTER = -3
    ORDER = -4
    TOO_LONG_INTEGER = -5
    NOTHING = -6
    ZERO_DIVISOR = -7
    MACHINE_ZERO = -8
    ORDER_OVERFLOW = -9
    EMPTY_INPUT = -10

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_MESSAGES = {
    ErrorKind.NO_SIGN: "ERROR: didn't get a sign where expected",
    ErrorKind.TOO_LONG_MANTISSA: (
        "ERROR: the mantissa is too long (m+n) is more than 30 significant digits"
    ),
    ErrorKind.LETTER: "ERROR: met an unknown symbol",
    ErrorKind.ORDER: (
        "ERROR: incorrect order input: less than -99999 or more than 99999 "
        "or met an unknown symbol"
    ),
    ErrorKind.TOO_LONG_INTEGER: "ERROR: the integer has more than 30 significant digits",
    ErrorKind.NOTHING: (
        "The mantissa has no significant digits: 0 divided by any number is 0"
    ),
    ErrorKind.ZERO_DIVISOR: "ERROR: can't divide by zero",
    ErrorKind.MACHINE_ZERO: "ERROR: met a machine zero",
    ErrorKind.ORDER_OVERFLOW: (
        "ERROR: as a result of normalization, an order overflow occured"
    ),
    ErrorKind.EMPTY_INPUT: "ERROR: empty input",
}


class DivisionError(Exception):
    """Raised when input cannot be read or the result cannot be represented."""

    def __init__(self, kind: ErrorKind) -> None:
        super().__init__(kind.message)
        self.kind = kind


def _check_sign(sign: str) -> None:
    if sign not in _SIGNS:
        raise ValueError(f"sign must be '+' or '-', got {sign!r}")


def _check_digits(digits: tuple[int, ...], limit: int) -> None:
    if len(digits) > limit:
        raise ValueError(f"at most {limit} digits are allowed, got {len(digits)}")
    if any(not isinstance(d, int) or not 0 <= d <= 9 for d in digits):
        raise ValueError("every digit must be an integer from 0 to 9")


@dataclass(frozen=True)
class RealNumber:
    """A real number ``sign 0.mantissa E order``; trailing zeros are dropped."""

    sign: str
    mantissa: tuple[int, ...]
    order: int

    def __post_init__(self) -> None:
        _check_sign(self.sign)
        digits = tuple(self.mantissa)
        _check_digits(digits, WORKING_DIGITS)
        while digits and digits[-1] == 0:
            digits = digits[:-1]
        object.__setattr__(self, "mantissa", digits)


@dataclass(frozen=True)
class IntegerNumber:
    """A signed integer given by its significant decimal digits."""

    sign: str
    digits: tuple[int, ...]

    def __post_init__(self) -> None:
        _check_sign(self.sign)
        digits = tuple(self.digits)
        while digits and digits[0] == 0:
            digits = digits[1:]
        _check_digits(digits, INTEGER_DIGITS)
        object.__setattr__(self, "digits", digits)


def _padded(mantissa: tuple[int, ...]) -> list[int]:
    return list(mantissa) + [0] * (WORKING_DIGITS - len(mantissa))


def _magnitude(digits) -> int:
    return int("".join(map(str, digits)) or "0")


def _strip_line(text: str) -> str:
    return text.rstrip("\r\n")


def _parse_order(text: str) -> int:
    match = _ORDER_PATTERN.fullmatch(text)
    if match is None:
        raise DivisionError(ErrorKind.ORDER)
    order = int(match.group(1))
    if not -ORDER_LIMIT <= order <= ORDER_LIMIT:
        raise DivisionError(ErrorKind.ORDER)
    return order


def parse_real(text: str) -> RealNumber:
    """Read a real number written as ``S1m.nES2K`` and normalize it on the way."""
    text = _strip_line(text)
    if not text:
        raise DivisionError(ErrorKind.EMPTY_INPUT)
    sign, body = text[0], text[1:]
    if sign not in _SIGNS:
        raise DivisionError(ErrorKind.NO_SIGN)

    digits: list[int] = []
    shift = 0
    seen_dot = False
    exponent: str | None = None
    for position, char in enumerate(body):
        if char in "eE":
            exponent = body[position + 1:]
            break
        if len(digits) == MANTISSA_DIGITS:
            raise DivisionError(ErrorKind.TOO_LONG_MANTISSA)
        if char == ".":
            if seen_dot:
                raise DivisionError(ErrorKind.LETTER)
            seen_dot = True
        elif char in _DECIMAL_DIGITS:
            digit = int(char)
            if digit or digits:
                digits.append(digit)
                if not seen_dot:
                    shift += 1
            elif seen_dot:
                shift -= 1
        else:
            raise DivisionError(ErrorKind.LETTER)

    order = _parse_order(exponent) if exponent is not None else 0
    if not digits:
        raise DivisionError(ErrorKind.NOTHING)
    return RealNumber(sign, tuple(digits), order + shift)


def parse_integer(text: str) -> IntegerNumber:
    """Read a signed integer of up to 30 significant digits; zero is refused."""
    text = _strip_line(text)
    if not text:
        raise DivisionError(ErrorKind.EMPTY_INPUT)
    sign = text[0]
    if sign not in _SIGNS:
        raise DivisionError(ErrorKind.NO_SIGN)
    digits: list[int] = []
    for char in text[1:]:
        if len(digits) == INTEGER_DIGITS:
            raise DivisionError(ErrorKind.TOO_LONG_INTEGER)
        if char not in _DECIMAL_DIGITS:
            raise DivisionError(ErrorKind.LETTER)
        digit = int(char)
        if digit or digits:
            digits.append(digit)
    if not digits:
        raise DivisionError(ErrorKind.ZERO_DIVISOR)
    return IntegerNumber(sign, tuple(digits))


def normalize(number: RealNumber) -> RealNumber:
    """Shift out leading zeros of the mantissa and check the order range."""
    padded = _padded(number.mantissa)
    leading = next(
        (i for i, digit in enumerate(padded[:MANTISSA_DIGITS]) if digit),
        MANTISSA_DIGITS,
    )
    mantissa = padded[leading:MANTISSA_DIGITS] if leading else padded
    order = number.order - leading
    if order < -ORDER_LIMIT:
        raise DivisionError(ErrorKind.MACHINE_ZERO)
    if order > ORDER_LIMIT:
        raise DivisionError(ErrorKind.ORDER_OVERFLOW)
    return RealNumber(number.sign, tuple(mantissa), order)


def divide(dividend: RealNumber, divisor: IntegerNumber) -> RealNumber:
    """Long-divide the 31-digit working mantissa of ``dividend`` by ``divisor``.

    The result keeps the dividend's order; its mantissa may start with zeros
    and still carries the rounding digit.
    """
    divisor_value = _magnitude(divisor.digits)
    if divisor_value == 0:
        raise DivisionError(ErrorKind.ZERO_DIVISOR)
    quotient = _magnitude(_padded(dividend.mantissa)) // divisor_value
    digits = tuple(int(c) for c in str(quotient).zfill(WORKING_DIGITS))
    sign = "+" if dividend.sign == divisor.sign else "-"
    return RealNumber(sign, digits, dividend.order)


def round_mantissa(number: RealNumber) -> RealNumber:
    """Round the mantissa to 30 digits using the 31st and clear that digit."""
    digits = _padded(number.mantissa)
    order = number.order
    if digits[-1] >= 5:
        digits[MANTISSA_DIGITS - 1] += 1
        for i in range(MANTISSA_DIGITS - 1, 0, -1):
            if digits[i] <= 9:
                break
            digits[i] = 0
            digits[i - 1] += 1
        if digits[0] > 9:
            digits = [1, 0] + digits[1:-1]
            order += 1
    digits[-1] = 0
    return RealNumber(number.sign, tuple(digits), order)


def format_real(number: RealNumber) -> str:
    """Render as ``S0.mantissaEorder`` showing only significant digits."""
    shown = "".join(map(str, number.mantissa[:MANTISSA_DIGITS])).rstrip("0")
    order = f"+{number.order}" if number.order > 0 else str(number.order)
    return f"{number.sign}0.{shown}E{order}"


def info_text() -> str:
    """Describe what the program does and the formats it accepts."""
    return (
        "The program can divide a real (float) number by an integer.\n\n"
        "Format and range of input data:\n"
        "First enter a real number in the format    'S1m.nES2K'    , where:\n"
        "--S1 and S2 are the mantissa sign and the order sign respectively "
        "(S1 MUST be entered, S2 - AT WILL),\n"
        "--the total length of mantissa (m+n) is up to 30 significant digits,\n"
        "--value of the order K is up to 5 digits (from -99999 to 99999)\n"
        "--the symbol of exponenta can be both small and big ('e' or 'E')\n"
        "Then enter an integer in the format   'Sd'   , where:\n"
        "--S is the sign of an integer (MUST be entered),\n"
        "--d is the number, total length of d is up to 30 significant digits long\n\n"
        "Format of output data:\n"
        "If input and division were completed correctly,you will get a real number "
        "in the format  'S10.m1ES2k1' , where:\n"
        "--S1 and S2 are the mantissa sign and the order sign respectively,\n"
        "--m1 - mantissa is up to 30 significant digits,\n"
        "--k1 is up to 5 digits (from -99999 to 99999)\n"
        "Otherwise, you will get the information about an occured error\n\n"
    )


def main(argv=None) -> int:
    """Read a real number and an integer from standard input and print the quotient."""
    parser = argparse.ArgumentParser(
        prog="bigdiv",
        description="Divide a real number by an integer with 30-digit precision.",
    )
    parser.parse_args(argv)
    out = sys.stdout
    out.write(info_text())
    try:
        out.write(
            "Enter a real number (example to help):\n"
            "-123456789012345.678901234567890E-12345\n"
        )
        dividend = parse_real(sys.stdin.readline())
        out.write(
            "\nEnter an integer (example to help):\n"
            "+123456789012345678901234567890\n"
        )
        divisor = parse_integer(sys.stdin.readline())
        result = normalize(round_mantissa(divide(dividend, divisor)))
    except DivisionError as error:
        out.write("\n" + error.kind.message)
        return error.kind.value
    out.write("\nDivision went successfully, result:\n")
    out.write(format_real(result) + "\n\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())