"""
18-bit two's complement immediate values.

Immediates are carried as their raw 18-bit pattern (0 to 2**18 - 1). The
textual form is parsed and rendered here.
"""

from .errors import ErrorKind, ParseError
from .text import ascii_lower

IMM_BITS = 18
IMM_LIMIT = 1 << IMM_BITS  # one past the largest bit pattern
IMM_MASK = IMM_LIMIT - 1
IMM_SIGN = 1 << (IMM_BITS - 1)  # also the largest negative magnitude

# Base prefixes after a leading 0 (lowercase only)
BASE_PREFIXES = {"x": 16, "o": 8, "b": 2}

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


def _digit_value(char: str) -> int:
    """Value of an ASCII alphanumeric digit, or -1."""
    if not char.isascii():
        return -1
    return _DIGITS.find(ascii_lower(char))


def to_signed(imm: int) -> int:
    """Interpret an 18-bit pattern as a signed value."""
    imm &= IMM_MASK
    return imm - IMM_LIMIT if imm & IMM_SIGN else imm


def from_signed(value: int) -> int:
    """Convert a signed value to its 18-bit pattern."""
    return value & IMM_MASK


def parse_immediate(value_str: str) -> int:
    """
    Parse an immediate value from string.

    Supports:
    - Decimal: 123, +123, -45
    - Prefixed bases: 0x1A, 0o17, 0b1010 (optionally signed)
    - Unsigned hex: $1a

    A prefixed base without a sign is taken as a raw bit pattern, so the
    sign bit can be set directly (0x3FFFF is -1). Signed and decimal values
    must fit the signed range.

    Returns:
        The 18-bit pattern (0 to 2**18 - 1)

    Raises:
        ParseError: If the value is empty, has a digit invalid for its base,
            or is out of range
    """
    if not value_str:
        raise ParseError(ErrorKind.EMPTY_ARGUMENT, "immediate")

    text = value_str
    base = 10
    negative = positive = False
    if text.startswith("$"):
        text = text[1:]
        base = 16
    else:
        if text.startswith("+"):
            text = text[1:]
            positive = True
        elif text.startswith("-"):
            text = text[1:]
            negative = True
        if text.startswith("0"):
            text = text[1:]
            if text[:1] in BASE_PREFIXES:
                base = BASE_PREFIXES[text[0]]
                text = text[1:]

    value = 0
    for char in text:
        digit = _digit_value(char)
        if digit < 0 or digit >= base:
            raise ParseError(ErrorKind.INVALID_DIGIT, f"{char!r} in {value_str!r}")
        value = value * base + digit
        if value >= IMM_LIMIT:
            raise ParseError(ErrorKind.OUT_OF_RANGE, value_str)

    # Signed limits apply unless an explicit base is used without a sign
    if negative and value > IMM_SIGN:
        raise ParseError(ErrorKind.OUT_OF_RANGE, value_str)
    if not negative and (positive or base == 10) and value >= IMM_SIGN:
        raise ParseError(ErrorKind.OUT_OF_RANGE, value_str)

    if negative:
        value = (IMM_LIMIT - value) & IMM_MASK
    return value


def format_immediate(imm: int) -> str:
    """
    Render an 18-bit pattern as signed decimal.

    No leading zeros and never a "+"; negative values get a "-".
    """
    return str(to_signed(imm))
