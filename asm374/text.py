"""
Text and number primitives.

Small helpers shared by the parsers and formatters: whitespace trimming,
ASCII case-insensitive comparison, bounded copies, and hex/binary digit
conversion for 32-bit instruction words.
"""

from typing import Optional, Tuple

from .errors import ErrorKind, HexError, ParseError

WHITESPACE = " \t\n\v\f\r"
HEX_DIGITS = "0123456789ABCDEF"

# Lowercase ASCII letters only; other characters are left alone
_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def trim(text: str) -> str:
    """Remove leading and trailing ASCII whitespace."""
    return text.strip(WHITESPACE)


def ascii_lower(text: str) -> str:
    """Lowercase the ASCII letters of text."""
    return text.translate(_ASCII_LOWER)


def equal_fold(a: str, b: str) -> bool:
    """Compare two strings, ignoring ASCII case."""
    return ascii_lower(a) == ascii_lower(b)


def split_first(text: str, separators: str) -> Tuple[str, Optional[str]]:
    """
    Split text at the first occurrence of any separator character.

    Returns:
        Tuple of (head, tail). The tail is None if no separator was found.
    """
    for i, char in enumerate(text):
        if char in separators:
            return text[:i], text[i + 1 :]
    return text, None


def bounded(text: str, limit: int) -> str:
    """
    Check that text fits in a scratch buffer of limit characters.

    Raises:
        ParseError: If text is empty or longer than limit
    """
    if not text:
        raise ParseError(ErrorKind.EMPTY_ARGUMENT)
    if len(text) > limit:
        raise ParseError(
            ErrorKind.LONG_ARGUMENT, f"{len(text)} characters (max {limit})"
        )
    return text


def hex_to_nibble(char: str) -> Optional[int]:
    """Convert a single hex digit to its value, or None if it isn't one."""
    if len(char) != 1 or not char.isascii():
        return None
    value = HEX_DIGITS.find(char.upper())
    return value if value >= 0 else None


def nibble_to_hex(value: int) -> str:
    """Convert the low 4 bits of value to an uppercase hex digit."""
    return HEX_DIGITS[value & 0xF]


def word_to_hex(word: int, upper: bool = True) -> str:
    """
    Render a 32-bit word as 8 hex digits, most significant nibble first.
    """
    digits = "".join(nibble_to_hex(word >> shift) for shift in range(28, -1, -4))
    return digits if upper else ascii_lower(digits)


def word_from_hex(text: Optional[str]) -> int:
    """
    Parse exactly 8 hex digits into a 32-bit word.

    Raises:
        HexError: If text is None, not 8 characters long, or contains
            anything other than hex digits
    """
    if text is None:
        raise HexError("no input")
    if len(text) != 8:
        raise HexError(f"{text!r} has {len(text)} characters")

    word = 0
    for char in text:
        nibble = hex_to_nibble(char)
        if nibble is None:
            raise HexError(f"{char!r} in {text!r} is not a hex digit")
        word = (word << 4) | nibble
    return word


def to_binary(value: int, width: int) -> str:
    """Render the low width bits of value as binary digits."""
    return "".join("1" if (value >> bit) & 1 else "0" for bit in range(width - 1, -1, -1))
