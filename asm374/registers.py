"""
Register and condition code definitions and name mappings.

Registers are r0-r15. Condition codes select the predicate of a branch:
zr (zero), nz (non-zero), pl (plus) and mi (minus).
"""

from .errors import ErrorKind, ParseError
from .text import ascii_lower

REG_BITS = 4
REG_COUNT = 1 << REG_BITS

COND_BITS = 4  # field width; only the first COND_COUNT values are defined

# Register number to name mapping
REG_NAMES = {num: f"r{num}" for num in range(REG_COUNT)}

# Condition code to name mapping
COND_NAMES = {
    0: "zr",
    1: "nz",
    2: "pl",
    3: "mi",
}
COND_COUNT = len(COND_NAMES)

# Build the reverse mappings (name to number)
REGISTER_MAP = {name: num for num, name in REG_NAMES.items()}
CONDITION_MAP = {name: num for num, name in COND_NAMES.items()}

UNKNOWN_NAME = "?"


def parse_register(name: str) -> int:
    """
    Parse a register name and return its number.

    Args:
        name: Register name (e.g., "r0", "R15")

    Returns:
        Register number (0-15)

    Raises:
        ParseError: If the name is empty or not a register
    """
    if not name:
        raise ParseError(ErrorKind.EMPTY_ARGUMENT, "register")
    num = REGISTER_MAP.get(ascii_lower(name))
    if num is None:
        raise ParseError(ErrorKind.UNKNOWN_REGISTER, repr(name))
    return num


def parse_condition(name: str) -> int:
    """
    Parse a condition code name and return its number.

    Raises:
        ParseError: If the name is empty or not a condition code
    """
    if not name:
        raise ParseError(ErrorKind.EMPTY_ARGUMENT, "condition code")
    code = CONDITION_MAP.get(ascii_lower(name))
    if code is None:
        raise ParseError(ErrorKind.UNKNOWN_CONDITION, repr(name))
    return code


def is_valid_register(num: int) -> bool:
    """Check if a number is a defined register."""
    return num in REG_NAMES


def is_valid_condition(code: int) -> bool:
    """Check if a number is a defined condition code."""
    return code in COND_NAMES


def get_register_name(num: int) -> str:
    """Get the name for a register number, or "?" if it doesn't exist."""
    return REG_NAMES.get(num, UNKNOWN_NAME)


def get_condition_name(code: int) -> str:
    """Get the name for a condition code, or "?" if it doesn't exist."""
    return COND_NAMES.get(code, UNKNOWN_NAME)
