"""
Indexed operands: an immediate with an optional base register, imm(reg).

Register r0 in the base position means "no base register", so it is written
by leaving the parenthesis out and is rejected when given explicitly.
"""

from typing import Tuple

from .errors import ErrorKind, ParseError
from .immediate import format_immediate, parse_immediate
from .registers import get_register_name, parse_register
from .text import bounded

# Longest indexed operand accepted, in characters
MAX_OPERAND_LENGTH = 255


def parse_indexed_operand(operand: str) -> Tuple[int, int]:
    """
    Parse an indexed operand in the form imm or imm(reg).

    Examples:
    - "0" -> (0, 0)
    - "8(r1)" -> (8, 1)
    - "-4(r15)" -> (0x3FFFC, 15)

    Returns:
        Tuple of (immediate bit pattern, base register)

    Raises:
        ParseError: If the operand is malformed, its parts don't parse, or
            the base register is an explicit r0
    """
    operand = bounded(operand, MAX_OPERAND_LENGTH)

    imm_str, reg_str = operand, None
    open_pos = operand.find("(")
    if open_pos >= 0:
        close_pos = operand.find(")", open_pos)
        if close_pos != len(operand) - 1:
            raise ParseError(ErrorKind.INVALID_ARGUMENT, repr(operand))
        imm_str = operand[:open_pos]
        reg_str = operand[open_pos + 1 : close_pos]

    imm = parse_immediate(imm_str)
    if reg_str is None:
        return imm, 0

    reg = parse_register(reg_str)
    if reg == 0:
        raise ParseError(ErrorKind.INDEX_R0, repr(operand))
    return imm, reg


def format_indexed_operand(imm: int, reg: int) -> str:
    """Render an indexed operand, leaving out a zero base register."""
    if reg == 0:
        return format_immediate(imm)
    return f"{format_immediate(imm)}({get_register_name(reg)})"
