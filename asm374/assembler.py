"""
Assembler facade.

Assembles one line of assembly into a 32-bit word, and disassembles or
explains a 32-bit word. Disassembly always produces displayable text: an
instruction that decodes but isn't valid comes back with both its
best-effort text and the validation error.
"""

from dataclasses import dataclass
from typing import Optional

from .codec import check_instruction, decode_instruction, encode_instruction
from .errors import InstructionError
from .formatter import explain_instruction, format_instruction
from .parser import parse_instruction
from .text import word_from_hex, word_to_hex


@dataclass(frozen=True)
class Disassembly:
    """
    Result of disassembling or explaining a word.

    Attributes:
        text: Best-effort rendering, never empty
        error: Why the instruction isn't valid, or None if it is
    """

    text: str
    error: Optional[InstructionError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def assemble(line: str) -> int:
    """
    Assemble one line of assembly into a 32-bit word.

    Raises:
        ParseError: If the line can't be parsed
    """
    return encode_instruction(parse_instruction(line))


def _validate(inst) -> Optional[InstructionError]:
    try:
        check_instruction(inst)
    except InstructionError as e:
        return e
    return None


def disassemble(word: int) -> Disassembly:
    """
    Disassemble a 32-bit word into assembly text.

    Raises:
        ValueError: If word is not a 32-bit unsigned integer
    """
    inst = decode_instruction(word)
    return Disassembly(format_instruction(inst), _validate(inst))


def explain(word: int) -> Disassembly:
    """
    Explain the encoding of a 32-bit word, field by field.

    Raises:
        ValueError: If word is not a 32-bit unsigned integer
    """
    inst = decode_instruction(word)
    return Disassembly(explain_instruction(inst), _validate(inst))


def assemble_hex(line: str, upper: bool = True) -> str:
    """Assemble one line of assembly into 8 hex digits."""
    return word_to_hex(assemble(line), upper)


def disassemble_hex(hex_word: str) -> Disassembly:
    """
    Disassemble 8 hex digits.

    Raises:
        HexError: If hex_word is not exactly 8 hex digits
    """
    return disassemble(word_from_hex(hex_word))


def explain_hex(hex_word: str) -> Disassembly:
    """
    Explain 8 hex digits.

    Raises:
        HexError: If hex_word is not exactly 8 hex digits
    """
    return explain(word_from_hex(hex_word))
