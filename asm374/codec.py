"""
ASM374 instruction codec.

Decodes 32-bit machine words into instructions, encodes them back, and checks
decoded instructions for structural validity. The opcode is always the top 5
bits; the rest of the layout depends on the instruction format:

    R  [opcode(5) | Ra(4) | Rb(4) | Rc(4) | unused(15)]
    I  [opcode(5) | Ra(4) | Rb(4) | unused(1) | C(18)]
    B  [opcode(5) | Ra(4) | cond(4) | unused(1) | C(18)]
    J  [opcode(5) | Ra(4) | unused(23)]
    M  [opcode(5) | unused(27)]

Bits a format doesn't define are ignored on decode and written as zero on
encode.
"""

from dataclasses import dataclass
from typing import Dict, Tuple

from .errors import ErrorKind, InstructionError
from .immediate import IMM_BITS
from .instructions import (
    OPCODE_BITS,
    Instruction,
    InstructionFormat,
    make_instruction,
)
from .registers import COND_BITS, REG_BITS, is_valid_condition, is_valid_register

WORD_BITS = 32
WORD_MASK = (1 << WORD_BITS) - 1
OPCODE_SHIFT = WORD_BITS - OPCODE_BITS


@dataclass(frozen=True)
class Field:
    """
    A bit field of an instruction word.

    Attributes:
        name: Instruction attribute holding the field
        shift: Position of the least significant bit
        width: Number of bits
    """

    name: str
    shift: int
    width: int

    @property
    def mask(self) -> int:
        return (1 << self.width) - 1

    def extract(self, word: int) -> int:
        return (word >> self.shift) & self.mask

    def insert(self, value: int) -> int:
        return (value & self.mask) << self.shift


OPCODE_FIELD = Field("opcode", OPCODE_SHIFT, OPCODE_BITS)

_RA = Field("ra", 23, REG_BITS)
_RB = Field("rb", 19, REG_BITS)
_RC = Field("rc", 15, REG_BITS)
_COND = Field("cond", 19, COND_BITS)
_IMM = Field("imm", 0, IMM_BITS)

REGISTER_FIELDS = (_RA, _RB, _RC)

# Fields defined by each format after the opcode, most significant first
LAYOUTS: Dict[InstructionFormat, Tuple[Field, ...]] = {
    InstructionFormat.R: (_RA, _RB, _RC),
    InstructionFormat.I: (_RA, _RB, _IMM),
    InstructionFormat.B: (_RA, _COND, _IMM),
    InstructionFormat.J: (_RA,),
    InstructionFormat.M: (),
}


def instruction_fields(inst: Instruction) -> Tuple[Field, ...]:
    """Get the fields defined by an instruction's format (none if unknown)."""
    spec = inst.spec
    if spec is None:
        return ()
    return LAYOUTS[spec.format]


def _check_word(word: int) -> None:
    if not isinstance(word, int) or not 0 <= word <= WORD_MASK:
        raise ValueError(f"Not a 32-bit instruction word: {word!r}")


def decode_instruction(word: int) -> Instruction:
    """
    Decode a 32-bit word.

    An undefined opcode decodes to an UnknownInstruction carrying only the
    opcode.

    Raises:
        ValueError: If word is not a 32-bit unsigned integer
    """
    _check_word(word)
    opcode = OPCODE_FIELD.extract(word)
    empty = make_instruction(opcode)
    fields = {field.name: field.extract(word) for field in instruction_fields(empty)}
    return make_instruction(opcode, **fields)


def encode_instruction(inst: Instruction) -> int:
    """
    Encode an instruction into a 32-bit word.

    Only the opcode and the fields of the instruction's format are written;
    every other bit is zero.
    """
    word = OPCODE_FIELD.insert(inst.opcode)
    for field in instruction_fields(inst):
        word |= field.insert(getattr(inst, field.name))
    return word


def check_instruction(inst: Instruction) -> None:
    """
    Check that an instruction is structurally valid.

    Only the fields of the instruction's format are checked. Semantics (such
    as dividing by zero) are not.

    Raises:
        InstructionError: If the opcode is undefined, or a register or
            condition code field holds an undefined value
    """
    if inst.spec is None:
        raise InstructionError(
            ErrorKind.INVALID_OPCODE, f"{inst.opcode:05b} ({inst.opcode})"
        )
    for field in instruction_fields(inst):
        value = getattr(inst, field.name)
        if field == _COND and not is_valid_condition(value):
            raise InstructionError(ErrorKind.INVALID_CONDITION, str(value))
        if field in REGISTER_FIELDS and not is_valid_register(value):
            raise InstructionError(ErrorKind.INVALID_REGISTER, str(value))


def is_valid_instruction(inst: Instruction) -> bool:
    """Check if an instruction passes check_instruction."""
    try:
        check_instruction(inst)
    except InstructionError:
        return False
    return True
