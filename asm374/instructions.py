"""
ASM374 instruction definitions.

This module defines the opcode table (format, mnemonic, condition suffix and
argument syntax for each opcode) and the decoded instruction types. Every
other module looks opcodes up here instead of special-casing mnemonics.
"""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple, Type
from enum import Enum, auto

OPCODE_BITS = 5
OPCODE_COUNT = 1 << OPCODE_BITS
OPCODE_MASK = OPCODE_COUNT - 1


class InstructionFormat(Enum):
    """Instruction encoding formats."""

    R = "R"  # Register-register: Ra, Rb, Rc
    I = "I"  # Immediate: Ra, Rb, C
    B = "B"  # Branch: Ra, condition, C
    J = "J"  # Jump/single register: Ra
    M = "M"  # Miscellaneous: opcode only


class ArgRole(Enum):
    """Assembly syntax of a single instruction argument."""

    RA = auto()  # register into Ra
    RB = auto()  # register into Rb
    RC = auto()  # register into Rc
    IMM = auto()  # immediate into C
    INDEXED = auto()  # C(Rb), with Rb=r0 written as just C


@dataclass(frozen=True)
class InstructionSpec:
    """
    Definition of an ASM374 instruction.

    Attributes:
        format: Instruction encoding format
        mnemonic: Assembly mnemonic
        cond: True if the mnemonic takes a condition code suffix
        args: Argument roles, in assembly order
    """

    format: InstructionFormat
    mnemonic: str
    cond: bool = False
    args: Tuple[ArgRole, ...] = ()


_R3 = (ArgRole.RA, ArgRole.RB, ArgRole.RC)

# =============================================================================
# Opcode table. Opcodes 28-31 are undefined.
# =============================================================================

INSTRUCTIONS: Dict[int, InstructionSpec] = {
    # -------------------------------------------------------------------------
    # Load/store (I-format, indexed operand)
    # -------------------------------------------------------------------------
    0: InstructionSpec(InstructionFormat.I, "ld", args=(ArgRole.RA, ArgRole.INDEXED)),
    1: InstructionSpec(InstructionFormat.I, "ldi", args=(ArgRole.RA, ArgRole.INDEXED)),
    2: InstructionSpec(InstructionFormat.I, "st", args=(ArgRole.INDEXED, ArgRole.RA)),
    # -------------------------------------------------------------------------
    # ALU register-register (R-format)
    # -------------------------------------------------------------------------
    3: InstructionSpec(InstructionFormat.R, "add", args=_R3),
    4: InstructionSpec(InstructionFormat.R, "sub", args=_R3),
    5: InstructionSpec(InstructionFormat.R, "and", args=_R3),
    6: InstructionSpec(InstructionFormat.R, "or", args=_R3),
    7: InstructionSpec(InstructionFormat.R, "shr", args=_R3),
    8: InstructionSpec(InstructionFormat.R, "shra", args=_R3),
    9: InstructionSpec(InstructionFormat.R, "shl", args=_R3),
    10: InstructionSpec(InstructionFormat.R, "ror", args=_R3),
    11: InstructionSpec(InstructionFormat.R, "rol", args=_R3),
    # -------------------------------------------------------------------------
    # ALU immediate (I-format)
    # -------------------------------------------------------------------------
    12: InstructionSpec(InstructionFormat.I, "addi", args=(ArgRole.RA, ArgRole.RB, ArgRole.IMM)),
    13: InstructionSpec(InstructionFormat.I, "andi", args=(ArgRole.RA, ArgRole.RB, ArgRole.IMM)),
    14: InstructionSpec(InstructionFormat.I, "ori", args=(ArgRole.RA, ArgRole.RB, ArgRole.IMM)),
    # -------------------------------------------------------------------------
    # Two-register ALU (I-format, immediate unused)
    # -------------------------------------------------------------------------
    15: InstructionSpec(InstructionFormat.I, "mul", args=(ArgRole.RA, ArgRole.RB)),
    16: InstructionSpec(InstructionFormat.I, "div", args=(ArgRole.RA, ArgRole.RB)),
    17: InstructionSpec(InstructionFormat.I, "neg", args=(ArgRole.RA, ArgRole.RB)),
    18: InstructionSpec(InstructionFormat.I, "not", args=(ArgRole.RA, ArgRole.RB)),
    # -------------------------------------------------------------------------
    # Conditional branch (B-format): brzr, brnz, brpl, brmi
    # -------------------------------------------------------------------------
    19: InstructionSpec(InstructionFormat.B, "br", cond=True, args=(ArgRole.RA, ArgRole.IMM)),
    # -------------------------------------------------------------------------
    # Jumps and single-register I/O (J-format)
    # -------------------------------------------------------------------------
    20: InstructionSpec(InstructionFormat.J, "jr", args=(ArgRole.RA,)),
    21: InstructionSpec(InstructionFormat.J, "jal", args=(ArgRole.RA,)),
    22: InstructionSpec(InstructionFormat.J, "in", args=(ArgRole.RA,)),
    23: InstructionSpec(InstructionFormat.J, "out", args=(ArgRole.RA,)),
    24: InstructionSpec(InstructionFormat.J, "mfhi", args=(ArgRole.RA,)),
    25: InstructionSpec(InstructionFormat.J, "mflo", args=(ArgRole.RA,)),
    # -------------------------------------------------------------------------
    # Miscellaneous (M-format)
    # -------------------------------------------------------------------------
    26: InstructionSpec(InstructionFormat.M, "nop"),
    27: InstructionSpec(InstructionFormat.M, "halt"),
}


def lookup_opcode(opcode: int) -> Optional[InstructionSpec]:
    """
    Look up an instruction by opcode.

    Returns:
        InstructionSpec if the opcode is defined, None otherwise
    """
    return INSTRUCTIONS.get(opcode & OPCODE_MASK)


def is_valid_opcode(opcode: int) -> bool:
    """Check if an opcode is defined."""
    return lookup_opcode(opcode) is not None


def get_all_mnemonics() -> list:
    """Get a list of all supported mnemonics, in opcode order."""
    return [INSTRUCTIONS[op].mnemonic for op in sorted(INSTRUCTIONS)]


# =============================================================================
# Decoded instructions, one type per format
# =============================================================================


@dataclass(frozen=True)
class Instruction:
    """A decoded instruction. Subclasses carry the fields of one format."""

    opcode: int

    @property
    def spec(self) -> Optional[InstructionSpec]:
        return lookup_opcode(self.opcode)


@dataclass(frozen=True)
class RInstruction(Instruction):
    ra: int = 0
    rb: int = 0
    rc: int = 0


@dataclass(frozen=True)
class IInstruction(Instruction):
    ra: int = 0
    rb: int = 0
    imm: int = 0


@dataclass(frozen=True)
class BInstruction(Instruction):
    ra: int = 0
    cond: int = 0
    imm: int = 0


@dataclass(frozen=True)
class JInstruction(Instruction):
    ra: int = 0


@dataclass(frozen=True)
class MInstruction(Instruction):
    pass


@dataclass(frozen=True)
class UnknownInstruction(Instruction):
    """An instruction whose opcode has no definition."""

    pass


INSTRUCTION_TYPES: Dict[InstructionFormat, Type[Instruction]] = {
    InstructionFormat.R: RInstruction,
    InstructionFormat.I: IInstruction,
    InstructionFormat.B: BInstruction,
    InstructionFormat.J: JInstruction,
    InstructionFormat.M: MInstruction,
}


def instruction_type(opcode: int) -> Type[Instruction]:
    """Get the instruction type for an opcode's format."""
    spec = lookup_opcode(opcode)
    if spec is None:
        return UnknownInstruction
    return INSTRUCTION_TYPES[spec.format]


def make_instruction(opcode: int, **fields: int) -> Instruction:
    """
    Build an instruction of the right type for opcode.

    Fields the opcode's format doesn't have are dropped.
    """
    opcode &= OPCODE_MASK
    cls = instruction_type(opcode)
    names = cls.__dataclass_fields__
    return cls(opcode, **{name: value for name, value in fields.items() if name in names})
