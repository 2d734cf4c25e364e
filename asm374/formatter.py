"""
Instruction formatting.

Renders decoded instructions as canonical assembly text, or as a bit-level
explanation of their encoding. Both always produce a non-empty string, even
for instructions that fail check_instruction.
"""

from typing import List

from .codec import OPCODE_FIELD, WORD_BITS, instruction_fields
from .immediate import format_immediate
from .instructions import ArgRole, Instruction
from .operands import format_indexed_operand
from .registers import get_condition_name, get_register_name
from .text import to_binary

UNKNOWN_OP = "?"

# Labels used by explain_instruction, by instruction attribute
FIELD_LABELS = {
    "opcode": "Op",
    "ra": "Ra",
    "rb": "Rb",
    "rc": "Rc",
    "cond": "Cond",
    "imm": "Imm",
}


def format_argument(inst: Instruction, role: ArgRole) -> str:
    """Render one argument of an instruction."""
    if role == ArgRole.RA:
        return get_register_name(inst.ra)
    elif role == ArgRole.RB:
        return get_register_name(inst.rb)
    elif role == ArgRole.RC:
        return get_register_name(inst.rc)
    elif role == ArgRole.IMM:
        return format_immediate(inst.imm)
    elif role == ArgRole.INDEXED:
        return format_indexed_operand(inst.imm, inst.rb)
    raise ValueError(f"Unknown argument role: {role}")


def format_instruction(inst: Instruction) -> str:
    """
    Render an instruction as assembly text.

    Examples: "and r1, r2, r3", "brzr r2, 9999", "ld r4, 12(r1)", "halt".
    An undefined opcode renders as "?".
    """
    spec = inst.spec
    if spec is None:
        return UNKNOWN_OP

    op = spec.mnemonic
    if spec.cond:
        op += get_condition_name(inst.cond)
    if not spec.args:
        return op
    return op + " " + ", ".join(format_argument(inst, role) for role in spec.args)


def _format_value(inst: Instruction, name: str) -> str:
    value = getattr(inst, name)
    if name == "cond":
        return get_condition_name(value)
    if name == "imm":
        return format_immediate(value)
    return get_register_name(value)


def explain_instruction(inst: Instruction) -> str:
    """
    Explain the encoding of an instruction.

    The first line breaks the word into labelled bit groups, most significant
    first, with bits the format doesn't use shown as "?". The second line
    gives the format and the decoded field values:

        Op:00101|Ra:0001|Rb:0010|Rc:0011|Unk:???????????????
        R Op=and Ra=r1 Rb=r2 Rc=r3
    """
    groups: List[str] = []
    next_bit = WORD_BITS  # one past the most significant bit not yet shown
    for field in (OPCODE_FIELD,) + instruction_fields(inst):
        top = field.shift + field.width
        if top < next_bit:
            groups.append("Unk:" + "?" * (next_bit - top))
        value = getattr(inst, field.name)
        groups.append(f"{FIELD_LABELS[field.name]}:{to_binary(value, field.width)}")
        next_bit = field.shift
    if next_bit > 0:
        groups.append("Unk:" + "?" * next_bit)

    spec = inst.spec
    if spec is None:
        summary = UNKNOWN_OP
    else:
        summary = f"{spec.format.value} Op={spec.mnemonic}"
        for field in instruction_fields(inst):
            summary += f" {FIELD_LABELS[field.name]}={_format_value(inst, field.name)}"

    return "|".join(groups) + "\n" + summary
