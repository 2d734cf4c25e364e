"""
Assembly instruction parser.

Parses a single line of assembly, such as "brzr r2, 9999" or
"ld r1, 4(r2)", into an instruction. Opcodes are tried in ascending order;
the first whose mnemonic matches decides how the arguments are parsed.
"""

from typing import Dict, Optional, Tuple

from .errors import ErrorKind, ParseError
from .immediate import parse_immediate
from .instructions import (
    OPCODE_COUNT,
    ArgRole,
    Instruction,
    InstructionSpec,
    lookup_opcode,
    make_instruction,
)
from .operands import parse_indexed_operand
from .registers import COND_NAMES, parse_register
from .text import bounded, equal_fold, split_first, trim

# Longest instruction line accepted, in characters
MAX_LINE_LENGTH = 4095


def split_mnemonic(line: str) -> Tuple[str, str]:
    """
    Split a line into its mnemonic and argument text.

    Returns:
        Tuple of (mnemonic, arguments), both trimmed
    """
    mnemonic, args = split_first(trim(line), " \t")
    return trim(mnemonic), trim(args or "")


def match_mnemonic(spec: InstructionSpec, mnemonic: str) -> Optional[int]:
    """
    Match a mnemonic against an instruction.

    Returns:
        None if the mnemonic is for another instruction, otherwise the
        condition code given by its suffix (0 for instructions without one)

    Raises:
        ParseError: If the instruction needs a condition suffix and the
            mnemonic is the bare instruction name
    """
    if not spec.cond:
        return 0 if equal_fold(mnemonic, spec.mnemonic) else None

    for code, name in COND_NAMES.items():
        if equal_fold(mnemonic, spec.mnemonic + name):
            return code
    if equal_fold(mnemonic, spec.mnemonic):
        raise ParseError(
            ErrorKind.MISSING_CONDITION,
            f"{spec.mnemonic} needs one of {', '.join(COND_NAMES.values())}",
        )
    return None


def parse_arguments(spec: InstructionSpec, args: str) -> Dict[str, int]:
    """
    Parse the comma-separated arguments of an instruction.

    Returns:
        Instruction field values by attribute name

    Raises:
        ParseError: On a missing, extra or invalid argument
    """
    fields: Dict[str, int] = {}
    rest: Optional[str] = args
    for index, role in enumerate(spec.args, start=1):
        if not rest:
            raise ParseError(
                ErrorKind.NOT_ENOUGH_ARGUMENTS,
                f"{spec.mnemonic} takes {len(spec.args)}",
            )
        current, rest = split_first(rest, ",")
        current = trim(current)
        if rest is not None:
            rest = trim(rest)
        if not current:
            raise ParseError(
                ErrorKind.NOT_ENOUGH_ARGUMENTS,
                f"{spec.mnemonic} argument {index} is missing",
            )

        try:
            if role == ArgRole.RA:
                fields["ra"] = parse_register(current)
            elif role == ArgRole.RB:
                fields["rb"] = parse_register(current)
            elif role == ArgRole.RC:
                fields["rc"] = parse_register(current)
            elif role == ArgRole.IMM:
                fields["imm"] = parse_immediate(current)
            elif role == ArgRole.INDEXED:
                fields["imm"], fields["rb"] = parse_indexed_operand(current)
        except ParseError as e:
            detail = f"{spec.mnemonic} argument {index}"
            if e.detail:
                detail = f"{detail}: {e.detail}"
            raise ParseError(e.kind, detail) from e

    if rest:
        raise ParseError(
            ErrorKind.TOO_MANY_ARGUMENTS,
            f"{spec.mnemonic} takes {len(spec.args)}",
        )
    return fields


def parse_instruction(line: str) -> Instruction:
    """
    Parse one line of assembly into an instruction.

    On success, the instruction always passes check_instruction.

    Raises:
        ParseError: If the line is empty or too long, the mnemonic is
            unknown or lacks a required condition suffix, or an argument is
            invalid
    """
    if line is None:
        raise ParseError(ErrorKind.EMPTY_ARGUMENT, "instruction")
    bounded(line, MAX_LINE_LENGTH)

    mnemonic, args = split_mnemonic(line)
    for opcode in range(OPCODE_COUNT):
        spec = lookup_opcode(opcode)
        if spec is None:
            continue
        cond = match_mnemonic(spec, mnemonic)
        if cond is None:
            continue
        fields = parse_arguments(spec, args)
        if spec.cond:
            fields["cond"] = cond
        return make_instruction(opcode, **fields)

    raise ParseError(ErrorKind.UNKNOWN_OP, repr(mnemonic))

