"""
ASM374 - Assembler and disassembler for single ELEC374 CPU instructions.

This package converts between 32-bit instruction words and their canonical
assembly text, one instruction at a time.
"""

__version__ = "1.0.0"

from .assembler import (
    Disassembly,
    assemble,
    assemble_hex,
    disassemble,
    disassemble_hex,
    explain,
    explain_hex,
)
from .errors import (
    AssemblerError,
    ConfigError,
    ErrorKind,
    HexError,
    InstructionError,
    ParseError,
)

__all__ = [
    "assemble",
    "assemble_hex",
    "disassemble",
    "disassemble_hex",
    "explain",
    "explain_hex",
    "Disassembly",
    "AssemblerError",
    "ConfigError",
    "ErrorKind",
    "HexError",
    "InstructionError",
    "ParseError",
]
