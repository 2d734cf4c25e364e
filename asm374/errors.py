"""
Custom exception types for the ASM374 assembler.

Every error carries an ErrorKind naming what went wrong, so callers can
branch on the kind instead of matching message text.
"""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Error kinds, with their human-readable descriptions."""

    # Argument syntax
    EMPTY_ARGUMENT = "empty argument"
    LONG_ARGUMENT = "argument too long"
    INVALID_ARGUMENT = "invalid argument"
    # Numerals
    INVALID_DIGIT = "unexpected non-digit in immediate"
    OUT_OF_RANGE = "immediate value out of range"
    # Name resolution
    UNKNOWN_REGISTER = "unknown register"
    UNKNOWN_CONDITION = "unknown condition code"
    UNKNOWN_OP = "unknown op"
    MISSING_CONDITION = "missing condition code"
    INDEX_R0 = "register r0 is forbidden as an index"
    # Arity
    TOO_MANY_ARGUMENTS = "too many arguments"
    NOT_ENOUGH_ARGUMENTS = "not enough arguments"
    # Decoded instruction structure
    INVALID_OPCODE = "unknown opcode"
    INVALID_REGISTER = "invalid register"
    INVALID_CONDITION = "invalid condition code"
    # Boundary
    INVALID_HEX = "invalid hexadecimal input (expected 8 hex digits)"
    INVALID_CONFIG = "invalid configuration"


class AssemblerError(Exception):
    """Base exception for assembler errors."""

    def __init__(
        self,
        kind: ErrorKind,
        detail: Optional[str] = None,
        line_num: int = None,
        line_text: str = None,
    ):
        self.kind = kind
        self.detail = detail
        self.line_num = line_num
        self.line_text = line_text
        super().__init__(self._message())

    def _message(self) -> str:
        message = self.kind.value
        if self.detail:
            message = f"{message}: {self.detail}"
        if self.line_num is not None:
            if self.line_text:
                message = f"Line {self.line_num}: {message}\n  {self.line_text}"
            else:
                message = f"Line {self.line_num}: {message}"
        return message

    def at_line(self, line_num: int, line_text: str = None) -> "AssemblerError":
        """Return a copy of this error attached to a source line."""
        return type(self)(self.kind, self.detail, line_num, line_text)


class ParseError(AssemblerError):
    """Exception raised for assembly text that cannot be parsed."""

    pass


class InstructionError(AssemblerError):
    """Exception raised for structurally invalid instructions."""

    pass


class HexError(AssemblerError):
    """Exception raised for malformed hex instruction words."""

    def __init__(self, detail: Optional[str] = None, line_num: int = None, line_text: str = None):
        super().__init__(ErrorKind.INVALID_HEX, detail, line_num, line_text)

    def at_line(self, line_num: int, line_text: str = None) -> "HexError":
        return HexError(self.detail, line_num, line_text)


class ConfigError(AssemblerError):
    """Exception raised when a front-end configuration file is invalid."""

    def __init__(self, detail: Optional[str] = None, line_num: int = None, line_text: str = None):
        super().__init__(ErrorKind.INVALID_CONFIG, detail, line_num, line_text)

    def at_line(self, line_num: int, line_text: str = None) -> "ConfigError":
        return ConfigError(self.detail, line_num, line_text)
