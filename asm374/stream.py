"""
Line-oriented front end.

Reads lines of either 8-digit hex instructions to disassemble, or assembly
to assemble, and produces one output line per input line. Blank lines pass
through unchanged, so output lines stay aligned with input lines.
"""

import sys
from dataclasses import dataclass
from typing import Iterable, Optional, TextIO

from .assembler import assemble_hex, disassemble, explain
from .config import FrontendConfig
from .errors import AssemblerError, HexError, ParseError
from .text import trim, word_from_hex


@dataclass(frozen=True)
class LineResult:
    """
    Result of processing one input line.

    Attributes:
        output: Line to write to the output
        error: Why the line failed, or None
        diagnostic: Message for the error stream, or None
    """

    output: str
    error: Optional[AssemblerError] = None
    diagnostic: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class LineProcessor:
    """
    Assembles or disassembles input one line at a time.
    """

    def __init__(self, config: FrontendConfig = None, interactive: bool = False):
        """
        Initialize the processor.

        Args:
            config: Front-end options (defaults if None)
            interactive: True if input comes from a terminal; failing lines
                are then not echoed unless the config says so
        """
        self.config = config or FrontendConfig()
        self.interactive = interactive
        self.verbose = self.config.verbose
        self.lines_processed = 0
        self.errors = 0

    @property
    def echo_errors(self) -> bool:
        if self.config.echo_errors is None:
            return not self.interactive
        return self.config.echo_errors

    def log(self, message: str) -> None:
        """Print message to stderr if verbose mode is enabled."""
        if self.verbose:
            print(message, file=sys.stderr)

    def process_line(self, line: str, line_num: int = None) -> LineResult:
        """
        Process a single input line.

        Args:
            line: Input line, with or without its newline
            line_num: Source line number for error reporting
        """
        original = line.rstrip("\r\n")
        text = trim(original)
        if not text:
            return LineResult(original)

        word = None
        if len(text) == 8:
            try:
                word = word_from_hex(text)
            except HexError:
                pass

        if word is not None:
            return self._disassemble(text, word, line_num)
        return self._assemble(original, text, line_num)

    def _disassemble(self, text: str, word: int, line_num: Optional[int]) -> LineResult:
        if self.config.explain:
            result = explain(word)
        else:
            result = disassemble(word)
        if result.ok:
            self.log(f"  {text} -> {result.text!r}")
            return LineResult(result.text)

        error = result.error.at_line(line_num, text) if line_num else result.error
        shown = result.text.replace("\n", "; ")
        output = f"{text} [{shown}]" if self.echo_errors else ""
        return LineResult(
            output,
            error,
            f"invalid instruction {text} [{shown}]: {result.error}",
        )

    def _assemble(self, original: str, text: str, line_num: Optional[int]) -> LineResult:
        try:
            hex_word = assemble_hex(text, upper=self.config.hex_case == "upper")
        except ParseError as e:
            error = e.at_line(line_num, text) if line_num else e
            output = original if self.echo_errors else ""
            return LineResult(output, error, f"invalid instruction '{text}': {e}")
        self.log(f"  {text!r} -> {hex_word}")
        return LineResult(hex_word)

    def process_stream(self, lines: Iterable[str], out: TextIO, err: TextIO) -> int:
        """
        Process every line of an input stream.

        Outputs go to out and diagnostics to err, flushed after each line so
        the processor can sit behind a pipe.

        Returns:
            Number of lines that failed
        """
        failed = 0
        for line_num, line in enumerate(lines, start=1):
            result = self.process_line(line, line_num)
            self.lines_processed += 1
            if result.ok or self.echo_errors:
                out.write(result.output + "\n")
            if not result.ok:
                failed += 1
                self.log(f"  Line {line_num}: {result.error.kind.name}")
                err.write(result.diagnostic + "\n")
            out.flush()

        self.errors += failed
        self.log(f"\n  Processed {self.lines_processed} lines, {self.errors} errors")
        return failed
