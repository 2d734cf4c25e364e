#!/usr/bin/env python3
"""
ASM374 Assembler - Command Line Interface

Usage:
    python3 -m asm374 < input.txt
    python3 -m asm374 input.txt -o output.txt
    python3 -m asm374 input.txt --explain -v
    python3 -m asm374 --list
"""

import argparse
import sys
from pathlib import Path

from . import __version__
from .config import FrontendConfig, load_config
from .errors import AssemblerError
from .instructions import INSTRUCTIONS, ArgRole
from .registers import COND_NAMES
from .stream import LineProcessor

ROLE_SYNTAX = {
    ArgRole.RA: "Ra",
    ArgRole.RB: "Rb",
    ArgRole.RC: "Rc",
    ArgRole.IMM: "C",
    ArgRole.INDEXED: "C(Rb)",
}


def get_opcode_listing() -> str:
    """
    Get a listing of the opcode table.

    Returns:
        Formatted listing string
    """
    lines = []
    lines.append("Opcode  Fmt  Syntax")
    lines.append("-" * 40)
    for opcode in sorted(INSTRUCTIONS):
        spec = INSTRUCTIONS[opcode]
        mnemonic = spec.mnemonic
        if spec.cond:
            mnemonic += "{" + ",".join(COND_NAMES.values()) + "}"
        syntax = " ".join([mnemonic, ", ".join(ROLE_SYNTAX[r] for r in spec.args)])
        lines.append(f"{opcode:05b}   {spec.format.value}    {syntax.strip()}")
    return "\n".join(lines)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="ASM374 single-instruction assembler and disassembler",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Each input line is either 8 hex digits to disassemble, or one instruction
to assemble.

Examples:
  echo "and r1, r2, r3" | %(prog)s
  echo 28918000 | %(prog)s --explain
  %(prog)s program.txt -o program.hex -c asm374.yaml
        """,
    )

    parser.add_argument(
        "input",
        type=str,
        nargs="?",
        default="-",
        help="Input file, one instruction per line (default: stdin)",
    )

    parser.add_argument(
        "-o",
        "--output",
        type=str,
        help="Output file. If not specified, prints to stdout.",
    )

    parser.add_argument(
        "-c",
        "--config",
        type=str,
        help="YAML configuration file",
    )

    parser.add_argument(
        "-e",
        "--explain",
        action="store_true",
        default=None,
        help="Explain hex input field by field instead of disassembling it",
    )

    parser.add_argument(
        "--lower",
        action="store_true",
        default=None,
        help="Print assembled words with lowercase hex digits",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=None,
        help="Enable verbose output",
    )

    parser.add_argument(
        "-l",
        "--list",
        action="store_true",
        help="Print the opcode table and exit",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    args = parser.parse_args(argv)

    if args.list:
        print(get_opcode_listing())
        return 0

    try:
        config = load_config(args.config) if args.config else FrontendConfig()
    except AssemblerError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    config = config.override(
        explain=args.explain,
        verbose=args.verbose,
        hex_case="lower" if args.lower else None,
    )

    # Validate input file
    if args.input == "-":
        source = sys.stdin
        interactive = sys.stdin.isatty()
    else:
        input_path = Path(args.input)
        if not input_path.exists():
            print(f"Error: Input file not found: {args.input}", file=sys.stderr)
            return 1
        source = open(input_path, "r")
        interactive = False

    if interactive:
        print(
            "enter an instruction (8-digit hex) to disassemble, or anything else to assemble",
            file=sys.stderr,
        )

    processor = LineProcessor(config, interactive=interactive)
    try:
        if args.output:
            with open(args.output, "w") as out:
                failed = processor.process_stream(source, out, sys.stderr)
        else:
            failed = processor.process_stream(source, sys.stdout, sys.stderr)
    finally:
        if source is not sys.stdin:
            source.close()

    if args.output and (config.verbose or not failed):
        print(f"Wrote {processor.lines_processed} lines to {args.output}", file=sys.stderr)
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
