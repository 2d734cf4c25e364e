"""
Tests for indexed operands, imm or imm(reg).
"""

import pytest

from asm374.errors import ErrorKind, ParseError
from asm374.operands import (
    MAX_OPERAND_LENGTH,
    format_indexed_operand,
    parse_indexed_operand,
)


class TestParseIndexedOperand:
    """Tests for parse_indexed_operand."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("0", (0, 0)),
            ("0(r1)", (0, 1)),
            ("$0000(r1)", (0, 1)),
            ("0x39(R1)", (0x39, 1)),
            ("-4(r15)", (0x3FFFC, 15)),
            ("77", (77, 0)),
        ],
    )
    def test_valid(self, text, expected):
        """Test operands with and without a base register."""
        assert parse_indexed_operand(text) == expected

    def test_explicit_r0_forbidden(self):
        """Test that r0 can't be written as the base register."""
        with pytest.raises(ParseError) as exc:
            parse_indexed_operand("0(r0)")
        assert exc.value.kind == ErrorKind.INDEX_R0

    @pytest.mark.parametrize("text", ["4(r1", "4(r1)x", "4(r1))", "4(r1)(r2)", "(r1"])
    def test_misplaced_parenthesis(self, text):
        """Test that the closing parenthesis must end the operand."""
        with pytest.raises(ParseError) as exc:
            parse_indexed_operand(text)
        assert exc.value.kind == ErrorKind.INVALID_ARGUMENT

    def test_parts_are_parsed_in_order(self):
        """Test that the immediate is checked before the register."""
        with pytest.raises(ParseError) as exc:
            parse_indexed_operand("zz(r99)")
        assert exc.value.kind == ErrorKind.INVALID_DIGIT
        with pytest.raises(ParseError) as exc:
            parse_indexed_operand("4(r99)")
        assert exc.value.kind == ErrorKind.UNKNOWN_REGISTER
        with pytest.raises(ParseError) as exc:
            parse_indexed_operand("(r1)")
        assert exc.value.kind == ErrorKind.EMPTY_ARGUMENT
        with pytest.raises(ParseError) as exc:
            parse_indexed_operand("4()")
        assert exc.value.kind == ErrorKind.EMPTY_ARGUMENT

    def test_register_without_immediate(self):
        """Test that a bare register is not an indexed operand."""
        with pytest.raises(ParseError) as exc:
            parse_indexed_operand("r0")
        assert exc.value.kind == ErrorKind.INVALID_DIGIT

    def test_too_long(self):
        """Test the operand length limit."""
        operand = "0" * (MAX_OPERAND_LENGTH - 4) + "(r1)"
        assert parse_indexed_operand(operand) == (0, 1)
        with pytest.raises(ParseError) as exc:
            parse_indexed_operand("0" + operand)
        assert exc.value.kind == ErrorKind.LONG_ARGUMENT


class TestFormatIndexedOperand:
    """Tests for format_indexed_operand."""

    def test_format(self):
        """Test that a zero base register is left out."""
        assert format_indexed_operand(0, 0) == "0"
        assert format_indexed_operand(0x39, 1) == "57(r1)"
        assert format_indexed_operand(0x3FFFC, 15) == "-4(r15)"
