"""
Tests for instruction formatting and explanation.
"""

from asm374.codec import decode_instruction
from asm374.formatter import explain_instruction, format_instruction
from asm374.instructions import BInstruction, IInstruction, MInstruction, UnknownInstruction

from .words import sample_words


class TestFormatInstruction:
    """Tests for format_instruction."""

    def test_each_format(self):
        """Test canonical text for one instruction of each format."""
        assert format_instruction(decode_instruction(0x28918000)) == "and r1, r2, r3"
        assert format_instruction(decode_instruction(0x6093FFFF)) == "addi r1, r2, -1"
        assert format_instruction(decode_instruction(0x9900270F)) == "brzr r2, 9999"
        assert format_instruction(decode_instruction(0xA7800000)) == "jr r15"
        assert format_instruction(decode_instruction(0xD8000000)) == "halt"

    def test_indexed_operands(self):
        """Test that a zero base register is left out."""
        assert format_instruction(IInstruction(0, ra=4, rb=0, imm=12)) == "ld r4, 12"
        assert format_instruction(IInstruction(0, ra=4, rb=1, imm=12)) == "ld r4, 12(r1)"
        assert format_instruction(IInstruction(2, ra=1, rb=2, imm=0x3FFFC)) == "st -4(r2), r1"

    def test_unspoken_immediate(self):
        """Test that two-register ALU ops don't show their immediate field."""
        assert format_instruction(IInstruction(15, ra=6, rb=7, imm=99)) == "mul r6, r7"

    def test_condition_suffix(self):
        """Test branch condition suffixes, including undefined ones."""
        assert format_instruction(BInstruction(19, ra=1, cond=3, imm=0)) == "brmi r1, 0"
        assert format_instruction(BInstruction(19, ra=1, cond=9, imm=0)) == "br? r1, 0"

    def test_unknown_opcode(self):
        """Test that undefined opcodes render as a question mark."""
        assert format_instruction(UnknownInstruction(28)) == "?"

    def test_never_empty(self):
        """Test that every word formats to non-empty text."""
        for word in sample_words():
            assert format_instruction(decode_instruction(word))


class TestExplainInstruction:
    """Tests for explain_instruction."""

    def test_r_format(self):
        """Test explaining a register-register instruction."""
        assert explain_instruction(decode_instruction(0x28918000)) == (
            "Op:00101|Ra:0001|Rb:0010|Rc:0011|Unk:???????????????\n"
            "R Op=and Ra=r1 Rb=r2 Rc=r3"
        )

    def test_b_format(self):
        """Test that the unused bit between fields is shown in place."""
        assert explain_instruction(decode_instruction(0x9900270F)) == (
            "Op:10011|Ra:0010|Cond:0000|Unk:?|Imm:000010011100001111\n"
            "B Op=br Ra=r2 Cond=zr Imm=9999"
        )

    def test_m_format(self):
        """Test explaining an opcode-only instruction."""
        assert explain_instruction(MInstruction(26)) == (
            "Op:11010|Unk:" + "?" * 27 + "\nM Op=nop"
        )

    def test_unknown_opcode(self):
        """Test explaining an undefined opcode."""
        assert explain_instruction(UnknownInstruction(28)) == (
            "Op:11100|Unk:" + "?" * 27 + "\n?"
        )

    def test_undefined_condition(self):
        """Test that an undefined condition is shown as a question mark."""
        text = explain_instruction(BInstruction(19, ra=0, cond=15, imm=0))
        assert "Cond:1111" in text
        assert text.endswith("Cond=? Imm=0")

    def test_groups_cover_word(self):
        """Test that the bit groups always add up to 32 bits."""
        for word in sample_words(count=200):
            groups = explain_instruction(decode_instruction(word)).split("\n")[0]
            bits = sum(len(group.split(":")[1]) for group in groups.split("|"))
            assert bits == 32
