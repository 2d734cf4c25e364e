"""
Tests for instruction decoding, encoding and validation.
"""

import pytest

from asm374.codec import (
    check_instruction,
    decode_instruction,
    encode_instruction,
    is_valid_instruction,
)
from asm374.errors import ErrorKind, InstructionError
from asm374.instructions import (
    BInstruction,
    IInstruction,
    JInstruction,
    MInstruction,
    RInstruction,
    UnknownInstruction,
)

from .words import sample_words


class TestDecode:
    """Tests for decode_instruction."""

    def test_r_format(self):
        """Test decoding a register-register instruction."""
        assert decode_instruction(0x28918000) == RInstruction(5, ra=1, rb=2, rc=3)

    def test_i_format(self):
        """Test decoding an immediate instruction."""
        assert decode_instruction(0x6093FFFF) == IInstruction(12, ra=1, rb=2, imm=0x3FFFF)

    def test_b_format(self):
        """Test decoding a branch, including an undefined condition."""
        assert decode_instruction(0x9900270F) == BInstruction(19, ra=2, cond=0, imm=9999)
        assert decode_instruction(0x98780000) == BInstruction(19, ra=0, cond=15, imm=0)

    def test_j_and_m_format(self):
        """Test decoding single-register and opcode-only instructions."""
        assert decode_instruction(0xA7800000) == JInstruction(20, ra=15)
        assert decode_instruction(0xD8000000) == MInstruction(27)

    def test_unknown_opcode(self):
        """Test that an undefined opcode keeps only the opcode."""
        assert decode_instruction(0xE7FFFFFF) == UnknownInstruction(28)
        assert decode_instruction(0xFFFFFFFF) == UnknownInstruction(31)

    def test_unused_bits_ignored(self):
        """Test that bits outside the format don't affect decoding."""
        assert decode_instruction(0x28918000 | 0x7FFF) == decode_instruction(0x28918000)
        assert decode_instruction(0x08040000) == IInstruction(1)  # bit 18
        assert decode_instruction(0xD7FFFFFF) == MInstruction(26)

    @pytest.mark.parametrize("word", [-1, 1 << 32, "28918000", 1.0])
    def test_not_a_word(self, word):
        """Test that non-words are rejected."""
        with pytest.raises(ValueError):
            decode_instruction(word)


class TestEncode:
    """Tests for encode_instruction."""

    def test_encode(self):
        """Test encoding one instruction of each format."""
        assert encode_instruction(RInstruction(5, 1, 2, 3)) == 0x28918000
        assert encode_instruction(IInstruction(2, ra=1, rb=2, imm=4)) == 0x10900004
        assert encode_instruction(BInstruction(19, ra=2, cond=3, imm=0x3F6D7)) == 0x991BF6D7
        assert encode_instruction(JInstruction(20, ra=15)) == 0xA7800000
        assert encode_instruction(MInstruction(26)) == 0xD0000000
        assert encode_instruction(UnknownInstruction(31)) == 0xF8000000

    def test_unused_bits_cleared(self):
        """Test that decode then encode clears don't-care bits."""
        assert encode_instruction(decode_instruction(0x28918000 | 0x7FFF)) == 0x28918000
        assert encode_instruction(decode_instruction(0x08040000)) == 0x08000000
        assert encode_instruction(decode_instruction(0xE7FFFFFF)) == 0xE0000000


class TestCheck:
    """Tests for check_instruction."""

    def test_valid(self):
        """Test that well-formed instructions of every format pass."""
        for word in (0x28918000, 0x6093FFFF, 0x991BF6D7, 0xA7800000, 0xD8000000):
            check_instruction(decode_instruction(word))

    def test_unknown_opcode(self):
        """Test that undefined opcodes are reported."""
        with pytest.raises(InstructionError) as exc:
            check_instruction(decode_instruction(0xE0000000))
        assert exc.value.kind == ErrorKind.INVALID_OPCODE

    def test_undefined_condition(self):
        """Test that condition codes 4-15 are reported."""
        for cond in range(4, 16):
            with pytest.raises(InstructionError) as exc:
                check_instruction(BInstruction(19, cond=cond))
            assert exc.value.kind == ErrorKind.INVALID_CONDITION

    def test_out_of_range_register(self):
        """Test that a constructed register outside r0-r15 is reported."""
        with pytest.raises(InstructionError) as exc:
            check_instruction(RInstruction(3, ra=1, rb=16, rc=0))
        assert exc.value.kind == ErrorKind.INVALID_REGISTER

    def test_semantics_not_checked(self):
        """Test that validation is purely structural."""
        assert is_valid_instruction(IInstruction(16, ra=1, rb=0))  # div by r0
        assert not is_valid_instruction(UnknownInstruction(29))


class TestCodecProperties:
    """Properties that hold for every 32-bit word."""

    def test_no_bits_invented(self):
        """Test that decode then encode never sets a bit the word lacks."""
        for word in sample_words():
            encoded = encode_instruction(decode_instruction(word))
            assert encoded & ~word == 0, f"{word:08X} -> {encoded:08X}"

    def test_idempotent(self):
        """Test that decode then encode is idempotent."""
        for word in sample_words():
            once = encode_instruction(decode_instruction(word))
            assert encode_instruction(decode_instruction(once)) == once
