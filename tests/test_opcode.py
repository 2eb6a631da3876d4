"""Unit tests for the scalar registers.

Tests cover:
- OpCode wire values and single-word serialization
- Mapping words back to opcodes
- Empty and Terminate constant words
"""

import pytest

from arc2_registers import Empty, InvalidValueError, OpCode, Serializable, Terminate

# =============================================================================
# OpCode Tests
# =============================================================================


class TestOpCode:
    """Tests for the OpCode enumeration."""

    @pytest.mark.parametrize(
        "opcode, word",
        [
            (OpCode.SET_DAC, 0x00000001),
            (OpCode.UPDATE_DAC, 0x00000002),
            (OpCode.CURRENT_READ, 0x00000004),
            (OpCode.VOLTAGE_READ, 0x00000008),
            (OpCode.UPDATE_SELECTOR, 0x00000010),
            (OpCode.UPDATE_LOGIC, 0x00000020),
            (OpCode.UPDATE_CHANNEL, 0x00000040),
            (OpCode.CLEAR, 0x00000080),
            (OpCode.HS_PULSE_CONFIG, 0x00000100),
            (OpCode.HS_PULSE_START, 0x00000200),
            (OpCode.MODIFY_CHANNEL, 0x00000400),
            (OpCode.SET_DAC_OFFSET, 0x00001000),
        ],
    )
    def test_opcode_serializes_to_tag(self, opcode, word):
        """Test that each opcode is a single word equal to its tag."""
        assert opcode.serialize() == [word]

    def test_opcode_set_is_closed(self):
        """Test that there are exactly twelve operation codes."""
        assert len(OpCode) == 12

    def test_opcodes_are_single_bits(self):
        """Test that every tag is a distinct single-bit pattern."""
        for opcode in OpCode:
            assert bin(opcode).count("1") == 1
        assert len({int(opcode) for opcode in OpCode}) == len(OpCode)

    def test_from_word(self):
        """Test mapping a word back to its opcode."""
        assert OpCode.from_word(0x40) is OpCode.UPDATE_CHANNEL
        assert OpCode.from_word(0x1000) is OpCode.SET_DAC_OFFSET

    @pytest.mark.parametrize("word", [0x0, 0x3, 0x800, 0x80008000])
    def test_from_word_unknown(self, word):
        """Test that unknown words are rejected, not defaulted."""
        with pytest.raises(InvalidValueError, match="Unknown opcode"):
            OpCode.from_word(word)

    def test_opcode_is_serializable(self):
        """Test that opcodes satisfy the serializable contract."""
        assert isinstance(OpCode.CLEAR, Serializable)


# =============================================================================
# Constant Register Tests
# =============================================================================


class TestConstantRegisters:
    """Tests for Empty and Terminate."""

    def test_empty_word(self):
        """Test the padding word."""
        assert Empty().serialize() == [0x00000000]

    def test_terminate_word(self):
        """Test the end-of-instruction word."""
        assert Terminate().serialize() == [0x80008000]

    def test_constants_are_equal_values(self):
        """Test that constant registers compare as values."""
        assert Empty() == Empty()
        assert Terminate() == Terminate()
        assert Empty() != Terminate()

    def test_repr(self):
        """Test the hex representation."""
        assert repr(Terminate()) == "Terminate([0x80008000])"
        assert repr(Empty()) == "Empty([0x00000000])"
