"""Scalar registers: operation codes, padding and the terminator word.

An instruction is an ``OpCode`` word, followed by its argument registers,
padded with ``Empty`` words to the instruction length and closed by a
``Terminate`` word. Assembling instructions happens elsewhere; this module
only provides the words.
"""

import enum

from .base import InvalidValueError, Register


class OpCode(enum.IntEnum):
    """Operation identifier leading every instruction.

    Each tag is a distinct single-bit pattern.
    """

    SET_DAC = 0x00000001  # Set a DAC configuration
    UPDATE_DAC = 0x00000002  # Enable a DAC configuration set with SET_DAC
    CURRENT_READ = 0x00000004
    VOLTAGE_READ = 0x00000008
    UPDATE_SELECTOR = 0x00000010
    UPDATE_LOGIC = 0x00000020  # Set logic levels
    UPDATE_CHANNEL = 0x00000040  # Update channel configuration
    CLEAR = 0x00000080  # Clear instrument buffer
    HS_PULSE_CONFIG = 0x00000100  # Configure high speed pulse operation
    HS_PULSE_START = 0x00000200  # Initiate high speed pulse operation
    MODIFY_CHANNEL = 0x00000400
    SET_DAC_OFFSET = 0x00001000  # Currently a no-op on the instrument

    @classmethod
    def from_word(cls, word: int) -> "OpCode":
        """Map an instruction word back to its operation code.

        Raises:
            InvalidValueError: If the word is not a known operation code
        """
        try:
            return cls(word)
        except ValueError:
            raise InvalidValueError(f"Unknown opcode word {word:#010x}") from None

    def serialize(self) -> list[int]:
        return [int(self)]


class _ConstantRegister(Register):
    """A register with a single fixed word and no configurable state."""

    WORD: int

    def serialize(self) -> list[int]:
        return [self.WORD]


class Empty(_ConstantRegister):
    """Padding word used to fill an instruction to its fixed length."""

    WORD = 0x00000000


class Terminate(_ConstantRegister):
    """End-of-instruction marker."""

    WORD = 0x80008000
