"""
Enumerations for register field values.
"""

import enum
from collections.abc import Sequence

from .base import InvalidValueError

CHANNEL_STATE_BITS = 3


class ChannelState(enum.IntEnum):
    """Output mode of a single channel (3-bit wire code).

    Codes 0 and 7 are unused by the instrument.
    """

    OPEN = 0b001  # Not connected to anything
    CLOSE_GND = 0b010  # Channel is GND
    CAP_GND = 0b011  # Channel capacitively coupled to GND
    VOLT_ARB = 0b100  # Arbitrary voltage operation
    CUR_ARB = 0b101  # Arbitrary current operation
    HI_SPEED = 0b110  # High speed pulse channel

    @classmethod
    def from_code(cls, code: int) -> "ChannelState":
        """Decode a 3-bit wire code.

        Args:
            code: Wire code (1-6)

        Returns:
            The matching channel state

        Raises:
            InvalidValueError: If code is not a valid channel state
        """
        try:
            return cls(code)
        except ValueError:
            raise InvalidValueError(
                f"Invalid channel state code {code!r} (expected 1-6)"
            ) from None

    @classmethod
    def from_bits(cls, bits: Sequence[bool]) -> "ChannelState":
        """Decode a channel state from its three bits, most significant first."""
        if len(bits) != CHANNEL_STATE_BITS:
            raise InvalidValueError(
                f"Channel state needs {CHANNEL_STATE_BITS} bits, got {len(bits)}"
            )
        code = 0
        for bit in bits:
            code = (code << 1) | bool(bit)
        return cls.from_code(code)

    @property
    def bits(self) -> tuple[bool, bool, bool]:
        """The three bits of this state, most significant first."""
        return (bool(self & 0b100), bool(self & 0b010), bool(self & 0b001))


class CurrentSourceState(enum.IntEnum):
    """Operating state of the current source."""

    MAINTAIN = 0b00  # Keep current status (default)
    OPEN = 0b01  # Disconnect current source
    VOLTAGE_ARB = 0b10  # Arbitrary voltage operation
    HI_SPEED = 0b11  # High speed pulse operation

    @classmethod
    def from_code(cls, code: int) -> "CurrentSourceState":
        """Decode a current source wire code.

        Raises:
            InvalidValueError: If code is not a valid current source state
        """
        try:
            return cls(code)
        except ValueError:
            raise InvalidValueError(
                f"Invalid current source state code {code!r} (expected 0-3)"
            ) from None


class WordSize(enum.IntEnum):
    """Word counts supported by the boolean channel masks."""

    WX1 = 1
    WX2 = 2
    WX3 = 3
    WX4 = 4
