"""DAC output voltage register.

Every DAC channel has two outputs, Vhigh and Vlow, each a 16-bit code where
``0x0000`` is the most negative voltage, ``0xFFFF`` the most positive and
``0x8000`` zero volts. Vhigh is normally at or above Vlow, and for ordinary
measurements both are equal (see ``DACVoltage.set``).

Each channel is one word, Vhigh in the upper half and Vlow in the lower half.
The default of four channels covers one half of a DAC cluster, matching a
single ``DACHalf`` flag of the selection mask.

Converting volts to codes is the caller's job; every 16-bit code is valid.

Example::

    reg = DACVoltage()
    reg.set(1, 0x8534)
    assert reg.get(1) == (0x8534, 0x8534)
    reg.set_high(2, 0x8534)
    assert reg.get(2) == (0x8000, 0x8534)
"""

from .base import InvalidValueError, Register, check_channel

VOLTAGE_MAX = 0xFFFF
DEFAULT_CHANNELS = 4


def _check_voltage(voltage: int) -> None:
    if not 0 <= voltage <= VOLTAGE_MAX:
        raise InvalidValueError(
            f"DAC voltage code {voltage:#x} out of range [0x0000-0xFFFF]"
        )


class DACVoltage(Register):
    """Vhigh/Vlow voltage codes for a group of DAC channels."""

    ZERO = 0x80008000  # both outputs at zero volts

    def __init__(self, channels: int = DEFAULT_CHANNELS):
        """Create a register with every channel at zero volts.

        Args:
            channels: Number of channels (default 4, half a DAC cluster)

        Raises:
            InvalidValueError: If channels is not positive
        """
        if channels < 1:
            raise InvalidValueError(f"Channel count must be positive, got {channels}")
        self._values = [self.ZERO] * channels

    def set_high(self, idx: int, voltage: int) -> None:
        """Set Vhigh of a channel, leaving Vlow untouched."""
        check_channel(idx, len(self))
        _check_voltage(voltage)
        self._values[idx] = (voltage << 16) | (self._values[idx] & 0xFFFF)

    def get_high(self, idx: int) -> int:
        """Get Vhigh of a channel."""
        check_channel(idx, len(self))
        return (self._values[idx] >> 16) & 0xFFFF

    def set_low(self, idx: int, voltage: int) -> None:
        """Set Vlow of a channel, leaving Vhigh untouched."""
        check_channel(idx, len(self))
        _check_voltage(voltage)
        self._values[idx] = (self._values[idx] & 0xFFFF0000) | voltage

    def get_low(self, idx: int) -> int:
        """Get Vlow of a channel."""
        check_channel(idx, len(self))
        return self._values[idx] & 0xFFFF

    def set(self, idx: int, voltage: int) -> None:
        """Set both Vhigh and Vlow of a channel to the same code."""
        self.set_low(idx, voltage)
        self.set_high(idx, voltage)

    def get(self, idx: int) -> tuple[int, int]:
        """Get ``(Vlow, Vhigh)`` of a channel."""
        return self.get_low(idx), self.get_high(idx)

    def __len__(self) -> int:
        return len(self._values)

    def serialize(self) -> list[int]:
        return list(self._values)
