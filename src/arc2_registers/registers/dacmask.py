"""DAC channel selection mask.

The 64 output channels are driven by 8 DAC clusters of 8 channels each. Each
cluster is split in two halves of 4 channels, and the selection mask has one
flag per half rather than one per channel: selecting channel 3 selects
channels 0-3 (``CH00_03``) and selecting channel 29 selects channels 28-31
(``CH28_31``). Two extra flags address the auxiliary DACs, which are outside
the channel space and only reachable through the raw flag API.

Example::

    mask = DACMask()
    mask.set_channels([2, 3, 50, 61])
    assert mask.flags == DACHalf.CH00_03 | DACHalf.CH48_51 | DACHalf.CH60_63
    assert mask.as_u32() == 0x00009001
"""

import enum
from collections.abc import Iterable

from .base import InvalidValueError, Register, check_channel

NUM_CHANNELS = 64
CHANNELS_PER_HALF = 4


class DACHalf(enum.IntFlag):
    """Flags of the DAC selection mask."""

    NONE = 0  # No selection

    CH00_03 = 1 << 0  # DAC0; first half
    CH04_07 = 1 << 1  # DAC0; second half
    CH08_11 = 1 << 2  # DAC1; first half
    CH12_15 = 1 << 3  # DAC1; second half
    CH16_19 = 1 << 4  # DAC2; first half
    CH20_23 = 1 << 5  # DAC2; second half
    CH24_27 = 1 << 6  # DAC3; first half
    CH28_31 = 1 << 7  # DAC3; second half
    CH32_35 = 1 << 8  # DAC4; first half
    CH36_39 = 1 << 9  # DAC4; second half
    CH40_43 = 1 << 10  # DAC5; first half
    CH44_47 = 1 << 11  # DAC5; second half
    CH48_51 = 1 << 12  # DAC6; first half
    CH52_55 = 1 << 13  # DAC6; second half
    CH56_59 = 1 << 14  # DAC7; first half
    CH60_63 = 1 << 15  # DAC7; second half
    AUX0 = 1 << 16  # Auxiliary DAC0
    AUX1 = 1 << 17  # Auxiliary DAC1

    # Whole clusters
    DAC0 = CH00_03 | CH04_07
    DAC1 = CH08_11 | CH12_15
    DAC2 = CH16_19 | CH20_23
    DAC3 = CH24_27 | CH28_31
    DAC4 = CH32_35 | CH36_39
    DAC5 = CH40_43 | CH44_47
    DAC6 = CH48_51 | CH52_55
    DAC7 = CH56_59 | CH60_63

    ALL = 0xFFFF  # Every half, auxiliary DACs excluded


_VALID_BITS = DACHalf.ALL | DACHalf.AUX0 | DACHalf.AUX1

# channel index -> half flag
CHANNEL_MAP: tuple[DACHalf, ...] = tuple(
    DACHalf(1 << (chan // CHANNELS_PER_HALF)) for chan in range(NUM_CHANNELS)
)


def channel_to_half(chan: int) -> DACHalf:
    """Return the half flag that selects a channel.

    Raises:
        ChannelIndexError: If chan is not in [0, 63]
    """
    check_channel(chan, NUM_CHANNELS)
    return CHANNEL_MAP[chan]


def _as_flags(flags: "int | DACHalf | DACMask") -> DACHalf:
    if isinstance(flags, DACMask):
        return flags.flags
    value = int(flags)
    if value < 0 or value & ~int(_VALID_BITS):
        raise InvalidValueError(f"Invalid DAC mask flags {value:#x}")
    return DACHalf(value)


class DACMask(Register):
    """DAC channel selection register (one word).

    The all-zero mask (``DACHalf.NONE``) is a valid state meaning "no
    selection". Unsetting a channel clears the whole half it belongs to.
    """

    def __init__(self, flags: int | DACHalf = DACHalf.NONE):
        self._flags = _as_flags(flags)

    @property
    def flags(self) -> DACHalf:
        """Currently selected flags."""
        return self._flags

    def set_channel(self, chan: int) -> None:
        """Select the half containing ``chan``."""
        self._flags |= channel_to_half(chan)

    def unset_channel(self, chan: int) -> None:
        """Deselect the half containing ``chan``."""
        self._flags &= ~channel_to_half(chan)

    def set_channels(self, chans: Iterable[int]) -> None:
        """Select the halves containing each of ``chans``.

        Every index is checked before the mask changes.
        """
        for half in [channel_to_half(chan) for chan in chans]:
            self._flags |= half

    def unset_channels(self, chans: Iterable[int]) -> None:
        """Deselect the halves containing each of ``chans``.

        Every index is checked before the mask changes.
        """
        for half in [channel_to_half(chan) for chan in chans]:
            self._flags &= ~half

    def has_channel(self, chan: int) -> bool:
        """Return True if the half containing ``chan`` is selected."""
        return bool(self._flags & channel_to_half(chan))

    def set_all(self) -> None:
        """Select every half. Auxiliary flags are left as they are."""
        self._flags |= DACHalf.ALL

    def unset_all(self) -> None:
        """Deselect every half. Auxiliary flags are left as they are."""
        self._flags &= ~DACHalf.ALL

    def set_flags(self, flags: int | DACHalf) -> None:
        """Set raw flags, including the auxiliary DACs."""
        self._flags |= _as_flags(flags)

    def unset_flags(self, flags: int | DACHalf) -> None:
        """Clear raw flags, including the auxiliary DACs."""
        self._flags &= ~_as_flags(flags)

    def clear(self) -> None:
        """Reset to ``DACHalf.NONE``."""
        self._flags = DACHalf.NONE

    def as_u32(self) -> int:
        return int(self._flags)

    def serialize(self) -> list[int]:
        return [self.as_u32()]

    def __or__(self, other: "DACMask | DACHalf") -> "DACMask":
        return DACMask(self._flags | _as_flags(other))

    __ror__ = __or__

    def __ior__(self, other: "DACMask | DACHalf") -> "DACMask":
        self._flags |= _as_flags(other)
        return self
