"""Channel configuration register.

Each channel takes a 3-bit ``ChannelState`` code. The codes are packed
back-to-back, most significant bit first, channel 0 at the very top of word 0:

    bit     0   3   6       27  30  33
            |c0 |c1 |c2 ... |c9 |c10|c11| ...
    word    |<------ word 0 ------>|<-- word 1 ...

so channel ``i`` occupies bits ``[3i, 3i + 3)`` of the bit stream and a code
can straddle two adjacent words (channel 10 spans bits 30-32). For the typical 64
channels the register is 192 bits, six words.

A new register is zero-filled, which is not a valid channel state: every
channel must be set (or the register created with an initial ``state``)
before it is read back. The register is usually paired with
``OpCode.UPDATE_CHANNEL``.

Example::

    conf = ChannelConf(64)
    conf.set(31, ChannelState.HI_SPEED)
    conf.set_all(ChannelState.VOLT_ARB)
    for state in conf:
        print(state)
    conf.serialize()  # [0x92492492, 0x49249249, 0x24924924, ...]
"""

import logging
from collections.abc import Iterator

from .base import InvalidValueError, Register, check_channel
from .bits import WordBits
from .enums import CHANNEL_STATE_BITS, ChannelState

logger = logging.getLogger(__name__)


class ChannelConf(Register):
    """Per-channel output mode for ``channels`` channels."""

    def __init__(self, channels: int, state: ChannelState | None = None):
        """Create a channel configuration register.

        Args:
            channels: Number of channels (64 on a standard instrument)
            state: Optional state applied to every channel

        Raises:
            InvalidValueError: If channels is not positive
        """
        if channels < 1:
            raise InvalidValueError(f"Channel count must be positive, got {channels}")

        self._bits = WordBits(channels * CHANNEL_STATE_BITS)
        logger.debug(
            f"Allocated channel configuration for {channels} channels "
            f"({self._bits.word_count} words)"
        )

        if state is not None:
            self.set_all(state)

    def _span(self, idx: int) -> tuple[int, int]:
        check_channel(idx, len(self))
        start = idx * CHANNEL_STATE_BITS
        return start, start + CHANNEL_STATE_BITS

    def set(self, idx: int, state: ChannelState) -> None:
        """Set the state of one channel.

        Raises:
            ChannelIndexError: If idx is out of range
            InvalidValueError: If state is not a valid ChannelState
        """
        state = ChannelState.from_code(state)
        self._bits.store(*self._span(idx), int(state))

    def get(self, idx: int) -> ChannelState:
        """Get the state of one channel.

        Raises:
            ChannelIndexError: If idx is out of range
            InvalidValueError: If the channel holds no valid state (never set)
        """
        return ChannelState.from_code(self._bits.load(*self._span(idx)))

    def set_all(self, state: ChannelState) -> None:
        """Set every channel to the same state."""
        state = ChannelState.from_code(state)
        for idx in range(len(self)):
            self.set(idx, state)

    def __len__(self) -> int:
        # bit length is always a multiple of CHANNEL_STATE_BITS
        return len(self._bits) // CHANNEL_STATE_BITS

    def __iter__(self) -> Iterator[ChannelState]:
        for idx in range(len(self)):
            yield self.get(idx)

    def serialize(self) -> list[int]:
        return self._bits.words()
