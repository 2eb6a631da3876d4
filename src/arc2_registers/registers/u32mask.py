"""Boolean channel masks of one to four words.

``U32Mask`` is a generic enable/disable mask of ``words × 32`` channels.
Channel numbering runs from the end of the bit stream: channel 0 is the least
significant bit of the *last* word and the highest channel is the most
significant bit of the *first* word. This is the reverse of the channel
configuration register, and is what the instrument expects for these masks.

Two fixed sizes are used by the instrument:

- ``ADCMask``: 2 words, 64 measurement channels (read current/voltage)
- ``IOMask``: 1 word, 32 digital I/O channels (update logic)

Example::

    mask = ADCMask()
    mask.set_enabled(31, True)
    mask.set_enabled(0, True)
    mask.set_enabled(62, True)
    assert mask.serialize() == [0x40000000, 0x80000001]
"""

import logging

from .base import InvalidValueError, Register, check_channel
from .bits import WORD_SIZE, WordBits
from .enums import WordSize

logger = logging.getLogger(__name__)


class U32Mask(Register):
    """Generic boolean channel mask with a fixed word count."""

    def __init__(self, words: int | WordSize):
        """Create a mask with every channel disabled.

        Args:
            words: Number of 32-bit words (1-4)

        Raises:
            InvalidValueError: If words is not a supported word size
        """
        try:
            words = WordSize(words)
        except ValueError:
            raise InvalidValueError(
                f"Unsupported mask word count {words!r} (expected 1-4)"
            ) from None

        self._bits = WordBits(words * WORD_SIZE)
        logger.debug(f"Allocated {type(self).__name__} with {len(self)} channels")

    def _position(self, idx: int) -> int:
        check_channel(idx, len(self))
        return len(self._bits) - 1 - idx

    def set_enabled(self, idx: int, status: bool) -> None:
        """Enable (True) or disable (False) a channel."""
        self._bits.set(self._position(idx), status)

    def get_enabled(self, idx: int) -> bool:
        """Return True if the channel is enabled."""
        return self._bits.get(self._position(idx))

    def set_enabled_all(self, status: bool) -> None:
        """Enable or disable every channel."""
        self._bits.setall(status)

    def toggle(self, idx: int) -> None:
        """Flip the state of a channel."""
        self.set_enabled(idx, not self.get_enabled(idx))

    def enabled_channels(self) -> list[int]:
        """Indices of the enabled channels, in ascending order."""
        return [idx for idx in range(len(self)) if self.get_enabled(idx)]

    def __len__(self) -> int:
        return len(self._bits)

    def serialize(self) -> list[int]:
        return self._bits.words()


class ADCMask(U32Mask):
    """Measurement channel mask (64 channels).

    Selects the channels a current or voltage read applies to.
    """

    WORDS = WordSize.WX2

    def __init__(self):
        super().__init__(self.WORDS)


class IOMask(U32Mask):
    """Digital I/O channel mask (32 channels).

    Selects the I/O channels configured by a logic update.
    """

    WORDS = WordSize.WX1

    def __init__(self):
        super().__init__(self.WORDS)
