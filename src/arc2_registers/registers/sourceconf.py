"""Output source configuration register.

One word holding two independent fields, numbered most significant bit first:

- bits [0:10)  output digipot, clamped to 0x000-0x300
- bits [28:32) current source state (``CurrentSourceState``)

The register is usually followed by a ``ChannelConf`` in the same
instruction.
"""

from .base import Register
from .bits import WordBits
from .enums import CurrentSourceState

DIGIPOT_BITS = (0, 10)
CURSOURCE_BITS = (28, 32)

DIGIPOT_MAX = 0x300
DIGIPOT_DEFAULT = 0x1CD  # roughly 11 kOhm


class SourceConf(Register):
    """Digipot and current source configuration of the output source.

    A new register has the digipot at ``DIGIPOT_DEFAULT`` and the current
    source in ``CurrentSourceState.MAINTAIN``.
    """

    def __init__(self):
        self._bits = WordBits(32)
        self.set_digipot(DIGIPOT_DEFAULT)

    def set_digipot(self, value: int) -> None:
        """Set the raw digipot value.

        Values above ``DIGIPOT_MAX`` (and below zero) are clamped into range
        to keep the instrument safe.
        """
        value = min(max(value, 0), DIGIPOT_MAX)
        self._bits.store(*DIGIPOT_BITS, value)

    def get_digipot(self) -> int:
        """Get the raw digipot value."""
        return self._bits.load(*DIGIPOT_BITS)

    def set_cursource_state(self, state: CurrentSourceState) -> None:
        """Set the current source state.

        Raises:
            InvalidValueError: If state is not a CurrentSourceState
        """
        state = CurrentSourceState.from_code(state)
        self._bits.store(*CURSOURCE_BITS, int(state))

    def get_cursource_state(self) -> CurrentSourceState:
        """Get the current source state."""
        return CurrentSourceState.from_code(self._bits.load(*CURSOURCE_BITS))

    def serialize(self) -> list[int]:
        return self._bits.words()
