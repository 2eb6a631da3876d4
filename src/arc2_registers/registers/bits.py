"""Fixed-length MSB-first bit buffer backed by 32-bit words.

Every multi-bit register is stored as a ``bitarray`` in big-endian bit order,
so bit 0 of the buffer is the most significant bit of word 0, bit 31 is the
least significant bit of word 0, bit 32 is the most significant bit of
word 1 and so on. This is the bit numbering used throughout the instrument
wire layout, which means field offsets can be written exactly as they appear
in the register documentation.

The buffer is always padded to a whole number of words. Padding bits are
never addressable and always serialize as zero.
"""

from bitarray.util import ba2int, int2ba, zeros

from .base import InvalidValueError

WORD_SIZE = 32


class WordBits:
    """A zero-initialised bit buffer that serializes to 32-bit words.

    Attributes:
        word_count: Number of 32-bit words needed to hold the buffer
    """

    def __init__(self, nbits: int):
        """Allocate a buffer of ``nbits`` addressable bits.

        Args:
            nbits: Number of addressable bits (must be positive)

        Raises:
            InvalidValueError: If nbits is not positive
        """
        if nbits <= 0:
            raise InvalidValueError(f"Bit buffer length must be positive, got {nbits}")

        self._nbits = nbits
        self.word_count = -(-nbits // WORD_SIZE)
        self._bits = zeros(self.word_count * WORD_SIZE, endian="big")

    def __len__(self) -> int:
        return self._nbits

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WordBits):
            return NotImplemented
        return self._nbits == other._nbits and self._bits == other._bits

    def __repr__(self) -> str:
        return f"WordBits({self._bits[: self._nbits].to01()!r})"

    def _check_range(self, start: int, stop: int) -> None:
        if not 0 <= start < stop <= self._nbits:
            raise IndexError(
                f"Bit range [{start}:{stop}) out of bounds [0:{self._nbits})"
            )

    def get(self, index: int) -> bool:
        """Read a single bit (MSB-first index)."""
        self._check_range(index, index + 1)
        return bool(self._bits[index])

    def set(self, index: int, value: bool) -> None:
        """Write a single bit (MSB-first index)."""
        self._check_range(index, index + 1)
        self._bits[index] = bool(value)

    def setall(self, value: bool) -> None:
        """Set every addressable bit to ``value``, leaving padding at zero."""
        fill = zeros(self._nbits, endian="big")
        fill.setall(bool(value))
        self._bits[: self._nbits] = fill

    def load(self, start: int, stop: int) -> int:
        """Read the field ``[start, stop)`` as an unsigned integer.

        The bit at ``start`` is the most significant bit of the result. The
        field may straddle a word boundary.

        Args:
            start: First bit of the field
            stop: One past the last bit of the field

        Returns:
            Field value
        """
        self._check_range(start, stop)
        return ba2int(self._bits[start:stop], signed=False)

    def store(self, start: int, stop: int, value: int) -> None:
        """Write an unsigned integer into the field ``[start, stop)``.

        Args:
            start: First bit of the field
            stop: One past the last bit of the field
            value: Field value, must fit in ``stop - start`` bits

        Raises:
            InvalidValueError: If value does not fit in the field
        """
        self._check_range(start, stop)
        width = stop - start
        if not 0 <= value < (1 << width):
            raise InvalidValueError(
                f"Value {value:#x} does not fit in a {width}-bit field"
            )
        self._bits[start:stop] = int2ba(value, length=width, endian="big")

    def words(self) -> list[int]:
        """Serialize the buffer into 32-bit words, most significant bit first.

        Returns:
            A new list of ``word_count`` words
        """
        return [
            ba2int(self._bits[i : i + WORD_SIZE], signed=False)
            for i in range(0, len(self._bits), WORD_SIZE)
        ]

    def copy(self) -> "WordBits":
        """Return an independent copy of this buffer."""
        other = WordBits.__new__(WordBits)
        other._nbits = self._nbits
        other.word_count = self.word_count
        other._bits = self._bits.copy()
        return other
