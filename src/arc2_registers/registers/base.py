"""Serializable register contract and register exceptions.

Every register, whatever its internal layout, answers one question for the
instruction assembler: "what are my 32-bit words?". ``Serializable`` is that
contract. ``Register`` is the base class shared by the stateful registers and
adds value semantics (equality, copying and a readable ``repr``).
"""

import abc
import copy
from typing import Protocol, runtime_checkable


class RegisterError(Exception):
    """Base exception for register programming errors."""

    pass


class ChannelIndexError(RegisterError, IndexError):
    """Raised when a channel index is outside a register's configured range."""

    pass


class InvalidValueError(RegisterError, ValueError):
    """Raised when a value or bit pattern has no valid wire encoding."""

    pass


@runtime_checkable
class Serializable(Protocol):
    """Anything that can be written to the instrument as 32-bit words."""

    def serialize(self) -> list[int]:
        """Return the ordered 32-bit words representing the current value."""
        ...


class Register(abc.ABC):
    """Base class for mutable registers.

    Subclasses implement ``serialize()``. Registers are plain values: two
    registers are equal when they have the same type and the same state, and
    ``copy()`` returns an instance sharing no mutable state with the original.
    """

    @abc.abstractmethod
    def serialize(self) -> list[int]:
        """Return the ordered 32-bit words representing the current value.

        Must be pure and must never fail for a value reachable through the
        public constructors and setters.
        """

    @property
    def word_count(self) -> int:
        """Number of words produced by ``serialize()``."""
        return len(self.serialize())

    def copy(self):
        """Return an independent copy of this register."""
        return copy.deepcopy(self)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return vars(self) == vars(other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        words = ", ".join(f"{word:#010x}" for word in self.serialize())
        return f"{type(self).__name__}([{words}])"


def check_channel(idx: int, channels: int) -> None:
    """Validate a channel index against a register's channel count.

    Args:
        idx: Channel index to validate
        channels: Number of channels in the register

    Raises:
        ChannelIndexError: If idx is not in [0, channels)
    """
    if not 0 <= idx < channels:
        raise ChannelIndexError(
            f"Channel {idx} out of range [0-{channels - 1}]"
        )
