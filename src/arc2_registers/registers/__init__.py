"""Instrument register types.

Every register serializes to the list of 32-bit words the instrument expects:

- ``OpCode``, ``Empty``, ``Terminate``: single-word scalar registers
- ``DACMask``: DAC half selection flags
- ``ChannelConf``: per-channel 3-bit output mode
- ``SourceConf``: digipot and current source state
- ``DACVoltage``: per-channel Vhigh/Vlow codes
- ``U32Mask``, ``ADCMask``, ``IOMask``: boolean channel masks
"""

from .base import (
    ChannelIndexError,
    InvalidValueError,
    Register,
    RegisterError,
    Serializable,
)
from .channelconf import ChannelConf
from .dacmask import CHANNEL_MAP, DACHalf, DACMask, channel_to_half
from .dacvoltage import DACVoltage
from .enums import ChannelState, CurrentSourceState, WordSize
from .opcode import Empty, OpCode, Terminate
from .sourceconf import DIGIPOT_DEFAULT, DIGIPOT_MAX, SourceConf
from .u32mask import ADCMask, IOMask, U32Mask

__all__ = [
    # Contract and errors
    "Serializable",
    "Register",
    "RegisterError",
    "ChannelIndexError",
    "InvalidValueError",
    # Scalar registers
    "OpCode",
    "Empty",
    "Terminate",
    # DAC selection
    "DACHalf",
    "DACMask",
    "CHANNEL_MAP",
    "channel_to_half",
    # Channel and source configuration
    "ChannelState",
    "ChannelConf",
    "CurrentSourceState",
    "SourceConf",
    "DIGIPOT_DEFAULT",
    "DIGIPOT_MAX",
    # Voltages
    "DACVoltage",
    # Channel masks
    "WordSize",
    "U32Mask",
    "ADCMask",
    "IOMask",
]
