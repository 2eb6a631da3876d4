"""Top level API.

This package provides the register-encoding layer of a host-side driver for
a multi-channel analog instrument. The instrument is programmed with
instructions made of 32-bit words; every register type here is a typed,
always well-formed value that serializes to the exact words the instrument
expects.

Provided registers:
- Scalar registers: OpCode, Empty (padding), Terminate
- DACMask: DAC half selection flags (16 halves + 2 auxiliary DACs)
- ChannelConf: per-channel output mode, 3 bits per channel
- SourceConf: output digipot and current source state
- DACVoltage: per-channel Vhigh/Vlow voltage codes
- U32Mask, ADCMask, IOMask: boolean channel enable masks

Transport, instruction assembly and calibration live elsewhere.

Example usage::

    from arc2_registers import ChannelConf, ChannelState, OpCode, Terminate

    conf = ChannelConf(64)
    conf.set_all(ChannelState.VOLT_ARB)

    words = OpCode.UPDATE_CHANNEL.serialize() + conf.serialize()
    words += Terminate().serialize()
    print([f"{word:#010x}" for word in words])

.. data:: __version__
    :type: str

    Version number as calculated by https://github.com/pypa/setuptools_scm
"""

from ._version import __version__
from .registers import (
    CHANNEL_MAP,
    DIGIPOT_DEFAULT,
    DIGIPOT_MAX,
    ADCMask,
    ChannelConf,
    ChannelIndexError,
    ChannelState,
    CurrentSourceState,
    DACHalf,
    DACMask,
    DACVoltage,
    Empty,
    InvalidValueError,
    IOMask,
    OpCode,
    Register,
    RegisterError,
    Serializable,
    SourceConf,
    Terminate,
    U32Mask,
    WordSize,
    channel_to_half,
)

__all__ = [
    "__version__",
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
