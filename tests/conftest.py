"""Pytest configuration for arc2-registers tests."""

import pytest

from arc2_registers import (
    ADCMask,
    ChannelConf,
    DACMask,
    DACVoltage,
    IOMask,
    SourceConf,
)


@pytest.fixture
def channel_conf() -> ChannelConf:
    """A zero-filled 64 channel configuration register."""
    return ChannelConf(64)


@pytest.fixture
def dac_mask() -> DACMask:
    """An empty DAC selection mask."""
    return DACMask()


@pytest.fixture
def source_conf() -> SourceConf:
    """A source configuration register in its default state."""
    return SourceConf()


@pytest.fixture
def dac_voltage() -> DACVoltage:
    """A four channel DAC voltage register at zero volts."""
    return DACVoltage()


@pytest.fixture
def adc_mask() -> ADCMask:
    """A measurement channel mask with every channel disabled."""
    return ADCMask()


@pytest.fixture
def io_mask() -> IOMask:
    """An I/O channel mask with every channel disabled."""
    return IOMask()
