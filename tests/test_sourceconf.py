"""Unit tests for the source configuration register.

Tests cover:
- Default digipot and current source state
- Digipot placement and clamping
- Current source state placement
"""

import logging

import pytest

from arc2_registers import (
    DIGIPOT_DEFAULT,
    DIGIPOT_MAX,
    CurrentSourceState,
    InvalidValueError,
    SourceConf,
)


class TestSourceConfDefaults:
    """Tests for a new source configuration register."""

    def test_default_digipot(self, source_conf):
        """Test the safe default digipot value."""
        assert DIGIPOT_DEFAULT == 0x1CD
        assert source_conf.get_digipot() == 0x1CD

    def test_default_state(self, source_conf):
        """Test that the current source defaults to MAINTAIN."""
        assert source_conf.get_cursource_state() is CurrentSourceState.MAINTAIN

    def test_default_word(self, source_conf):
        """Test the default serialized word."""
        assert source_conf.serialize() == [0x73400000]


class TestSourceConfFields:
    """Tests for digipot and current source fields."""

    def test_documented_sequence(self, source_conf):
        """Test digipot, state and clamping in sequence."""
        source_conf.set_digipot(0x200)
        assert source_conf.get_digipot() == 0x200
        assert source_conf.serialize() == [0x80000000]

        source_conf.set_cursource_state(CurrentSourceState.HI_SPEED)
        assert source_conf.get_cursource_state() is CurrentSourceState.HI_SPEED
        assert source_conf.serialize() == [0x80000003]

        source_conf.set_digipot(0x400)
        assert source_conf.get_digipot() == 0x300

    @pytest.mark.parametrize(
        "value, expected",
        [(0x000, 0x000), (0x2FF, 0x2FF), (0x300, 0x300), (0x301, 0x300), (0xFFFF, 0x300)],
    )
    def test_digipot_clamp(self, source_conf, value, expected):
        """Test that the digipot never exceeds DIGIPOT_MAX."""
        source_conf.set_digipot(value)
        assert source_conf.get_digipot() == expected
        assert source_conf.get_digipot() <= DIGIPOT_MAX

    def test_negative_digipot_clamps_to_zero(self, source_conf):
        """Test that negative digipot values clamp to zero."""
        source_conf.set_digipot(-5)
        assert source_conf.get_digipot() == 0

    def test_clamp_is_silent(self, source_conf, caplog):
        """Test that clamping neither raises nor logs."""
        with caplog.at_level(logging.DEBUG):
            source_conf.set_digipot(0x400)
        assert caplog.records == []

    @pytest.mark.parametrize("state", list(CurrentSourceState))
    def test_state_round_trip(self, source_conf, state):
        """Test that every state reads back and keeps the digipot."""
        source_conf.set_digipot(0x300)
        source_conf.set_cursource_state(state)
        assert source_conf.get_cursource_state() is state
        assert source_conf.get_digipot() == 0x300
        assert source_conf.serialize() == [0xC0000000 | state]

    @pytest.mark.parametrize("code", [4, 15, -1])
    def test_invalid_state(self, source_conf, code):
        """Test that undefined state codes are rejected."""
        with pytest.raises(InvalidValueError, match="current source state"):
            source_conf.set_cursource_state(code)

    def test_copy_is_independent(self, source_conf):
        """Test that copies do not alias."""
        copy = source_conf.copy()
        copy.set_digipot(0x100)
        assert source_conf.get_digipot() == DIGIPOT_DEFAULT
        assert copy != source_conf
        assert SourceConf() == source_conf
