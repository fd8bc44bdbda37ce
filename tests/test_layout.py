"""Tests for control-bit and enabled-byte classification."""
import pytest

from utf8play.core.layout import (
    BitRole,
    bit_roles,
    control_bits,
    declared_length,
    enabled_bytes,
)


class TestEnabledBytes:
    @pytest.mark.parametrize("packed,expected", [
        (0x41000000, (True, False, False, False)),
        (0xC2A20000, (True, True, False, False)),
        (0xE282AC00, (True, True, True, False)),
        (0xF09F9880, (True, True, True, True)),
    ])
    def test_by_form(self, packed, expected):
        assert enabled_bytes(packed) == expected

    def test_only_first_byte_matters(self):
        assert enabled_bytes(0xE2000000) == enabled_bytes(0xE2FFFFFF)

    def test_invalid_leads_enable_first_only(self):
        assert enabled_bytes(0x80808080) == (True, False, False, False)
        assert enabled_bytes(0xF8808080) == (True, False, False, False)


class TestControlBits:
    def test_one_byte(self):
        assert control_bits(0x41000000) == (0, 0, 0, 0)

    def test_two_byte(self):
        assert control_bits(0xC2A20000) == (0b1110_0000, 0b1100_0000, 0, 0)

    def test_three_byte(self):
        assert control_bits(0xE282AC00) == (0b1111_0000, 0b1100_0000, 0b1100_0000, 0)

    def test_four_byte(self):
        assert control_bits(0xF09F9880) == (0b1111_1000,) + (0b1100_0000,) * 3

    def test_invalid_lead(self):
        assert control_bits(0x80000000) == (0, 0, 0, 0)
        assert control_bits(0xFF000000) == (0, 0, 0, 0)


class TestDeclaredLength:
    def test_lengths(self):
        assert declared_length(0x00000000) == 1
        assert declared_length(0xDF000000) == 2
        assert declared_length(0xEF000000) == 3
        assert declared_length(0xF7000000) == 4
        assert declared_length(0xBF000000) == 0


class TestBitRoles:
    def test_three_byte(self):
        roles = bit_roles(0xE282AC00)
        C, D, X = BitRole.CONTROL, BitRole.DATA, BitRole.DISABLED
        assert roles[0] == (C, C, C, C, D, D, D, D)
        assert roles[1] == (C, C, D, D, D, D, D, D)
        assert roles[2] == (C, C, D, D, D, D, D, D)
        assert roles[3] == (X,) * 8

    def test_one_byte_all_data(self):
        assert bit_roles(0x41000000)[0] == (BitRole.DATA,) * 8
