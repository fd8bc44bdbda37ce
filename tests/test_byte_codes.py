"""Tests for byte code classification."""

import pytest
from utf8play.core.byte_codes import (
    ByteCategory,
    ByteCode,
    classify_byte,
    is_continuation_byte,
    BYTE_TABLE,
)


class TestByteTable:
    def test_has_256_entries(self):
        assert len(BYTE_TABLE) == 256

    def test_all_are_bytecodes(self):
        for bc in BYTE_TABLE:
            assert isinstance(bc, ByteCode)

    def test_values_sequential(self):
        for i, bc in enumerate(BYTE_TABLE):
            assert bc.value == i

    def test_category_counts(self):
        counts = {}
        for bc in BYTE_TABLE:
            counts[bc.category] = counts.get(bc.category, 0) + 1
        assert counts[ByteCategory.ASCII] == 128
        assert counts[ByteCategory.CONTINUATION] == 64
        assert counts[ByteCategory.LEAD2] == 32
        assert counts[ByteCategory.LEAD3] == 16
        assert counts[ByteCategory.LEAD4] == 8
        assert counts[ByteCategory.INVALID] == 8


class TestIsContinuationByte:
    def test_matches_top_two_bits_for_every_byte(self):
        for b in range(256):
            assert is_continuation_byte(b) == (b >> 6 == 2)

    def test_boundaries(self):
        assert not is_continuation_byte(0x7F)
        assert is_continuation_byte(0x80)
        assert is_continuation_byte(0xBF)
        assert not is_continuation_byte(0xC0)


class TestClassifyByte:
    def test_null(self):
        bc = classify_byte(0x00)
        assert bc.category == ByteCategory.ASCII
        assert bc.sequence_length == 1
        assert bc.control_mask == 0

    def test_uppercase_A(self):
        bc = classify_byte(0x41)
        assert bc.category == ByteCategory.ASCII
        assert bc.pattern == "0xxxxxxx"

    def test_utf8_continuation(self):
        bc = classify_byte(0x80)
        assert bc.category == ByteCategory.CONTINUATION
        assert bc.sequence_length == 0
        assert not bc.can_lead
        assert bc.control_mask == 0b1100_0000

    def test_utf8_2byte_lead(self):
        bc = classify_byte(0xC2)
        assert bc.category == ByteCategory.LEAD2
        assert bc.sequence_length == 2
        assert bc.control_mask == 0b1110_0000

    def test_overlong_leads_still_classify(self):
        assert classify_byte(0xC0).category == ByteCategory.LEAD2
        assert classify_byte(0xC1).category == ByteCategory.LEAD2

    def test_utf8_3byte_lead(self):
        bc = classify_byte(0xE2)
        assert bc.category == ByteCategory.LEAD3
        assert bc.control_mask == 0b1111_0000

    def test_utf8_4byte_lead(self):
        bc = classify_byte(0xF0)
        assert bc.category == ByteCategory.LEAD4
        assert bc.control_mask == 0b1111_1000

    def test_five_byte_lead_is_invalid(self):
        for v in range(0xF8, 0x100):
            bc = classify_byte(v)
            assert bc.category == ByteCategory.INVALID
            assert not bc.can_lead

    def test_hex_format(self):
        bc = classify_byte(0x0A)
        assert bc.hex == "0x0A"

    def test_out_of_range(self):
        with pytest.raises(ValueError):
            classify_byte(256)
        with pytest.raises(ValueError):
            classify_byte(-1)

    def test_frozen(self):
        bc = classify_byte(0x41)
        with pytest.raises(AttributeError):
            bc.value = 99
