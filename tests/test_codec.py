"""
Tests for the VLQ mappings codec.
"""

import pytest
from mapcompose import codec
from mapcompose.errors import CodecError


class TestDecode:
    """Test decoding mappings strings."""

    def test_empty(self):
        """An empty string has no lines."""
        assert codec.decode("") == []

    def test_single_segment(self):
        """AAAA is the origin of source 0."""
        assert codec.decode("AAAA") == [[[0, 0, 0, 0]]]

    def test_fields_accumulate_across_lines(self):
        """Source fields carry over; the generated column restarts per line."""
        assert codec.decode("AAAA;EACE;AACF") == [
            [[0, 0, 0, 0]],
            [[2, 0, 1, 2]],
            [[0, 0, 2, 0]],
        ]

    def test_generated_column_accumulates_within_line(self):
        """Segments on one line add up their generated columns."""
        assert codec.decode("AAAA,GAAG") == [[[0, 0, 0, 0], [3, 0, 0, 3]]]

    def test_name_field(self):
        """Five-field segments carry a name index."""
        assert codec.decode("AAAAA,EAAEC") == [[[0, 0, 0, 0, 0], [2, 0, 0, 2, 1]]]

    def test_one_field_segment(self):
        """A one-field segment is an unmapped column."""
        assert codec.decode("E") == [[[2]]]

    def test_empty_lines(self):
        """Consecutive separators give empty lines."""
        assert codec.decode(";;AAAA") == [[], [], [[0, 0, 0, 0]]]

    def test_large_value(self):
        """Multi-digit VLQ values decode correctly."""
        assert codec.decode("gBAAA") == [[[16, 0, 0, 0]]]

    def test_invalid_character(self):
        """Characters outside base64 are rejected."""
        with pytest.raises(CodecError):
            codec.decode("AA!A")

    def test_truncated_value(self):
        """A continuation digit with nothing after it is rejected."""
        with pytest.raises(CodecError):
            codec.decode("AAAg")

    def test_bad_field_count(self):
        """Segments with 2 or 3 fields are rejected."""
        with pytest.raises(CodecError):
            codec.decode("AA")


class TestEncode:
    """Test encoding decoded segments."""

    def test_empty(self):
        assert codec.encode([]) == ""

    def test_relative_encoding(self):
        """Encoding writes deltas, not absolute values."""
        decoded = [[[0, 0, 0, 0]], [[2, 0, 1, 2]], [[0, 0, 2, 0]]]
        assert codec.encode(decoded) == "AAAA;EACE;AACF"

    def test_multi_digit_values(self):
        assert codec.encode([[[16, 0, 0, 0]], [[0, 0, 0, 0]]]) == "gBAAA;AAAA"

    def test_empty_lines_are_kept(self):
        assert codec.encode([[], [[0, 0, 0, 0]]]) == ";AAAA"

    def test_bad_segment(self):
        """Segments with an unsupported field count are rejected."""
        with pytest.raises(CodecError):
            codec.encode([[[0, 0]]])

    def test_decode_inverts_encode(self):
        """A real-world style string survives decode then encode."""
        mappings = "AAAA,SAASA,IAAI;AACX,IAAIC;;EAEF"
        assert codec.encode(codec.decode(mappings)) == mappings


class TestEncodeChecks:
    """Test rejection of malformed decoded input."""

    def test_segment_not_a_list(self):
        with pytest.raises(CodecError):
            codec.encode([[0, 0, 0, 0]])

    def test_float_field(self):
        with pytest.raises(CodecError):
            codec.encode([[[0, 0, 0, 1.5]]])
