"""Unit tests for the hex decoding helpers."""

import pytest

from quai_adapter.errors import HexDecodeError
from quai_adapter.utils.hex_utility import (
    hex_to_int,
    hex_to_optional_int,
    hex_tuple_to_ints,
    int_to_hex,
    is_absent,
)


class TestHexToInt:
    """Tests for hex_to_int."""

    def test_decodes_hex(self):
        """Test basic 0x-prefixed decoding."""
        assert hex_to_int("0x1f4", "number") == 500
        assert hex_to_int("0xFF", "number") == 255

    @pytest.mark.parametrize("value", [None, ""])
    def test_absent_defaults_to_zero(self, value):
        """Test that missing and empty values decode to zero."""
        assert hex_to_int(value, "gas") == 0

    def test_absent_uses_custom_default(self):
        """Test that a custom default is returned for absent values."""
        assert hex_to_int(None, "transactionIndex", default=None) is None

    def test_empty_quantity(self):
        """Test that a bare 0x decodes to zero rather than failing."""
        assert hex_to_int("0x", "input") == 0

    @pytest.mark.parametrize("value", [0, 1, 2**64, 2**256 - 1, 123456789012345678901234567890])
    def test_round_trip_beyond_64_bits(self, value):
        """Test that decoding inverts encoding, including values above 64 bits."""
        assert hex_to_int(int_to_hex(value), "value") == value

    def test_malformed_hex_raises(self):
        """Test that corrupt values raise with the field and value attached."""
        with pytest.raises(HexDecodeError, match="gasPrice") as exc_info:
            hex_to_int("0xzz", "gasPrice")

        assert exc_info.value.field == "gasPrice"
        assert exc_info.value.value == "0xzz"
        assert isinstance(exc_info.value, ValueError)

    def test_non_string_raises(self):
        """Test that non-string values are treated as malformed."""
        with pytest.raises(HexDecodeError):
            hex_to_int(12, "nonce")

    def test_negative_hex_rejected(self):
        """Test that signed values are not accepted."""
        with pytest.raises(HexDecodeError):
            hex_to_int("-0x1", "value")

    @pytest.mark.parametrize("value", ["100", "21000", "ff", "x10"])
    def test_unprefixed_hex_rejected(self, value):
        """Test that hex digits without a 0x prefix are not decoded."""
        with pytest.raises(HexDecodeError) as exc_info:
            hex_to_int(value, "gas")

        assert exc_info.value.value == value

    def test_uppercase_prefix_accepted(self):
        """Test that a 0X prefix decodes like 0x."""
        assert hex_to_int("0X1F", "gas") == 31


class TestHexToOptionalInt:
    """Tests for hex_to_optional_int."""

    def test_absent_is_none(self):
        """Test that absence maps to None, not zero."""
        assert hex_to_optional_int(None, "blockNumber") is None

    def test_zero_stays_zero(self):
        """Test that an explicit zero is not confused with absence."""
        assert hex_to_optional_int("0x0", "blockNumber") == 0


class TestHexTupleToInts:
    """Tests for hex_tuple_to_ints."""

    def test_full_tuple(self):
        """Test element-wise decoding."""
        assert hex_tuple_to_ints(["0x1", "0x2", "0x3"], "parentEntropy", 3) == (1, 2, 3)

    def test_partial_tuple_pads_with_zero(self):
        """Test that missing trailing elements default to zero independently."""
        assert hex_tuple_to_ints(["0x5"], "number", 2) == (5, 0)

    def test_null_elements_default_to_zero(self):
        """Test that null elements inside the tuple default to zero."""
        assert hex_tuple_to_ints([None, "0xa", ""], "parentEntropy", 3) == (0, 10, 0)

    def test_absent_tuple(self):
        """Test that an absent tuple yields all zeros of the right arity."""
        assert hex_tuple_to_ints(None, "number", 2) == (0, 0)

    def test_error_names_element(self):
        """Test that a corrupt element is reported with its index."""
        with pytest.raises(HexDecodeError) as exc_info:
            hex_tuple_to_ints(["0x1", "nothex"], "number", 2)

        assert exc_info.value.field == "number[1]"

    @pytest.mark.parametrize("values", ["0x5", 5, {"0": "0x5"}])
    def test_non_sequence_rejected(self, values):
        """Test that a tuple field given as a scalar is reported as a whole."""
        with pytest.raises(HexDecodeError) as exc_info:
            hex_tuple_to_ints(values, "number", 2)

        assert exc_info.value.field == "number"
        assert exc_info.value.value == values

    def test_empty_tuple(self):
        """Test that an empty list yields all zeros."""
        assert hex_tuple_to_ints([], "parentEntropy", 3) == (0, 0, 0)


class TestHelpers:
    """Tests for the smaller helpers."""

    def test_is_absent(self):
        """Test absence detection."""
        assert is_absent(None)
        assert is_absent("")
        assert not is_absent("0x0")

    def test_int_to_hex(self):
        """Test quantity encoding."""
        assert int_to_hex(0) == "0x0"
        assert int_to_hex(9000) == "0x2328"

    def test_int_to_hex_rejects_negative(self):
        """Test that negative quantities cannot be encoded."""
        with pytest.raises(ValueError, match="negative"):
            int_to_hex(-1)
