"""Tests for Brickset scalar codecs."""

import pytest

from brickset.codecs import (
    NOT_SPECIFIED,
    decode_flag,
    decode_int_list,
    decode_not_specified,
    decode_zero_none,
    encode_flag,
    encode_int_list,
    encode_not_specified,
    encode_zero_none,
)
from brickset.errors import DecodeError, DecodeErrorKind


class TestFlag:
    """Flags are the literal 1 or absent."""

    def test_decodes_one(self) -> None:
        assert decode_flag(1) is True

    @pytest.mark.parametrize("value", [0, 2, -1])
    def test_rejects_other_integers(self, value: int) -> None:
        """Any integer other than 1 is an invalid flag."""
        with pytest.raises(DecodeError) as exc_info:
            decode_flag(value)

        assert exc_info.value.kind == DecodeErrorKind.INVALID_FLAG_VALUE
        assert exc_info.value.token == value

    def test_rejects_json_booleans(self) -> None:
        """true is not a number, so it is a schema mismatch."""
        with pytest.raises(DecodeError) as exc_info:
            decode_flag(True)

        assert exc_info.value.kind == DecodeErrorKind.SCHEMA_MISMATCH

    def test_encodes_as_one(self) -> None:
        assert encode_flag(True) == 1


class TestNotSpecified:
    """The "{Not specified}" sentinel stands in for a missing string."""

    def test_sentinel_decodes_to_none(self) -> None:
        assert decode_not_specified("{Not specified}") is None

    def test_other_strings_pass_through(self) -> None:
        assert decode_not_specified("Fire Truck") == "Fire Truck"

    def test_empty_string_is_a_value(self) -> None:
        """Only the exact sentinel means absent."""
        assert decode_not_specified("") == ""
        assert decode_not_specified("{not specified}") == "{not specified}"

    def test_null_decodes_to_none(self) -> None:
        assert decode_not_specified(None) is None

    def test_rejects_non_strings(self) -> None:
        with pytest.raises(DecodeError) as exc_info:
            decode_not_specified(42)

        assert exc_info.value.kind == DecodeErrorKind.SCHEMA_MISMATCH

    def test_encodes_none_as_sentinel(self) -> None:
        assert encode_not_specified(None) == NOT_SPECIFIED == "{Not specified}"

    def test_encodes_value_unchanged(self) -> None:
        assert encode_not_specified("City") == "City"


class TestZeroNone:
    """Zero stands in for a missing integer."""

    def test_zero_decodes_to_none(self) -> None:
        assert decode_zero_none(0) is None

    def test_nonzero_passes_through(self) -> None:
        assert decode_zero_none(7) == 7

    def test_rejects_strings(self) -> None:
        with pytest.raises(DecodeError) as exc_info:
            decode_zero_none("7")

        assert exc_info.value.kind == DecodeErrorKind.SCHEMA_MISMATCH

    def test_encodes_none_as_zero(self) -> None:
        assert encode_zero_none(None) == 0
        assert encode_zero_none(4) == 4


class TestIntList:
    """Integer lists travel as comma-separated strings."""

    def test_bare_integer_is_single_item_list(self) -> None:
        assert decode_int_list(1999) == [1999]

    def test_splits_and_trims(self) -> None:
        assert decode_int_list("1999, 2001,2004") == [1999, 2001, 2004]

    def test_single_number_string(self) -> None:
        assert decode_int_list("2020") == [2020]

    def test_invalid_token_reports_token(self) -> None:
        """A non-numeric token fails with the token attached."""
        with pytest.raises(DecodeError) as exc_info:
            decode_int_list("19a9")

        assert exc_info.value.kind == DecodeErrorKind.INVALID_INTEGER_LIST
        assert exc_info.value.token == "19a9"
        assert "19a9" in str(exc_info.value)

    def test_invalid_token_inside_list(self) -> None:
        with pytest.raises(DecodeError) as exc_info:
            decode_int_list("1999, abc, 2001")

        assert exc_info.value.token == "abc"

    def test_empty_string_is_invalid(self) -> None:
        with pytest.raises(DecodeError) as exc_info:
            decode_int_list("")

        assert exc_info.value.kind == DecodeErrorKind.INVALID_INTEGER_LIST

    @pytest.mark.parametrize("value", ["99999999999999999999", "2147483648", "-2147483649"])
    def test_rejects_values_outside_int32(self, value: str) -> None:
        with pytest.raises(DecodeError) as exc_info:
            decode_int_list(f"1999, {value}")

        assert exc_info.value.kind == DecodeErrorKind.INVALID_INTEGER_LIST
        assert exc_info.value.token == value

    def test_int32_bounds_are_valid(self) -> None:
        assert decode_int_list("-2147483648, 2147483647") == [-(2**31), 2**31 - 1]

    def test_rejects_oversized_bare_integer(self) -> None:
        with pytest.raises(DecodeError) as exc_info:
            decode_int_list(2**31)

        assert exc_info.value.kind == DecodeErrorKind.INVALID_INTEGER_LIST

    def test_rejects_json_arrays(self) -> None:
        with pytest.raises(DecodeError) as exc_info:
            decode_int_list([1999, 2001])

        assert exc_info.value.kind == DecodeErrorKind.SCHEMA_MISMATCH

    def test_encodes_with_comma_space(self) -> None:
        assert encode_int_list([1999, 2001, 2004]) == "1999, 2001, 2004"
        assert encode_int_list([2020]) == "2020"
