"""Unit tests for the identifier codec."""
from __future__ import annotations

import pytest

from sui_types.errors import (
    DecodeError,
    InvalidBase64Error,
    InvalidHexError,
    TooLongError,
)
from sui_types.hexdata import (
    ADDRESS_LENGTH,
    Address,
    Base64Data,
    HexData,
    ObjectId,
    is_same_string_address,
    parse_big_int,
)


# ---------------------------------------------------------------------------
# HexData.from_hex
# ---------------------------------------------------------------------------


class TestFromHex:
    @pytest.mark.parametrize(
        "value", ["0x2", "0x02", "0X2", "2", "02", "0x0002", "0" * 64 + "2"]
    )
    def test_same_value_same_identifier(self, value: str) -> None:
        assert Address.from_hex(value) == Address.from_hex("0x2")

    def test_left_pads_to_fixed_length(self) -> None:
        addr = Address.from_hex("0x1aa")
        assert len(addr.data) == ADDRESS_LENGTH
        assert addr.data == b"\x00" * 30 + b"\x01\xaa"

    def test_odd_length_is_padded(self) -> None:
        assert Address.from_hex("abc").data[-2:] == b"\x0a\xbc"

    def test_full_width(self) -> None:
        value = "0x" + "ff" * 32
        assert Address.from_hex(value).data == b"\xff" * 32

    def test_uppercase_digits(self) -> None:
        assert Address.from_hex("0xABCD") == Address.from_hex("0xabcd")

    def test_empty_is_zero(self) -> None:
        assert Address.from_hex("0x").data == b"\x00" * 32

    def test_too_long(self) -> None:
        with pytest.raises(TooLongError):
            Address.from_hex("0x01" + "00" * 32)

    def test_too_long_odd_digits(self) -> None:
        with pytest.raises(TooLongError):
            Address.from_hex("1" + "0" * 64)

    @pytest.mark.parametrize("value", ["0xzz", "0x12g4", "0x 12", "0x１２"])
    def test_invalid_hex(self, value: str) -> None:
        with pytest.raises(InvalidHexError):
            Address.from_hex(value)

    def test_errors_are_value_errors(self) -> None:
        with pytest.raises(ValueError):
            Address.from_hex("nothex")

    def test_aliases(self) -> None:
        assert Address is HexData
        assert ObjectId is HexData

    def test_frozen(self) -> None:
        addr = Address.from_hex("0x2")
        with pytest.raises(AttributeError):
            addr.data = b"\x00" * 32  # type: ignore[misc]

    def test_wrong_length_rejected(self) -> None:
        with pytest.raises(ValueError):
            HexData(b"\x01\x02")


# ---------------------------------------------------------------------------
# Display
# ---------------------------------------------------------------------------


class TestDisplay:
    def test_short_string(self) -> None:
        assert Address.from_hex("0x2").short_string() == "0x2"
        assert Address.from_hex("0x02").short_string() == "0x2"

    def test_short_string_trims_characters_not_bytes(self) -> None:
        assert Address.from_hex("0x0a10").short_string() == "0xa10"

    def test_short_string_all_zero_keeps_one_digit(self) -> None:
        assert Address.from_hex("0x0").short_string() == "0x0"

    def test_long_form(self) -> None:
        assert str(Address.from_hex("0x2")) == "0x" + "0" * 63 + "2"

    def test_bytes(self) -> None:
        assert bytes(Address.from_hex("0x2"))[-1] == 2


# ---------------------------------------------------------------------------
# is_same_string_address
# ---------------------------------------------------------------------------


class TestIsSameStringAddress:
    def test_leading_zeros_and_prefix(self) -> None:
        assert is_same_string_address("0x0001", "1")

    def test_different_values(self) -> None:
        assert not is_same_string_address("0x0001", "0x02")

    def test_prefix_only_lowercase(self) -> None:
        assert not is_same_string_address("0X1", "1")

    def test_no_hex_validation(self) -> None:
        assert is_same_string_address("0x00zz", "zz")

    def test_both_empty_after_trim(self) -> None:
        assert is_same_string_address("0x000", "0")


# ---------------------------------------------------------------------------
# Base64Data
# ---------------------------------------------------------------------------


class TestBase64Data:
    def test_decode(self) -> None:
        data = Base64Data.from_base64("AQID")
        assert bytes(data) == b"\x01\x02\x03"
        assert len(data) == 3

    def test_encode(self) -> None:
        assert str(Base64Data(b"\x01\x02\x03")) == "AQID"

    def test_empty(self) -> None:
        assert Base64Data.from_base64("").data == b""

    @pytest.mark.parametrize("value", ["A", "AQ!D", "é"])
    def test_invalid(self, value: str) -> None:
        with pytest.raises(InvalidBase64Error):
            Base64Data.from_base64(value)


# ---------------------------------------------------------------------------
# parse_big_int
# ---------------------------------------------------------------------------


class TestParseBigInt:
    def test_int(self) -> None:
        assert parse_big_int(42) == 42

    def test_decimal_string(self) -> None:
        assert parse_big_int("18446744073709551616") == 2**64

    @pytest.mark.parametrize("value", [True, -1, "-1", "0x10", "1.5", 1.5, None])
    def test_rejects(self, value: object) -> None:
        with pytest.raises(DecodeError):
            parse_big_int(value)
