#!/usr/bin/env python3
"""Qalcosonic - a decoder for Axioma Qalcosonic E3/E4 LoRaWAN uplinks.

Test the various helper APIs.
"""

import pytest
from common import assert_raises

from qalcosonic import exceptions as exc
from qalcosonic.const import ERROR_CODES
from qalcosonic.helpers import (
    bytes_to_hex,
    hex_slice_to_le,
    hex_to_decimal,
    hex_to_error_code,
    hex_to_le,
    hex_to_scaled,
)


def test_bytes_to_hex() -> None:
    assert bytes_to_hex([]) == ""
    assert bytes_to_hex([5]) == "05"
    assert bytes_to_hex([0, 15, 16, 255]) == "000f10ff"
    assert bytes_to_hex(b"\x1c\xab") == "1cab"
    assert bytes_to_hex(bytearray([1, 2])) == "0102"

    assert_raises(exc.PayloadInvalid, bytes_to_hex, [256])
    assert_raises(exc.PayloadInvalid, bytes_to_hex, [-1])
    assert_raises(exc.PayloadInvalid, bytes_to_hex, ["ff"])

    assert_raises(exc.PayloadInvalid, bytes_to_hex, 35)  # not a length
    assert_raises(exc.PayloadInvalid, bytes_to_hex, True)
    assert_raises(exc.PayloadInvalid, bytes_to_hex, "0102")
    assert_raises(exc.PayloadInvalid, bytes_to_hex, None)


def test_hex_to_decimal() -> None:
    assert hex_to_decimal("0") == 0
    assert hex_to_decimal("ff") == 255
    assert hex_to_decimal("FF") == 255
    assert hex_to_decimal("01000000") == 16777216
    assert hex_to_decimal("ffffffff") == 4294967295

    for value in ("", "0x10", "-1", "+1", "1_0", " 10", "10 ", "xyz", "1g"):
        assert_raises(exc.HexStringInvalid, hex_to_decimal, value)

    # HexStringInvalid is also a ValueError
    assert_raises(ValueError, hex_to_decimal, "zz")


def test_hex_to_le() -> None:
    assert hex_to_le("00") == "00"
    assert hex_to_le("0001") == "0100"
    assert hex_to_le("10270000") == "00002710"
    assert hex_to_le("AbCdEf") == "EfCdAb"

    assert_raises(exc.HexStringInvalid, hex_to_le, "")
    assert_raises(exc.HexStringInvalid, hex_to_le, "012")
    assert_raises(exc.HexStringInvalid, hex_to_le, "0g")


@pytest.mark.parametrize(
    "value", ["00", "0102", "a0860100", "80009265043930", "0123456789abcdef"]
)
def test_hex_to_le_twice(value: str) -> None:
    assert hex_to_le(hex_to_le(value)) == value


def test_hex_slice_to_le() -> None:
    payload = "8000926504"
    assert hex_slice_to_le(payload, 0, 8) == "65920080"
    assert hex_slice_to_le(payload, 8, 10) == "04"
    assert_raises(exc.HexStringInvalid, hex_slice_to_le, payload, 10, 12)  # empty


def test_hex_to_scaled() -> None:
    result = hex_to_scaled("3039")
    assert result == 12345 and isinstance(result, int)

    assert hex_to_scaled("198f", 0.01) == 65.43
    assert hex_to_scaled("0001", 0.01) == 0.01
    assert hex_to_scaled("0001", 0.001) == 0.001
    assert hex_to_scaled("0003", 0.001) == 0.003  # not 0.0030000000000000001
    assert hex_to_scaled("0007", 0.1, 1) == 0.7  # not 0.7000000000000001
    assert hex_to_scaled("04d2", 0.1, 1) == 123.4
    assert hex_to_scaled("0001", 0.0001) == 0.0  # rounded to 3 places

    assert_raises(exc.HexStringInvalid, hex_to_scaled, "xx", 0.01)


def test_hex_to_error_code() -> None:
    for code, description in ERROR_CODES.items():
        assert hex_to_error_code(code) == {"code": code, "description": description}

    assert hex_to_error_code("00")["description"] == "No error"
    assert hex_to_error_code("04")["description"] == "Power low"
    assert hex_to_error_code("1C")["description"] == ERROR_CODES["1c"]

    assert_raises(exc.HexStringInvalid, hex_to_error_code, "4")
    assert_raises(exc.HexStringInvalid, hex_to_error_code, "004")
    assert_raises(exc.HexStringInvalid, hex_to_error_code, "zz")
    assert_raises(exc.HexStringInvalid, hex_to_error_code, "-1")
    assert_raises(exc.HexStringInvalid, hex_to_error_code, 4)


def test_hex_to_error_code_is_total() -> None:
    for value in range(256):
        code = f"{value:02x}"
        result = hex_to_error_code(code)

        assert result["code"] == code
        assert result["description"] == ERROR_CODES.get(code, "Unknown")

    assert len([v for v in range(256) if f"{v:02x}" in ERROR_CODES]) == 7
