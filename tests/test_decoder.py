#!/usr/bin/env python3
"""Qalcosonic - a decoder for Axioma Qalcosonic E3/E4 LoRaWAN uplinks.

Test the uplink decoder (decodeUplink), incl. its validation of fPort & bytes.
"""

import pytest
from common import zeros

from qalcosonic import (
    PAYLOAD_LENGTHS,
    PayloadType,
    decode_payload,
    decode_uplink,
    exceptions as exc,
    parse_payload,
    payload_type,
)

TESTS_ZEROS = (  # length, payload type, has an error code
    (30, "Nordic with cooling", False),
    (35, "BasicLT", True),
    (41, "Basic with heating energy", True),
    (45, "Basic with cooling energy", True),
    (48, "Nordic", False),
)

TESTS_UPLINK_INVALID = (
    ({"fPort": None, "bytes": zeros(35)}, "Unknown or null fPort value"),
    ({"bytes": zeros(35)}, "Unknown or null fPort value"),
    ({"fPort": 101, "bytes": zeros(35)}, "Configuration message type."),
    ({"fPort": 101, "bytes": None}, "Configuration message type."),
    ({"fPort": 5, "bytes": zeros(35)}, "Invalid uplink message."),
    ({"fPort": 0, "bytes": zeros(35)}, "Invalid uplink message."),
    ({"fPort": 102, "bytes": None}, "Invalid uplink message."),
    ({"fPort": 100, "bytes": None}, "Empty hex bytes field"),
    ({"fPort": 100}, "Empty hex bytes field"),
)


@pytest.mark.parametrize("length, pay_type, has_error_code", TESTS_ZEROS)
def test_decode_zeros(length: int, pay_type: str, has_error_code: bool) -> None:
    result = decode_uplink({"fPort": 100, "bytes": zeros(length)})

    assert "errors" not in result
    assert result["warnings"] == []

    data = dict(result["data"])
    assert data.pop("payloadtype") == pay_type

    if has_error_code:
        assert data.pop("errorcodes") == {"code": "00", "description": "No error"}
    else:
        assert "errorcodes" not in data

    assert data and all(v == 0 for v in data.values())


@pytest.mark.parametrize("uplink, error", TESTS_UPLINK_INVALID)
def test_decode_uplink_invalid(uplink: dict, error: str) -> None:
    assert decode_uplink(uplink) == {"errors": [error], "warnings": []}


@pytest.mark.parametrize("length", [0, 1, 29, 31, 34, 36, 40, 42, 44, 46, 47, 49, 96])
def test_decode_length_unknown(length: int) -> None:
    result = decode_uplink({"fPort": 100, "bytes": zeros(length)})

    assert "data" not in result
    assert result["errors"] == [f"Unknown payload length/type: {length} bytes"]
    assert str(length) in result["errors"][0]


def test_decode_example() -> None:
    payload = [0x00, 0x00, 0x00, 0x01, 0x04] + zeros(30)
    result = decode_uplink({"fPort": 100, "bytes": payload})

    assert result["data"]["payloadtype"] == "BasicLT"
    assert result["data"]["timestamp"] == 0x01000000 == 16777216
    assert result["data"]["errorcodes"] == {"code": "04", "description": "Power low"}


def test_decode_power_flow_precision() -> None:
    payload = bytearray(35)
    payload[17:20] = (123457).to_bytes(3, "little")  # powerpp
    payload[20:23] = (123457).to_bytes(3, "little")  # flowpp
    payload[23:25] = (2345).to_bytes(2, "little")  # temp1pp

    data = decode_uplink({"fPort": 100, "bytes": payload})["data"]

    assert data["powerpp"] == 12345.7  # 1 decimal place
    assert data["flowpp"] == 123.457  # 3 decimal places
    assert data["temp1pp"] == 23.45


def test_decode_port_alias() -> None:
    assert decode_uplink({"port": 100, "bytes": zeros(30)})["data"]
    assert decode_uplink({"port": 101, "bytes": zeros(30)}) == {
        "errors": ["Configuration message type."],
        "warnings": [],
    }


def test_decode_payload() -> None:
    assert decode_payload(100, zeros(48))["data"]["payloadtype"] == "Nordic"
    assert decode_payload(None, None) == {
        "errors": ["Unknown or null fPort value"],
        "warnings": [],
    }


def test_decode_is_idempotent() -> None:
    uplink = {"fPort": 100, "bytes": list(range(45))}
    assert decode_uplink(uplink) == decode_uplink(uplink)
    assert uplink == {"fPort": 100, "bytes": list(range(45))}  # not mutated


@pytest.mark.parametrize("data", [[256] + zeros(34), 35, 30, True, "00" * 35])
def test_decode_bytes_invalid(data) -> None:
    with pytest.raises(exc.PayloadInvalid):
        decode_uplink({"fPort": 100, "bytes": data})


def test_payload_type() -> None:
    for length, pay_type in PAYLOAD_LENGTHS.items():
        assert payload_type("00" * length) is pay_type

    assert payload_type("00" * 35) == PayloadType.BASIC_LT == "BasicLT"

    with pytest.raises(exc.PayloadLengthUnknown):
        payload_type("00" * 36)
    with pytest.raises(exc.PayloadInvalid):
        payload_type("0" * 71)


def test_parse_payload_hex_invalid() -> None:
    with pytest.raises(exc.HexStringInvalid):
        parse_payload("zz" * 30)
