#!/usr/bin/env python3
"""Qalcosonic - a decoder for Axioma Qalcosonic E3/E4 LoRaWAN uplinks."""

from __future__ import annotations

import logging

from .const import (
    ERROR_CODES,
    PAYLOAD_LENGTHS,
    SZ_BYTES,
    SZ_DATA,
    SZ_ERRORS,
    SZ_FPORT,
    SZ_PAYLOAD_TYPE,
    SZ_WARNINGS,
    FPort,
    PayloadType,
)
from .decoder import decode_payload, decode_uplink, validate_uplink
from .helpers import (
    bytes_to_hex,
    hex_to_decimal,
    hex_to_error_code,
    hex_to_le,
    hex_to_scaled,
)
from .parsers import parse_payload, payload_type
from .version import VERSION

__all__ = [
    "VERSION",
    #
    "ERROR_CODES",
    "PAYLOAD_LENGTHS",
    "SZ_BYTES",
    "SZ_DATA",
    "SZ_ERRORS",
    "SZ_FPORT",
    "SZ_PAYLOAD_TYPE",
    "SZ_WARNINGS",
    #
    "FPort",
    "PayloadType",
    #
    "decode_payload",
    "decode_uplink",
    "parse_payload",
    "payload_type",
    "validate_uplink",
    #
    "bytes_to_hex",
    "hex_to_decimal",
    "hex_to_error_code",
    "hex_to_le",
    "hex_to_scaled",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())
