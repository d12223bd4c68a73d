#!/usr/bin/env python3
"""Qalcosonic - a decoder for Axioma Qalcosonic E3/E4 LoRaWAN uplinks."""

from __future__ import annotations

from enum import EnumCheck, IntEnum, StrEnum, verify
from types import MappingProxyType
from typing import Final


# used by the uplink envelope (the network server's decodeUplink contract)...
SZ_BYTES: Final = "bytes"
SZ_DATA: Final = "data"
SZ_ERRORS: Final = "errors"
SZ_FPORT: Final = "fPort"
SZ_PORT: Final = "port"  # an alias of fPort
SZ_WARNINGS: Final = "warnings"


# used by the decoded records...
SZ_CODE: Final = "code"
SZ_DESCRIPTION: Final = "description"
SZ_ERROR_CODES: Final = "errorcodes"
SZ_PAYLOAD_TYPE: Final = "payloadtype"

SZ_TIMESTAMP: Final = "timestamp"
SZ_WORKING_TIME: Final = "workingtime"
SZ_STORE_PERIOD: Final = "storeperiod"

SZ_ENERGY: Final = "energy"
SZ_ENERGY_HEAT: Final = "energyheat"
SZ_ENERGY_COOL: Final = "energycool"
SZ_ENERGY_H: Final = "energyh"  # used only by Nordic with cooling
SZ_ENERGY_C: Final = "energyc"
SZ_VOLUME: Final = "volume"
SZ_POWER: Final = "power"
SZ_FLOW: Final = "flow"
SZ_TEMP1: Final = "temp1"  # flow (supply) temperature
SZ_TEMP2: Final = "temp2"  # return temperature


def pp_key(key: str, idx: int | None = None) -> str:
    """Return the key of a previous period (pp) reading, e.g. volumepp, volumepp2."""
    return f"{key}pp" if idx is None else f"{key}pp{idx}"


# error messages, these are part of the decodeUplink contract
ERR_NULL_FPORT: Final = "Unknown or null fPort value"
ERR_CONFIG_MSG: Final = "Configuration message type."
ERR_INVALID_UPLINK: Final = "Invalid uplink message."
ERR_NULL_BYTES: Final = "Empty hex bytes field"
ERR_UNKNOWN_LENGTH: Final = "Unknown payload length/type: {length} bytes"


@verify(EnumCheck.UNIQUE)
class FPort(IntEnum):
    DATA = 100  # metering data
    CONFIG = 101  # configuration acknowledgements, not supported


@verify(EnumCheck.UNIQUE)
class PayloadType(StrEnum):
    BASIC_LT = "BasicLT"
    BASIC_WITH_HEAT = "Basic with heating energy"
    BASIC_WITH_COOL = "Basic with cooling energy"
    NORDIC = "Nordic"
    NORDIC_WITH_COOL = "Nordic with cooling"


# the payload length (in bytes) is the only discriminator of the payload type
PAYLOAD_LENGTHS: Final[MappingProxyType[int, PayloadType]] = MappingProxyType(
    {
        35: PayloadType.BASIC_LT,
        41: PayloadType.BASIC_WITH_HEAT,
        45: PayloadType.BASIC_WITH_COOL,
        48: PayloadType.NORDIC,
        30: PayloadType.NORDIC_WITH_COOL,
    }
)


# the error code byte is a bitmap, but only these combinations are documented
SZ_UNKNOWN: Final = "Unknown"

ERROR_CODES: Final[MappingProxyType[str, str]] = MappingProxyType(
    {
        "00": "No error",
        "04": "Power low",
        "08": "Permanent error",
        "10": "Empty spool + temporary error",
        "14": "Power low + temporary error + empty spool",
        "18": "Empty spool + temporary error + permanent error",
        "1c": "Power low + permanent error + empty spool + temporary error",
    }
)


# scale factors & their output precision (decimal places)
POWER_FACTOR: Final = 0.1  # kW
POWER_PRECISION: Final = 1
FLOW_FACTOR: Final = 0.001  # m³/h
FLOW_PRECISION: Final = 3
TEMP_FACTOR: Final = 0.01  # °C
TEMP_PRECISION: Final = 3  # as for all scaled values, although 2 always suffices
