#!/usr/bin/env python3
"""Qalcosonic - the field layouts of each payload type.

Each layout is an ordered table of fields, with offsets in hex chars (2 per byte),
start inclusive, end exclusive. All multi-byte fields are little endian, only the
error code (a single byte) is read as-is.

   BasicLT (35 bytes)              Nordic (48 bytes)
   00-08 timestamp                 00-08 timestamp
   08-10 errorcodes                08-52 previous period 1:
   10-18 energyheatpp                    timestamp, energy, volume,
   18-26 energycoolpp                    power, flow, temp1, temp2
   26-34 volumepp                  52-96 previous period 2: (as above)
   34-40 powerpp
   40-46 flowpp
   46-54 temp1pp, temp2pp
   54-62 workingtime
   62-70 storeperiod
"""

from __future__ import annotations

from enum import StrEnum
from types import MappingProxyType
from typing import Final, NamedTuple

from .const import (
    SZ_ENERGY,
    SZ_ENERGY_C,
    SZ_ENERGY_COOL,
    SZ_ENERGY_H,
    SZ_ENERGY_HEAT,
    SZ_ERROR_CODES,
    SZ_FLOW,
    SZ_POWER,
    SZ_STORE_PERIOD,
    SZ_TEMP1,
    SZ_TEMP2,
    SZ_TIMESTAMP,
    SZ_VOLUME,
    SZ_WORKING_TIME,
    PayloadType,
    pp_key,
)


class Xform(StrEnum):
    PLAIN = "plain"  # little endian integer: timestamps, energy, volume, etc.
    POWER = "power"  # little endian integer, x 0.1
    FLOW = "flow"  # little endian integer, x 0.001
    TEMP = "temp"  # little endian integer, x 0.01
    RAW = "raw"  # error code byte, not reversed


class FieldSpec(NamedTuple):
    start: int
    end: int
    xform: Xform
    key: str


_P, _W, _F, _T, _R = Xform.PLAIN, Xform.POWER, Xform.FLOW, Xform.TEMP, Xform.RAW


LAYOUT_BASIC_LT: Final = (
    FieldSpec(0, 8, _P, SZ_TIMESTAMP),
    FieldSpec(8, 10, _R, SZ_ERROR_CODES),
    FieldSpec(10, 18, _P, pp_key(SZ_ENERGY_HEAT)),
    FieldSpec(18, 26, _P, pp_key(SZ_ENERGY_COOL)),
    FieldSpec(26, 34, _P, pp_key(SZ_VOLUME)),
    FieldSpec(34, 40, _W, pp_key(SZ_POWER)),
    FieldSpec(40, 46, _F, pp_key(SZ_FLOW)),
    FieldSpec(46, 50, _T, pp_key(SZ_TEMP1)),
    FieldSpec(50, 54, _T, pp_key(SZ_TEMP2)),
    FieldSpec(54, 62, _P, SZ_WORKING_TIME),
    FieldSpec(62, 70, _P, SZ_STORE_PERIOD),
)

LAYOUT_BASIC_WITH_HEAT: Final = (
    FieldSpec(0, 8, _P, SZ_TIMESTAMP),
    FieldSpec(8, 10, _R, SZ_ERROR_CODES),
    FieldSpec(10, 18, _P, SZ_ENERGY_HEAT),
    FieldSpec(18, 26, _P, SZ_VOLUME),
    FieldSpec(26, 34, _P, pp_key(SZ_ENERGY_HEAT, 1)),
    FieldSpec(34, 42, _P, pp_key(SZ_VOLUME, 1)),
    FieldSpec(42, 50, _P, pp_key(SZ_ENERGY_HEAT, 2)),
    FieldSpec(50, 58, _P, pp_key(SZ_VOLUME, 2)),
    FieldSpec(58, 66, _P, pp_key(SZ_ENERGY_HEAT, 3)),
    FieldSpec(66, 74, _P, pp_key(SZ_VOLUME, 3)),
    FieldSpec(74, 82, _P, SZ_STORE_PERIOD),
)

LAYOUT_BASIC_WITH_COOL: Final = (
    FieldSpec(0, 8, _P, SZ_TIMESTAMP),
    FieldSpec(8, 10, _R, SZ_ERROR_CODES),
    FieldSpec(10, 18, _P, SZ_ENERGY_HEAT),
    FieldSpec(18, 26, _P, SZ_ENERGY_COOL),
    FieldSpec(26, 34, _P, SZ_VOLUME),
    FieldSpec(34, 42, _P, pp_key(SZ_ENERGY_HEAT, 1)),
    FieldSpec(42, 50, _P, pp_key(SZ_ENERGY_COOL, 1)),
    FieldSpec(50, 58, _P, pp_key(SZ_VOLUME, 1)),
    FieldSpec(58, 66, _P, pp_key(SZ_ENERGY_HEAT, 2)),
    FieldSpec(66, 74, _P, pp_key(SZ_ENERGY_COOL, 2)),
    FieldSpec(74, 82, _P, pp_key(SZ_VOLUME, 2)),
    FieldSpec(82, 90, _P, SZ_STORE_PERIOD),
)

LAYOUT_NORDIC: Final = (
    FieldSpec(0, 8, _P, SZ_TIMESTAMP),
    #
    FieldSpec(8, 16, _P, pp_key(SZ_TIMESTAMP, 1)),
    FieldSpec(16, 24, _P, pp_key(SZ_ENERGY, 1)),
    FieldSpec(24, 32, _P, pp_key(SZ_VOLUME, 1)),
    FieldSpec(32, 38, _W, pp_key(SZ_POWER, 1)),
    FieldSpec(38, 44, _F, pp_key(SZ_FLOW, 1)),
    FieldSpec(44, 48, _T, pp_key(SZ_TEMP1, 1)),
    FieldSpec(48, 52, _T, pp_key(SZ_TEMP2, 1)),
    #
    FieldSpec(52, 60, _P, pp_key(SZ_TIMESTAMP, 2)),
    FieldSpec(60, 68, _P, pp_key(SZ_ENERGY, 2)),
    FieldSpec(68, 76, _P, pp_key(SZ_VOLUME, 2)),
    FieldSpec(76, 82, _W, pp_key(SZ_POWER, 2)),
    FieldSpec(82, 88, _F, pp_key(SZ_FLOW, 2)),
    FieldSpec(88, 92, _T, pp_key(SZ_TEMP1, 2)),
    FieldSpec(92, 96, _T, pp_key(SZ_TEMP2, 2)),
)

LAYOUT_NORDIC_WITH_COOL: Final = (
    FieldSpec(0, 8, _P, SZ_TIMESTAMP),
    FieldSpec(8, 16, _P, pp_key(SZ_TIMESTAMP, 1)),
    FieldSpec(16, 24, _P, pp_key(SZ_ENERGY_H, 1)),
    FieldSpec(24, 32, _P, pp_key(SZ_ENERGY_C, 1)),
    FieldSpec(32, 40, _P, pp_key(SZ_VOLUME, 1)),
    FieldSpec(40, 46, _W, pp_key(SZ_POWER, 1)),
    FieldSpec(46, 52, _F, pp_key(SZ_FLOW, 1)),
    FieldSpec(52, 56, _T, pp_key(SZ_TEMP1, 1)),
    FieldSpec(56, 60, _T, pp_key(SZ_TEMP2, 1)),
)


LAYOUTS: Final[MappingProxyType[PayloadType, tuple[FieldSpec, ...]]] = (
    MappingProxyType(
        {
            PayloadType.BASIC_LT: LAYOUT_BASIC_LT,
            PayloadType.BASIC_WITH_HEAT: LAYOUT_BASIC_WITH_HEAT,
            PayloadType.BASIC_WITH_COOL: LAYOUT_BASIC_WITH_COOL,
            PayloadType.NORDIC: LAYOUT_NORDIC,
            PayloadType.NORDIC_WITH_COOL: LAYOUT_NORDIC_WITH_COOL,
        }
    )
)
