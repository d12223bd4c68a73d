#!/usr/bin/env python3
"""Qalcosonic - payload processors.

The payload type is identified only by the payload's length, there is no type tag
within the payload itself. Each payload type is parsed from a table of fields (see
layouts.py) by the same generic routine.

NOTES: power & flow are scaled by the same helper as temperature, but their
precision differs: power to 1 decimal place, flow & temperature to 3 places.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from types import MappingProxyType
from typing import Any, Final

from . import exceptions as exc
from .const import (
    ERR_UNKNOWN_LENGTH,
    FLOW_FACTOR,
    FLOW_PRECISION,
    PAYLOAD_LENGTHS,
    POWER_FACTOR,
    POWER_PRECISION,
    SZ_PAYLOAD_TYPE,
    TEMP_FACTOR,
    TEMP_PRECISION,
    PayloadType,
)
from .helpers import HexStr, hex_slice_to_le, hex_to_error_code, hex_to_scaled
from .layouts import LAYOUTS, FieldSpec, Xform
from .typed_dicts import PayDictT

_LOGGER = logging.getLogger(__name__)


_XFORMS: Final[MappingProxyType[Xform, Callable[[HexStr], Any]]] = MappingProxyType(
    {  # all but RAW are applied to the byte order corrected value
        Xform.PLAIN: hex_to_scaled,
        Xform.POWER: lambda v: hex_to_scaled(v, POWER_FACTOR, POWER_PRECISION),
        Xform.FLOW: lambda v: hex_to_scaled(v, FLOW_FACTOR, FLOW_PRECISION),
        Xform.TEMP: lambda v: hex_to_scaled(v, TEMP_FACTOR, TEMP_PRECISION),
        Xform.RAW: hex_to_error_code,
    }
)


def _parse_field(payload: HexStr, field: FieldSpec) -> Any:
    if field.xform == Xform.RAW:
        return _XFORMS[field.xform](payload[field.start : field.end])
    return _XFORMS[field.xform](hex_slice_to_le(payload, field.start, field.end))


def parse_fields(payload: HexStr, layout: Iterable[FieldSpec]) -> dict[str, Any]:
    """Return a dict of the fields of a payload, in the order of its layout."""
    return {field.key: _parse_field(payload, field) for field in layout}


def _parse_payload_type(payload: HexStr, pay_type: PayloadType) -> dict[str, Any]:
    return {
        SZ_PAYLOAD_TYPE: pay_type.value,
        **parse_fields(payload, LAYOUTS[pay_type]),
    }


# BasicLT, heat & cool meter, last period readings (incl. instantaneous values)
def parser_basic_lt(payload: HexStr) -> PayDictT.BASIC_LT:
    return _parse_payload_type(payload, PayloadType.BASIC_LT)  # type: ignore[return-value]


# Basic with heating energy, current & three previous periods
def parser_basic_with_heat(payload: HexStr) -> PayDictT.BASIC_WITH_HEAT:
    return _parse_payload_type(payload, PayloadType.BASIC_WITH_HEAT)  # type: ignore[return-value]


# Basic with cooling energy, current & two previous periods
def parser_basic_with_cool(payload: HexStr) -> PayDictT.BASIC_WITH_COOL:
    return _parse_payload_type(payload, PayloadType.BASIC_WITH_COOL)  # type: ignore[return-value]


# Nordic, two previous periods, each with its own timestamp
def parser_nordic(payload: HexStr) -> PayDictT.NORDIC:
    return _parse_payload_type(payload, PayloadType.NORDIC)  # type: ignore[return-value]


# Nordic with cooling, one previous period, heat & cool energy split
def parser_nordic_with_cool(payload: HexStr) -> PayDictT.NORDIC_WITH_COOL:
    return _parse_payload_type(payload, PayloadType.NORDIC_WITH_COOL)  # type: ignore[return-value]


PAYLOAD_PARSERS: Final[MappingProxyType[PayloadType, Callable[[HexStr], Any]]] = (
    MappingProxyType(
        {
            PayloadType.BASIC_LT: parser_basic_lt,
            PayloadType.BASIC_WITH_HEAT: parser_basic_with_heat,
            PayloadType.BASIC_WITH_COOL: parser_basic_with_cool,
            PayloadType.NORDIC: parser_nordic,
            PayloadType.NORDIC_WITH_COOL: parser_nordic_with_cool,
        }
    )
)


def payload_type(payload: HexStr) -> PayloadType:
    """Return the payload type of a (hex string) payload, as per its length."""

    if len(payload) % 2:
        raise exc.PayloadInvalid(f"Invalid payload: {payload!r}, odd length")

    length = len(payload) // 2
    try:
        return PAYLOAD_LENGTHS[length]
    except KeyError:
        raise exc.PayloadLengthUnknown(ERR_UNKNOWN_LENGTH.format(length=length))


def parse_payload(payload: HexStr) -> PayDictT.ANY:
    """Return the decoded payload, as per its payload type."""

    pay_type = payload_type(payload)
    _LOGGER.debug("Parsing payload as %s: %s", pay_type.name, payload)

    result: PayDictT.ANY = PAYLOAD_PARSERS[pay_type](payload)
    return result
