#!/usr/bin/env python3
"""Qalcosonic - the uplink decoder.

Implements the decodeUplink() contract of LoRaWAN network servers (TTN, ChirpStack):

    {"fPort": 100, "bytes": [...]} -> {"data": {...}, "warnings": []}
                                   or {"errors": ["..."], "warnings": []}
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from . import exceptions as exc
from .const import (
    ERR_CONFIG_MSG,
    ERR_INVALID_UPLINK,
    ERR_NULL_BYTES,
    ERR_NULL_FPORT,
    SZ_BYTES,
    SZ_DATA,
    SZ_ERRORS,
    SZ_FPORT,
    SZ_PORT,
    SZ_WARNINGS,
    FPort,
)
from .helpers import bytes_to_hex
from .parsers import parse_payload
from .typed_dicts import UplinkResultT

_LOGGER = logging.getLogger(__name__)


def validate_uplink(uplink: Mapping[str, Any]) -> Iterable[int]:
    """Return the payload bytes of an uplink, if it is one that carries meter data.

    The checks are made in order, and the first to fail raises an UplinkInvalid.
    """

    port = uplink.get(SZ_FPORT, uplink.get(SZ_PORT))

    if port is None:
        raise exc.UplinkInvalid(ERR_NULL_FPORT)
    if port == FPort.CONFIG:
        raise exc.UplinkInvalid(ERR_CONFIG_MSG)
    if port != FPort.DATA:
        raise exc.UplinkInvalid(ERR_INVALID_UPLINK)

    if (payload := uplink.get(SZ_BYTES)) is None:
        raise exc.UplinkInvalid(ERR_NULL_BYTES)
    return payload  # type: ignore[no-any-return]


def decode_uplink(uplink: Mapping[str, Any]) -> UplinkResultT:
    """Decode an uplink into either its data or a list of errors (never both).

    Malformed bytes (e.g. values > 255) are a contract violation, and will raise a
    PayloadInvalid rather than be returned as an error.
    """

    try:
        payload = bytes_to_hex(validate_uplink(uplink))
        data = parse_payload(payload)

    except (exc.UplinkInvalid, exc.PayloadLengthUnknown) as err:
        _LOGGER.warning("Uplink not decoded: %s", err)
        return {SZ_ERRORS: [str(err)], SZ_WARNINGS: []}

    _LOGGER.debug("Uplink decoded: %s", data)
    return {SZ_DATA: data, SZ_WARNINGS: []}


def decode_payload(port: int | None, payload: Iterable[int] | None) -> UplinkResultT:
    """Decode a payload received on a port (a convenience wrapper)."""
    return decode_uplink({SZ_FPORT: port, SZ_BYTES: payload})
