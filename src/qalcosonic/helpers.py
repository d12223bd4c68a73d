#!/usr/bin/env python3
"""Qalcosonic - Decoder layer - Helper functions."""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import Final, TypeAlias

from . import exceptions as exc
from .const import ERROR_CODES, SZ_CODE, SZ_DESCRIPTION, SZ_UNKNOWN
from .typed_dicts import ErrorCodeT

HexByte: TypeAlias = str
HexStr: TypeAlias = str  # any even number of characters

_HEX_STR_REGEX: Final = re.compile(r"[0-9A-Fa-f]+")

DEFAULT_PRECISION: Final = 3


def _check_hex(value: HexStr) -> None:
    if not isinstance(value, str) or not _HEX_STR_REGEX.fullmatch(value):
        raise exc.HexStringInvalid(f"Invalid hex string input: {value!r}")


def bytes_to_hex(payload: Iterable[int]) -> HexStr:
    """Convert a sequence of bytes into a hex string, two lowercase chars per byte.

    The bytes are concatenated in their original (transmitted) order. An int (or a
    bool) is not a sequence of bytes, nor is a str.
    """
    if isinstance(payload, (int, str)):
        raise exc.PayloadInvalid(f"Invalid bytes: {payload!r}, is not a sequence")
    try:
        return "".join(f"{b:02x}" for b in bytes(payload))
    except (TypeError, ValueError) as err:
        raise exc.PayloadInvalid(f"Invalid bytes: {payload!r}: {err}") from err


def hex_to_decimal(value: HexStr) -> int:
    """Convert a hex string (of any length) into an unsigned integer.

    Unlike int(value, 16), signs, whitespace, underscores and the 0x prefix are
    all rejected.
    """
    _check_hex(value)
    return int(value, 16)


def hex_to_le(value: HexStr) -> HexStr:
    """Reverse the byte order of a hex string (little endian <-> big endian).

    The device transmits its multi-byte integers LSB first, so the result can be
    parsed directly, e.g. '10270000' -> '00002710'.
    """
    _check_hex(value)
    if len(value) % 2:
        raise exc.HexStringInvalid(f"Invalid hex string input: {value!r}, odd length")
    return "".join(reversed([value[i : i + 2] for i in range(0, len(value), 2)]))


def hex_slice_to_le(value: HexStr, start: int, end: int) -> HexStr:
    """Return a (byte order corrected) slice of a hex string."""
    return hex_to_le(value[start:end])


def hex_to_scaled(
    value: HexStr, factor: float = 1, precision: int = DEFAULT_PRECISION
) -> int | float:
    """Convert a (byte order corrected) hex string into a scaled value.

    With a factor of 1 the result is an exact integer, otherwise it is rounded.
    """
    result = hex_to_decimal(value)
    if factor == 1:
        return result
    return round(result * factor, precision)


def hex_to_error_code(value: HexByte) -> ErrorCodeT:
    """Convert a 2-char hex string (the error code byte) into a dict.

    An undocumented code is not an error, its description is simply 'Unknown'.
    """
    _check_hex(value)
    if len(value) != 2:
        raise exc.HexStringInvalid(
            f"Invalid value: {value!r}, is not a 2-char hex string"
        )
    return {
        SZ_CODE: value,
        SZ_DESCRIPTION: ERROR_CODES.get(value.lower(), SZ_UNKNOWN),
    }
