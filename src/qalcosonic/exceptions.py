#!/usr/bin/env python3
"""Qalcosonic - exceptions within the decoder layer."""

from __future__ import annotations


class _QalcosonicBaseException(Exception):
    """Base class for all qalcosonic exceptions."""

    pass


class QalcosonicException(_QalcosonicBaseException):
    """Base class for all qalcosonic exceptions."""

    HINT: None | str = None

    def __init__(self, *args: object):
        super().__init__(*args)
        self.message: str | None = args[0] if args else None  # type: ignore[assignment]

    def __str__(self) -> str:
        if self.message and self.HINT:
            return f"{self.message} (hint: {self.HINT})"
        if self.message:
            return self.message
        if self.HINT:
            return f"Hint: {self.HINT}"
        return ""


########################################################################################
# Errors at the decoder layer, incl. payload processing


class DecoderError(QalcosonicException):
    """The uplink cannot be decoded without error."""


class UplinkInvalid(DecoderError):
    """The uplink's fPort/bytes fields are missing or not for metering data."""


class PayloadInvalid(DecoderError):
    """The payload is corrupt/not internally consistent."""


class PayloadLengthUnknown(PayloadInvalid):
    """The payload's length matches none of the known payload types."""


class HexStringInvalid(PayloadInvalid, ValueError):
    """A hex string contains characters other than hex digits."""

    HINT = "the payload bytes should be normalised before parsing"


########################################################################################
# Errors in the client configuration


class ConfigInvalid(QalcosonicException):
    """The client configuration is not valid."""
