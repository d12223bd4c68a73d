#!/usr/bin/env python3
"""Qalcosonic - a decoder for Axioma Qalcosonic E3/E4 LoRaWAN uplinks.

Schema processor for uplinks & the client configuration.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Final, TypedDict

import voluptuous as vol

from . import exceptions as exc
from .const import SZ_BYTES, SZ_FPORT, FPort

_LOGGER = logging.getLogger(__name__)


#
# 1/2: Uplink (as received from the network server)
SZ_RECV_TIME: Final = "recvTime"
SZ_VARIABLES: Final = "variables"

SCH_BYTE = vol.All(int, vol.Range(min=0, max=255))

SCH_UPLINK = vol.Schema(
    {
        vol.Required(SZ_FPORT, default=None): vol.Any(None, int),
        vol.Required(SZ_BYTES, default=None): vol.Any(None, [SCH_BYTE]),
        vol.Optional(SZ_RECV_TIME): str,
        vol.Optional(SZ_VARIABLES): dict,
    },
    extra=vol.ALLOW_EXTRA,
)


#
# 2/2: Client configuration
SZ_DEFAULT_PORT: Final = "default_port"
SZ_INDENT: Final = "indent"
SZ_LOG_LEVEL: Final = "log_level"
SZ_USE_COLOR: Final = "use_color"

LOG_LEVELS: Final = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class ClientConfigT(TypedDict):
    default_port: int
    indent: int | None
    log_level: str
    use_color: bool


SCH_CLIENT_CONFIG = vol.Schema(
    {
        vol.Optional(SZ_DEFAULT_PORT, default=FPort.DATA.value): vol.All(
            int, vol.Range(min=0, max=255)
        ),
        vol.Optional(SZ_INDENT, default=None): vol.Any(
            None, vol.All(int, vol.Range(min=0))
        ),
        vol.Optional(SZ_LOG_LEVEL, default="WARNING"): vol.All(
            vol.Upper, vol.In(LOG_LEVELS)
        ),
        vol.Optional(SZ_USE_COLOR, default=True): bool,
    },
    extra=vol.PREVENT_EXTRA,
)


def validate_config(config: dict[str, Any]) -> ClientConfigT:
    """Return a validated client config (with defaults), or raise ConfigInvalid."""
    try:
        result: ClientConfigT = SCH_CLIENT_CONFIG(config)
    except vol.Invalid as err:
        raise exc.ConfigInvalid(f"Invalid config: {err}") from err
    return result


def load_config(file_name: str) -> ClientConfigT:
    """Load a (JSON) client config file, and validate it."""

    _LOGGER.debug("Loading config from: %s", file_name)
    try:
        with open(file_name) as f:
            config = json.load(f)
    except json.JSONDecodeError as err:
        raise exc.ConfigInvalid(f"Invalid config file: {file_name}: {err}") from err
    return validate_config(config)
