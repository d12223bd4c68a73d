#!/usr/bin/env python3
"""A CLI for the qalcosonic library."""

from __future__ import annotations

import base64
import binascii
import json
import logging
import sys
from typing import IO, Any, Final

import click
import voluptuous as vol
from colorama import Fore, Style, init as colorama_init

from qalcosonic import (
    SZ_BYTES,
    SZ_DATA,
    SZ_FPORT,
    VERSION,
    decode_uplink,
    exceptions as exc,
)
from qalcosonic.logger import set_logging
from qalcosonic.schemas import (
    SCH_UPLINK,
    SZ_DEFAULT_PORT,
    SZ_INDENT,
    SZ_LOG_LEVEL,
    SZ_USE_COLOR,
    ClientConfigT,
    load_config,
    validate_config,
)

_LOGGER = logging.getLogger("qalcosonic")

DECODE: Final = "decode"
PARSE: Final = "parse"

DEBUG_LEVELS: Final = ("WARNING", "INFO", "DEBUG")

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])


def payload_from_hex(value: str) -> bytes:
    """Convert a hex string into bytes, ignoring whitespace and any 0x prefixes.

    Both '0x0102 03' and '010203' are acceptable.
    """
    value = "".join(value.split()).lower().replace("0x", "")
    try:
        return bytes.fromhex(value)
    except ValueError as err:
        raise click.BadParameter(f"not a hex string: {value!r}") from err


def payload_from_b64(value: str) -> bytes:
    """Convert a base64 string into bytes (as used by TTN's frm_payload)."""
    try:
        return base64.b64decode(value, validate=True)
    except binascii.Error as err:
        raise click.BadParameter(f"not a base64 string: {value!r}") from err


def uplink_from_line(line: str, default_port: int) -> dict[str, Any] | None:
    """Convert a line of an input file into an uplink, or None if there is none.

    A line is either '<port> <hex>' (or just '<hex>', without spaces), or a JSON
    object such as
    '{"fPort": 100, "bytes": [...]}'. Anything after a '#' is a comment.
    """

    line = line.split("#", maxsplit=1)[0].strip()
    if not line:
        return None

    if line.startswith("{"):
        uplink: dict[str, Any] = SCH_UPLINK(json.loads(line))
        return uplink

    fields = line.split(maxsplit=1)
    port, payload = (default_port, *fields) if len(fields) == 1 else fields
    return SCH_UPLINK(  # type: ignore[no-any-return]
        {
            SZ_FPORT: int(port),
            SZ_BYTES: list(payload_from_hex(payload)),
        }
    )


def format_result(result: dict[str, Any], config: ClientConfigT) -> str:
    """Return a decode result as JSON, optionally coloured (green/red)."""

    text = json.dumps(result, indent=config[SZ_INDENT])
    if not config[SZ_USE_COLOR]:
        return text
    color = Fore.GREEN if SZ_DATA in result else Fore.RED
    return f"{color}{text}{Style.RESET_ALL}"


@click.group(context_settings=CONTEXT_SETTINGS)
@click.option("-d", "--debug", count=True, help="-dd will give debug logging")
@click.option(
    "-c",
    "--config-file",
    type=click.Path(exists=True, dir_okay=False),
    help="a JSON client config file",
)
@click.option("-nc", "--no-color", is_flag=True, default=False, help="plain output")
@click.version_option(VERSION)
@click.pass_context
def cli(ctx: click.Context, debug: int, config_file: str | None, no_color: bool):
    """A CLI for the qalcosonic library."""

    try:
        config = load_config(config_file) if config_file else validate_config({})
    except (OSError, exc.ConfigInvalid) as err:
        raise click.UsageError(str(err)) from err

    if no_color:  # CLI takes precedence
        config[SZ_USE_COLOR] = False
    if debug:
        config[SZ_LOG_LEVEL] = DEBUG_LEVELS[min(debug, len(DEBUG_LEVELS) - 1)]

    set_logging(_LOGGER, level=config[SZ_LOG_LEVEL], use_color=config[SZ_USE_COLOR])
    ctx.obj = config


#
# 1/2: DECODE (a single payload)
@cli.command(DECODE)
@click.argument("payload", nargs=-1, required=True)
@click.option("-p", "--port", type=int, default=None, help="the fPort, default: 100")
@click.option("-b", "--base64", "is_b64", is_flag=True, help="payload is base64")
@click.pass_obj
def decode(config: ClientConfigT, payload: tuple[str, ...], port, is_b64: bool):
    """Decode a payload, given as hex (or base64)."""

    value = " ".join(payload)
    raw = payload_from_b64(value) if is_b64 else payload_from_hex(value)
    if port is None:
        port = config[SZ_DEFAULT_PORT]

    result = decode_uplink(SCH_UPLINK({SZ_FPORT: port, SZ_BYTES: list(raw)}))

    click.echo(format_result(result, config))  # type: ignore[arg-type]
    sys.exit(0 if SZ_DATA in result else 1)


#
# 2/2: PARSE (a file of payloads)
@cli.command(PARSE)
@click.option(
    "-i", "--input-file", type=click.File("r"), default="-", help="default: STDIN"
)
@click.pass_obj
def parse(config: ClientConfigT, input_file: IO[str]):
    """Decode a file of payloads, one per line: '[<port>] <hex>', or JSON."""

    failures = 0
    for num, line in enumerate(input_file, start=1):
        try:
            uplink = uplink_from_line(line, config[SZ_DEFAULT_PORT])
        except (ValueError, vol.Invalid, click.BadParameter) as err:
            _LOGGER.error("Line %s: invalid line: %s", num, err)
            failures += 1
            continue

        if uplink is None:
            continue

        result = decode_uplink(uplink)
        failures += SZ_DATA not in result

        click.echo(format_result(result, config))  # type: ignore[arg-type]

    sys.exit(1 if failures else 0)


def main() -> None:
    colorama_init()

    try:
        cli(standalone_mode=True)
    except KeyboardInterrupt:
        sys.exit(-1)


if __name__ == "__main__":
    main()
