#!/usr/bin/env python3
"""Qalcosonic - a decoder for Axioma Qalcosonic E3/E4 LoRaWAN uplinks.

Test utilities.
"""

from pathlib import Path

TEST_DIR = Path(__file__).resolve().parent


def zeros(length: int) -> list[int]:
    """Return a payload of all-zero bytes."""
    return [0] * length


def assert_raises(exception, fnc, *args):
    try:
        fnc(*args)
    except exception:  # as exc:
        pass  # or: assert True
    else:
        assert False
