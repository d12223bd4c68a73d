#!/usr/bin/env python3
"""Qalcosonic - a decoder for Axioma Qalcosonic E3/E4 LoRaWAN uplinks."""

__version__ = "0.2.1"
VERSION = __version__
