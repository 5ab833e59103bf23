"""MIDI wire codec for midiwire.

This module provides encoding and decoding between typed messages and raw
MIDI messages, plus the raw message types exchanged with a transport.
"""

from __future__ import annotations

from .decoder import decode, decode_stream, try_decode
from .encoder import encode, encode_all, encode_raw
from .raw import Command, MetaEvent, RawMessage, ShortMessage, SysexMessage, parse_raw

__all__ = [
    "encode",
    "encode_raw",
    "encode_all",
    "decode",
    "try_decode",
    "decode_stream",
    "parse_raw",
    "Command",
    "RawMessage",
    "ShortMessage",
    "MetaEvent",
    "SysexMessage",
]
