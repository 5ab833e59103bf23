"""MIDI message encoder.

Each message variant owns its encoding (``to_raw``); this module provides the
function-style entry points.
"""

from __future__ import annotations

from typing import Iterable

from ..models import BaseMessage
from .raw import RawMessage


def encode(message: BaseMessage) -> bytes:
    """Encode a message to its MIDI wire bytes.

    Encoding cannot fail for a constructed message: field values were
    validated when the message was built.

    Args:
        message: Any midiwire message value

    Returns:
        Wire bytes of a single message

    Examples:
        ```python
        from midiwire import NoteOn, TimeSignature, encode

        encode(NoteOn(channel=3, pitch=60, velocity=90))   # b"\\x93\\x3c\\x5a"
        encode(TimeSignature(4, 4, 24, 8))                 # b"\\xff\\x58\\x04\\x04\\x02\\x18\\x08"
        ```
    """
    return message.to_bytes()


def encode_raw(message: BaseMessage) -> RawMessage:
    """Encode a message to the raw form handed to a MIDI transport."""
    return message.to_raw()


def encode_all(messages: Iterable[BaseMessage]) -> list[bytes]:
    """Encode several messages, one wire-byte string per message."""
    return [encode(message) for message in messages]
