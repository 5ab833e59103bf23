"""Exception hierarchy for midiwire.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from MidiwireError for easy catching of any midiwire-specific error.

Construction-time validation of message values is left to pydantic, which raises
``pydantic.ValidationError`` (a ``ValueError`` subclass) from the model constructors.
"""

from __future__ import annotations

from typing import Sequence


def hex_bytes(data: Sequence[int]) -> str:
    """Render bytes for diagnostics, e.g. ``[90,3c,5a]``."""
    return "[" + ",".join(f"{b:x}" for b in data) + "]"


def _as_bytes(data: Sequence[int]) -> bytes | list[int]:
    if all(0 <= b <= 0xFF for b in data):
        return bytes(data)
    return list(data)


class MidiwireError(Exception):
    """Base exception for all midiwire errors."""

    pass


class DecodeError(MidiwireError):
    """Raised when raw MIDI data cannot be turned into a message.

    Attributes:
        raw: The offending wire bytes (a list of ints when they do not fit in bytes)
    """

    label = "Invalid"

    def __init__(self, raw: bytes | Sequence[int]) -> None:
        self.raw = raw if isinstance(raw, bytes) else _as_bytes(raw)
        super().__init__(f"{self.label} MIDI message {hex_bytes(self.raw)}")


class UnsupportedMessageError(DecodeError):
    """Raised when a status or meta type code is not modeled by the codec.

    Examples:
        - Pitch bend, channel/poly pressure
        - System common and real-time messages
        - Sequence number and sequencer-specific meta events
        - Unknown meta type codes
    """

    label = "Unsupported"


class MalformedMessageError(DecodeError):
    """Raised when a message type is modeled but its payload is invalid.

    Examples:
        - Meta payload length differs from the fixed length for its type
        - Missing or extra data bytes on a short message
        - Data byte out of range for the target field
        - Unterminated system-exclusive frame
    """

    label = "Malformed"

