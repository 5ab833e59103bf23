"""MIDI message decoder.

This module converts raw MIDI messages (or their wire bytes) into typed
message values. ``decode`` is strict and raises on anything it cannot model;
``try_decode`` returns None instead, for scanning streams that may contain
message types the codec does not support.

The following messages are unsupported:
- Short messages: poly pressure, channel pressure, pitch bend, MIDI time code,
  song position pointer, song select, tune request, timing clock, start,
  continue, stop, active sensing, system reset
- Meta messages: sequence number (0x00), sequencer specific (0x7F) and any
  type code not listed in ``midiwire.models.meta``
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Iterator, Optional, Sequence, Union

from pydantic import ValidationError

from ..exceptions import DecodeError, MalformedMessageError, UnsupportedMessageError
from ..models import (
    META_MESSAGE_TYPES,
    ControlChange,
    Message,
    MetaMessage,
    NoteOff,
    NoteOn,
    ProgramChange,
    SysEx,
)
from .raw import Command, MetaEvent, RawMessage, ShortMessage, SysexMessage, parse_raw

logger = logging.getLogger(__name__)

# Wire bytes of one message, as bytes or as a sequence of ints
WireData = Union[bytes, bytearray, memoryview, Sequence[int]]


def _note_on(sm: ShortMessage) -> Message:
    if sm.data2 > 0:
        return NoteOn(channel=sm.channel, pitch=sm.data1, velocity=sm.data2)
    # NoteOn with velocity 0 stands in for NoteOff
    return NoteOff(channel=sm.channel, pitch=sm.data1, velocity=sm.data2)


def _note_off(sm: ShortMessage) -> Message:
    return NoteOff(channel=sm.channel, pitch=sm.data1, velocity=sm.data2)


def _control_change(sm: ShortMessage) -> Message:
    return ControlChange(channel=sm.channel, num=sm.data1, value=sm.data2)


def _program_change(sm: ShortMessage) -> Message:
    return ProgramChange(channel=sm.channel, patch=sm.data1)


SHORT_DECODERS: dict[int, Callable[[ShortMessage], Message]] = {
    Command.NOTE_ON: _note_on,
    Command.NOTE_OFF: _note_off,
    Command.CONTROL_CHANGE: _control_change,
    Command.PROGRAM_CHANGE: _program_change,
}

META_DECODERS: dict[int, type[MetaMessage]] = {cls.meta_type: cls for cls in META_MESSAGE_TYPES}


def decode(message: RawMessage | WireData) -> Message:
    """Decode a raw MIDI message to a typed message.

    Args:
        message: A ShortMessage, MetaEvent or SysexMessage, or the wire bytes
            of exactly one message as ``bytes`` or a sequence of ints

    Returns:
        The decoded message value

    Raises:
        UnsupportedMessageError: If the command or meta type is not modeled
        MalformedMessageError: If the framing, payload length or payload
            content is invalid for the message type
        TypeError: If ``message`` is neither a raw message nor wire data

    Examples:
        ```python
        from midiwire import decode

        decode(b"\\x92\\x3c\\x5a")        # NoteOn(channel=2, pitch=60, velocity=90)
        decode(b"\\xff\\x51\\x03\\x07\\xa1\\x20")  # Tempo(micros_per_quarter=500000)
        ```
    """
    raw = _as_raw(message)

    if isinstance(raw, ShortMessage):
        decoder = SHORT_DECODERS.get(raw.command)
        if decoder is None:
            raise UnsupportedMessageError(raw.to_bytes())
        try:
            return decoder(raw)
        except ValidationError as e:
            raise MalformedMessageError(raw.to_bytes()) from e

    if isinstance(raw, MetaEvent):
        meta_class = META_DECODERS.get(raw.meta_type)
        if meta_class is None:
            raise UnsupportedMessageError(raw.to_bytes())
        if meta_class.payload_length is not None and len(raw.data) != meta_class.payload_length:
            raise MalformedMessageError(raw.to_bytes())
        try:
            return meta_class.from_payload(raw.data)
        except ValueError as e:
            # includes pydantic.ValidationError
            raise MalformedMessageError(raw.to_bytes()) from e

    return SysEx(data=raw.data)


def _as_raw(message: RawMessage | WireData) -> RawMessage:
    if isinstance(message, (ShortMessage, MetaEvent, SysexMessage)):
        return message
    if isinstance(message, (bytes, bytearray, memoryview)):
        return parse_raw(bytes(message))
    if isinstance(message, Sequence) and not isinstance(message, str):
        # e.g. [0x90, 0x3c, 0x5a] as delivered by rtmidi/mido
        try:
            data = bytes(message)
        except ValueError as e:
            # an item outside 0-255
            raise MalformedMessageError(message) from e
        return parse_raw(data)
    raise TypeError(f"Cannot decode {type(message).__name__}")


def try_decode(message: object) -> Optional[Message]:
    """Decode a raw MIDI message, returning None if it cannot be decoded.

    Never raises: unsupported and malformed messages, as well as inputs that
    are not MIDI data at all, yield None.

    Args:
        message: A raw message or the wire bytes of exactly one message

    Returns:
        The decoded message, or None
    """
    try:
        return decode(message)  # type: ignore[arg-type]
    except DecodeError as e:
        logger.debug("Skipping MIDI message: %s", e)
    except (TypeError, ValueError) as e:
        logger.debug("Skipping non-MIDI input %r: %s", message, e)
    return None


def decode_stream(messages: Iterable[RawMessage | WireData]) -> Iterator[Message]:
    """Decode a sequence of raw messages, skipping those that cannot be decoded.

    Each item must hold exactly one message; running status is not supported.
    """
    for message in messages:
        decoded = try_decode(message)
        if decoded is not None:
            yield decoded
