"""Raw MIDI messages as exchanged with a transport.

A transport hands the codec one of three shapes: a short message (status byte
plus up to two data bytes), a meta event (type code plus payload) or a
system-exclusive payload. This module models those shapes and converts them
to and from wire bytes.

Wire layout:
- Short message: [status] [data1] [data2], data bytes per the MIDI standard
- Meta event:    [0xFF] [type] [length (variable-length quantity)] [payload]
- SysEx:         [0xF0] [payload] [0xF7]
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Union

from ..exceptions import MalformedMessageError, UnsupportedMessageError
from .fields import VLQ_MAX, read_vlq, write_vlq

SYSEX_START = 0xF0
SYSEX_END = 0xF7
META_PREFIX = 0xFF


class Command(IntEnum):
    """Short message commands.

    Channel messages are identified by the upper nibble of the status byte;
    system messages (0xF1-0xFF) by the whole status byte.
    """

    NOTE_OFF = 0x80
    NOTE_ON = 0x90
    POLY_PRESSURE = 0xA0
    CONTROL_CHANGE = 0xB0
    PROGRAM_CHANGE = 0xC0
    CHANNEL_PRESSURE = 0xD0
    PITCH_BEND = 0xE0
    MIDI_TIME_CODE = 0xF1
    SONG_POSITION_POINTER = 0xF2
    SONG_SELECT = 0xF3
    TUNE_REQUEST = 0xF6
    TIMING_CLOCK = 0xF8
    START = 0xFA
    CONTINUE = 0xFB
    STOP = 0xFC
    ACTIVE_SENSING = 0xFE
    SYSTEM_RESET = 0xFF


# Number of data bytes following the status byte; anything absent has none.
DATA_LENGTHS: dict[int, int] = {
    Command.NOTE_OFF: 2,
    Command.NOTE_ON: 2,
    Command.POLY_PRESSURE: 2,
    Command.CONTROL_CHANGE: 2,
    Command.PROGRAM_CHANGE: 1,
    Command.CHANNEL_PRESSURE: 1,
    Command.PITCH_BEND: 2,
    Command.MIDI_TIME_CODE: 1,
    Command.SONG_POSITION_POINTER: 2,
    Command.SONG_SELECT: 1,
}

# Channel messages with one data byte that transports may pad to three bytes
PADDED_COMMANDS = frozenset((Command.PROGRAM_CHANGE, Command.CHANNEL_PRESSURE))


def _check_byte(name: str, value: int, max_value: int = 0xFF) -> None:
    if not 0 <= value <= max_value:
        raise ValueError(f"{name} must be 0-{max_value:#x}, got {value}")


@dataclass(frozen=True)
class ShortMessage:
    """A status byte with up to two data bytes.

    Attributes:
        status: Status byte (0x80-0xFF)
        data1: First data byte (0 when unused)
        data2: Second data byte (0 when unused)
    """

    status: int
    data1: int = 0
    data2: int = 0

    def __post_init__(self) -> None:
        if not 0x80 <= self.status <= 0xFF:
            raise ValueError(f"status must be 0x80-0xff, got {self.status:#x}")
        _check_byte("data1", self.data1)
        _check_byte("data2", self.data2)

    @classmethod
    def create(cls, command: int, channel: int = 0, data1: int = 0, data2: int = 0) -> ShortMessage:
        """Build a channel message from its command and channel."""
        _check_byte("channel", channel, 0x0F)
        return cls(command | channel, data1, data2)

    @property
    def command(self) -> int:
        if self.status >= 0xF0:
            return self.status
        return self.status & 0xF0

    @property
    def channel(self) -> int:
        return self.status & 0x0F

    @property
    def data_length(self) -> int:
        return DATA_LENGTHS.get(self.command, 0)

    def to_bytes(self) -> bytes:
        return bytes((self.status, self.data1, self.data2)[: 1 + self.data_length])


@dataclass(frozen=True)
class MetaEvent:
    """A meta event type code with its payload.

    Attributes:
        meta_type: Meta type code (0x00-0x7F)
        data: Payload bytes, without type or length prefix
    """

    meta_type: int
    data: bytes = b""

    def __post_init__(self) -> None:
        _check_byte("meta_type", self.meta_type, 0x7F)
        object.__setattr__(self, "data", bytes(self.data))
        if len(self.data) > VLQ_MAX:
            raise ValueError(f"Meta payload too long: {len(self.data)} bytes")

    def to_bytes(self) -> bytes:
        return bytes((META_PREFIX, self.meta_type)) + write_vlq(len(self.data)) + self.data


@dataclass(frozen=True)
class SysexMessage:
    """A system-exclusive payload, without the 0xF0/0xF7 framing."""

    data: bytes = b""

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", bytes(self.data))

    def to_bytes(self) -> bytes:
        return bytes((SYSEX_START,)) + self.data + bytes((SYSEX_END,))


RawMessage = Union[ShortMessage, MetaEvent, SysexMessage]


def parse_raw(data: bytes) -> RawMessage:
    """Parse the wire bytes of exactly one MIDI message.

    A lone 0xFF byte is the System Reset short message; 0xFF followed by more
    bytes is a meta event. Program change and channel pressure may also arrive
    padded to three bytes; the padding becomes ``data2``. Running status is not
    supported.

    Args:
        data: Wire bytes of a single message

    Returns:
        ShortMessage, MetaEvent or SysexMessage

    Raises:
        MalformedMessageError: If the framing or data byte count is invalid
        UnsupportedMessageError: If the message starts with a bare 0xF7
    """
    data = bytes(data)
    if not data:
        raise MalformedMessageError(data)

    status = data[0]
    if status < 0x80:
        raise MalformedMessageError(data)

    if status == SYSEX_START:
        if len(data) < 2 or data[-1] != SYSEX_END:
            raise MalformedMessageError(data)
        return SysexMessage(data[1:-1])

    if status == SYSEX_END:
        raise UnsupportedMessageError(data)

    if status == META_PREFIX and len(data) > 1:
        meta_type = data[1]
        if meta_type > 0x7F:
            raise MalformedMessageError(data)
        try:
            length, offset = read_vlq(data, 2)
        except ValueError as e:
            raise MalformedMessageError(data) from e
        if len(data) - offset != length:
            raise MalformedMessageError(data)
        return MetaEvent(meta_type, data[offset:])

    command = status if status >= 0xF0 else status & 0xF0
    message_length = 1 + DATA_LENGTHS.get(command, 0)
    if command in PADDED_COMMANDS and len(data) == 3:
        # padded to three bytes by the transport; the extra byte is ignored
        message_length = 3
    if len(data) != message_length or any(b > 0x7F for b in data[1:]):
        raise MalformedMessageError(data)
    padded = data + bytes(3 - len(data))
    return ShortMessage(padded[0], padded[1], padded[2])

