"""Meta messages.

Meta events carry metadata rather than performance data. Each variant has a
fixed one-byte type code; the fixed-size variants also require an exact
payload length when decoded:

    KeySignature    0x59   2 bytes
    EndOfTrack      0x2F   0 bytes
    TimeSignature   0x58   4 bytes
    Tempo           0x51   3 bytes
    SMPTEOffset     0x54   5 bytes
    Copyright       0x02   UTF-8 text
    TrackName       0x03   UTF-8 text
    InstrumentName  0x04   UTF-8 text
    Lyrics          0x05   UTF-8 text
    Marker          0x06   UTF-8 text
    CuePoint        0x07   UTF-8 text
"""

from __future__ import annotations

import enum
import math
from typing import ClassVar

from pydantic import field_validator

from ..codec.fields import (
    denominator_to_exponent,
    exponent_to_denominator,
    from_signed_byte,
    is_power_of_two,
    pack_smpte,
    pack_uint24,
    smpte_from_bytes,
    smpte_to_bytes,
    to_signed_byte,
    unpack_smpte,
    unpack_uint24,
)
from .base import MetaMessage
from .fields import SignedByte, SMPTECode, UInt24, UnsignedByte

MICROS_PER_MINUTE = 60_000_000


class KeyMode(enum.IntEnum):
    """Key signature mode, stored on the wire as its id."""

    MINOR = 0
    MAJOR = 1

    def __str__(self) -> str:
        return self.name.capitalize()


class KeySignature(MetaMessage):
    """Key signature.

    Attributes:
        shift: Number of sharps (positive) or flats (negative)
        mode: Minor or major
    """

    meta_type: ClassVar[int] = 0x59
    payload_length: ClassVar[int | None] = 2

    shift: SignedByte
    mode: KeyMode

    def __str__(self) -> str:
        return f"KeySignature(shift = {self.shift}, {str(self.mode)})"

    def encode_payload(self) -> bytes:
        return bytes((to_signed_byte(self.shift), self.mode))

    @classmethod
    def from_payload(cls, data: bytes) -> KeySignature:
        return cls(shift=from_signed_byte(data[0]), mode=KeyMode(data[1]))


class EndOfTrack(MetaMessage):
    """End of track marker. Use the ``END_OF_TRACK`` instance."""

    meta_type: ClassVar[int] = 0x2F
    payload_length: ClassVar[int | None] = 0

    def encode_payload(self) -> bytes:
        return b""

    @classmethod
    def from_payload(cls, data: bytes) -> EndOfTrack:
        return END_OF_TRACK


END_OF_TRACK = EndOfTrack()


class TimeSignature(MetaMessage):
    """Time signature.

    ``denom`` is the literal denominator (4 for quarter notes, 8 for eighths)
    and must be a power of two; the wire form stores its base-2 exponent.

    Attributes:
        num: Numerator
        denom: Denominator, a power of two
        clocks_per_metro: MIDI clocks per metronome click
        num32_per_q: Notated 32nd notes per quarter note
    """

    meta_type: ClassVar[int] = 0x58
    payload_length: ClassVar[int | None] = 4

    num: UnsignedByte
    denom: int
    clocks_per_metro: UnsignedByte
    num32_per_q: UnsignedByte = 32

    @field_validator("denom")
    @classmethod
    def _check_denom(cls, value: int) -> int:
        if not is_power_of_two(value):
            raise ValueError(f"Denominator ({value}) must be a power of two")
        if value.bit_length() - 1 > 0xFF:
            raise ValueError(f"Denominator ({value}) exponent does not fit in a byte")
        return value

    def __str__(self) -> str:
        return (
            f"TimeSignature({self.num}/{self.denom}, clocks_per_metro = {self.clocks_per_metro}, "
            f"num32_per_q = {self.num32_per_q})"
        )

    def encode_payload(self) -> bytes:
        return bytes(
            (
                self.num,
                denominator_to_exponent(self.denom),
                self.clocks_per_metro,
                self.num32_per_q,
            )
        )

    @classmethod
    def from_payload(cls, data: bytes) -> TimeSignature:
        return cls(
            num=data[0],
            denom=exponent_to_denominator(data[1]),
            clocks_per_metro=data[2],
            num32_per_q=data[3],
        )


class Tempo(MetaMessage):
    """Tempo, as microseconds per quarter note.

    Example:
        >>> Tempo.from_bpm(120.0)
        Tempo(micros_per_quarter=500000)
    """

    meta_type: ClassVar[int] = 0x51
    payload_length: ClassVar[int | None] = 3

    micros_per_quarter: UInt24

    @classmethod
    def from_bpm(cls, bpm: float) -> Tempo:
        """Build a tempo from beats per minute, rounding to the nearest microsecond.

        Raises:
            ValueError: If ``bpm`` is not positive
            pydantic.ValidationError: If the tempo does not fit in 24 bits
        """
        if not bpm > 0:
            raise ValueError(f"bpm must be positive, got {bpm}")
        return cls(micros_per_quarter=int(MICROS_PER_MINUTE / bpm + 0.5))

    @property
    def bpm(self) -> float:
        if not self.micros_per_quarter:
            return math.inf
        return MICROS_PER_MINUTE / self.micros_per_quarter

    def __str__(self) -> str:
        return f"Tempo(µs per 1/4 = {self.micros_per_quarter}, bpm = {self.bpm:.0f})"

    def encode_payload(self) -> bytes:
        return pack_uint24(self.micros_per_quarter)

    @classmethod
    def from_payload(cls, data: bytes) -> Tempo:
        return cls(micros_per_quarter=unpack_uint24(data))


class SMPTEFormat(enum.IntEnum):
    """SMPTE frame rate, stored as a 2-bit code."""

    FPS_24 = 0
    FPS_25 = 1
    FPS_30_DROP = 2
    FPS_30 = 3

    @classmethod
    def from_frame_rate(cls, frame_rate: float) -> SMPTEFormat:
        """Look up a format by frames per second (24, 25, 29.97 or 30).

        Raises:
            ValueError: If the frame rate is not one of the four SMPTE rates
        """
        for fmt in cls:
            if fmt.frame_rate == frame_rate:
                return fmt
        raise ValueError(f"Unsupported fps {frame_rate}")

    @property
    def frame_rate(self) -> float:
        return _FRAME_RATES[self]

    def __str__(self) -> str:
        if self is SMPTEFormat.FPS_30_DROP:
            return str(self.frame_rate)
        return str(int(self.frame_rate))


_FRAME_RATES = {
    SMPTEFormat.FPS_24: 24.0,
    SMPTEFormat.FPS_25: 25.0,
    SMPTEFormat.FPS_30_DROP: 29.97,
    SMPTEFormat.FPS_30: 30.0,
}


class SMPTEOffset(MetaMessage):
    """SMPTE start time of a track, as a packed 40-bit code.

    The top byte holds the frame rate code in its two high bits and the hours
    in the remaining six; minutes, seconds, frames and subframes take one byte
    each.

    Example:
        >>> offset = SMPTEOffset.from_time(SMPTEFormat.FPS_25, 1, 2, 3, 4, 5)
        >>> offset.hours, offset.subframes
        (1, 5)
    """

    meta_type: ClassVar[int] = 0x54
    payload_length: ClassVar[int | None] = 5

    code: SMPTECode

    @classmethod
    def from_time(
        cls,
        fps: SMPTEFormat | int,
        hours: int,
        minutes: int,
        seconds: int,
        frames: int,
        subframes: int,
    ) -> SMPTEOffset:
        """Pack a frame rate and time into an offset.

        Raises:
            ValueError: If the format code is invalid or a component does not fit its bits
        """
        fps = SMPTEFormat(fps)
        return cls(code=pack_smpte(fps, hours, minutes, seconds, frames, subframes))

    @property
    def fps(self) -> SMPTEFormat:
        return SMPTEFormat(unpack_smpte(self.code)[0])

    @property
    def hours(self) -> int:
        return unpack_smpte(self.code)[1]

    @property
    def minutes(self) -> int:
        return unpack_smpte(self.code)[2]

    @property
    def seconds(self) -> int:
        return unpack_smpte(self.code)[3]

    @property
    def frames(self) -> int:
        return unpack_smpte(self.code)[4]

    @property
    def subframes(self) -> int:
        return unpack_smpte(self.code)[5]

    def __str__(self) -> str:
        _, hours, minutes, seconds, frames, subframes = unpack_smpte(self.code)
        return (
            f"SMPTEOffset(time = {hours:02d}:{minutes:02d}:{seconds:02d}:{frames:02d}.{subframes}, "
            f"fps = {str(self.fps)})"
        )

    def encode_payload(self) -> bytes:
        return smpte_to_bytes(self.code)

    @classmethod
    def from_payload(cls, data: bytes) -> SMPTEOffset:
        return cls(code=smpte_from_bytes(data))


class TextMetaMessage(MetaMessage):
    """Base for meta events whose payload is UTF-8 text with no terminator."""

    text: str

    def encode_payload(self) -> bytes:
        return self.text.encode("utf-8")

    @classmethod
    def from_payload(cls, data: bytes) -> TextMetaMessage:
        return cls(text=data.decode("utf-8", errors="replace"))


class NamedTextMetaMessage(TextMetaMessage):
    """Text meta event whose text is a name."""

    @property
    def name(self) -> str:
        return self.text


class Copyright(TextMetaMessage):
    meta_type: ClassVar[int] = 0x02


class TrackName(NamedTextMetaMessage):
    meta_type: ClassVar[int] = 0x03


class InstrumentName(NamedTextMetaMessage):
    meta_type: ClassVar[int] = 0x04


class Lyrics(TextMetaMessage):
    meta_type: ClassVar[int] = 0x05


class Marker(NamedTextMetaMessage):
    meta_type: ClassVar[int] = 0x06


class CuePoint(NamedTextMetaMessage):
    meta_type: ClassVar[int] = 0x07


META_MESSAGE_TYPES: tuple[type[MetaMessage], ...] = (
    KeySignature,
    EndOfTrack,
    TimeSignature,
    Tempo,
    SMPTEOffset,
    Copyright,
    TrackName,
    InstrumentName,
    Lyrics,
    Marker,
    CuePoint,
)
