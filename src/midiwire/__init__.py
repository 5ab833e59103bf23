"""midiwire: Typed MIDI Message Codec

A Python library for converting between typed MIDI messages and the raw byte
encoding defined by the MIDI standard. Covers channel voice messages, meta
events and system-exclusive payloads.

Key Features:
- Immutable, Pydantic-validated message values
- Strict decoding with distinct unsupported/malformed errors
- Fail-soft decoding for scanning mixed message streams
- Exact tempo, time signature and SMPTE offset field codecs

Quick Start:
    >>> from midiwire import NoteOn, Tempo, decode, encode
    >>>
    >>> data = encode(NoteOn(channel=3, pitch=60, velocity=90))
    >>> data
    b'\\x93<Z'
    >>> decode(data)
    NoteOn(channel=3, pitch=60, velocity=90)
    >>> Tempo.from_bpm(120.0).micros_per_quarter
    500000
"""

from __future__ import annotations

from .codec import (
    Command,
    MetaEvent,
    RawMessage,
    ShortMessage,
    SysexMessage,
    decode,
    decode_stream,
    encode,
    encode_all,
    encode_raw,
    parse_raw,
    try_decode,
)
from .exceptions import (
    DecodeError,
    MalformedMessageError,
    MidiwireError,
    UnsupportedMessageError,
)
from .models import (
    END_OF_TRACK,
    BaseMessage,
    ChannelVoice,
    ControlChange,
    Copyright,
    CuePoint,
    EndOfTrack,
    InstrumentName,
    KeyMode,
    KeySignature,
    Lyrics,
    Marker,
    Message,
    MetaMessage,
    NoteOff,
    NoteOn,
    ProgramChange,
    SMPTEFormat,
    SMPTEOffset,
    SysEx,
    Tempo,
    TextMetaMessage,
    TimeSignature,
    TrackName,
)

__version__ = "0.1.0"

__all__ = [
    # Core API
    "encode",
    "encode_raw",
    "encode_all",
    "decode",
    "try_decode",
    "decode_stream",
    # Messages
    "Message",
    "BaseMessage",
    "ChannelVoice",
    "MetaMessage",
    "TextMetaMessage",
    "NoteOn",
    "NoteOff",
    "ControlChange",
    "ProgramChange",
    "KeySignature",
    "KeyMode",
    "EndOfTrack",
    "END_OF_TRACK",
    "TimeSignature",
    "Tempo",
    "SMPTEOffset",
    "SMPTEFormat",
    "Copyright",
    "TrackName",
    "InstrumentName",
    "Lyrics",
    "Marker",
    "CuePoint",
    "SysEx",
    # Raw messages
    "Command",
    "RawMessage",
    "ShortMessage",
    "MetaEvent",
    "SysexMessage",
    "parse_raw",
    # Exceptions
    "MidiwireError",
    "DecodeError",
    "UnsupportedMessageError",
    "MalformedMessageError",
    # Version
    "__version__",
]
