"""Pydantic message modeling for midiwire.

This module provides the closed set of MIDI message variants: channel voice
messages, meta messages and system-exclusive messages.
"""

from __future__ import annotations

from typing import Union

from .base import BaseMessage, ChannelVoice, MetaMessage
from .channel import ControlChange, NoteOff, NoteOn, ProgramChange
from .fields import BoundedInt, Channel, DataByte
from .meta import (
    END_OF_TRACK,
    META_MESSAGE_TYPES,
    Copyright,
    CuePoint,
    EndOfTrack,
    InstrumentName,
    KeyMode,
    KeySignature,
    Lyrics,
    Marker,
    SMPTEFormat,
    SMPTEOffset,
    Tempo,
    TextMetaMessage,
    TimeSignature,
    TrackName,
)
from .sysex import SysEx

Message = Union[
    NoteOn,
    NoteOff,
    ControlChange,
    ProgramChange,
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
    SysEx,
]

__all__ = [
    "Message",
    "BaseMessage",
    "ChannelVoice",
    "MetaMessage",
    "TextMetaMessage",
    # Channel voice
    "NoteOn",
    "NoteOff",
    "ControlChange",
    "ProgramChange",
    # Meta
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
    "META_MESSAGE_TYPES",
    # SysEx
    "SysEx",
    # Field helpers
    "BoundedInt",
    "Channel",
    "DataByte",
]
