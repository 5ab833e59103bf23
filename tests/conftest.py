"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from midiwire import (
    END_OF_TRACK,
    ControlChange,
    KeyMode,
    KeySignature,
    Message,
    NoteOff,
    NoteOn,
    ProgramChange,
    SMPTEFormat,
    SMPTEOffset,
    SysEx,
    Tempo,
    TimeSignature,
    TrackName,
)


@pytest.fixture
def sample_track() -> list[Message]:
    """A short track using every kind of supported message."""
    return [
        TrackName("Piano"),
        SMPTEOffset.from_time(SMPTEFormat.FPS_25, 0, 0, 2, 0, 0),
        TimeSignature(3, 4, 24, 8),
        KeySignature(-3, KeyMode.MINOR),
        Tempo.from_bpm(96.0),
        ProgramChange(0, 0),
        ControlChange(0, 7, 100),
        NoteOn(0, 60, 90),
        NoteOff(0, 60, 40),
        SysEx(b"\x7e\x7f\x09\x01"),
        END_OF_TRACK,
    ]


@pytest.fixture
def sample_stream() -> list[bytes]:
    """Wire bytes mixing supported and unsupported messages."""
    return [
        b"\xff\x03\x05Piano",
        b"\xff\x00\x02\x00\x01",  # sequence number
        b"\xf8",  # timing clock
        b"\x90\x3c\x5a",
        b"\xe0\x00\x40",  # pitch bend
        b"\x90\x3c\x00",
        b"\xff\x51\x02\x07\xa1",  # truncated tempo
        b"\xff\x2f\x00",
    ]
