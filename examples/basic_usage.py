#!/usr/bin/env python3
"""Basic usage example for midiwire.

This example demonstrates:
1. Building typed MIDI messages
2. Encoding them to wire bytes
3. Decoding wire bytes back to typed messages
4. Scanning a stream that contains unsupported messages
"""

from __future__ import annotations

from midiwire import (
    END_OF_TRACK,
    KeyMode,
    KeySignature,
    NoteOff,
    NoteOn,
    SMPTEFormat,
    SMPTEOffset,
    Tempo,
    TimeSignature,
    TrackName,
    UnsupportedMessageError,
    decode,
    decode_stream,
    encode,
)


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("midiwire Basic Usage Example")
    print("=" * 60)
    print()

    # Build a short track
    print("1. Building a track...")
    track = [
        TrackName("Lead"),
        SMPTEOffset.from_time(SMPTEFormat.FPS_30_DROP, 10, 0, 59, 29, 99),
        TimeSignature(3, 4, 24, 8),
        KeySignature(2, KeyMode.MAJOR),
        Tempo.from_bpm(120.0),
        NoteOn(channel=0, pitch=60, velocity=90),
        NoteOff(channel=0, pitch=60, velocity=0),
        END_OF_TRACK,
    ]
    for msg in track:
        print(f"   {msg}")
    print()

    # Encode
    print("2. Encoding...")
    wire = [encode(msg) for msg in track]
    for data in wire:
        print(f"   {data.hex(' ')}")
    print()

    # Decode
    print("3. Decoding...")
    decoded = [decode(data) for data in wire]
    if decoded == track:
        print("   ✓ Round-trip successful! Messages match.")
    else:
        print("   ✗ Round-trip failed! Messages don't match.")
    print()

    # A zero-velocity NoteOn is a NoteOff on the wire
    print("4. Decoding a zero-velocity NoteOn...")
    print(f"   {decode(encode(NoteOn(0, 64, 0)))}")
    print()

    # Unsupported messages
    print("5. Decoding pitch bend strictly...")
    try:
        decode(b"\xe0\x00\x40")
    except UnsupportedMessageError as e:
        print(f"   {e}")
    print()

    print("6. Scanning a mixed stream...")
    stream = [b"\xf8", b"\x90\x40\x64", b"\xe0\x00\x40", b"\xff\x2f\x00"]
    for msg in decode_stream(stream):
        print(f"   {msg}")
    print()

    print("=" * 60)
    print("Example complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
