"""Field codecs for multi-byte MIDI message fields.

Each pair of functions is an exact inverse over its valid domain:

- 24-bit big-endian integers (tempo)
- power-of-two denominators stored as their base-2 exponent (time signature)
- the packed 40-bit SMPTE offset code
- signed bytes (key signature)
- variable-length quantities (meta event length prefix)
"""

from __future__ import annotations

from .bitpack import BitPacker, BitUnpacker

UINT24_MAX = 0xFFFFFF

# SMPTE offset layout (40 bits, most significant first):
#   bits 38-39  frame rate code
#   bits 32-37  hours
#   bits 24-31  minutes
#   bits 16-23  seconds
#   bits  8-15  frames
#   bits  0-7   subframes
SMPTE_BITS = 40
SMPTE_FIELDS: tuple[tuple[str, int], ...] = (
    ("fps", 2),
    ("hours", 6),
    ("minutes", 8),
    ("seconds", 8),
    ("frames", 8),
    ("subframes", 8),
)
SMPTE_MAX = (1 << SMPTE_BITS) - 1

VLQ_MAX = 0x0FFFFFFF


def pack_uint24(value: int) -> bytes:
    """Split an unsigned 24-bit value into three big-endian bytes."""
    packer = BitPacker()
    packer.write_uint(value, 24)
    return packer.to_bytes()


def unpack_uint24(data: bytes) -> int:
    """Join three bytes, most significant first, into an unsigned value.

    Raises:
        ValueError: If ``data`` is not exactly three bytes long
    """
    if len(data) != 3:
        raise ValueError(f"uint24 requires 3 bytes, got {len(data)}")
    return BitUnpacker(data).read_uint(24)


def is_power_of_two(value: int) -> bool:
    return value > 0 and (value & (value - 1)) == 0


def denominator_to_exponent(denom: int) -> int:
    """Return the base-2 exponent of a power-of-two denominator.

    The exponent is counted by shifting right until the value is at most one.

    Raises:
        ValueError: If ``denom`` is not a positive power of two
    """
    if not is_power_of_two(denom):
        raise ValueError(f"Denominator ({denom}) must be a power of two")
    exponent = 0
    while denom > 1:
        denom >>= 1
        exponent += 1
    return exponent


def exponent_to_denominator(exponent: int) -> int:
    """Return ``2 ** exponent`` as the literal time-signature denominator."""
    if exponent < 0:
        raise ValueError(f"Exponent must be non-negative, got {exponent}")
    return 1 << exponent


def pack_smpte(
    fps_code: int, hours: int, minutes: int, seconds: int, frames: int, subframes: int
) -> int:
    """Pack an SMPTE time into its 40-bit code.

    Raises:
        ValueError: If a component does not fit its bit width
    """
    packer = BitPacker()
    values = (fps_code, hours, minutes, seconds, frames, subframes)
    for (name, num_bits), value in zip(SMPTE_FIELDS, values):
        try:
            packer.write_uint(value, num_bits)
        except ValueError as e:
            raise ValueError(f"SMPTE {name}: {e}") from e
    return packer.to_int()


def unpack_smpte(code: int) -> tuple[int, int, int, int, int, int]:
    """Slice a 40-bit SMPTE code into (fps_code, hours, minutes, seconds, frames, subframes)."""
    unpacker = BitUnpacker(code, SMPTE_BITS)
    fps_code, hours, minutes, seconds, frames, subframes = (
        unpacker.read_uint(num_bits) for _, num_bits in SMPTE_FIELDS
    )
    return fps_code, hours, minutes, seconds, frames, subframes


def smpte_to_bytes(code: int) -> bytes:
    """Serialize a 40-bit SMPTE code as five bytes, most significant first."""
    packer = BitPacker()
    packer.write_uint(code, SMPTE_BITS)
    return packer.to_bytes()


def smpte_from_bytes(data: bytes) -> int:
    """Pack five unsigned bytes into a 40-bit code, byte 0 most significant."""
    if len(data) != 5:
        raise ValueError(f"SMPTE offset requires 5 bytes, got {len(data)}")
    return BitUnpacker(data).read_uint(SMPTE_BITS)


def to_signed_byte(value: int) -> int:
    """Encode a value in -128..127 as its two's complement byte."""
    packer = BitPacker()
    packer.write_int(value, 8)
    return packer.to_int()


def from_signed_byte(byte: int) -> int:
    """Decode a two's complement byte to -128..127."""
    return BitUnpacker(byte, 8).read_int(8)


def write_vlq(value: int) -> bytes:
    """Encode a variable-length quantity (7 bits per byte, high bit = more).

    Raises:
        ValueError: If value is negative or exceeds 0x0FFFFFFF
    """
    if value < 0 or value > VLQ_MAX:
        raise ValueError(f"VLQ value out of range: {value}")
    result = bytearray([value & 0x7F])
    value >>= 7
    while value:
        result.insert(0, 0x80 | (value & 0x7F))
        value >>= 7
    return bytes(result)


def read_vlq(data: bytes, offset: int = 0) -> tuple[int, int]:
    """Decode a variable-length quantity starting at ``offset``.

    Returns:
        Tuple of (value, offset just past the quantity)

    Raises:
        ValueError: If the quantity is truncated or longer than four bytes
    """
    value = 0
    for _ in range(4):
        if offset >= len(data):
            raise ValueError("Truncated variable-length quantity")
        byte = data[offset]
        offset += 1
        value = (value << 7) | (byte & 0x7F)
        if not byte & 0x80:
            return value, offset
    raise ValueError("Variable-length quantity longer than 4 bytes")
