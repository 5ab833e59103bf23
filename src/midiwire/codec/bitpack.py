"""Bit-level packing and unpacking utilities.

This module provides the low-level bit manipulation behind the field codecs.
All operations are deterministic and big-endian (most significant bit first).
"""

from __future__ import annotations


class BitPacker:
    """Packs unsigned and signed integers into a big-endian bit accumulator.

    Example:
        >>> packer = BitPacker()
        >>> packer.write_uint(1, num_bits=2)
        >>> packer.write_uint(1, num_bits=6)
        >>> packer.to_bytes()
        b'A'
    """

    def __init__(self) -> None:
        """Initialize an empty bit packer."""
        self._value = 0
        self._length = 0

    def write_uint(self, value: int, num_bits: int) -> None:
        """Write an unsigned integer using the specified number of bits.

        Args:
            value: Unsigned integer value to write (must be >= 0)
            num_bits: Number of bits to use for encoding (1-64)

        Raises:
            ValueError: If value is negative or doesn't fit in num_bits
        """
        if value < 0:
            raise ValueError(f"write_uint requires non-negative value, got {value}")
        if num_bits < 1 or num_bits > 64:
            raise ValueError(f"num_bits must be 1-64, got {num_bits}")

        max_value = (1 << num_bits) - 1
        if value > max_value:
            raise ValueError(f"Value {value} requires more than {num_bits} bits (max: {max_value})")

        self._value = (self._value << num_bits) | value
        self._length += num_bits

    def write_int(self, value: int, num_bits: int) -> None:
        """Write a signed integer using two's complement encoding.

        Args:
            value: Signed integer value to write
            num_bits: Number of bits to use for encoding (2-64)

        Raises:
            ValueError: If value doesn't fit in num_bits using two's complement
        """
        if num_bits < 2 or num_bits > 64:
            raise ValueError(f"num_bits must be 2-64 for signed integers, got {num_bits}")

        min_value = -(1 << (num_bits - 1))
        max_value = (1 << (num_bits - 1)) - 1

        if value < min_value or value > max_value:
            raise ValueError(
                f"Value {value} doesn't fit in {num_bits} bits (range: {min_value} to {max_value})"
            )

        self.write_uint(value & ((1 << num_bits) - 1), num_bits)

    def to_int(self) -> int:
        """Return the accumulated bits as a single unsigned integer."""
        return self._value

    def to_bytes(self) -> bytes:
        """Convert the bit buffer to bytes.

        If the number of bits is not a multiple of 8, the last byte
        is padded with zeros on the right (LSB side).

        Returns:
            Packed bytes
        """
        if not self._length:
            return b""

        padding = (-self._length) % 8
        num_bytes = (self._length + padding) // 8
        return (self._value << padding).to_bytes(num_bytes, "big")


class BitUnpacker:
    """Unpacks integers from a big-endian bit buffer.

    The buffer is either a byte string or an integer of known bit width, so
    packed fields such as the 40-bit SMPTE code can be sliced in place.

    Example:
        >>> unpacker = BitUnpacker(b"A")
        >>> unpacker.read_uint(2), unpacker.read_uint(6)
        (1, 1)
    """

    def __init__(self, data: bytes | int, num_bits: int | None = None) -> None:
        """Initialize a bit unpacker.

        Args:
            data: Byte buffer, or an unsigned integer holding ``num_bits`` bits
            num_bits: Width of ``data`` when it is an integer
        """
        if isinstance(data, int):
            if num_bits is None:
                raise ValueError("num_bits is required when unpacking an integer")
            if data < 0 or data >> num_bits:
                raise ValueError(f"Value {data} does not fit in {num_bits} bits")
            self._value = data
            self._length = num_bits
        else:
            self._value = int.from_bytes(bytes(data), "big")
            self._length = len(data) * 8
        self._position = 0

    def read_uint(self, num_bits: int) -> int:
        """Read an unsigned integer of the specified bit width.

        Raises:
            ValueError: If num_bits is out of range
            IndexError: If not enough bits are available
        """
        if num_bits < 1 or num_bits > 64:
            raise ValueError(f"num_bits must be 1-64, got {num_bits}")

        if num_bits > self.bits_remaining():
            raise IndexError(
                f"Not enough bits: need {num_bits}, have {self.bits_remaining()}"
            )

        self._position += num_bits
        shift = self._length - self._position
        return (self._value >> shift) & ((1 << num_bits) - 1)

    def read_int(self, num_bits: int) -> int:
        """Read a signed integer using two's complement encoding.

        Raises:
            ValueError: If num_bits is out of range
            IndexError: If not enough bits are available
        """
        if num_bits < 2 or num_bits > 64:
            raise ValueError(f"num_bits must be 2-64 for signed integers, got {num_bits}")

        unsigned_value = self.read_uint(num_bits)

        if unsigned_value & (1 << (num_bits - 1)):
            return unsigned_value - (1 << num_bits)
        return unsigned_value

    def bits_remaining(self) -> int:
        """Return the number of bits remaining in the buffer."""
        return self._length - self._position
