"""Byte-buffer helpers: fill, search, compare and copy."""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytearray, memoryview]
ReadableBuffer = Union[bytes, bytearray, memoryview]

_ALLOC_LIMIT = 2147483647


def _check_length(length: int, *buffers) -> None:
    if length < 0:
        raise ValueError("length must not be negative")
    for buf in buffers:
        if length > len(buf):
            raise ValueError(f"length {length} exceeds buffer of size {len(buf)}")


def memset(buffer: Buffer, value: int, length: int) -> Buffer:
    """Fill the first ``length`` bytes of ``buffer`` with ``value`` (mod 256)."""
    _check_length(length, buffer)
    buffer[:length] = bytes([value & 0xFF]) * length
    return buffer


def bzero(buffer: Buffer, length: int) -> None:
    """Zero the first ``length`` bytes of ``buffer``."""
    memset(buffer, 0, length)


def calloc(count: int, size: int) -> bytearray:
    """Allocate ``count * size`` zeroed bytes.

    Raises MemoryError when the total would exceed the signed 32-bit limit.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if size and count > _ALLOC_LIMIT // size:
        raise MemoryError(f"cannot allocate {count} x {size} bytes")
    return bytearray(count * size)


def memchr(data: ReadableBuffer, value: int, length: int) -> Optional[int]:
    """Return the index of the first byte equal to ``value`` within ``length`` bytes, or None."""
    _check_length(length, data)
    index = bytes(data[:length]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(left: ReadableBuffer, right: ReadableBuffer, length: int) -> int:
    """Compare ``length`` bytes; return the difference of the first unequal pair, else 0."""
    _check_length(length, left, right)
    for a, b in zip(bytes(left[:length]), bytes(right[:length])):
        if a != b:
            return a - b
    return 0


def memcpy(dst: Buffer, src: ReadableBuffer, length: int) -> Buffer:
    """Copy ``length`` bytes from ``src`` into the start of ``dst``."""
    _check_length(length, dst, src)
    dst[:length] = src[:length]
    return dst


def memmove(dst: Buffer, src: ReadableBuffer, length: int) -> Buffer:
    """Copy ``length`` bytes like memcpy, correct even when the regions overlap."""
    _check_length(length, dst, src)
    dst[:length] = bytes(src[:length])
    return dst