"""Byte buffer helpers working on bytearray and bytes-like objects."""

from __future__ import annotations


def _check_length(length: int, *buffers) -> None:
    if length < 0:
        raise ValueError("length must not be negative")
    for buf in buffers:
        if length > len(buf):
            raise ValueError("length exceeds buffer size")


def memset(buffer: bytearray, value: int, length: int) -> bytearray:
    """Fill the first ``length`` bytes of ``buffer`` with ``value`` (low byte)."""
    _check_length(length, buffer)
    buffer[:length] = bytes([value & 0xFF]) * length
    return buffer


def bzero(buffer: bytearray, length: int) -> None:
    """Zero the first ``length`` bytes of ``buffer``."""
    memset(buffer, 0, length)


def memcpy(dest: bytearray, src: bytes, length: int) -> bytearray:
    """Copy ``length`` bytes from ``src`` to the start of ``dest``."""
    _check_length(length, dest, src)
    dest[:length] = bytes(src[:length])
    return dest


def memmove(buffer: bytearray, dest_offset: int, src_offset: int, length: int) -> bytearray:
    """Copy ``length`` bytes inside ``buffer``; overlapping regions are handled."""
    if dest_offset < 0 or src_offset < 0:
        raise ValueError("offsets must not be negative")
    if length < 0:
        raise ValueError("length must not be negative")
    if max(dest_offset, src_offset) + length > len(buffer):
        raise ValueError("region exceeds buffer size")
    if length:
        buffer[dest_offset:dest_offset + length] = bytes(buffer[src_offset:src_offset + length])
    return buffer


def memchr(data: bytes, value: int, length: int) -> int | None:
    """Index of the first byte equal to ``value`` in the first ``length`` bytes, or None."""
    _check_length(length, data)
    index = bytes(data[:length]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(first: bytes, second: bytes, length: int) -> int:
    """Difference of the first differing byte within ``length`` bytes, else 0."""
    _check_length(length, first, second)
    for a, b in zip(first[:length], second[:length]):
        if a != b:
            return a - b
    return 0


def calloc(count: int, size: int) -> bytearray:
    """A zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)