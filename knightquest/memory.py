"""Byte-buffer helpers working on bytes-like objects and bytearrays."""

from __future__ import annotations

from typing import Optional


def _check_count(n: int) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")


def memset(buf: bytearray, value: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buf`` with ``value`` (truncated to a byte)."""
    _check_count(n)
    if n > len(buf):
        raise ValueError(f"cannot fill {n} bytes of a {len(buf)}-byte buffer")
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> bytearray:
    """Zero the first ``n`` bytes of ``buf``."""
    return memset(buf, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    _check_count(count)
    _check_count(size)
    return bytearray(count * size)


def memchr(data: bytes, value: int, n: int) -> Optional[int]:
    """Return the index of the first ``value`` byte within the first ``n`` bytes, or None."""
    _check_count(n)
    index = bytes(data[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(a: bytes, b: bytes, n: int) -> int:
    """Compare the first ``n`` bytes of two buffers.

    Returns the difference between the first pair of bytes that differ, or 0.
    """
    _check_count(n)
    if n > len(a) or n > len(b):
        raise ValueError(f"cannot compare {n} bytes of buffers of {len(a)} and {len(b)} bytes")
    for left, right in zip(a[:n], b[:n]):
        if left != right:
            return left - right
    return 0


def memcpy(dest: bytearray, src: bytes, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` into the start of ``dest``."""
    _check_count(n)
    if n > len(dest) or n > len(src):
        raise ValueError(f"cannot copy {n} bytes between buffers of {len(src)} and {len(dest)} bytes")
    dest[:n] = src[:n]
    return dest


def memmove(buf: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy ``n`` bytes inside ``buf`` from offset ``src`` to offset ``dest``.

    The regions may overlap; the result is as if the source were copied first.
    """
    _check_count(n)
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    if dest + n > len(buf) or src + n > len(buf):
        raise ValueError(f"region of {n} bytes runs past the end of a {len(buf)}-byte buffer")
    buf[dest:dest + n] = bytes(buf[src:src + n])
    return buf