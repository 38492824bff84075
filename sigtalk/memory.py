"""Byte-buffer operations on bytearrays and other byte sequences."""

from __future__ import annotations

from collections.abc import Sequence

SIZE_MAX = (1 << 64) - 1


def _check_span(name: str, length: int, start: int, n: int) -> None:
    if n < 0 or start < 0:
        raise ValueError(f"{name}: negative offset or length")
    if start + n > length:
        raise IndexError(f"{name}: {n} bytes at {start} exceed buffer of {length}")


def memset(buf: bytearray, value: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buf`` with ``value`` as an unsigned byte."""
    _check_span("memset", len(buf), 0, n)
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    memset(buf, 0, n)


def memcpy(dest: bytearray | None, src: bytes | None, n: int) -> bytearray | None:
    """Copy ``n`` bytes from ``src`` to the start of ``dest`` and return ``dest``.

    When both buffers are None nothing is copied and None is returned.
    """
    if dest is None and src is None:
        return None
    _check_span("memcpy", len(src), 0, n)
    _check_span("memcpy", len(dest), 0, n)
    dest[:n] = src[:n]
    return dest


def memmove(buf: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy ``n`` bytes within ``buf`` from offset ``src`` to offset ``dest``.

    The regions may overlap; the result is as if the source bytes were first
    copied aside.
    """
    _check_span("memmove", len(buf), src, n)
    _check_span("memmove", len(buf), dest, n)
    if dest != src:
        buf[dest:dest + n] = bytes(buf[src:src + n])
    return buf


def memchr(data: Sequence[int], value: int, n: int) -> int | None:
    """Return the offset of the first byte equal to ``value`` in the first ``n``.

    Both sides are compared as unsigned bytes. None means no match.
    """
    target = value & 0xFF
    return next(
        (offset for offset, byte in enumerate(data[:n]) if byte == target),
        None,
    )


def memcmp(a: Sequence[int], b: Sequence[int], n: int) -> int:
    """Compare the first ``n`` bytes of ``a`` and ``b``.

    Returns the difference of the first pair of bytes that differ, or 0.
    """
    _check_span("memcmp", len(a), 0, n)
    _check_span("memcmp", len(b), 0, n)
    return next(
        (x - y for x, y in zip(a[:n], b[:n]) if x != y),
        0,
    )


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``count * size`` bytes.

    A zero count or size, or a product beyond the address space, gives an
    empty buffer.
    """
    if count < 0 or size < 0:
        raise ValueError("calloc: negative count or size")
    if count == 0 or size == 0 or count > SIZE_MAX // size:
        return bytearray()
    return bytearray(count * size)