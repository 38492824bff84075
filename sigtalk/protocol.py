"""Bit-level framing of text sent one signal per bit.

Each byte goes out most significant bit first. A 0 bit travels as SIGUSR1
and a 1 bit as SIGUSR2. A NUL byte ends the message.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

BITS_PER_BYTE = 8
BIT_DELAY = 100e-6
"""Pause between two bits, in seconds."""

_TERMINATOR = 0


def _byte_value(code: int | str) -> int:
    if isinstance(code, str):
        if len(code) != 1:
            raise ValueError(f"expected a single character, got {code!r}")
        value = ord(code)
        if value > 0xFF:
            raise ValueError(f"character {code!r} does not fit in one byte")
        return value
    return code & 0xFF


def encode_char(code: int | str) -> tuple[int, ...]:
    """Return the eight bits of one byte, most significant first.

    An integer code is taken as a byte, so negative values wrap around.
    """
    value = _byte_value(code)
    return tuple((value >> shift) & 1 for shift in reversed(range(BITS_PER_BYTE)))


def encode_message(message: str | bytes) -> Iterator[int]:
    """Yield the bits of ``message`` followed by those of the NUL terminator.

    Text is encoded as UTF-8. The message ends at its first NUL byte, if any.
    """
    data = message if isinstance(message, bytes) else message.encode("utf-8", "surrogateescape")
    data = data.split(b"\0", 1)[0]
    for byte in data:
        yield from encode_char(byte)
    yield from encode_char(_TERMINATOR)


@dataclass
class BitDecoder:
    """Collects bits, most significant first, into bytes."""

    _value: int = field(default=0, repr=False)
    _count: int = field(default=0, repr=False)

    def feed(self, bit: int) -> int | None:
        """Take one bit; return the byte it completes, otherwise None."""
        if bit not in (0, 1):
            raise ValueError(f"a bit must be 0 or 1, got {bit!r}")
        self._value = ((self._value << 1) | bit) & 0xFF
        self._count += 1
        if self._count < BITS_PER_BYTE:
            return None
        byte = self._value
        self._value = 0
        self._count = 0
        return byte