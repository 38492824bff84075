"""Receive messages sent one signal per bit and print them."""

from __future__ import annotations

import os
import signal
import sys
from types import FrameType
from typing import BinaryIO

from sigtalk.fmt import printf
from sigtalk.protocol import BitDecoder


class SignalReceiver:
    """Turns SIGUSR1/SIGUSR2 signals into bytes written to a binary stream.

    Each finished byte is written at once; the NUL terminator is written
    as a newline.
    """

    def __init__(self, output: BinaryIO | None = None) -> None:
        self.output = sys.stdout.buffer if output is None else output
        self.decoder = BitDecoder()

    def install(self) -> dict[int, object]:
        """Handle SIGUSR1 and SIGUSR2; return the handlers that were replaced."""
        return {
            signum: signal.signal(signum, self.handle)
            for signum in (signal.SIGUSR1, signal.SIGUSR2)
        }

    def handle(self, signum: int, frame: FrameType | None = None) -> None:
        """Take one bit: SIGUSR2 is a 1, any other signal a 0."""
        byte = self.decoder.feed(1 if signum == signal.SIGUSR2 else 0)
        if byte is None:
            return
        self.output.write(b"\n" if byte == 0 else bytes([byte]))
        self.output.flush()


def main(argv: list[str] | None = None) -> int:
    """Command entry point: print this process's PID and wait for messages."""
    printf("PID: %d\n", os.getpid())
    sys.stdout.flush()
    SignalReceiver().install()
    try:
        while True:
            signal.pause()
    except KeyboardInterrupt:
        return 0


if __name__ == "__main__":
    sys.exit(main())