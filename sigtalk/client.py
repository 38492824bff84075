"""Send a text message to a listening process, one signal per bit."""

from __future__ import annotations

import os
import signal
import sys
import time

from sigtalk.chars import atoi
from sigtalk.fmt import printf
from sigtalk.protocol import BIT_DELAY, encode_message


def _signal_for(bit: int) -> int:
    return signal.SIGUSR2 if bit else signal.SIGUSR1


def send_message(pid: int, message: str | bytes, delay: float = BIT_DELAY) -> None:
    """Send ``message`` and its terminator to process ``pid``.

    Each bit is one signal, followed by a pause of ``delay`` seconds.
    Raises OSError when the process cannot be signalled.
    """
    if pid <= 0:
        raise ValueError(f"invalid PID: {pid}")
    for bit in encode_message(message):
        os.kill(pid, _signal_for(bit))
        time.sleep(delay)


def main(argv: list[str] | None = None) -> int:
    """Command entry point: ``client <PID> <Message>``."""
    if argv is None:
        argv = sys.argv[1:]
    prog = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "client"
    if len(argv) != 2:
        printf("Use: %s <PID> <Message>\n", prog)
        return 1
    pid = atoi(argv[0])
    if pid <= 0:
        printf("PID invalid.\n")
        return 1
    try:
        send_message(pid, argv[1])
    except OSError as exc:
        print(f"{prog}: cannot signal {pid}: {exc.strerror or exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())