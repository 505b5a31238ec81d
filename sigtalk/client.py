"""Send a text message to a listening process, one bit per signal."""

from __future__ import annotations

import os
import sys
import time
from typing import Callable, Optional, Sequence, Union

from sigtalk.printf import printf
from sigtalk.protocol import encode_message
from sigtalk.text import atoi

__all__ = ["DEFAULT_DELAY", "send_message", "main"]

DEFAULT_DELAY = 0.0007


def send_message(
    pid: int,
    message: Union[str, bytes],
    delay: float = DEFAULT_DELAY,
    kill: Optional[Callable[[int, int], None]] = None,
) -> None:
    """Signal ``message`` and its terminating NUL to process ``pid``.

    ``delay`` seconds pass after each signal so the receiver can keep up.
    """
    send = os.kill if kill is None else kill
    for signum in encode_message(message):
        send(pid, signum)
        time.sleep(delay)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry point: ``<PID> <message>``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        prog = sys.argv[0] if sys.argv and sys.argv[0] else "client"
        printf("Error: Usage: %s <PID> <message>\n", prog, stream=sys.stdout)
        sys.stdout.flush()
        raise SystemExit(1)
    pid = atoi(args[0])
    send_message(pid, args[1])
    return 0


if __name__ == "__main__":
    sys.exit(main())