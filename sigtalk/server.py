"""Receive messages sent one bit per signal and write them out."""

from __future__ import annotations

import os
import signal
import sys
from dataclasses import dataclass, field
from typing import BinaryIO, Optional, Sequence

from sigtalk.printf import printf
from sigtalk.protocol import SIGNAL_ONE, SIGNAL_ZERO, Decoder

__all__ = ["Server", "main"]


@dataclass
class Server:
    """Decodes incoming signals and writes each finished byte to ``stream``.

    A NUL byte ends a message and is written as a newline.
    """

    stream: Optional[BinaryIO] = None
    decoder: Decoder = field(default_factory=Decoder)

    def _output(self) -> BinaryIO:
        return sys.stdout.buffer if self.stream is None else self.stream

    def handle(self, signum: int, frame: object = None) -> None:
        """Signal handler: take one bit and write the byte when complete."""
        byte = self.decoder.feed(signum)
        if byte is None:
            return
        out = self._output()
        out.write(b"\n" if byte == 0 else bytes((byte,)))
        out.flush()

    def install(self) -> None:
        """Register ``handle`` for both message signals."""
        signal.signal(SIGNAL_ONE, self.handle)
        signal.signal(SIGNAL_ZERO, self.handle)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry point: print the PID, then receive messages forever."""
    printf("%d\n", os.getpid(), stream=sys.stdout)
    sys.stdout.flush()
    server = Server()
    server.install()
    while True:
        signal.pause()


if __name__ == "__main__":
    sys.exit(main())