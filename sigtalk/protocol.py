"""Bit-per-signal wire format.

Each byte travels as eight signals, most significant bit first:
``SIGUSR1`` carries a 1 bit and ``SIGUSR2`` a 0 bit. A message ends
with a NUL byte.
"""

from __future__ import annotations

import signal
from dataclasses import dataclass
from typing import Iterator, Optional, Union

__all__ = ["SIGNAL_ONE", "SIGNAL_ZERO", "Decoder", "encode_byte", "encode_message"]

SIGNAL_ONE: int = int(getattr(signal, "SIGUSR1", 10))
SIGNAL_ZERO: int = int(getattr(signal, "SIGUSR2", 12))

BITS_PER_BYTE = 8


def encode_byte(value: int) -> tuple[int, ...]:
    """Return the eight signals for one byte, most significant bit first."""
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"expected an int byte, got {value!r}")
    if not 0 <= value <= 0xFF:
        raise ValueError(f"byte out of range: {value}")
    return tuple(
        SIGNAL_ONE if (value >> shift) & 1 else SIGNAL_ZERO
        for shift in reversed(range(BITS_PER_BYTE))
    )


def encode_message(message: Union[str, bytes]) -> Iterator[int]:
    """Yield the signals for a message followed by its terminating NUL.

    Text is sent as UTF-8.
    """
    data = message.encode("utf-8") if isinstance(message, str) else bytes(message)
    for byte in data:
        yield from encode_byte(byte)
    yield from encode_byte(0)


@dataclass
class Decoder:
    """Reassembles bytes from a stream of signals.

    ``SIGUSR1`` counts as a 1 bit; any other signal counts as a 0 bit.
    """

    value: int = 0
    bits: int = 0

    def feed(self, signum: int) -> Optional[int]:
        """Take one signal; return the byte once eight bits are in, else None."""
        self.value = ((self.value << 1) | (signum == SIGNAL_ONE)) & 0xFF
        self.bits += 1
        if self.bits < BITS_PER_BYTE:
            return None
        byte, self.value, self.bits = self.value, 0, 0
        return byte