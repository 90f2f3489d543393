"""Incremental MD5 message digest, used to fingerprint tunes."""

from __future__ import annotations

import math
import struct

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF

_INITIAL_STATE = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476)

# Per-step additive constants: floor(abs(sin(i + 1)) * 2**32).
_T = tuple(int(abs(math.sin(i + 1)) * 2**32) & _MASK32 for i in range(64))

_SHIFTS = (
    (7, 12, 17, 22),
    (5, 9, 14, 20),
    (4, 11, 16, 23),
    (6, 10, 15, 21),
)

_PADDING = b"\x80" + bytes(63)


def _rotate_left(x: int, n: int) -> int:
    return ((x << n) | (x >> (32 - n))) & _MASK32


def _round_function(step: int, b: int, c: int, d: int) -> tuple[int, int]:
    """Return the mixing value and the message word index for a step."""
    if step < 16:
        return (b & c) | (~b & d), step
    if step < 32:
        return (b & d) | (c & ~d), (1 + 5 * step) % 16
    if step < 48:
        return b ^ c ^ d, (5 + 3 * step) % 16
    return c ^ (b | (~d & _MASK32)), (7 * step) % 16


class MD5:
    """MD5 digest built up by appending data and then finishing."""

    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        """Return to the initial state, discarding any appended data."""
        self._bit_count = 0
        self._state = list(_INITIAL_STATE)
        self._buffer = bytearray()
        self._digest = bytes(16)

    def _process(self, block: bytes | bytearray) -> None:
        words = struct.unpack("<16I", block)
        a, b, c, d = self._state
        for step in range(64):
            mixed, k = _round_function(step, b, c, d)
            shift = _SHIFTS[step // 16][step % 4]
            tmp = (a + (mixed & _MASK32) + words[k] + _T[step]) & _MASK32
            a, d, c, b = d, c, b, (_rotate_left(tmp, shift) + b) & _MASK32
        self._state = [
            (s + v) & _MASK32 for s, v in zip(self._state, (a, b, c, d))
        ]

    def append(self, data: bytes | bytearray | memoryview) -> None:
        """Append bytes to the message."""
        chunk = bytes(data)
        if not chunk:
            return
        self._bit_count = (self._bit_count + len(chunk) * 8) & _MASK64
        self._buffer += chunk
        while len(self._buffer) >= 64:
            self._process(self._buffer[:64])
            del self._buffer[:64]

    def finish(self) -> None:
        """Pad the message, append its length and compute the digest."""
        length = struct.pack("<Q", self._bit_count)
        pad_length = ((55 - ((self._bit_count >> 3) & 63)) & 63) + 1
        self.append(_PADDING[:pad_length])
        self.append(length)
        self._digest = struct.pack("<4I", *self._state)

    def digest(self) -> bytes:
        """The 16-byte fingerprint; all zero until finish() is called."""
        return self._digest

    def hexdigest(self) -> str:
        """The fingerprint as 32 lower-case hexadecimal digits."""
        return self._digest.hex()