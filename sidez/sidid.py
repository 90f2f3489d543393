"""Identification of player routines by byte signatures."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import IntEnum
from os import PathLike
from pathlib import Path


class Token(IntEnum):
    """Special signature tokens that are not literal byte values."""

    ANY = -1
    AND = -2
    END = -3


_HEX_PREFIX = re.compile(r"\s*([+-]?)(?:0[xX])?([0-9a-fA-F]+)")


def _parse_hex(text: str) -> int:
    """Parse leading hexadecimal digits as a signed 16-bit value; 0 if none."""
    match = _HEX_PREFIX.match(text)
    if not match:
        return 0
    value = int(match.group(2), 16)
    if match.group(1) == "-":
        value = -value
    value &= 0xFFFF
    return value - 0x10000 if value & 0x8000 else value


def _parse_signature(parts: list[str]) -> tuple[int, ...]:
    tokens: list[int] = []
    for part in parts:
        upper = part.upper()
        if upper == "AND":
            tokens.append(Token.AND)
        elif upper == "END":
            continue
        elif part == "??":
            tokens.append(Token.ANY)
        else:
            tokens.append(_parse_hex(part))
    return tuple(tokens)


def _matches(data: bytes, signature: tuple[int, ...]) -> bool:
    """Return True if the signature occurs in the data."""
    length = len(data)
    size = len(signature)

    def token(index: int) -> int | None:
        return signature[index] if index < size else None

    c = d = rc = rd = 0
    while c < length:
        if d == rd:
            if data[c] == token(d):
                rc = c + 1
                d += 1
            c += 1
            continue

        if d == size:
            return True

        if signature[d] == Token.AND:
            d += 1
            wanted = token(d)
            while c < length:
                if data[c] == wanted:
                    rc = c + 1
                    rd = d
                    break
                c += 1
            if c >= length:
                return False

        current = token(d)
        if current != Token.ANY and data[c] != current:
            c = rc
            d = rd
        else:
            c += 1
            d += 1

    return d == size


@dataclass
class _Routine:
    name: str = ""
    signatures: list[tuple[int, ...]] = field(default_factory=list)


class SidId:
    """A set of named player-routine signatures."""

    def __init__(self) -> None:
        self._routines: list[_Routine] = []

    def load_config(self, filename: str | PathLike[str]) -> bool:
        """Load signatures from a file; True if any routine was loaded."""
        text = Path(filename).read_bytes().decode("latin-1")
        return self.load_config_text(text)

    def load_config_text(self, text: str) -> bool:
        """Load signatures from configuration text.

        Empty text leaves the current signatures untouched and returns False.
        """
        if not text:
            return False

        self._routines = []
        current = _Routine()

        def store() -> None:
            nonlocal current
            if not current.name or not current.signatures:
                return
            self._routines.append(current)
            current = _Routine()

        for line in text.splitlines():
            parts = line.split()
            if not parts:
                continue
            if len(parts) == 1:
                store()
                current.name = parts[0]
            else:
                current.signatures.append(_parse_signature(parts))
        store()

        return bool(self._routines)

    def find_player_routines(self, data: bytes | bytearray) -> list[str]:
        """Names of all routines with a signature found in the data, in order."""
        if not self._routines or not data:
            return []
        buffer = bytes(data)
        found: list[str] = []
        for routine in self._routines:
            for signature in routine.signatures:
                if _matches(buffer, signature) and routine.name not in found:
                    found.append(routine.name)
        return found