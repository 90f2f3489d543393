"""The 6510 processor status register."""

from __future__ import annotations

from dataclasses import dataclass

_CARRY = 0x01
_ZERO = 0x02
_INTERRUPT = 0x04
_DECIMAL = 0x08
_OVERFLOW = 0x40
_NEGATIVE = 0x80


@dataclass
class Flags:
    """Status flags; bits 4 and 5 are not stored."""

    c: bool = False
    z: bool = False
    i: bool = False
    d: bool = False
    v: bool = False
    n: bool = False

    def reset(self) -> None:
        """Clear every flag."""
        self.c = self.z = self.i = self.d = self.v = self.n = False

    def set_nz(self, value: int) -> None:
        """Set N and Z from an 8-bit result."""
        value &= 0xFF
        self.z = value == 0
        self.n = bool(value & 0x80)

    def pack(self) -> int:
        """Return the status register as a byte."""
        sr = 0
        if self.c:
            sr |= _CARRY
        if self.z:
            sr |= _ZERO
        if self.i:
            sr |= _INTERRUPT
        if self.d:
            sr |= _DECIMAL
        if self.v:
            sr |= _OVERFLOW
        if self.n:
            sr |= _NEGATIVE
        return sr

    def unpack(self, sr: int) -> None:
        """Load the flags from a status register byte."""
        self.c = bool(sr & _CARRY)
        self.z = bool(sr & _ZERO)
        self.i = bool(sr & _INTERRUPT)
        self.d = bool(sr & _DECIMAL)
        self.v = bool(sr & _OVERFLOW)
        self.n = bool(sr & _NEGATIVE)