"""Arithmetic of the 6510, including its NMOS decimal-mode quirks."""

from __future__ import annotations

from sidez.flags import Flags


def add_with_carry(flags: Flags, a: int, value: int) -> int:
    """ADC: return the new accumulator and update C, Z, N and V."""
    carry = 1 if flags.c else 0
    a &= 0xFF
    value &= 0xFF
    total = a + value + carry

    if flags.d:
        lo = (a & 0x0F) + (value & 0x0F) + carry
        hi = (a & 0xF0) + (value & 0xF0)
        if lo > 0x09:
            lo += 0x06
        if lo > 0x0F:
            hi += 0x10

        flags.z = (total & 0xFF) == 0
        flags.n = bool(hi & 0x80)
        flags.v = bool((hi ^ a) & 0x80) and not ((a ^ value) & 0x80)
        if hi > 0x90:
            hi += 0x60

        flags.c = hi > 0xFF
        return (hi | (lo & 0x0F)) & 0xFF

    flags.c = total > 0xFF
    flags.v = bool((total ^ a) & 0x80) and not ((a ^ value) & 0x80)
    result = total & 0xFF
    flags.set_nz(result)
    return result


def subtract_with_carry(flags: Flags, a: int, value: int) -> int:
    """SBC: return the new accumulator and update C, Z, N and V.

    Flags are always computed as in binary mode, as on the NMOS part.
    """
    borrow = 0 if flags.c else 1
    a &= 0xFF
    value &= 0xFF
    difference = (a - value - borrow) & 0xFFFFFFFF

    flags.c = difference < 0x100
    flags.v = bool((difference ^ a) & 0x80) and bool((a ^ value) & 0x80)
    flags.set_nz(difference & 0xFF)

    if flags.d:
        lo = (a & 0x0F) - (value & 0x0F) - borrow
        hi = (a & 0xF0) - (value & 0xF0)
        if lo & 0x10:
            lo -= 0x06
            hi -= 0x10
        if hi & 0x100:
            hi -= 0x60
        return (hi | (lo & 0x0F)) & 0xFF

    return difference & 0xFF


def and_rotate_right(flags: Flags, a: int, value: int) -> int:
    """ARR: AND the accumulator with a value, then rotate right."""
    data = value & a & 0xFF
    result = data >> 1
    if flags.c:
        result |= 0x80

    if flags.d:
        flags.n = flags.c
        flags.z = result == 0
        flags.v = bool((data ^ result) & 0x40)

        if (data & 0x0F) + (data & 0x01) > 5:
            result = (result & 0xF0) | ((result + 6) & 0x0F)
        flags.c = ((data + (data & 0x10)) & 0x1F0) > 0x50
        if flags.c:
            result = (result + 0x60) & 0xFF
        return result

    flags.set_nz(result)
    flags.c = bool(result & 0x40)
    flags.v = bool((result & 0x40) ^ ((result & 0x20) << 1))
    return result


def compare(flags: Flags, register: int, value: int) -> None:
    """CMP/CPX/CPY: set N, Z and C from register minus value."""
    tmp = ((register & 0xFF) - (value & 0xFF)) & 0xFFFF
    flags.set_nz(tmp & 0xFF)
    flags.c = tmp < 0x100