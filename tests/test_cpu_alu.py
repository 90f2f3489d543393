import pytest

from sidez.cpu_alu import add_with_carry, and_rotate_right, compare, subtract_with_carry
from sidez.flags import Flags

SAMPLES = list(range(0, 256, 7)) + [0x00, 0x7F, 0x80, 0xFF]
BCD_SAMPLES = [(t << 4) | u for t in range(10) for u in range(10)][::3] + [0x99]


def _bcd_to_int(value):
    return (value >> 4) * 10 + (value & 0x0F)


def _int_to_bcd(number):
    return ((number // 10) << 4) | (number % 10)


@pytest.mark.parametrize("carry", [False, True])
def test_binary_adc_matches_sum(carry):
    for a in SAMPLES:
        for v in SAMPLES:
            flags = Flags(c=carry)
            result = add_with_carry(flags, a, v)
            total = a + v + int(carry)
            assert result == total & 0xFF
            assert flags.c == (total > 0xFF)
            assert flags.z == (result == 0)
            assert flags.n == bool(result & 0x80)


def test_binary_adc_signed_overflow():
    flags = Flags()
    result = add_with_carry(flags, 0x50, 0x50)
    assert result == 0xA0
    assert flags.v is True
    assert flags.n is True
    assert flags.c is False


@pytest.mark.parametrize("carry", [False, True])
def test_decimal_adc_on_valid_bcd(carry):
    for a in BCD_SAMPLES:
        for v in BCD_SAMPLES:
            flags = Flags(c=carry, d=True)
            result = add_with_carry(flags, a, v)
            total = _bcd_to_int(a) + _bcd_to_int(v) + int(carry)
            assert result == _int_to_bcd(total % 100)
            assert flags.c == (total >= 100)


def test_decimal_adc_example():
    flags = Flags(d=True)
    assert add_with_carry(flags, 0x15, 0x27) == 0x42
    assert flags.c is False


@pytest.mark.parametrize("carry", [False, True])
def test_binary_sbc_matches_difference(carry):
    for a in SAMPLES:
        for v in SAMPLES:
            flags = Flags(c=carry)
            result = subtract_with_carry(flags, a, v)
            diff = a - v - (0 if carry else 1)
            assert result == diff & 0xFF
            assert flags.c == (diff >= 0)
            assert flags.z == (result == 0)
            assert flags.n == bool(result & 0x80)


@pytest.mark.parametrize("carry", [False, True])
def test_decimal_sbc_on_valid_bcd(carry):
    for a in BCD_SAMPLES:
        for v in BCD_SAMPLES:
            flags = Flags(c=carry, d=True)
            result = subtract_with_carry(flags, a, v)
            diff = _bcd_to_int(a) - _bcd_to_int(v) - (0 if carry else 1)
            assert result == _int_to_bcd(diff % 100)
            assert flags.c == (diff >= 0)


@pytest.mark.parametrize("decimal", [False, True])
def test_adc_then_sbc_round_trip(decimal):
    values = BCD_SAMPLES if decimal else SAMPLES
    for a in values:
        for v in values:
            flags = Flags(d=decimal)
            total = add_with_carry(flags, a, v)
            flags.c = True
            back = subtract_with_carry(flags, total, v)
            assert back == a


def test_sbc_binary_overflow_flag():
    flags = Flags(c=True)
    result = subtract_with_carry(flags, 0x80, 0x01)
    assert result == 0x7F
    assert flags.v is True
    assert flags.c is True


def test_compare_flags():
    for reg in SAMPLES:
        for v in SAMPLES:
            flags = Flags()
            compare(flags, reg, v)
            assert flags.c == (reg >= v)
            assert flags.z == (reg == v)
            assert flags.n == bool(((reg - v) & 0xFF) & 0x80)


def test_compare_leaves_overflow_and_decimal():
    flags = Flags(v=True, d=True)
    compare(flags, 0x10, 0x20)
    assert flags.v is True
    assert flags.d is True
    assert flags.c is False


@pytest.mark.parametrize("carry", [False, True])
def test_arr_binary_is_and_then_ror(carry):
    for a in SAMPLES:
        for v in SAMPLES:
            flags = Flags(c=carry)
            result = and_rotate_right(flags, a, v)
            assert result == ((a & v) >> 1) | (0x80 if carry else 0)
            assert flags.c == bool(result & 0x40)
            assert flags.v == (bool(result & 0x40) != bool(result & 0x20))
            assert flags.z == (result == 0)
            assert flags.n == carry


def test_arr_decimal_sets_n_from_carry():
    for a in SAMPLES:
        for carry in (False, True):
            flags = Flags(c=carry, d=True)
            and_rotate_right(flags, a, 0xFF)
            assert flags.n == carry


def test_arr_decimal_without_adjustment_matches_rotate():
    # Low nibble small and high part small: no decimal fix-up applies.
    for data in (0x00, 0x02, 0x04, 0x20, 0x42):
        flags = Flags(d=True)
        result = and_rotate_right(flags, data, 0xFF)
        assert result == data >> 1
        assert flags.c is False
        assert flags.z == (result == 0)