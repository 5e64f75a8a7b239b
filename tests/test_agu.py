import pytest

from dsp56emu.agu import (
    bitreverse24,
    calc_modulo_mask,
    sign_extend,
    update_address_register,
)
from dsp56emu.errors import NotImplementedFeatureError


def test_sign_extend_negative():
    assert sign_extend(0x800000, 24) == -0x800000
    assert sign_extend(0xFFFFFF, 24) == -1


def test_sign_extend_positive_unchanged():
    assert sign_extend(0x7FFFFF, 24) == 0x7FFFFF


def test_bitreverse24_top_bit():
    assert bitreverse24(1) == 0x800000


@pytest.mark.parametrize("v", [0, 1, 0x123456, 0xFFFFFF, 0xA5A5A5])
def test_bitreverse24_is_involution(v):
    assert bitreverse24(bitreverse24(v)) == v


@pytest.mark.parametrize("m", [1, 3, 5, 100, 0x7FFF, 0x1234])
def test_modulo_mask_is_covering_power_of_two_minus_one(m):
    mask = calc_modulo_mask(m)
    assert mask >= m
    assert mask & (mask + 1) == 0
    assert mask < 2 * m + 1


def test_modulo_mask_of_full_mask():
    assert calc_modulo_mask(0x7FFF) == 0x7FFF


def test_linear_addressing_wraps_24_bits():
    assert update_address_register(0x10, 1, 0xFFFFFF) == 0x11
    assert update_address_register(0, -1, 0xFFFFFF) == 0xFFFFFF


@pytest.mark.parametrize("modulo", [3, 4, 5, 10, 16])
def test_modulo_buffer_cycles_back_to_start(modulo):
    m = modulo - 1
    base = 0x400
    r = base
    seen = []
    for _ in range(modulo):
        r = update_address_register(r, 1, m)
        seen.append(r)
    assert r == base
    assert sorted(seen) == list(range(base, base + modulo))


@pytest.mark.parametrize("modulo", [3, 7, 12])
def test_modulo_step_backward_inverts_forward(modulo):
    m = modulo - 1
    for start in range(0x200, 0x200 + modulo):
        forward = update_address_register(start, 1, m)
        assert update_address_register(forward, -1, m) == start


def test_large_offset_bypasses_modulo():
    r = 0x100
    n = 0x40
    assert update_address_register(r, n, 0x0F) == r + n


def test_bitreverse_mode_from_zero_yields_offset():
    assert update_address_register(0, 0x800000, 0) == 0x800000
    assert update_address_register(0, 0x123456, 0xFF0000) == 0x123456


def test_multiple_wrap_around_not_implemented():
    with pytest.raises(NotImplementedFeatureError, match="Wrap-Around"):
        update_address_register(0, 1, 0x8000)