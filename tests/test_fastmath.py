import math

import pytest

from dsp56emu import fastmath as fm


def test_floor_int_truncates_toward_zero():
    assert fm.floor_int(-1.5) == -1
    assert fm.floor_int(2.9) == fm.floor_int(2.1)


def test_round_int_matches_floor_of_shifted_value():
    assert fm.round_int(2.4) == fm.floor_int(2.9)
    assert fm.round_int(2.6) == fm.floor_int(3.1)


def test_ceil_int():
    assert fm.ceil_int(1.2) == 2
    assert fm.ceil_int(5.0) == 5


@pytest.mark.parametrize(
    "func", [fm.fastexp3, fm.fastexp4, fm.fastexp5, fm.fastexp7, fm.fastexp8, fm.fastexp9]
)
def test_taylor_exp_at_zero_is_one(func):
    assert func(0.0) == pytest.approx(1.0, rel=1e-6)


def test_higher_order_more_accurate():
    x = 0.5
    assert abs(fm.fastexp9(x) - math.exp(x)) < abs(fm.fastexp3(x) - math.exp(x))
    assert fm.fastexp9(x) == pytest.approx(math.exp(x), rel=1e-6)


def test_fastexp6_keeps_unscaled_constant():
    assert fm.fastexp6(0.0) == 720


@pytest.mark.parametrize("p", [0.0, 1.0, 3.0, 0.25, -2.5, -10.0])
def test_fastpow2_approximates_power_of_two(p):
    assert fm.fastpow2(p) == pytest.approx(2.0**p, rel=2e-3)


def test_fastpow2_clips_very_negative():
    assert fm.fastpow2(-200.0) == fm.fastpow2(-126.0)


@pytest.mark.parametrize("p", [0.0, 2.0, 5.5])
def test_fastpow2_positive_only(p):
    assert fm.fastpow2_positive_only(p) == pytest.approx(2.0**p, rel=2e-3)


@pytest.mark.parametrize("p", [0.0, 1.0, -1.0, 2.5])
def test_fastexp(p):
    assert fm.fastexp(p) == pytest.approx(math.exp(p), rel=2e-3)


def test_fastexp_positive_only():
    assert fm.fastexp_positive_only(1.0) == pytest.approx(math.e, rel=2e-3)


def test_clamp():
    assert fm.clamp(5, 0, 3) == 3
    assert fm.clamp(-5, 0, 3) == 0
    assert fm.clamp(2, 0, 3) == 2


def test_clamp01():
    assert fm.clamp01(1.7) == 1.0
    assert fm.clamp01(-0.2) == 0.0
    assert fm.clamp01(0.4) == 0.4


def test_lerp():
    assert fm.lerp(2.0, 4.0, 0.5) == 3.0
    assert fm.lerp(2.0, 4.0, 0.0) == 2.0
    assert fm.lerp(2.0, 4.0, 1.0) == 4.0


@pytest.mark.parametrize("p", [-1.0, -0.5, 0.0, 0.3, 1.0])
def test_blend_weights_in_range_and_one_is_full(p):
    a, b = fm.blend_control_for_two_params(p)
    assert 0.0 <= a <= 1.0
    assert 0.0 <= b <= 1.0
    assert max(a, b) == 1.0


def test_blend_is_symmetric():
    a, b = fm.blend_control_for_two_params(0.4)
    assert fm.blend_control_for_two_params(-0.4) == (b, a)