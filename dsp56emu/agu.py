"""Address generation unit: address register update rules."""

from __future__ import annotations

from .errors import NotImplementedFeatureError
from .logsink import hex_word

WORD_MASK = 0x00FFFFFF
LINEAR = 0xFFFFFF


def sign_extend(value: int, bits: int) -> int:
    """Interpret the low ``bits`` bits of value as a two's complement number."""
    sign = 1 << (bits - 1)
    value &= (1 << bits) - 1
    return (value ^ sign) - sign


def bitreverse24(value: int) -> int:
    """Reverse the order of the low 24 bits."""
    return int(f"{value & WORD_MASK:024b}"[::-1], 2)


def calc_modulo_mask(m: int) -> int:
    """Smallest all-ones mask covering m (for m below 0x10000)."""
    m |= m >> 1
    m |= m >> 2
    m |= m >> 4
    m |= m >> 8
    return m


def update_address_register(r: int, n: int, m: int) -> int:
    """Return address register r advanced by n under modifier m."""
    if m == LINEAR:
        return (r + n) & WORD_MASK

    modulo_test = m & 0x00FFFF

    if modulo_test == 0:
        # bit-reverse addressing
        r = bitreverse24(bitreverse24(r) + bitreverse24(n & WORD_MASK))
    elif modulo_test <= 0x007FFF:
        if abs(sign_extend(n, 24)) >= m + 1:
            r += n
        else:
            modulo_mask = calc_modulo_mask(m)
            base_mask = ~modulo_mask & 0xFFFFFFFF
            modulo = modulo_test + 1

            base = r & base_mask
            p = (r & modulo_mask) + n
            if p < 0:
                p += modulo
            if p > modulo_test:
                p -= modulo
            r = base | (p & 0xFFFFFFFF)
    else:
        raise NotImplementedFeatureError(
            "AGU multiple Wrap-Around Modulo Modifier: "
            f"r={hex_word(r)}, n={hex_word(n & 0xFFFFFFFF)}, m={hex_word(m)}"
        )
    return r & WORD_MASK