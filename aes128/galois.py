"""Arithmetic in GF(2^8) and the byte tables derived from it."""

from __future__ import annotations

IRREDUCIBLE_POLYNOMIAL = 0x1B
"""Low byte of the reduction polynomial x^8 + x^4 + x^3 + x + 1."""

RCON = (0x00, 0x01, 0x02, 0x04, 0x08, 0x10, 0x20, 0x40, 0x80, 0x1B, 0x36)
"""Round constants used by the key schedule, indexed by round number."""


def _check_byte(value: int, name: str) -> None:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"{name} must be a byte value in 0..255, got {value}")


def xtime(num: int) -> int:
    """Multiply ``num`` by x (that is, by 2) in GF(2^8)."""
    _check_byte(num, "num")
    result = (num << 1) & 0xFF
    if num & 0x80:
        result ^= IRREDUCIBLE_POLYNOMIAL
    return result


def gf_multiply(a: int, b: int) -> int:
    """Multiply two bytes as elements of GF(2^8)."""
    _check_byte(a, "a")
    _check_byte(b, "b")
    result = 0
    for _ in range(8):
        if b & 1:
            result ^= a
        a = xtime(a)
        b >>= 1
    return result


def _rotate_left(value: int, count: int) -> int:
    return ((value << count) | (value >> (8 - count))) & 0xFF


def _build_sbox() -> tuple[int, ...]:
    exp = [0] * 255
    log = [0] * 256
    power = 1
    for exponent in range(255):
        exp[exponent] = power
        log[power] = exponent
        power = gf_multiply(power, 3)

    def inverse(value: int) -> int:
        return 0 if value == 0 else exp[(255 - log[value]) % 255]

    def affine(value: int) -> int:
        result = value
        for count in range(1, 5):
            result ^= _rotate_left(value, count)
        return result ^ 0x63

    return tuple(affine(inverse(value)) for value in range(256))


def _invert_table(table: tuple[int, ...]) -> tuple[int, ...]:
    inverse = [0] * len(table)
    for index, value in enumerate(table):
        inverse[value] = index
    return tuple(inverse)


SBOX = _build_sbox()
"""The forward substitution box."""

INV_SBOX = _invert_table(SBOX)
"""The inverse substitution box."""