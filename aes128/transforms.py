"""The byte-level transformations applied to a 4x4 state of rows."""

from __future__ import annotations

from enum import Enum
from functools import reduce
from operator import xor
from typing import Sequence

from .galois import INV_SBOX, SBOX, gf_multiply

State = list[list[int]]

_MIX_MATRIX = ((2, 3, 1, 1), (1, 2, 3, 1), (1, 1, 2, 3), (3, 1, 1, 2))
_INV_MIX_MATRIX = (
    (0x0E, 0x0B, 0x0D, 0x09),
    (0x09, 0x0E, 0x0B, 0x0D),
    (0x0D, 0x09, 0x0E, 0x0B),
    (0x0B, 0x0D, 0x09, 0x0E),
)


class ShiftMode(Enum):
    """Direction of a cyclic shift."""

    LEFT = "left"
    RIGHT = "right"


def _check_state(state: Sequence[Sequence[int]]) -> None:
    if len(state) != 4 or any(len(row) != 4 for row in state):
        raise ValueError("state must be 4 rows of 4 bytes")
    if any(not 0 <= value <= 0xFF for row in state for value in row):
        raise ValueError("state values must be bytes in 0..255")


def cyclic_word_shift(word: Sequence[int], shift: int, mode: ShiftMode) -> list[int]:
    """Rotate ``word`` by ``shift`` positions in the given direction."""
    if shift < 0:
        raise ValueError(f"shift must not be negative, got {shift}")
    items = list(word)
    if not items:
        return items
    count = shift % len(items)
    if mode is ShiftMode.LEFT:
        return items[count:] + items[:count]
    if mode is ShiftMode.RIGHT:
        return items[len(items) - count:] + items[: len(items) - count]
    raise ValueError(f"unknown shift mode: {mode!r}")


def shift_rows(state: Sequence[Sequence[int]]) -> State:
    """Rotate row ``r`` of the state left by ``r`` positions."""
    _check_state(state)
    return [cyclic_word_shift(row, index, ShiftMode.LEFT) for index, row in enumerate(state)]


def inv_shift_rows(state: Sequence[Sequence[int]]) -> State:
    """Rotate row ``r`` of the state right by ``r`` positions."""
    _check_state(state)
    return [cyclic_word_shift(row, index, ShiftMode.RIGHT) for index, row in enumerate(state)]


def sub_bytes(state: Sequence[Sequence[int]]) -> State:
    """Replace every byte of the state through the S-box."""
    _check_state(state)
    return [[SBOX[value] for value in row] for row in state]


def inv_sub_bytes(state: Sequence[Sequence[int]]) -> State:
    """Replace every byte of the state through the inverse S-box."""
    _check_state(state)
    return [[INV_SBOX[value] for value in row] for row in state]


def _mix(state: Sequence[Sequence[int]], matrix: tuple[tuple[int, ...], ...]) -> State:
    _check_state(state)
    new_columns = [
        [reduce(xor, (gf_multiply(value, factor) for value, factor in zip(column, coefficients)))
         for coefficients in matrix]
        for column in zip(*state)
    ]
    return [list(row) for row in zip(*new_columns)]


def mix_columns(state: Sequence[Sequence[int]]) -> State:
    """Multiply each column of the state by the fixed mixing polynomial."""
    return _mix(state, _MIX_MATRIX)


def inv_mix_columns(state: Sequence[Sequence[int]]) -> State:
    """Undo :func:`mix_columns`."""
    return _mix(state, _INV_MIX_MATRIX)