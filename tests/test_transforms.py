import pytest
from hypothesis import given
from hypothesis import strategies as st

from aes128.galois import SBOX
from aes128.transforms import (
    ShiftMode,
    cyclic_word_shift,
    inv_mix_columns,
    inv_shift_rows,
    inv_sub_bytes,
    mix_columns,
    shift_rows,
    sub_bytes,
)

byte = st.integers(min_value=0, max_value=255)
states = st.lists(st.lists(byte, min_size=4, max_size=4), min_size=4, max_size=4)


def _counting_state():
    return [[4 * row + col for col in range(4)] for row in range(4)]


def test_cyclic_shift_left_and_right():
    word = [10, 20, 30, 40]
    assert cyclic_word_shift(word, 1, ShiftMode.LEFT) == [20, 30, 40, 10]
    assert cyclic_word_shift(word, 1, ShiftMode.RIGHT) == [40, 10, 20, 30]
    assert cyclic_word_shift(word, 0, ShiftMode.LEFT) == word
    assert cyclic_word_shift(word, 4, ShiftMode.RIGHT) == word


@given(st.lists(byte, min_size=4, max_size=4), st.integers(min_value=0, max_value=12))
def test_cyclic_shift_round_trip(word, shift):
    left = cyclic_word_shift(word, shift, ShiftMode.LEFT)
    assert cyclic_word_shift(left, shift, ShiftMode.RIGHT) == word


def test_cyclic_shift_rejects_negative():
    with pytest.raises(ValueError):
        cyclic_word_shift([1, 2, 3, 4], -1, ShiftMode.LEFT)


def test_shift_rows_rotates_each_row_by_its_index():
    shifted = shift_rows(_counting_state())
    assert shifted[0] == [0, 1, 2, 3]
    assert shifted[1] == [5, 6, 7, 4]
    assert shifted[2] == [10, 11, 8, 9]
    assert shifted[3] == [15, 12, 13, 14]


@given(states)
def test_shift_rows_round_trip(state):
    assert inv_shift_rows(shift_rows(state)) == state


def test_sub_bytes_of_zero_state():
    zero = [[0] * 4 for _ in range(4)]
    assert sub_bytes(zero) == [[SBOX[0]] * 4 for _ in range(4)]


@given(states)
def test_sub_bytes_round_trip(state):
    assert inv_sub_bytes(sub_bytes(state)) == state


def test_mix_columns_known_column():
    column = [0xDB, 0x13, 0x53, 0x45]
    state = [[value, 0, 0, 0] for value in column]
    mixed = mix_columns(state)
    assert [row[0] for row in mixed] == [0x8E, 0x4D, 0xA1, 0xBC]
    assert all(row[1:] == [0, 0, 0] for row in mixed)


@given(states)
def test_mix_columns_round_trip(state):
    assert inv_mix_columns(mix_columns(state)) == state
    assert mix_columns(inv_mix_columns(state)) == state


def test_mix_columns_of_uniform_column_is_unchanged():
    state = [[7, 7, 7, 7] for _ in range(4)]
    assert mix_columns(state) == state


def test_input_state_not_modified():
    state = _counting_state()
    mix_columns(state)
    shift_rows(state)
    assert state == _counting_state()


@pytest.mark.parametrize(
    "bad",
    [
        [[0] * 4 for _ in range(3)],
        [[0] * 3 for _ in range(4)],
        [[0, 0, 0, 256]] + [[0] * 4 for _ in range(3)],
    ],
)
def test_malformed_state_rejected(bad):
    with pytest.raises(ValueError):
        mix_columns(bad)
    with pytest.raises(ValueError):
        sub_bytes(bad)