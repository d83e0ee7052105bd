"""Key schedule and round-key addition."""

from __future__ import annotations

from typing import Sequence

from .galois import RCON, SBOX
from .transforms import ShiftMode, State, _check_state, cyclic_word_shift

Word = tuple[int, int, int, int]

_KEY_WORDS = 4
_ROUNDS = 10
_SCHEDULE_LENGTH = _KEY_WORDS * (_ROUNDS + 1)


def key_expansion(key: bytes | Sequence[int]) -> list[Word]:
    """Expand a 16-byte key, read as four rows, into 44 round-key words.

    Word ``i`` of the initial key is column ``i`` of the key's 4x4 layout.
    """
    key_bytes = bytes(key)
    if len(key_bytes) != 16:
        raise ValueError(f"key must be 16 bytes, got {len(key_bytes)}")

    words: list[Word] = [
        tuple(key_bytes[column + 4 * row] for row in range(4))  # type: ignore[misc]
        for column in range(_KEY_WORDS)
    ]
    for index in range(_KEY_WORDS, _SCHEDULE_LENGTH):
        temp = list(words[-1])
        if index % _KEY_WORDS == 0:
            temp = [SBOX[value] for value in cyclic_word_shift(temp, 1, ShiftMode.LEFT)]
            temp[0] ^= RCON[index // _KEY_WORDS]
        previous = words[index - _KEY_WORDS]
        words.append(tuple(a ^ b for a, b in zip(temp, previous)))  # type: ignore[arg-type]
    return words


def add_round_key(
    state: Sequence[Sequence[int]], keys: Sequence[Sequence[int]], round_index: int
) -> State:
    """XOR the state with the round key for ``round_index``.

    Column ``c`` of the state is combined with word ``4 * round_index + c``.
    """
    _check_state(state)
    rounds = len(keys) // _KEY_WORDS
    if not 0 <= round_index < rounds:
        raise ValueError(f"round index {round_index} outside 0..{rounds - 1}")
    round_words = keys[_KEY_WORDS * round_index: _KEY_WORDS * (round_index + 1)]
    return [
        [value ^ word[row_index] for value, word in zip(row, round_words)]
        for row_index, row in enumerate(state)
    ]