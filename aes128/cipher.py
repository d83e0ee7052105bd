"""Block, buffer and file encryption with a 128-bit key."""

from __future__ import annotations

from os import PathLike
from pathlib import Path
from typing import Sequence

from .key import add_round_key
from .transforms import (
    State,
    inv_mix_columns,
    inv_shift_rows,
    inv_sub_bytes,
    mix_columns,
    shift_rows,
    sub_bytes,
)

BLOCK_SIZE = 16
_ROUNDS = 10

Keys = Sequence[Sequence[int]]


def block_count(size: int) -> int:
    """Return how many 16-byte blocks hold ``size`` bytes."""
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    return -(-size // BLOCK_SIZE)


def _to_state(block: bytes) -> State:
    return [list(block[offset: offset + 4]) for offset in range(0, BLOCK_SIZE, 4)]


def _from_state(state: State) -> bytes:
    return bytes(value for row in state for value in row)


def _check_block(block: bytes | Sequence[int]) -> bytes:
    data = bytes(block)
    if len(data) != BLOCK_SIZE:
        raise ValueError(f"block must be {BLOCK_SIZE} bytes, got {len(data)}")
    return data


def encrypt_block(block: bytes | Sequence[int], keys: Keys) -> bytes:
    """Encrypt one 16-byte block with an expanded key."""
    state = _to_state(_check_block(block))
    state = add_round_key(state, keys, 0)
    for round_index in range(1, _ROUNDS):
        state = mix_columns(shift_rows(sub_bytes(state)))
        state = add_round_key(state, keys, round_index)
    state = shift_rows(sub_bytes(state))
    return _from_state(add_round_key(state, keys, _ROUNDS))


def decrypt_block(block: bytes | Sequence[int], keys: Keys) -> bytes:
    """Decrypt one 16-byte block with an expanded key."""
    state = _to_state(_check_block(block))
    state = add_round_key(state, keys, _ROUNDS)
    for round_index in range(_ROUNDS - 1, 0, -1):
        state = inv_sub_bytes(inv_shift_rows(state))
        state = inv_mix_columns(add_round_key(state, keys, round_index))
    state = inv_sub_bytes(inv_shift_rows(state))
    return _from_state(add_round_key(state, keys, 0))


def _padded_blocks(data: bytes):
    padded = data + bytes(block_count(len(data)) * BLOCK_SIZE - len(data))
    for offset in range(0, len(padded), BLOCK_SIZE):
        yield padded[offset: offset + BLOCK_SIZE]


def encrypt_bytes(data: bytes, keys: Keys) -> bytes:
    """Zero-pad ``data`` to whole blocks and encrypt each block."""
    return b"".join(encrypt_block(block, keys) for block in _padded_blocks(bytes(data)))


def decrypt_bytes(data: bytes, keys: Keys) -> bytes:
    """Zero-pad ``data`` to whole blocks and decrypt each block.

    Padding added during encryption is kept in the result.
    """
    return b"".join(decrypt_block(block, keys) for block in _padded_blocks(bytes(data)))


def encrypt_file(path: str | PathLike[str], keys: Keys) -> None:
    """Encrypt the file at ``path`` in place."""
    file_path = Path(path)
    file_path.write_bytes(encrypt_bytes(file_path.read_bytes(), keys))


def decrypt_file(path: str | PathLike[str], keys: Keys) -> None:
    """Decrypt the file at ``path`` in place."""
    file_path = Path(path)
    file_path.write_bytes(decrypt_bytes(file_path.read_bytes(), keys))