# aes128

A compact AES-128 implementation in plain Python with no dependencies.
Each step of the cipher (SubBytes, ShiftRows, MixColumns, AddRoundKey and
the key schedule) is available on its own, and whole byte strings and
files can be encrypted and decrypted.

It is meant for study and experiments. It has no chaining mode, no
authentication and no real padding, so do not use it to protect data.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Using the library

```python
from aes128.key import key_expansion
from aes128.cipher import encrypt_bytes, decrypt_bytes

key = bytes(range(16))          # 00 01 02 ... 0f, a demo key
keys = key_expansion(key)       # the 44 words of the round-key schedule

ciphertext = encrypt_bytes(b"attack at dawn", keys)
plaintext = decrypt_bytes(ciphertext, keys)
assert plaintext.rstrip(b"\x00") == b"attack at dawn"
```

Data is cut into 16-byte blocks and each block is encrypted on its own.
When the length is not a multiple of 16 the last block is filled with zero
bytes; `block_count(size)` tells how many blocks a given length takes.
Decryption keeps those zero bytes, so strip them yourself if the original
length matters. Empty input gives empty output.

Each block is loaded into the 4x4 state row by row, and the round keys
are laid out to match. The output is self-consistent but does not line up
byte for byte with the published AES test vectors, which fill the state
column by column.

Single blocks are handled with `encrypt_block` and `decrypt_block`, which
take exactly 16 bytes and raise `ValueError` otherwise. Files are rewritten
in place with `encrypt_file(path, keys)` and `decrypt_file(path, keys)`.

### The building blocks

- `aes128.galois`: `xtime` and `gf_multiply`, arithmetic in GF(2^8)
  modulo x^8 + x^4 + x^3 + x + 1, together with the tables `SBOX`,
  `INV_SBOX` and `RCON`.
- `aes128.transforms`: `sub_bytes`, `inv_sub_bytes`, `shift_rows`,
  `inv_shift_rows`, `mix_columns` and `inv_mix_columns`, each taking a
  state of 4 rows of 4 bytes and returning a new one, plus
  `cyclic_word_shift(word, shift, mode)` with `ShiftMode.LEFT` or
  `ShiftMode.RIGHT`.
- `aes128.key`: `key_expansion(key)`, which turns a 16-byte key into 44
  four-byte words, and `add_round_key(state, keys, round_index)`.
- `aes128.cipher`: block, byte-string and file encryption.

## Command line

```
aes128 [path] [-d | --decrypt]
```

With no arguments this encrypts the file `TESTFILE.txt` in the current
directory in place. Give a path to process another file, and `--decrypt`
to decrypt instead. The key is always the fixed demo key
`000102030405060708090a0b0c0d0e0f`; the command has no option to supply
your own. Encryption grows the file to the next multiple of 16 bytes. If
the file cannot be read or written, the command prints the error and exits
with status 1.