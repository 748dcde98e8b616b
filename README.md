# aesblocks

A small, readable implementation of AES-256 in pure Python. A message is
split into 16-byte blocks (the last one padded with zero bytes), a 256-bit
key is expanded into fifteen round keys, and each block goes through the
fourteen AES rounds: SubBytes, ShiftRows, MixColumns and AddRoundKey, and
their inverses for decryption.

It is meant for learning and experimenting with the cipher's building
blocks.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Command line

```
aesblocks message.txt
```

The command reads the bytes of the given file (dropping one trailing
newline, if there is one), expands a fixed demonstration key (the bytes
`0x00` to `0x1f`), encrypts the message and then decrypts it again. It
prints:

- the time in microseconds taken to expand the key,
- the plain text,
- the time taken to encrypt, then the cipher text,
- the time taken to decrypt, then the recovered plain text.

Each text is printed between header and footer lines. Zero bytes are left
out when blocks are printed, so the padding does not show. If the file
cannot be opened, the command prints `File not Open.` to standard error and
exits with status 1.

## Library

```python
import os

from aesblocks.blocks import Blocks

key = os.urandom(32)
blocks = Blocks(b"Attack at dawn, hold the bridge.", key)

blocks.encrypt()
cipher_text = bytes(blocks)

blocks.decrypt()
print(blocks.visible())
```

`Blocks(data, key)` takes the message as bytes (a `str` is encoded as
UTF-8) and a 32-byte key. It holds every block of the message and the
expanded key; `encrypt()` and `decrypt()` work on the blocks in place.
`bytes()` of it gives the full contents, padding included; `visible()` gives
the same with zero bytes dropped, as the command prints it. `len()` gives the
number of blocks, and `key_expansion_time` the microseconds spent expanding
the key.

The pieces are usable on their own:

- `aesblocks.block.Block` is one 4x4 byte state built from exactly 16 bytes
  (filled row by row; any other length raises `ValueError`). It has
  `sub_bytes`, `shift_rows`, `mix_columns`, `add_round_key` and their
  inverses, `block[i]` for row `i`, `bytes(block)` and `visible()`.
- `aesblocks.key_block.KeyBlock` takes a 32-byte key (any other length raises
  `ValueError`); `expand_round_keys()` builds the schedule and
  `round_key(index)` returns round key 0 to 14 as a `Block` (other indexes
  raise `IndexError`). `rot_word` and `sub_word` are the word helpers used by
  the schedule.
- `aesblocks.utils.galois_multiply(a, b)` multiplies two bytes in GF(2^8)
  with the AES polynomial, and `read_message(filename)` reads a file the way
  the command does. `SBOX`, `INV_SBOX` and `RCON` are the lookup tables.

## What it does not do

Only AES-256 is provided; there are no 128- or 192-bit keys. Every block is
encrypted on its own (no chaining mode, no IV), and padding is plain zero
bytes, so trailing zero bytes in a message cannot be told apart from
padding. The command always uses its fixed demonstration key and does not
write cipher text to a file. It is not meant for protecting real data.