"""A message split into zero-padded 16-byte blocks under one 256-bit key."""

from __future__ import annotations

import time

from .block import Block
from .key_block import KeyBlock

_BLOCK_SIZE = 16
_ROUNDS = 14


class Blocks:
    """A message cut into 16-byte blocks, each encrypted on its own with a 32-byte key."""

    def __init__(self, data: bytes | bytearray | memoryview | str, key: bytes | bytearray | memoryview) -> None:
        if isinstance(data, str):
            data = data.encode("utf-8")
        data = bytes(data)
        padding = (_BLOCK_SIZE - len(data) % _BLOCK_SIZE) % _BLOCK_SIZE
        data += bytes(padding)
        self._blocks = [
            Block(data[start:start + _BLOCK_SIZE])
            for start in range(0, len(data), _BLOCK_SIZE)
        ]
        self._key = KeyBlock(key)

        start = time.perf_counter_ns()
        self._key.expand_round_keys()
        end = time.perf_counter_ns()
        self.key_expansion_time = (end - start) // 1000
        """Microseconds spent expanding the round keys."""

        self._round_keys = [self._key.round_key(index) for index in range(_ROUNDS + 1)]

    def __len__(self) -> int:
        return len(self._blocks)

    def __bytes__(self) -> bytes:
        return b"".join(bytes(block) for block in self._blocks)

    def __repr__(self) -> str:
        return f"Blocks({bytes(self)!r})"

    def visible(self) -> bytes:
        """Every block's bytes with the zero bytes left out."""
        return b"".join(block.visible() for block in self._blocks)

    def encrypt(self) -> None:
        """Encrypt every block in place."""
        keys = self._round_keys
        for block in self._blocks:
            block.add_round_key(keys[0])
            for round_key in keys[1:_ROUNDS]:
                block.sub_bytes()
                block.shift_rows()
                block.mix_columns()
                block.add_round_key(round_key)
            block.sub_bytes()
            block.shift_rows()
            block.add_round_key(keys[_ROUNDS])

    def decrypt(self) -> None:
        """Decrypt every block in place."""
        keys = self._round_keys
        for block in self._blocks:
            block.add_round_key(keys[_ROUNDS])
            for round_key in reversed(keys[1:_ROUNDS]):
                block.inv_shift_rows()
                block.inv_sub_bytes()
                block.add_round_key(round_key)
                block.inv_mix_columns()
            block.inv_shift_rows()
            block.inv_sub_bytes()
            block.add_round_key(keys[0])