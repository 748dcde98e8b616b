"""The 256-bit key and its expansion into fifteen round keys."""

from __future__ import annotations

from .block import Block
from .utils import RCON, SBOX

_KEY_WORDS = 8
_TOTAL_WORDS = 60
_ROUNDS = 14


def rot_word(word: bytes | bytearray) -> bytes:
    """Rotate a four-byte word one position to the left."""
    word = bytes(word)
    return word[1:] + word[:1]


def sub_word(word: bytes | bytearray) -> bytes:
    """Substitute every byte of a word through the S-box."""
    return bytes(word).translate(SBOX)


class KeyBlock:
    """A 32-byte key held as 60 four-byte words, eight given and the rest expanded."""

    def __init__(self, key: bytes | bytearray | memoryview) -> None:
        key = bytes(key)
        if len(key) != 4 * _KEY_WORDS:
            raise ValueError("Key Block must have 32 bytes.")
        self._words = [key[start:start + 4] for start in range(0, len(key), 4)]
        self._words.extend(bytes(4) for _ in range(_TOTAL_WORDS - _KEY_WORDS))

    def __getitem__(self, index: int) -> bytes:
        """Byte ``index`` of every word, in word order."""
        return bytes(word[index] for word in self._words)

    def expand_round_keys(self) -> None:
        for i in range(_KEY_WORDS, _TOTAL_WORDS):
            temp = self._words[i - 1]
            if i % _KEY_WORDS == 0:
                temp = sub_word(rot_word(temp))
                temp = bytes((temp[0] ^ RCON[i // _KEY_WORDS],)) + temp[1:]
            elif i % _KEY_WORDS == 4:
                temp = sub_word(temp)
            self._words[i] = bytes(a ^ b for a, b in zip(temp, self._words[i - _KEY_WORDS]))

    def round_key(self, index: int) -> Block:
        """The round key for round ``index`` (0 to 14) as a block, one word per row."""
        if not 0 <= index <= _ROUNDS:
            raise IndexError(f"round key index out of range: {index}")
        return Block(b"".join(self._words[4 * index:4 * index + 4]))