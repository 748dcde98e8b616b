"""A 4x4 byte state and the round transformations applied to it."""

from __future__ import annotations

from .utils import INV_SBOX, SBOX, galois_multiply

_MIX = ((2, 3, 1, 1), (1, 2, 3, 1), (1, 1, 2, 3), (3, 1, 1, 2))
_INV_MIX = (
    (0x0E, 0x0B, 0x0D, 0x09),
    (0x09, 0x0E, 0x0B, 0x0D),
    (0x0D, 0x09, 0x0E, 0x0B),
    (0x0B, 0x0D, 0x09, 0x0E),
)


class Block:
    """Sixteen bytes laid out as four rows of four, filled row by row."""

    def __init__(self, data: bytes | bytearray | memoryview) -> None:
        data = bytes(data)
        if len(data) != 16:
            raise ValueError("Data Block must have 16 bytes.")
        self._rows = [bytearray(data[start:start + 4]) for start in range(0, 16, 4)]

    def __getitem__(self, index: int) -> bytes:
        return bytes(self._rows[index])

    def __bytes__(self) -> bytes:
        return b"".join(bytes(row) for row in self._rows)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Block):
            return NotImplemented
        return bytes(self) == bytes(other)

    def __repr__(self) -> str:
        return f"Block({bytes(self)!r})"

    def visible(self) -> bytes:
        """The block's bytes with every zero byte left out."""
        return bytes(value for value in bytes(self) if value)

    def sub_bytes(self) -> None:
        self._rows = [bytearray(row.translate(SBOX)) for row in self._rows]

    def inv_sub_bytes(self) -> None:
        self._rows = [bytearray(row.translate(INV_SBOX)) for row in self._rows]

    def shift_rows(self) -> None:
        self._rows = [row[r:] + row[:r] for r, row in enumerate(self._rows)]

    def inv_shift_rows(self) -> None:
        self._rows = [row[4 - r:] + row[:4 - r] for r, row in enumerate(self._rows)]

    def _mix(self, matrix: tuple[tuple[int, ...], ...]) -> None:
        columns = list(zip(*self._rows))
        mixed = [
            [
                _dot(coefficients, column)
                for coefficients in matrix
            ]
            for column in columns
        ]
        self._rows = [bytearray(row) for row in zip(*mixed)]

    def mix_columns(self) -> None:
        self._mix(_MIX)

    def inv_mix_columns(self) -> None:
        self._mix(_INV_MIX)

    def add_round_key(self, round_key: Block) -> None:
        self._rows = [
            bytearray(a ^ b for a, b in zip(row, key_row))
            for row, key_row in zip(self._rows, round_key._rows)
        ]


def _dot(coefficients: tuple[int, ...], column: tuple[int, ...]) -> int:
    result = 0
    for coefficient, value in zip(coefficients, column):
        result ^= galois_multiply(coefficient, value)
    return result