import pytest

from aesblocks.block import Block
from aesblocks.utils import SBOX

SAMPLE = bytes(range(16))
TEXT = b"Two One Nine Two"


def test_requires_sixteen_bytes():
    with pytest.raises(ValueError, match="16 bytes"):
        Block(b"short")
    with pytest.raises(ValueError):
        Block(bytes(17))


def test_rows_are_filled_in_order():
    block = Block(SAMPLE)
    assert block[0] == SAMPLE[0:4]
    assert block[3] == SAMPLE[12:16]
    assert bytes(block) == SAMPLE


def test_visible_drops_zero_bytes():
    block = Block(b"abc" + bytes(13))
    assert block.visible() == b"abc"
    assert bytes(block) == b"abc" + bytes(13)


def test_sub_bytes_uses_sbox():
    block = Block(SAMPLE)
    block.sub_bytes()
    assert bytes(block) == bytes(SBOX[value] for value in SAMPLE)


def test_sub_bytes_round_trip():
    block = Block(TEXT)
    block.sub_bytes()
    assert bytes(block) != TEXT
    block.inv_sub_bytes()
    assert bytes(block) == TEXT


def test_shift_rows_rotates_each_row_left_by_its_index():
    block = Block(SAMPLE)
    block.shift_rows()
    assert block[0] == SAMPLE[0:4]
    assert block[1] == SAMPLE[5:8] + SAMPLE[4:5]
    assert block[2] == SAMPLE[10:12] + SAMPLE[8:10]
    assert block[3] == SAMPLE[15:16] + SAMPLE[12:15]


def test_shift_rows_round_trip():
    block = Block(TEXT)
    block.shift_rows()
    block.inv_shift_rows()
    assert bytes(block) == TEXT


def test_mix_columns_known_column():
    data = bytearray(16)
    data[0], data[4], data[8], data[12] = 0xDB, 0x13, 0x53, 0x45
    block = Block(data)
    block.mix_columns()
    assert bytes(block[r][0] for r in range(4)) == bytes.fromhex("8e4da1bc")


def test_mix_columns_round_trip():
    block = Block(TEXT)
    block.mix_columns()
    assert bytes(block) != TEXT
    block.inv_mix_columns()
    assert bytes(block) == TEXT


def test_add_round_key_is_self_inverse():
    block = Block(TEXT)
    key = Block(SAMPLE)
    block.add_round_key(key)
    assert bytes(block) == bytes(a ^ b for a, b in zip(TEXT, SAMPLE))
    block.add_round_key(key)
    assert bytes(block) == TEXT


def test_equality_compares_contents():
    assert Block(TEXT) == Block(bytearray(TEXT))
    assert not (Block(TEXT) == Block(SAMPLE))