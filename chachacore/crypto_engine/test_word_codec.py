import pytest

from .exceptions import OutOfRangeError
from .word_codec import (
    add_one32, bytes_to_words_le,
    u8_to_u32_little, u32_to_u8_little, words_to_bytes_le,
)


def test_read_little_endian_word():
    assert u8_to_u32_little(b"\x00\x01\x02\x03") == 0x03020100
    assert u8_to_u32_little(b"\xff\x78\x56\x34\x12", 1) == 0x12345678


def test_write_little_endian_word():
    buf = bytearray(6)
    u32_to_u8_little(0xDEADBEEF, buf, 2)
    assert buf == bytearray(b"\x00\x00\xef\xbe\xad\xde")


def test_write_masks_to_32_bits():
    buf = bytearray(4)
    u32_to_u8_little(0x1_0000_0001, buf)
    assert buf == bytearray(b"\x01\x00\x00\x00")


@pytest.mark.parametrize("offset", [-1, 3, 8])
def test_read_out_of_bounds(offset):
    with pytest.raises(OutOfRangeError):
        u8_to_u32_little(bytes(6), offset)


@pytest.mark.parametrize("offset", [-1, 1, 4])
def test_write_out_of_bounds_leaves_buffer_alone(offset):
    buf = bytearray(4)
    with pytest.raises(OutOfRangeError):
        u32_to_u8_little(0xFFFFFFFF, buf, offset)
    assert buf == bytearray(4)


def test_bulk_conversion():
    assert bytes_to_words_le(b"expand 32-byte k") == [
        0x61707865, 0x3320646E, 0x79622D32, 0x6B206574,
    ]
    assert words_to_bytes_le([0x61707865, 0x3320646E]) == b"expand 3"


def test_bulk_conversion_rejects_ragged_length():
    with pytest.raises(OutOfRangeError):
        bytes_to_words_le(b"abcde")


def test_increment_wraps():
    assert add_one32(0xFFFFFFFF) == 0
