"""
Little-endian word/byte conversion and 32-bit wrapping arithmetic.

ChaCha20 works on 32-bit unsigned words but the outside world speaks
bytes.  Everything here masks with 0xFFFFFFFF so Python's unbounded
ints behave like uint32.
"""

import struct

from .exceptions import OutOfRangeError

MASK32 = 0xFFFFFFFF

_WORD = struct.Struct("<I")


def _check_offset(buffer, offset: int):
    if offset < 0 or offset + _WORD.size > len(buffer):
        raise OutOfRangeError(
            f"Offset {offset} leaves no room for a 4-byte word "
            f"in a buffer of {len(buffer)} bytes"
        )


def u8_to_u32_little(buffer, offset: int = 0) -> int:
    """Read 4 bytes at *offset* as a little-endian uint32."""
    _check_offset(buffer, offset)
    return _WORD.unpack_from(buffer, offset)[0]


def u32_to_u8_little(word: int, buffer, offset: int = 0):
    """Write *word* as 4 little-endian bytes into *buffer* at *offset*."""
    _check_offset(buffer, offset)
    _WORD.pack_into(buffer, offset, word & MASK32)


def bytes_to_words_le(data) -> list[int]:
    if len(data) % _WORD.size:
        raise OutOfRangeError(
            f"Length must be a multiple of 4, got {len(data)}"
        )
    return [u8_to_u32_little(data, i) for i in range(0, len(data), 4)]


def words_to_bytes_le(words) -> bytes:
    return struct.pack(f"<{len(words)}I", *(w & MASK32 for w in words))


# ── uint32 arithmetic ────────────────────────────────────────────

def add_one32(v: int) -> int:
    return (v + 1) & MASK32

