"""
ChaCha20 permutation — quarter round, double round and block function.

Pure functions over a 16-word state; no counter bookkeeping happens
here.  See RFC 7539 sections 2.1 – 2.3.

State layout:
    [0..3]   constants "expand 32-byte k"
    [4..11]  key
    [12]     block counter
    [13..15] nonce
"""

from ..config.settings import Settings
from .word_codec import MASK32, bytes_to_words_le, words_to_bytes_le

SIGMA = b"expand 32-byte k"
CONSTANTS = tuple(bytes_to_words_le(SIGMA))

COLUMN_ROUNDS = (
    (0, 4, 8, 12), (1, 5, 9, 13), (2, 6, 10, 14), (3, 7, 11, 15),
)
DIAGONAL_ROUNDS = (
    (0, 5, 10, 15), (1, 6, 11, 12), (2, 7, 8, 13), (3, 4, 9, 14),
)


def _check_state(x):
    if len(x) != Settings.STATE_WORDS:
        raise ValueError(
            f"ChaCha state must hold 16 words, got {len(x)}"
        )


def _quarter_round(x, a, b, c, d):
    xa, xb, xc, xd = x[a], x[b], x[c], x[d]

    xa = (xa + xb) & MASK32
    xd ^= xa
    xd = ((xd << 16) & MASK32) | (xd >> 16)

    xc = (xc + xd) & MASK32
    xb ^= xc
    xb = ((xb << 12) & MASK32) | (xb >> 20)

    xa = (xa + xb) & MASK32
    xd ^= xa
    xd = ((xd << 8) & MASK32) | (xd >> 24)

    xc = (xc + xd) & MASK32
    xb ^= xc
    xb = ((xb << 7) & MASK32) | (xb >> 25)

    x[a], x[b], x[c], x[d] = xa, xb, xc, xd


def quarter_round(x, a: int, b: int, c: int, d: int):
    """
    Apply the ChaCha quarter round to words *a, b, c, d* of *x* in place.

    a += b; d ^= a; d <<<= 16
    c += d; b ^= c; b <<<= 12
    a += b; d ^= a; d <<<= 8
    c += d; b ^= c; b <<<= 7
    """
    _check_state(x)
    _quarter_round(x, a, b, c, d)


def _double_round(x):
    for a, b, c, d in COLUMN_ROUNDS:
        _quarter_round(x, a, b, c, d)
    for a, b, c, d in DIAGONAL_ROUNDS:
        _quarter_round(x, a, b, c, d)


def double_round(x):
    """One column pass followed by one diagonal pass, in place."""
    _check_state(x)
    _double_round(x)


def chacha20_block(state) -> bytes:
    """
    Compute one 64-byte keystream block from a 16-word *state*.

    The input is left untouched: a working copy is mixed for 20 rounds,
    the original words are added back in, and the sums are serialised
    little-endian.
    """
    _check_state(state)
    x = list(state)
    for _ in range(Settings.ROUNDS // 2):
        _double_round(x)
    return words_to_bytes_le(
        [(w + s) & MASK32 for w, s in zip(x, state)]
    )
