"""
ChaChaCore crypto engine — ChaCha20 permutation, stream cipher and
reference backend.
"""

# ── Permutation primitives ──────────────────────────────────────
from .word_codec  import (
    u8_to_u32_little, u32_to_u8_little,
    bytes_to_words_le, words_to_bytes_le,
    add_one32,
)
from .chacha_core import (
    CONSTANTS, SIGMA, quarter_round, double_round, chacha20_block,
)

# ── Errors ──────────────────────────────────────────────────────
from .exceptions import (
    ChaChaError, InvalidKeyLengthError, InvalidNonceLengthError,
    OutOfRangeError, DisposedError,
)

# ── Stream ciphers ──────────────────────────────────────────────
from .stream_base      import StreamCipher
from .chacha_crypto    import ChaCha20Cipher
from .reference_crypto import ReferenceChaCha20Cipher
from .cipher_factory   import CipherFactory

__all__ = [
    # Primitives
    "u8_to_u32_little", "u32_to_u8_little",
    "bytes_to_words_le", "words_to_bytes_le",
    "add_one32",
    "CONSTANTS", "SIGMA", "quarter_round", "double_round",
    "chacha20_block",
    # Errors
    "ChaChaError", "InvalidKeyLengthError", "InvalidNonceLengthError",
    "OutOfRangeError", "DisposedError",
    # Ciphers
    "StreamCipher", "ChaCha20Cipher", "ReferenceChaCha20Cipher",
    "CipherFactory",
]
