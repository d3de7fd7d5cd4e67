from .crypto_engine import (
    ChaCha20Cipher, ReferenceChaCha20Cipher, CipherFactory,
    chacha20_block, quarter_round,
    ChaChaError, InvalidKeyLengthError, InvalidNonceLengthError,
    OutOfRangeError, DisposedError,
)

__all__ = [
    "ChaCha20Cipher", "ReferenceChaCha20Cipher", "CipherFactory",
    "chacha20_block", "quarter_round",
    "ChaChaError", "InvalidKeyLengthError", "InvalidNonceLengthError",
    "OutOfRangeError", "DisposedError",
]
