"""
ChaCha20 backed by OpenSSL through the ``cryptography`` package.

Used as an independent reference to cross-check the pure-Python
keystream.  OpenSSL takes a 16-byte "nonce" that is really the
little-endian block counter followed by the 12-byte RFC 7539 nonce.

Unlike ChaCha20Cipher, OpenSSL keeps unused keystream between calls, so
splitting a stream at arbitrary byte boundaries gives the same output
as a single call.
"""

import logging

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms

from ..config.settings import Settings
from .exceptions import (
    DisposedError, InvalidKeyLengthError, InvalidNonceLengthError,
    OutOfRangeError,
)
from .stream_base import StreamCipher

logger = logging.getLogger("ChaChaCore.Reference")


class ReferenceChaCha20Cipher(StreamCipher):
    """OpenSSL ChaCha20 with the same constructor and process() contract."""

    KEY_SIZE   = Settings.KEY_SIZE
    NONCE_SIZE = Settings.NONCE_SIZE

    def __init__(self, key: bytes, nonce: bytes, counter: int = 0):
        self._encryptor = None
        if key is None:
            raise TypeError("ChaCha20 key must not be None")
        if len(key) != self.KEY_SIZE:
            raise InvalidKeyLengthError(
                f"ChaCha20 key must be 32 bytes, got {len(key)}"
            )
        if nonce is None:
            raise TypeError("ChaCha20 nonce must not be None")
        if len(nonce) != self.NONCE_SIZE:
            raise InvalidNonceLengthError(
                f"ChaCha20 nonce must be 12 bytes, got {len(nonce)}"
            )
        if (isinstance(counter, bool) or not isinstance(counter, int)
                or not 0 <= counter <= Settings.COUNTER_MAX):
            raise OutOfRangeError(
                f"ChaCha20 counter must be a 32-bit unsigned int, "
                f"got {counter!r}"
            )

        full_nonce = counter.to_bytes(4, "little") + bytes(nonce)
        algorithm  = algorithms.ChaCha20(bytes(key), full_nonce)
        self._encryptor = Cipher(algorithm, mode=None).encryptor()

        logger.debug("OpenSSL ChaCha20 ready (counter=%d)", counter)

    @property
    def is_released(self) -> bool:
        return self._encryptor is None

    @property
    def cipher_name(self) -> str:
        return "CHACHA20-OPENSSL"

    @property
    def backend(self) -> str:
        return "openssl"

    def process(self, output, data, num_bytes: int | None = None):
        if self._encryptor is None:
            raise DisposedError("The OpenSSL ChaCha20 context was released")
        if num_bytes is None:
            num_bytes = len(data)
        if (isinstance(num_bytes, bool) or not isinstance(num_bytes, int)
                or not 0 <= num_bytes <= len(data)):
            raise OutOfRangeError(
                f"num_bytes must be between 0 and {len(data)}, "
                f"got {num_bytes!r}"
            )
        if len(output) < num_bytes:
            raise OutOfRangeError(
                f"Output buffer holds {len(output)} bytes, "
                f"{num_bytes} needed"
            )
        out = memoryview(output)
        if out.readonly:
            raise TypeError("Output buffer must be writable")

        out[:num_bytes] = self._encryptor.update(bytes(data[:num_bytes]))

    def release(self):
        if self._encryptor is not None:
            self._encryptor.finalize()
            self._encryptor = None
            logger.debug("OpenSSL ChaCha20 context released")
