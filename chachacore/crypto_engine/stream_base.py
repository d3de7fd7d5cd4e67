"""
Abstract base class for the stream ciphers in ChaChaCore.

Both the pure-Python ChaCha20 and the OpenSSL-backed reference
implement this interface so the factory, the verification script and
the tests can treat them uniformly.

process() XORs keystream into a caller-supplied output buffer:
    output[0:num_bytes] = data[0:num_bytes] ^ keystream

encrypt() / decrypt() are convenience wrappers that allocate the
output buffer and return bytes.
"""

from abc import ABC, abstractmethod

from ..config.settings import Settings


class StreamCipher(ABC):
    """
    Unified interface for keyed keystream generators.

    Instances are stateful: every call continues the keystream where the
    previous one stopped.  They are not safe to share between threads
    without external locking.
    """

    @abstractmethod
    def process(self, output, data, num_bytes: int | None = None):
        """XOR *num_bytes* of *data* with keystream into *output*."""

    @abstractmethod
    def release(self):
        """Wipe key material; further use raises DisposedError."""

    @property
    @abstractmethod
    def is_released(self) -> bool:
        """True once release() has run."""

    @property
    @abstractmethod
    def cipher_name(self) -> str:
        """Registry name, e.g. 'CHACHA20'."""

    @property
    @abstractmethod
    def backend(self) -> str:
        """Where the keystream comes from, e.g. 'pure-python'."""

    # ── convenience ──────────────────────────────────────────────
    def encrypt(self, plaintext: bytes) -> bytes:
        out = bytearray(len(plaintext))
        self.process(out, plaintext, len(plaintext))
        return bytes(out)

    def decrypt(self, ciphertext: bytes) -> bytes:
        """Same operation as encrypt(); XOR is its own inverse."""
        return self.encrypt(ciphertext)

    def close(self):
        self.release()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.release()
        return False

    # ── metadata ─────────────────────────────────────────────────
    @property
    def key_size(self) -> int:
        return Settings.KEY_SIZE

    @property
    def iv_size(self) -> int:
        return Settings.NONCE_SIZE

    @property
    def block_size(self) -> int:
        return Settings.BLOCK_SIZE

    @property
    def key_size_bits(self) -> int:
        return self.key_size * 8

    def info(self) -> dict:
        """Return cipher metadata for reports."""
        return {
            "name":       self.cipher_name,
            "backend":    self.backend,
            "key_bits":   self.key_size_bits,
            "iv_bytes":   self.iv_size,
            "block_size": self.block_size,
            "released":   self.is_released,
        }
